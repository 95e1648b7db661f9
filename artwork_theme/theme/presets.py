from .synthesizer import theme_from_params

LIGHT_PRESET = {
    "title": "Light",
    "background": "FFFFFF",
    "primary": "242320",
    "secondary": "8F8E95",
    "accent": "3488D1",
}

DARK_PRESET = {
    "title": "Dark",
    "background": "1F262E",
    "primary": "FFFFFF",
    "secondary": "5F636B",
    "accent": "239EFF",
}


def _both_variants(preset):
    """Expand a single-variant preset into the full param dict."""
    params = {"title": preset["title"]}
    for role in ("background", "primary", "secondary", "accent"):
        params[f"default{role.title()}"] = preset[role]
        params[f"dark{role.title()}"] = preset[role]
    return params


def default_presets():
    """Built-in Light and Dark themes, in display order."""
    return [theme_from_params(_both_variants(p)) for p in (LIGHT_PRESET, DARK_PRESET)]
