from collections import namedtuple

from ..color import color_from_hex, overlay, with_alpha

VARIANTS = ("light", "dark")

ROLES = ("background", "primary", "secondary", "accent")

Theme = namedtuple(
    "Theme",
    [
        "title",
        "default_background",
        "default_primary",
        "default_secondary",
        "default_accent",
        "dark_background",
        "dark_primary",
        "dark_secondary",
        "dark_accent",
    ],
)

# Param-dict keys, in the camelCase form theme bundles are stored with
PARAM_KEYS = {
    "default_background": "defaultBackground",
    "default_primary": "defaultPrimary",
    "default_secondary": "defaultSecondary",
    "default_accent": "defaultAccent",
    "dark_background": "darkBackground",
    "dark_primary": "darkPrimary",
    "dark_secondary": "darkSecondary",
    "dark_accent": "darkAccent",
}

ThemeColors = namedtuple(
    "ThemeColors",
    [
        "background",
        "primary",
        "secondary",
        "accent",
        "light_highlight",
        "import_background",
        "separator",
        "settings_background",
        "pie_fill",
        "pie_border",
        "pie_background",
        "highlighted_pie_fill",
        "highlighted_pie_border",
        "highlighted_pie_background",
        "navigation_title",
    ],
)


def role_hex(theme, role, variant):
    """Return the stored hex for a role in the given variant."""
    if variant not in VARIANTS:
        raise ValueError(f"Unknown variant {variant!r}, expected one of {VARIANTS}")
    if role not in ROLES:
        raise ValueError(f"Unknown role {role!r}, expected one of {ROLES}")
    prefix = "dark" if variant == "dark" else "default"
    return getattr(theme, f"{prefix}_{role}")


def same_colors(theme1, theme2):
    """Compare the default-variant roles of two themes."""
    return all(
        role_hex(theme1, role, "light") == role_hex(theme2, role, "light")
        for role in ROLES
    )


def resolve_colors(theme, variant="light"):
    """Resolve the active colors of a theme for a variant.

    Args:
        theme: The Theme record
        variant: "light" or "dark"

    Returns:
        ThemeColors with the four roles plus the UI colors derived from them
    """
    hexes = [role_hex(theme, role, variant) for role in ROLES]
    for role, value in zip(ROLES, hexes):
        if value is None:
            raise ValueError(f"Theme {theme.title!r} has no {variant} {role} color")
    background, primary, secondary, accent = (color_from_hex(h) for h in hexes)

    return ThemeColors(
        background=background,
        primary=primary,
        secondary=secondary,
        accent=accent,
        light_highlight=with_alpha(accent, 0.3),
        # Tints: the ratio is the background's share of the blend
        import_background=overlay(background, secondary, 0.83),
        separator=overlay(background, secondary, 0.51),
        settings_background=overlay(
            background, overlay(accent, secondary, 0.17), 0.88
        ),
        pie_fill=overlay(background, secondary, 0.27),
        pie_border=overlay(background, secondary, 0.51),
        pie_background=overlay(background, secondary, 0.90),
        highlighted_pie_fill=overlay(background, accent, 0.27),
        highlighted_pie_border=overlay(background, accent, 0.51),
        highlighted_pie_background=overlay(background, accent, 0.90),
        navigation_title=overlay(background, overlay(accent, primary, 0.12), 0.11),
    )
