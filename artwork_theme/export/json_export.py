import json

from ..theme.model import PARAM_KEYS


def theme_to_params(theme):
    """Convert a Theme to the param dict form accepted by theme_from_params."""
    data = {"title": theme.title}
    for field, key in PARAM_KEYS.items():
        value = getattr(theme, field)
        if value is not None:
            data[key] = value
    return data


def export_json(themes, filepath):
    """Export themes as a JSON array of param dicts.

    Args:
        themes: Theme records to write
        filepath: Output file path
    """
    data = [theme_to_params(theme) for theme in themes]

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
