import json

from .synthesizer import theme_from_params


def load_themes_from_json(json_path):
    """Load a bundle of named themes from JSON.

    Args:
        json_path: Path to a JSON array of theme param dicts

    Returns:
        list of Theme records, in file order
    """
    with open(json_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{json_path}: expected a list of themes")

    themes = []
    for index, params in enumerate(data):
        if not isinstance(params, dict):
            raise ValueError(f"{json_path}: theme #{index} is not an object")
        themes.append(theme_from_params(params))

    return themes


def merge_themes(available, incoming):
    """Append incoming themes whose title isn't already available."""
    titles = {theme.title for theme in available}
    merged = list(available)
    for theme in incoming:
        if theme.title in titles:
            continue
        titles.add(theme.title)
        merged.append(theme)
    return merged
