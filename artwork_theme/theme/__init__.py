from .loader import load_themes_from_json, merge_themes
from .model import Theme, ThemeColors, resolve_colors, role_hex, same_colors
from .presets import default_presets
from .synthesizer import (
    Default,
    FromImage,
    FromParams,
    create_theme,
    default_theme,
    theme_from_colors,
    theme_from_image,
    theme_from_params,
)

__all__ = [
    "Default",
    "FromImage",
    "FromParams",
    "Theme",
    "ThemeColors",
    "create_theme",
    "default_presets",
    "default_theme",
    "load_themes_from_json",
    "merge_themes",
    "resolve_colors",
    "role_hex",
    "same_colors",
    "theme_from_colors",
    "theme_from_image",
    "theme_from_params",
]
