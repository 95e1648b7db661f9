"""
Accessible light/dark UI color themes synthesized from cover artwork.
"""

from .color import Color, color_from_hex, contrast_ratio, create_color
from .theme import (
    Default,
    FromImage,
    FromParams,
    Theme,
    create_theme,
    resolve_colors,
    theme_from_colors,
)

__all__ = [
    "Color",
    "Default",
    "FromImage",
    "FromParams",
    "Theme",
    "color_from_hex",
    "contrast_ratio",
    "create_color",
    "create_theme",
    "resolve_colors",
    "theme_from_colors",
]
