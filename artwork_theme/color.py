import colorsys
from collections import namedtuple

# Share of the target color when nudging toward white/black
OVERLAY_RATIO = 0.35

Color = namedtuple("Color", ["hex", "rgb", "hsl", "luminance", "alpha"])


def rgb_to_hex(r, g, b):
    return f"{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(hex_color):
    """Parse RRGGBB, #RRGGBB or the 3-digit shorthand into an (r, g, b) tuple."""
    if not isinstance(hex_color, str):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    value = hex_color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    try:
        return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from None


def rgb_to_hsl(r, g, b):
    r, g, b = r / 255, g / 255, b / 255
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return (h * 360, s * 100, l * 100)


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def create_color(r, g, b, alpha=1.0):
    """Create a Color namedtuple with all representations"""
    r, g, b = max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b))
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsl=rgb_to_hsl(r, g, b),
        luminance=relative_luminance(r, g, b),
        alpha=max(0.0, min(1.0, alpha)),
    )


def color_from_hex(hex_color):
    return create_color(*hex_to_rgb(hex_color))


WHITE = create_color(255, 255, 255)
BLACK = create_color(0, 0, 0)


def brightness(color):
    """HSL lightness in [0, 1]."""
    return color.hsl[2] / 100


def saturation(color):
    """HSL saturation in [0, 1]."""
    return color.hsl[1] / 100


def is_darker(color1, color2):
    return brightness(color1) < brightness(color2)


def is_lighter(color1, color2):
    return brightness(color1) > brightness(color2)


def same_color(color1, color2):
    """Colors are the same when their hex strings match."""
    return color1.hex == color2.hex


def contrast_ratio(color1, color2):
    """WCAG contrast ratio between two colors, in [1, 21] regardless of order."""
    lighter = max(color1.luminance, color2.luminance)
    darker = min(color1.luminance, color2.luminance)
    return (lighter + 0.05) / (darker + 0.05)


def overlay(color1, color2, ratio):
    """Blend two colors per channel: color1 * ratio + color2 * (1 - ratio)."""
    ratio = max(0.0, min(1.0, ratio))
    r, g, b = (
        round(c1 * ratio + c2 * (1 - ratio))
        for c1, c2 in zip(color1.rgb, color2.rgb)
    )
    alpha = color1.alpha * ratio + color2.alpha * (1 - ratio)
    return create_color(r, g, b, alpha)


def overlay_white(color):
    return overlay(WHITE, color, OVERLAY_RATIO)


def overlay_black(color):
    return overlay(BLACK, color, OVERLAY_RATIO)


def with_alpha(color, alpha):
    return create_color(*color.rgb, alpha=alpha)
