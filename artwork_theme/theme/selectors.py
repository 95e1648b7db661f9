from ..color import (
    brightness,
    contrast_ratio,
    is_darker,
    overlay_black,
    overlay_white,
    saturation,
)

# Brightness bounds (HSL lightness, 0-1)
DARK_MAX_BRIGHTNESS = 0.3  # Dark backgrounds, light-variant text
LIGHT_MIN_BRIGHTNESS = 0.8  # Light backgrounds, dark-variant text

MIN_PRIMARY_CONTRAST = 13.0
MAX_BG_SATURATION = 0.5  # Only checked on the overlaid fallback


def _background_bright_enough(color, dark_variant):
    if dark_variant:
        return brightness(color) < DARK_MAX_BRIGHTNESS
    return brightness(color) > LIGHT_MIN_BRIGHTNESS


def get_background_color(colors, dark_variant):
    """Pick the background hex from a ranked candidate list.

    Returns None when neither a candidate nor the overlaid peak qualifies;
    the caller then uses the role's hard default.
    """
    color = next(
        (c for c in colors if _background_bright_enough(c, dark_variant)), None
    )
    if color is not None:
        return color.hex

    if not colors:
        return None

    # No candidate met the bound: push the peak color toward the extreme
    peak = colors[-1]
    overlaid = overlay_black(peak) if dark_variant else overlay_white(peak)

    if saturation(overlaid) < MAX_BG_SATURATION and _background_bright_enough(
        overlaid, dark_variant
    ):
        return overlaid.hex
    return None


def get_primary_color(colors, background, dark_variant):
    """Pick the text color hex, requiring strong contrast against background."""

    def qualifies(color):
        if contrast_ratio(color, background) <= MIN_PRIMARY_CONTRAST:
            return False
        if dark_variant:
            return brightness(color) > LIGHT_MIN_BRIGHTNESS
        return brightness(color) < DARK_MAX_BRIGHTNESS

    color = next((c for c in colors if qualifies(c)), None)
    if color is not None:
        return color.hex

    if not colors:
        return None

    peak = colors[-1]
    overlaid = overlay_white(peak) if dark_variant else overlay_black(peak)

    # NOTE: the fallback brightness bound is looser than, and points the
    # other way from, the primary bound above
    if dark_variant:
        bright_ok = brightness(overlaid) < LIGHT_MIN_BRIGHTNESS
    else:
        bright_ok = brightness(overlaid) > DARK_MAX_BRIGHTNESS

    if contrast_ratio(overlaid, background) > MIN_PRIMARY_CONTRAST and bright_ok:
        return overlaid.hex
    return None


def get_highlight_color(colors, background, primary):
    """Pick the accent hex among candidates darker than the background.

    Candidates are ranked by descending contrast against the chosen primary
    color; ties keep their ranked order.
    """
    candidates = [c for c in colors if is_darker(c, background)]
    if not candidates:
        return None

    candidates = sorted(
        candidates, key=lambda c: contrast_ratio(c, primary), reverse=True
    )
    return candidates[0].hex
