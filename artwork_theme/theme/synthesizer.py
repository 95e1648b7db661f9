"""
Theme synthesis from artwork colors.

Three construction paths feed create_theme():

    FromParams  explicit hex values, no selection
    FromImage   colors quantized from cover artwork
    Default     the built-in fallback colors

Synthesis never raises: collaborator failures fall back to the default
construction and unmet selector constraints fall back to per-role defaults.
"""

import logging
import numbers
from collections import namedtuple

from ..color import (
    BLACK,
    WHITE,
    color_from_hex,
    contrast_ratio,
    hex_to_rgb,
    overlay_black,
    overlay_white,
    rgb_to_hex,
    same_color,
)
from .model import PARAM_KEYS, Theme
from .ranking import dark_sorted, light_sorted
from .selectors import get_background_color, get_highlight_color, get_primary_color

logger = logging.getLogger(__name__)

DARKNESS_THRESHOLD = 0.2  # Average luminance below this displays on dark
# W3C recommends 4.5 or 7 (strict); 3.0 is enough for artwork-derived colors
MINIMUM_CONTRAST_RATIO = 3.0
CANDIDATE_COUNT = 4

# Candidate list used when there are no colors at all
DEFAULT_CANDIDATES = ("FFFFFF", "37454E", "3488D1", "7685B3")

# Per-role fallbacks when a selector finds nothing
DEFAULT_DARK_BACKGROUND = "050505"
DEFAULT_LIGHT_BACKGROUND = "FAFAFA"
DEFAULT_DARK_PRIMARY = "EEEEEE"
DEFAULT_LIGHT_PRIMARY = "111111"
DEFAULT_ACCENT = "7685B3"


class ArtworkColorsError(Exception):
    """Raised when the artwork collaborators give nothing usable."""


FromParams = namedtuple("FromParams", ["params"])
FromImage = namedtuple(
    "FromImage",
    [
        "image",
        "title",
        "darkness_threshold",
        "minimum_contrast_ratio",
        "extract_colors",
        "average_luminance",
    ],
    defaults=(None, DARKNESS_THRESHOLD, MINIMUM_CONTRAST_RATIO, None, None),
)
Default = namedtuple("Default", ["title"], defaults=(None,))


def _normalize_hex(value):
    if value is None:
        return None
    return rgb_to_hex(*hex_to_rgb(value))


def theme_from_params(params):
    """Build a theme straight from named hex values.

    Missing keys leave the role as None; filling every role is up to the caller.
    """
    values = {field: _normalize_hex(params.get(key)) for field, key in PARAM_KEYS.items()}
    return Theme(title=params.get("title"), **values)


def assign_colors(colors=(), title=None, display_on_dark=False):
    """Run the selectors over a candidate list and return the resulting Theme.

    Args:
        colors: Candidate Colors, in any order
        title: Theme title
        display_on_dark: Decides the padding placeholder for short lists

    Returns:
        Theme with all eight roles populated
    """
    candidates = list(colors)

    if not candidates:
        candidates = [color_from_hex(h) for h in DEFAULT_CANDIDATES]
    elif len(candidates) < CANDIDATE_COUNT:
        placeholder = WHITE if display_on_dark else BLACK
        candidates += [placeholder] * (CANDIDATE_COUNT - len(candidates))

    by_light = light_sorted(candidates)
    by_dark = dark_sorted(candidates)

    # === BACKGROUND ===
    dark_background = get_background_color(by_dark, dark_variant=True) or DEFAULT_DARK_BACKGROUND
    default_background = (
        get_background_color(by_light, dark_variant=False) or DEFAULT_LIGHT_BACKGROUND
    )

    # === PRIMARY ===
    dark_primary = (
        get_primary_color(by_dark, color_from_hex(dark_background), dark_variant=True)
        or DEFAULT_DARK_PRIMARY
    )
    default_primary = (
        get_primary_color(by_light, color_from_hex(default_background), dark_variant=False)
        or DEFAULT_LIGHT_PRIMARY
    )

    # === ACCENT ===
    dark_accent = (
        get_highlight_color(
            by_dark, color_from_hex(dark_background), color_from_hex(dark_primary)
        )
        or DEFAULT_ACCENT
    )
    default_accent = (
        get_highlight_color(
            by_light, color_from_hex(default_background), color_from_hex(default_primary)
        )
        or DEFAULT_ACCENT
    )

    # === SECONDARY ===
    default_secondary = overlay_black(color_from_hex(default_primary)).hex
    dark_secondary = overlay_white(color_from_hex(dark_primary)).hex

    return Theme(
        title=title,
        default_background=default_background,
        default_primary=default_primary,
        default_secondary=default_secondary,
        default_accent=default_accent,
        dark_background=dark_background,
        dark_primary=dark_primary,
        dark_secondary=dark_secondary,
        dark_accent=dark_accent,
    )


def default_theme(title=None):
    return assign_colors(title=title)


def theme_from_colors(
    colors,
    title=None,
    display_on_dark=False,
    minimum_contrast_ratio=MINIMUM_CONTRAST_RATIO,
):
    """Synthesize a theme from already extracted artwork colors.

    Colors that lack contrast against the reference background (the first
    color in display order) are pushed toward white or black before selection.
    """
    if not colors:
        return assign_colors(title=title, display_on_dark=display_on_dark)

    ranked = dark_sorted(colors) if display_on_dark else light_sorted(colors)
    reference = ranked[0]

    adjusted = []
    for color in ranked:
        if (
            contrast_ratio(color, reference) >= minimum_contrast_ratio
            or same_color(color, reference)
        ):
            adjusted.append(color)
        elif display_on_dark:
            adjusted.append(overlay_white(color))
        else:
            adjusted.append(overlay_black(color))

    return assign_colors(adjusted, title=title, display_on_dark=display_on_dark)


def _distinct(colors):
    """Drop repeated hexes, keeping first occurrences."""
    seen = set()
    distinct = []
    for color in colors:
        if color.hex not in seen:
            seen.add(color.hex)
            distinct.append(color)
    return distinct


def theme_from_image(
    image,
    title=None,
    darkness_threshold=DARKNESS_THRESHOLD,
    minimum_contrast_ratio=MINIMUM_CONTRAST_RATIO,
    extract_colors=None,
    average_luminance=None,
):
    """Synthesize a theme from cover artwork.

    Args:
        image: Anything the collaborators accept (path or PIL image by default)
        title: Theme title
        darkness_threshold: Average luminance below which artwork displays on dark
        minimum_contrast_ratio: Contrast every candidate needs against the reference background
        extract_colors: Callable (image, count) -> list of Colors
        average_luminance: Callable (image) -> float in [0, 1]

    Returns:
        Theme; the default theme if either collaborator fails
    """
    if extract_colors is None or average_luminance is None:
        from .. import extract

        extract_colors = extract_colors or extract.extract_colors
        average_luminance = average_luminance or extract.average_luminance

    try:
        colors = _distinct(extract_colors(image, CANDIDATE_COUNT))[:CANDIDATE_COUNT]
        if not colors:
            raise ArtworkColorsError("no colors extracted")

        luminance = average_luminance(image)
        if not isinstance(luminance, numbers.Real):
            raise ArtworkColorsError(f"average color failed: {luminance!r}")

        display_on_dark = luminance < darkness_threshold
        return theme_from_colors(
            colors,
            title=title,
            display_on_dark=display_on_dark,
            minimum_contrast_ratio=minimum_contrast_ratio,
        )
    except Exception as e:
        logger.debug("Artwork colors unavailable (%s), using default theme", e, exc_info=True)
        return default_theme(title)


def create_theme(source):
    """Build a Theme from a FromParams, FromImage or Default source."""
    if isinstance(source, FromParams):
        return theme_from_params(source.params)
    if isinstance(source, FromImage):
        return theme_from_image(
            source.image,
            title=source.title,
            darkness_threshold=source.darkness_threshold,
            minimum_contrast_ratio=source.minimum_contrast_ratio,
            extract_colors=source.extract_colors,
            average_luminance=source.average_luminance,
        )
    if isinstance(source, Default):
        return default_theme(source.title)
    raise TypeError(f"Unsupported theme source: {type(source).__name__}")
