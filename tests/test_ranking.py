"""Tests for candidate ranking."""

from artwork_theme.color import color_from_hex
from artwork_theme.theme.ranking import dark_sorted, light_sorted


def _hexes(colors):
    return [c.hex for c in colors]


def test_light_sorted_puts_lightest_first():
    colors = [color_from_hex(h) for h in ("000000", "FFFFFF", "FF0000", "00FF00")]
    assert _hexes(light_sorted(colors)) == ["FFFFFF", "FF0000", "00FF00", "000000"]


def test_dark_sorted_puts_darkest_first():
    colors = [color_from_hex(h) for h in ("000000", "FFFFFF", "FF0000", "00FF00")]
    assert _hexes(dark_sorted(colors)) == ["000000", "FF0000", "00FF00", "FFFFFF"]


def test_equal_brightness_keeps_input_order():
    # All three share HSL lightness 0.5
    colors = [color_from_hex(h) for h in ("0000FF", "FF0000", "00FF00")]
    assert _hexes(light_sorted(colors)) == ["0000FF", "FF0000", "00FF00"]
    assert _hexes(dark_sorted(colors)) == ["0000FF", "FF0000", "00FF00"]


def test_ranking_is_repeatable_with_duplicates():
    colors = [color_from_hex(h) for h in ("808080", "FF0000", "808080", "202020", "00FF00")]
    assert light_sorted(colors) == light_sorted(colors)
    assert dark_sorted(colors) == dark_sorted(list(colors))


def test_ranking_does_not_mutate_input():
    colors = [color_from_hex(h) for h in ("000000", "FFFFFF")]
    light_sorted(colors)
    assert _hexes(colors) == ["000000", "FFFFFF"]
