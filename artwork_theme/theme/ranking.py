from functools import cmp_to_key

from ..color import is_darker


def _ranked(colors, precedes):
    def compare(color1, color2):
        if precedes(color1, color2):
            return -1
        if precedes(color2, color1):
            return 1
        return 0

    # sorted() is stable, so equal-brightness colors keep their input order
    return sorted(colors, key=cmp_to_key(compare))


def light_sorted(colors):
    """Rank colors lightest first, for the light (default) variant."""
    return _ranked(colors, lambda c1, c2: is_darker(c2, c1))


def dark_sorted(colors):
    """Rank colors darkest first, for the dark variant."""
    return _ranked(colors, lambda c1, c2: is_darker(c1, c2))
