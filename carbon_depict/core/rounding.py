"""Integer rounding shared by the percentage and score engines."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (12.5 -> 13).

    The built-in round() rounds halves to even, which would make a
    disclosure at exactly 12.5% complete report 12.
    """
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def percentage(part: float, whole: float) -> int:
    """Whole-number percentage of part over whole; 0 when whole is 0."""
    if whole == 0:
        return 0
    return round_half_up(100 * part / whole)
