"""Numeric helpers."""


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    The builtin round() sends halves to the even neighbour (round(2.5) == 2).
    """
    if value >= 0:
        return int(value + 0.5)
    return -int(-value + 0.5)
