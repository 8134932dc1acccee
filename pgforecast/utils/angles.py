"""Circular direction utilities."""
from pgforecast.config import COMPASS_POINTS, COMPASS_SECTOR_DEG
from pgforecast.utils.numbers import round_half_away


def degrees_to_compass(degrees: float) -> str:
    """Convert a direction in degrees to a 16-point compass label.

    Any real input is accepted; negative and >360 values wrap.
    """
    idx = round_half_away(degrees / COMPASS_SECTOR_DEG) % len(COMPASS_POINTS)
    return COMPASS_POINTS[idx]


def angle_diff(a: float, b: float) -> float:
    """Smallest angle between two directions, in [0, 180]."""
    diff = abs(a - b)
    if diff > 180:
        diff = 360 - diff
    return diff


def in_range(direction: float, range_min: int, range_max: int) -> bool:
    """
    Check whether a direction lies within an inclusive range of directions.

    Args:
        direction: Direction in degrees, truncated to a whole degree
        range_min: Start of the range
        range_max: End of the range; the range wraps through north when
            range_min > range_max

    Returns:
        True if the direction is inside the range
    """
    d = int(direction) % 360
    if range_min <= range_max:
        return range_min <= d <= range_max
    return d >= range_min or d <= range_max


def distance_from_range(direction: float, range_min: int, range_max: int) -> float:
    """Angular distance from a direction to the nearest edge of a range (0 inside)."""
    if in_range(direction, range_min, range_max):
        return 0.0
    return min(angle_diff(direction, range_min), angle_diff(direction, range_max))
