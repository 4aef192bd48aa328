"""Validation utilities."""

import datetime
import math

SLEEP_HOURS_MIN = 4.0
SLEEP_HOURS_MAX = 12.0
SLEEP_HOURS_STEP = 0.5

COFFEE_CUPS_MIN = 1
COFFEE_CUPS_MAX = 20


def validate_volume(volume: float) -> float:
    """Validate and clamp volume to [0.0, 1.0]."""
    if volume < 0.0:
        return 0.0
    if volume > 1.0:
        return 1.0
    return volume


def validate_sleep_hours(hours: float) -> float:
    """
    Validate a desired sleep amount.

    Args:
        hours: Hours of sleep, in [4, 12] on a 0.5 grid.

    Returns:
        The value as float.

    Raises:
        ValueError: If out of range or off the 0.5 grid.
    """
    hours = float(hours)
    if not SLEEP_HOURS_MIN <= hours <= SLEEP_HOURS_MAX:
        raise ValueError(
            f"Sleep hours must be between {SLEEP_HOURS_MIN:g} and "
            f"{SLEEP_HOURS_MAX:g}, got {hours:g}"
        )
    if (hours / SLEEP_HOURS_STEP) != int(hours / SLEEP_HOURS_STEP):
        raise ValueError(f"Sleep hours must be a multiple of {SLEEP_HOURS_STEP}, got {hours:g}")
    return hours


def validate_coffee_cups(cups: int) -> int:
    """Validate daily coffee intake, an integer in [1, 20]."""
    if (
        isinstance(cups, bool)
        or (isinstance(cups, float) and not math.isfinite(cups))
        or int(cups) != cups
    ):
        raise ValueError(f"Coffee cups must be a whole number, got {cups!r}")
    cups = int(cups)
    if not COFFEE_CUPS_MIN <= cups <= COFFEE_CUPS_MAX:
        raise ValueError(
            f"Coffee cups must be between {COFFEE_CUPS_MIN} and {COFFEE_CUPS_MAX}, got {cups}"
        )
    return cups


def validate_wake_time(value) -> datetime.time:
    """
    Return the time of day to wake up.

    A full datetime is reduced to its time of day.

    Raises:
        ValueError: If value is neither a time nor a datetime.
    """
    if isinstance(value, datetime.datetime):
        return value.time()
    if isinstance(value, datetime.time):
        return value
    raise ValueError(f"Wake time must be a time of day, got {type(value).__name__}")
