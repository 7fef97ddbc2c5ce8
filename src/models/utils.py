"""Utility functions for working with toll policy models."""

from datetime import date, datetime, time
from typing import Optional, Union

from src.models.schema import FeeBand, FeeSchedule

SATURDAY = 5


def time_of_day(value: Union[datetime, time]) -> time:
    """Return the time-of-day part of a timestamp (times pass through)."""
    if isinstance(value, datetime):
        return value.time()
    return value


def is_weekend(day: Union[date, datetime]) -> bool:
    """Check whether a date falls on a Saturday or Sunday."""
    return day.weekday() >= SATURDAY


def find_applicable_band(schedule: FeeSchedule, value: Union[datetime, time]) -> Optional[FeeBand]:
    """Find the fee band containing a time of day.

    A band matches if start <= value < end, so an instant exactly on a
    boundary belongs to the band that starts there.

    Args:
        schedule: The fee schedule to search
        value: Time of day, or a timestamp whose time of day is used

    Returns:
        The matching FeeBand, or None if the time is outside every band.
    """
    moment = time_of_day(value)
    for band in schedule.bands:
        if band.contains(moment):
            return band
    return None
