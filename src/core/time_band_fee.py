"""Time-of-day fee lookup."""

from datetime import datetime, time
from typing import Optional, Union

from src.models.defaults import DEFAULT_POLICY
from src.models.schema import FeeSchedule
from src.models.utils import find_applicable_band


def fee_at(time_of_day: Union[datetime, time], schedule: Optional[FeeSchedule] = None) -> int:
    """Return the fee for an entry at a given time of day.

    Args:
        time_of_day: Time of day, or a timestamp whose time of day is used
        schedule: Fee schedule; defaults to the built-in policy's schedule

    Returns:
        The fee of the band containing the time, 0 outside the toll hours.
    """
    if schedule is None:
        schedule = DEFAULT_POLICY.fee_schedule
    band = find_applicable_band(schedule, time_of_day)
    return band.fee if band else 0
