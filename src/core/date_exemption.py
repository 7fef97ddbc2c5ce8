"""Toll-free date lookup."""

from datetime import date, datetime
from typing import Optional, Union

from src.models.defaults import DEFAULT_POLICY
from src.models.schema import TollFreeCalendar
from src.models.utils import is_weekend
from src.config.messages import ERROR_UNKNOWN_MONTH
from src.config.logging_config import get_logger

logger = get_logger(__name__)


def is_toll_free_date(day: Union[date, datetime], calendar: Optional[TollFreeCalendar] = None) -> bool:
    """Check whether entries on a date are free of charge.

    Weekends are toll free when the calendar says so; otherwise the
    month's rule decides. A month with no rule is reported and treated
    as having no toll-free days, so the calculation continues.

    Args:
        day: The date (a timestamp's date part is used)
        calendar: Toll-free calendar; defaults to the built-in policy's

    Returns:
        True if the date is toll free.
    """
    if calendar is None:
        calendar = DEFAULT_POLICY.calendar

    if calendar.weekend_toll_free and is_weekend(day):
        return True

    rule = calendar.months.get(day.month)
    if rule is None:
        logger.error(ERROR_UNKNOWN_MONTH.format(month=day.month, day=day.isoformat()))
        return False

    return rule.whole_month or day.day in rule.exempt_days
