"""Data models for the toll fee system."""

from src.models.schema import (
    TollFreeVehicle,
    Vehicle,
    FeeBand,
    FeeSchedule,
    MonthRule,
    TollFreeCalendar,
    TollPolicy,
)
from src.models.request_models import FeeRequest
from src.models.defaults import DEFAULT_POLICY, build_default_policy

__all__ = [
    # Policy models
    "TollFreeVehicle",
    "Vehicle",
    "FeeBand",
    "FeeSchedule",
    "MonthRule",
    "TollFreeCalendar",
    "TollPolicy",
    # Request models
    "FeeRequest",
    # Built-in policy
    "DEFAULT_POLICY",
    "build_default_policy",
]
