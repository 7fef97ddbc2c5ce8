"""Toll Policy Schema - models for the deterministic toll fee calculation."""

from datetime import time
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from src.config.messages import (
    ERROR_EMPTY_BAND,
    ERROR_INVALID_DAY,
    ERROR_INVALID_MONTH_KEY,
    ERROR_OVERLAPPING_BANDS,
)


class TollFreeVehicle(str, Enum):
    """Vehicle types that never pay the toll.

    Matching is case-exact against the value, so "motorbike" is an
    ordinary, chargeable type.
    """
    MOTORBIKE = "Motorbike"
    TRACTOR = "Tractor"
    EMERGENCY = "Emergency"
    DIPLOMAT = "Diplomat"
    FOREIGN = "Foreign"
    MILITARY = "Military"


class Vehicle(BaseModel):
    """A vehicle as supplied by the caller; only its type tag matters here."""
    type: Optional[str] = Field(None, description="Vehicle type tag, e.g. 'Car' or 'Motorbike'")


class FeeBand(BaseModel):
    """A half-open time-of-day interval [start, end) and its fee.

    Attributes:
        start: First instant of the band (inclusive)
        end: First instant after the band (exclusive)
        fee: Fee charged for an entry inside the band
    """
    model_config = ConfigDict(frozen=True)

    start: time = Field(description="Start of the band (inclusive)")
    end: time = Field(description="End of the band (exclusive)")
    fee: int = Field(ge=0, description="Fee for an entry inside the band")

    @model_validator(mode="after")
    def check_interval(self) -> "FeeBand":
        if self.start >= self.end:
            raise ValueError(ERROR_EMPTY_BAND.format(start=self.start, end=self.end))
        return self

    def contains(self, time_of_day: time) -> bool:
        """Check whether a time of day falls inside this band."""
        return self.start <= time_of_day < self.end


class FeeSchedule(BaseModel):
    """Ordered, non-overlapping fee bands covering the toll hours of a day.

    Any time of day outside every band is free.
    """
    model_config = ConfigDict(frozen=True)

    bands: Tuple[FeeBand, ...] = Field(default_factory=tuple, description="Fee bands ordered by start time")

    @field_validator("bands")
    @classmethod
    def check_no_overlap(cls, bands: Tuple[FeeBand, ...]) -> Tuple[FeeBand, ...]:
        for previous, current in zip(bands, bands[1:]):
            if previous.end > current.start:
                raise ValueError(ERROR_OVERLAPPING_BANDS.format(previous=previous, current=current))
        return bands


class MonthRule(BaseModel):
    """Toll-free days of one calendar month.

    Attributes:
        exempt_days: Day-of-month numbers that are toll free
        whole_month: Whether every day of the month is toll free
    """
    model_config = ConfigDict(frozen=True)

    exempt_days: FrozenSet[int] = Field(default_factory=frozenset, description="Toll-free day-of-month numbers")
    whole_month: bool = Field(default=False, description="Whether the whole month is toll free")

    @field_validator("exempt_days")
    @classmethod
    def check_days(cls, days: FrozenSet[int]) -> FrozenSet[int]:
        for day in days:
            if not 1 <= day <= 31:
                raise ValueError(ERROR_INVALID_DAY.format(day=day))
        return days

    @field_serializer("exempt_days")
    def dump_days(self, days: FrozenSet[int]) -> List[int]:
        return sorted(days)


class TollFreeCalendar(BaseModel):
    """Toll-free dates: weekends plus a per-month table.

    A month missing from ``months`` is a configuration error that the
    date lookup reports and treats as having no toll-free days.
    """
    model_config = ConfigDict(frozen=True)

    weekend_toll_free: bool = Field(default=True, description="Saturdays and Sundays are toll free")
    months: Mapping[int, MonthRule] = Field(default_factory=dict, description="Month number (1-12) -> rule")

    @field_validator("months")
    @classmethod
    def check_months(cls, months: Mapping[int, MonthRule]) -> Mapping[int, MonthRule]:
        for month in months:
            if not 1 <= month <= 12:
                raise ValueError(ERROR_INVALID_MONTH_KEY.format(month=month))
        return MappingProxyType(dict(months))

    @field_serializer("months")
    def dump_months(self, months: Mapping[int, MonthRule]) -> Dict[int, MonthRule]:
        return dict(months)


class TollPolicy(BaseModel):
    """Complete, immutable toll policy.

    Attributes:
        version: Policy version/year label
        exempt_vehicle_types: Vehicle type tags that are never charged
        fee_schedule: Time-of-day fee bands
        calendar: Toll-free dates
        daily_fee_cap: Maximum charge for one completed day
        charge_window_minutes: Length of a charge window, measured from the
            entry that opened it
    """
    model_config = ConfigDict(frozen=True)

    version: str = Field(default="2023", description="Policy version/year")
    exempt_vehicle_types: FrozenSet[str] = Field(
        default_factory=lambda: frozenset(v.value for v in TollFreeVehicle),
        description="Vehicle type tags that are never charged"
    )
    fee_schedule: FeeSchedule = Field(description="Time-of-day fee bands")
    calendar: TollFreeCalendar = Field(description="Toll-free dates")
    daily_fee_cap: int = Field(default=60, ge=0, description="Maximum charge for one day")
    charge_window_minutes: int = Field(default=60, gt=0, description="Charge window length in minutes")

    @field_serializer("exempt_vehicle_types")
    def dump_vehicle_types(self, vehicle_types: FrozenSet[str]) -> List[str]:
        return sorted(vehicle_types)
