"""Deterministic toll fee calculator."""

from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional, Tuple, Union

from src.core.date_exemption import is_toll_free_date
from src.core.policy_loader import PolicyLoader
from src.core.time_band_fee import fee_at
from src.core.vehicle_exemption import is_toll_free_vehicle
from src.models.schema import TollPolicy, Vehicle
from src.config.settings import Settings, get_settings
from src.config.messages import (
    ERROR_EMPTY_CHARGEABLE_INPUT,
    LOG_EMPTY_CHARGEABLE_ZERO,
    LOG_EXEMPT_VEHICLE,
)
from src.config.logging_config import get_logger

logger = get_logger(__name__)

VehicleLike = Union[Vehicle, str, None]


class EmptyChargeableInputError(ValueError):
    """No timestamp is left to charge after dropping toll-free dates and times."""


class CalculationResult:
    """Result of a toll fee calculation.

    Attributes:
        total: Total fee
        days: Date -> amount that day added to the total
        breakdown: Per-day details (window fees and the amount added)
        exempt: Whether the vehicle type is toll free
        chargeable_entries: Number of entries that survived filtering
    """

    def __init__(self):
        """Initialize an empty calculation result."""
        self.total: int = 0
        self.days: Dict[date, int] = {}
        self.breakdown: List[Dict] = []
        self.exempt: bool = False
        self.chargeable_entries: int = 0

    def add_day(self, day: date, fee: int, window_fees: List[int]):
        """Add one day's charge to the result.

        Args:
            day: The calendar day
            fee: Amount the day adds to the total
            window_fees: Fee charged for each charge window of the day, in order
        """
        self.days[day] = self.days.get(day, 0) + fee
        self.total += fee
        self.breakdown.append({
            "date": day.isoformat(),
            "fee": fee,
            "window_fees": list(window_fees),
        })

    def to_dict(self) -> Dict:
        """Convert calculation result to dictionary format.

        Returns:
            Dictionary with keys total, days (ISO date -> fee), breakdown,
            exempt and chargeable_entries
        """
        return {
            "total": self.total,
            "days": {day.isoformat(): fee for day, fee in self.days.items()},
            "breakdown": self.breakdown,
            "exempt": self.exempt,
            "chargeable_entries": self.chargeable_entries,
        }


def _vehicle_type(vehicle: VehicleLike) -> Optional[str]:
    if isinstance(vehicle, Vehicle):
        return vehicle.type
    return vehicle


class TollCalculator:
    """Daily toll fee calculator for one vehicle.

    Entries on the same day are grouped into charge windows. A window
    opens at the first entry not covered by the previous one and lasts
    charge_window_minutes; only the highest fee inside it is charged.
    Window charges add up per day, a completed day is capped at
    daily_fee_cap, and days add up to the total.

    The last day is folded in according to the final_day_fold setting.
    With "legacy" (the default) the total receives the last entry's fee
    plus the day's closed windows, without the cap. With "capped" the
    last day is treated like every other day.
    """

    def __init__(self, policy: Optional[TollPolicy] = None, settings: Optional[Settings] = None):
        """
        Initialize calculator.

        Args:
            policy: TollPolicy (if None, loads the policy these settings name)
            settings: Settings (if None, uses the global settings)
        """
        self.settings = settings if settings is not None else get_settings()
        self.policy = policy if policy is not None else PolicyLoader.load_default(self.settings)

    def get_toll_fee(self, vehicle: VehicleLike, timestamps: Iterable[datetime]) -> int:
        """Calculate the total toll fee for a vehicle's entries.

        Args:
            vehicle: Vehicle, bare type tag, or None (an ordinary vehicle)
            timestamps: Entry timestamps in any order

        Returns:
            Total fee

        Raises:
            EmptyChargeableInputError: If no entry is chargeable and the
                empty_chargeable_policy setting is "raise"
        """
        return self.calculate(vehicle, timestamps).total

    def calculate(self, vehicle: VehicleLike, timestamps: Iterable[datetime]) -> CalculationResult:
        """Calculate the toll fee with a per-day breakdown.

        See get_toll_fee() for arguments and errors. The caller's
        timestamps are not reordered.
        """
        result = CalculationResult()

        vehicle_type = _vehicle_type(vehicle)
        if is_toll_free_vehicle(vehicle_type, self.policy.exempt_vehicle_types):
            logger.debug(LOG_EXEMPT_VEHICLE, vehicle_type)
            result.exempt = True
            return result

        entries = sorted(timestamps)
        chargeable = self._chargeable(entries)
        result.chargeable_entries = len(chargeable)

        if not chargeable:
            if self.settings.empty_chargeable_policy == "zero":
                logger.info(LOG_EMPTY_CHARGEABLE_ZERO, len(entries))
                return result
            raise EmptyChargeableInputError(ERROR_EMPTY_CHARGEABLE_INPUT)

        cap = self.policy.daily_fee_cap
        window_length = timedelta(minutes=self.policy.charge_window_minutes)

        window_start = chargeable[0][0]
        window_fee = 0
        day_fee = 0
        day_windows: List[int] = []
        current_fee = 0

        for entry, current_fee in chargeable:
            if entry.date() == window_start.date():
                if entry < window_start + window_length:
                    window_fee = max(window_fee, current_fee)
                else:
                    day_fee += window_fee
                    day_windows.append(window_fee)
                    window_fee = current_fee
                    window_start = entry
            else:
                day_windows.append(window_fee)
                result.add_day(window_start.date(), min(day_fee + window_fee, cap), day_windows)
                day_fee = 0
                day_windows = []
                window_fee = current_fee
                window_start = entry

        if self.settings.final_day_fold == "capped":
            day_windows.append(window_fee)
            result.add_day(window_start.date(), min(day_fee + window_fee, cap), day_windows)
        else:
            day_windows.append(current_fee)
            result.add_day(window_start.date(), day_fee + current_fee, day_windows)

        logger.debug(f"Toll fee for {vehicle_type}: {result.total} over {len(result.days)} day(s)")
        return result

    def _chargeable(self, entries: List[datetime]) -> List[Tuple[datetime, int]]:
        """Drop entries on toll-free dates or outside the toll hours.

        Returns:
            (timestamp, fee) pairs in input order
        """
        chargeable = []
        for entry in entries:
            if is_toll_free_date(entry, self.policy.calendar):
                continue
            fee = fee_at(entry, self.policy.fee_schedule)
            if fee == 0:
                continue
            chargeable.append((entry, fee))
        return chargeable


def total_fee(vehicle: VehicleLike, timestamps: Iterable[datetime]) -> int:
    """Total toll fee using the configured policy and settings."""
    return TollCalculator().get_toll_fee(vehicle, timestamps)
