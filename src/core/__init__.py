"""Core business logic modules."""

from src.core.vehicle_exemption import is_toll_free_vehicle
from src.core.date_exemption import is_toll_free_date
from src.core.time_band_fee import fee_at
from src.core.policy_loader import PolicyLoader
from src.core.calculator import (
    TollCalculator,
    CalculationResult,
    EmptyChargeableInputError,
    total_fee,
)

__all__ = [
    "is_toll_free_vehicle",
    "is_toll_free_date",
    "fee_at",
    "PolicyLoader",
    "TollCalculator",
    "CalculationResult",
    "EmptyChargeableInputError",
    "total_fee",
]
