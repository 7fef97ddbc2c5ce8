"""Request model for callers handing timestamps to the calculator."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from src.config.messages import ERROR_AWARE_TIMESTAMP
from src.models.schema import Vehicle


class FeeRequest(BaseModel):
    """One vehicle's entries into the toll zone.

    Attributes:
        vehicle_type: Vehicle type tag; None is an ordinary, chargeable vehicle
        timestamps: Entry timestamps as naive local date-times, any order
    """
    vehicle_type: Optional[str] = Field(None, description="Vehicle type tag")
    timestamps: List[datetime] = Field(default_factory=list, description="Entry timestamps")

    @field_validator("timestamps")
    @classmethod
    def check_naive(cls, timestamps: List[datetime]) -> List[datetime]:
        for value in timestamps:
            if value.tzinfo is not None:
                raise ValueError(ERROR_AWARE_TIMESTAMP.format(value=value.isoformat()))
        return timestamps

    @property
    def vehicle(self) -> Vehicle:
        return Vehicle(type=self.vehicle_type)
