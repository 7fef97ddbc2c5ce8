"""Vehicle type exemption lookup."""

from typing import AbstractSet, Optional

from src.models.defaults import DEFAULT_POLICY


def is_toll_free_vehicle(
    vehicle_type: Optional[str],
    exempt_types: Optional[AbstractSet[str]] = None
) -> bool:
    """Check whether a vehicle type is exempt from the toll.

    Args:
        vehicle_type: Type tag of the vehicle. None or "" is an ordinary
            vehicle and therefore not exempt.
        exempt_types: Exempt type tags; defaults to the built-in policy's set.

    Returns:
        True iff the tag matches an exempt type exactly (case-sensitive).
    """
    if not vehicle_type:
        return False
    if exempt_types is None:
        exempt_types = DEFAULT_POLICY.exempt_vehicle_types
    return vehicle_type in exempt_types
