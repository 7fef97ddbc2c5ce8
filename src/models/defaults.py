"""Built-in 2023 toll policy tables.

The tables are plain data; build_default_policy() turns them into a frozen
TollPolicy once, at import, and DEFAULT_POLICY is shared by every caller.
"""

from datetime import time

from src.models.schema import (
    FeeBand,
    FeeSchedule,
    MonthRule,
    TollFreeCalendar,
    TollFreeVehicle,
    TollPolicy,
)

# (start, end, fee), end exclusive
FEE_BANDS = [
    (time(6, 0), time(6, 30), 9),
    (time(6, 30), time(7, 0), 16),
    (time(7, 0), time(8, 0), 22),
    (time(8, 0), time(8, 30), 16),
    (time(8, 30), time(15, 0), 9),
    (time(15, 0), time(15, 30), 16),
    (time(15, 30), time(17, 0), 22),
    (time(17, 0), time(18, 0), 16),
    (time(18, 0), time(18, 30), 9),
]

# month -> toll-free days; None marks a whole toll-free month
TOLL_FREE_DAYS = {
    1: [5, 6],
    2: [],
    3: [],
    4: [6, 7, 10],
    5: [1, 17, 18],
    6: [5, 6, 23],
    7: None,
    8: [],
    9: [],
    10: [],
    11: [3],
    12: [25, 26],
}

DAILY_FEE_CAP = 60
CHARGE_WINDOW_MINUTES = 60


def build_default_policy(version: str = "2023") -> TollPolicy:
    """Build the built-in policy from the tables above."""
    months = {
        month: MonthRule(whole_month=True) if days is None else MonthRule(exempt_days=days)
        for month, days in TOLL_FREE_DAYS.items()
    }
    return TollPolicy(
        version=version,
        exempt_vehicle_types=frozenset(v.value for v in TollFreeVehicle),
        fee_schedule=FeeSchedule(
            bands=[FeeBand(start=start, end=end, fee=fee) for start, end, fee in FEE_BANDS]
        ),
        calendar=TollFreeCalendar(weekend_toll_free=True, months=months),
        daily_fee_cap=DAILY_FEE_CAP,
        charge_window_minutes=CHARGE_WINDOW_MINUTES,
    )


DEFAULT_POLICY = build_default_policy()
