"""Unit tests for toll policy model utility functions."""

from datetime import date, datetime, time

from src.models.defaults import DEFAULT_POLICY
from src.models.schema import FeeBand, FeeSchedule
from src.models.utils import find_applicable_band, is_weekend, time_of_day


class TestFindApplicableBand:
    """Test band lookup."""

    def test_boundary_belongs_to_starting_band(self):
        """Test a time exactly on a boundary matches the band starting there."""
        band = find_applicable_band(DEFAULT_POLICY.fee_schedule, time(7, 0))
        assert band.start == time(7, 0)
        assert band.fee == 22

    def test_outside_schedule(self):
        """Test times outside every band match nothing."""
        assert find_applicable_band(DEFAULT_POLICY.fee_schedule, time(3, 0)) is None
        assert find_applicable_band(DEFAULT_POLICY.fee_schedule, time(18, 30)) is None

    def test_gap_between_bands(self):
        """Test a gap in a custom schedule matches nothing."""
        schedule = FeeSchedule(bands=[
            FeeBand(start=time(8, 0), end=time(9, 0), fee=5),
            FeeBand(start=time(10, 0), end=time(11, 0), fee=7),
        ])
        assert find_applicable_band(schedule, time(9, 30)) is None
        assert find_applicable_band(schedule, time(10, 0)).fee == 7

    def test_empty_schedule(self):
        """Test an empty schedule matches nothing."""
        assert find_applicable_band(FeeSchedule(), time(8, 0)) is None


class TestHelpers:
    """Test small date and time helpers."""

    def test_time_of_day(self):
        """Test extracting the time of day."""
        assert time_of_day(datetime(2023, 2, 1, 7, 15)) == time(7, 15)
        assert time_of_day(time(7, 15)) == time(7, 15)

    def test_is_weekend(self):
        """Test weekend detection."""
        assert is_weekend(date(2023, 2, 4)) is True
        assert is_weekend(date(2023, 2, 5)) is True
        assert is_weekend(date(2023, 2, 6)) is False
        assert is_weekend(datetime(2023, 2, 3, 23, 59)) is False
