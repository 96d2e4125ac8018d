"""Unit tests for sleep duration calculation"""
import pytest

from dreamtrack.core.scoring.duration import calculate_sleep_duration


class TestCalculateSleepDuration:
    """Test clock time to hours conversion"""

    def test_overnight_sleep_wraps_midnight(self):
        """Test that a night crossing midnight adds 24 hours"""
        assert calculate_sleep_duration("23:00", "07:00") == 8.0

    def test_same_day_has_no_wraparound(self):
        """Test that a later wake time on the same day is a plain difference"""
        assert calculate_sleep_duration("07:00", "23:00") == 16.0

    def test_identical_times_are_zero(self):
        """Test that equal times give zero hours"""
        assert calculate_sleep_duration("00:00", "00:00") == 0.0

    def test_partial_hours(self):
        """Test minutes are converted to fractional hours"""
        assert calculate_sleep_duration("22:30", "06:45") == pytest.approx(8.25)

    def test_seconds_are_accepted(self):
        """Test HH:MM:SS input"""
        assert calculate_sleep_duration("23:15:30", "07:15:30") == 8.0

    def test_duration_never_negative(self):
        """Test wraparound keeps every result in [0, 24)"""
        for bed in ["00:00", "06:30", "12:00", "21:15", "23:59"]:
            for wake in ["00:00", "05:45", "12:00", "18:00", "23:59"]:
                duration = calculate_sleep_duration(bed, wake)
                assert 0 <= duration < 24

    def test_malformed_time_raises(self):
        """Test unparseable input surfaces the parser's ValueError"""
        with pytest.raises(ValueError):
            calculate_sleep_duration("late", "07:00")
