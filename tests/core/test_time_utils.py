"""
Test suite for scheduling time helpers.

System role: Verification of time parsing and display formatting
"""

from datetime import date, time

import pytest

from tutorschool.core.exceptions import ValidationError
from tutorschool.core.scheduling.time_utils import (
    day_name,
    format_time_for_display,
    format_time_range,
    minutes_to_time,
    parse_time,
    time_to_minutes,
)


class TestParseTime:
    """Test suite for parse_time()."""

    def test_parse_time_should_accept_hh_mm(self) -> None:
        assert parse_time("09:30") == time(9, 30)

    def test_parse_time_should_drop_seconds(self) -> None:
        assert parse_time("09:30:45") == time(9, 30)
        assert parse_time(time(9, 30, 45)) == time(9, 30)

    @pytest.mark.parametrize("value", ["", "930", "9h30", "ab:cd", "10:00 AM"])
    def test_parse_time_should_reject_malformed_strings(self, value: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            parse_time(value)

        assert exc_info.value.details["field"] == "start_time"

    @pytest.mark.parametrize("value", ["24:00", "12:60", "99:99"])
    def test_parse_time_should_reject_out_of_range_values(self, value: str) -> None:
        with pytest.raises(ValidationError):
            parse_time(value)


class TestMinuteConversion:
    """Test suite for minutes since midnight conversions."""

    def test_time_to_minutes(self) -> None:
        assert time_to_minutes("00:00") == 0
        assert time_to_minutes("10:30") == 630
        assert time_to_minutes(time(23, 59)) == 1439

    def test_minutes_to_time_pads_values(self) -> None:
        assert minutes_to_time(65) == "01:05"

    def test_minutes_to_time_wraps_past_midnight(self) -> None:
        assert minutes_to_time(1470) == "00:30"


class TestDisplayFormatting:
    """Test suite for 12-hour display helpers."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("00:00", "12:00 AM"),
            ("09:05", "9:05 AM"),
            ("12:00", "12:00 PM"),
            ("14:05", "2:05 PM"),
            (time(23, 30), "11:30 PM"),
            (630, "10:30 AM"),
        ],
    )
    def test_format_time_for_display(self, value, expected: str) -> None:
        assert format_time_for_display(value) == expected

    def test_format_time_range(self) -> None:
        assert format_time_range(600, 660) == "10:00 AM - 11:00 AM"

    def test_day_name(self) -> None:
        assert day_name(date(2024, 5, 6)) == "Monday"
