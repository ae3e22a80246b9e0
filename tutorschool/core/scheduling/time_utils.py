"""
Time-of-day arithmetic for lesson scheduling.

Converts between "HH:MM" strings, datetime.time values and minutes since
midnight, and renders times for display.

Dependencies: datetime (stdlib)
System role: Shared helpers for the schedule overlap validator
"""

from datetime import date, time

from tutorschool.core.exceptions import ValidationError

MINUTES_PER_DAY = 24 * 60


def parse_time(value: str | time) -> time:
    """
    Parse a 24-hour "HH:MM" string into a time.

    Args:
        value: "HH:MM" string or an existing time

    Returns:
        time: Parsed time-of-day (seconds dropped)

    Raises:
        ValidationError: If the string is not a valid 24-hour time
    """
    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)

    parts = value.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValidationError(f"Invalid time format: {value!r}, expected HH:MM", field="start_time")

    hours, minutes = int(parts[0]), int(parts[1])
    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        raise ValidationError(f"Time out of range: {value!r}", field="start_time")
    return time(hours, minutes)


def time_to_minutes(value: str | time) -> int:
    """Convert a time-of-day to minutes since midnight."""
    parsed = parse_time(value)
    return parsed.hour * 60 + parsed.minute


def minutes_to_time(minutes: int) -> str:
    """
    Convert minutes since midnight back to an "HH:MM" string.

    Values past midnight wrap around, so 1470 renders as "00:30".
    """
    minutes %= MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def format_time_for_display(value: str | time | int) -> str:
    """
    Format a time-of-day in 12-hour notation, e.g. "2:05 PM".

    Args:
        value: "HH:MM" string, time, or minutes since midnight
    """
    if isinstance(value, int):
        value = minutes_to_time(value)
    parsed = parse_time(value)
    period = "PM" if parsed.hour >= 12 else "AM"
    display_hours = parsed.hour % 12 or 12
    return f"{display_hours}:{parsed.minute:02d} {period}"


def format_time_range(start_minutes: int, end_minutes: int) -> str:
    """Render a half-open minute interval as "10:00 AM - 11:00 AM"."""
    return f"{format_time_for_display(start_minutes)} - {format_time_for_display(end_minutes)}"


def day_name(value: date) -> str:
    """English weekday name for a calendar date."""
    return value.strftime("%A")
