# File: weekly_scheduler/core/time_rules.py
"""
Weekly scheduling rules.

Which (weekday, time range) combinations may hold an event. Everything here
is a pure function of its arguments.
"""

from datetime import datetime, time
from typing import Dict, Optional, Tuple

from weekly_scheduler.models.api import ErrorKind

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

WEEKDAY_WINDOW = (time(8, 0), time(20, 0))
SATURDAY_WINDOW = (time(8, 0), time(15, 0))

# Keyed by date.weekday(); a missing day is a blackout day
SCHEDULABLE_WINDOWS: Dict[int, Tuple[time, time]] = {
    MONDAY: WEEKDAY_WINDOW,
    TUESDAY: WEEKDAY_WINDOW,
    WEDNESDAY: WEEKDAY_WINDOW,
    THURSDAY: WEEKDAY_WINDOW,
    FRIDAY: WEEKDAY_WINDOW,
    SATURDAY: SATURDAY_WINDOW,
}


def schedulable_window(weekday: int) -> Optional[Tuple[time, time]]:
    """
    Return the (earliest, latest) window for a weekday, or None on a blackout day.

    Args:
        weekday: Day index as returned by date.weekday() (Monday is 0)
    """
    return SCHEDULABLE_WINDOWS.get(weekday)


def is_within_window(start: datetime, end: datetime) -> bool:
    """Check that [start, end) is a same-day interval inside its weekday's window."""
    if start.date() != end.date():
        return False
    window = schedulable_window(start.weekday())
    if window is None:
        return False
    earliest, latest = window
    return start.time() >= earliest and end.time() <= latest


def is_schedulable_slot(slot_start: datetime) -> bool:
    """Check whether an hourly grid cell starting at slot_start may hold an event."""
    window = schedulable_window(slot_start.weekday())
    if window is None:
        return False
    earliest, latest = window
    return earliest <= slot_start.time() < latest


def check_interval(start: datetime, end: datetime) -> Optional[ErrorKind]:
    """
    Run the create-path rules in order and return the first violation.

    Returns:
        None if the interval may be scheduled, otherwise the ErrorKind
    """
    if end <= start:
        return ErrorKind.INVALID_INTERVAL
    if schedulable_window(start.weekday()) is None:
        return ErrorKind.BLACKOUT_DAY
    if not is_within_window(start, end):
        return ErrorKind.OUTSIDE_ALLOWED_HOURS
    return None


def describe_window(weekday: int) -> str:
    """User-facing description of a weekday's allowed hours."""
    window = schedulable_window(weekday)
    if window is None:
        return "No events can be scheduled on this day."
    earliest, latest = window
    day_kind = "Saturday" if weekday == SATURDAY else "weekdays"
    return (
        f"Events on {day_kind} can only be scheduled between "
        f"{_hour_label(earliest)} and {_hour_label(latest)}."
    )


def _hour_label(value: time) -> str:
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour} {suffix}"
