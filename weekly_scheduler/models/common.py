# File: weekly_scheduler/models/common.py

from datetime import datetime
from typing import Optional


def parse_iso_datetime(date_str: Optional[str]) -> Optional[datetime]:
    """Parse a local ISO-8601 timestamp, returning None when it cannot be read."""
    if not date_str or not isinstance(date_str, str):
        return None
    try:
        parsed = datetime.fromisoformat(date_str.strip())
    except ValueError:
        return None
    # Single local clock: offsets are not part of the schedule format
    if parsed.tzinfo is not None:
        return None
    return parsed


def to_minute(value: datetime) -> datetime:
    """Truncate a timestamp to minute precision."""
    return value.replace(second=0, microsecond=0)
