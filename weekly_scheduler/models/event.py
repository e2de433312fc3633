# File: weekly_scheduler/models/event.py

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from .enums import EventColor
from .common import parse_iso_datetime, to_minute

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M"


@dataclass(eq=False)
class Event:
    """
    One scheduled appointment.

    Events compare by identity, so two events with identical fields
    remain two distinct entries in a store.
    """
    name: str
    location: str
    start_time: datetime
    end_time: datetime
    color: EventColor = EventColor.GRAY

    def __post_init__(self):
        """Validate event data."""
        if not isinstance(self.color, EventColor):
            self.color = EventColor.from_value(self.color)

        if self.end_time <= self.start_time:
            raise ValueError(f"Event end time must be after start time: {self.name}")
        if self.end_time.date() != self.start_time.date():
            raise ValueError(f"Event must start and end on the same day: {self.name}")

    def duration_minutes(self) -> int:
        """Calculate event duration in minutes."""
        return int((self.end_time - self.start_time).total_seconds() / 60)

    def overlaps_with(self, other: 'Event') -> bool:
        """Half-open overlap check; touching endpoints do not overlap."""
        return self.start_time < other.end_time and self.end_time > other.start_time

    def field_tuple(self) -> Tuple[str, str, datetime, datetime, EventColor]:
        return (self.name, self.location, self.start_time, self.end_time, self.color)

    def to_dict(self) -> dict:
        """Convert to dictionary for the persisted schedule format."""
        return {
            'name': self.name,
            'location': self.location,
            'start_time': self.start_time.strftime(TIMESTAMP_FORMAT),
            'end_time': self.end_time.strftime(TIMESTAMP_FORMAT),
            'color': self.color.value,
        }

    def __str__(self) -> str:
        return f"{self.name} - {self.start_time.strftime('%Y-%m-%d %H:%M')} at {self.location}"


def event_from_dict(data: dict) -> Event:
    """
    Create Event from a persisted record.

    Raises:
        KeyError: a required field is missing
        ValueError: a field has the wrong type or the event is invalid
    """
    start = parse_iso_datetime(data['start_time'])
    end = parse_iso_datetime(data['end_time'])
    if start is None or end is None:
        raise ValueError(f"Invalid timestamp in record: {data['start_time']!r} / {data['end_time']!r}")
    if start != to_minute(start) or end != to_minute(end):
        raise ValueError(f"Timestamps must have minute precision: {data['start_time']!r} / {data['end_time']!r}")

    name = data['name']
    location = data['location']
    if not isinstance(name, str) or not isinstance(location, str):
        raise ValueError("Event name and location must be strings")

    raw_color = data['color']
    if not EventColor.is_known(raw_color):
        raise ValueError(f"Unknown event color: {raw_color!r}")

    return Event(
        name=name,
        location=location,
        start_time=start,
        end_time=end,
        color=EventColor.from_value(raw_color),
    )
