# File: weekly_scheduler/core/event_store.py
"""
In-memory event collection with overlap-aware insertion and grid lookup.
"""

import threading
from datetime import date, datetime
from typing import Iterable, Iterator, List, Optional, Tuple

from weekly_scheduler.core.config_manager import Config
from weekly_scheduler.models.event import Event
from weekly_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


class EventStore:
    """
    Ordered collection of events.

    Iteration follows insertion order. Membership and removal use identity,
    never field equality.
    """

    def __init__(self, events: Optional[Iterable[Event]] = None):
        self._events: List[Event] = []
        # Check-then-insert and bulk replacement are single-writer sections
        self._lock = threading.Lock()
        for event in events or ():
            conflict = self.insert(event)
            if conflict is not None:
                raise ValueError(f"Event '{event}' overlaps with '{conflict}'")

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return self.all()

    def __contains__(self, event: object) -> bool:
        return any(stored is event for stored in self._events)

    def events_on(self, day: date) -> List[Event]:
        """Get all events starting on a calendar day."""
        return [e for e in self._events if e.start_time.date() == day]

    def find_conflict(self, event: Event) -> Optional[Event]:
        """Return the first same-day event overlapping `event`, if any."""
        for stored in self.events_on(event.start_time.date()):
            if stored is not event and stored.overlaps_with(event):
                return stored
        return None

    def insert(self, event: Event) -> Optional[Event]:
        """
        Add an event unless it overlaps an existing same-day event.

        Returns:
            None on success, otherwise the colliding event (store unchanged)
        """
        with self._lock:
            conflict = self.find_conflict(event)
            if conflict is not None:
                logger.debug(f"Rejected '{event.name}': overlaps '{conflict.name}'")
                return conflict
            self._events.append(event)
            return None

    def remove(self, event: Event) -> bool:
        """Remove an event by identity. Returns False if it is not stored."""
        with self._lock:
            for i, stored in enumerate(self._events):
                if stored is event:
                    del self._events[i]
                    return True
            return False

    def replace_all(self, other: 'EventStore') -> None:
        """Swap in another store's events in a single step."""
        new_events = list(other._events)
        with self._lock:
            self._events = new_events

    def find_at(self, timestamp: datetime) -> Optional[Event]:
        """Exact start-time lookup, used to map a grid cell back to its event."""
        for event in self._events:
            if event.start_time == timestamp:
                return event
        return None

    @staticmethod
    def grid_index(event: Event) -> Optional[Tuple[int, int]]:
        """
        Locate an event's start on the weekly grid.

        Returns:
            (hour_index, day_index) with 8AM as hour 0 and Monday as day 0,
            or None when the start falls outside the grid
        """
        hour_index = event.start_time.hour - Config.GRID_FIRST_HOUR
        day_index = event.start_time.weekday()
        if not 0 <= hour_index < Config.GRID_HOURS:
            return None
        if not 0 <= day_index < Config.GRID_DAYS:
            return None
        return hour_index, day_index

    def all(self) -> Iterator[Event]:
        """Iterate over a snapshot of the stored events in insertion order."""
        return iter(tuple(self._events))
