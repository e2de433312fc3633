# File: weekly_scheduler/core/engine.py
"""
Scheduling engine for the weekly scheduler.

Owns the single EventStore and services create/edit/delete/query and
save/load requests from the presentation layer. Expected failures come
back as OperationResult values; nothing here terminates the process.
"""

import contextlib
import datetime
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Tuple, Union

from weekly_scheduler.core import time_rules
from weekly_scheduler.core.config_manager import Config
from weekly_scheduler.core.event_store import EventStore
from weekly_scheduler.core.week_anchor import normalize_week_start
from weekly_scheduler.processors.schedule_serializer import ScheduleSerializer
from weekly_scheduler.models import (
    Event,
    EventColor,
    ErrorKind,
    OperationResult,
    ScheduleFormatError,
    to_minute,
)
from weekly_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)

Target = Union[str, Path, BinaryIO]
GridEntry = Tuple[Tuple[int, int], Event]


@contextlib.contextmanager
def _open_target(target: Target, mode: str):
    """Yield a binary stream for a path or an already open file object."""
    if isinstance(target, (str, Path)):
        path = Path(target)
        if "w" in mode:
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, mode) as f:
            yield f
    else:
        # Caller owns the stream's lifetime
        yield target


class SchedulingEngine:
    """
    Entry point for every schedule mutation.

    The presentation layer never holds the store itself, only the events
    and grid positions returned by these operations.
    """

    def __init__(self, serializer: Optional[ScheduleSerializer] = None):
        self._store = EventStore()
        self.serializer = serializer or ScheduleSerializer()
        logger.debug("Scheduling engine initialized")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create_event(
        self,
        name: str,
        location: str,
        start_time: datetime.datetime,
        end_time: datetime.datetime,
        color: Union[EventColor, str] = EventColor.GRAY,
    ) -> OperationResult:
        """
        Validate and add a new event.

        Checks run in order and stop at the first failure: interval order,
        weekday window, name, then overlap with same-day events.

        Returns:
            OperationResult carrying the new event on success
        """
        if start_time.tzinfo is not None or end_time.tzinfo is not None:
            logger.warning(f"Rejected event '{name}': timestamps carry a UTC offset")
            return OperationResult.fail(
                ErrorKind.INVALID_INTERVAL, "Event times must be local times without a timezone."
            )

        start_time = to_minute(start_time)
        end_time = to_minute(end_time)

        violation = time_rules.check_interval(start_time, end_time)
        if violation is ErrorKind.OUTSIDE_ALLOWED_HOURS:
            message = time_rules.describe_window(start_time.weekday())
            logger.warning(f"Rejected event '{name}': {message}")
            return OperationResult.fail(violation, message)
        if violation is not None:
            logger.warning(f"Rejected event '{name}': {violation.value}")
            return OperationResult.fail(violation)

        if not isinstance(name, str) or not name.strip():
            logger.warning("Rejected event with blank name")
            return OperationResult.fail(ErrorKind.INVALID_NAME)

        event = Event(
            name=name,
            location=location or "",
            start_time=start_time,
            end_time=end_time,
            color=EventColor.from_value(color),
        )

        conflict = self._store.insert(event)
        if conflict is not None:
            logger.warning(f"Rejected event '{name}': overlaps '{conflict.name}'")
            return OperationResult.fail(ErrorKind.OVERLAP, conflicting_event=conflict)

        logger.info(f"Created event: {event}")
        return OperationResult.ok(event)

    def edit_event(
        self,
        event: Event,
        name: Optional[str] = None,
        location: Optional[str] = None,
        color: Optional[Union[EventColor, str]] = None,
    ) -> OperationResult:
        """
        Update an event's name, location and/or color in place.

        Start and end times cannot be changed after creation.
        """
        if event not in self._store:
            logger.warning(f"Edit failed, event not found: {event}")
            return OperationResult.fail(ErrorKind.NOT_FOUND)

        if name is not None:
            event.name = name
        if location is not None:
            event.location = location
        if color is not None:
            event.color = EventColor.from_value(color)

        logger.info(f"Updated event: {event}")
        return OperationResult.ok(event)

    def delete_event(self, event: Event, confirmation_token: str) -> OperationResult:
        """
        Remove an event once an operator has identified themselves.

        Args:
            event: Event to delete
            confirmation_token: Name of the secretary authorizing the deletion
        """
        if not isinstance(confirmation_token, str) or not confirmation_token.strip():
            logger.warning(f"Deletion of '{getattr(event, 'name', event)}' declined: no secretary name")
            return OperationResult.fail(ErrorKind.DELETION_DECLINED)

        if not self._store.remove(event):
            logger.warning(f"Delete failed, event not found: {event}")
            return OperationResult.fail(ErrorKind.NOT_FOUND)

        logger.info(f"Event '{event.name}' deleted by {confirmation_token.strip()}")
        return OperationResult.ok(event)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def events(self) -> Tuple[Event, ...]:
        """Read-only snapshot of every stored event."""
        return tuple(self._store.all())

    def find_event_at(self, timestamp: datetime.datetime) -> Optional[Event]:
        """Event starting exactly at `timestamp` (a clicked grid cell)."""
        return self._store.find_at(timestamp)

    def is_schedulable_slot(self, timestamp: datetime.datetime) -> bool:
        return time_rules.is_schedulable_slot(timestamp)

    def query(self, week_start: datetime.date) -> Iterator[GridEntry]:
        """
        Lazily yield ((hour_index, day_index), event) for the week's grid.

        Events outside the seven days from the week's Monday, or whose
        start has no grid cell, are skipped.
        """
        monday = normalize_week_start(week_start)
        week_end = monday + datetime.timedelta(days=Config.GRID_DAYS)
        for event in self._store.all():
            if not monday <= event.start_time.date() < week_end:
                continue
            index = self._store.grid_index(event)
            if index is None:
                logger.debug(f"Event has no grid cell: {event}")
                continue
            yield index, event

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save_to(self, sink: Target = Config.SCHEDULE_FILE) -> OperationResult:
        """
        Write the schedule to a file path or binary stream.

        Returns:
            OperationResult; I/O failures are reported, not raised
        """
        try:
            payload = self.serializer.serialize(self._store)
            with _open_target(sink, "wb") as f:
                f.write(payload)
        except OSError as e:
            logger.error(f"Could not save schedule: {e}", exc_info=True)
            return OperationResult.fail(ErrorKind.IO_ERROR, f"Error saving schedule: {e}")

        logger.info(f"Schedule saved to {sink} ({len(self._store)} events)")
        return OperationResult.ok()

    def load_from(self, source: Target = Config.SCHEDULE_FILE) -> OperationResult:
        """
        Replace the whole schedule with the contents of a file or stream.

        On any failure the current schedule is left untouched.
        """
        try:
            with _open_target(source, "rb") as f:
                payload = f.read()
            loaded = self.serializer.deserialize(payload)
        except ScheduleFormatError as e:
            logger.error(f"Could not load schedule: {e}")
            return OperationResult.fail(ErrorKind.FORMAT_ERROR, f"Error loading schedule: {e}")
        except OSError as e:
            logger.error(f"Could not read schedule: {e}", exc_info=True)
            return OperationResult.fail(ErrorKind.IO_ERROR, f"Error loading schedule: {e}")

        self._store.replace_all(loaded)
        logger.info(f"Schedule loaded from {source} ({len(self._store)} events)")
        return OperationResult.ok()
