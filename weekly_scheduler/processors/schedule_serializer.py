# File: weekly_scheduler/processors/schedule_serializer.py
"""
Schedule persistence module.
Converts an EventStore to and from the versioned JSON schedule format.
"""

import datetime
import json
from typing import List

from weekly_scheduler.core.config_manager import Config
from weekly_scheduler.core.event_store import EventStore
from weekly_scheduler.core import time_rules
from weekly_scheduler.models import Event, ScheduleFormatError, event_from_dict
from weekly_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


class ScheduleSerializer:
    """Encodes and decodes the durable schedule representation."""

    def __init__(self, schema_version: int = Config.SCHEMA_VERSION):
        self.schema_version = schema_version

    def serialize(self, store: EventStore) -> bytes:
        """
        Encode every stored event.

        Args:
            store: Events to encode

        Returns:
            UTF-8 JSON document
        """
        data_to_save = {
            "version": self.schema_version,
            "saved_at": datetime.datetime.now().replace(microsecond=0).isoformat(),
            "events": [event.to_dict() for event in store.all()],
        }
        logger.debug(f"Serializing {len(data_to_save['events'])} events")
        return json.dumps(data_to_save, indent=2, ensure_ascii=False).encode("utf-8")

    def deserialize(self, data: bytes) -> EventStore:
        """
        Decode a schedule document into a new EventStore.

        Nothing is built until every record has been validated, so a failure
        never yields a partially populated store.

        Raises:
            ScheduleFormatError: the data is malformed, truncated, of an
                unsupported version, or describes an invalid schedule
        """
        try:
            document = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise ScheduleFormatError(f"Schedule data is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise ScheduleFormatError("Schedule document must be a JSON object")

        version = document.get("version")
        if version != self.schema_version:
            raise ScheduleFormatError(f"Unsupported schedule version: {version!r}")

        records = document.get("events")
        if not isinstance(records, list):
            raise ScheduleFormatError("Schedule document has no 'events' list")

        events = self._parse_records(records)

        store = EventStore()
        for event in events:
            conflict = store.insert(event)
            if conflict is not None:
                raise ScheduleFormatError(f"Stored event '{event}' overlaps '{conflict}'")

        logger.debug(f"Deserialized {len(store)} events")
        return store

    def _parse_records(self, records: list) -> List[Event]:
        events: List[Event] = []
        for i, record in enumerate(records):
            if not isinstance(record, dict):
                raise ScheduleFormatError(f"Record {i} is not an object")
            try:
                event = event_from_dict(record)
            except KeyError as e:
                raise ScheduleFormatError(f"Record {i} is missing field {e}") from e
            except (TypeError, ValueError) as e:
                raise ScheduleFormatError(f"Record {i} is invalid: {e}") from e

            violation = time_rules.check_interval(event.start_time, event.end_time)
            if violation is not None:
                raise ScheduleFormatError(f"Record {i} breaks scheduling rules: {violation.value}")
            events.append(event)
        return events
