# File: weekly_scheduler/models/api.py
"""
Result and error models returned by the scheduling engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .event import Event


class ErrorKind(Enum):
    """Recoverable failure kinds reported to the presentation layer."""
    INVALID_NAME = "InvalidName"
    INVALID_INTERVAL = "InvalidInterval"
    BLACKOUT_DAY = "BlackoutDay"
    OUTSIDE_ALLOWED_HOURS = "OutsideAllowedHours"
    OVERLAP = "Overlap"
    NOT_FOUND = "NotFound"
    DELETION_DECLINED = "DeletionDeclined"
    FORMAT_ERROR = "FormatError"
    IO_ERROR = "IOError"


DEFAULT_MESSAGES = {
    ErrorKind.INVALID_NAME: "Event name is required.",
    ErrorKind.INVALID_INTERVAL: "End time must be after start time.",
    ErrorKind.BLACKOUT_DAY: "Cannot schedule events on Sunday!",
    ErrorKind.OUTSIDE_ALLOWED_HOURS: "Event falls outside the allowed hours for that day.",
    ErrorKind.OVERLAP: "Event time overlaps with an existing event.",
    ErrorKind.NOT_FOUND: "Event not found in the schedule.",
    ErrorKind.DELETION_DECLINED: "Deletion canceled: Secretary name is required.",
    ErrorKind.FORMAT_ERROR: "Schedule file is corrupt or unreadable.",
    ErrorKind.IO_ERROR: "Schedule file could not be accessed.",
}


class ScheduleFormatError(ValueError):
    """Raised when persisted schedule data cannot be decoded."""


@dataclass
class SchedulingError:
    """Represents a rejected engine request."""
    kind: ErrorKind
    message: str = ""
    conflicting_event: Optional[Event] = None

    def __post_init__(self):
        if not self.message:
            self.message = DEFAULT_MESSAGES[self.kind]

    def __str__(self) -> str:
        """String representation of error."""
        if self.conflicting_event is not None:
            return f"{self.kind.value}: {self.message} (conflicts with {self.conflicting_event})"
        return f"{self.kind.value}: {self.message}"


@dataclass
class OperationResult:
    """Outcome of an engine operation."""
    status: str  # "success" or "fail"
    event: Optional[Event] = None
    error: Optional[SchedulingError] = None

    def is_success(self) -> bool:
        """Check if the operation succeeded."""
        return self.status == "success"

    @classmethod
    def ok(cls, event: Optional[Event] = None) -> 'OperationResult':
        return cls(status="success", event=event)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str = "",
             conflicting_event: Optional[Event] = None) -> 'OperationResult':
        return cls(status="fail", error=SchedulingError(kind, message, conflicting_event))
