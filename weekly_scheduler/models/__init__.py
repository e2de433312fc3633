from .enums import EventColor, display_rgb, NEUTRAL_RGB
from .common import parse_iso_datetime, to_minute
from .event import Event, event_from_dict
from .api import ErrorKind, SchedulingError, OperationResult, ScheduleFormatError

__all__ = [
    "EventColor",
    "display_rgb",
    "NEUTRAL_RGB",
    "parse_iso_datetime",
    "to_minute",
    "Event",
    "event_from_dict",
    "ErrorKind",
    "SchedulingError",
    "OperationResult",
    "ScheduleFormatError",
]
