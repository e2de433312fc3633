# File: weekly_scheduler/models/enums.py

from enum import Enum
from typing import Union


class EventColor(Enum):
    """Display tag for an event. Carries no scheduling meaning."""
    RED = "Red"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLUE = "Blue"
    ORANGE = "Orange"
    GRAY = "Gray"

    @classmethod
    def default(cls) -> 'EventColor':
        return cls.GRAY

    @classmethod
    def from_value(cls, raw: Union[str, 'EventColor', None]) -> 'EventColor':
        """Parse a color tag case-insensitively, falling back to the default."""
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return cls.default()
        # Handle both "Blue" (value) and "EventColor.BLUE" (name) if passed loosely
        clean = raw.split('.')[-1].strip().lower()
        for color in cls:
            if clean in (color.value.lower(), color.name.lower()):
                return color
        return cls.default()

    @classmethod
    def is_known(cls, raw: Union[str, 'EventColor', None]) -> bool:
        if isinstance(raw, cls):
            return True
        if not isinstance(raw, str):
            return False
        clean = raw.split('.')[-1].strip().lower()
        return any(clean in (c.value.lower(), c.name.lower()) for c in cls)


# Background colors used when a grid cell shows an event
COLOR_RGB = {
    EventColor.RED: "#FF0000",
    EventColor.GREEN: "#00FF00",
    EventColor.YELLOW: "#FFFF00",
    EventColor.BLUE: "#0000FF",
    EventColor.ORANGE: "#FFC800",
    EventColor.GRAY: "#808080",
}
NEUTRAL_RGB = "#C0C0C0"  # light gray


def display_rgb(color: Union[str, EventColor, None]) -> str:
    """Return the cell background for a color tag; unknown tags get light gray."""
    if not EventColor.is_known(color):
        return NEUTRAL_RGB
    return COLOR_RGB[EventColor.from_value(color)]
