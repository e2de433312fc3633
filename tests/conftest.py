# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable engines, dates and events for all tests.
"""

import os
import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Keep test runs from writing daily log files
os.environ.setdefault("LOG_TO_FILE", "0")

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from weekly_scheduler.core.engine import SchedulingEngine
from weekly_scheduler.core.event_store import EventStore
from weekly_scheduler.models import Event, EventColor


# ==================== Date Fixtures ====================

@pytest.fixture
def monday():
    """A known Monday (2024-01-01)."""
    return date(2024, 1, 1)


@pytest.fixture
def at(monday):
    """Build a timestamp from a day offset within the test week and a time."""
    def _at(day_offset: int, hour: int, minute: int = 0) -> datetime:
        return datetime(monday.year, monday.month, monday.day + day_offset, hour, minute)
    return _at


# ==================== Event Fixtures ====================

@pytest.fixture
def board_meeting(at):
    """Monday 09:00-10:00 board meeting."""
    return Event(
        name="Board Mtg",
        location="HQ",
        start_time=at(0, 9),
        end_time=at(0, 10),
        color=EventColor.BLUE,
    )


@pytest.fixture
def lunch(at):
    """Wednesday 12:00-13:30 lunch."""
    return Event(
        name="Lunch",
        location="Cafe",
        start_time=at(2, 12),
        end_time=at(2, 13, 30),
        color=EventColor.ORANGE,
    )


@pytest.fixture
def store(board_meeting, lunch):
    """Store holding two non-overlapping events."""
    return EventStore([board_meeting, lunch])


# ==================== Engine Fixtures ====================

@pytest.fixture
def engine():
    """Fresh engine with an empty schedule."""
    return SchedulingEngine()


@pytest.fixture
def board_result(engine, at):
    """Engine state after creating the Monday board meeting."""
    return engine.create_event("Board Mtg", "HQ", at(0, 9), at(0, 10), EventColor.BLUE)
