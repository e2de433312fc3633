# File: weekly_scheduler/core/week_anchor.py
"""
Week start handling: every grid is anchored on a Monday.
"""

import datetime
from typing import Optional

import pytz

from weekly_scheduler.core.config_manager import Config
from weekly_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def normalize_week_start(day: datetime.date) -> datetime.date:
    """Return the Monday of the week containing `day`."""
    if isinstance(day, datetime.datetime):
        day = day.date()
    return day - datetime.timedelta(days=day.weekday())


def today(timezone: str = Config.TARGET_TIMEZONE) -> datetime.date:
    """Today's date on the configured local clock."""
    return datetime.datetime.now(pytz.timezone(timezone)).date()


def current_week_start(timezone: str = Config.TARGET_TIMEZONE) -> datetime.date:
    return normalize_week_start(today(timezone))


def parse_week_start(text: Optional[str], timezone: str = Config.TARGET_TIMEZONE) -> datetime.date:
    """
    Parse a YYYY-MM-DD week start supplied by the user.

    Non-Monday dates move back to their week's Monday. Blank or invalid input
    falls back to the current week.
    """
    if text is None or not text.strip():
        return current_week_start(timezone)
    try:
        day = datetime.datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        logger.warning(f"Invalid date format '{text}'. Using the current week instead.")
        return current_week_start(timezone)
    return normalize_week_start(day)


def week_days(week_start: datetime.date):
    """The seven dates (Monday to Sunday) of the week starting on week_start."""
    monday = normalize_week_start(week_start)
    return [monday + datetime.timedelta(days=i) for i in range(Config.GRID_DAYS)]
