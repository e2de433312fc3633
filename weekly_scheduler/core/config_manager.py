# File: weekly_scheduler/core/config_manager.py
"""
Centralized configuration management for the weekly scheduler.
Loads settings from environment variables (and a local .env file).
"""

import os
from pathlib import Path

import pytz
from dotenv import load_dotenv

from weekly_scheduler.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from weekly_scheduler/core/

    # Subdirectories
    DATA_DIR = BASE_DIR / "data"

    # Files
    SCHEDULE_FILE = Path(os.getenv("SCHEDULE_FILE", str(DATA_DIR / "schedule.json")))

    # Application Settings
    TARGET_TIMEZONE = os.getenv("SCHEDULER_TIMEZONE", "Europe/Amsterdam")

    # Persisted schedule format
    SCHEMA_VERSION = 1

    # Weekly grid: 13 hourly rows (8AM-8PM) x 7 day columns (Mon-Sun)
    GRID_FIRST_HOUR = 8
    GRID_HOURS = 13
    GRID_DAYS = 7

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configuration is usable."""
        errors = []

        if cls.TARGET_TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.TARGET_TIMEZONE}")

        schedule_dir = cls.SCHEDULE_FILE.parent
        if schedule_dir.exists() and not os.access(schedule_dir, os.W_OK):
            errors.append(f"Schedule directory is not writable: {schedule_dir}")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
