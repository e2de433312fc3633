"""
Weekly schedule entry point.
Loads the saved schedule and lists the chosen week's events by grid cell.

Usage: python plan.py [YYYY-MM-DD] [schedule-file]
"""

import sys
import time
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from weekly_scheduler.core.config_manager import Config
from weekly_scheduler.core.engine import SchedulingEngine
from weekly_scheduler.core.week_anchor import parse_week_start, week_days
from weekly_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    argv = sys.argv[1:] if argv is None else argv
    start_time = time.time()

    try:
        if not Config.validate():
            logger.error("Configuration validation failed")
            return 1

        week_start = parse_week_start(argv[0] if argv else None)
        schedule_file = Path(argv[1]) if len(argv) > 1 else Config.SCHEDULE_FILE

        engine = SchedulingEngine()
        if schedule_file.exists():
            result = engine.load_from(schedule_file)
            if not result.is_success():
                logger.error(str(result.error))
                return 1
        else:
            logger.info(f"No saved schedule at {schedule_file}; starting empty")

        days = week_days(week_start)
        logger.info(f"Week of {days[0]} to {days[-1]}")
        entries = sorted(engine.query(week_start), key=lambda item: (item[0][1], item[0][0]))
        if not entries:
            logger.info("No events scheduled this week.")
        for (hour_index, day_index), event in entries:
            logger.info(
                f"{days[day_index].strftime('%A')} {hour_index + Config.GRID_FIRST_HOUR:02d}:00 "
                f"[{event.color.value}] {event}"
            )
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1

    finally:
        elapsed = time.time() - start_time
        logger.debug(f"Total execution time: {elapsed:.2f} seconds")


if __name__ == "__main__":
    sys.exit(main())
