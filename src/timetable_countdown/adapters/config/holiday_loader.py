"""Holiday calendar loader."""

import logging
from datetime import date, datetime

from timetable_countdown.adapters.config.app_config import AppConfig

logger = logging.getLogger(__name__)


class HolidayLoader:
    """Loads public holiday dates from app config."""

    @staticmethod
    def load(config: AppConfig) -> frozenset[date]:
        """Load holidays; accepts TOML dates or ISO strings, skipping invalid entries."""
        holidays: set[date] = set()
        for entry in config.get_holidays_config():
            if isinstance(entry, datetime):
                holidays.add(entry.date())
            elif isinstance(entry, date):
                holidays.add(entry)
            else:
                try:
                    holidays.add(date.fromisoformat(str(entry)))
                except ValueError:
                    logger.warning(f"Ignoring invalid holiday date: {entry!r}")
        return frozenset(holidays)
