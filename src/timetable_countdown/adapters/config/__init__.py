"""Configuration adapters."""

from timetable_countdown.adapters.config.app_config import AppConfig
from timetable_countdown.adapters.config.badge_rule_loader import BadgeRuleLoader
from timetable_countdown.adapters.config.holiday_loader import HolidayLoader
from timetable_countdown.adapters.config.route_catalog_loader import (
    RouteCatalogData,
    RouteCatalogLoader,
)

__all__ = [
    "AppConfig",
    "BadgeRuleLoader",
    "HolidayLoader",
    "RouteCatalogData",
    "RouteCatalogLoader",
]
