"""Domain models for timetable countdowns."""

from timetable_countdown.domain.models.badge import Badge, BadgeKind, BadgeSeverity
from timetable_countdown.domain.models.badge_rule import BadgeRule, BadgeRuleBook
from timetable_countdown.domain.models.clock_time import SECONDS_PER_DAY, ClockTime
from timetable_countdown.domain.models.countdown import Countdown
from timetable_countdown.domain.models.day_type import DayType, ScheduleOverride
from timetable_countdown.domain.models.departure_board import DepartureBoard
from timetable_countdown.domain.models.departure_item import DepartureItem
from timetable_countdown.domain.models.errors import (
    FormatError,
    UnknownDirectionError,
    UnknownRouteError,
)
from timetable_countdown.domain.models.route import (
    Direction,
    Route,
    TransportKind,
    WindowPolicy,
)
from timetable_countdown.domain.models.service_day import ServiceDay, ServiceDayDepartures
from timetable_countdown.domain.models.view_state import ViewState

__all__ = [
    "SECONDS_PER_DAY",
    "Badge",
    "BadgeKind",
    "BadgeRule",
    "BadgeRuleBook",
    "BadgeSeverity",
    "ClockTime",
    "Countdown",
    "DayType",
    "DepartureBoard",
    "DepartureItem",
    "Direction",
    "FormatError",
    "Route",
    "ScheduleOverride",
    "ServiceDay",
    "ServiceDayDepartures",
    "TransportKind",
    "UnknownDirectionError",
    "UnknownRouteError",
    "ViewState",
    "WindowPolicy",
]
