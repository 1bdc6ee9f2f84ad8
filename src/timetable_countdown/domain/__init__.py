"""Domain layer - core business logic and models."""

from timetable_countdown.domain.models import (
    ClockTime,
    Countdown,
    DayType,
    DepartureBoard,
    DepartureItem,
    Route,
    ScheduleOverride,
)
from timetable_countdown.domain.ports import (
    CalendarClassifier,
    RouteCatalog,
    TimetableRepository,
)

__all__ = [
    "CalendarClassifier",
    "ClockTime",
    "Countdown",
    "DayType",
    "DepartureBoard",
    "DepartureItem",
    "Route",
    "RouteCatalog",
    "ScheduleOverride",
    "TimetableRepository",
]
