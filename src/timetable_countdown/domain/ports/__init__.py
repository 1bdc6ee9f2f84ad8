"""Ports (interfaces) for the ports-and-adapters architecture."""

from timetable_countdown.domain.ports.calendar_classifier import CalendarClassifier
from timetable_countdown.domain.ports.route_catalog import RouteCatalog
from timetable_countdown.domain.ports.timetable_repository import TimetableRepository

__all__ = [
    "CalendarClassifier",
    "RouteCatalog",
    "TimetableRepository",
]
