"""Timetable store adapters."""

from timetable_countdown.adapters.timetable.in_memory_route_catalog import InMemoryRouteCatalog
from timetable_countdown.adapters.timetable.in_memory_timetable_repository import (
    InMemoryTimetableRepository,
)

__all__ = ["InMemoryRouteCatalog", "InMemoryTimetableRepository"]
