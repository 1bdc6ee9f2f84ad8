"""In-memory timetable store."""

from collections.abc import Mapping
from types import MappingProxyType

from timetable_countdown.domain.models.day_type import DayType
from timetable_countdown.domain.ports.timetable_repository import TimetableRepository


class InMemoryTimetableRepository(TimetableRepository):
    """Read-only timetable store loaded once at startup."""

    def __init__(self, timetables: Mapping[tuple[str, int, DayType], tuple[str, ...]]) -> None:
        self._timetables = MappingProxyType(dict(timetables))

    def lookup(self, route_id: str, direction_index: int, day_type: DayType) -> list[str]:
        """Get a copy of the departures of a (route, direction, day-type) triple."""
        return list(self._timetables.get((route_id, direction_index, day_type), ()))
