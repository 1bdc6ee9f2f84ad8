"""Timetable repository port."""

from typing import Protocol

from timetable_countdown.domain.models.day_type import DayType


class TimetableRepository(Protocol):
    """Port for the read-only timetable store."""

    def lookup(self, route_id: str, direction_index: int, day_type: DayType) -> list[str]:
        """Get the published ``HH:MM`` departures, ascending.

        An unknown (route, direction, day-type) triple yields an empty list.
        """
        ...
