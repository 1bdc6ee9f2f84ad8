"""Departure item domain model."""

from dataclasses import dataclass

from timetable_countdown.domain.models.badge import Badge
from timetable_countdown.domain.models.clock_time import ClockTime


@dataclass(frozen=True)
class DepartureItem:
    """A single upcoming departure, built fresh for every query."""

    clock_time: ClockTime
    absolute_offset_seconds: int  # Seconds from the start of the current service day
    badges: tuple[Badge, ...] = ()
    day_label: str | None = None
    day_offset: int = 0
