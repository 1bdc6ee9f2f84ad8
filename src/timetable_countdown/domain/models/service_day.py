"""Service day domain models."""

from dataclasses import dataclass
from datetime import date

from timetable_countdown.domain.models.clock_time import ClockTime
from timetable_countdown.domain.models.day_type import DayType, ScheduleOverride


@dataclass(frozen=True)
class ServiceDay:
    """The service day that governs timetable lookups for a moment in time."""

    day_type: DayType
    service_date: date
    was_shifted_back: bool
    override: ScheduleOverride = ScheduleOverride.AUTO


@dataclass(frozen=True)
class ServiceDayDepartures:
    """Departures of one service day, ``day_offset`` days after the resolved one."""

    day_offset: int
    service_date: date
    day_type: DayType
    times: tuple[ClockTime, ...]
    day_label: str | None = None  # None for the current service day
