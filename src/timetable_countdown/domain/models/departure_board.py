"""Departure board domain model."""

from dataclasses import dataclass

from timetable_countdown.domain.models.countdown import Countdown
from timetable_countdown.domain.models.departure_item import DepartureItem
from timetable_countdown.domain.models.service_day import ServiceDay


@dataclass(frozen=True)
class DepartureBoard:
    """Everything the presentation layer needs for one evaluation tick."""

    route_id: str
    direction_index: int
    service_day: ServiceDay
    countdown: Countdown
    upcoming: tuple[DepartureItem, ...]
    is_full_list: bool = False
    is_extended_view: bool = False
    companion_route_id: str | None = None
