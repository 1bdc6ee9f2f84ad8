"""Multi-day window aggregation for extendable routes."""

import logging
from dataclasses import dataclass

from timetable_countdown.application.services.badge_annotator import BadgeAnnotator
from timetable_countdown.application.services.departure_finder import NextDeparture
from timetable_countdown.application.services.service_day_resolver import ServiceDayResolver
from timetable_countdown.domain.models.clock_time import SECONDS_PER_DAY
from timetable_countdown.domain.models.departure_item import DepartureItem
from timetable_countdown.domain.models.route import Route, WindowPolicy
from timetable_countdown.domain.models.service_day import ServiceDay, ServiceDayDepartures

logger = logging.getLogger(__name__)

COMPACT_HORIZON_HOURS = 24
EXTENDED_HORIZON_HOURS = 48
# Days 0..2 cover any 48h window starting inside day 0
WINDOW_DAYS = 3


@dataclass(frozen=True)
class WindowResult:
    """Upcoming list built for an extendable route."""

    items: tuple[DepartureItem, ...]
    is_full_list: bool
    is_extended_view: bool


class WindowAggregator:
    """Builds the upcoming-departure list of extendable routes."""

    def __init__(self, resolver: ServiceDayResolver, annotator: BadgeAnnotator) -> None:
        self._resolver = resolver
        self._annotator = annotator

    def aggregate(
        self,
        route: Route,
        direction_index: int,
        service_day: ServiceDay,
        now_offset_seconds: int,
        countdown_target: NextDeparture | None,
        extended: bool,
    ) -> WindowResult:
        """Build the upcoming list for the route's window policy and view mode.

        Departures at or before the countdown target are excluded so the
        countdown departure is never repeated. Without a countdown there is no
        service within the rollover bound and the list is empty.
        """
        if not route.is_extendable:
            raise ValueError(f"Route {route.id} is not extendable")

        is_single_horizon = route.window_policy is WindowPolicy.SINGLE_HORIZON and not extended
        if countdown_target is None:
            return WindowResult(items=(), is_full_list=False, is_extended_view=extended)

        threshold = countdown_target.absolute_offset_seconds
        if is_single_horizon:
            items = self._rest_of_day(
                route.id, direction_index, service_day, countdown_target, threshold
            )
            return WindowResult(items=items, is_full_list=True, is_extended_view=False)

        horizon_hours = EXTENDED_HORIZON_HOURS if extended else COMPACT_HORIZON_HOURS
        items = self.window(
            route.id,
            direction_index,
            service_day,
            threshold,
            now_offset_seconds + horizon_hours * 3600,
        )
        return WindowResult(items=items, is_full_list=False, is_extended_view=extended)

    def window(
        self,
        route_id: str,
        direction_index: int,
        service_day: ServiceDay,
        lower_bound: int,
        upper_bound: int,
    ) -> tuple[DepartureItem, ...]:
        """Merge days 0..2 and keep departures in ``(lower_bound, upper_bound]``."""
        items: list[DepartureItem] = []
        for day_offset in range(WINDOW_DAYS):
            day = self._resolver.get_service_day_departures(
                service_day, route_id, direction_index, day_offset
            )
            items.extend(self.day_items(route_id, direction_index, day, lower_bound, upper_bound))
        logger.debug(
            f"Window for {route_id} direction {direction_index}: "
            f"{len(items)} departure(s) in ({lower_bound}, {upper_bound}]"
        )
        return tuple(items)

    def day_items(
        self,
        route_id: str,
        direction_index: int,
        day: ServiceDayDepartures,
        lower_bound: int,
        upper_bound: int | None = None,
    ) -> list[DepartureItem]:
        """Annotate the departures of one day whose absolute offset is in range."""
        items: list[DepartureItem] = []
        day_start = day.day_offset * SECONDS_PER_DAY
        last_index = len(day.times) - 1
        for index, clock_time in enumerate(day.times):
            offset = day_start + clock_time.seconds
            if offset <= lower_bound:
                continue
            if upper_bound is not None and offset > upper_bound:
                break
            badges = self._annotator.annotate(
                route_id, direction_index, clock_time, is_last_in_day=index == last_index
            )
            items.append(
                DepartureItem(
                    clock_time=clock_time,
                    absolute_offset_seconds=offset,
                    badges=tuple(badges),
                    day_label=day.day_label,
                    day_offset=day.day_offset,
                )
            )
        return items

    def _rest_of_day(
        self,
        route_id: str,
        direction_index: int,
        service_day: ServiceDay,
        countdown_target: NextDeparture,
        threshold: int,
    ) -> tuple[DepartureItem, ...]:
        # After a rollover the rest of the countdown day is listed
        if countdown_target.day_offset > 0:
            return tuple(
                self.day_items(route_id, direction_index, countdown_target.day, threshold)
            )
        # Remaining departures of today, else all of tomorrow's
        for day_offset in (0, 1):
            day = self._resolver.get_service_day_departures(
                service_day, route_id, direction_index, day_offset
            )
            items = self.day_items(route_id, direction_index, day, threshold)
            if items:
                return tuple(items)
        return ()
