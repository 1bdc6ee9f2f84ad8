"""Departure query service."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from timetable_countdown.application.services.badge_annotator import BadgeAnnotator
from timetable_countdown.application.services.departure_finder import (
    DepartureFinder,
    NextDeparture,
)
from timetable_countdown.application.services.service_day_resolver import (
    ServiceDayResolver,
    seconds_since_midnight,
)
from timetable_countdown.application.services.window_aggregator import WindowAggregator
from timetable_countdown.domain.models.countdown import Countdown
from timetable_countdown.domain.models.day_type import ScheduleOverride
from timetable_countdown.domain.models.departure_board import DepartureBoard
from timetable_countdown.domain.models.departure_item import DepartureItem
from timetable_countdown.domain.models.route import Route, TransportKind
from timetable_countdown.domain.models.service_day import ServiceDay
from timetable_countdown.domain.ports.route_catalog import RouteCatalog

logger = logging.getLogger(__name__)


class DepartureQueryService:
    """Computes the countdown and upcoming list for one evaluation tick.

    Every call is a pure function of its arguments: ``now`` is always passed in
    and nothing is cached between calls.
    """

    def __init__(
        self,
        route_catalog: RouteCatalog,
        resolver: ServiceDayResolver,
        finder: DepartureFinder,
        aggregator: WindowAggregator,
        annotator: BadgeAnnotator,
        upcoming_limit: int = 5,
        full_list_gap_minutes: int = 60,
        timezone: ZoneInfo | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            route_catalog: Route metadata lookup.
            resolver: Service-day resolver.
            finder: Next-departure finder.
            aggregator: Window aggregator for extendable routes.
            annotator: Badge annotator.
            upcoming_limit: Number of later departures shown for non-extendable buses.
            full_list_gap_minutes: Gap to the next bus above which the rest of the day is shown.
            timezone: Civil timezone of the timetables; aware ``now`` values are converted to it.
        """
        self._route_catalog = route_catalog
        self._resolver = resolver
        self._finder = finder
        self._aggregator = aggregator
        self._annotator = annotator
        self._upcoming_limit = upcoming_limit
        self._full_list_gap_seconds = full_list_gap_minutes * 60
        self._timezone = timezone

    def query(
        self,
        now: datetime,
        route_id: str,
        direction_index: int = 0,
        override: ScheduleOverride = ScheduleOverride.AUTO,
        extended: bool = False,
    ) -> DepartureBoard:
        """Evaluate the board for a route direction at ``now``.

        Raises:
            UnknownRouteError: If the route is not in the catalogue.
            UnknownDirectionError: If the route has no such direction.
        """
        route = self._route_catalog.get_route(route_id)
        route.direction(direction_index)

        local_now = self._to_local(now)
        service_day = self._resolver.resolve(local_now, override)
        now_offset = seconds_since_midnight(local_now)

        target = self._finder.find_next_departure(
            service_day, route_id, direction_index, now_offset
        )
        countdown = self._build_countdown(route_id, direction_index, target, now_offset)
        if target is None:
            logger.debug(f"No departure found for {route_id} direction {direction_index}")

        is_extended_view = False
        if route.is_extendable:
            window = self._aggregator.aggregate(
                route, direction_index, service_day, now_offset, target, extended
            )
            upcoming = window.items
            is_full_list = window.is_full_list
            is_extended_view = window.is_extended_view
        else:
            upcoming, is_full_list = self._standard_list(route, direction_index, target, now_offset)

        return DepartureBoard(
            route_id=route_id,
            direction_index=direction_index,
            service_day=service_day,
            countdown=countdown,
            upcoming=upcoming,
            is_full_list=is_full_list,
            is_extended_view=is_extended_view,
            companion_route_id=route.companion_route_id,
        )

    def resolve_service_day(
        self, now: datetime, override: ScheduleOverride = ScheduleOverride.AUTO
    ) -> ServiceDay:
        """Resolve the service day governing ``now``."""
        return self._resolver.resolve(self._to_local(now), override)

    def _to_local(self, now: datetime) -> datetime:
        # Naive values are already civil time in the service timezone
        if now.tzinfo is not None and self._timezone is not None:
            return now.astimezone(self._timezone)
        return now

    def _build_countdown(
        self,
        route_id: str,
        direction_index: int,
        target: NextDeparture | None,
        now_offset: int,
    ) -> Countdown:
        if target is None:
            return Countdown.unavailable()

        remaining = target.absolute_offset_seconds - now_offset
        minutes, seconds = divmod(remaining, 60)
        badges = self._annotator.annotate(
            route_id, direction_index, target.clock_time, target.is_last_in_day
        )
        return Countdown(
            minutes=minutes,
            seconds=seconds,
            target_clock_time=target.clock_time,
            available=True,
            badges=tuple(badges),
            target_offset_seconds=target.absolute_offset_seconds,
            day_offset=target.day_offset,
        )

    def _standard_list(
        self,
        route: Route,
        direction_index: int,
        target: NextDeparture | None,
        now_offset: int,
    ) -> tuple[tuple[DepartureItem, ...], bool]:
        """Upcoming list for non-extendable routes.

        Shows the rest of the countdown departure's day for ferries, after a
        rollover, or when the next bus is far away; otherwise the next few.
        """
        if target is None:
            return (), False

        items = self._aggregator.day_items(
            route.id, direction_index, target.day, target.absolute_offset_seconds
        )
        is_full_list = (
            route.kind is TransportKind.FERRY
            or target.day_offset > 0
            or target.absolute_offset_seconds - now_offset > self._full_list_gap_seconds
        )
        if not is_full_list:
            items = items[: self._upcoming_limit]
        return tuple(items), is_full_list
