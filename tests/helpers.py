"""Shared builders for tests."""

from datetime import date
from zoneinfo import ZoneInfo

from timetable_countdown.adapters.calendar import HolidayCalendarClassifier
from timetable_countdown.adapters.timetable import (
    InMemoryRouteCatalog,
    InMemoryTimetableRepository,
)
from timetable_countdown.application.services import (
    BadgeAnnotator,
    DepartureFinder,
    DepartureQueryService,
    ServiceDayResolver,
    WindowAggregator,
)
from timetable_countdown.domain.models import (
    BadgeRuleBook,
    DayType,
    Direction,
    Route,
    TransportKind,
    WindowPolicy,
)

WEEKDAY = DayType.WEEKDAY
SATURDAY = DayType.SATURDAY
SUNDAY = DayType.SUNDAY_OR_HOLIDAY


def make_route(
    route_id: str = "R1",
    kind: TransportKind = TransportKind.BUS,
    window_policy: WindowPolicy = WindowPolicy.NONE,
    companion_route_id: str | None = None,
) -> Route:
    """Create a two-direction route."""
    return Route(
        id=route_id,
        name=f"Route {route_id}",
        kind=kind,
        directions=(Direction(0, "Outbound"), Direction(1, "Inbound")),
        window_policy=window_policy,
        companion_route_id=companion_route_id,
    )


def same_every_day(route_id: str, direction_index: int, times: list[str]) -> dict:
    """Timetable entries with one list for every day-type."""
    return {(route_id, direction_index, day_type): tuple(times) for day_type in DayType}


def make_resolver(
    timetables: dict, holidays: frozenset[date] | None = None
) -> ServiceDayResolver:
    return ServiceDayResolver(
        HolidayCalendarClassifier(holidays),
        InMemoryTimetableRepository(timetables),
    )


def make_service(
    timetables: dict,
    routes: list[Route] | None = None,
    rule_book: BadgeRuleBook | None = None,
    holidays: frozenset[date] | None = None,
    rollover_max_days: int = 1,
    upcoming_limit: int = 5,
    full_list_gap_minutes: int = 60,
    timezone: ZoneInfo | None = None,
) -> DepartureQueryService:
    """Wire a query service over in-memory data."""
    resolver = make_resolver(timetables, holidays)
    annotator = BadgeAnnotator(rule_book)
    return DepartureQueryService(
        route_catalog=InMemoryRouteCatalog(routes or [make_route()]),
        resolver=resolver,
        finder=DepartureFinder(resolver, rollover_max_days=rollover_max_days),
        aggregator=WindowAggregator(resolver, annotator),
        annotator=annotator,
        upcoming_limit=upcoming_limit,
        full_list_gap_minutes=full_list_gap_minutes,
        timezone=timezone,
    )
