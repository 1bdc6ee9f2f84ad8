"""Route catalog and timetable loader."""

import logging
from dataclasses import dataclass, field
from typing import Any

from timetable_countdown.adapters.config.app_config import AppConfig
from timetable_countdown.domain.models.clock_time import ClockTime
from timetable_countdown.domain.models.day_type import DayType
from timetable_countdown.domain.models.errors import FormatError
from timetable_countdown.domain.models.route import (
    Direction,
    Route,
    TransportKind,
    WindowPolicy,
)

logger = logging.getLogger(__name__)

TimetableKey = tuple[str, int, DayType]


@dataclass(frozen=True)
class RouteCatalogData:
    """Routes plus their raw timetables, as loaded from configuration."""

    routes: list[Route]
    timetables: dict[TimetableKey, tuple[str, ...]] = field(default_factory=dict)


class RouteCatalogLoader:
    """Loads routes and timetables from app config."""

    @staticmethod
    def load_departures(
        route_id: str, direction_index: int, departures_data: Any
    ) -> dict[TimetableKey, tuple[str, ...]]:
        """Load the per-day-type departure lists of one direction.

        Entries that are not valid ``HH:MM`` values are kept as-is (and logged):
        the query engine drops the affected lookup at query time. Lists of valid
        entries must be strictly ascending.
        """
        if departures_data is None:
            return {}
        if not isinstance(departures_data, dict):
            raise ValueError(
                f"Route {route_id} direction {direction_index}: departures must be a table"
            )

        timetables: dict[TimetableKey, tuple[str, ...]] = {}
        for day_type_name, times in departures_data.items():
            try:
                day_type = DayType(day_type_name)
            except ValueError as e:
                raise ValueError(
                    f"Route {route_id} direction {direction_index}: "
                    f"unknown day type '{day_type_name}'"
                ) from e

            if not isinstance(times, list):
                raise ValueError(
                    f"Route {route_id} direction {direction_index} ({day_type_name}): "
                    "departures must be a list"
                )
            raw_times = tuple(str(t) for t in times)

            try:
                parsed = [ClockTime.parse(t) for t in raw_times]
            except FormatError as e:
                logger.warning(
                    f"Route {route_id} direction {direction_index} ({day_type_name}) "
                    f"has a malformed entry: {e}"
                )
            else:
                if any(a >= b for a, b in zip(parsed, parsed[1:], strict=False)):
                    raise ValueError(
                        f"Route {route_id} direction {direction_index} ({day_type_name}): "
                        "departures must be strictly ascending"
                    )

            timetables[(route_id, direction_index, day_type)] = raw_times

        return timetables

    @staticmethod
    def load_route_from_data(
        route_data: dict[str, Any],
    ) -> tuple[Route, dict[TimetableKey, tuple[str, ...]]] | None:
        """Load a single route and its timetables from a data dict."""
        if not isinstance(route_data, dict):
            return None

        route_id = route_data.get("id")
        if not route_id:
            return None
        route_id = str(route_id)

        name = route_data.get("name", route_id)
        if not isinstance(name, str):
            name = route_id

        try:
            kind = TransportKind(str(route_data.get("kind", "bus")).lower())
        except ValueError as e:
            raise ValueError(f"Route {route_id}: unknown kind '{route_data.get('kind')}'") from e

        try:
            window_policy = WindowPolicy(str(route_data.get("window_policy", "none")).lower())
        except ValueError as e:
            raise ValueError(
                f"Route {route_id}: unknown window_policy '{route_data.get('window_policy')}'"
            ) from e

        companion_route_id = route_data.get("companion_route")
        companion_route_id = str(companion_route_id) if companion_route_id else None

        directions_data = route_data.get("directions", [])
        if not isinstance(directions_data, list):
            directions_data = []

        directions: list[Direction] = []
        timetables: dict[TimetableKey, tuple[str, ...]] = {}
        for index, direction_data in enumerate(directions_data):
            if not isinstance(direction_data, dict):
                logger.warning(f"Route {route_id}: skipping malformed direction {index}")
                continue
            label = direction_data.get("label", f"Direction {index}")
            directions.append(Direction(index=index, label=str(label)))
            timetables.update(
                RouteCatalogLoader.load_departures(
                    route_id, index, direction_data.get("departures")
                )
            )

        if not directions:
            logger.warning(f"Route {route_id} has no directions configured, skipping")
            return None

        route = Route(
            id=route_id,
            name=name,
            kind=kind,
            directions=tuple(directions),
            window_policy=window_policy,
            companion_route_id=companion_route_id,
        )
        return route, timetables

    @staticmethod
    def load(config: AppConfig) -> RouteCatalogData:
        """Load routes and timetables from app config."""
        routes: list[Route] = []
        timetables: dict[TimetableKey, tuple[str, ...]] = {}

        for route_data in config.get_routes_config():
            loaded = RouteCatalogLoader.load_route_from_data(route_data)
            if loaded is None:
                continue
            route, route_timetables = loaded
            routes.append(route)
            timetables.update(route_timetables)

        known_ids = {route.id for route in routes}
        for route in routes:
            if route.companion_route_id and route.companion_route_id not in known_ids:
                logger.warning(
                    f"Route {route.id} names unknown companion route {route.companion_route_id}"
                )

        return RouteCatalogData(routes=routes, timetables=timetables)
