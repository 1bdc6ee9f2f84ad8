"""In-memory route catalog."""

from timetable_countdown.domain.models.errors import UnknownRouteError
from timetable_countdown.domain.models.route import Route, TransportKind
from timetable_countdown.domain.ports.route_catalog import RouteCatalog


class InMemoryRouteCatalog(RouteCatalog):
    """Route catalog over a fixed list of routes, in configuration order."""

    def __init__(self, routes: list[Route]) -> None:
        self._routes = list(routes)
        self._by_id = {route.id: route for route in self._routes}

    def get_route(self, route_id: str) -> Route:
        """Get a route by id."""
        try:
            return self._by_id[route_id]
        except KeyError:
            raise UnknownRouteError(route_id) from None

    def list_routes(
        self, kind: TransportKind | None = None, favorites: list[str] | None = None
    ) -> list[Route]:
        """List routes, optionally of one kind, with favorites first.

        The sort is stable, so routes keep their configured order within the
        favorite and non-favorite groups.
        """
        routes = [r for r in self._routes if kind is None or r.kind is kind]
        favorite_ids = set(favorites or [])
        return sorted(routes, key=lambda r: r.id not in favorite_ids)
