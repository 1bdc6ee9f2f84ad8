"""Route catalog port."""

from typing import Protocol

from timetable_countdown.domain.models.route import Route, TransportKind


class RouteCatalog(Protocol):
    """Port for looking up route metadata."""

    def get_route(self, route_id: str) -> Route:
        """Get a route by id.

        Raises:
            UnknownRouteError: If no route has this id.
        """
        ...

    def list_routes(
        self, kind: TransportKind | None = None, favorites: list[str] | None = None
    ) -> list[Route]:
        """List routes, optionally of one kind, favorites first."""
        ...
