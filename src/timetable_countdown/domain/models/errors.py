"""Domain errors."""


class FormatError(ValueError):
    """Raised when a timetable clock-time is not a strict ``HH:MM`` value."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Malformed clock-time: {value!r} (expected HH:MM)")
        self.value = value


class UnknownRouteError(KeyError):
    """Raised when a query names a route that is not in the catalogue."""

    def __init__(self, route_id: str) -> None:
        super().__init__(route_id)
        self.route_id = route_id

    def __str__(self) -> str:
        return f"Unknown route: {self.route_id}"


class UnknownDirectionError(IndexError):
    """Raised when a direction index does not exist on a route."""

    def __init__(self, route_id: str, direction_index: int) -> None:
        super().__init__(f"Route {route_id} has no direction {direction_index}")
        self.route_id = route_id
        self.direction_index = direction_index
