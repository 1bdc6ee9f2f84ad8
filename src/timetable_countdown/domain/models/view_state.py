"""View state domain model."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ViewState:
    """Selected route, direction and view mode.

    The extended flag only holds for the current (route, direction) pair:
    selecting another route or direction yields a fresh compact state.
    """

    route_id: str
    direction_index: int = 0
    extended: bool = False

    def select_route(self, route_id: str, direction_index: int = 0) -> "ViewState":
        return ViewState(route_id=route_id, direction_index=direction_index)

    def select_direction(self, direction_index: int) -> "ViewState":
        return ViewState(route_id=self.route_id, direction_index=direction_index)

    def toggle_extended(self) -> "ViewState":
        return replace(self, extended=not self.extended)
