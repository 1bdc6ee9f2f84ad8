"""Route and direction domain models."""

from dataclasses import dataclass
from enum import Enum

from timetable_countdown.domain.models.errors import UnknownDirectionError


class TransportKind(str, Enum):
    """Kind of vehicle serving a route."""

    BUS = "bus"
    FERRY = "ferry"


class WindowPolicy(str, Enum):
    """How the upcoming list of a route is windowed.

    ``single_horizon`` routes show the rest of the service day in compact mode
    and a rolling 48h window when extended. ``continuous`` routes show a rolling
    24h window in compact mode and 48h when extended. ``none`` routes are not
    extendable.
    """

    NONE = "none"
    SINGLE_HORIZON = "single_horizon"
    CONTINUOUS = "continuous"

    @property
    def is_extendable(self) -> bool:
        return self is not WindowPolicy.NONE


@dataclass(frozen=True)
class Direction:
    """One travel direction of a route."""

    index: int
    label: str


@dataclass(frozen=True)
class Route:
    """A bus or ferry route with its directions."""

    id: str
    name: str
    kind: TransportKind
    directions: tuple[Direction, ...]
    window_policy: WindowPolicy = WindowPolicy.NONE
    companion_route_id: str | None = (
        None  # Route serving the same destination by the other transport kind
    )

    @property
    def is_extendable(self) -> bool:
        return self.window_policy.is_extendable

    def direction(self, index: int) -> Direction:
        """Return the direction with the given index."""
        for direction in self.directions:
            if direction.index == index:
                return direction
        raise UnknownDirectionError(self.id, index)
