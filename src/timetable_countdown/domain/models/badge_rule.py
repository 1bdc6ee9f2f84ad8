"""Declarative badge rule domain models."""

from dataclasses import dataclass, field

from timetable_countdown.domain.models.badge import BadgeKind, BadgeSeverity
from timetable_countdown.domain.models.clock_time import ClockTime


@dataclass(frozen=True)
class BadgeRule:
    """Badge rules for one (route, direction) pair.

    A rule may carry any combination of:
    - ``times``: exact clock-time -> badge kind (e.g. overnight trips via another stop)
    - ``minutes``: minute value -> badge kind (e.g. ``0`` -> via_alt, ``30`` -> normal)
    - ``last_times``: clock-times that count as the last departure of the day,
      replacing the position in the published list
    """

    route_id: str
    direction_index: int
    times: dict[ClockTime, BadgeKind] = field(default_factory=dict)
    minutes: dict[int, BadgeKind] = field(default_factory=dict)
    last_times: frozenset[ClockTime] = frozenset()
    severity: BadgeSeverity | None = None  # Overrides the kind's default severity

    @property
    def is_empty(self) -> bool:
        return not (self.times or self.minutes or self.last_times)


@dataclass(frozen=True)
class BadgeRuleBook:
    """Versioned collection of badge rules."""

    rules: tuple[BadgeRule, ...] = ()
    version: str | None = None

    def rules_for(self, route_id: str, direction_index: int) -> list[BadgeRule]:
        """Return the rules that apply to a route direction, in declaration order."""
        return [
            rule
            for rule in self.rules
            if rule.route_id == route_id and rule.direction_index == direction_index
        ]
