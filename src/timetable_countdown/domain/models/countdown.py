"""Countdown domain model."""

from dataclasses import dataclass

from timetable_countdown.domain.models.badge import Badge
from timetable_countdown.domain.models.clock_time import ClockTime


@dataclass(frozen=True)
class Countdown:
    """Time remaining until the next departure."""

    minutes: int
    seconds: int
    target_clock_time: ClockTime | None
    available: bool
    badges: tuple[Badge, ...] = ()
    target_offset_seconds: int | None = None
    day_offset: int = 0

    @classmethod
    def unavailable(cls) -> "Countdown":
        """Countdown for a route with no resolvable next departure."""
        return cls(minutes=0, seconds=0, target_clock_time=None, available=False)

    @property
    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds
