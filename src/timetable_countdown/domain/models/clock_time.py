"""Clock-time domain model."""

import re
from dataclasses import dataclass

from timetable_countdown.domain.models.errors import FormatError

SECONDS_PER_DAY = 86400

_CLOCK_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


@dataclass(frozen=True, order=True)
class ClockTime:
    """A published departure time of day (``HH:MM``, 00:00-23:59)."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise FormatError(f"{self.hour}:{self.minute}")

    @classmethod
    def parse(cls, value: str) -> "ClockTime":
        """Parse a strict ``HH:MM`` string.

        No coercion is attempted: ``7:00``, ``24:00`` or ``07:00:00`` are rejected.

        Raises:
            FormatError: If the value is not a valid clock-time.
        """
        if not isinstance(value, str):
            raise FormatError(value)
        match = _CLOCK_TIME_PATTERN.match(value)
        if match is None:
            raise FormatError(value)
        return cls(hour=int(match.group(1)), minute=int(match.group(2)))

    @property
    def seconds(self) -> int:
        """Seconds since midnight (0-86399)."""
        return self.hour * 3600 + self.minute * 60

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
