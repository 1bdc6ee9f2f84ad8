"""Protocol for formatting countdowns and departure boards."""

from datetime import datetime
from typing import Protocol

from timetable_countdown.domain.models.countdown import Countdown
from timetable_countdown.domain.models.departure_item import DepartureItem


class CountdownFormatterProtocol(Protocol):
    """Protocol for turning countdown values into display strings."""

    def format_countdown(self, countdown: Countdown) -> str:
        """Format the remaining time.

        Args:
            countdown: The countdown to format.

        Returns:
            ``H:MM hr`` from one hour up, ``M:SS min`` from one minute up,
            ``S sec`` below that, or a no-service marker when unavailable.
        """
        ...

    def urgency(self, countdown: Countdown) -> str:
        """Classify how close the departure is.

        Args:
            countdown: The countdown to classify.

        Returns:
            One of ``imminent``, ``soon``, ``normal`` or ``unavailable``.
        """
        ...

    def format_item(self, item: DepartureItem) -> str:
        """Format one upcoming departure with its badges and day label."""
        ...

    def format_now(self, now: datetime) -> str:
        """Format the current time in the configured timezone."""
        ...
