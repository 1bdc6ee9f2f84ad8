"""Calendar classifier port."""

from datetime import date
from typing import Protocol

from timetable_countdown.domain.models.day_type import DayType


class CalendarClassifier(Protocol):
    """Port for classifying a calendar date into a day-type."""

    def classify(self, day: date) -> DayType:
        """Return the day-type of a calendar date (holidays included)."""
        ...
