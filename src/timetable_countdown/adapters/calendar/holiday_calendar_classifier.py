"""Calendar classifier backed by a fixed holiday list."""

from datetime import date

from timetable_countdown.domain.models.day_type import DayType
from timetable_countdown.domain.ports.calendar_classifier import CalendarClassifier


class HolidayCalendarClassifier(CalendarClassifier):
    """Classifies dates as weekday, Saturday or Sunday/public holiday."""

    def __init__(self, holidays: frozenset[date] | None = None) -> None:
        self._holidays = holidays or frozenset()

    def classify(self, day: date) -> DayType:
        """Return the day-type; a holiday on a Saturday runs the holiday timetable."""
        if day in self._holidays or day.weekday() == 6:
            return DayType.SUNDAY_OR_HOLIDAY
        if day.weekday() == 5:
            return DayType.SATURDAY
        return DayType.WEEKDAY

    def is_holiday(self, day: date) -> bool:
        return day in self._holidays
