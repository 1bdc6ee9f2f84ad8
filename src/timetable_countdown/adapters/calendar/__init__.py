"""Calendar adapters."""

from timetable_countdown.adapters.calendar.holiday_calendar_classifier import (
    HolidayCalendarClassifier,
)

__all__ = ["HolidayCalendarClassifier"]
