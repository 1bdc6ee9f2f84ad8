"""Tests for HolidayCalendarClassifier."""

from datetime import date

import pytest

from timetable_countdown.adapters.calendar import HolidayCalendarClassifier
from timetable_countdown.domain.models import DayType


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2026, 10, 12), DayType.WEEKDAY),  # Monday
        (date(2026, 10, 16), DayType.WEEKDAY),  # Friday
        (date(2026, 10, 17), DayType.SATURDAY),
        (date(2026, 10, 18), DayType.SUNDAY_OR_HOLIDAY),
    ],
)
def test_classifies_by_weekday(day: date, expected: DayType) -> None:
    """Given a date without holidays, when classifying, then the weekday decides the day-type."""
    assert HolidayCalendarClassifier().classify(day) is expected


def test_holiday_on_weekday_runs_holiday_timetable() -> None:
    """Given a Monday public holiday, when classifying, then it is a Sunday/holiday."""
    classifier = HolidayCalendarClassifier(frozenset({date(2026, 10, 19)}))

    assert classifier.classify(date(2026, 10, 19)) is DayType.SUNDAY_OR_HOLIDAY
    assert classifier.is_holiday(date(2026, 10, 19)) is True


def test_holiday_on_saturday_runs_holiday_timetable() -> None:
    """Given a Saturday public holiday, when classifying, then the holiday wins."""
    classifier = HolidayCalendarClassifier(frozenset({date(2026, 12, 26)}))

    assert classifier.classify(date(2026, 12, 26)) is DayType.SUNDAY_OR_HOLIDAY


def test_non_holiday_is_not_reported() -> None:
    """Given a regular date, when asking for a holiday, then False is returned."""
    assert HolidayCalendarClassifier().is_holiday(date(2026, 10, 20)) is False
