"""Tests for domain models."""

import pytest

from timetable_countdown.domain.models import (
    Badge,
    BadgeKind,
    BadgeSeverity,
    ClockTime,
    Countdown,
    DayType,
    Direction,
    FormatError,
    Route,
    ScheduleOverride,
    TransportKind,
    UnknownDirectionError,
    ViewState,
    WindowPolicy,
)


def test_clock_time_parses_strict_hh_mm() -> None:
    """Given a HH:MM string, when parsing, then hour, minute and seconds are set."""
    clock_time = ClockTime.parse("07:30")

    assert clock_time.hour == 7
    assert clock_time.minute == 30
    assert clock_time.seconds == 27000
    assert str(clock_time) == "07:30"


def test_clock_time_parses_day_bounds() -> None:
    """Given the first and last minute of a day, when parsing, then both are accepted."""
    assert ClockTime.parse("00:00").seconds == 0
    assert ClockTime.parse("23:59").seconds == 86340


@pytest.mark.parametrize(
    "value", ["7:00", "24:00", "07:60", "07:00:00", "0700", "", " 07:00", "ab:cd"]
)
def test_clock_time_rejects_malformed_values(value: str) -> None:
    """Given a malformed clock-time, when parsing, then FormatError is raised."""
    with pytest.raises(FormatError, match="Malformed clock-time"):
        ClockTime.parse(value)


def test_clock_time_rejects_non_string() -> None:
    """Given a non-string value, when parsing, then FormatError is raised."""
    with pytest.raises(FormatError):
        ClockTime.parse(700)  # type: ignore[arg-type]


def test_format_error_is_value_error() -> None:
    """Given a FormatError, then it can be handled as a ValueError."""
    assert issubclass(FormatError, ValueError)


def test_clock_times_are_ordered() -> None:
    """Given two clock-times, when comparing, then earlier sorts first."""
    assert ClockTime.parse("06:59") < ClockTime.parse("07:00")
    assert sorted([ClockTime(8, 0), ClockTime(7, 30)]) == [ClockTime(7, 30), ClockTime(8, 0)]


def test_schedule_override_cycles_through_modes() -> None:
    """Given each override, when calling next, then the auto-weekday-saturday-sunday cycle is followed."""
    assert ScheduleOverride.AUTO.next() is ScheduleOverride.WEEKDAY
    assert ScheduleOverride.WEEKDAY.next() is ScheduleOverride.SATURDAY
    assert ScheduleOverride.SATURDAY.next() is ScheduleOverride.SUNDAY
    assert ScheduleOverride.SUNDAY.next() is ScheduleOverride.AUTO


def test_schedule_override_maps_to_day_type() -> None:
    """Given a manual override, then it pins the matching day-type; auto pins nothing."""
    assert ScheduleOverride.AUTO.day_type is None
    assert ScheduleOverride.AUTO.is_manual is False
    assert ScheduleOverride.WEEKDAY.day_type is DayType.WEEKDAY
    assert ScheduleOverride.SATURDAY.day_type is DayType.SATURDAY
    assert ScheduleOverride.SUNDAY.day_type is DayType.SUNDAY_OR_HOLIDAY
    assert ScheduleOverride.SUNDAY.is_manual is True


def test_route_direction_lookup() -> None:
    """Given a route, when looking up directions, then known indices resolve and others raise."""
    route = Route(
        id="NR334",
        name="NR334",
        kind=TransportKind.BUS,
        directions=(Direction(0, "To Airport"), Direction(1, "To Park Island")),
    )

    assert route.direction(1).label == "To Park Island"
    assert route.is_extendable is False
    with pytest.raises(UnknownDirectionError):
        route.direction(2)


def test_window_policy_extendable_flags() -> None:
    """Given window policies, then only single_horizon and continuous are extendable."""
    assert WindowPolicy.NONE.is_extendable is False
    assert WindowPolicy.SINGLE_HORIZON.is_extendable is True
    assert WindowPolicy.CONTINUOUS.is_extendable is True


def test_badge_uses_default_severity() -> None:
    """Given a badge kind without severity, when creating a badge, then the default severity is used."""
    assert Badge.of(BadgeKind.LAST).severity is BadgeSeverity.ALERT
    assert Badge.of(BadgeKind.ESTIMATED).severity is BadgeSeverity.NEUTRAL
    assert Badge.of(BadgeKind.VIA_ALT, BadgeSeverity.INFO).severity is BadgeSeverity.INFO


def test_unavailable_countdown() -> None:
    """Given no departure, when creating an unavailable countdown, then it carries no target."""
    countdown = Countdown.unavailable()

    assert countdown.available is False
    assert countdown.target_clock_time is None
    assert countdown.total_seconds == 0


def test_view_state_resets_extended_on_route_or_direction_change() -> None:
    """Given an extended view, when switching route or direction, then a compact view is returned."""
    state = ViewState(route_id="NR338").toggle_extended()
    assert state.extended is True

    assert state.select_direction(1) == ViewState(route_id="NR338", direction_index=1)
    assert state.select_route("NR330") == ViewState(route_id="NR330")
    assert state.toggle_extended().extended is False


def test_view_state_is_frozen() -> None:
    """Given a ViewState, when trying to modify it, then AttributeError is raised."""
    state = ViewState(route_id="NR338")

    with pytest.raises(AttributeError):
        state.extended = True  # type: ignore[misc]
