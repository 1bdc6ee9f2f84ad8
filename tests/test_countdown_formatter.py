"""Tests for CountdownFormatter."""

import os
from datetime import UTC, date, datetime
from unittest.mock import patch

import pytest

from timetable_countdown.adapters.config import AppConfig
from timetable_countdown.adapters.formatters import CountdownFormatter
from timetable_countdown.domain.models import (
    Badge,
    BadgeKind,
    ClockTime,
    Countdown,
    DayType,
    DepartureBoard,
    DepartureItem,
    ScheduleOverride,
    ServiceDay,
)


@pytest.fixture
def formatter() -> CountdownFormatter:
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(config_file=None, timezone="UTC", _env_file=None)
    return CountdownFormatter(config)


def _countdown(minutes: int, seconds: int = 0, **kwargs) -> Countdown:
    return Countdown(
        minutes=minutes,
        seconds=seconds,
        target_clock_time=ClockTime(7, 0),
        available=True,
        **kwargs,
    )


def _board(countdown: Countdown, upcoming=(), **kwargs) -> DepartureBoard:
    service_day = ServiceDay(
        day_type=DayType.WEEKDAY,
        service_date=date(2026, 10, 14),
        was_shifted_back=False,
        override=kwargs.pop("override", ScheduleOverride.AUTO),
    )
    return DepartureBoard(
        route_id="NR334",
        direction_index=0,
        service_day=service_day,
        countdown=countdown,
        upcoming=tuple(upcoming),
        **kwargs,
    )


@pytest.mark.parametrize(
    ("minutes", "seconds", "expected"),
    [
        (1350, 0, "22:30 hr"),
        (60, 5, "1:00 hr"),
        (15, 0, "15:00 min"),
        (1, 7, "1:07 min"),
        (0, 42, "42 sec"),
    ],
)
def test_format_countdown_tiers(
    formatter: CountdownFormatter, minutes: int, seconds: int, expected: str
) -> None:
    """Given a countdown, when formatting, then hours, minutes or seconds are shown."""
    assert formatter.format_countdown(_countdown(minutes, seconds)) == expected


def test_format_unavailable_countdown(formatter: CountdownFormatter) -> None:
    """Given no departure, when formatting, then a placeholder is shown."""
    countdown = Countdown.unavailable()

    assert formatter.format_countdown(countdown) == "No more service"
    assert formatter.format_target(countdown) == "--:--"
    assert formatter.urgency(countdown) == "unavailable"


@pytest.mark.parametrize(
    ("minutes", "expected"), [(0, "imminent"), (4, "soon"), (5, "normal"), (90, "normal")]
)
def test_urgency_levels(formatter: CountdownFormatter, minutes: int, expected: str) -> None:
    """Given a countdown, when classifying urgency, then the level follows the minutes left."""
    assert formatter.urgency(_countdown(minutes)) == expected


def test_format_item_with_badges_and_day_label(formatter: CountdownFormatter) -> None:
    """Given an item from a later day, when formatting, then badges and day label are shown."""
    item = DepartureItem(
        clock_time=ClockTime(0, 45),
        absolute_offset_seconds=89100,
        badges=(Badge.of(BadgeKind.LAST), Badge.of(BadgeKind.OVERNIGHT)),
        day_label="Thu 15 Oct",
        day_offset=1,
    )

    assert formatter.format_item(item) == "00:45  [LAST] [OVERNIGHT]  (Thu 15 Oct)"


def test_format_now_converts_to_configured_timezone() -> None:
    """Given an aware time, when formatting now, then the configured timezone is used."""
    with patch.dict(os.environ, {}, clear=True):
        config = AppConfig(config_file=None, timezone="Asia/Hong_Kong", _env_file=None)
    formatter = CountdownFormatter(config)

    result = formatter.format_now(datetime(2026, 10, 14, 22, 45, 0, tzinfo=UTC))

    assert result == "2026-10-15 Thu 06:45:00"


def test_format_board_text(formatter: CountdownFormatter) -> None:
    """Given a board, when rendering text, then status, countdown and list are included."""
    upcoming = [DepartureItem(clock_time=ClockTime(7, 30), absolute_offset_seconds=27000)]
    board = _board(
        _countdown(15, badges=(Badge.of(BadgeKind.VIA_ALT),)),
        upcoming,
        override=ScheduleOverride.WEEKDAY,
        companion_route_id="Ferry-Central",
    )

    text = formatter.format_board(board, datetime(2026, 10, 14, 6, 45), "Park Island - Tsuen Wan")

    assert "2026-10-14 Wed 06:45:00  [weekday] (override: weekday)" in text
    assert "Park Island - Tsuen Wan - direction 0" in text
    assert "Next departure: 07:00  15:00 min  [VIA_ALT]" in text
    assert "Later departures:" in text
    assert "07:30" in text
    assert "See also: Ferry-Central" in text


def test_format_board_headers(formatter: CountdownFormatter) -> None:
    """Given full and extended boards, when rendering, then the header reflects the list mode."""
    upcoming = [DepartureItem(clock_time=ClockTime(7, 30), absolute_offset_seconds=27000)]
    now = datetime(2026, 10, 14, 6, 45)

    full = formatter.format_board(_board(_countdown(15), upcoming, is_full_list=True), now)
    extended = formatter.format_board(_board(_countdown(15), upcoming, is_extended_view=True), now)

    assert "Full schedule:" in full
    assert "Next 48 hours:" in extended


def test_board_to_dict(formatter: CountdownFormatter) -> None:
    """Given a board, when converting to a dict, then it is JSON-friendly."""
    upcoming = [
        DepartureItem(
            clock_time=ClockTime(7, 30),
            absolute_offset_seconds=27000,
            badges=(Badge.of(BadgeKind.ESTIMATED),),
        )
    ]
    result = formatter.board_to_dict(_board(_countdown(15), upcoming))

    assert result["route_id"] == "NR334"
    assert result["service_day"] == {
        "day_type": "weekday",
        "service_date": "2026-10-14",
        "was_shifted_back": False,
        "override": "auto",
    }
    assert result["countdown"]["target"] == "07:00"
    assert result["countdown"]["display"] == "15:00 min"
    assert result["countdown"]["urgency"] == "normal"
    assert result["upcoming"] == [
        {
            "time": "07:30",
            "offset_seconds": 27000,
            "day_label": None,
            "badges": [{"kind": "estimated", "severity": "neutral"}],
        }
    ]
