"""Tests for application wiring and the watch loop."""

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from timetable_countdown.adapters.config import AppConfig
from timetable_countdown.main import build_application, main, watch

EXAMPLE_CONFIG = str(Path(__file__).resolve().parent.parent / "config.example.toml")


@pytest.fixture
def app():
    config = AppConfig(
        config_file=EXAMPLE_CONFIG, refresh_interval_seconds=0.001, _env_file=None
    )
    return build_application(config)


def test_build_application_loads_example_config(app) -> None:
    """Given the example config, when building the application, then routes are available."""
    assert len(app.route_catalog.list_routes()) == 7
    assert app.config.default_route == "NR338"
    assert app.now().tzinfo is not None


@pytest.mark.asyncio
async def test_watch_recomputes_each_tick(app) -> None:
    """Given a moving clock, when watching, then each tick renders a fresh countdown."""
    ticks = iter([datetime(2026, 10, 14, 6, 50, 0), datetime(2026, 10, 14, 6, 50, 1)])
    output: list[str] = []

    await watch(app, "NR334", iterations=2, clock=lambda: next(ticks), output=output.append)

    assert len(output) == 2
    assert "10:00 min" in output[0]
    assert "9:59 min" in output[1]


@pytest.mark.asyncio
async def test_watch_follows_rollover(app) -> None:
    """Given the clock passes the last departure, when watching, then the next day is targeted."""
    start = datetime(2026, 10, 14, 22, 29, 59)
    ticks = iter([start, start + timedelta(seconds=2)])
    output: list[str] = []

    await watch(app, "NR334", iterations=2, clock=lambda: next(ticks), output=output.append)

    assert "Next departure: 22:30  1 sec" in output[0]
    assert "Next departure: 06:00  7:29 hr" in output[1]


@pytest.mark.asyncio
async def test_main_exits_without_routes(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Given a config without routes, when starting, then the process exits with status 1."""
    config_file = tmp_path / "empty.toml"
    config_file.write_text('rules_version = "empty"\n')
    monkeypatch.setenv("CONFIG_FILE", str(config_file))

    with pytest.raises(SystemExit) as exc_info:
        await main()

    assert exc_info.value.code == 1


@pytest.mark.asyncio
async def test_main_exits_on_missing_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a missing config file, when starting, then the process exits with status 1."""
    monkeypatch.setenv("CONFIG_FILE", "/nonexistent/config.toml")

    with pytest.raises(SystemExit) as exc_info:
        await main()

    assert exc_info.value.code == 1


def test_last_sunday_departure_is_flagged(app) -> None:
    """Given the last Sunday bus to Central, when querying, then the countdown carries LAST."""
    board = app.query_service.query(datetime(2026, 10, 18, 22, 45), "NR338")

    assert str(board.countdown.target_clock_time) == "23:00"
    assert [badge.kind.value for badge in board.countdown.badges] == ["last"]
