"""Command-line interface for querying timetable countdowns."""

import asyncio
import json
import logging
import sys
from datetime import datetime
from typing import Any

from timetable_countdown.adapters.config import AppConfig
from timetable_countdown.domain.models import (
    Route,
    ScheduleOverride,
    TransportKind,
    UnknownDirectionError,
    UnknownRouteError,
)
from timetable_countdown.main import Application, build_application, watch


def parse_at(value: str | None, app: Application) -> datetime:
    """Parse an ``--at`` ISO timestamp; naive values are local service time."""
    if value is None:
        return app.now()
    try:
        return datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid --at timestamp: {value!r} (expected ISO 8601)") from e


def route_to_dict(route: Route) -> dict[str, Any]:
    """Convert a route to a JSON-serializable dict."""
    return {
        "id": route.id,
        "name": route.name,
        "kind": route.kind.value,
        "window_policy": route.window_policy.value,
        "directions": [{"index": d.index, "label": d.label} for d in route.directions],
        "companion_route_id": route.companion_route_id,
    }


def show_board(app: Application, args: Any) -> None:
    """Evaluate and print a single board."""
    now = parse_at(args.at, app)
    override = ScheduleOverride(args.override or app.config.schedule_override)
    route_id = args.route_id or app.config.default_route
    if not route_id:
        raise ValueError("No route given and no default_route configured")

    board = app.query_service.query(now, route_id, args.direction, override, args.extended)
    if args.json:
        print(json.dumps(app.formatter.board_to_dict(board), indent=2, ensure_ascii=False))
    else:
        route = app.route_catalog.get_route(route_id)
        print(app.formatter.format_board(board, now, route.name))


def list_routes(app: Application, args: Any) -> None:
    """Print the route catalogue."""
    kind = TransportKind(args.kind) if args.kind else None
    routes = app.route_catalog.list_routes(kind, args.favorite)
    if args.json:
        print(json.dumps([route_to_dict(r) for r in routes], indent=2, ensure_ascii=False))
        return

    if not routes:
        print("No routes configured", file=sys.stderr)
        sys.exit(1)
    favorites = set(args.favorite or [])
    print(f"\n{len(routes)} route(s):\n")
    for route in routes:
        star = "*" if route.id in favorites else " "
        extendable = " (extendable)" if route.is_extendable else ""
        print(f" {star} {route.id:<18} {route.kind.value:<6} {route.name}{extendable}")
        for direction in route.directions:
            print(f"      [{direction.index}] {direction.label}")
    print()


def show_day_type(app: Application, args: Any) -> None:
    """Print the resolved service day."""
    now = parse_at(args.at, app)
    override = ScheduleOverride(args.override or app.config.schedule_override)
    service_day = app.query_service.resolve_service_day(now, override)
    shifted = " (previous day's service)" if service_day.was_shifted_back else ""
    print(f"{service_day.service_date.isoformat()} {service_day.day_type.value}{shifted}")


def _build_parser() -> Any:
    import argparse

    parser = argparse.ArgumentParser(
        description="Timetable countdown - next departures from static timetables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next departure and later departures for a route
  timetable-countdown board NR334

  # Inbound direction, 48-hour view, at a fixed time
  timetable-countdown board NR338 --direction 1 --extended --at 2026-10-18T23:40

  # Force the Sunday/holiday timetable
  timetable-countdown board NR330 --override sunday

  # List ferry routes, favourites first
  timetable-countdown routes --kind ferry --favorite Ferry-Central

  # Live board, refreshed every second
  timetable-countdown watch NR338
        """,
    )
    overrides = [o.value for o in ScheduleOverride]

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Board command
    board_parser = subparsers.add_parser("board", help="Show countdown and upcoming departures")
    board_parser.add_argument("route_id", nargs="?", help="Route id (defaults to default_route)")
    board_parser.add_argument("--direction", type=int, default=0, help="Direction index (0 or 1)")
    board_parser.add_argument("--override", choices=overrides, help="Schedule override")
    board_parser.add_argument("--extended", action="store_true", help="Extended (48h) view")
    board_parser.add_argument("--at", help="Evaluate at this ISO timestamp instead of now")
    board_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Routes command
    routes_parser = subparsers.add_parser("routes", help="List configured routes")
    routes_parser.add_argument("--kind", choices=[k.value for k in TransportKind])
    routes_parser.add_argument(
        "--favorite", action="append", help="Route id to list first (repeatable)"
    )
    routes_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # Day-type command
    day_type_parser = subparsers.add_parser("day-type", help="Show the resolved service day")
    day_type_parser.add_argument("--at", help="Evaluate at this ISO timestamp instead of now")
    day_type_parser.add_argument("--override", choices=overrides, help="Schedule override")

    # Watch command
    watch_parser = subparsers.add_parser("watch", help="Live board refreshed every interval")
    watch_parser.add_argument("route_id", nargs="?", help="Route id (defaults to default_route)")
    watch_parser.add_argument("--direction", type=int, default=0, help="Direction index (0 or 1)")
    watch_parser.add_argument("--override", choices=overrides, help="Schedule override")
    watch_parser.add_argument("--extended", action="store_true", help="Extended (48h) view")

    parser.add_argument("--config", help="Path to TOML config file (overrides CONFIG_FILE)")
    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig(config_file=args.config) if args.config else AppConfig()
        logging.getLogger().setLevel(config.log_level)
        app = build_application(config)

        if args.command == "board":
            show_board(app, args)

        elif args.command == "routes":
            list_routes(app, args)

        elif args.command == "day-type":
            show_day_type(app, args)

        elif args.command == "watch":
            route_id = args.route_id or config.default_route
            if not route_id:
                raise ValueError("No route given and no default_route configured")
            override = ScheduleOverride(args.override or config.schedule_override)
            await watch(app, route_id, args.direction, override, args.extended)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (UnknownRouteError, UnknownDirectionError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
