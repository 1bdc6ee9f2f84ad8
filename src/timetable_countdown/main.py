"""Main entry point for the timetable countdown application."""

import asyncio
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from timetable_countdown.adapters.calendar import HolidayCalendarClassifier
from timetable_countdown.adapters.config import (
    AppConfig,
    BadgeRuleLoader,
    HolidayLoader,
    RouteCatalogLoader,
)
from timetable_countdown.adapters.formatters import CountdownFormatter
from timetable_countdown.adapters.timetable import (
    InMemoryRouteCatalog,
    InMemoryTimetableRepository,
)
from timetable_countdown.application.services import (
    BadgeAnnotator,
    DepartureFinder,
    DepartureQueryService,
    ServiceDayResolver,
    WindowAggregator,
)
from timetable_countdown.domain.models import ScheduleOverride

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Application:
    """Wired application components."""

    config: AppConfig
    route_catalog: InMemoryRouteCatalog
    query_service: DepartureQueryService
    formatter: CountdownFormatter

    def now(self) -> datetime:
        """Current wall-clock time in the service timezone."""
        return datetime.now(self.config.zone())


def build_application(config: AppConfig) -> Application:
    """Load the static data and wire the query engine.

    Raises:
        FileNotFoundError: If the TOML file does not exist.
        ValueError: If the TOML file is structurally invalid.
    """
    catalog_data = RouteCatalogLoader.load(config)
    rule_book = BadgeRuleLoader.load(config)
    holidays = HolidayLoader.load(config)
    logger.info(
        f"Loaded {len(catalog_data.routes)} route(s), {len(rule_book.rules)} badge rule(s)"
        + (f" (rules version {rule_book.version})" if rule_book.version else "")
        + f", {len(holidays)} holiday(s)"
    )

    route_catalog = InMemoryRouteCatalog(catalog_data.routes)
    timetable_repository = InMemoryTimetableRepository(catalog_data.timetables)
    calendar = HolidayCalendarClassifier(holidays)

    resolver = ServiceDayResolver(
        calendar,
        timetable_repository,
        service_day_start_hour=config.service_day_start_hour,
    )
    annotator = BadgeAnnotator(rule_book)
    query_service = DepartureQueryService(
        route_catalog=route_catalog,
        resolver=resolver,
        finder=DepartureFinder(resolver, rollover_max_days=config.rollover_max_days),
        aggregator=WindowAggregator(resolver, annotator),
        annotator=annotator,
        upcoming_limit=config.upcoming_limit,
        full_list_gap_minutes=config.full_list_gap_minutes,
        timezone=config.zone(),
    )
    return Application(
        config=config,
        route_catalog=route_catalog,
        query_service=query_service,
        formatter=CountdownFormatter(config),
    )


async def watch(
    app: Application,
    route_id: str,
    direction_index: int = 0,
    override: ScheduleOverride = ScheduleOverride.AUTO,
    extended: bool = False,
    iterations: int | None = None,
    clock: Callable[[], datetime] | None = None,
    output: Callable[[str], None] = print,
) -> None:
    """Re-evaluate and print the board once per refresh interval.

    Each tick is a full recomputation; ``iterations`` bounds the loop (None runs forever).
    """
    clock = clock or app.now
    route = app.route_catalog.get_route(route_id)
    clear_screen = sys.stdout.isatty() and output is print
    tick = 0
    while iterations is None or tick < iterations:
        now = clock()
        board = app.query_service.query(now, route_id, direction_index, override, extended)
        if clear_screen:
            output("\033[2J\033[H")
        output(app.formatter.format_board(board, now, route.name))
        tick += 1
        if iterations is None or tick < iterations:
            await asyncio.sleep(app.config.refresh_interval_seconds)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    logging.getLogger().setLevel(config.log_level)

    try:
        app = build_application(config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid timetable configuration: {e}")
        sys.exit(1)

    routes = app.route_catalog.list_routes()
    if not routes:
        logger.error("No routes configured.")
        logger.error("Please configure [[routes]] in your config.toml file.")
        sys.exit(1)

    route_id = config.default_route or routes[0].id
    override = ScheduleOverride(config.schedule_override)
    logger.info(f"Watching route {route_id} (schedule: {override.value})")

    try:
        await watch(app, route_id, override=override)
    except asyncio.CancelledError:
        logger.info("Stopped")


def cli_main() -> None:
    """Synchronous entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    cli_main()
