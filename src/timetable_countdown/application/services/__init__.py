"""Application services (use cases) for departure queries."""

from timetable_countdown.application.services.badge_annotator import BadgeAnnotator
from timetable_countdown.application.services.departure_finder import (
    DepartureFinder,
    NextDeparture,
)
from timetable_countdown.application.services.departure_query_service import (
    DepartureQueryService,
)
from timetable_countdown.application.services.service_day_resolver import (
    ServiceDayResolver,
    seconds_since_midnight,
)
from timetable_countdown.application.services.window_aggregator import (
    WindowAggregator,
    WindowResult,
)

__all__ = [
    "BadgeAnnotator",
    "DepartureFinder",
    "DepartureQueryService",
    "NextDeparture",
    "ServiceDayResolver",
    "WindowAggregator",
    "WindowResult",
    "seconds_since_midnight",
]
