"""Next-departure lookup with day rollover."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from timetable_countdown.application.services.service_day_resolver import ServiceDayResolver
from timetable_countdown.domain.models.clock_time import SECONDS_PER_DAY, ClockTime
from timetable_countdown.domain.models.service_day import ServiceDay, ServiceDayDepartures

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NextDeparture:
    """A departure located in a specific service day."""

    clock_time: ClockTime
    day: ServiceDayDepartures

    @property
    def day_offset(self) -> int:
        return self.day.day_offset

    @property
    def absolute_offset_seconds(self) -> int:
        return self.day_offset * SECONDS_PER_DAY + self.clock_time.seconds

    @property
    def is_last_in_day(self) -> bool:
        return self.day.times[-1] == self.clock_time


class DepartureFinder:
    """Finds the departure a countdown should target."""

    def __init__(self, resolver: ServiceDayResolver, rollover_max_days: int = 1) -> None:
        """Initialize the finder.

        Args:
            resolver: Resolver used to fetch later service days.
            rollover_max_days: How many days to search forward once today is exhausted.
        """
        self._resolver = resolver
        self._rollover_max_days = rollover_max_days

    @staticmethod
    def find_next(departures: Sequence[ClockTime], now_offset_seconds: int) -> ClockTime | None:
        """Return the first departure strictly after ``now_offset_seconds``.

        A departure at exactly the current second counts as gone.
        """
        for departure in departures:
            if departure.seconds > now_offset_seconds:
                return departure
        return None

    def find_across_days(
        self,
        service_day: ServiceDay,
        route_id: str,
        direction_index: int,
        start_offset: int = 1,
        max_days: int | None = None,
    ) -> NextDeparture | None:
        """Walk forward over later service days and return the first departure found."""
        last_offset = self._rollover_max_days if max_days is None else max_days
        for day_offset in range(start_offset, last_offset + 1):
            day = self._resolver.get_service_day_departures(
                service_day, route_id, direction_index, day_offset
            )
            if day.times:
                logger.debug(
                    f"Rolled over to {day.service_date} for {route_id} "
                    f"direction {direction_index}: first departure {day.times[0]}"
                )
                return NextDeparture(clock_time=day.times[0], day=day)
        return None

    def find_next_departure(
        self,
        service_day: ServiceDay,
        route_id: str,
        direction_index: int,
        now_offset_seconds: int,
        today: ServiceDayDepartures | None = None,
    ) -> NextDeparture | None:
        """Find the next departure today, or roll over to a later service day."""
        if today is None:
            today = self._resolver.get_service_day_departures(
                service_day, route_id, direction_index, 0
            )
        next_time = self.find_next(today.times, now_offset_seconds)
        if next_time is not None:
            return NextDeparture(clock_time=next_time, day=today)
        return self.find_across_days(service_day, route_id, direction_index)
