"""Service-day resolution."""

import logging
from datetime import datetime, timedelta

from timetable_countdown.domain.models.clock_time import ClockTime
from timetable_countdown.domain.models.day_type import ScheduleOverride
from timetable_countdown.domain.models.errors import FormatError
from timetable_countdown.domain.models.service_day import ServiceDay, ServiceDayDepartures
from timetable_countdown.domain.ports.calendar_classifier import CalendarClassifier
from timetable_countdown.domain.ports.timetable_repository import TimetableRepository

logger = logging.getLogger(__name__)


def seconds_since_midnight(moment: datetime) -> int:
    """Return the time-of-day of a moment in whole seconds (0-86399)."""
    return moment.hour * 3600 + moment.minute * 60 + moment.second


class ServiceDayResolver:
    """Maps a moment to the service day whose timetable governs it.

    Timetables run past civil midnight, so in ``auto`` mode anything before
    ``service_day_start_hour`` belongs to the previous calendar day.
    """

    def __init__(
        self,
        calendar: CalendarClassifier,
        timetable_repository: TimetableRepository,
        service_day_start_hour: int = 6,
    ) -> None:
        """Initialize the resolver.

        Args:
            calendar: Classifier turning calendar dates into day-types.
            timetable_repository: Read-only timetable store.
            service_day_start_hour: Local hour at which a new service day begins.
        """
        self._calendar = calendar
        self._timetable_repository = timetable_repository
        self._service_day_start_hour = service_day_start_hour

    def resolve(
        self, now: datetime, override: ScheduleOverride = ScheduleOverride.AUTO
    ) -> ServiceDay:
        """Resolve the service day for ``now`` (civil time in the service timezone)."""
        forced_day_type = override.day_type
        if forced_day_type is not None:
            return ServiceDay(
                day_type=forced_day_type,
                service_date=now.date(),
                was_shifted_back=False,
                override=override,
            )

        service_date = now.date()
        was_shifted_back = now.hour < self._service_day_start_hour
        if was_shifted_back:
            service_date -= timedelta(days=1)

        day_type = self._calendar.classify(service_date)
        logger.debug(
            f"Resolved service day {service_date} ({day_type.value}) for {now:%Y-%m-%d %H:%M:%S}"
            + (" (shifted back)" if was_shifted_back else "")
        )
        return ServiceDay(
            day_type=day_type,
            service_date=service_date,
            was_shifted_back=was_shifted_back,
            override=override,
        )

    def get_service_day_departures(
        self,
        service_day: ServiceDay,
        route_id: str,
        direction_index: int,
        day_offset: int = 0,
    ) -> ServiceDayDepartures:
        """Get the departures of the service day ``day_offset`` days after ``service_day``.

        In ``auto`` mode each later day is reclassified through the calendar; a
        manual override repeats the forced day-type for every day.

        A timetable entry that is not a valid ``HH:MM`` value makes this single
        lookup come back empty (logged), rather than failing the whole query.
        """
        if day_offset < 0:
            raise ValueError("day_offset must not be negative")

        service_date = service_day.service_date + timedelta(days=day_offset)
        if day_offset == 0 or service_day.override.is_manual:
            day_type = service_day.day_type
        else:
            day_type = self._calendar.classify(service_date)

        raw_times = self._timetable_repository.lookup(route_id, direction_index, day_type)
        try:
            times = tuple(ClockTime.parse(value) for value in raw_times)
        except FormatError as e:
            logger.warning(
                f"Ignoring timetable for {route_id} direction {direction_index} "
                f"({day_type.value}): {e}"
            )
            times = ()

        day_label = None if day_offset == 0 else service_date.strftime("%a %d %b")
        return ServiceDayDepartures(
            day_offset=day_offset,
            service_date=service_date,
            day_type=day_type,
            times=times,
            day_label=day_label,
        )
