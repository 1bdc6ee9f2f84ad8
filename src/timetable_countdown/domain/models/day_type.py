"""Day-type and schedule override domain models."""

from enum import Enum


class DayType(str, Enum):
    """Timetable variant that governs a service day."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY_OR_HOLIDAY = "sunday_or_holiday"


class ScheduleOverride(str, Enum):
    """Manual pin of the day-type, or ``auto`` to follow the calendar."""

    AUTO = "auto"
    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def is_manual(self) -> bool:
        return self is not ScheduleOverride.AUTO

    @property
    def day_type(self) -> DayType | None:
        """Day-type forced by this override, or None for ``auto``."""
        return _OVERRIDE_DAY_TYPES.get(self)

    def next(self) -> "ScheduleOverride":
        """Return the next mode in the auto -> weekday -> saturday -> sunday cycle."""
        members = list(ScheduleOverride)
        return members[(members.index(self) + 1) % len(members)]


_OVERRIDE_DAY_TYPES = {
    ScheduleOverride.WEEKDAY: DayType.WEEKDAY,
    ScheduleOverride.SATURDAY: DayType.SATURDAY,
    ScheduleOverride.SUNDAY: DayType.SUNDAY_OR_HOLIDAY,
}
