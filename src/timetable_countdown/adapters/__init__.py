"""Adapters layer - configuration, calendar, timetable store and formatters."""
