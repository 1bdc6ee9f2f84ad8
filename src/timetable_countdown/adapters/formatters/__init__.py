"""Formatters for presentation."""

from timetable_countdown.adapters.formatters.countdown_formatter import CountdownFormatter

__all__ = ["CountdownFormatter"]
