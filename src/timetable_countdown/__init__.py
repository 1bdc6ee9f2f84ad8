"""Countdown and upcoming-departure engine for static per-route timetables."""

__version__ = "0.1.0"
