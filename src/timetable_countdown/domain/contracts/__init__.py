"""Contracts (protocols) consumed by the presentation layer."""

from timetable_countdown.domain.contracts.countdown_formatter import CountdownFormatterProtocol

__all__ = ["CountdownFormatterProtocol"]
