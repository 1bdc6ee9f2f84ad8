"""Formatter for countdowns and departure boards."""

from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from timetable_countdown.adapters.config.app_config import AppConfig
from timetable_countdown.domain.contracts.countdown_formatter import CountdownFormatterProtocol
from timetable_countdown.domain.models.badge import Badge
from timetable_countdown.domain.models.countdown import Countdown
from timetable_countdown.domain.models.departure_board import DepartureBoard
from timetable_countdown.domain.models.departure_item import DepartureItem

NO_TARGET = "--:--"


class CountdownFormatter(CountdownFormatterProtocol):
    """Formatter for countdowns based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone settings.
        """
        self.config = config

    def format_countdown(self, countdown: Countdown) -> str:
        """Format the remaining time (``H:MM hr``, ``M:SS min`` or ``S sec``)."""
        if not countdown.available:
            return "No more service"
        if countdown.minutes >= 60:
            hours, minutes = divmod(countdown.minutes, 60)
            return f"{hours}:{minutes:02d} hr"
        if countdown.minutes >= 1:
            return f"{countdown.minutes}:{countdown.seconds:02d} min"
        return f"{countdown.seconds} sec"

    def format_target(self, countdown: Countdown) -> str:
        """Format the target departure time, or ``--:--`` when unavailable."""
        if countdown.target_clock_time is None:
            return NO_TARGET
        return str(countdown.target_clock_time)

    def urgency(self, countdown: Countdown) -> str:
        """Classify how close the departure is."""
        if not countdown.available:
            return "unavailable"
        if countdown.minutes < 1:
            return "imminent"
        if countdown.minutes < 5:
            return "soon"
        return "normal"

    def format_badges(self, badges: tuple[Badge, ...]) -> str:
        return " ".join(f"[{badge.kind.value.upper()}]" for badge in badges)

    def format_item(self, item: DepartureItem) -> str:
        """Format one upcoming departure with its badges and day label."""
        text = f"{item.clock_time}  {self.format_badges(item.badges)}"
        if item.day_label:
            text += f"  ({item.day_label})"
        return text

    def format_now(self, now: datetime) -> str:
        """Format the current time in the configured timezone."""
        server_timezone = ZoneInfo(self.config.timezone)
        if now.tzinfo is not None:
            now = now.astimezone(server_timezone)
        return now.strftime("%Y-%m-%d %a %H:%M:%S")

    def format_board(self, board: DepartureBoard, now: datetime, route_name: str = "") -> str:
        """Render a board as plain text."""
        service_day = board.service_day
        countdown = board.countdown
        status = f"{self.format_now(now)}  [{service_day.day_type.value}]"
        if service_day.override.is_manual:
            status += f" (override: {service_day.override.value})"
        next_line = (
            f"Next departure: {self.format_target(countdown)}  {self.format_countdown(countdown)}"
        )
        if countdown.badges:
            next_line += f"  {self.format_badges(countdown.badges)}"
        lines = [
            status,
            f"{route_name or board.route_id} - direction {board.direction_index}",
            "",
            next_line,
        ]
        if board.upcoming:
            if board.is_full_list:
                header = "Full schedule"
            elif board.is_extended_view:
                header = "Next 48 hours"
            else:
                header = "Later departures"
            lines.extend(["", f"{header}:"])
            lines.extend(f"  {self.format_item(item)}" for item in board.upcoming)
        if board.companion_route_id:
            lines.extend(["", f"See also: {board.companion_route_id}"])
        return "\n".join(lines)

    def board_to_dict(self, board: DepartureBoard) -> dict[str, Any]:
        """Convert a board to a JSON-serializable dict."""
        countdown = board.countdown
        return {
            "route_id": board.route_id,
            "direction": board.direction_index,
            "service_day": {
                "day_type": board.service_day.day_type.value,
                "service_date": board.service_day.service_date.isoformat(),
                "was_shifted_back": board.service_day.was_shifted_back,
                "override": board.service_day.override.value,
            },
            "countdown": {
                "available": countdown.available,
                "minutes": countdown.minutes,
                "seconds": countdown.seconds,
                "target": self.format_target(countdown),
                "display": self.format_countdown(countdown),
                "urgency": self.urgency(countdown),
                "badges": [self._badge_to_dict(b) for b in countdown.badges],
            },
            "upcoming": [
                {
                    "time": str(item.clock_time),
                    "offset_seconds": item.absolute_offset_seconds,
                    "day_label": item.day_label,
                    "badges": [self._badge_to_dict(b) for b in item.badges],
                }
                for item in board.upcoming
            ],
            "is_full_list": board.is_full_list,
            "is_extended_view": board.is_extended_view,
            "companion_route_id": board.companion_route_id,
        }

    @staticmethod
    def _badge_to_dict(badge: Badge) -> dict[str, str]:
        return {"kind": badge.kind.value, "severity": badge.severity.value}
