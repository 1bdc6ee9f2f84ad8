"""Badge rule loader."""

from typing import Any

from timetable_countdown.adapters.config.app_config import AppConfig
from timetable_countdown.domain.models.badge import BadgeKind, BadgeSeverity
from timetable_countdown.domain.models.badge_rule import BadgeRule, BadgeRuleBook
from timetable_countdown.domain.models.clock_time import ClockTime
from timetable_countdown.domain.models.errors import FormatError


class BadgeRuleLoader:
    """Loads the badge rule book from app config."""

    @staticmethod
    def _kind(value: Any, context: str) -> BadgeKind:
        try:
            return BadgeKind(str(value).lower())
        except ValueError as e:
            raise ValueError(f"{context}: unknown badge kind '{value}'") from e

    @staticmethod
    def load_rule_from_data(rule_data: dict[str, Any]) -> BadgeRule:
        """Load a single badge rule from a data dict.

        Raises:
            ValueError: If the rule is incomplete or names unknown kinds or times.
        """
        route_id = rule_data.get("route_id")
        if not route_id:
            raise ValueError("All badge rules must have a 'route_id' field")
        route_id = str(route_id)

        try:
            direction_index = int(rule_data.get("direction", 0))
        except (ValueError, TypeError) as e:
            raise ValueError(f"Badge rule for {route_id}: direction must be an integer") from e
        context = f"Badge rule for {route_id} direction {direction_index}"

        try:
            times = {
                ClockTime.parse(str(t)): BadgeRuleLoader._kind(kind, context)
                for t, kind in dict(rule_data.get("times", {})).items()
            }
            last_times = frozenset(ClockTime.parse(str(t)) for t in rule_data.get("last_times", []))
        except FormatError as e:
            raise ValueError(f"{context}: {e}") from e

        minutes: dict[int, BadgeKind] = {}
        for minute, kind in dict(rule_data.get("minutes", {})).items():
            try:
                minute_value = int(minute)
            except ValueError as e:
                raise ValueError(f"{context}: invalid minute '{minute}'") from e
            if not 0 <= minute_value <= 59:
                raise ValueError(f"{context}: invalid minute '{minute}'")
            minutes[minute_value] = BadgeRuleLoader._kind(kind, context)

        severity = rule_data.get("severity")
        if severity is not None:
            try:
                severity = BadgeSeverity(str(severity).lower())
            except ValueError as e:
                raise ValueError(f"{context}: unknown severity '{severity}'") from e

        rule = BadgeRule(
            route_id=route_id,
            direction_index=direction_index,
            times=times,
            minutes=minutes,
            last_times=last_times,
            severity=severity,
        )
        if rule.is_empty:
            raise ValueError(f"{context}: needs at least one of times, minutes or last_times")
        return rule

    @staticmethod
    def load(config: AppConfig) -> BadgeRuleBook:
        """Load the badge rule book from app config."""
        rules_data, version = config.get_badge_rules_config()
        rules = tuple(BadgeRuleLoader.load_rule_from_data(r) for r in rules_data)
        return BadgeRuleBook(rules=rules, version=version)
