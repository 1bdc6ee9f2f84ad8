"""Badge annotation driven by declarative rule tables."""

from timetable_countdown.domain.models.badge import Badge, BadgeKind
from timetable_countdown.domain.models.badge_rule import BadgeRule, BadgeRuleBook
from timetable_countdown.domain.models.clock_time import ClockTime


class BadgeAnnotator:
    """Interprets a badge rule book for individual departures.

    Badge order is fixed: LAST first, then at most one rule badge. ESTIMATED is
    only emitted when nothing else applies.
    """

    def __init__(self, rule_book: BadgeRuleBook | None = None) -> None:
        self._rule_book = rule_book or BadgeRuleBook()

    @property
    def rules_version(self) -> str | None:
        return self._rule_book.version

    def annotate(
        self,
        route_id: str,
        direction_index: int,
        clock_time: ClockTime,
        is_last_in_day: bool,
    ) -> list[Badge]:
        """Return the badges for one departure."""
        rules = self._rule_book.rules_for(route_id, direction_index)
        badges: list[Badge] = []

        if self._is_last(rules, clock_time, is_last_in_day):
            badges.append(Badge.of(BadgeKind.LAST))

        rule_badge = self._rule_badge(rules, clock_time)
        if rule_badge is not None:
            badges.append(rule_badge)

        if not badges:
            badges.append(Badge.of(BadgeKind.ESTIMATED))
        return badges

    @staticmethod
    def _is_last(rules: list[BadgeRule], clock_time: ClockTime, is_last_in_day: bool) -> bool:
        # A declared last time replaces the position in the published list
        declared_last_times = {t for rule in rules for t in rule.last_times}
        if declared_last_times:
            return clock_time in declared_last_times
        return is_last_in_day

    @staticmethod
    def _rule_badge(rules: list[BadgeRule], clock_time: ClockTime) -> Badge | None:
        # Exact times win over minute rules
        for rule in rules:
            kind = rule.times.get(clock_time)
            if kind is not None:
                return Badge.of(kind, rule.severity)
        for rule in rules:
            kind = rule.minutes.get(clock_time.minute)
            if kind is not None:
                return Badge.of(kind, rule.severity)
        return None
