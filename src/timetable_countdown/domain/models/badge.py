"""Badge domain model."""

from dataclasses import dataclass
from enum import Enum


class BadgeKind(str, Enum):
    """Semantic annotation attached to a departure."""

    LAST = "last"
    VIA_ALT = "via_alt"
    OVERNIGHT = "overnight"
    NORMAL = "normal"
    ESTIMATED = "estimated"


class BadgeSeverity(str, Enum):
    """Style class the presentation layer maps to a colour."""

    NEUTRAL = "neutral"
    INFO = "info"
    WARNING = "warning"
    ALERT = "alert"


DEFAULT_SEVERITIES: dict[BadgeKind, BadgeSeverity] = {
    BadgeKind.LAST: BadgeSeverity.ALERT,
    BadgeKind.VIA_ALT: BadgeSeverity.WARNING,
    BadgeKind.OVERNIGHT: BadgeSeverity.INFO,
    BadgeKind.NORMAL: BadgeSeverity.NEUTRAL,
    BadgeKind.ESTIMATED: BadgeSeverity.NEUTRAL,
}


@dataclass(frozen=True)
class Badge:
    """A badge kind together with its severity class."""

    kind: BadgeKind
    severity: BadgeSeverity

    @classmethod
    def of(cls, kind: BadgeKind, severity: BadgeSeverity | None = None) -> "Badge":
        """Create a badge, falling back to the kind's default severity."""
        return cls(kind=kind, severity=severity or DEFAULT_SEVERITIES[kind])
