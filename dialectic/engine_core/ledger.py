"""
Authenticity Ledger - Append-only record of moral impacts.

Every change to a player's authenticity value goes through apply_impact():
1. Append a LogEntry stamped by the injected clock
2. Move the value, clamped to [0, 100]
3. Evaluate marker rules against the full history
4. Add newly triggered markers (markers are never removed)

Marker evaluation reads only the stored history, so replaying the same
history under the same rules awards the same markers.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Sequence

from .errors import ValidationError
from .rules import DEFAULT_RULES, RuleSet, replay_value
from .state import (
    AUTHENTICITY_MAX,
    AUTHENTICITY_MIN,
    AuthenticityMetric,
    ImpactSource,
    LogEntry,
    PlayerState,
    clamp,
)
from .templates import PermanentMarker, PhilosophicalAlignment

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class AuthenticityLedger:
    """
    Applies impacts to a player's AuthenticityMetric in place.

    Callers pass a working copy obtained from a registry transaction;
    the ledger never persists anything itself.
    """
    rules: RuleSet = DEFAULT_RULES
    clock: Callable[[], str] = field(default=utc_timestamp)

    def apply_impact(
        self,
        player: PlayerState,
        amount: float,
        reason: str,
        label: str,
        source: ImpactSource = ImpactSource.CHOICE,
        alignment_influence: PhilosophicalAlignment | None = None,
    ) -> AuthenticityMetric:
        """
        Record one impact and return the updated metric.

        Raises ValidationError for a non-finite amount.
        """
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise ValidationError(f"Impact must be a number, got {amount!r}")
        if not math.isfinite(amount):
            raise ValidationError("Impact must be finite")

        entry = LogEntry(
            timestamp=self.clock(),
            choice=label,
            impact=float(amount),
            reason=reason,
            source=source,
            alignment_influence=alignment_influence,
            alignment_at_time=player.philosophical_alignment,
        )

        metric = player.authenticity_metric
        metric.history.append(entry)
        metric.value = clamp(metric.value + entry.impact, AUTHENTICITY_MIN, AUTHENTICITY_MAX)

        for marker in self.evaluate_markers(metric.history):
            if not metric.has_marker(marker):
                metric.permanent_markers.append(marker)
                logger.info(
                    "Player %s earned permanent marker %s", player.player_id, marker.value
                )

        return metric

    def evaluate_markers(self, history: Sequence[LogEntry]) -> list[PermanentMarker]:
        """Markers whose rules hold for this history, in rule order."""
        return [rule.marker for rule in self.rules.marker_rules if rule.evaluate(history)]

    @staticmethod
    def is_consistent(metric: AuthenticityMetric) -> bool:
        """True if value matches a replay of its own history."""
        return math.isclose(metric.value, replay_value(metric.history), abs_tol=1e-9)
