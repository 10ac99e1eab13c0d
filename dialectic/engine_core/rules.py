"""
Rule Tables - Every tunable number and predicate the engines consult.

Nothing in the engines hard-codes a balance constant; they read a
RuleSet. Defaults live here and can be overridden from a JSON file:

    {
        "levelThresholds": [0, 80, 200],
        "alignmentMargin": 3,
        "difficultyMultipliers": {"Expert": 2.5},
        "markerRules": [
            {"marker": "Hypocrite", "kind": "contradictions", "threshold": 4, "window": 8}
        ]
    }
"""

from __future__ import annotations
import json
from bisect import bisect_right
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Sequence

from .state import (
    AUTHENTICITY_MAX,
    AUTHENTICITY_MIN,
    AUTHENTICITY_START,
    ImpactSource,
    LogEntry,
    clamp,
)
from .templates import Difficulty, FallacyType, PermanentMarker, PhilosophicalAlignment


class MarkerRuleKind:
    CONTRADICTIONS = "contradictions"
    NEGATIVE_IMPACTS = "negative_impacts"
    PEAK_VALUE = "peak_value"

    ALL = (CONTRADICTIONS, NEGATIVE_IMPACTS, PEAK_VALUE)


def replay_value(history: Sequence[LogEntry], start: float = AUTHENTICITY_START) -> float:
    """Fold history impacts with clamping at every step."""
    value = start
    for entry in history:
        value = clamp(value + entry.impact, AUTHENTICITY_MIN, AUTHENTICITY_MAX)
    return value


@dataclass(frozen=True)
class MarkerRule:
    """
    A content-defined trigger for a permanent marker.

    Kinds:
    - contradictions: choice entries whose influence differs from the
      alignment held at the time (neither Undecided), counted in window
    - negative_impacts: entries with impact < 0 from any of `sources`
      (every source if empty), in window
    - peak_value: the replayed value ever reached `threshold`
      (window is ignored; the whole history counts)
    """
    marker: PermanentMarker
    kind: str
    threshold: float
    window: int | None = 10
    sources: tuple[ImpactSource, ...] = ()

    def evaluate(self, history: Sequence[LogEntry]) -> bool:
        """Pure function of history."""
        if self.kind == MarkerRuleKind.PEAK_VALUE:
            value = AUTHENTICITY_START
            for entry in history:
                value = clamp(value + entry.impact, AUTHENTICITY_MIN, AUTHENTICITY_MAX)
                if value >= self.threshold:
                    return True
            return False

        recent = history[-self.window:] if self.window else history

        if self.kind == MarkerRuleKind.CONTRADICTIONS:
            count = sum(1 for entry in recent if _is_contradiction(entry))
            return count >= self.threshold

        if self.kind == MarkerRuleKind.NEGATIVE_IMPACTS:
            count = sum(
                1 for entry in recent
                if entry.impact < 0 and (not self.sources or entry.source in self.sources)
            )
            return count >= self.threshold

        raise ValueError(f"Unknown marker rule kind: {self.kind}")


def _is_contradiction(entry: LogEntry) -> bool:
    if entry.source != ImpactSource.CHOICE:
        return False
    influence = entry.alignment_influence
    held = entry.alignment_at_time
    if influence is None:
        return False
    if PhilosophicalAlignment.UNDECIDED in (influence, held):
        return False
    return influence != held


DEFAULT_MARKER_RULES = (
    MarkerRule(PermanentMarker.HYPOCRITE, MarkerRuleKind.CONTRADICTIONS, 3, window=10),
    MarkerRule(
        PermanentMarker.HEDONIST, MarkerRuleKind.NEGATIVE_IMPACTS, 3,
        window=10, sources=(ImpactSource.ITEM, ImpactSource.TEMPTATION),
    ),
    MarkerRule(
        PermanentMarker.SOPHIST, MarkerRuleKind.NEGATIVE_IMPACTS, 3,
        window=10, sources=(ImpactSource.COMBAT,),
    ),
    MarkerRule(PermanentMarker.MARTYR, MarkerRuleKind.PEAK_VALUE, 90, window=None),
)


DEFAULT_STARTER_FALLACIES = {
    PhilosophicalAlignment.UTILITARIAN: (FallacyType.APPEAL_TO_CONSEQUENCES, FallacyType.STRAW_MAN),
    PhilosophicalAlignment.EXISTENTIALIST: (FallacyType.APPEAL_TO_AUTHORITY, FallacyType.AD_HOMINEM),
    PhilosophicalAlignment.NIHILIST: (FallacyType.CIRCULAR_REASONING, FallacyType.AD_HOMINEM),
    PhilosophicalAlignment.UNDECIDED: (FallacyType.AD_HOMINEM, FallacyType.STRAW_MAN),
}


@dataclass(frozen=True)
class RuleSet:
    """Balance tables for every engine."""
    # Progression
    level_thresholds: tuple[int, ...] = (0, 100, 250, 450, 700, 1000, 1400, 1900, 2500, 3200)
    base_hit_points: int = 20
    hit_points_per_body: int = 2
    hit_points_per_level: int = 5

    # Character creation
    default_attribute: int = 5
    max_name_length: int = 64
    starter_fallacies: dict[PhilosophicalAlignment, tuple[FallacyType, ...]] = field(
        default_factory=lambda: dict(DEFAULT_STARTER_FALLACIES)
    )

    # Capacity
    inventory_capacity: int = 12
    fallacy_slots: int = 4

    # Alignment drift
    alignment_window: int = 6
    alignment_margin: int = 2

    # Combat
    difficulty_multipliers: dict[Difficulty, float] = field(
        default_factory=lambda: {
            Difficulty.EASY: 1.0,
            Difficulty.MEDIUM: 1.25,
            Difficulty.HARD: 1.5,
            Difficulty.EXPERT: 2.0,
        }
    )
    weakness_multiplier: float = 1.5
    unarmed_mind_divisor: int = 2
    heart_mitigation_divisor: int = 4

    # Authenticity
    marker_rules: tuple[MarkerRule, ...] = DEFAULT_MARKER_RULES

    @property
    def max_level(self) -> int:
        return len(self.level_thresholds)

    def level_for_experience(self, experience: int) -> int:
        """Number of thresholds reached; thresholds[0] is level 1."""
        return max(1, bisect_right(self.level_thresholds, experience))

    def max_hit_points(self, body: int, level: int) -> int:
        return max(
            1,
            self.base_hit_points
            + body * self.hit_points_per_body
            + (level - 1) * self.hit_points_per_level,
        )

    def difficulty_multiplier(self, difficulty: Difficulty) -> float:
        return self.difficulty_multipliers.get(difficulty, 1.0)


DEFAULT_RULES = RuleSet()


# Keys accepted in a rules override file -> RuleSet field
_SCALAR_KEYS = {
    "baseHitPoints": "base_hit_points",
    "hitPointsPerBody": "hit_points_per_body",
    "hitPointsPerLevel": "hit_points_per_level",
    "defaultAttribute": "default_attribute",
    "maxNameLength": "max_name_length",
    "inventoryCapacity": "inventory_capacity",
    "fallacySlots": "fallacy_slots",
    "alignmentWindow": "alignment_window",
    "alignmentMargin": "alignment_margin",
    "weaknessMultiplier": "weakness_multiplier",
    "unarmedMindDivisor": "unarmed_mind_divisor",
    "heartMitigationDivisor": "heart_mitigation_divisor",
}

# Must be >= 1; several are divisors or window widths
_AT_LEAST_ONE = (
    "fallacySlots",
    "alignmentWindow",
    "unarmedMindDivisor",
    "heartMitigationDivisor",
    "maxNameLength",
    "baseHitPoints",
)


def rules_from_dict(data: dict[str, Any], base: RuleSet = DEFAULT_RULES) -> RuleSet:
    """
    Overlay a camelCase override dict on a RuleSet.

    Raises ValueError for unknown keys, non-monotonic level thresholds,
    or a value below 1 for any key in _AT_LEAST_ONE.
    """
    changes: dict[str, Any] = {}

    for key, value in data.items():
        if key in _SCALAR_KEYS:
            changes[_SCALAR_KEYS[key]] = value
        elif key == "levelThresholds":
            thresholds = tuple(int(v) for v in value)
            if not thresholds or thresholds[0] != 0:
                raise ValueError("levelThresholds must start at 0")
            if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
                raise ValueError("levelThresholds must be strictly increasing")
            changes["level_thresholds"] = thresholds
        elif key == "difficultyMultipliers":
            merged = dict(base.difficulty_multipliers)
            for name, multiplier in value.items():
                merged[Difficulty(name)] = float(multiplier)
            changes["difficulty_multipliers"] = merged
        elif key == "starterFallacies":
            merged = dict(base.starter_fallacies)
            for name, types in value.items():
                merged[PhilosophicalAlignment(name)] = tuple(FallacyType(t) for t in types)
            changes["starter_fallacies"] = merged
        elif key == "markerRules":
            changes["marker_rules"] = tuple(_marker_rule_from_dict(r) for r in value)
        else:
            raise ValueError(f"Unknown rules key: {key}")

    for camel in _AT_LEAST_ONE:
        snake = _SCALAR_KEYS[camel]
        if changes.get(snake, getattr(base, snake)) < 1:
            raise ValueError(f"{camel} must be at least 1")

    return replace(base, **changes)


def _marker_rule_from_dict(data: dict[str, Any]) -> MarkerRule:
    kind = data["kind"]
    if kind not in MarkerRuleKind.ALL:
        raise ValueError(f"Unknown marker rule kind: {kind}")
    window = data.get("window", 10)
    if window is not None and window < 1:
        raise ValueError("Marker rule window must be at least 1 or null")
    # a single "source" string is accepted for hand-written files
    sources = data.get("sources")
    if sources is None:
        sources = [data["source"]] if data.get("source") else []
    return MarkerRule(
        marker=PermanentMarker(data["marker"]),
        kind=kind,
        threshold=data["threshold"],
        window=window,
        sources=tuple(ImpactSource(s) for s in sources),
    )


def load_rules(path: str | Path | None) -> RuleSet:
    """Load overrides from a JSON file; None means defaults."""
    if path is None:
        return DEFAULT_RULES
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return rules_from_dict(data)


def rules_to_dict(rules: RuleSet) -> dict[str, Any]:
    """Camelcase dump, the same shape rules_from_dict accepts."""
    data: dict[str, Any] = {
        camel: getattr(rules, snake) for camel, snake in _SCALAR_KEYS.items()
    }
    data["levelThresholds"] = list(rules.level_thresholds)
    data["difficultyMultipliers"] = {
        d.value: m for d, m in rules.difficulty_multipliers.items()
    }
    data["starterFallacies"] = {
        a.value: [t.value for t in types] for a, types in rules.starter_fallacies.items()
    }
    data["markerRules"] = [
        {
            "marker": r.marker.value,
            "kind": r.kind,
            "threshold": r.threshold,
            "window": r.window,
            "sources": [s.value for s in r.sources],
        }
        for r in rules.marker_rules
    ]
    return data
