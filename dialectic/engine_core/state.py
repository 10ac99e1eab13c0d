"""
Game State - Runtime records the engine mutates.

Design principles:
- PlayerState is the single authoritative record per player
- The authenticity history is append-only
- Serializable: to_dict()/from_dict() produce the camelCase wire shape,
  also used for on-disk persistence
- Enemy instances are ephemeral and never persisted
"""

from __future__ import annotations
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .templates import (
    Difficulty,
    EnemyTemplate,
    Fallacy,
    FallacyType,
    Item,
    ItemType,
    PermanentMarker,
    PhilosophicalAlignment,
    TemporaryEffect,
)

ATTRIBUTE_MIN = 0
ATTRIBUTE_MAX = 20
AUTHENTICITY_MIN = 0.0
AUTHENTICITY_MAX = 100.0
AUTHENTICITY_START = 50.0


def clamp(value, low, high):
    return max(low, min(high, value))


class ImpactSource(Enum):
    """What produced a ledger entry."""
    CHOICE = "choice"
    COMBAT = "combat"
    ITEM = "item"
    TEMPTATION = "temptation"


@dataclass(frozen=True)
class LogEntry:
    """
    One authenticity impact.

    alignment_at_time records the player's stated alignment when the
    entry was written, so marker rules never depend on current state.
    """
    timestamp: str
    choice: str
    impact: float
    reason: str
    source: ImpactSource = ImpactSource.CHOICE
    alignment_influence: PhilosophicalAlignment | None = None
    alignment_at_time: PhilosophicalAlignment = PhilosophicalAlignment.UNDECIDED

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "choice": self.choice,
            "impact": self.impact,
            "reason": self.reason,
            "source": self.source.value,
            "alignmentInfluence": (
                self.alignment_influence.value if self.alignment_influence else None
            ),
            "alignmentAtTime": self.alignment_at_time.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LogEntry:
        influence = data.get("alignmentInfluence")
        return cls(
            timestamp=data["timestamp"],
            choice=data["choice"],
            impact=data["impact"],
            reason=data["reason"],
            source=ImpactSource(data.get("source", "choice")),
            alignment_influence=PhilosophicalAlignment(influence) if influence else None,
            alignment_at_time=PhilosophicalAlignment(
                data.get("alignmentAtTime", "Undecided")
            ),
        )


@dataclass
class AuthenticityMetric:
    """
    Bounded consistency score plus its full history.

    Invariant: value equals the clamped fold of history impacts from
    AUTHENTICITY_START. Only the ledger appends to history.
    """
    value: float = AUTHENTICITY_START
    history: list[LogEntry] = field(default_factory=list)
    permanent_markers: list[PermanentMarker] = field(default_factory=list)

    def has_marker(self, marker: PermanentMarker) -> bool:
        return marker in self.permanent_markers

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": self.value,
            "history": [entry.to_dict() for entry in self.history],
            "permanentMarkers": [m.value for m in self.permanent_markers],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AuthenticityMetric:
        return cls(
            value=data.get("value", AUTHENTICITY_START),
            history=[LogEntry.from_dict(e) for e in data.get("history", [])],
            permanent_markers=[
                PermanentMarker(m) for m in data.get("permanentMarkers", [])
            ],
        )


@dataclass
class PlayerState:
    """
    Authoritative state for one player.

    Base attributes are stored clamped; equipped items add modifiers on
    top (see effective_attribute). All mutation happens on a working
    copy inside a registry transaction.
    """
    player_id: str
    name: str

    # Trinity attributes
    body: int = 5
    mind: int = 5
    heart: int = 5

    hit_points: int = 0
    max_hit_points: int = 1

    authenticity_metric: AuthenticityMetric = field(default_factory=AuthenticityMetric)
    philosophical_alignment: PhilosophicalAlignment = PhilosophicalAlignment.UNDECIDED

    # Assets
    inventory: list[Item] = field(default_factory=list)
    equipped_items: dict[ItemType, str] = field(default_factory=dict)
    equipped_fallacies: list[Fallacy] = field(default_factory=list)
    # Items whose equip impact is already in the ledger
    attuned_items: list[str] = field(default_factory=list)

    # Temptations already accepted or rejected
    resolved_temptations: list[str] = field(default_factory=list)

    # Progression
    experience: int = 0
    level: int = 1

    active_effects: list[TemporaryEffect] = field(default_factory=list)

    def find_item(self, item_id: str) -> Item | None:
        """First inventory item with this id."""
        for item in self.inventory:
            if item.item_id == item_id:
                return item
        return None

    def find_fallacy(self, fallacy_type: FallacyType) -> Fallacy | None:
        for fallacy in self.equipped_fallacies:
            if fallacy.fallacy_type == fallacy_type:
                return fallacy
        return None

    def equipped_item_objects(self) -> list[Item]:
        items = []
        for item_id in self.equipped_items.values():
            item = self.find_item(item_id)
            if item:
                items.append(item)
        return items

    def effective_attribute(self, attribute: str) -> int:
        """Base attribute plus equipped item modifiers, clamped."""
        total = getattr(self, attribute)
        for item in self.equipped_item_objects():
            total += getattr(item, f"{attribute}_modifier")
        return clamp(total, ATTRIBUTE_MIN, ATTRIBUTE_MAX)

    @property
    def damage_bonus(self) -> int:
        return sum(e.stat_bonus for e in self.active_effects)

    @property
    def damage_penalty(self) -> int:
        return sum(e.penalty for e in self.active_effects)

    @property
    def is_incapacitated(self) -> bool:
        return self.hit_points <= 0

    def clone(self) -> PlayerState:
        """Deep copy the state."""
        return deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        return {
            "playerId": self.player_id,
            "name": self.name,
            "body": self.body,
            "mind": self.mind,
            "heart": self.heart,
            "hitPoints": self.hit_points,
            "maxHitPoints": self.max_hit_points,
            "authenticityMetric": self.authenticity_metric.to_dict(),
            "philosophicalAlignment": self.philosophical_alignment.value,
            "inventory": [item.to_dict() for item in self.inventory],
            "equippedItems": {
                slot.value: item_id for slot, item_id in self.equipped_items.items()
            },
            "equippedFallacies": [f.to_dict() for f in self.equipped_fallacies],
            "attunedItems": list(self.attuned_items),
            "resolvedTemptations": list(self.resolved_temptations),
            "experience": self.experience,
            "level": self.level,
            "activeEffects": [e.to_dict() for e in self.active_effects],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerState:
        return cls(
            player_id=data["playerId"],
            name=data["name"],
            body=data["body"],
            mind=data["mind"],
            heart=data["heart"],
            hit_points=data["hitPoints"],
            max_hit_points=data["maxHitPoints"],
            authenticity_metric=AuthenticityMetric.from_dict(data["authenticityMetric"]),
            philosophical_alignment=PhilosophicalAlignment(data["philosophicalAlignment"]),
            inventory=[Item.from_dict(i) for i in data.get("inventory", [])],
            equipped_items={
                ItemType(slot): item_id
                for slot, item_id in data.get("equippedItems", {}).items()
            },
            equipped_fallacies=[
                Fallacy.from_dict(f) for f in data.get("equippedFallacies", [])
            ],
            attuned_items=list(data.get("attunedItems", [])),
            resolved_temptations=list(data.get("resolvedTemptations", [])),
            experience=data.get("experience", 0),
            level=data.get("level", 1),
            active_effects=[
                TemporaryEffect.from_dict(e) for e in data.get("activeEffects", [])
            ],
        )


@dataclass
class Enemy:
    """An enemy instance, alive for exactly one encounter."""
    enemy_id: str
    name: str
    historical_figure: str
    represented_flaw: FallacyType
    hit_points: int
    max_hit_points: int
    weakness: FallacyType
    attack: int
    experience_reward: int
    difficulty: Difficulty = Difficulty.EASY
    lore: str = ""

    @classmethod
    def from_template(cls, template: EnemyTemplate) -> Enemy:
        return cls(
            enemy_id=template.enemy_id,
            name=template.name,
            historical_figure=template.historical_figure,
            represented_flaw=template.represented_flaw,
            hit_points=template.max_hit_points,
            max_hit_points=template.max_hit_points,
            weakness=template.weakness,
            attack=template.attack,
            experience_reward=template.experience_reward,
            difficulty=template.difficulty,
            lore=template.lore,
        )

    @property
    def is_defeated(self) -> bool:
        return self.hit_points <= 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "enemyId": self.enemy_id,
            "name": self.name,
            "historicalFigure": self.historical_figure,
            "representedFlaw": self.represented_flaw.value,
            "hitPoints": self.hit_points,
            "maxHitPoints": self.max_hit_points,
            "weakness": self.weakness.value,
            "attack": self.attack,
            "experienceReward": self.experience_reward,
            "difficulty": self.difficulty.value,
            "lore": self.lore,
        }
