"""
Content Templates - Immutable definitions loaded at startup.

Templates are never created or mutated at runtime:
- Item / Fallacy: player assets (inventory, combat loadout)
- EnemyTemplate: stamped into an Enemy instance per encounter
- Scenario / Choice: narrative decisions
- Syllogism: one combat turn's argument
- Temptation: a demon's offer, accepted or rejected once

Runtime instances live in state.py. Every template serializes to the
camelCase dict shape the client consumes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PhilosophicalAlignment(Enum):
    """A player's dominant philosophical stance."""
    UTILITARIAN = "Utilitarian"
    EXISTENTIALIST = "Existentialist"
    NIHILIST = "Nihilist"
    UNDECIDED = "Undecided"


class PermanentMarker(Enum):
    """Irreversible character traits awarded for behavioral patterns."""
    HYPOCRITE = "Hypocrite"
    HEDONIST = "Hedonist"
    SOPHIST = "Sophist"
    MARTYR = "Martyr"


class ItemType(Enum):
    WEAPON = "Weapon"
    ARMOR = "Armor"
    ACCESSORY = "Accessory"
    CONSUMABLE = "Consumable"


class Difficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    EXPERT = "Expert"


class FallacyType(Enum):
    """Named flawed-reasoning patterns."""
    AD_HOMINEM = "AdHominem"
    APPEAL_TO_AUTHORITY = "AppealToAuthority"
    EQUIVOCATION = "Equivocation"
    STRAW_MAN = "StrawMan"
    FALSE_DILEMMA = "FalseDialemma"  # wire spelling used by the client
    SLIPPERY_SLOPE = "SlipperySlope"
    CIRCULAR_REASONING = "CircularReasoning"
    APPEAL_TO_CONSEQUENCES = "AppealToConsequences"


@dataclass(frozen=True)
class TemporaryEffect:
    """
    A timed modifier.

    duration counts concluded encounters, not turns.
    stat_bonus adds to damage dealt, penalty adds to damage taken.
    """
    duration: int
    stat_bonus: int = 0
    penalty: int = 0

    def tick(self) -> TemporaryEffect:
        """Return the effect one encounter later."""
        return TemporaryEffect(
            duration=self.duration - 1,
            stat_bonus=self.stat_bonus,
            penalty=self.penalty,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "duration": self.duration,
            "statBonus": self.stat_bonus,
            "penalty": self.penalty,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TemporaryEffect:
        return cls(
            duration=data["duration"],
            stat_bonus=data.get("statBonus", 0),
            penalty=data.get("penalty", 0),
        )


@dataclass(frozen=True)
class Item:
    """Item template. An inventory holds the templates themselves."""
    item_id: str
    name: str
    item_type: ItemType
    body_modifier: int = 0
    mind_modifier: int = 0
    heart_modifier: int = 0
    authenticity_impact: float = 0.0
    temporary_effect: TemporaryEffect | None = None
    description: str = ""
    philosophical_meaning: str = ""

    @property
    def is_consumable(self) -> bool:
        return self.item_type == ItemType.CONSUMABLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "itemId": self.item_id,
            "name": self.name,
            "itemType": self.item_type.value,
            "bodyModifier": self.body_modifier,
            "mindModifier": self.mind_modifier,
            "heartModifier": self.heart_modifier,
            "authenticityImpact": self.authenticity_impact,
            "temporaryEffect": (
                self.temporary_effect.to_dict() if self.temporary_effect else None
            ),
            "description": self.description,
            "philosophicalMeaning": self.philosophical_meaning,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        effect = data.get("temporaryEffect")
        return cls(
            item_id=data["itemId"],
            name=data["name"],
            item_type=ItemType(data["itemType"]),
            body_modifier=data.get("bodyModifier", 0),
            mind_modifier=data.get("mindModifier", 0),
            heart_modifier=data.get("heartModifier", 0),
            authenticity_impact=data.get("authenticityImpact", 0.0),
            temporary_effect=TemporaryEffect.from_dict(effect) if effect else None,
            description=data.get("description", ""),
            philosophical_meaning=data.get("philosophicalMeaning", ""),
        )


@dataclass(frozen=True)
class Fallacy:
    """A combat asset: identifying this fallacy deals `damage`."""
    fallacy_type: FallacyType
    argument: str
    correct_identification: str
    explanation: str
    damage: int
    required_level: int = 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "fallacyType": self.fallacy_type.value,
            "argument": self.argument,
            "correctIdentification": self.correct_identification,
            "explanation": self.explanation,
            "damage": self.damage,
            "requiredLevel": self.required_level,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Fallacy:
        return cls(
            fallacy_type=FallacyType(data["fallacyType"]),
            argument=data["argument"],
            correct_identification=data["correctIdentification"],
            explanation=data["explanation"],
            damage=data["damage"],
            required_level=data.get("requiredLevel", 1),
        )


@dataclass(frozen=True)
class EnemyTemplate:
    """Static enemy definition, stamped into an Enemy per encounter."""
    enemy_id: str
    name: str
    historical_figure: str
    represented_flaw: FallacyType
    max_hit_points: int
    weakness: FallacyType
    attack: int
    experience_reward: int
    difficulty: Difficulty = Difficulty.EASY
    lore: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "enemyId": self.enemy_id,
            "name": self.name,
            "historicalFigure": self.historical_figure,
            "representedFlaw": self.represented_flaw.value,
            "hitPoints": self.max_hit_points,
            "maxHitPoints": self.max_hit_points,
            "weakness": self.weakness.value,
            "attack": self.attack,
            "experienceReward": self.experience_reward,
            "difficulty": self.difficulty.value,
            "lore": self.lore,
        }


@dataclass(frozen=True)
class Choice:
    """One option within a scenario."""
    choice_id: str
    text: str
    alignment_influence: PhilosophicalAlignment
    authenticity_change: float
    reasoning: str
    reward_item_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "choiceId": self.choice_id,
            "text": self.text,
            "alignmentInfluence": self.alignment_influence.value,
            "authenticityChange": self.authenticity_change,
            "reasoning": self.reasoning,
            "rewardItemId": self.reward_item_id,
        }


@dataclass(frozen=True)
class Scenario:
    """A narrative decision point."""
    scenario_id: str
    title: str
    description: str
    choices: tuple[Choice, ...] = field(default_factory=tuple)
    philosophical_basis: str = ""

    def get_choice(self, choice_id: str) -> Choice | None:
        for choice in self.choices:
            if choice.choice_id == choice_id:
                return choice
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "scenarioId": self.scenario_id,
            "title": self.title,
            "description": self.description,
            "choices": [c.to_dict() for c in self.choices],
            "philosophicalBasis": self.philosophical_basis,
        }


@dataclass(frozen=True)
class Syllogism:
    """
    A two-premise, one-conclusion argument.

    `valid` is the ground truth and never leaves the server before
    the player has answered.
    """
    syllogism_id: str
    premises: tuple[str, str]
    conclusion: str
    valid: bool
    difficulty: Difficulty
    explanation: str
    exemplifies: FallacyType | None = None
    flawed_reasoning_impact: float | None = None

    def to_public_dict(self) -> dict[str, Any]:
        """The shape shown to the player while the turn is open."""
        return {
            "syllogismId": self.syllogism_id,
            "premises": list(self.premises),
            "conclusion": self.conclusion,
            "difficulty": self.difficulty.value,
        }


@dataclass(frozen=True)
class Temptation:
    """
    A demon's offer.

    Accepting costs `accept_impact` authenticity (negative) and grants
    the offered item; rejecting records `reject_impact`. Either way the
    temptation is resolved for good.
    """
    temptation_id: str
    name: str
    offer: str
    literary_reference: str
    philosophical_concept: str
    accept_impact: float
    reject_impact: float = 0.0
    reward_item_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "temptationId": self.temptation_id,
            "name": self.name,
            "offer": self.offer,
            "literaryReference": self.literary_reference,
            "philosophicalConcept": self.philosophical_concept,
            "acceptImpact": self.accept_impact,
            "rejectImpact": self.reject_impact,
            "rewardItemId": self.reward_item_id,
        }
