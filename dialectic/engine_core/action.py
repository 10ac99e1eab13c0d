"""
Action System - Actions, payloads, and tagged results.

Actions represent everything a player can ask of the engine through
the generic action endpoint:
1. Narrative choices
2. Combat (engage, answer)
3. Demon temptations (accept, reject)
4. Loadout changes (items, fallacies, rest)

Every action produces exactly one result variant, tagged by `type`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ValidationError


class ActionType(Enum):
    """Types of actions in the system."""
    # Narrative
    MAKE_CHOICE = "MakeChoice"

    # Combat
    START_COMBAT = "StartCombat"
    RESOLVE_SYLLOGISM = "ResolveSyllogism"

    # Temptation
    ACCEPT_TEMPTATION = "AcceptTemptation"
    REJECT_TEMPTATION = "RejectTemptation"

    # Loadout
    USE_ITEM = "UseItem"
    EQUIP_ITEM = "EquipItem"
    UNEQUIP_ITEM = "UnequipItem"
    EQUIP_FALLACY = "EquipFallacy"
    UNEQUIP_FALLACY = "UnequipFallacy"
    REST = "Rest"


# Payload fields each action type cannot do without
REQUIRED_FIELDS: dict[ActionType, tuple[str, ...]] = {
    ActionType.MAKE_CHOICE: ("scenario_id", "choice_id"),
    ActionType.START_COMBAT: ("enemy_id",),
    ActionType.RESOLVE_SYLLOGISM: ("enemy_id", "syllogism_id", "player_answer"),
    ActionType.ACCEPT_TEMPTATION: ("temptation_id",),
    ActionType.REJECT_TEMPTATION: ("temptation_id",),
    ActionType.USE_ITEM: ("item_id",),
    ActionType.EQUIP_ITEM: ("item_id",),
    ActionType.UNEQUIP_ITEM: ("item_id",),
    ActionType.EQUIP_FALLACY: ("fallacy_type",),
    ActionType.UNEQUIP_FALLACY: ("fallacy_type",),
    ActionType.REST: (),
}

_WIRE_NAMES = {
    "scenario_id": "scenarioId",
    "choice_id": "choiceId",
    "syllogism_id": "syllogismId",
    "player_answer": "playerAnswer",
    "enemy_id": "enemyId",
    "item_id": "itemId",
    "fallacy_type": "fallacyType",
    "temptation_id": "temptationId",
}


@dataclass
class ActionPayload:
    """
    Parameters for an action.

    Different action types use different fields; validate() checks the
    ones the type requires.
    """
    scenario_id: str | None = None
    choice_id: str | None = None
    syllogism_id: str | None = None
    player_answer: bool | None = None
    enemy_id: str | None = None
    item_id: str | None = None
    fallacy_type: str | None = None
    temptation_id: str | None = None


@dataclass
class Action:
    """A complete action issued by one player."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    def validate(self) -> None:
        missing = [
            _WIRE_NAMES[name]
            for name in REQUIRED_FIELDS[self.action_type]
            if getattr(self.payload, name) is None
        ]
        if missing:
            raise ValidationError(
                f"{self.action_type.value} requires {', '.join(missing)}",
                {"missing": missing},
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Action:
        """Parse the wire shape {type, scenarioId?, choiceId?, ...}."""
        raw_type = data.get("type")
        try:
            action_type = ActionType(raw_type)
        except ValueError:
            raise ValidationError(
                f"Unknown action type: {raw_type!r}",
                {"validTypes": [t.value for t in ActionType]},
            ) from None

        payload = ActionPayload(
            **{name: data.get(wire) for name, wire in _WIRE_NAMES.items()}
        )
        action = cls(action_type=action_type, payload=payload)
        action.validate()
        return action

    @classmethod
    def make_choice(cls, scenario_id: str, choice_id: str) -> Action:
        """Factory for a scenario choice."""
        return cls(
            action_type=ActionType.MAKE_CHOICE,
            payload=ActionPayload(scenario_id=scenario_id, choice_id=choice_id),
        )

    @classmethod
    def start_combat(cls, enemy_id: str) -> Action:
        return cls(
            action_type=ActionType.START_COMBAT,
            payload=ActionPayload(enemy_id=enemy_id),
        )

    @classmethod
    def resolve_syllogism(cls, enemy_id: str, syllogism_id: str, answer: bool) -> Action:
        return cls(
            action_type=ActionType.RESOLVE_SYLLOGISM,
            payload=ActionPayload(
                enemy_id=enemy_id, syllogism_id=syllogism_id, player_answer=answer
            ),
        )

    @classmethod
    def accept_temptation(cls, temptation_id: str) -> Action:
        return cls(
            action_type=ActionType.ACCEPT_TEMPTATION,
            payload=ActionPayload(temptation_id=temptation_id),
        )

    @classmethod
    def reject_temptation(cls, temptation_id: str) -> Action:
        return cls(
            action_type=ActionType.REJECT_TEMPTATION,
            payload=ActionPayload(temptation_id=temptation_id),
        )

    @classmethod
    def use_item(cls, item_id: str) -> Action:
        return cls(action_type=ActionType.USE_ITEM, payload=ActionPayload(item_id=item_id))

    @classmethod
    def equip_fallacy(cls, fallacy_type: str) -> Action:
        return cls(
            action_type=ActionType.EQUIP_FALLACY,
            payload=ActionPayload(fallacy_type=fallacy_type),
        )

    @classmethod
    def rest(cls) -> Action:
        return cls(action_type=ActionType.REST)


# =============================================================================
# Result variants
# =============================================================================

@dataclass
class StateUpdate:
    """The player's refreshed state."""
    player: Any  # PlayerState

    type = "StateUpdate"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "playerState": self.player.to_dict()}


@dataclass
class CombatStarted:
    """A new encounter and its first syllogism."""
    encounter: dict[str, Any]
    player: Any  # PlayerState

    type = "CombatStarted"

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "encounter": self.encounter,
            "playerState": self.player.to_dict(),
        }


@dataclass
class CombatUpdate:
    """One resolved combat turn."""
    resolution: Any  # CombatResolution

    type = "CombatUpdate"

    def to_dict(self) -> dict[str, Any]:
        resolution = self.resolution
        next_syllogism = resolution.next_syllogism
        return {
            "type": self.type,
            "combatOutcome": resolution.outcome.to_dict(),
            "updatedPlayer": resolution.player.to_dict(),
            "continuesCombat": resolution.continues_combat,
            "nextSyllogism": next_syllogism.to_public_dict() if next_syllogism else None,
        }


ActionResult = StateUpdate | CombatStarted | CombatUpdate
