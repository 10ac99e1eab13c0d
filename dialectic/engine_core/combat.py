"""
Combat Engine - Syllogism duels between a player and an enemy.

Encounter state machine:

    Engaged -> PlayerTurn -> Resolving -> PlayerTurn ...
                                       -> Concluded (victory or defeat)

Each PlayerTurn issues one syllogism id. The player answers whether the
argument is valid; the answer must name the issued id.

- Correct: the player's best equipped fallacy damages the enemy
  (a fallacy matching the enemy's weakness is preferred and boosted)
- Incorrect: the enemy damages the player, and if the syllogism defines
  one, an "accepted flawed reasoning" impact is recorded

Every damage value is at least 1 and hit points are finite, so every
encounter concludes.

A player has at most one encounter at a time. The last one is kept
after it concludes so late answers are rejected, not misrouted.
"""

from __future__ import annotations
import logging
import random
import uuid
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from .errors import InvalidStateError, NotFoundError, ValidationError
from .ledger import AuthenticityLedger
from .progression import award_experience, tick_effects
from .rules import RuleSet
from .state import Enemy, ImpactSource, PlayerState
from .templates import Fallacy, Syllogism

if TYPE_CHECKING:
    from ..content import ContentLibrary
    from ..session import PlayerRegistry

logger = logging.getLogger(__name__)


class EncounterState(Enum):
    ENGAGED = "Engaged"
    PLAYER_TURN = "PlayerTurn"
    RESOLVING = "Resolving"
    CONCLUDED = "Concluded"


class EncounterResult(Enum):
    VICTORY = "Victory"
    DEFEAT = "Defeat"


@dataclass
class Encounter:
    """One fight. Owns the enemy instance and the open syllogism."""
    encounter_id: str
    player_id: str
    enemy: Enemy
    state: EncounterState = EncounterState.ENGAGED
    turn: int = 0
    current_syllogism_id: str | None = None
    result: EncounterResult | None = None
    asked: list[str] = field(default_factory=list)

    @property
    def is_concluded(self) -> bool:
        return self.state == EncounterState.CONCLUDED

    def clone(self) -> Encounter:
        return deepcopy(self)

    def to_dict(self, current: Syllogism | None = None) -> dict[str, Any]:
        return {
            "encounterId": self.encounter_id,
            "playerId": self.player_id,
            "enemy": self.enemy.to_dict(),
            "state": self.state.value,
            "turn": self.turn,
            "currentSyllogism": current.to_public_dict() if current else None,
            "result": self.result.value if self.result else None,
        }


@dataclass
class CombatOutcome:
    """What happened on one resolved turn."""
    success: bool
    damage: int
    explanation: str
    experience_gained: int = 0
    correct_answer: bool = False
    fallacy_used: Fallacy | None = None
    enemy_hit_points: int = 0
    player_hit_points: int = 0
    leveled_up: bool = False
    result: EncounterResult | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "damage": self.damage,
            "explanation": self.explanation,
            "experienceGained": self.experience_gained,
            "correctAnswer": self.correct_answer,
            "fallacyUsed": self.fallacy_used.fallacy_type.value if self.fallacy_used else None,
            "enemyHitPoints": self.enemy_hit_points,
            "playerHitPoints": self.player_hit_points,
            "leveledUp": self.leveled_up,
            "result": self.result.value if self.result else None,
        }


@dataclass
class CombatResolution:
    """Everything the caller needs after a turn."""
    outcome: CombatOutcome
    player: PlayerState
    encounter: Encounter
    next_syllogism: Syllogism | None = None

    @property
    def continues_combat(self) -> bool:
        return not self.encounter.is_concluded


class CombatEngine:
    """
    Runs encounters against the registry.

    Usage:
        encounter = engine.start_encounter(player_id, "wandering_sophist")
        syllogism = engine.current_syllogism(encounter)
        resolution = engine.resolve_syllogism(
            player_id, "wandering_sophist", syllogism.syllogism_id, True
        )
        if not resolution.continues_combat:
            ...
    """

    def __init__(
        self,
        registry: PlayerRegistry,
        ledger: AuthenticityLedger,
        library: ContentLibrary,
    ):
        self.registry = registry
        self.ledger = ledger
        self.library = library
        self._encounters: dict[str, Encounter] = {}

    @property
    def rules(self) -> RuleSet:
        return self.ledger.rules

    # =========================================================================
    # Encounter lifecycle
    # =========================================================================

    def has_active_encounter(self, player_id: str) -> bool:
        encounter = self._encounters.get(player_id)
        return encounter is not None and not encounter.is_concluded

    def start_encounter(self, player_id: str, enemy_id: str) -> Encounter:
        """
        Engage an enemy and issue the first syllogism.

        Raises NotFoundError for unknown player/enemy and
        InvalidStateError if the player is incapacitated or already
        fighting.
        """
        template = self.library.get_enemy(enemy_id)

        with self.registry.lock(player_id):
            player = self.registry.get_player(player_id)
            if player.is_incapacitated:
                raise InvalidStateError(
                    "Player has no hit points left; rest before fighting",
                    {"playerId": player_id},
                )
            if self.has_active_encounter(player_id):
                current = self._encounters[player_id]
                raise InvalidStateError(
                    f"Player is already fighting {current.enemy.enemy_id}",
                    {"playerId": player_id, "enemyId": current.enemy.enemy_id},
                )

            encounter = Encounter(
                encounter_id=uuid.uuid4().hex,
                player_id=player_id,
                enemy=Enemy.from_template(template),
            )
            self._issue_syllogism(encounter)
            self._encounters[player_id] = encounter

        logger.info(
            "Encounter %s started: player %s vs %s",
            encounter.encounter_id, player_id, enemy_id,
        )
        return encounter

    def get_encounter(self, player_id: str, enemy_id: str) -> Encounter:
        """Raises NotFoundError if the player has no encounter with that enemy."""
        encounter = self._encounters.get(player_id)
        if encounter is None or encounter.enemy.enemy_id != enemy_id:
            raise NotFoundError(
                f"No encounter between {player_id} and {enemy_id}",
                {"playerId": player_id, "enemyId": enemy_id},
            )
        return encounter

    def current_syllogism(self, encounter: Encounter) -> Syllogism | None:
        if encounter.current_syllogism_id is None:
            return None
        return self.library.get_syllogism(encounter.current_syllogism_id)

    # =========================================================================
    # Turn resolution
    # =========================================================================

    def resolve_syllogism(
        self,
        player_id: str,
        enemy_id: str,
        syllogism_id: str,
        player_answer: bool,
    ) -> CombatResolution:
        """
        Judge the player's answer for the open syllogism.

        Raises NotFoundError for an unknown player and InvalidStateError
        if there is no such encounter, it has concluded, or syllogism_id
        is not the one issued this turn.
        """
        if not isinstance(player_answer, bool):
            raise ValidationError("playerAnswer must be a boolean")

        with self.registry.lock(player_id):
            encounter = self._encounters.get(player_id)
            if encounter is None or encounter.enemy.enemy_id != enemy_id:
                raise InvalidStateError(
                    f"No encounter between {player_id} and {enemy_id}",
                    {"playerId": player_id, "enemyId": enemy_id},
                )
            if encounter.is_concluded:
                raise InvalidStateError(
                    "Encounter has already concluded",
                    {"encounterId": encounter.encounter_id},
                )
            if syllogism_id != encounter.current_syllogism_id:
                raise InvalidStateError(
                    f"Syllogism {syllogism_id} is not the open syllogism",
                    {
                        "syllogismId": syllogism_id,
                        "expected": encounter.current_syllogism_id,
                    },
                )

            syllogism = self.library.get_syllogism(syllogism_id)
            working = encounter.clone()
            working.state = EncounterState.RESOLVING

            with self.registry.transaction(player_id) as player:
                outcome = self._resolve_turn(player, working, syllogism, player_answer)

            self._encounters[player_id] = working

        return CombatResolution(
            outcome=outcome,
            player=player,
            encounter=working,
            next_syllogism=self.current_syllogism(working),
        )

    def _resolve_turn(
        self,
        player: PlayerState,
        encounter: Encounter,
        syllogism: Syllogism,
        player_answer: bool,
    ) -> CombatOutcome:
        enemy = encounter.enemy
        correct = player_answer == syllogism.valid
        multiplier = self.rules.difficulty_multiplier(syllogism.difficulty)
        verdict = "valid" if syllogism.valid else "invalid"
        fallacy = None

        if correct:
            fallacy = self.best_fallacy(player, enemy)
            damage = self.player_damage(player, enemy, fallacy, multiplier)
            enemy.hit_points = max(0, enemy.hit_points - damage)
            explanation = f"Correct: the argument is {verdict}. {syllogism.explanation}"
        else:
            damage = self.enemy_damage(player, enemy, multiplier)
            player.hit_points = max(0, player.hit_points - damage)
            explanation = f"Wrong: the argument is {verdict}. {syllogism.explanation}"
            if syllogism.flawed_reasoning_impact is not None:
                self.ledger.apply_impact(
                    player,
                    syllogism.flawed_reasoning_impact,
                    reason=f"Accepted flawed reasoning against {enemy.name}",
                    label=syllogism.syllogism_id,
                    source=ImpactSource.COMBAT,
                )

        logger.debug(
            "Encounter %s turn %d: %s, %d damage",
            encounter.encounter_id, encounter.turn, "hit" if correct else "miss", damage,
        )

        encounter.turn += 1
        experience = 0
        leveled_up = False

        if enemy.is_defeated:
            experience = enemy.experience_reward
            leveled_up = award_experience(player, experience, self.rules)
            self._conclude(player, encounter, EncounterResult.VICTORY)
        elif player.is_incapacitated:
            self._conclude(player, encounter, EncounterResult.DEFEAT)
        else:
            self._issue_syllogism(encounter)

        return CombatOutcome(
            success=correct,
            damage=damage,
            explanation=explanation,
            experience_gained=experience,
            correct_answer=syllogism.valid,
            fallacy_used=fallacy,
            enemy_hit_points=enemy.hit_points,
            player_hit_points=player.hit_points,
            leveled_up=leveled_up,
            result=encounter.result,
        )

    def _conclude(
        self,
        player: PlayerState,
        encounter: Encounter,
        result: EncounterResult,
    ) -> None:
        tick_effects(player)
        encounter.state = EncounterState.CONCLUDED
        encounter.result = result
        encounter.current_syllogism_id = None
        logger.info(
            "Encounter %s concluded: %s after %d turn(s)",
            encounter.encounter_id, result.value, encounter.turn,
        )

    def _issue_syllogism(self, encounter: Encounter) -> None:
        """Draw the next syllogism; never repeat the previous one."""
        pool = self.library.syllogisms_for(encounter.enemy.difficulty)
        previous = encounter.current_syllogism_id
        candidates = [s for s in pool if s.syllogism_id != previous] or pool

        rng = random.Random(f"{encounter.encounter_id}:{encounter.turn}")
        chosen = rng.choice(candidates)

        encounter.current_syllogism_id = chosen.syllogism_id
        encounter.asked.append(chosen.syllogism_id)
        encounter.state = EncounterState.PLAYER_TURN

    # =========================================================================
    # Damage
    # =========================================================================

    def best_fallacy(self, player: PlayerState, enemy: Enemy) -> Fallacy | None:
        """Weakness match first, otherwise the hardest-hitting equipped fallacy."""
        if not player.equipped_fallacies:
            return None
        for fallacy in player.equipped_fallacies:
            if fallacy.fallacy_type == enemy.weakness:
                return fallacy
        return max(player.equipped_fallacies, key=lambda f: f.damage)

    def player_damage(
        self,
        player: PlayerState,
        enemy: Enemy,
        fallacy: Fallacy | None,
        multiplier: float,
    ) -> int:
        if fallacy is None:
            base = max(1, player.effective_attribute("mind") // self.rules.unarmed_mind_divisor)
        else:
            base = fallacy.damage
            if fallacy.fallacy_type == enemy.weakness:
                base *= self.rules.weakness_multiplier
        damage = int(base * multiplier + 0.5) + player.damage_bonus
        return max(1, damage)

    def enemy_damage(self, player: PlayerState, enemy: Enemy, multiplier: float) -> int:
        mitigation = player.effective_attribute("heart") // self.rules.heart_mitigation_divisor
        damage = int(enemy.attack * multiplier + 0.5) - mitigation + player.damage_penalty
        return max(1, damage)
