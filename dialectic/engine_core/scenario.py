"""
Scenario Engine - Narrative choices and alignment drift.

resolve_choice() is one transaction:
1. Record the choice's authenticity change in the ledger
2. Nudge alignment if recent choices lean elsewhere by the margin
3. Grant the choice's reward item, if any
4. Persist

Resolving the same choice twice applies it twice. The caller must
submit each presented choice exactly once.
"""

from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from .errors import InvalidStateError, NotFoundError
from .ledger import AuthenticityLedger
from .progression import grant_item
from .rules import RuleSet
from .state import ImpactSource, PlayerState
from .templates import PhilosophicalAlignment, Scenario

if TYPE_CHECKING:
    from ..content import ContentLibrary
    from ..session import PlayerRegistry
    from .combat import CombatEngine

logger = logging.getLogger(__name__)


def nudge_alignment(player: PlayerState, rules: RuleSet) -> PhilosophicalAlignment | None:
    """
    Shift alignment toward the unique leader of recent choice influence.

    Only choices from the last `alignment_window` choice entries vote;
    Undecided votes are ignored. The leader must beat the current
    alignment's votes by `alignment_margin`.

    Returns the new alignment, or None if unchanged.
    """
    choice_entries = [
        entry for entry in player.authenticity_metric.history
        if entry.source == ImpactSource.CHOICE and entry.alignment_influence is not None
    ]
    recent = choice_entries[-rules.alignment_window:]
    votes = Counter(
        entry.alignment_influence for entry in recent
        if entry.alignment_influence != PhilosophicalAlignment.UNDECIDED
    )
    if not votes:
        return None

    top = max(votes.values())
    leaders = [alignment for alignment, count in votes.items() if count == top]
    if len(leaders) != 1:
        return None

    leader = leaders[0]
    current = player.philosophical_alignment
    if leader == current:
        return None
    if votes[leader] - votes[current] < rules.alignment_margin:
        return None

    player.philosophical_alignment = leader
    return leader


@dataclass
class ScenarioEngine:
    """Lists scenarios and applies chosen outcomes to players."""
    registry: PlayerRegistry
    ledger: AuthenticityLedger
    library: ContentLibrary
    combat: CombatEngine | None = None

    @property
    def rules(self) -> RuleSet:
        return self.ledger.rules

    def list_scenarios(self) -> Iterator[Scenario]:
        """Lazy and restartable: each call starts a new pass."""
        return self.library.iter_scenarios()

    def get_scenario(self, scenario_id: str) -> Scenario:
        return self.library.get_scenario(scenario_id)

    def resolve_choice(
        self,
        player_id: str,
        scenario_id: str,
        choice_id: str,
    ) -> PlayerState:
        """
        Apply one choice and return the updated player.

        Raises NotFoundError for unknown scenario/choice/player and
        InvalidStateError while the player is mid-encounter.
        """
        scenario = self.library.get_scenario(scenario_id)
        choice = scenario.get_choice(choice_id)
        if choice is None:
            raise NotFoundError(
                f"Choice {choice_id} not found in scenario {scenario_id}",
                {"scenarioId": scenario_id, "choiceId": choice_id},
            )

        with self.registry.transaction(player_id) as player:
            if self.combat and self.combat.has_active_encounter(player_id):
                raise InvalidStateError(
                    "Cannot make scenario choices during combat",
                    {"playerId": player_id},
                )

            self.ledger.apply_impact(
                player,
                choice.authenticity_change,
                reason=choice.reasoning,
                label=choice.text,
                source=ImpactSource.CHOICE,
                alignment_influence=choice.alignment_influence,
            )

            shifted = nudge_alignment(player, self.rules)
            if shifted:
                logger.info("Player %s alignment shifted to %s", player_id, shifted.value)

            if choice.reward_item_id:
                grant_item(player, self.library.get_item(choice.reward_item_id), self.rules)

        logger.info(
            "Player %s chose %s/%s (authenticity %.1f)",
            player_id, scenario_id, choice_id, player.authenticity_metric.value,
        )
        return player

