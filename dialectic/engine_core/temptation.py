"""
Temptation Engine - Demons' offers, accepted or rejected.

Each temptation is resolved at most once per player, in one transaction:
1. Record the accept or reject impact in the ledger (source=temptation)
2. On acceptance, grant the offered item if the inventory has room
3. Mark the temptation resolved and persist

Negative temptation entries count toward Hedonist alongside items.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .errors import InvalidStateError
from .ledger import AuthenticityLedger
from .progression import grant_item
from .rules import RuleSet
from .state import ImpactSource, PlayerState
from .templates import Temptation

if TYPE_CHECKING:
    from ..content import ContentLibrary
    from ..session import PlayerRegistry
    from .combat import CombatEngine

logger = logging.getLogger(__name__)


@dataclass
class TemptationEngine:
    """Applies a player's answer to a demon's offer."""
    registry: PlayerRegistry
    ledger: AuthenticityLedger
    library: ContentLibrary
    combat: CombatEngine | None = None

    @property
    def rules(self) -> RuleSet:
        return self.ledger.rules

    def list_temptations(self) -> list[Temptation]:
        return list(self.library.temptations.values())

    def pending_for(self, player: PlayerState) -> list[Temptation]:
        """Temptations this player has not yet answered."""
        return [
            t for t in self.library.temptations.values()
            if t.temptation_id not in player.resolved_temptations
        ]

    def accept(self, player_id: str, temptation_id: str) -> PlayerState:
        """
        Take the offer: pay its authenticity cost and receive its item.

        Raises NotFoundError for an unknown temptation or player and
        InvalidStateError if it was already answered or the player is
        mid-encounter.
        """
        return self._resolve(player_id, temptation_id, accepted=True)

    def reject(self, player_id: str, temptation_id: str) -> PlayerState:
        """Refuse the offer. Same errors as accept()."""
        return self._resolve(player_id, temptation_id, accepted=False)

    def _resolve(self, player_id: str, temptation_id: str, accepted: bool) -> PlayerState:
        temptation = self.library.get_temptation(temptation_id)

        with self.registry.transaction(player_id) as player:
            if self.combat and self.combat.has_active_encounter(player_id):
                raise InvalidStateError(
                    "Cannot answer a temptation during combat", {"playerId": player_id}
                )
            if temptation_id in player.resolved_temptations:
                raise InvalidStateError(
                    f"Temptation {temptation_id} has already been answered",
                    {"temptationId": temptation_id},
                )

            impact = temptation.accept_impact if accepted else temptation.reject_impact
            if impact:
                verb = "Accepted" if accepted else "Rejected"
                self.ledger.apply_impact(
                    player,
                    impact,
                    reason=temptation.philosophical_concept,
                    label=f"{verb} {temptation.name}'s offer",
                    source=ImpactSource.TEMPTATION,
                )

            if accepted and temptation.reward_item_id:
                grant_item(player, self.library.get_item(temptation.reward_item_id), self.rules)

            player.resolved_temptations.append(temptation_id)

        logger.info(
            "Player %s %s %s (authenticity %.1f)",
            player_id,
            "accepted" if accepted else "rejected",
            temptation_id,
            player.authenticity_metric.value,
        )
        return player
