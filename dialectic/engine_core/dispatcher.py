"""
Action Dispatcher - Routes player actions to the engine that owns them.

The dispatcher holds no state of its own. It:
- Validates that the action carries the fields its type needs
- Looks up the handler for the action type
- Wraps the engine's answer in a tagged result

Errors raised by engines propagate unchanged.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable

from .action import Action, ActionResult, ActionType, CombatStarted, CombatUpdate, StateUpdate
from .combat import CombatEngine
from .errors import ValidationError
from .loadout import LoadoutManager
from .scenario import ScenarioEngine
from .temptation import TemptationEngine

logger = logging.getLogger(__name__)


@dataclass
class ActionDispatcher:
    """
    Single entry point for the generic action endpoint.

    Usage:
        dispatcher = ActionDispatcher(scenarios, combat, loadout, temptations)
        result = dispatcher.dispatch(player_id, Action.make_choice("trolley_crossing", "pull_lever"))
        result.to_dict()  # {"type": "StateUpdate", "playerState": {...}}
    """
    scenarios: ScenarioEngine
    combat: CombatEngine
    loadout: LoadoutManager
    temptations: TemptationEngine

    def dispatch(self, player_id: str, action: Action | dict[str, Any]) -> ActionResult:
        if isinstance(action, dict):
            action = Action.from_dict(action)
        else:
            action.validate()

        handler = self._get_handler(action.action_type)
        if handler is None:
            raise ValidationError(f"No handler for action type: {action.action_type.value}")

        logger.debug("Dispatching %s for player %s", action.action_type.value, player_id)
        return handler(player_id, action)

    def _get_handler(self, action_type: ActionType) -> Callable[[str, Action], ActionResult] | None:
        """Get the handler function for an action type."""
        handlers = {
            ActionType.MAKE_CHOICE: self._handle_make_choice,
            ActionType.START_COMBAT: self._handle_start_combat,
            ActionType.RESOLVE_SYLLOGISM: self._handle_resolve_syllogism,
            ActionType.ACCEPT_TEMPTATION: self._handle_accept_temptation,
            ActionType.REJECT_TEMPTATION: self._handle_reject_temptation,
            ActionType.USE_ITEM: self._handle_use_item,
            ActionType.EQUIP_ITEM: self._handle_equip_item,
            ActionType.UNEQUIP_ITEM: self._handle_unequip_item,
            ActionType.EQUIP_FALLACY: self._handle_equip_fallacy,
            ActionType.UNEQUIP_FALLACY: self._handle_unequip_fallacy,
            ActionType.REST: self._handle_rest,
        }
        return handlers.get(action_type)

    def _handle_make_choice(self, player_id: str, action: Action) -> ActionResult:
        payload = action.payload
        player = self.scenarios.resolve_choice(player_id, payload.scenario_id, payload.choice_id)
        return StateUpdate(player)

    def _handle_start_combat(self, player_id: str, action: Action) -> ActionResult:
        encounter = self.combat.start_encounter(player_id, action.payload.enemy_id)
        view = encounter.to_dict(self.combat.current_syllogism(encounter))
        return CombatStarted(encounter=view, player=self.combat.registry.get_player(player_id))

    def _handle_resolve_syllogism(self, player_id: str, action: Action) -> ActionResult:
        payload = action.payload
        resolution = self.combat.resolve_syllogism(
            player_id,
            payload.enemy_id,
            payload.syllogism_id,
            payload.player_answer,
        )
        return CombatUpdate(resolution)

    def _handle_accept_temptation(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.temptations.accept(player_id, action.payload.temptation_id))

    def _handle_reject_temptation(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.temptations.reject(player_id, action.payload.temptation_id))

    def _handle_use_item(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.loadout.use_item(player_id, action.payload.item_id))

    def _handle_equip_item(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.loadout.equip_item(player_id, action.payload.item_id))

    def _handle_unequip_item(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.loadout.unequip_item(player_id, action.payload.item_id))

    def _handle_equip_fallacy(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.loadout.equip_fallacy(player_id, action.payload.fallacy_type))

    def _handle_unequip_fallacy(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.loadout.unequip_fallacy(player_id, action.payload.fallacy_type))

    def _handle_rest(self, player_id: str, action: Action) -> ActionResult:
        return StateUpdate(self.loadout.rest(player_id))
