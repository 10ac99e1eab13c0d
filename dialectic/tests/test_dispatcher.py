"""
Tests for the action dispatcher.

Tests:
- Parsing wire actions
- Routing each action type
- Tagged result shapes
"""

import pytest

from ..engine_core.action import Action, ActionType, CombatStarted, CombatUpdate, StateUpdate
from ..engine_core.errors import NotFoundError, ValidationError


class TestActionParsing:

    def test_from_dict(self):
        """The wire shape parses into an Action."""
        action = Action.from_dict(
            {"type": "MakeChoice", "scenarioId": "trolley_crossing", "choiceId": "pull_lever"}
        )
        assert action.action_type == ActionType.MAKE_CHOICE
        assert action.payload.scenario_id == "trolley_crossing"
        assert action.payload.choice_id == "pull_lever"

    def test_unknown_type(self):
        """Unknown types list the valid ones."""
        with pytest.raises(ValidationError) as exc_info:
            Action.from_dict({"type": "Teleport"})
        assert "MakeChoice" in exc_info.value.details["validTypes"]

    def test_missing_type(self):
        """An action without a type is invalid."""
        with pytest.raises(ValidationError):
            Action.from_dict({"scenarioId": "trolley_crossing"})

    def test_missing_required_fields(self):
        """Only the absent fields are reported."""
        with pytest.raises(ValidationError) as exc_info:
            Action.from_dict({"type": "ResolveSyllogism", "enemyId": "doomsayer"})
        assert exc_info.value.details["missing"] == ["syllogismId", "playerAnswer"]

    def test_rest_needs_nothing(self):
        """Rest takes no payload fields."""
        assert Action.from_dict({"type": "Rest"}).action_type == ActionType.REST

    def test_temptation_needs_id(self):
        """AcceptTemptation without temptationId names the missing field."""
        with pytest.raises(ValidationError) as exc_info:
            Action.from_dict({"type": "AcceptTemptation"})
        assert exc_info.value.details["missing"] == ["temptationId"]


class TestDispatch:

    def test_make_choice(self, service, player):
        """MakeChoice returns the updated player."""
        result = service.dispatcher.dispatch(
            player.player_id, Action.make_choice("trolley_crossing", "pull_lever")
        )

        assert isinstance(result, StateUpdate)
        data = result.to_dict()
        assert data["type"] == "StateUpdate"
        assert data["playerState"]["authenticityMetric"]["value"] == 55

    def test_combat_round_trip(self, service, player):
        """StartCombat then ResolveSyllogism yields the two combat variants."""
        started = service.dispatcher.dispatch(
            player.player_id, {"type": "StartCombat", "enemyId": "wandering_sophist"}
        )
        assert isinstance(started, CombatStarted)
        syllogism = started.to_dict()["encounter"]["currentSyllogism"]
        valid = service.library.get_syllogism(syllogism["syllogismId"]).valid

        update = service.dispatcher.dispatch(
            player.player_id,
            Action.resolve_syllogism("wandering_sophist", syllogism["syllogismId"], valid),
        )

        assert isinstance(update, CombatUpdate)
        data = update.to_dict()
        assert data["type"] == "CombatUpdate"
        assert data["combatOutcome"]["success"] is True
        assert data["continuesCombat"] is True
        assert data["nextSyllogism"]["syllogismId"] != syllogism["syllogismId"]
        assert "valid" not in data["nextSyllogism"]

    def test_loadout_actions(self, service, player):
        """Fallacy changes and rest route to the loadout manager."""
        dispatch = service.dispatcher.dispatch
        pid = player.player_id

        dispatch(pid, Action.equip_fallacy("StrawMan"))
        dispatch(pid, {"type": "UnequipFallacy", "fallacyType": "AdHominem"})
        result = dispatch(pid, Action.rest())

        fallacies = [f["fallacyType"] for f in result.to_dict()["playerState"]["equippedFallacies"]]
        assert fallacies == ["AppealToAuthority", "StrawMan"]

    def test_item_actions(self, service, player):
        """Equip, unequip and use route to the loadout manager."""
        with service.registry.transaction(player.player_id) as working:
            working.inventory.append(service.library.get_item("occams_razor"))
            working.inventory.append(service.library.get_item("meditations_scroll"))
        dispatch = service.dispatcher.dispatch
        pid = player.player_id

        equipped = dispatch(pid, {"type": "EquipItem", "itemId": "occams_razor"}).to_dict()
        assert equipped["playerState"]["equippedItems"] == {"Weapon": "occams_razor"}

        dispatch(pid, {"type": "UnequipItem", "itemId": "occams_razor"})
        used = dispatch(pid, Action.use_item("meditations_scroll")).to_dict()
        assert used["playerState"]["equippedItems"] == {}
        assert used["playerState"]["heart"] == 6

    def test_engine_errors_propagate(self, service, player):
        """Engine errors reach the caller unchanged."""
        with pytest.raises(NotFoundError):
            service.dispatcher.dispatch(
                player.player_id, {"type": "MakeChoice", "scenarioId": "x", "choiceId": "y"}
            )

    def test_temptation_actions(self, service, player):
        """Accept and reject both come back as state updates."""
        dispatch = service.dispatcher.dispatch
        pid = player.player_id

        dispatch(pid, Action.reject_temptation("mephistopheles"))
        result = dispatch(pid, {"type": "AcceptTemptation", "temptationId": "demon_lilith"})

        assert isinstance(result, StateUpdate)
        state = result.to_dict()["playerState"]
        assert state["resolvedTemptations"] == ["mephistopheles", "demon_lilith"]
        assert state["authenticityMetric"]["value"] == 45
        assert [e["source"] for e in state["authenticityMetric"]["history"]] == [
            "temptation", "temptation",
        ]
