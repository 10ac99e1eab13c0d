"""
Tests for API Pydantic schemas.

Validates that:
- Requests accept the client's camelCase field names
- Engine dicts validate against the response models
- Action responses are discriminated by `type`
- Error bodies are structured
"""

import pytest
from pydantic import TypeAdapter, ValidationError


class TestRequestSchemas:

    def test_create_player_request_aliases(self):
        """camelCase input populates snake_case fields."""
        from dialectic.api.schemas import CreatePlayerRequest

        request = CreatePlayerRequest.model_validate(
            {"playerName": "Sartre", "initialAlignment": "Existentialist"}
        )
        assert request.player_name == "Sartre"
        assert request.initial_alignment == "Existentialist"

    def test_action_body_to_wire(self):
        """to_wire() emits the camelCase action shape."""
        from dialectic.api.schemas import ActionRequest

        request = ActionRequest.model_validate({
            "playerId": "p1",
            "action": {"type": "ResolveSyllogism", "syllogismId": "s1", "playerAnswer": False, "enemyId": "e1"},
        })
        wire = request.action.to_wire()

        assert wire["type"] == "ResolveSyllogism"
        assert wire["syllogismId"] == "s1"
        assert wire["playerAnswer"] is False
        assert wire["scenarioId"] is None

    def test_syllogism_request_requires_strict_bool(self):
        """The string "true" is not a boolean answer."""
        from dialectic.api.schemas import SyllogismRequest

        with pytest.raises(ValidationError):
            SyllogismRequest.model_validate({
                "requestPlayerId": "p1", "syllogismId": "s1", "playerAnswer": "true", "enemyId": "e1",
            })


class TestResponseSchemas:

    def test_player_state_from_engine_dict(self, player):
        """Engine dicts validate against PlayerStateResponse."""
        from dialectic.api.schemas import PlayerStateResponse

        response = PlayerStateResponse.model_validate(player.to_dict())
        data = response.model_dump(by_alias=True, mode="json")

        assert data["playerId"] == player.player_id
        assert data["philosophicalAlignment"] == "Existentialist"
        assert data["authenticityMetric"]["permanentMarkers"] == []
        assert [f["fallacyType"] for f in data["equippedFallacies"]] == [
            "AppealToAuthority", "AdHominem",
        ]

    def test_action_response_discriminates_on_type(self, service, player):
        """The union picks its variant from `type`."""
        from dialectic.api.schemas import ActionResponse, CombatStartedResult, StateUpdateResult

        adapter = TypeAdapter(ActionResponse)

        rest = service.perform_action(player.player_id, {"type": "Rest"})
        assert isinstance(adapter.validate_python(rest), StateUpdateResult)

        started = service.perform_action(
            player.player_id, {"type": "StartCombat", "enemyId": "wandering_sophist"}
        )
        assert isinstance(adapter.validate_python(started), CombatStartedResult)

    def test_syllogism_info_has_no_validity(self, library):
        """Public syllogisms never carry the answer."""
        from dialectic.api.schemas import SyllogismInfo

        public = library.get_syllogism("mortal_socrates").to_public_dict()
        info = SyllogismInfo.model_validate(public)
        assert "valid" not in info.model_dump(by_alias=True)

    def test_error_response_schema(self):
        """Error bodies serialize with camelCase keys."""
        from dialectic.api.schemas import ErrorCode, ErrorResponse

        error = ErrorResponse(error="Player p1 not found", error_code=ErrorCode.NOT_FOUND)
        data = error.model_dump(by_alias=True, mode="json")

        assert data == {"error": "Player p1 not found", "errorCode": "NOT_FOUND", "details": None}
