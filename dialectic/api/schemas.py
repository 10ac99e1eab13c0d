"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between the game client and the
engine. Field names are snake_case in Python and camelCase on the wire;
both spellings are accepted on input.

Error Codes:
- VALIDATION_ERROR: Malformed body, bad field value or illegal action shape
- NOT_FOUND: Unknown player, scenario, choice, enemy, item or fallacy
- INVALID_STATE: Action not allowed in the current state (combat, full slots)
- CONFLICT: The player record changed underneath the request
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel

from ..engine_core.templates import (
    Difficulty,
    FallacyType,
    ItemType,
    PermanentMarker,
    PhilosophicalAlignment,
)


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_STATE = "INVALID_STATE"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Shared Models
# =============================================================================

class TemporaryEffectInfo(WireModel):
    duration: int
    stat_bonus: int = 0
    penalty: int = 0


class ItemInfo(WireModel):
    """An item as carried in an inventory or listed in the catalogue."""
    item_id: str
    name: str
    item_type: ItemType
    body_modifier: int = 0
    mind_modifier: int = 0
    heart_modifier: int = 0
    authenticity_impact: float = 0
    temporary_effect: Optional[TemporaryEffectInfo] = None
    description: str = ""
    philosophical_meaning: str = ""


class FallacyInfo(WireModel):
    fallacy_type: FallacyType
    argument: str
    correct_identification: str
    explanation: str
    damage: int
    required_level: int = 1


class LogEntryInfo(WireModel):
    """One recorded authenticity impact."""
    timestamp: str
    choice: str
    impact: float
    reason: str
    source: str = Field(description="choice, combat, item or temptation")
    alignment_influence: Optional[PhilosophicalAlignment] = None
    alignment_at_time: PhilosophicalAlignment


class AuthenticityInfo(WireModel):
    value: float = Field(ge=0, le=100)
    history: list[LogEntryInfo] = Field(default_factory=list)
    permanent_markers: list[PermanentMarker] = Field(default_factory=list)


class PlayerStateResponse(WireModel):
    """Full player record as seen by the client."""
    player_id: str
    name: str
    body: int
    mind: int
    heart: int
    hit_points: int
    max_hit_points: int
    authenticity_metric: AuthenticityInfo
    philosophical_alignment: PhilosophicalAlignment
    inventory: list[ItemInfo] = Field(default_factory=list)
    equipped_items: dict[str, str] = Field(
        default_factory=dict, description="Slot (Weapon, Armor, Accessory) to item id"
    )
    equipped_fallacies: list[FallacyInfo] = Field(default_factory=list)
    attuned_items: list[str] = Field(
        default_factory=list, description="Items whose equip impact has been recorded"
    )
    resolved_temptations: list[str] = Field(default_factory=list)
    experience: int = 0
    level: int = 1
    active_effects: list[TemporaryEffectInfo] = Field(default_factory=list)


class ChoiceInfo(WireModel):
    choice_id: str
    text: str
    alignment_influence: PhilosophicalAlignment
    authenticity_change: float
    reasoning: str
    reward_item_id: Optional[str] = None


class ScenarioInfo(WireModel):
    scenario_id: str
    title: str
    description: str
    choices: list[ChoiceInfo]
    philosophical_basis: str


class SyllogismInfo(WireModel):
    """A syllogism as shown to the player. Validity is never sent."""
    syllogism_id: str
    premises: list[str]
    conclusion: str
    difficulty: Difficulty


class EnemyInfo(WireModel):
    enemy_id: str
    name: str
    historical_figure: str
    represented_flaw: FallacyType
    hit_points: int
    max_hit_points: int
    weakness: FallacyType
    attack: int
    experience_reward: int
    difficulty: Difficulty
    lore: str = ""


class EncounterView(WireModel):
    """An encounter and the syllogism currently awaiting an answer."""
    encounter_id: str
    player_id: str
    enemy: EnemyInfo
    state: str = Field(description="Engaged, PlayerTurn, Resolving or Concluded")
    turn: int
    current_syllogism: Optional[SyllogismInfo] = None
    result: Optional[str] = Field(None, description="Victory or Defeat once concluded")


class TemptationInfo(WireModel):
    """A demon's offer. Accepting permanently affects authenticity."""
    temptation_id: str
    name: str
    offer: str
    literary_reference: str
    philosophical_concept: str
    accept_impact: float
    reject_impact: float = 0
    reward_item_id: Optional[str] = None


class CombatOutcomeInfo(WireModel):
    success: bool
    damage: int
    explanation: str
    experience_gained: int = 0
    correct_answer: bool
    fallacy_used: Optional[FallacyType] = None
    enemy_hit_points: int
    player_hit_points: int
    leveled_up: bool = False
    result: Optional[str] = None


# =============================================================================
# Request Models
# =============================================================================

class CreatePlayerRequest(WireModel):
    """Body for POST /api/player/create."""
    player_name: str = Field(description="Display name, 1-64 characters")
    initial_alignment: str = Field(
        "Undecided", description="Utilitarian, Existentialist, Nihilist or Undecided"
    )


class ActionBody(WireModel):
    """The action itself; which fields are needed depends on `type`."""
    type: str = Field(description="MakeChoice, StartCombat, ResolveSyllogism, UseItem, ...")
    scenario_id: Optional[str] = None
    choice_id: Optional[str] = None
    syllogism_id: Optional[str] = None
    player_answer: Optional[StrictBool] = None
    enemy_id: Optional[str] = None
    item_id: Optional[str] = None
    fallacy_type: Optional[str] = None
    temptation_id: Optional[str] = None

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class ActionRequest(WireModel):
    """Body for POST /api/action."""
    player_id: str
    action: ActionBody


class SyllogismRequest(WireModel):
    """Body for POST /api/combat/syllogism."""
    request_player_id: str
    syllogism_id: str
    player_answer: StrictBool
    enemy_id: str


class StartCombatRequest(WireModel):
    """Body for POST /api/combat/start."""
    player_id: str
    enemy_id: str


# =============================================================================
# Response Models
# =============================================================================

class CombatUpdateResponse(WireModel):
    """Result of one answered syllogism."""
    combat_outcome: CombatOutcomeInfo
    updated_player: PlayerStateResponse
    continues_combat: bool
    next_syllogism: Optional[SyllogismInfo] = None


class StateUpdateResult(WireModel):
    type: Literal["StateUpdate"]
    player_state: PlayerStateResponse


class CombatStartedResult(WireModel):
    type: Literal["CombatStarted"]
    encounter: EncounterView
    player_state: PlayerStateResponse


class CombatUpdateResult(CombatUpdateResponse):
    type: Literal["CombatUpdate"]


ActionResponse = Annotated[
    Union[StateUpdateResult, CombatStartedResult, CombatUpdateResult],
    Field(discriminator="type"),
]


class ErrorResponse(WireModel):
    """Standardized error body."""
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str


class ApiInfoResponse(BaseModel):
    """Root endpoint payload."""
    name: str
    version: str
    docs: str
    endpoints: list[str]
