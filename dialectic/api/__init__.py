"""
API Module - Game client interface.

Exposes the engine via REST API. The client:
1. Creates a player
2. Lists scenarios and submits choices
3. Engages enemies and answers syllogisms
4. Manages items and fallacies between fights

Players live in the configured store; no user accounts are required.
"""

from .schemas import (
    # Requests
    CreatePlayerRequest,
    ActionRequest,
    ActionBody,
    SyllogismRequest,
    StartCombatRequest,
    # Responses
    PlayerStateResponse,
    ActionResponse,
    CombatUpdateResponse,
    EncounterView,
    TemptationInfo,
    ErrorResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)
from .service import GameService
from .app import create_app

__all__ = [
    # Requests
    "CreatePlayerRequest",
    "ActionRequest",
    "ActionBody",
    "SyllogismRequest",
    "StartCombatRequest",
    # Responses
    "PlayerStateResponse",
    "ActionResponse",
    "CombatUpdateResponse",
    "EncounterView",
    "TemptationInfo",
    "ErrorResponse",
    "HealthResponse",
    "ErrorCode",
    # Service
    "GameService",
    "create_app",
]
