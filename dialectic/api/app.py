"""
FastAPI Application - REST API for the game client.

Endpoints (client base URL http://localhost:8080/api):
    POST   /api/player/create                 Create a player
    GET    /api/player/{id}                   Get player state
    POST   /api/action                        Perform a generic action
    GET    /api/scenarios                     List scenarios
    POST   /api/combat/start                  Engage an enemy
    GET    /api/combat/{playerId}/{enemyId}   Get the encounter
    POST   /api/combat/syllogism              Answer the open syllogism
    GET    /api/enemies                       Enemy catalogue
    GET    /api/fallacies                     Fallacy catalogue
    GET    /api/items                         Item catalogue
    GET    /api/temptations                   Demon temptations (?playerId= for pending)
    GET    /health                            Health check

All responses are JSON with explicit Pydantic schemas. Errors share one
body shape: {error, errorCode, details}.

Handlers are plain `def` so FastAPI runs them on its threadpool; the
player registry serializes work per player.
"""

from __future__ import annotations
import logging
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, load_settings
from ..engine_core.errors import DialecticError
from .schemas import (
    # Request models
    CreatePlayerRequest,
    ActionRequest,
    SyllogismRequest,
    StartCombatRequest,
    # Response models
    PlayerStateResponse,
    ActionResponse,
    CombatUpdateResponse,
    EncounterView,
    ScenarioInfo,
    EnemyInfo,
    FallacyInfo,
    ItemInfo,
    TemptationInfo,
    ErrorResponse,
    HealthResponse,
    ApiInfoResponse,
    # Enums
    ErrorCode,
)
from .service import GameService

logger = logging.getLogger(__name__)

SERVICE_NAME = "dialectic-engine"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation error"},
    404: {"model": ErrorResponse, "description": "Unknown id"},
    409: {"model": ErrorResponse, "description": "Invalid state or conflict"},
}


def make_error_response(
    error_code: ErrorCode,
    message: str,
    status_code: int = 400,
    details: Optional[dict] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=message,
            error_code=error_code,
            details=details,
        ).model_dump(by_alias=True, mode="json"),
    )


def create_app(service: GameService | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional GameService instance (built from settings if not provided)
        settings: Optional Settings (read from the environment if not provided)

    Returns:
        FastAPI application instance
    """
    settings = settings or load_settings()
    game_service = service or GameService.from_settings(settings)

    app = FastAPI(
        title="Dialectic Engine API",
        description="""
Philosophical RPG engine - moral choices, authenticity and syllogism combat.

## Combat Flow

1. `POST /api/combat/start` engages an enemy and returns the first syllogism
2. `POST /api/combat/syllogism` answers it (`playerAnswer`: is the argument valid?)
3. Repeat with `nextSyllogism` until `continuesCombat` is false

## Error Codes

| Code | Status | Description |
|------|--------|-------------|
| `VALIDATION_ERROR` | 400 | Malformed body or illegal value |
| `NOT_FOUND` | 404 | Unknown player, scenario, choice, enemy, item, fallacy or temptation |
| `INVALID_STATE` | 409 | Not allowed right now (combat, full slots, stale syllogism, answered temptation) |
| `CONFLICT` | 409 | The player record changed concurrently |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.service = game_service
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=settings.allowed_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Error handlers
    # =========================================================================

    @app.exception_handler(DialecticError)
    async def handle_engine_error(request: Request, exc: DialecticError) -> JSONResponse:
        logger.warning(
            "%s %s rejected: %s (%s)",
            request.method, request.url.path, exc.message, exc.error_code,
        )
        return make_error_response(
            ErrorCode(exc.error_code),
            exc.message,
            status_code=exc.status_code,
            details=exc.details or None,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": error.get("msg", ""),
                "type": error.get("type", ""),
            }
            for error in exc.errors()
        ]
        logger.warning("%s %s malformed body: %s", request.method, request.url.path, errors)
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request body is invalid",
            details={"errors": errors},
        )

    # =========================================================================
    # Player Endpoints
    # =========================================================================

    @app.post(
        "/api/player/create",
        response_model=PlayerStateResponse,
        responses=ERROR_RESPONSES,
        tags=["Players"],
        summary="Create a new player",
    )
    def create_player(body: CreatePlayerRequest):
        """Create a player with balanced attributes and starter fallacies."""
        return game_service.create_player(body.player_name, body.initial_alignment)

    @app.get(
        "/api/player/{player_id}",
        response_model=PlayerStateResponse,
        responses=ERROR_RESPONSES,
        tags=["Players"],
        summary="Get player state",
    )
    def get_player(player_id: str):
        return game_service.get_player(player_id)

    # =========================================================================
    # Action Endpoint
    # =========================================================================

    @app.post(
        "/api/action",
        response_model=ActionResponse,
        responses=ERROR_RESPONSES,
        tags=["Game Loop"],
        summary="Perform an action",
    )
    def perform_action(body: ActionRequest):
        """
        Perform one action for a player.

        **Action types:** MakeChoice, StartCombat, ResolveSyllogism,
        AcceptTemptation, RejectTemptation, UseItem, EquipItem, UnequipItem,
        EquipFallacy, UnequipFallacy, Rest.

        The response is tagged by `type`: StateUpdate, CombatStarted or
        CombatUpdate.
        """
        return game_service.perform_action(body.player_id, body.action.to_wire())

    @app.get(
        "/api/scenarios",
        response_model=list[ScenarioInfo],
        tags=["Content"],
        summary="List scenarios",
    )
    def list_scenarios():
        return game_service.list_scenarios()

    # =========================================================================
    # Combat Endpoints
    # =========================================================================

    @app.post(
        "/api/combat/start",
        response_model=EncounterView,
        responses=ERROR_RESPONSES,
        tags=["Combat"],
        summary="Engage an enemy",
    )
    def start_combat(body: StartCombatRequest):
        """Start an encounter; the response carries the first syllogism."""
        return game_service.start_combat(body.player_id, body.enemy_id)

    @app.post(
        "/api/combat/syllogism",
        response_model=CombatUpdateResponse,
        responses=ERROR_RESPONSES,
        tags=["Combat"],
        summary="Answer the open syllogism",
    )
    def resolve_syllogism(body: SyllogismRequest):
        """
        Judge whether the open syllogism is valid.

        `syllogismId` must be the id issued for the current turn; anything
        else is rejected with INVALID_STATE.
        """
        return game_service.resolve_syllogism(
            body.request_player_id,
            body.syllogism_id,
            body.player_answer,
            body.enemy_id,
        )

    @app.get(
        "/api/combat/{player_id}/{enemy_id}",
        response_model=EncounterView,
        responses=ERROR_RESPONSES,
        tags=["Combat"],
        summary="Get the encounter",
    )
    def get_encounter(player_id: str, enemy_id: str):
        return game_service.get_encounter(player_id, enemy_id)

    # =========================================================================
    # Content Endpoints
    # =========================================================================

    @app.get("/api/enemies", response_model=list[EnemyInfo], tags=["Content"])
    def list_enemies():
        return game_service.list_enemies()

    @app.get("/api/fallacies", response_model=list[FallacyInfo], tags=["Content"])
    def list_fallacies():
        return game_service.list_fallacies()

    @app.get("/api/items", response_model=list[ItemInfo], tags=["Content"])
    def list_items():
        return game_service.list_items()

    @app.get(
        "/api/temptations",
        response_model=list[TemptationInfo],
        responses=ERROR_RESPONSES,
        tags=["Content"],
        summary="List demon temptations",
    )
    def list_temptations(player_id: Optional[str] = Query(None, alias="playerId")):
        """With `playerId`, only the temptations that player has not answered."""
        return game_service.list_temptations(player_id)

    # =========================================================================
    # Health
    # =========================================================================

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    def health():
        return HealthResponse(status="healthy", service=SERVICE_NAME, version=__version__)

    @app.get("/", response_model=ApiInfoResponse, tags=["System"])
    def root():
        return ApiInfoResponse(
            name="Dialectic Engine API",
            version=__version__,
            docs="/api/docs",
            endpoints=sorted(
                route.path for route in app.routes
                if getattr(route, "include_in_schema", False) and route.path.startswith("/api/")
            ),
        )

    return app


# For running directly: uvicorn dialectic.api.app:app
app = create_app()
