"""
Game service - one object holding the player registry and every engine.

GameService builds its store, rules and content from Settings, calls the
engine that owns each endpoint, and returns camelCase dicts ready for the
wire.

Nothing here imports FastAPI, so tests call the service directly.
Engine errors propagate unchanged and the web layer maps them to
responses.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any

from ..config import Settings
from ..content import ContentLibrary, create_default_library, validate_library
from ..engine_core.combat import CombatEngine
from ..engine_core.dispatcher import ActionDispatcher
from ..engine_core.ledger import AuthenticityLedger
from ..engine_core.loadout import LoadoutManager
from ..engine_core.rules import DEFAULT_RULES, RuleSet, load_rules
from ..engine_core.scenario import ScenarioEngine
from ..engine_core.temptation import TemptationEngine
from ..session import JsonPlayerStore, MemoryPlayerStore, PlayerRegistry, PlayerStore

logger = logging.getLogger(__name__)


@dataclass
class GameService:
    """
    Main API service for the game client.

    Usage:
        service = GameService()

        player = service.create_player("Sartre", "Existentialist")
        service.perform_action(player["playerId"], {"type": "Rest"})
    """
    rules: RuleSet = DEFAULT_RULES
    library: ContentLibrary = field(default_factory=create_default_library)
    store: PlayerStore = field(default_factory=MemoryPlayerStore)

    def __post_init__(self):
        problems = validate_library(self.library)
        if problems:
            raise ValueError("Invalid content library: " + "; ".join(problems))

        self.ledger = AuthenticityLedger(rules=self.rules)
        self.registry = PlayerRegistry(store=self.store, rules=self.rules, library=self.library)
        self.combat = CombatEngine(self.registry, self.ledger, self.library)
        self.scenarios = ScenarioEngine(self.registry, self.ledger, self.library, combat=self.combat)
        self.loadout = LoadoutManager(self.registry, self.ledger, self.library, combat=self.combat)
        self.temptations = TemptationEngine(
            self.registry, self.ledger, self.library, combat=self.combat
        )
        self.dispatcher = ActionDispatcher(
            self.scenarios, self.combat, self.loadout, self.temptations
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> GameService:
        """JSON persistence when a data dir is configured, memory otherwise."""
        rules = load_rules(settings.rules_file)
        if settings.data_dir:
            store: PlayerStore = JsonPlayerStore(settings.data_dir)
            logger.info("Persisting players under %s", settings.data_dir)
        else:
            store = MemoryPlayerStore()
        return cls(rules=rules, store=store)

    # =========================================================================
    # Players
    # =========================================================================

    def create_player(self, name: str, initial_alignment: str) -> dict[str, Any]:
        return self.registry.create_player(name, initial_alignment).to_dict()

    def get_player(self, player_id: str) -> dict[str, Any]:
        return self.registry.get_player(player_id).to_dict()

    # =========================================================================
    # Actions
    # =========================================================================

    def perform_action(self, player_id: str, action: dict[str, Any]) -> dict[str, Any]:
        """Run one generic action and return its tagged result."""
        return self.dispatcher.dispatch(player_id, action).to_dict()

    # =========================================================================
    # Combat
    # =========================================================================

    def start_combat(self, player_id: str, enemy_id: str) -> dict[str, Any]:
        encounter = self.combat.start_encounter(player_id, enemy_id)
        return encounter.to_dict(self.combat.current_syllogism(encounter))

    def get_encounter(self, player_id: str, enemy_id: str) -> dict[str, Any]:
        encounter = self.combat.get_encounter(player_id, enemy_id)
        return encounter.to_dict(self.combat.current_syllogism(encounter))

    def resolve_syllogism(
        self,
        player_id: str,
        syllogism_id: str,
        player_answer: bool,
        enemy_id: str,
    ) -> dict[str, Any]:
        resolution = self.combat.resolve_syllogism(
            player_id, enemy_id, syllogism_id, player_answer
        )
        next_syllogism = resolution.next_syllogism
        return {
            "combatOutcome": resolution.outcome.to_dict(),
            "updatedPlayer": resolution.player.to_dict(),
            "continuesCombat": resolution.continues_combat,
            "nextSyllogism": next_syllogism.to_public_dict() if next_syllogism else None,
        }

    # =========================================================================
    # Content
    # =========================================================================

    def list_scenarios(self) -> list[dict[str, Any]]:
        return [scenario.to_dict() for scenario in self.scenarios.list_scenarios()]

    def list_enemies(self) -> list[dict[str, Any]]:
        return [enemy.to_dict() for enemy in self.library.enemies.values()]

    def list_fallacies(self) -> list[dict[str, Any]]:
        return [fallacy.to_dict() for fallacy in self.library.fallacies.values()]

    def list_items(self) -> list[dict[str, Any]]:
        return [item.to_dict() for item in self.library.items.values()]

    def list_temptations(self, player_id: str | None = None) -> list[dict[str, Any]]:
        """Every temptation, or only those the given player has not answered."""
        if player_id is None:
            temptations = self.temptations.list_temptations()
        else:
            temptations = self.temptations.pending_for(self.registry.get_player(player_id))
        return [temptation.to_dict() for temptation in temptations]
