"""
Engine Core - Authenticity, alignment, combat and loadout rules.

The engine is the runtime that:
1. Records authenticity impacts and awards permanent markers
2. Resolves scenario choices and drifts alignment
3. Runs syllogism encounters
4. Resolves demon temptations
5. Manages items, fallacy slots and hit points
6. Dispatches generic actions to the right engine

Player records are owned by the session registry; content by the
content library. Engines receive both at construction.
"""

from .errors import (
    DialecticError,
    ValidationError,
    NotFoundError,
    InvalidStateError,
    ConflictError,
)
from .templates import (
    PhilosophicalAlignment,
    PermanentMarker,
    ItemType,
    Difficulty,
    FallacyType,
    TemporaryEffect,
    Item,
    Fallacy,
    EnemyTemplate,
    Choice,
    Scenario,
    Syllogism,
    Temptation,
)
from .state import AuthenticityMetric, Enemy, ImpactSource, LogEntry, PlayerState
from .rules import DEFAULT_RULES, RuleSet, load_rules
from .ledger import AuthenticityLedger
from .scenario import ScenarioEngine, nudge_alignment
from .combat import CombatEngine, CombatOutcome, CombatResolution, Encounter, EncounterResult, EncounterState
from .temptation import TemptationEngine
from .loadout import LoadoutManager
from .action import Action, ActionType, ActionPayload, ActionResult, StateUpdate, CombatStarted, CombatUpdate
from .dispatcher import ActionDispatcher

__all__ = [
    "DialecticError",
    "ValidationError",
    "NotFoundError",
    "InvalidStateError",
    "ConflictError",
    "PhilosophicalAlignment",
    "PermanentMarker",
    "ItemType",
    "Difficulty",
    "FallacyType",
    "TemporaryEffect",
    "Item",
    "Fallacy",
    "EnemyTemplate",
    "Choice",
    "Scenario",
    "Syllogism",
    "Temptation",
    "AuthenticityMetric",
    "Enemy",
    "ImpactSource",
    "LogEntry",
    "PlayerState",
    "DEFAULT_RULES",
    "RuleSet",
    "load_rules",
    "AuthenticityLedger",
    "ScenarioEngine",
    "nudge_alignment",
    "CombatEngine",
    "CombatOutcome",
    "CombatResolution",
    "Encounter",
    "EncounterResult",
    "EncounterState",
    "TemptationEngine",
    "LoadoutManager",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "StateUpdate",
    "CombatStarted",
    "CombatUpdate",
    "ActionDispatcher",
]
