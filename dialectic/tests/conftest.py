"""
Pytest fixtures for Dialectic tests.
"""

import pytest
from dataclasses import replace

from ..api.service import GameService
from ..content import ContentLibrary, create_default_library
from ..engine_core.ledger import AuthenticityLedger
from ..engine_core.state import PlayerState

FIXED_TIMESTAMP = "2026-01-01T00:00:00+00:00"


def fixed_clock() -> str:
    return FIXED_TIMESTAMP


def restrict_syllogisms(library: ContentLibrary, *syllogism_ids: str) -> ContentLibrary:
    """A copy of the library whose syllogism pool is exactly these ids."""
    return replace(
        library,
        syllogisms={sid: library.syllogisms[sid] for sid in syllogism_ids},
    )


@pytest.fixture
def library() -> ContentLibrary:
    return create_default_library()


@pytest.fixture
def ledger() -> AuthenticityLedger:
    """Ledger with a fixed clock."""
    return AuthenticityLedger(clock=fixed_clock)


@pytest.fixture
def service(library: ContentLibrary) -> GameService:
    """Fully wired service on an in-memory store."""
    service = GameService(library=library)
    service.ledger.clock = fixed_clock
    return service


@pytest.fixture
def valid_only_service(library: ContentLibrary) -> GameService:
    """Every syllogism drawn is valid."""
    return GameService(library=restrict_syllogisms(library, "mortal_socrates", "no_stones_breathe"))


@pytest.fixture
def invalid_only_service(library: ContentLibrary) -> GameService:
    """Every syllogism drawn is invalid and carries a flawed-reasoning impact."""
    return GameService(library=restrict_syllogisms(library, "cats_and_dogs", "wet_streets"))


@pytest.fixture
def player(service: GameService) -> PlayerState:
    """Fresh Existentialist player."""
    return service.registry.create_player("Sartre", "Existentialist")


@pytest.fixture
def bare_player() -> PlayerState:
    """Unsaved player for ledger-only tests."""
    return PlayerState(player_id="p1", name="Kierkegaard", hit_points=30, max_hit_points=30)
