"""
Player Registry - Creates, retrieves and persists PlayerState records.

CONCURRENCY:
- One re-entrant lock per player id; actions for one player are
  serialized, actions for different players run in parallel
- transaction() hands out a deep copy and commits it only if the
  block exits cleanly, so a failed action leaves the stored record
  untouched
- Commit re-checks the stored version; a mismatch means a writer
  outside this process changed the record (ConflictError)
"""

from __future__ import annotations
import logging
import threading
import uuid
from contextlib import contextmanager
from typing import Iterator

from ..content import ContentLibrary, create_default_library
from ..engine_core.errors import ConflictError, NotFoundError, ValidationError
from ..engine_core.progression import refresh_max_hit_points
from ..engine_core.rules import DEFAULT_RULES, RuleSet
from ..engine_core.state import AuthenticityMetric, PlayerState
from ..engine_core.templates import PhilosophicalAlignment
from .store import MemoryPlayerStore, PlayerStore

logger = logging.getLogger(__name__)


def parse_alignment(value: PhilosophicalAlignment | str) -> PhilosophicalAlignment:
    """Accept an enum member or its wire name."""
    if isinstance(value, PhilosophicalAlignment):
        return value
    try:
        return PhilosophicalAlignment(value)
    except ValueError:
        valid = [a.value for a in PhilosophicalAlignment]
        raise ValidationError(
            f"Unknown alignment: {value!r}", {"validAlignments": valid}
        ) from None


class PlayerRegistry:
    """
    Authoritative owner of player records.

    Usage:
        registry = PlayerRegistry()
        player = registry.create_player("Sartre", "Existentialist")

        with registry.transaction(player.player_id) as working:
            working.hit_points -= 3
        # committed here; an exception inside the block discards the copy
    """

    def __init__(
        self,
        store: PlayerStore | None = None,
        rules: RuleSet = DEFAULT_RULES,
        library: ContentLibrary | None = None,
    ):
        self.store = store if store is not None else MemoryPlayerStore()
        self.rules = rules
        self.library = library or create_default_library()
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def create_player(
        self,
        name: str,
        initial_alignment: PhilosophicalAlignment | str,
    ) -> PlayerState:
        """
        Create a player with balanced defaults.

        Raises ValidationError for an empty or overlong name or an
        unknown alignment.
        """
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Player name must not be empty")
        name = name.strip()
        if len(name) > self.rules.max_name_length:
            raise ValidationError(
                f"Player name must be at most {self.rules.max_name_length} characters"
            )
        alignment = parse_alignment(initial_alignment)

        starters = []
        for fallacy_type in self.rules.starter_fallacies.get(alignment, ()):
            fallacy = self.library.fallacies.get(fallacy_type)
            if fallacy and len(starters) < self.rules.fallacy_slots:
                starters.append(fallacy)

        default = self.rules.default_attribute
        player = PlayerState(
            player_id=uuid.uuid4().hex,
            name=name,
            body=default,
            mind=default,
            heart=default,
            authenticity_metric=AuthenticityMetric(),
            philosophical_alignment=alignment,
            equipped_fallacies=starters,
            experience=0,
            level=1,
        )
        refresh_max_hit_points(player, self.rules)
        player.hit_points = player.max_hit_points

        self.store.save(player, version=1)
        logger.info(
            "Created player %s (%s, %s)", player.player_id, name, alignment.value
        )
        return player

    def get_player(self, player_id: str) -> PlayerState:
        """Raises NotFoundError if the id is unknown."""
        record = self.store.load(player_id)
        if record is None:
            raise NotFoundError(f"Player {player_id} not found", {"playerId": player_id})
        return record[0]

    def save_player(self, player: PlayerState) -> None:
        """Atomic replace, last writer wins."""
        with self._player_lock(player.player_id, must_exist=False):
            current = self.store.version(player.player_id) or 0
            self.store.save(player, version=current + 1)

    def player_exists(self, player_id: str) -> bool:
        return self.store.version(player_id) is not None

    def _player_lock(self, player_id: str, must_exist: bool = True) -> threading.RLock:
        """
        The lock for one player, created on first use.

        Locks are only created for stored players, so requests naming
        unknown ids cannot grow the lock table.
        """
        with self._locks_guard:
            player_lock = self._locks.get(player_id)
            if player_lock is None:
                if must_exist and not self.player_exists(player_id):
                    raise NotFoundError(
                        f"Player {player_id} not found", {"playerId": player_id}
                    )
                player_lock = self._locks[player_id] = threading.RLock()
            return player_lock

    @contextmanager
    def lock(self, player_id: str) -> Iterator[None]:
        """
        Per-player mutual exclusion (re-entrant).

        Raises NotFoundError for unknown ids.
        """
        with self._player_lock(player_id):
            yield

    @contextmanager
    def transaction(self, player_id: str) -> Iterator[PlayerState]:
        """
        Yield a working copy of the player; commit it on clean exit.

        Raises NotFoundError for unknown ids and ConflictError if the
        stored version moved while the block ran.
        """
        with self.lock(player_id):
            record = self.store.load(player_id)
            if record is None:
                raise NotFoundError(
                    f"Player {player_id} not found", {"playerId": player_id}
                )
            working, version = record

            yield working

            current = self.store.version(player_id)
            if current != version:
                logger.warning(
                    "Conflicting write on player %s (expected v%s, found v%s)",
                    player_id, version, current,
                )
                raise ConflictError(
                    f"Player {player_id} was modified concurrently",
                    {"expectedVersion": version, "currentVersion": current},
                )
            self.store.save(working, version=version + 1)
