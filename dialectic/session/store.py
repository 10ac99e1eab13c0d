"""
Player storage - persistence behind the registry.

Implementations:
- MemoryPlayerStore: in-process dict (default, testing)
- JsonPlayerStore: one JSON file per player on disk

Both keep a version counter per record so the registry can detect a
writer that slipped in between read and commit.
"""

from __future__ import annotations
import json
import os
import re
import tempfile
import threading
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..engine_core.state import PlayerState

_SAFE_ID = re.compile(r"[A-Za-z0-9_-]+")


@runtime_checkable
class PlayerStore(Protocol):
    """Storage interface for player records."""

    def load(self, player_id: str) -> tuple[PlayerState, int] | None:
        """Return (state, version), or None if unknown."""
        ...

    def save(self, player: PlayerState, version: int) -> None:
        """Replace the record atomically."""
        ...

    def version(self, player_id: str) -> int | None:
        """Current version, or None if unknown."""
        ...

    def delete(self, player_id: str) -> bool:
        ...

    def list_ids(self) -> list[str]:
        ...


class MemoryPlayerStore:
    """
    In-memory storage.

    Records are kept serialized so callers can never hold a live
    reference into the store.
    """

    def __init__(self):
        self._records: dict[str, tuple[dict, int]] = {}
        self._guard = threading.Lock()

    def load(self, player_id: str) -> tuple[PlayerState, int] | None:
        with self._guard:
            record = self._records.get(player_id)
        if record is None:
            return None
        data, version = record
        return PlayerState.from_dict(data), version

    def save(self, player: PlayerState, version: int) -> None:
        data = player.to_dict()
        with self._guard:
            self._records[player.player_id] = (data, version)

    def version(self, player_id: str) -> int | None:
        with self._guard:
            record = self._records.get(player_id)
        return record[1] if record else None

    def delete(self, player_id: str) -> bool:
        with self._guard:
            return self._records.pop(player_id, None) is not None

    def list_ids(self) -> list[str]:
        with self._guard:
            return list(self._records.keys())


class JsonPlayerStore:
    """
    File-based storage: <players_dir>/<player_id>.json.

    Writes go to a temporary file in the same directory followed by
    os.replace, so a reader never sees a half-written record.
    """

    def __init__(self, players_dir: Path | str = "players"):
        self.players_dir = Path(players_dir)
        self.players_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, player_id: str) -> Path | None:
        if not _SAFE_ID.fullmatch(player_id):
            return None
        return self.players_dir / f"{player_id}.json"

    def _read(self, player_id: str) -> dict | None:
        path = self._path(player_id)
        if path is None or not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def load(self, player_id: str) -> tuple[PlayerState, int] | None:
        record = self._read(player_id)
        if record is None:
            return None
        return PlayerState.from_dict(record["player"]), record["version"]

    def save(self, player: PlayerState, version: int) -> None:
        path = self._path(player.player_id)
        if path is None:
            raise ValueError(f"Unsafe player id: {player.player_id!r}")

        fd, tmp_name = tempfile.mkstemp(dir=self.players_dir, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"version": version, "player": player.to_dict()}, f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def version(self, player_id: str) -> int | None:
        record = self._read(player_id)
        return record["version"] if record else None

    def delete(self, player_id: str) -> bool:
        path = self._path(player_id)
        if path is None or not path.exists():
            return False
        path.unlink()
        return True

    def list_ids(self) -> list[str]:
        return sorted(p.stem for p in self.players_dir.glob("*.json"))
