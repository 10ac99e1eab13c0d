"""
Session Module - Player records and their persistence.

The registry is the only component that reads or writes stored
PlayerState. Engines work on the copies it hands out inside a
transaction.

Persistence is pluggable:
- MemoryPlayerStore: records live as long as the process
- JsonPlayerStore: records survive restarts (DIALECTIC_DATA_DIR)
"""

from .registry import PlayerRegistry, parse_alignment
from .store import JsonPlayerStore, MemoryPlayerStore, PlayerStore

__all__ = [
    "PlayerRegistry",
    "parse_alignment",
    "PlayerStore",
    "MemoryPlayerStore",
    "JsonPlayerStore",
]
