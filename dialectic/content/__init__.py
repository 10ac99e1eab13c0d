"""
Content - The static game world.

This module contains:
- Scenarios and their choices
- Syllogisms judged in combat
- Enemy templates
- The fallacy catalogue
- Items
- Demon temptations

Content is loaded, never created at runtime.
"""

from .library import ContentLibrary, validate_library
from .enemies import ENEMIES
from .fallacies import FALLACIES
from .items import ITEMS
from .scenarios import SCENARIOS
from .syllogisms import SYLLOGISMS
from .temptations import TEMPTATIONS


def create_default_library() -> ContentLibrary:
    """Build the library shipped with the game."""
    return ContentLibrary.from_content(
        scenarios=SCENARIOS,
        syllogisms=SYLLOGISMS,
        enemies=tuple(ENEMIES.values()),
        fallacies=tuple(FALLACIES.values()),
        items=tuple(ITEMS.values()),
        temptations=tuple(TEMPTATIONS.values()),
    )


__all__ = [
    "ContentLibrary",
    "validate_library",
    "create_default_library",
    "ENEMIES",
    "FALLACIES",
    "ITEMS",
    "SCENARIOS",
    "SYLLOGISMS",
    "TEMPTATIONS",
]
