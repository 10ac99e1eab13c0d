"""
Progression - Derived stats, item grants and effect expiry.
"""

from __future__ import annotations
import logging

from .rules import RuleSet
from .state import PlayerState, clamp
from .templates import Item

logger = logging.getLogger(__name__)


def refresh_max_hit_points(player: PlayerState, rules: RuleSet) -> None:
    """Recompute max HP from effective body and level; clamp current HP."""
    player.max_hit_points = rules.max_hit_points(
        player.effective_attribute("body"), player.level
    )
    player.hit_points = clamp(player.hit_points, 0, player.max_hit_points)


def award_experience(player: PlayerState, amount: int, rules: RuleSet) -> bool:
    """
    Add experience and apply any level-up.

    A level-up recomputes max HP and restores HP to full.
    Returns True if the level changed.
    """
    if amount <= 0:
        return False

    player.experience += amount
    new_level = rules.level_for_experience(player.experience)
    if new_level <= player.level:
        return False

    logger.info(
        "Player %s reached level %d (experience %d)",
        player.player_id, new_level, player.experience,
    )
    player.level = new_level
    refresh_max_hit_points(player, rules)
    player.hit_points = player.max_hit_points
    return True


def tick_effects(player: PlayerState) -> None:
    """Advance every active effect by one encounter and drop expired ones."""
    ticked = [effect.tick() for effect in player.active_effects]
    player.active_effects = [effect for effect in ticked if effect.duration > 0]


def grant_item(player: PlayerState, item: Item, rules: RuleSet) -> bool:
    """Add an item if the inventory has room; returns False when full."""
    if len(player.inventory) >= rules.inventory_capacity:
        logger.info(
            "Player %s inventory full; %s not granted", player.player_id, item.item_id
        )
        return False
    player.inventory.append(item)
    return True
