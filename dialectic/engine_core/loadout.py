"""
Loadout - Items, fallacy slots and resting.

Consumables are used up: their attribute modifiers become permanent
(clamped), their authenticity impact is recorded, and their temporary
effect starts. Weapons, armor and accessories are worn one per slot and
only count while worn.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .errors import InvalidStateError, ValidationError
from .ledger import AuthenticityLedger
from .progression import refresh_max_hit_points
from .rules import RuleSet
from .state import ATTRIBUTE_MAX, ATTRIBUTE_MIN, ImpactSource, PlayerState, clamp
from .templates import FallacyType

if TYPE_CHECKING:
    from ..content import ContentLibrary
    from ..session import PlayerRegistry
    from .combat import CombatEngine

logger = logging.getLogger(__name__)


def parse_fallacy_type(value: FallacyType | str) -> FallacyType:
    if isinstance(value, FallacyType):
        return value
    try:
        return FallacyType(value)
    except ValueError:
        raise ValidationError(
            f"Unknown fallacy type: {value!r}",
            {"validFallacyTypes": [f.value for f in FallacyType]},
        ) from None


class LoadoutManager:
    """Mutates a player's items, fallacy slots and hit points outside combat turns."""

    def __init__(
        self,
        registry: PlayerRegistry,
        ledger: AuthenticityLedger,
        library: ContentLibrary,
        combat: CombatEngine | None = None,
    ):
        self.registry = registry
        self.ledger = ledger
        self.library = library
        self.combat = combat

    @property
    def rules(self) -> RuleSet:
        return self.ledger.rules

    def _ensure_not_in_combat(self, player_id: str, what: str) -> None:
        if self.combat and self.combat.has_active_encounter(player_id):
            raise InvalidStateError(f"Cannot {what} during combat", {"playerId": player_id})

    def use_item(self, player_id: str, item_id: str) -> PlayerState:
        """Consume an item from the inventory. Allowed mid-combat."""
        self.library.get_item(item_id)

        with self.registry.transaction(player_id) as player:
            item = player.find_item(item_id)
            if item is None:
                raise ValidationError(
                    f"Item {item_id} is not in the inventory", {"itemId": item_id}
                )
            if not item.is_consumable:
                raise ValidationError(
                    f"Item {item_id} is not consumable; equip it instead",
                    {"itemId": item_id, "itemType": item.item_type.value},
                )

            player.body = clamp(player.body + item.body_modifier, ATTRIBUTE_MIN, ATTRIBUTE_MAX)
            player.mind = clamp(player.mind + item.mind_modifier, ATTRIBUTE_MIN, ATTRIBUTE_MAX)
            player.heart = clamp(player.heart + item.heart_modifier, ATTRIBUTE_MIN, ATTRIBUTE_MAX)

            if item.authenticity_impact:
                self.ledger.apply_impact(
                    player,
                    item.authenticity_impact,
                    reason=item.philosophical_meaning or item.description,
                    label=item.name,
                    source=ImpactSource.ITEM,
                )
            if item.temporary_effect:
                player.active_effects.append(item.temporary_effect)

            player.inventory.remove(item)
            refresh_max_hit_points(player, self.rules)

        logger.info("Player %s used %s", player_id, item_id)
        return player

    def equip_item(self, player_id: str, item_id: str) -> PlayerState:
        """
        Wear a non-consumable item, replacing whatever held its slot.

        The item's authenticity impact is recorded the first time the
        player wears it; taking it off and on again records nothing.
        """
        self.library.get_item(item_id)

        with self.registry.transaction(player_id) as player:
            self._ensure_not_in_combat(player_id, "change equipment")
            item = player.find_item(item_id)
            if item is None:
                raise ValidationError(
                    f"Item {item_id} is not in the inventory", {"itemId": item_id}
                )
            if item.is_consumable:
                raise ValidationError(
                    f"Item {item_id} is consumable; use it instead", {"itemId": item_id}
                )
            if player.equipped_items.get(item.item_type) == item_id:
                return player

            player.equipped_items[item.item_type] = item_id
            if item.authenticity_impact and item_id not in player.attuned_items:
                player.attuned_items.append(item_id)
                self.ledger.apply_impact(
                    player,
                    item.authenticity_impact,
                    reason=item.philosophical_meaning or item.description,
                    label=item.name,
                    source=ImpactSource.ITEM,
                )
            refresh_max_hit_points(player, self.rules)

        return player

    def unequip_item(self, player_id: str, item_id: str) -> PlayerState:
        with self.registry.transaction(player_id) as player:
            self._ensure_not_in_combat(player_id, "change equipment")
            slot = next(
                (s for s, worn in player.equipped_items.items() if worn == item_id), None
            )
            if slot is None:
                raise ValidationError(f"Item {item_id} is not equipped", {"itemId": item_id})
            del player.equipped_items[slot]
            refresh_max_hit_points(player, self.rules)
        return player

    def equip_fallacy(self, player_id: str, fallacy_type: FallacyType | str) -> PlayerState:
        """Add a fallacy to the combat loadout."""
        fallacy = self.library.get_fallacy(parse_fallacy_type(fallacy_type))

        with self.registry.transaction(player_id) as player:
            self._ensure_not_in_combat(player_id, "change fallacies")
            if player.find_fallacy(fallacy.fallacy_type):
                raise InvalidStateError(
                    f"{fallacy.fallacy_type.value} is already equipped",
                    {"fallacyType": fallacy.fallacy_type.value},
                )
            if fallacy.required_level > player.level:
                raise InvalidStateError(
                    f"{fallacy.fallacy_type.value} requires level {fallacy.required_level}",
                    {"requiredLevel": fallacy.required_level, "level": player.level},
                )
            if len(player.equipped_fallacies) >= self.rules.fallacy_slots:
                raise InvalidStateError(
                    f"All {self.rules.fallacy_slots} fallacy slots are full",
                    {"fallacySlots": self.rules.fallacy_slots},
                )
            player.equipped_fallacies.append(fallacy)
        return player

    def unequip_fallacy(self, player_id: str, fallacy_type: FallacyType | str) -> PlayerState:
        parsed = parse_fallacy_type(fallacy_type)
        with self.registry.transaction(player_id) as player:
            self._ensure_not_in_combat(player_id, "change fallacies")
            fallacy = player.find_fallacy(parsed)
            if fallacy is None:
                raise ValidationError(
                    f"{parsed.value} is not equipped", {"fallacyType": parsed.value}
                )
            player.equipped_fallacies.remove(fallacy)
        return player

    def rest(self, player_id: str) -> PlayerState:
        """Restore hit points to full."""
        with self.registry.transaction(player_id) as player:
            self._ensure_not_in_combat(player_id, "rest")
            refresh_max_hit_points(player, self.rules)
            player.hit_points = player.max_hit_points
        return player
