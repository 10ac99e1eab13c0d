"""
Tests for items, fallacy slots and resting.
"""

import pytest

from ..engine_core.errors import InvalidStateError, NotFoundError, ValidationError
from ..engine_core.state import ImpactSource, PlayerState
from ..engine_core.templates import FallacyType, ItemType, PermanentMarker


def give(service, player_id, *item_ids):
    with service.registry.transaction(player_id) as working:
        for item_id in item_ids:
            working.inventory.append(service.library.get_item(item_id))


class TestUseItem:

    def test_consumable_applies_everything(self, service, player):
        """Using a consumable applies modifiers, impact and effect."""
        give(service, player.player_id, "hemlock_tea")

        updated = service.loadout.use_item(player.player_id, "hemlock_tea")

        assert updated.mind == 6
        assert updated.find_item("hemlock_tea") is None
        assert updated.active_effects[0].stat_bonus == 2
        assert updated.authenticity_metric.value == 46
        assert updated.authenticity_metric.history[-1].source == ImpactSource.ITEM

    def test_item_must_be_carried(self, service, player):
        """Items not in the inventory cannot be used."""
        with pytest.raises(ValidationError):
            service.loadout.use_item(player.player_id, "hemlock_tea")

    def test_unknown_item(self, service, player):
        """Unknown item ids are NOT_FOUND."""
        with pytest.raises(NotFoundError):
            service.loadout.use_item(player.player_id, "philosophers_stone")

    def test_equipment_cannot_be_used(self, service, player):
        """Equipment is equipped, not consumed."""
        give(service, player.player_id, "occams_razor")
        with pytest.raises(ValidationError):
            service.loadout.use_item(player.player_id, "occams_razor")

    def test_usable_during_combat(self, service, player):
        """Consumables stay usable mid-encounter."""
        give(service, player.player_id, "meditations_scroll")
        service.combat.start_encounter(player.player_id, "wandering_sophist")

        updated = service.loadout.use_item(player.player_id, "meditations_scroll")
        assert updated.heart == 6

    def test_repeated_indulgence_earns_hedonist(self, service, player):
        """Three glasses of wine earn Hedonist."""
        give(service, player.player_id, "ambrosia_wine", "ambrosia_wine", "ambrosia_wine")
        for _ in range(3):
            updated = service.loadout.use_item(player.player_id, "ambrosia_wine")

        assert updated.authenticity_metric.has_marker(PermanentMarker.HEDONIST)
        assert updated.heart == 2


class TestEquipItem:

    def test_armor_raises_max_hit_points(self, service, player):
        """Worn armor adds body and max hit points."""
        give(service, player.player_id, "stoic_breastplate")

        updated = service.loadout.equip_item(player.player_id, "stoic_breastplate")

        assert updated.equipped_items[ItemType.ARMOR] == "stoic_breastplate"
        assert updated.effective_attribute("body") == 8
        assert updated.max_hit_points == 36
        assert updated.hit_points == 30

    def test_unequip_restores_max_hit_points(self, service, player):
        """Removing armor brings max hit points back down."""
        give(service, player.player_id, "stoic_breastplate")
        service.loadout.equip_item(player.player_id, "stoic_breastplate")

        updated = service.loadout.unequip_item(player.player_id, "stoic_breastplate")

        assert ItemType.ARMOR not in updated.equipped_items
        assert updated.max_hit_points == 30

    def test_equip_impact_applies_once(self, service, player):
        """Equipping an already worn item records nothing."""
        give(service, player.player_id, "diogenes_lantern")
        service.loadout.equip_item(player.player_id, "diogenes_lantern")
        updated = service.loadout.equip_item(player.player_id, "diogenes_lantern")

        assert updated.authenticity_metric.value == 52
        assert len(updated.authenticity_metric.history) == 1

    def test_equip_cycling_does_not_farm_authenticity(self, service, player):
        """Taking an item off and on again records its impact only once."""
        give(service, player.player_id, "diogenes_lantern")
        for _ in range(25):
            service.loadout.equip_item(player.player_id, "diogenes_lantern")
            updated = service.loadout.unequip_item(player.player_id, "diogenes_lantern")

        metric = updated.authenticity_metric
        assert metric.value == 52
        assert len(metric.history) == 1
        assert metric.permanent_markers == []
        assert updated.attuned_items == ["diogenes_lantern"]

    def test_attuned_items_survive_persistence(self, service, player):
        """The record of applied equip impacts is part of the stored player."""
        give(service, player.player_id, "diogenes_lantern")
        service.loadout.equip_item(player.player_id, "diogenes_lantern")

        restored = PlayerState.from_dict(service.get_player(player.player_id))
        assert restored.attuned_items == ["diogenes_lantern"]

    def test_one_item_per_slot(self, service, player):
        """A new weapon replaces the old one."""
        give(service, player.player_id, "occams_razor", "gadfly_sting")
        service.loadout.equip_item(player.player_id, "occams_razor")
        updated = service.loadout.equip_item(player.player_id, "gadfly_sting")

        assert updated.equipped_items == {ItemType.WEAPON: "gadfly_sting"}

    def test_consumables_cannot_be_equipped(self, service, player):
        """Consumables are used, not worn."""
        give(service, player.player_id, "hemlock_tea")
        with pytest.raises(ValidationError):
            service.loadout.equip_item(player.player_id, "hemlock_tea")

    def test_no_equipment_changes_in_combat(self, service, player):
        """Equipment is locked during an encounter."""
        give(service, player.player_id, "occams_razor")
        service.combat.start_encounter(player.player_id, "wandering_sophist")
        with pytest.raises(InvalidStateError):
            service.loadout.equip_item(player.player_id, "occams_razor")

    def test_unequip_requires_equipped(self, service, player):
        """Only worn items can be taken off."""
        with pytest.raises(ValidationError):
            service.loadout.unequip_item(player.player_id, "occams_razor")


class TestFallacies:

    def test_equip_fallacy(self, service, player):
        """A free slot takes a new fallacy."""
        updated = service.loadout.equip_fallacy(player.player_id, "StrawMan")
        assert updated.find_fallacy(FallacyType.STRAW_MAN) is not None
        assert len(updated.equipped_fallacies) == 3

    def test_duplicate_rejected(self, service, player):
        """The same fallacy cannot be equipped twice."""
        with pytest.raises(InvalidStateError):
            service.loadout.equip_fallacy(player.player_id, "AdHominem")

    def test_level_requirement(self, service, player):
        """Fallacies above the player's level are refused."""
        with pytest.raises(InvalidStateError) as exc_info:
            service.loadout.equip_fallacy(player.player_id, "FalseDialemma")
        assert exc_info.value.details["requiredLevel"] == 2

    def test_slots_are_limited(self, service, player):
        """No more than four fallacies fit."""
        service.loadout.equip_fallacy(player.player_id, "StrawMan")
        service.loadout.equip_fallacy(player.player_id, "CircularReasoning")
        with pytest.raises(InvalidStateError):
            service.loadout.equip_fallacy(player.player_id, "AppealToConsequences")

    def test_unknown_fallacy_type(self, service, player):
        """Unknown fallacy names are validation errors."""
        with pytest.raises(ValidationError):
            service.loadout.equip_fallacy(player.player_id, "RedHerring")

    def test_unequip_fallacy(self, service, player):
        """An equipped fallacy frees its slot."""
        updated = service.loadout.unequip_fallacy(player.player_id, "AdHominem")
        assert updated.find_fallacy(FallacyType.AD_HOMINEM) is None

    def test_unequip_missing_fallacy(self, service, player):
        """Fallacies not equipped cannot be removed."""
        with pytest.raises(ValidationError):
            service.loadout.unequip_fallacy(player.player_id, "StrawMan")


class TestRest:

    def test_rest_restores_hit_points(self, service, player):
        """Resting heals to full."""
        with service.registry.transaction(player.player_id) as working:
            working.hit_points = 3

        assert service.loadout.rest(player.player_id).hit_points == 30

    def test_no_rest_in_combat(self, service, player):
        """Resting is refused mid-encounter."""
        service.combat.start_encounter(player.player_id, "wandering_sophist")
        with pytest.raises(InvalidStateError):
            service.loadout.rest(player.player_id)
