"""
Tests for demon temptations.

Tests:
- Accepting costs authenticity and grants the offered item
- Rejecting records the smaller positive impact
- Each temptation is answered at most once
- Temptations count toward Hedonist
"""

import pytest

from ..engine_core.errors import InvalidStateError, NotFoundError
from ..engine_core.state import ImpactSource
from ..engine_core.templates import PermanentMarker


class TestAcceptTemptation:

    def test_accept_costs_authenticity_and_grants_item(self, service, player):
        """Lilith's ring arrives with a -10 ledger entry."""
        updated = service.temptations.accept(player.player_id, "demon_lilith")

        entry = updated.authenticity_metric.history[-1]
        assert updated.authenticity_metric.value == 40
        assert entry.source == ImpactSource.TEMPTATION
        assert entry.choice == "Accepted Lilith's offer"
        assert updated.find_item("ring_of_gyges") is not None
        assert updated.resolved_temptations == ["demon_lilith"]

    def test_full_inventory_still_costs(self, service, player):
        """With no room the item is lost but the price is still paid."""
        with service.registry.transaction(player.player_id) as working:
            tea = service.library.get_item("hemlock_tea")
            working.inventory = [tea] * service.rules.inventory_capacity

        updated = service.temptations.accept(player.player_id, "demon_lilith")

        assert updated.find_item("ring_of_gyges") is None
        assert updated.authenticity_metric.value == 40

    def test_accepting_every_offer_earns_hedonist(self, service, player):
        """Three accepted offers earn Hedonist."""
        for temptation_id in ("demon_lilith", "demon_succubus", "mephistopheles"):
            updated = service.temptations.accept(player.player_id, temptation_id)

        assert updated.authenticity_metric.has_marker(PermanentMarker.HEDONIST)
        assert updated.authenticity_metric.value == 17

    def test_items_and_temptations_share_hedonist(self, service, player):
        """Two indulgent items plus one accepted offer make three."""
        with service.registry.transaction(player.player_id) as working:
            wine = service.library.get_item("ambrosia_wine")
            working.inventory.extend([wine, wine])
        service.loadout.use_item(player.player_id, "ambrosia_wine")
        service.loadout.use_item(player.player_id, "ambrosia_wine")

        updated = service.temptations.accept(player.player_id, "demon_succubus")

        assert updated.authenticity_metric.has_marker(PermanentMarker.HEDONIST)


class TestRejectTemptation:

    def test_reject_records_positive_impact(self, service, player):
        """Rejecting earns a little authenticity and no item."""
        updated = service.temptations.reject(player.player_id, "mephistopheles")

        assert updated.authenticity_metric.value == 55
        assert updated.find_item("crown_of_dominion") is None
        assert updated.resolved_temptations == ["mephistopheles"]

    def test_rejections_never_earn_hedonist(self, service, player):
        """Positive temptation entries never count toward Hedonist."""
        for temptation_id in ("demon_lilith", "demon_succubus", "mephistopheles"):
            updated = service.temptations.reject(player.player_id, temptation_id)

        assert updated.authenticity_metric.permanent_markers == []
        assert updated.authenticity_metric.value == 61


class TestTemptationRules:

    def test_answered_only_once(self, service, player):
        """Rejecting cannot be repeated to farm authenticity."""
        service.temptations.reject(player.player_id, "demon_lilith")

        with pytest.raises(InvalidStateError):
            service.temptations.reject(player.player_id, "demon_lilith")
        with pytest.raises(InvalidStateError):
            service.temptations.accept(player.player_id, "demon_lilith")

        assert service.registry.get_player(player.player_id).authenticity_metric.value == 54

    def test_not_during_combat(self, service, player):
        """Temptations wait until the encounter ends."""
        service.combat.start_encounter(player.player_id, "wandering_sophist")
        with pytest.raises(InvalidStateError):
            service.temptations.accept(player.player_id, "demon_succubus")

    def test_unknown_temptation(self, service, player):
        """Unknown temptation ids are NOT_FOUND."""
        with pytest.raises(NotFoundError):
            service.temptations.accept(player.player_id, "beelzebub")

    def test_unknown_player(self, service):
        """Unknown players are NOT_FOUND."""
        with pytest.raises(NotFoundError):
            service.temptations.reject("ghost", "demon_lilith")

    def test_pending_excludes_answered(self, service, player):
        """Only unanswered temptations are still on offer."""
        updated = service.temptations.accept(player.player_id, "demon_succubus")

        pending = [t.temptation_id for t in service.temptations.pending_for(updated)]
        assert pending == ["demon_lilith", "mephistopheles"]
