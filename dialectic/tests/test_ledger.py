"""
Tests for the authenticity ledger.

Tests:
- Clamping of the metric value
- History recording
- Permanent marker awards and monotonicity
- Rejection of bad impact amounts
"""

import math
import random

import pytest

from ..engine_core.errors import ValidationError
from ..engine_core.ledger import AuthenticityLedger
from ..engine_core.rules import replay_value
from ..engine_core.state import ImpactSource
from ..engine_core.templates import PermanentMarker, PhilosophicalAlignment
from .conftest import FIXED_TIMESTAMP


class TestApplyImpact:
    """Tests for recording impacts."""

    def test_impact_moves_value(self, ledger, bare_player):
        """A positive impact raises the value and records one entry."""
        metric = ledger.apply_impact(bare_player, 5, reason="Kept a promise", label="promise")

        assert metric.value == 55
        assert len(metric.history) == 1

    def test_large_negative_impact_clamps_to_zero(self, ledger, bare_player):
        """Impact -60 at value 50 leaves the value at 0."""
        metric = ledger.apply_impact(bare_player, -60, reason="Betrayal", label="betray")

        assert metric.value == 0
        assert metric.history[0].impact == -60

    def test_large_positive_impact_clamps_to_hundred(self, ledger, bare_player):
        """The value never exceeds 100."""
        metric = ledger.apply_impact(bare_player, 500, reason="Sainthood", label="saint")
        assert metric.value == 100

    def test_entry_records_context(self, ledger, bare_player):
        """Entries keep the label, reason and alignments at the time."""
        bare_player.philosophical_alignment = PhilosophicalAlignment.NIHILIST
        ledger.apply_impact(
            bare_player,
            -3,
            reason="Shrugged",
            label="shrug",
            source=ImpactSource.CHOICE,
            alignment_influence=PhilosophicalAlignment.UTILITARIAN,
        )

        entry = bare_player.authenticity_metric.history[0]
        assert entry.timestamp == FIXED_TIMESTAMP
        assert entry.choice == "shrug"
        assert entry.reason == "Shrugged"
        assert entry.alignment_influence == PhilosophicalAlignment.UTILITARIAN
        assert entry.alignment_at_time == PhilosophicalAlignment.NIHILIST

    @pytest.mark.parametrize("amount", [math.nan, math.inf, -math.inf, "5", None, True])
    def test_rejects_bad_amounts(self, ledger, bare_player, amount):
        """Non-finite and non-numeric impacts record nothing."""
        with pytest.raises(ValidationError):
            ledger.apply_impact(bare_player, amount, reason="x", label="x")
        assert bare_player.authenticity_metric.history == []

    def test_value_stays_bounded_for_random_sequences(self, ledger, bare_player):
        """The value stays in [0, 100] and matches a replay."""
        rng = random.Random(7)
        for _ in range(300):
            ledger.apply_impact(bare_player, rng.uniform(-40, 40), reason="r", label="l")
            assert 0 <= bare_player.authenticity_metric.value <= 100

        assert AuthenticityLedger.is_consistent(bare_player.authenticity_metric)
        assert bare_player.authenticity_metric.value == pytest.approx(
            replay_value(bare_player.authenticity_metric.history)
        )


class TestMarkers:
    """Tests for permanent marker awards."""

    def test_hypocrite_after_three_contradictions(self, ledger, bare_player):
        """Three choices against the held alignment earn Hypocrite."""
        bare_player.philosophical_alignment = PhilosophicalAlignment.EXISTENTIALIST
        for i in range(3):
            ledger.apply_impact(
                bare_player, 1, reason="r", label=f"c{i}",
                alignment_influence=PhilosophicalAlignment.NIHILIST,
            )

        assert bare_player.authenticity_metric.has_marker(PermanentMarker.HYPOCRITE)

    def test_undecided_never_contradicts(self, ledger, bare_player):
        """An Undecided player cannot be a hypocrite."""
        for i in range(5):
            ledger.apply_impact(
                bare_player, 1, reason="r", label=f"c{i}",
                alignment_influence=PhilosophicalAlignment.NIHILIST,
            )
        assert not bare_player.authenticity_metric.has_marker(PermanentMarker.HYPOCRITE)

    def test_hedonist_from_negative_item_impacts(self, ledger, bare_player):
        """Three costly items earn Hedonist."""
        for i in range(3):
            ledger.apply_impact(
                bare_player, -2, reason="Indulged", label=f"wine{i}", source=ImpactSource.ITEM
            )
        assert bare_player.authenticity_metric.permanent_markers == [PermanentMarker.HEDONIST]

    def test_sophist_from_negative_combat_impacts(self, ledger, bare_player):
        """Three accepted flawed arguments earn Sophist."""
        for i in range(3):
            ledger.apply_impact(
                bare_player, -2, reason="Accepted", label=f"s{i}", source=ImpactSource.COMBAT
            )
        assert bare_player.authenticity_metric.has_marker(PermanentMarker.SOPHIST)

    def test_martyr_when_value_peaks(self, ledger, bare_player):
        """Reaching 90 earns Martyr."""
        ledger.apply_impact(bare_player, 45, reason="Sacrifice", label="sacrifice")
        assert bare_player.authenticity_metric.has_marker(PermanentMarker.MARTYR)

    def test_markers_are_never_removed(self, ledger, bare_player):
        """Markers at history length n are a subset of markers at n+1."""
        rng = random.Random(11)
        sources = list(ImpactSource)
        influences = list(PhilosophicalAlignment)
        previous: set = set()

        for i in range(200):
            bare_player.philosophical_alignment = rng.choice(influences)
            ledger.apply_impact(
                bare_player,
                rng.uniform(-15, 15),
                reason="r",
                label=f"l{i}",
                source=rng.choice(sources),
                alignment_influence=rng.choice(influences),
            )
            current = set(bare_player.authenticity_metric.permanent_markers)
            assert previous <= current
            previous = current

    def test_marker_awarded_once(self, ledger, bare_player):
        """A marker is listed once however often its rule holds."""
        for i in range(6):
            ledger.apply_impact(
                bare_player, -1, reason="r", label=f"i{i}", source=ImpactSource.ITEM
            )
        markers = bare_player.authenticity_metric.permanent_markers
        assert markers.count(PermanentMarker.HEDONIST) == 1
