"""
Tests for rule tables and progression.
"""

import json

import pytest

from ..engine_core.progression import award_experience, refresh_max_hit_points, tick_effects
from ..engine_core.rules import DEFAULT_RULES, load_rules, rules_from_dict, rules_to_dict
from ..engine_core.state import ImpactSource, PlayerState
from ..engine_core.templates import Difficulty, PhilosophicalAlignment, TemporaryEffect


class TestRuleSet:

    @pytest.mark.parametrize("experience,level", [
        (0, 1), (99, 1), (100, 2), (249, 2), (250, 3), (3200, 10), (99999, 10),
    ])
    def test_level_for_experience(self, experience, level):
        """Levels follow the threshold table."""
        assert DEFAULT_RULES.level_for_experience(experience) == level

    def test_max_hit_points(self):
        """Max hit points grow with body and level."""
        assert DEFAULT_RULES.max_hit_points(body=5, level=1) == 30
        assert DEFAULT_RULES.max_hit_points(body=5, level=2) == 35

    def test_difficulty_multipliers(self):
        """Harder tiers scale damage up."""
        assert DEFAULT_RULES.difficulty_multiplier(Difficulty.EASY) == 1.0
        assert DEFAULT_RULES.difficulty_multiplier(Difficulty.EXPERT) == 2.0


class TestRuleOverrides:

    def test_override_scalars(self):
        """Overridden scalars replace defaults, others stay."""
        rules = rules_from_dict({"fallacySlots": 2, "alignmentMargin": 3})
        assert rules.fallacy_slots == 2
        assert rules.alignment_margin == 3
        assert rules.inventory_capacity == DEFAULT_RULES.inventory_capacity

    def test_override_starter_fallacies_merges(self):
        """Starter overrides merge per alignment."""
        rules = rules_from_dict({"starterFallacies": {"Nihilist": ["StrawMan"]}})
        nihilist = rules.starter_fallacies[PhilosophicalAlignment.NIHILIST]
        assert [f.value for f in nihilist] == ["StrawMan"]
        assert PhilosophicalAlignment.UTILITARIAN in rules.starter_fallacies

    def test_unknown_key_rejected(self):
        """Typos in a rules file are errors."""
        with pytest.raises(ValueError, match="Unknown rules key"):
            rules_from_dict({"luck": 7})

    def test_thresholds_must_increase(self):
        """Level thresholds must strictly increase."""
        with pytest.raises(ValueError):
            rules_from_dict({"levelThresholds": [0, 100, 100]})

    @pytest.mark.parametrize("key", [
        "unarmedMindDivisor", "heartMitigationDivisor", "alignmentWindow", "fallacySlots",
    ])
    def test_zero_divisors_and_windows_rejected(self, key):
        """Values that would divide by zero or empty a window are refused."""
        with pytest.raises(ValueError, match=key):
            rules_from_dict({key: 0})

    def test_marker_rule_window_must_be_positive(self):
        """A zero window would silently count everything."""
        with pytest.raises(ValueError):
            rules_from_dict({"markerRules": [
                {"marker": "Sophist", "kind": "negative_impacts", "threshold": 2, "window": 0},
            ]})

    def test_marker_rule_single_source(self):
        """A hand-written rule may name one source instead of a list."""
        rules = rules_from_dict({"markerRules": [
            {"marker": "Hedonist", "kind": "negative_impacts", "threshold": 2, "source": "item"},
        ]})
        assert rules.marker_rules[0].sources == (ImpactSource.ITEM,)

    def test_round_trip_through_dict(self):
        """rules_to_dict output loads back to the same rules."""
        assert rules_from_dict(rules_to_dict(DEFAULT_RULES)) == DEFAULT_RULES

    def test_load_rules_file(self, tmp_path):
        """Overrides load from JSON; no path means defaults."""
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"inventoryCapacity": 3}), encoding="utf-8")

        assert load_rules(path).inventory_capacity == 3
        assert load_rules(None) is DEFAULT_RULES


class TestProgression:

    @pytest.fixture
    def hero(self):
        player = PlayerState(player_id="h", name="Hero")
        refresh_max_hit_points(player, DEFAULT_RULES)
        player.hit_points = 10
        return player

    def test_level_up_heals_to_full(self, hero):
        """Leveling up refills hit points."""
        leveled = award_experience(hero, 120, DEFAULT_RULES)

        assert leveled
        assert hero.level == 2
        assert hero.max_hit_points == 35
        assert hero.hit_points == 35

    def test_experience_without_level_up(self, hero):
        """Experience below the next threshold keeps hit points."""
        assert not award_experience(hero, 50, DEFAULT_RULES)
        assert hero.experience == 50
        assert hero.hit_points == 10

    def test_tick_effects_expires(self, hero):
        """Effects lose one duration and expire at zero."""
        hero.active_effects = [
            TemporaryEffect(duration=1, stat_bonus=3),
            TemporaryEffect(duration=2, penalty=1),
        ]
        tick_effects(hero)

        assert hero.active_effects == [TemporaryEffect(duration=1, penalty=1)]
