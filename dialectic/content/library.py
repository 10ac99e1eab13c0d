"""
Content Library - Lookup and validation over the static templates.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator

from ..engine_core.errors import NotFoundError
from ..engine_core.templates import (
    Difficulty,
    EnemyTemplate,
    Fallacy,
    FallacyType,
    Item,
    Scenario,
    Syllogism,
    Temptation,
)


@dataclass
class ContentLibrary:
    """
    All static content, indexed by id.

    Lookups raise NotFoundError so callers never handle None.
    """
    scenarios: dict[str, Scenario] = field(default_factory=dict)
    syllogisms: dict[str, Syllogism] = field(default_factory=dict)
    enemies: dict[str, EnemyTemplate] = field(default_factory=dict)
    fallacies: dict[FallacyType, Fallacy] = field(default_factory=dict)
    items: dict[str, Item] = field(default_factory=dict)
    temptations: dict[str, Temptation] = field(default_factory=dict)

    @classmethod
    def from_content(
        cls,
        scenarios: tuple[Scenario, ...] = (),
        syllogisms: tuple[Syllogism, ...] = (),
        enemies: tuple[EnemyTemplate, ...] = (),
        fallacies: tuple[Fallacy, ...] = (),
        items: tuple[Item, ...] = (),
        temptations: tuple[Temptation, ...] = (),
    ) -> ContentLibrary:
        return cls(
            scenarios={s.scenario_id: s for s in scenarios},
            syllogisms={s.syllogism_id: s for s in syllogisms},
            enemies={e.enemy_id: e for e in enemies},
            fallacies={f.fallacy_type: f for f in fallacies},
            items={i.item_id: i for i in items},
            temptations={t.temptation_id: t for t in temptations},
        )

    def iter_scenarios(self) -> Iterator[Scenario]:
        """Fresh iterator on every call; content order is preserved."""
        yield from self.scenarios.values()

    def get_scenario(self, scenario_id: str) -> Scenario:
        scenario = self.scenarios.get(scenario_id)
        if scenario is None:
            raise NotFoundError(
                f"Scenario {scenario_id} not found", {"scenarioId": scenario_id}
            )
        return scenario

    def get_syllogism(self, syllogism_id: str) -> Syllogism:
        syllogism = self.syllogisms.get(syllogism_id)
        if syllogism is None:
            raise NotFoundError(
                f"Syllogism {syllogism_id} not found", {"syllogismId": syllogism_id}
            )
        return syllogism

    def get_enemy(self, enemy_id: str) -> EnemyTemplate:
        enemy = self.enemies.get(enemy_id)
        if enemy is None:
            raise NotFoundError(f"Enemy {enemy_id} not found", {"enemyId": enemy_id})
        return enemy

    def get_fallacy(self, fallacy_type: FallacyType) -> Fallacy:
        fallacy = self.fallacies.get(fallacy_type)
        if fallacy is None:
            raise NotFoundError(
                f"Fallacy {fallacy_type.value} not found",
                {"fallacyType": fallacy_type.value},
            )
        return fallacy

    def get_item(self, item_id: str) -> Item:
        item = self.items.get(item_id)
        if item is None:
            raise NotFoundError(f"Item {item_id} not found", {"itemId": item_id})
        return item

    def get_temptation(self, temptation_id: str) -> Temptation:
        temptation = self.temptations.get(temptation_id)
        if temptation is None:
            raise NotFoundError(
                f"Temptation {temptation_id} not found", {"temptationId": temptation_id}
            )
        return temptation

    def syllogisms_for(self, difficulty: Difficulty) -> list[Syllogism]:
        """Syllogisms of one tier, falling back to everything if the tier is thin."""
        pool = [s for s in self.syllogisms.values() if s.difficulty == difficulty]
        if len(pool) < 2:
            pool = list(self.syllogisms.values())
        return pool


def validate_library(library: ContentLibrary) -> list[str]:
    """
    Check cross-references and invariants.

    Returns a list of error messages (empty if valid).
    """
    errors: list[str] = []

    if len(library.syllogisms) < 2:
        errors.append("At least two syllogisms are required")

    for scenario in library.scenarios.values():
        if not scenario.choices:
            errors.append(f"Scenario {scenario.scenario_id} has no choices")
        seen: set[str] = set()
        for choice in scenario.choices:
            if choice.choice_id in seen:
                errors.append(
                    f"Scenario {scenario.scenario_id} repeats choice {choice.choice_id}"
                )
            seen.add(choice.choice_id)
            if choice.reward_item_id and choice.reward_item_id not in library.items:
                errors.append(
                    f"Choice {choice.choice_id} rewards unknown item {choice.reward_item_id}"
                )

    for syllogism in library.syllogisms.values():
        if len(syllogism.premises) != 2:
            errors.append(f"Syllogism {syllogism.syllogism_id} must have two premises")

    for enemy in library.enemies.values():
        if enemy.max_hit_points <= 0:
            errors.append(f"Enemy {enemy.enemy_id} must have positive hit points")
        if enemy.attack <= 0:
            errors.append(f"Enemy {enemy.enemy_id} must have positive attack")

    for fallacy in library.fallacies.values():
        if fallacy.damage <= 0:
            errors.append(f"Fallacy {fallacy.fallacy_type.value} must deal positive damage")

    for temptation in library.temptations.values():
        if temptation.accept_impact >= 0:
            errors.append(
                f"Temptation {temptation.temptation_id} must cost authenticity when accepted"
            )
        if temptation.reward_item_id and temptation.reward_item_id not in library.items:
            errors.append(
                f"Temptation {temptation.temptation_id} offers unknown item "
                f"{temptation.reward_item_id}"
            )

    return errors
