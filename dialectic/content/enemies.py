"""
Enemy definitions.

Each enemy embodies one fallacy and is weak to another. Difficulty
selects which syllogisms the encounter draws from.
"""

from ..engine_core.templates import Difficulty, EnemyTemplate, FallacyType


WANDERING_SOPHIST = EnemyTemplate(
    enemy_id="wandering_sophist",
    name="The Wandering Sophist",
    historical_figure="Gorgias",
    represented_flaw=FallacyType.EQUIVOCATION,
    max_hit_points=30,
    weakness=FallacyType.STRAW_MAN,
    attack=4,
    experience_reward=60,
    difficulty=Difficulty.EASY,
    lore="Charges a fee to prove that nothing exists, and another to prove the opposite.",
)

MARKETPLACE_DEMAGOGUE = EnemyTemplate(
    enemy_id="marketplace_demagogue",
    name="The Marketplace Demagogue",
    historical_figure="Cleon",
    represented_flaw=FallacyType.AD_HOMINEM,
    max_hit_points=35,
    weakness=FallacyType.AD_HOMINEM,
    attack=5,
    experience_reward=75,
    difficulty=Difficulty.EASY,
    lore="Never lost a debate, because he never once addressed an argument.",
)

ORACLE_OF_CERTAINTY = EnemyTemplate(
    enemy_id="oracle_of_certainty",
    name="The Oracle of Certainty",
    historical_figure="The Pythia",
    represented_flaw=FallacyType.APPEAL_TO_AUTHORITY,
    max_hit_points=45,
    weakness=FallacyType.APPEAL_TO_AUTHORITY,
    attack=5,
    experience_reward=110,
    difficulty=Difficulty.MEDIUM,
    lore="Speaks only in pronouncements. Questions are heresy.",
)

DOOMSAYER = EnemyTemplate(
    enemy_id="doomsayer",
    name="The Doomsayer",
    historical_figure="Cassandra, misremembered",
    represented_flaw=FallacyType.SLIPPERY_SLOPE,
    max_hit_points=60,
    weakness=FallacyType.APPEAL_TO_CONSEQUENCES,
    attack=6,
    experience_reward=160,
    difficulty=Difficulty.HARD,
    lore="Every small step leads, inevitably, to the abyss.",
)

OUROBOROS_SCHOLAR = EnemyTemplate(
    enemy_id="ouroboros_scholar",
    name="The Ouroboros Scholar",
    historical_figure="An anonymous scholastic",
    represented_flaw=FallacyType.CIRCULAR_REASONING,
    max_hit_points=85,
    weakness=FallacyType.CIRCULAR_REASONING,
    attack=8,
    experience_reward=260,
    difficulty=Difficulty.EXPERT,
    lore="Proves the books are infallible by citing the books.",
)


ENEMIES: dict[str, EnemyTemplate] = {
    enemy.enemy_id: enemy
    for enemy in (
        WANDERING_SOPHIST,
        MARKETPLACE_DEMAGOGUE,
        ORACLE_OF_CERTAINTY,
        DOOMSAYER,
        OUROBOROS_SCHOLAR,
    )
}
