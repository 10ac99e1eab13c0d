"""
Fallacy definitions - the combat loadout catalogue.

Damage grows with the subtlety of the fallacy; the subtler ones
unlock at higher levels.
"""

from ..engine_core.templates import Fallacy, FallacyType


AD_HOMINEM = Fallacy(
    fallacy_type=FallacyType.AD_HOMINEM,
    argument="You can't trust his theory of justice; he was rude to a waiter once.",
    correct_identification="Attacks the arguer instead of the argument.",
    explanation="The truth of a claim is independent of the character of whoever states it.",
    damage=6,
)

STRAW_MAN = Fallacy(
    fallacy_type=FallacyType.STRAW_MAN,
    argument="She wants fewer cars downtown, so she wants to ban all transport.",
    correct_identification="Refutes a distorted version of the opposing view.",
    explanation="Defeating an exaggeration leaves the actual position untouched.",
    damage=6,
)

APPEAL_TO_AUTHORITY = Fallacy(
    fallacy_type=FallacyType.APPEAL_TO_AUTHORITY,
    argument="A famous physicist said this diet works, so it must.",
    correct_identification="Treats an authority outside their field as proof.",
    explanation="Expertise does not transfer across domains, and even experts need evidence.",
    damage=7,
)

APPEAL_TO_CONSEQUENCES = Fallacy(
    fallacy_type=FallacyType.APPEAL_TO_CONSEQUENCES,
    argument="If free will were an illusion life would be bleak, so free will exists.",
    correct_identification="Judges truth by how pleasant the outcome would be.",
    explanation="Whether a belief is comforting says nothing about whether it is true.",
    damage=7,
)

CIRCULAR_REASONING = Fallacy(
    fallacy_type=FallacyType.CIRCULAR_REASONING,
    argument="The scripture is true because the scripture says so.",
    correct_identification="Assumes the conclusion among its premises.",
    explanation="An argument that presupposes its conclusion gives no independent support.",
    damage=7,
)

FALSE_DILEMMA = Fallacy(
    fallacy_type=FallacyType.FALSE_DILEMMA,
    argument="Either you support every war or you hate your country.",
    correct_identification="Presents two options as the only possibilities.",
    explanation="Most questions admit more than two answers; hidden alternatives were excluded.",
    damage=8,
    required_level=2,
)

SLIPPERY_SLOPE = Fallacy(
    fallacy_type=FallacyType.SLIPPERY_SLOPE,
    argument="If we let students redo one exam, soon nobody will ever fail anything.",
    correct_identification="Assumes a chain of consequences without showing each link.",
    explanation="Each step in a causal chain needs its own support; inevitability is asserted, not shown.",
    damage=9,
    required_level=3,
)

EQUIVOCATION = Fallacy(
    fallacy_type=FallacyType.EQUIVOCATION,
    argument="A feather is light. What is light cannot be dark. So a feather cannot be dark.",
    correct_identification="Shifts the meaning of a key term mid-argument.",
    explanation="The argument only looks valid because one word carries two senses.",
    damage=11,
    required_level=4,
)


FALLACIES: dict[FallacyType, Fallacy] = {
    fallacy.fallacy_type: fallacy
    for fallacy in (
        AD_HOMINEM,
        STRAW_MAN,
        APPEAL_TO_AUTHORITY,
        APPEAL_TO_CONSEQUENCES,
        CIRCULAR_REASONING,
        FALSE_DILEMMA,
        SLIPPERY_SLOPE,
        EQUIVOCATION,
    )
}
