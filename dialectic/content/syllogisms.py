"""
Syllogism definitions - the arguments judged in combat.

Each difficulty tier needs at least two entries so an encounter never
repeats the same argument on consecutive turns.
"""

from ..engine_core.templates import Difficulty, FallacyType, Syllogism


SYLLOGISMS: tuple[Syllogism, ...] = (
    # Easy
    Syllogism(
        syllogism_id="mortal_socrates",
        premises=("All men are mortal.", "Socrates is a man."),
        conclusion="Socrates is mortal.",
        valid=True,
        difficulty=Difficulty.EASY,
        explanation="Barbara: every member of the middle term shares the predicate.",
    ),
    Syllogism(
        syllogism_id="cats_and_dogs",
        premises=("All cats are animals.", "All dogs are animals."),
        conclusion="All dogs are cats.",
        valid=False,
        difficulty=Difficulty.EASY,
        explanation="Undistributed middle: sharing a category does not make two things identical.",
        flawed_reasoning_impact=-2,
    ),
    Syllogism(
        syllogism_id="no_stones_breathe",
        premises=("No stones breathe.", "All granite is stone."),
        conclusion="No granite breathes.",
        valid=True,
        difficulty=Difficulty.EASY,
        explanation="Celarent: what is excluded from the whole is excluded from its part.",
    ),
    Syllogism(
        syllogism_id="wet_streets",
        premises=("If it rains, the streets are wet.", "The streets are wet."),
        conclusion="It rained.",
        valid=False,
        difficulty=Difficulty.EASY,
        explanation="Affirming the consequent: a street cleaner also wets the streets.",
        flawed_reasoning_impact=-2,
    ),
    # Medium
    Syllogism(
        syllogism_id="virtuous_philosophers",
        premises=("Some philosophers are virtuous.", "All virtuous people are happy."),
        conclusion="Some philosophers are happy.",
        valid=True,
        difficulty=Difficulty.MEDIUM,
        explanation="Darii: the virtuous philosophers carry happiness with them.",
    ),
    Syllogism(
        syllogism_id="expert_said_so",
        premises=(
            "The oracle says the harvest will fail.",
            "Whatever the oracle says is true, because the oracle says so.",
        ),
        conclusion="The harvest will fail.",
        valid=False,
        difficulty=Difficulty.MEDIUM,
        explanation="The second premise is circular; the authority vouches for itself.",
        exemplifies=FallacyType.CIRCULAR_REASONING,
        flawed_reasoning_impact=-3,
    ),
    Syllogism(
        syllogism_id="modus_tollens_lamp",
        premises=("If the lamp is lit, the oil is burning.", "The oil is not burning."),
        conclusion="The lamp is not lit.",
        valid=True,
        difficulty=Difficulty.MEDIUM,
        explanation="Modus tollens: denying the consequent denies the antecedent.",
    ),
    # Hard
    Syllogism(
        syllogism_id="illicit_major_poets",
        premises=("All poets are dreamers.", "No merchants are poets."),
        conclusion="No merchants are dreamers.",
        valid=False,
        difficulty=Difficulty.HARD,
        explanation="Illicit major: 'dreamers' is distributed in the conclusion but not in the premise.",
        flawed_reasoning_impact=-3,
    ),
    Syllogism(
        syllogism_id="first_step",
        premises=(
            "If we permit one lie, we permit all lies.",
            "We permitted one lie.",
        ),
        conclusion="We permit all lies.",
        valid=True,
        difficulty=Difficulty.HARD,
        explanation="Formally valid modus ponens; the first premise is a slippery slope, but validity concerns form, not truth.",
        exemplifies=FallacyType.SLIPPERY_SLOPE,
    ),
    Syllogism(
        syllogism_id="some_not_sages",
        premises=("Some citizens are not sages.", "All sages are citizens."),
        conclusion="Some sages are not citizens.",
        valid=False,
        difficulty=Difficulty.HARD,
        explanation="The conclusion contradicts the second premise; nothing licenses the conversion.",
        flawed_reasoning_impact=-4,
    ),
    # Expert
    Syllogism(
        syllogism_id="light_feather",
        premises=("Whatever is light cannot be dark.", "A feather is light."),
        conclusion="A feather cannot be dark.",
        valid=False,
        difficulty=Difficulty.EXPERT,
        explanation="Equivocation: 'light' means pale in one premise and weightless in the other.",
        exemplifies=FallacyType.EQUIVOCATION,
        flawed_reasoning_impact=-5,
    ),
    Syllogism(
        syllogism_id="ferio_tyrants",
        premises=("No tyrant is free.", "Some rulers are tyrants."),
        conclusion="Some rulers are not free.",
        valid=True,
        difficulty=Difficulty.EXPERT,
        explanation="Ferio: the tyrannical rulers are excluded from freedom.",
    ),
)
