"""
Scenario definitions - narrative decision points.

Every scenario offers one choice per committed alignment so that
alignment drift is always reachable.
"""

from ..engine_core.templates import Choice, PhilosophicalAlignment, Scenario


TROLLEY_AT_THE_CROSSING = Scenario(
    scenario_id="trolley_crossing",
    title="The Trolley at the Crossing",
    description=(
        "A runaway cart rattles toward five sleeping laborers. A lever beside you "
        "would divert it toward a single stranger."
    ),
    philosophical_basis="Philippa Foot's trolley problem",
    choices=(
        Choice(
            choice_id="pull_lever",
            text="Pull the lever. One life for five.",
            alignment_influence=PhilosophicalAlignment.UTILITARIAN,
            authenticity_change=5,
            reasoning="The arithmetic of suffering is unambiguous.",
        ),
        Choice(
            choice_id="refuse_to_choose",
            text="Step back. You will not make yourself the author of a death.",
            alignment_influence=PhilosophicalAlignment.EXISTENTIALIST,
            authenticity_change=3,
            reasoning="Refusal is also a choice, and you own it fully.",
        ),
        Choice(
            choice_id="walk_away",
            text="Walk on. Five, one, none: the universe does not keep score.",
            alignment_influence=PhilosophicalAlignment.NIHILIST,
            authenticity_change=-4,
            reasoning="Indifference dressed up as insight.",
        ),
    ),
)

THE_CAVE_MOUTH = Scenario(
    scenario_id="cave_mouth",
    title="The Mouth of the Cave",
    description=(
        "Prisoners chained in a cave watch shadows on the wall. You have seen the sun. "
        "They laugh at your stories."
    ),
    philosophical_basis="Plato's allegory of the cave",
    choices=(
        Choice(
            choice_id="free_them_gently",
            text="Loosen one chain at a time, so the light does not blind them.",
            alignment_influence=PhilosophicalAlignment.UTILITARIAN,
            authenticity_change=4,
            reasoning="Truth delivered carelessly helps no one.",
            reward_item_id="diogenes_lantern",
        ),
        Choice(
            choice_id="return_alone",
            text="Go back into the sunlight. Each must climb out alone.",
            alignment_influence=PhilosophicalAlignment.EXISTENTIALIST,
            authenticity_change=2,
            reasoning="Freedom imposed is not freedom.",
        ),
        Choice(
            choice_id="join_the_shadows",
            text="Sit back down. The shadows are as real as anything else.",
            alignment_influence=PhilosophicalAlignment.NIHILIST,
            authenticity_change=-6,
            reasoning="You chose comfort and called it relativism.",
        ),
    ),
)

THE_BOULDER = Scenario(
    scenario_id="the_boulder",
    title="The Boulder on the Hill",
    description=(
        "A man pushes a boulder up a hill. It rolls back down. He begins again. "
        "He asks whether you will help."
    ),
    philosophical_basis="Camus, The Myth of Sisyphus",
    choices=(
        Choice(
            choice_id="build_a_ramp",
            text="Help him build a ramp so the stone stays at the top.",
            alignment_influence=PhilosophicalAlignment.UTILITARIAN,
            authenticity_change=2,
            reasoning="If labor can be reduced, it should be.",
        ),
        Choice(
            choice_id="push_with_him",
            text="Put your shoulder to the stone. One must imagine him happy.",
            alignment_influence=PhilosophicalAlignment.EXISTENTIALIST,
            authenticity_change=6,
            reasoning="Meaning is made in the pushing.",
            reward_item_id="stoic_breastplate",
        ),
        Choice(
            choice_id="tell_him_to_stop",
            text="Tell him it is pointless and he should simply lie down.",
            alignment_influence=PhilosophicalAlignment.NIHILIST,
            authenticity_change=-2,
            reasoning="Honest, perhaps, but cruel in its certainty.",
        ),
    ),
)

THE_RING_OF_GYGES = Scenario(
    scenario_id="ring_of_gyges",
    title="The Ring of Gyges",
    description=(
        "You find a ring that makes its wearer invisible. No one would ever "
        "know what you did while wearing it."
    ),
    philosophical_basis="Plato, Republic Book II",
    choices=(
        Choice(
            choice_id="use_for_good",
            text="Wear it to expose the corrupt magistrates.",
            alignment_influence=PhilosophicalAlignment.UTILITARIAN,
            authenticity_change=1,
            reasoning="Good outcomes, but by deceit.",
            reward_item_id="occams_razor",
        ),
        Choice(
            choice_id="destroy_the_ring",
            text="Throw it into the sea. You are who you are when no one watches.",
            alignment_influence=PhilosophicalAlignment.EXISTENTIALIST,
            authenticity_change=8,
            reasoning="Character is not a performance for an audience.",
        ),
        Choice(
            choice_id="take_what_you_want",
            text="Keep it. Morality was only ever fear of being caught.",
            alignment_influence=PhilosophicalAlignment.NIHILIST,
            authenticity_change=-8,
            reasoning="Thrasymachus would be proud.",
            reward_item_id="ambrosia_wine",
        ),
    ),
)

THE_EXPERIENCE_MACHINE = Scenario(
    scenario_id="experience_machine",
    title="The Experience Machine",
    description=(
        "A tinkerer offers a machine that will feed you a lifetime of perfect, "
        "simulated happiness."
    ),
    philosophical_basis="Robert Nozick, Anarchy, State, and Utopia",
    choices=(
        Choice(
            choice_id="plug_in",
            text="Plug in. Pleasure is pleasure, wherever it comes from.",
            alignment_influence=PhilosophicalAlignment.UTILITARIAN,
            authenticity_change=-5,
            reasoning="You traded the world for a picture of it.",
            reward_item_id="hemlock_tea",
        ),
        Choice(
            choice_id="stay_real",
            text="Decline. A real life, however hard, is yours.",
            alignment_influence=PhilosophicalAlignment.EXISTENTIALIST,
            authenticity_change=5,
            reasoning="Authorship over experience matters more than its quality.",
            reward_item_id="meditations_scroll",
        ),
        Choice(
            choice_id="smash_machine",
            text="Smash it. Neither world means anything anyway.",
            alignment_influence=PhilosophicalAlignment.NIHILIST,
            authenticity_change=-3,
            reasoning="Destruction is not the same as an answer.",
        ),
    ),
)


SCENARIOS: tuple[Scenario, ...] = (
    TROLLEY_AT_THE_CROSSING,
    THE_CAVE_MOUTH,
    THE_BOULDER,
    THE_RING_OF_GYGES,
    THE_EXPERIENCE_MACHINE,
)
