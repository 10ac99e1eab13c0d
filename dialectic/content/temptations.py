"""
Temptation definitions - demons and their offers.

Accepting always costs authenticity. Rejecting earns a little back,
since refusing a real offer is an act of self-definition.
"""

from ..engine_core.templates import Temptation


LILITH = Temptation(
    temptation_id="demon_lilith",
    name="Lilith",
    offer=(
        "Put on this ring. Turn the stone inward and no eye will ever fall on "
        "you again. Take what you like; no one will know."
    ),
    literary_reference="Plato, Republic II: the Ring of Gyges",
    philosophical_concept="Would a just person stay just if they could never be caught?",
    accept_impact=-10,
    reject_impact=4,
    reward_item_id="ring_of_gyges",
)

SUCCUBUS = Temptation(
    temptation_id="demon_succubus",
    name="The Succubus",
    offer=(
        "Stay. Drink. Tomorrow's questions can wait for tomorrow, "
        "and tomorrow never has to come."
    ),
    literary_reference="Homer, Odyssey IX: the land of the Lotus-eaters",
    philosophical_concept="Pleasure as a flight from the burden of freedom",
    accept_impact=-8,
    reject_impact=2,
    reward_item_id="ambrosia_wine",
)

MEPHISTOPHELES = Temptation(
    temptation_id="mephistopheles",
    name="Mephistopheles",
    offer=(
        "Every crown and every answer, yours tonight. Sign here. Should you "
        "ever say to a moment 'stay, you are so fair', you belong to me."
    ),
    literary_reference="Goethe, Faust Part One",
    philosophical_concept="Striving sold for satisfaction is no longer striving",
    accept_impact=-15,
    reject_impact=5,
    reward_item_id="crown_of_dominion",
)


TEMPTATIONS: dict[str, Temptation] = {
    temptation.temptation_id: temptation
    for temptation in (LILITH, SUCCUBUS, MEPHISTOPHELES)
}
