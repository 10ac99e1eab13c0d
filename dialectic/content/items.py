"""
Item definitions.

Consumables are used up; everything else is worn in its slot.
Several consumables cost authenticity: indulgence is tempting.
The ring and the crown are only offered by demons.
"""

from ..engine_core.templates import Item, ItemType, TemporaryEffect


HEMLOCK_TEA = Item(
    item_id="hemlock_tea",
    name="Diluted Hemlock Tea",
    item_type=ItemType.CONSUMABLE,
    mind_modifier=1,
    authenticity_impact=-4,
    temporary_effect=TemporaryEffect(duration=2, stat_bonus=2, penalty=1),
    description="A bitter draught that sharpens the mind and numbs the body.",
    philosophical_meaning="Socrates drank it rather than betray his principles.",
)

AMBROSIA_WINE = Item(
    item_id="ambrosia_wine",
    name="Ambrosia Wine",
    item_type=ItemType.CONSUMABLE,
    heart_modifier=-1,
    authenticity_impact=-6,
    temporary_effect=TemporaryEffect(duration=1, stat_bonus=3, penalty=0),
    description="Sweet enough to make any argument seem convincing.",
    philosophical_meaning="Epicurus warned that the pleasures of the table are the shallowest.",
)

MEDITATIONS_SCROLL = Item(
    item_id="meditations_scroll",
    name="Worn Copy of the Meditations",
    item_type=ItemType.CONSUMABLE,
    heart_modifier=1,
    authenticity_impact=3,
    description="Marginalia in an emperor's hand.",
    philosophical_meaning="You have power over your mind, not outside events.",
)

DIOGENES_LANTERN = Item(
    item_id="diogenes_lantern",
    name="Diogenes' Lantern",
    item_type=ItemType.ACCESSORY,
    mind_modifier=2,
    authenticity_impact=2,
    description="It still burns in broad daylight.",
    philosophical_meaning="A search for one honest person.",
)

STOIC_BREASTPLATE = Item(
    item_id="stoic_breastplate",
    name="Stoic Breastplate",
    item_type=ItemType.ARMOR,
    body_modifier=3,
    heart_modifier=1,
    description="Plain iron, polished by indifference.",
    philosophical_meaning="What cannot be changed need not be feared.",
)

OCCAMS_RAZOR = Item(
    item_id="occams_razor",
    name="Occam's Razor",
    item_type=ItemType.WEAPON,
    mind_modifier=3,
    description="Cuts away every assumption you do not need.",
    philosophical_meaning="Entities should not be multiplied beyond necessity.",
)

GADFLY_STING = Item(
    item_id="gadfly_sting",
    name="Gadfly's Sting",
    item_type=ItemType.WEAPON,
    mind_modifier=1,
    heart_modifier=1,
    authenticity_impact=1,
    description="Small, persistent, and deeply annoying to the complacent.",
    philosophical_meaning="The city is a sluggish horse; someone must wake it.",
)

RING_OF_GYGES = Item(
    item_id="ring_of_gyges",
    name="Ring of Gyges",
    item_type=ItemType.ACCESSORY,
    mind_modifier=2,
    heart_modifier=-2,
    description="Turn the stone inward and no one can see you.",
    philosophical_meaning="Glaucon asks whether anyone stays just once they cannot be caught.",
)

CROWN_OF_DOMINION = Item(
    item_id="crown_of_dominion",
    name="Crown of Dominion",
    item_type=ItemType.ARMOR,
    body_modifier=2,
    mind_modifier=2,
    heart_modifier=-2,
    description="Heavier every time you take it off.",
    philosophical_meaning="Thrasymachus: justice is the advantage of the stronger.",
)


ITEMS: dict[str, Item] = {
    item.item_id: item
    for item in (
        HEMLOCK_TEA,
        AMBROSIA_WINE,
        MEDITATIONS_SCROLL,
        DIOGENES_LANTERN,
        STOIC_BREASTPLATE,
        OCCAMS_RAZOR,
        GADFLY_STING,
        RING_OF_GYGES,
        CROWN_OF_DOMINION,
    )
}
