"""
Cleric class definition for Dolmenwood.

Holy warriors in the service of the Pluritine Church. Organised in a
strict religious hierarchy, they wield divine magic and the power
to turn undead.

Source: Dolmenwood Player Book, pages 60-61
"""

from src.classes.bard import EXPERT_ATTACK_BONUSES
from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.traits.trait_data import TraitCollection, TraitDefinition, TraitType


# =============================================================================
# CLERIC TRAITS
# =============================================================================

HOLY_ORDER_FIELD = "holy_order"

CLERIC_TURN_UNDEAD = TraitDefinition(
    trait_id="turn_undead",
    name="Turn Undead",
    trait_type=TraitType.ACTIVE,
    description="Present a holy symbol to drive off or destroy undead.",
    rollable=True,
    roll_formula="2d6",
)

CLERIC_DETECT_HOLY_MAGIC = TraitDefinition(
    trait_id="detect_holy_magic",
    name="Detect Holy Magic",
    trait_type=TraitType.ACTIVE,
    description="Sense the enchantment of holy items and blessed places.",
)

CLERIC_ORDER_POWER = TraitDefinition(
    trait_id="order_power",
    name="Holy Order",
    trait_type=TraitType.ACTIVE,
    description="At Level 2 a cleric joins a holy order and gains its power.",
    requires_selection=HOLY_ORDER_FIELD,
    selection_type="single",
    unlock_levels=(2,),
    min_level=2,
)


def _order(trait_id: str, name: str, description: str) -> TraitDefinition:
    return TraitDefinition(
        trait_id=trait_id,
        name=name,
        trait_type=TraitType.ACTIVE,
        description=description,
        parent_trait=HOLY_ORDER_FIELD,
        hide_from_trait_tab=True,
    )


CLERIC_HOLY_ORDERS = (
    _order(
        "st_faxis", "Order of St Faxis",
        "The Order of the Seeker. Clerics sense the presence of arcane spellcasters.",
    ),
    _order(
        "st_sedge", "Order of St Sedge",
        "The Order of the Lamb. Clerics may lay on hands to heal once a day.",
    ),
    _order(
        "st_signis", "Order of St Signis",
        "The Order of the Watchful. Clerics' attacks harm undead that only magic can hurt.",
    ),
)

CLERIC_RESTRICTIONS = (
    TraitDefinition(
        trait_id="cleric_tenets",
        name="Tenets",
        description="Clerics must uphold the tenets of the Pluritine Church.",
    ),
    TraitDefinition(
        trait_id="no_magic_equipment",
        name="Arcane Magic Items",
        description="Clerics may not use magic items of arcane origin.",
    ),
)


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

CASTER_SAVES = (
    (2, (11, 12, 13, 16, 14)),
    (4, (10, 11, 12, 15, 13)),
    (6, (9, 10, 11, 14, 12)),
    (8, (8, 9, 10, 13, 11)),
    (10, (7, 8, 9, 12, 10)),
    (12, (6, 7, 8, 11, 9)),
    (14, (5, 6, 7, 10, 8)),
    (15, (4, 5, 6, 9, 7)),
)

CLERIC_LEVEL_PROGRESSION = build_level_progression(EXPERT_ATTACK_BONUSES, CASTER_SAVES)

# Holy spell slots per rank (1-5), indexed by level
CLERIC_SPELL_PROGRESSION = [
    [0, 0, 0, 0, 0],
    [0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [2, 0, 0, 0, 0],
    [2, 1, 0, 0, 0],
    [2, 2, 0, 0, 0],
    [2, 2, 1, 0, 0],
    [3, 2, 2, 0, 0],
    [3, 2, 2, 0, 0],
    [3, 3, 2, 1, 0],
    [3, 3, 2, 2, 0],
    [4, 3, 3, 2, 0],
    [4, 3, 3, 2, 1],
    [4, 4, 3, 2, 2],
    [4, 4, 3, 3, 2],
    [5, 4, 4, 3, 2],
]


# =============================================================================
# CLERIC CLASS DEFINITION
# =============================================================================

CLERIC_DEFINITION = ClassDefinition(
    class_id="cleric",
    name="Cleric",
    description=(
        "Clerics are holy warriors in the service of the Pluritine Church, "
        "wielding divine magic and the power to turn undead."
    ),
    hit_die=HitDie.D6,
    prime_abilities=["wisdom"],
    magic_type=MagicType.HOLY,
    spell_progression=CLERIC_SPELL_PROGRESSION,
    level_progression=CLERIC_LEVEL_PROGRESSION,
    traits=TraitCollection(
        active=(CLERIC_TURN_UNDEAD, CLERIC_DETECT_HOLY_MAGIC, CLERIC_ORDER_POWER)
        + CLERIC_HOLY_ORDERS,
        restrictions=CLERIC_RESTRICTIONS,
    ),
    restricted_kindreds=["elf", "grimalkin", "woodgrue", "mossling"],
    source_page=60,
)
