"""
Grimalkin kindred definition for Dolmenwood.

Shape-shifting cat-fairies renowned for their magic of illusion and their
love of eating rats.
Source: Dolmenwood Player Book, pages 40-43
"""

from src.kindred.common_traits import (
    AC_VS_LARGE,
    COLD_IRON_VULNERABILITY,
    FAIRY_MAGIC_RESISTANCE,
    IMMORTAL,
    KEEN_SENSES_LISTEN,
    SMALL_SIZE,
)
from src.kindred.kindred_data import KindredDefinition, KindredType
from src.traits.trait_data import TraitCollection, TraitDefinition, TraitType


# =============================================================================
# GRIMALKIN TRAITS
# =============================================================================

GRIMALKIN_SHAPE_SHIFT_CHESTER = TraitDefinition(
    trait_id="shape_shift_chester",
    name="Shape-Shift: Chester",
    trait_type=TraitType.ACTIVE,
    description="Take the form of a fat domestic cat at will.",
)

GRIMALKIN_SHAPE_SHIFT_WILDER = TraitDefinition(
    trait_id="shape_shift_wilder",
    name="Shape-Shift: Wilder",
    trait_type=TraitType.ACTIVE,
    description="Once a day, become a primal fey predator for 2d6 Rounds.",
    rollable=True,
    roll_formula="2d6",
    max_uses=1,
    usage_frequency="once per day",
)

GRIMALKIN_HEAL_RODENT = TraitDefinition(
    trait_id="heal_rodent",
    name="Eating Rodents",
    trait_type=TraitType.ACTIVE,
    description="Eating a freshly killed rodent heals 1 Hit Point.",
)

GRIMALKIN_FUR_BALL = TraitDefinition(
    trait_id="fur_ball",
    name="Fur Ball",
    trait_type=TraitType.ACTIVE,
    description="Cough up a fur ball containing a useful minor item.",
    rollable=True,
    roll_formula="1d6",
    max_uses=3,
    usage_frequency="three times per day",
)

GRIMALKIN_LOCK_PICKING = TraitDefinition(
    trait_id="lock_picking_skill",
    name="Lock Picking",
    description="Grimalkins may attempt to pick locks with their claws.",
)


# =============================================================================
# GRIMALKIN KINDRED DEFINITION
# =============================================================================

GRIMALKIN_DEFINITION = KindredDefinition(
    kindred_id="grimalkin",
    name="Grimalkin",
    description=(
        "Grimalkins can take on three forms: estray (humanoid cat), chester "
        "(fat domestic cat), and wilder (primal fey predator). They originate "
        "in the fairy realm of Catland."
    ),
    kindred_type=KindredType.FAIRY,
    size="small",
    native_languages=["Woldish", "Mewl"],
    traits=TraitCollection(
        active=(
            GRIMALKIN_SHAPE_SHIFT_CHESTER,
            GRIMALKIN_SHAPE_SHIFT_WILDER,
            GRIMALKIN_HEAL_RODENT,
        ),
        passive=(AC_VS_LARGE, COLD_IRON_VULNERABILITY),
        info=(IMMORTAL, SMALL_SIZE, KEEN_SENSES_LISTEN, FAIRY_MAGIC_RESISTANCE),
    ),
    class_traits=TraitCollection(
        active=(
            GRIMALKIN_SHAPE_SHIFT_CHESTER,
            GRIMALKIN_SHAPE_SHIFT_WILDER,
            GRIMALKIN_FUR_BALL,
        ),
        passive=(AC_VS_LARGE, COLD_IRON_VULNERABILITY, KEEN_SENSES_LISTEN),
        info=(IMMORTAL, SMALL_SIZE, GRIMALKIN_LOCK_PICKING),
    ),
    class_prime_abilities=["dexterity"],
    source_page=40,
)
