"""
Woodgrue kindred definition for Dolmenwood.

Bat-faced demi-fey goblins, known for their love of music, revelry, and arson.
Source: Dolmenwood Player Book, pages 52-55
"""

from src.kindred.common_traits import (
    AC_VS_LARGE,
    COLD_IRON_VULNERABILITY,
    KEEN_SENSES_LISTEN,
    SMALL_SIZE,
)
from src.kindred.kindred_data import KindredDefinition, KindredType
from src.traits.trait_data import TraitCollection, TraitDefinition, TraitType


# =============================================================================
# WOODGRUE TRAITS
# =============================================================================

WOODGRUE_ENCHANTED_MELODY = TraitDefinition(
    trait_id="enchanted_melody",
    name="Compulsive Jubilation",
    trait_type=TraitType.ACTIVE,
    description="Once a day, play an enchanted melody that compels listeners to dance.",
    max_uses=1,
    usage_frequency="once per day",
)

WOODGRUE_FAIRY_RESISTANCE = TraitDefinition(
    trait_id="fairy_resistance",
    name="Fairy Resistance",
    description="Woodgrues are immune to the fairy magic of sleep and charm.",
)

WOODGRUE_INFO = (
    TraitDefinition(
        trait_id="moon_sight",
        name="Moon Sight",
        description="Woodgrues can see in darkness by the light of the moon.",
    ),
    TraitDefinition(
        trait_id="instruments_as_weapons",
        name="Musical Instruments",
        description="Woodgrues may wield wind instruments as clubs.",
    ),
    SMALL_SIZE,
)


# =============================================================================
# WOODGRUE KINDRED DEFINITION
# =============================================================================

WOODGRUE_DEFINITION = KindredDefinition(
    kindred_id="woodgrue",
    name="Woodgrue",
    description=(
        "Woodgrues are capricious goblins who, many generations ago, forsook "
        "their ancestral home in Fairy and migrated to the musty dells of the "
        "mortal world."
    ),
    kindred_type=KindredType.DEMI_FEY,
    size="small",
    native_languages=["Woldish", "Sylvan"],
    traits=TraitCollection(
        active=(WOODGRUE_ENCHANTED_MELODY,),
        passive=(KEEN_SENSES_LISTEN, COLD_IRON_VULNERABILITY, WOODGRUE_FAIRY_RESISTANCE),
        info=WOODGRUE_INFO,
    ),
    class_traits=TraitCollection(
        active=(WOODGRUE_ENCHANTED_MELODY,),
        passive=(
            KEEN_SENSES_LISTEN,
            AC_VS_LARGE,
            COLD_IRON_VULNERABILITY,
            WOODGRUE_FAIRY_RESISTANCE,
        ),
        info=WOODGRUE_INFO,
    ),
    class_prime_abilities=["charisma", "dexterity"],
    source_page=52,
)
