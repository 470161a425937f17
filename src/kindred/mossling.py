"""
Mossling kindred definition for Dolmenwood.

Gnarled, woody humanoids whose fertile flesh hosts mosses, moulds, and fungi.
Source: Dolmenwood Player Book, pages 48-51
"""

from src.kindred.common_traits import SMALL_SIZE
from src.kindred.kindred_data import KindredDefinition, KindredType
from src.traits.trait_data import (
    AdjustmentType,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


# =============================================================================
# MOSSLING TRAITS
# =============================================================================

MOSSLING_RESILIENCE = TraitDefinition(
    trait_id="resilience",
    name="Resilience",
    trait_type=TraitType.ADJUSTMENT,
    description="Mosslings gain +1 to Saving Throws against fungal and plant effects.",
    adjustment_type=AdjustmentType.ROLL_OPTION,
    adjustment_target="saves.all",
    adjustment_value=1,
    adjustment_condition="against fungi, plants and poison",
)

MOSSLING_KEEN_SURVIVAL = TraitDefinition(
    trait_id="keen_survival",
    name="Keen Survival",
    trait_type=TraitType.ADJUSTMENT,
    description="Mosslings have a Survival skill target of 5.",
    adjustment_type=AdjustmentType.SKILL_OVERRIDE,
    adjustment_targets=("skills.survival",),
    adjustment_value=5,
)

MOSSLING_SYMBIOTIC_FLESH = TraitDefinition(
    trait_id="symbiotic_flesh",
    name="Symbiotic Flesh",
    description="A mossling's body hosts living moulds, lichens and fungi.",
)

MOSSLING_TRAITS = TraitCollection(
    passive=(MOSSLING_RESILIENCE, MOSSLING_KEEN_SURVIVAL),
    info=(MOSSLING_SYMBIOTIC_FLESH, SMALL_SIZE),
)


# =============================================================================
# MOSSLING KINDRED DEFINITION
# =============================================================================

MOSSLING_DEFINITION = KindredDefinition(
    kindred_id="mossling",
    name="Mossling",
    description=(
        "Mosslings are an obscure, stunted folk native to Dolmenwood, with an "
        "affinity for the dank plants and moulds of the deep woods."
    ),
    kindred_type=KindredType.MORTAL,
    size="small",
    native_languages=["Woldish", "Mulch"],
    traits=MOSSLING_TRAITS,
    class_traits=MOSSLING_TRAITS,
    class_prime_abilities=["constitution", "wisdom"],
    source_page=48,
)
