"""
Elf kindred definition for Dolmenwood.

Ageless fairies from the immortal realm, driven to forge kingdoms and to
delve into the secrets of magic.
Source: Dolmenwood Player Book, pages 36-39
"""

from src.kindred.common_traits import (
    COLD_IRON_VULNERABILITY,
    FAIRY_MAGIC_RESISTANCE,
    HOLY_SPELL_FAILURE,
    IMMORTAL,
)
from src.kindred.kindred_data import KindredDefinition, KindredType
from src.traits.trait_data import (
    AdjustmentType,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


# =============================================================================
# ELF TRAITS
# =============================================================================

ELF_UNEARTHLY_BEAUTY = TraitDefinition(
    trait_id="unearthly_beauty",
    name="Unearthly Beauty",
    trait_type=TraitType.ADJUSTMENT,
    description="Elves gain +2 Charisma when interacting with mortals.",
    adjustment_type=AdjustmentType.ROLL_OPTION,
    adjustment_target="abilities.charisma",
    adjustment_value=2,
    adjustment_condition="when interacting with mortals",
)

ELF_KEEN_SENSES = TraitDefinition(
    trait_id="keen_senses",
    name="Keen Senses",
    trait_type=TraitType.ADJUSTMENT,
    description="Elves have a Listen and Search skill target of 5.",
    adjustment_type=AdjustmentType.SKILL_OVERRIDE,
    adjustment_targets=("skills.listen", "skills.search"),
    adjustment_value=5,
)


# =============================================================================
# ELF KINDRED DEFINITION
# =============================================================================

ELF_DEFINITION = KindredDefinition(
    kindred_id="elf",
    name="Elf",
    description=(
        "Elves are physically similar to humans but carry an air of "
        "unearthliness about them. Among the myriad peoples of Fairy, elves "
        "are driven to forge vast kingdoms and to delve deeply into magic."
    ),
    kindred_type=KindredType.FAIRY,
    size="medium",
    native_languages=["Woldish", "Sylvan", "High Elfish"],
    traits=TraitCollection(
        passive=(ELF_UNEARTHLY_BEAUTY, COLD_IRON_VULNERABILITY, ELF_KEEN_SENSES),
        info=(IMMORTAL, FAIRY_MAGIC_RESISTANCE),
    ),
    class_traits=TraitCollection(
        passive=(
            ELF_UNEARTHLY_BEAUTY,
            COLD_IRON_VULNERABILITY,
            HOLY_SPELL_FAILURE,
            ELF_KEEN_SENSES,
        ),
        info=(IMMORTAL,),
    ),
    class_prime_abilities=["charisma", "strength"],
    source_page=36,
)
