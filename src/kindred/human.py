"""
Human kindred definition for Dolmenwood.

The common folk of Dolmenwood, found throughout its settled reaches.
Source: Dolmenwood Player Book, pages 44-47
"""

from src.kindred.kindred_data import KindredDefinition, KindredType
from src.traits.trait_data import TraitCollection, TraitDefinition


# =============================================================================
# HUMAN TRAITS
# =============================================================================

HUMAN_DECISIVENESS = TraitDefinition(
    trait_id="decisiveness",
    name="Decisiveness",
    description=(
        "When an Initiative Roll is tied, humans act first, as if they had "
        "won initiative."
    ),
)

HUMAN_LEADERSHIP = TraitDefinition(
    trait_id="leadership",
    name="Leadership",
    description="Retainers employed by a human character gain +1 to Loyalty.",
)

HUMAN_SPIRITED = TraitDefinition(
    trait_id="spirited",
    name="Spirited",
    description="Humans gain 10% more experience points.",
)


# =============================================================================
# HUMAN KINDRED DEFINITION
# =============================================================================

HUMAN_DEFINITION = KindredDefinition(
    kindred_id="human",
    name="Human",
    description=(
        "Possessed of a restless and curious spirit, humans venture into "
        "unexplored regions, found great dominions, and delve into perilous "
        "secrets of magic."
    ),
    kindred_type=KindredType.MORTAL,
    size="medium",
    native_languages=["Woldish"],
    traits=TraitCollection(
        passive=(HUMAN_DECISIVENESS, HUMAN_LEADERSHIP),
        info=(HUMAN_SPIRITED,),
    ),
    source_page=44,
)
