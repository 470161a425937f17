"""
Enchanter class definition for Dolmenwood.

Wanderers who wield the magic of Fairy, currying favour with fairy nobles.
Their contact with Fairy has imbued them with innate magic known as
glamours.

Source: Dolmenwood Player Book, pages 62-63
"""

from src.classes.bard import EXPERT_ATTACK_BONUSES
from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.classes.cleric import CASTER_SAVES
from src.kindred.common_traits import HOLY_SPELL_FAILURE
from src.traits.trait_data import TraitCollection


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

ENCHANTER_DETECT_MAGIC = (5, 5, 5, 5, 4, 4, 3, 3, 2, 2, 2, 2, 2, 2, 2)

ENCHANTER_LEVEL_PROGRESSION = build_level_progression(
    EXPERT_ATTACK_BONUSES,
    CASTER_SAVES,
    ("detect_magic",),
    [(target,) for target in ENCHANTER_DETECT_MAGIC],
)


# =============================================================================
# ENCHANTER CLASS DEFINITION
# =============================================================================

ENCHANTER_DEFINITION = ClassDefinition(
    class_id="enchanter",
    name="Enchanter",
    description=(
        "Enchanters are wanderers who wield the magic of Fairy, blessed with "
        "innate glamours and the use of the fairy runes."
    ),
    hit_die=HitDie.D6,
    prime_abilities=["charisma", "intelligence"],
    magic_type=MagicType.FAIRY,
    level_progression=ENCHANTER_LEVEL_PROGRESSION,
    traits=TraitCollection(
        passive=(HOLY_SPELL_FAILURE,),
    ),
    restricted_kindreds=[],
    source_page=62,
)
