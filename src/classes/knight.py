"""
Knight class definition for Dolmenwood.

Warriors who serve a noble, doing their bidding and upholding their honour.
Masters of heavily armoured, mounted combat and, as vassals of a noble house,
hold a special rank in society.

Source: Dolmenwood Player Book, pages 70-71
"""

from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.classes.fighter import FIGHTER_ATTACK_BONUSES
from src.traits.trait_data import (
    AdjustmentType,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


# =============================================================================
# KNIGHT TRAITS
# =============================================================================

KNIGHT_ASSESS_STEED = TraitDefinition(
    trait_id="assess_steed",
    name="Assess Steed",
    trait_type=TraitType.ACTIVE,
    description=(
        "Determine whether an animal has low, average, or high Hit Points for "
        "its type."
    ),
)

KNIGHT_URGE_STEED = TraitDefinition(
    trait_id="urge_steed",
    name="Urge Steed",
    trait_type=TraitType.ACTIVE,
    description="From Level 5, once a day urge a steed to great speed for up to 6 Turns.",
    min_level=5,
    max_uses=1,
    usage_frequency="once per day",
)

KNIGHT_MONSTER_SLAYER = TraitDefinition(
    trait_id="monster_slayer",
    name="Monster Slayer",
    trait_type=TraitType.ADJUSTMENT,
    description=(
        "From Level 5, a knight gains a +2 bonus to Attack and Damage Rolls "
        "against Large creatures."
    ),
    adjustment_type=AdjustmentType.ROLL_OPTION,
    adjustment_target="attack",
    adjustment_value=2,
    adjustment_condition="against Large creatures",
    min_level=5,
)

KNIGHT_MOUNTED_COMBAT = TraitDefinition(
    trait_id="mounted_combat",
    name="Mounted Combat",
    trait_type=TraitType.ADJUSTMENT,
    description="Knights gain a +1 Attack bonus when mounted.",
    adjustment_type=AdjustmentType.ROLL_OPTION,
    adjustment_target="attack",
    adjustment_value=1,
    adjustment_condition="when mounted",
)

KNIGHT_STRENGTH_OF_WILL = TraitDefinition(
    trait_id="strength_of_will",
    name="Strength of Will",
    trait_type=TraitType.ADJUSTMENT,
    description=(
        "Knights gain a +2 bonus to Saving Throws against fairy magic and "
        "effects that would charm or frighten."
    ),
    adjustment_type=AdjustmentType.ROLL_OPTION,
    adjustment_target="saves.all",
    adjustment_value=2,
    adjustment_condition="against fairy magic, charm and fear",
)

KNIGHT_HOSPITALITY = TraitDefinition(
    trait_id="hospitality",
    name="Hospitality",
    trait_type=TraitType.INFO,
    description=(
        "Once knighted, the character earns rights of hospitality and aid from "
        "nobles and other knights of the same Alignment."
    ),
    min_level=3,
)

KNIGHT_ALIGNMENT = TraitDefinition(
    trait_id="knight_alignment",
    name="Knightly Alignment",
    trait_type=TraitType.ALIGNMENT_RESTRICTION,
    allowed_alignments=("lawful",),
    hide_from_trait_tab=True,
)

KNIGHT_RESTRICTIONS = (
    TraitDefinition(
        trait_id="liege_alignment",
        name="Liege",
        description="A knight serves one of the lower noble houses of Dolmenwood.",
    ),
    TraitDefinition(
        trait_id="no_missile",
        name="No Missile Weapons",
        description="Knights regard missile weapons as dishonourable.",
    ),
    TraitDefinition(
        trait_id="no_light_armor",
        name="Scorn of Light Armour",
        description="Knights scorn Light armour as suitable only for peasants.",
    ),
    TraitDefinition(
        trait_id="code_of_chivalry",
        name="Code of Chivalry",
        description="A knight must behave honourably in all deeds.",
    ),
)


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

KNIGHT_SAVES = (
    (2, (12, 13, 12, 15, 15)),
    (3, (11, 12, 11, 14, 14)),
    (5, (10, 11, 10, 13, 13)),
    (6, (9, 10, 9, 12, 12)),
    (8, (8, 9, 8, 11, 11)),
    (9, (7, 8, 7, 10, 10)),
    (11, (6, 7, 6, 9, 9)),
    (12, (5, 6, 5, 8, 8)),
    (14, (4, 5, 4, 7, 7)),
    (15, (3, 4, 3, 6, 6)),
)

KNIGHT_LEVEL_PROGRESSION = build_level_progression(FIGHTER_ATTACK_BONUSES, KNIGHT_SAVES)


# =============================================================================
# KNIGHT CLASS DEFINITION
# =============================================================================

KNIGHT_DEFINITION = ClassDefinition(
    class_id="knight",
    name="Knight",
    description=(
        "Knights are warriors who serve a noble, doing their bidding and "
        "upholding their honour. They are masters of heavily armoured, mounted "
        "combat."
    ),
    hit_die=HitDie.D8,
    prime_abilities=["charisma", "strength"],
    magic_type=MagicType.NONE,
    level_progression=KNIGHT_LEVEL_PROGRESSION,
    traits=TraitCollection(
        active=(KNIGHT_ASSESS_STEED, KNIGHT_URGE_STEED),
        passive=(KNIGHT_MONSTER_SLAYER, KNIGHT_MOUNTED_COMBAT, KNIGHT_STRENGTH_OF_WILL),
        info=(KNIGHT_HOSPITALITY,),
        restrictions=(KNIGHT_ALIGNMENT,) + KNIGHT_RESTRICTIONS,
    ),
    restricted_kindreds=["elf", "grimalkin", "woodgrue", "mossling"],
    source_page=70,
)
