"""
Friar class definition for Dolmenwood.

Wandering ascetics who spread the gospel of the Pluritine Church.
Only loosely affiliated with the Church and beloved by the common folk.

Source: Dolmenwood Player Book, pages 66-67
"""

from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.traits.trait_data import (
    AdjustmentType,
    LevelTable,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


# =============================================================================
# FRIAR TRAITS
# =============================================================================

ARMOR_OF_FAITH_BONUS = LevelTable(((1, 2), (5, 3), (9, 4), (13, 5)))

FRIAR_TURN_UNDEAD = TraitDefinition(
    trait_id="turn_undead",
    name="Turn Undead",
    trait_type=TraitType.ACTIVE,
    description="Present a holy symbol to drive off or destroy undead.",
    rollable=True,
    roll_formula="2d6",
)

FRIAR_ARMOR_OF_FAITH = TraitDefinition(
    trait_id="armor_of_faith",
    name="Armour of Faith",
    trait_type=TraitType.ADJUSTMENT,
    description=(
        "Friars are protected by their faith, gaining an AC bonus that "
        "increases with Level."
    ),
    adjustment_type=AdjustmentType.STATIC,
    adjustment_target="ac",
    adjustment_value=ARMOR_OF_FAITH_BONUS,
    value=LevelTable(((1, "+2"), (5, "+3"), (9, "+4"), (13, "+5"))),
)

FRIAR_HERBALISM = TraitDefinition(
    trait_id="herbalism",
    name="Herbalism",
    description="In the wild, friars can identify and prepare healing herbs.",
)

FRIAR_INFO = (
    TraitDefinition(
        trait_id="culinary_implements",
        name="Culinary Implements",
        description="Friars may wield kitchen implements as weapons.",
    ),
    TraitDefinition(
        trait_id="forage_skill",
        name="Foraging",
        description="Friars are adept at finding food in the wild.",
    ),
)

FRIAR_RESTRICTIONS = (
    TraitDefinition(
        trait_id="friar_tenets",
        name="Tenets",
        description="Friars must uphold the tenets of the Pluritine Church.",
    ),
    TraitDefinition(
        trait_id="poverty_vows",
        name="Vow of Poverty",
        description="Friars may own no more than they can carry and wear no armour.",
    ),
)


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

SLOW_ATTACK_BONUSES = (0, 0, 0, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4)

FRIAR_SAVES = (
    (3, (11, 12, 13, 16, 14)),
    (6, (10, 11, 12, 15, 13)),
    (9, (9, 10, 11, 14, 12)),
    (12, (8, 9, 10, 13, 11)),
    (15, (7, 8, 9, 12, 10)),
)

FRIAR_LEVEL_PROGRESSION = build_level_progression(SLOW_ATTACK_BONUSES, FRIAR_SAVES)

# Holy spell slots per rank (1-5), indexed by level
FRIAR_SPELL_PROGRESSION = [
    [0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [2, 0, 0, 0, 0],
    [2, 1, 0, 0, 0],
    [2, 2, 0, 0, 0],
    [3, 2, 1, 0, 0],
    [3, 2, 2, 0, 0],
    [3, 3, 2, 1, 0],
    [4, 3, 2, 2, 0],
    [4, 3, 3, 2, 1],
    [4, 4, 3, 2, 2],
    [5, 4, 3, 3, 2],
    [5, 4, 4, 3, 2],
    [5, 5, 4, 3, 3],
    [6, 5, 4, 4, 3],
    [6, 5, 5, 4, 3],
]


# =============================================================================
# FRIAR CLASS DEFINITION
# =============================================================================

FRIAR_DEFINITION = ClassDefinition(
    class_id="friar",
    name="Friar",
    description=(
        "Friars are wandering ascetics who spread the gospel of the Pluritine "
        "Church, doing good wherever they can."
    ),
    hit_die=HitDie.D4,
    prime_abilities=["intelligence", "wisdom"],
    magic_type=MagicType.HOLY,
    spell_progression=FRIAR_SPELL_PROGRESSION,
    level_progression=FRIAR_LEVEL_PROGRESSION,
    traits=TraitCollection(
        active=(FRIAR_TURN_UNDEAD,),
        passive=(FRIAR_ARMOR_OF_FAITH, FRIAR_HERBALISM),
        info=FRIAR_INFO,
        restrictions=FRIAR_RESTRICTIONS,
    ),
    restricted_kindreds=["elf", "grimalkin", "woodgrue", "mossling"],
    source_page=66,
)
