"""
Bard class definition for Dolmenwood.

Musicians and poets drawn to a life of wandering and adventure.
Their music and songs are woven with magic, which can both
protect and beguile.

Source: Dolmenwood Player Book, pages 58-59
"""

from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.traits.trait_data import LevelTable, TraitCollection, TraitDefinition, TraitType


# =============================================================================
# BARD TRAITS
# =============================================================================

BARD_COUNTER_CHARM = TraitDefinition(
    trait_id="counter_charm",
    name="Counter Charm",
    trait_type=TraitType.ACTIVE,
    description=(
        "While the bard plays, allies within 30' are immune to magical music "
        "and gain +2 to saves against fairy magic."
    ),
)

BARD_ENCHANTMENT = TraitDefinition(
    trait_id="enchantment",
    name="Enchantment",
    trait_type=TraitType.ACTIVE,
    description=(
        "Bards can use music to fascinate listeners. Uses per day equal the "
        "bard's Level."
    ),
    max_uses=LevelTable(tuple((level, level) for level in range(1, 16))),
    usage_frequency="per day",
)

BARD_SKILLS = TraitDefinition(
    trait_id="bard_skills",
    name="Bard Skills",
    trait_type=TraitType.INFO,
    description="Decipher Document, Legerdemain, Listen and Monster Lore improve with Level.",
)


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

EXPERT_ATTACK_BONUSES = (0, 0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7)

EXPERT_SAVES = (
    (2, (13, 14, 13, 15, 15)),
    (4, (12, 13, 12, 14, 14)),
    (6, (11, 12, 11, 13, 13)),
    (8, (10, 11, 10, 12, 12)),
    (10, (9, 10, 9, 11, 11)),
    (12, (8, 9, 8, 10, 10)),
    (14, (7, 8, 7, 9, 9)),
    (15, (6, 7, 6, 8, 8)),
)

BARD_SKILL_NAMES = ("listen", "decipher_document", "legerdemain", "monster_lore")

BARD_SKILL_ROWS = (
    (6, 6, 5, 5),
    (5, 6, 5, 5),
    (5, 6, 5, 4),
    (5, 5, 5, 4),
    (5, 5, 4, 4),
    (4, 5, 4, 4),
    (4, 5, 4, 3),
    (4, 4, 4, 3),
    (4, 4, 3, 3),
    (3, 4, 3, 3),
    (3, 3, 3, 3),
    (3, 3, 3, 2),
    (2, 3, 3, 2),
    (2, 3, 2, 2),
    (2, 2, 2, 2),
)

BARD_LEVEL_PROGRESSION = build_level_progression(
    EXPERT_ATTACK_BONUSES, EXPERT_SAVES, BARD_SKILL_NAMES, BARD_SKILL_ROWS
)


# =============================================================================
# BARD CLASS DEFINITION
# =============================================================================

BARD_DEFINITION = ClassDefinition(
    class_id="bard",
    name="Bard",
    description=(
        "Bards are musicians and poets drawn to a life of wandering and "
        "adventure. Their music is woven with magic which can both protect "
        "and beguile."
    ),
    hit_die=HitDie.D6,
    prime_abilities=["charisma", "dexterity"],
    magic_type=MagicType.NONE,
    level_progression=BARD_LEVEL_PROGRESSION,
    traits=TraitCollection(
        active=(BARD_COUNTER_CHARM, BARD_ENCHANTMENT),
        info=(BARD_SKILLS,),
    ),
    restricted_kindreds=[],
    source_page=58,
)
