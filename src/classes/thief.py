"""
Thief class definition for Dolmenwood.

Rogues who live by skills of deception and stealth.
Inveterate scoundrels, thieves are always on the lookout for their next
mark, scam, or get rich quick scheme.

Source: Dolmenwood Player Book, pages 74-75
"""

from src.classes.bard import EXPERT_ATTACK_BONUSES, EXPERT_SAVES
from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.traits.trait_data import TraitCollection, TraitDefinition, TraitType


# =============================================================================
# THIEF TRAITS
# =============================================================================

THIEF_BACKSTAB = TraitDefinition(
    trait_id="backstab",
    name="Back-Stab",
    trait_type=TraitType.ACTIVE,
    description=(
        "Attacking an unaware foe from behind with a dagger grants +4 to the "
        "Attack Roll and 3d4 damage."
    ),
    rollable=True,
    roll_formula="3d4",
)

THIEF_SKILLS = TraitDefinition(
    trait_id="thief_skills",
    name="Thief Skills",
    trait_type=TraitType.INFO,
    description=(
        "Thieves are improved at Listen and Search and have six specialised "
        "skills that improve with Level."
    ),
)


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

THIEF_SKILL_NAMES = (
    "climb_wall",
    "decipher_document",
    "disarm_mechanism",
    "legerdemain",
    "pick_lock",
    "listen",
    "search",
    "stealth",
)

THIEF_SKILL_ROWS = (
    (4, 6, 6, 6, 6, 5, 6, 5),
    (4, 6, 5, 6, 6, 5, 5, 5),
    (4, 6, 5, 5, 5, 5, 5, 5),
    (3, 5, 5, 5, 5, 5, 5, 5),
    (3, 5, 5, 5, 5, 4, 5, 4),
    (3, 5, 4, 5, 5, 4, 4, 4),
    (3, 5, 4, 4, 4, 4, 4, 4),
    (2, 4, 4, 4, 4, 4, 4, 4),
    (2, 4, 4, 4, 4, 3, 4, 3),
    (2, 4, 3, 4, 4, 3, 3, 3),
    (2, 4, 3, 3, 3, 3, 3, 3),
    (2, 3, 3, 3, 3, 2, 3, 3),
    (2, 3, 3, 3, 3, 2, 2, 2),
    (2, 3, 2, 3, 2, 2, 2, 2),
    (2, 2, 2, 2, 2, 2, 2, 2),
)

THIEF_LEVEL_PROGRESSION = build_level_progression(
    EXPERT_ATTACK_BONUSES, EXPERT_SAVES, THIEF_SKILL_NAMES, THIEF_SKILL_ROWS
)


# =============================================================================
# THIEF CLASS DEFINITION
# =============================================================================

THIEF_DEFINITION = ClassDefinition(
    class_id="thief",
    name="Thief",
    description=(
        "Thieves are rogues who live by skills of deception and stealth, "
        "always on the lookout for their next mark, scam, or get rich quick "
        "scheme."
    ),
    hit_die=HitDie.D4,
    prime_abilities=["dexterity"],
    magic_type=MagicType.NONE,
    level_progression=THIEF_LEVEL_PROGRESSION,
    traits=TraitCollection(
        active=(THIEF_BACKSTAB,),
        info=(THIEF_SKILLS,),
    ),
    restricted_kindreds=[],
    source_page=74,
)
