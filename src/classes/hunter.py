"""
Hunter class definition for Dolmenwood.

Expert trackers, stalkers, and killers, at home in the wild woods.
Hardened to a life in the wilds, hunters develop a keen survival
instinct and an intuitive connection with wild animals.

Source: Dolmenwood Player Book, pages 68-69
"""

from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.classes.fighter import FIGHTER_ATTACK_BONUSES, FIGHTER_SAVES
from src.traits.trait_data import (
    AdjustmentType,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


# =============================================================================
# HUNTER TRAITS
# =============================================================================

HUNTER_BIND_COMPANION = TraitDefinition(
    trait_id="bind_companion",
    name="Animal Companion",
    trait_type=TraitType.ACTIVE,
    description=(
        "A hunter may forge a bond with a wild animal, which becomes a loyal "
        "companion."
    ),
)

HUNTER_TROPHIES = TraitDefinition(
    trait_id="trophies",
    name="Trophies",
    trait_type=TraitType.ACTIVE,
    description=(
        "Trophies taken from slain monsters grant a bonus to Attack Rolls and "
        "Reaction Rolls against creatures of the same kind."
    ),
)

HUNTER_WAYFINDING = TraitDefinition(
    trait_id="wayfinding",
    name="Wayfinding",
    trait_type=TraitType.ACTIVE,
    description="When the party is lost, the hunter may find the way again.",
    rollable=True,
    roll_formula="1d6",
    roll_target=3,
)

HUNTER_MISSILE_BONUS = TraitDefinition(
    trait_id="missile_bonus",
    name="Missile Attacks",
    trait_type=TraitType.ADJUSTMENT,
    description="Hunters gain a +1 bonus to Attack Rolls with missile weapons.",
    adjustment_type=AdjustmentType.STATIC,
    adjustment_target="attack.missile",
    adjustment_value=1,
)

HUNTER_SKILLS = TraitDefinition(
    trait_id="hunter_skills",
    name="Hunter Skills",
    trait_type=TraitType.INFO,
    description="Alertness, Stalking, Survival and Tracking improve with Level.",
)


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

HUNTER_SKILL_NAMES = ("alertness", "stalking", "survival", "tracking")

HUNTER_SKILL_ROWS = (
    (6, 6, 5, 5),
    (6, 6, 4, 5),
    (6, 6, 4, 4),
    (6, 5, 4, 4),
    (5, 5, 4, 4),
    (5, 5, 3, 4),
    (5, 5, 3, 3),
    (5, 4, 3, 3),
    (4, 4, 3, 3),
    (4, 3, 3, 3),
    (4, 3, 2, 3),
    (4, 3, 2, 2),
    (3, 3, 2, 2),
    (3, 2, 2, 2),
    (2, 2, 2, 2),
)

HUNTER_LEVEL_PROGRESSION = build_level_progression(
    FIGHTER_ATTACK_BONUSES, FIGHTER_SAVES, HUNTER_SKILL_NAMES, HUNTER_SKILL_ROWS
)


# =============================================================================
# HUNTER CLASS DEFINITION
# =============================================================================

HUNTER_DEFINITION = ClassDefinition(
    class_id="hunter",
    name="Hunter",
    description=(
        "Hunters are expert trackers, stalkers, and killers, at home in the "
        "wild woods. They develop a keen survival instinct and an intuitive "
        "connection with wild animals."
    ),
    hit_die=HitDie.D8,
    prime_abilities=["constitution", "dexterity"],
    magic_type=MagicType.NONE,
    level_progression=HUNTER_LEVEL_PROGRESSION,
    traits=TraitCollection(
        active=(HUNTER_BIND_COMPANION, HUNTER_TROPHIES),
        passive=(HUNTER_WAYFINDING, HUNTER_MISSILE_BONUS),
        info=(HUNTER_SKILLS,),
    ),
    restricted_kindreds=[],
    source_page=68,
)
