"""
Fighter class definition for Dolmenwood.

Mercenaries, soldiers, and ruffians who turn their talents to the
adventuring life. Experienced in combat and warfare, whether as brigands,
tavern brawlers, town guards, or veterans of a noble house's army.

Source: Dolmenwood Player Book, pages 64-65
"""

from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.traits.trait_data import TraitCollection, TraitDefinition, TraitType


# =============================================================================
# FIGHTER TRAITS
# =============================================================================

COMBAT_TALENTS_FIELD = "combat_talents"
COMBAT_TALENT_LEVELS = (2, 6, 10, 14)

FIGHTER_COMBAT_TALENTS = TraitDefinition(
    trait_id="combat_talents",
    name="Combat Talents",
    trait_type=TraitType.ACTIVE,
    description=(
        "Fighters' expert training grants them special talents to aid in battle. "
        "At Levels 2, 6, 10, and 14 the player should roll or choose one talent."
    ),
    requires_selection=COMBAT_TALENTS_FIELD,
    selection_type="multi",
    unlock_levels=COMBAT_TALENT_LEVELS,
)


def _talent(trait_id: str, name: str, description: str) -> TraitDefinition:
    return TraitDefinition(
        trait_id=trait_id,
        name=name,
        trait_type=TraitType.INFO,
        description=description,
        parent_trait=COMBAT_TALENTS_FIELD,
        hide_from_trait_tab=True,
    )


FIGHTER_TALENTS = (
    _talent(
        "battle_rage", "Battle Rage",
        "Enter a berserk rage in melee: +2 Attack and Damage, -4 AC, unable to flee.",
    ),
    _talent(
        "cleave", "Cleave",
        "After a killing blow in melee, attack a second foe at -2.",
    ),
    _talent(
        "defender", "Defender",
        "Foes in melee with the fighter are at -2 to attack anyone else.",
    ),
    _talent(
        "last_stand", "Last Stand",
        "Keep acting for up to 5 Rounds after being reduced to 0 Hit Points.",
    ),
    _talent(
        "leader", "Leader",
        "Allies in sight gain +1 to Morale and Save Versus Doom against fear.",
    ),
    _talent(
        "main_gauche", "Main Gauche",
        "Fighting with a dagger in the off hand grants +1 AC or +1 Attack.",
    ),
    _talent(
        "slayer", "Slayer",
        "+1 Attack and Damage against a chosen type of foe.",
    ),
    _talent(
        "weapon_specialist", "Weapon Specialist",
        "+1 Attack and Damage with a chosen type of weapon.",
    ),
)


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

FIGHTER_ATTACK_BONUSES = (1, 1, 2, 3, 3, 4, 5, 5, 6, 7, 7, 8, 9, 9, 10)

FIGHTER_SAVES = (
    (2, (12, 13, 14, 15, 16)),
    (3, (11, 12, 13, 14, 15)),
    (5, (10, 11, 12, 13, 14)),
    (6, (9, 10, 11, 12, 13)),
    (8, (8, 9, 10, 11, 12)),
    (9, (7, 8, 9, 10, 11)),
    (11, (6, 7, 8, 9, 10)),
    (12, (5, 6, 7, 8, 9)),
    (14, (4, 5, 6, 7, 8)),
    (15, (3, 4, 5, 6, 7)),
)

FIGHTER_LEVEL_PROGRESSION = build_level_progression(FIGHTER_ATTACK_BONUSES, FIGHTER_SAVES)


# =============================================================================
# FIGHTER CLASS DEFINITION
# =============================================================================

FIGHTER_DEFINITION = ClassDefinition(
    class_id="fighter",
    name="Fighter",
    description=(
        "Fighters are experienced in combat and warfare, whether as brigands, "
        "tavern brawlers, town guards, or veterans of a noble house's army. "
        "In an adventuring party, fighters usually take the front-line, "
        "battling foes and defending weaker characters."
    ),
    hit_die=HitDie.D8,
    prime_abilities=["strength"],
    magic_type=MagicType.NONE,
    level_progression=FIGHTER_LEVEL_PROGRESSION,
    traits=TraitCollection(
        active=(FIGHTER_COMBAT_TALENTS,),
        info=FIGHTER_TALENTS,
    ),
    restricted_kindreds=[],
    source_page=64,
)
