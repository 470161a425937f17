"""
Breggle kindred definition for Dolmenwood.

Goat-headed folk whose horn length indicates their social standing.
Source: Dolmenwood Player Book, pages 32-35
"""

from src.kindred.kindred_data import KindredDefinition, KindredType
from src.traits.trait_data import (
    AdjustmentType,
    LevelTable,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


# =============================================================================
# BREGGLE TRAITS
# =============================================================================

BREGGLE_FUR = TraitDefinition(
    trait_id="fur_defense",
    name="Fur",
    trait_type=TraitType.ADJUSTMENT,
    description=(
        "A breggle character's thick, woolly fur grants them +1 AC "
        "when unarmoured or wearing Light armour."
    ),
    adjustment_type=AdjustmentType.STATIC,
    adjustment_target="ac",
    adjustment_value=1,
    requires_no_heavy_armor=True,
)

BREGGLE_HORNS = TraitDefinition(
    trait_id="horn_attack",
    name="Horns",
    trait_type=TraitType.NATURAL_WEAPON,
    description=(
        "Breggles may make a melee attack with their horns instead of a weapon. "
        "The damage inflicted increases with Level."
    ),
    rollable=True,
    damage_progression=(
        (1, "1d4"),
        (3, "1d4+1"),
        (6, "1d6"),
        (9, "1d6+1"),
        (10, "1d6+2"),
    ),
)

BREGGLE_GAZE = TraitDefinition(
    trait_id="longhorn_gaze",
    name="Gaze",
    trait_type=TraitType.ACTIVE,
    description=(
        "Upon attaining longhorn status (from Level 4), a breggle character "
        "can use their gaze to charm humans and shorthorns into obeisance. "
        "If the target fails a Save Versus Spell, they are charmed until the "
        "next sunrise."
    ),
    min_level=4,
    max_uses=LevelTable(((1, 1), (6, 2), (8, 3), (10, 4))),
    usage_frequency="per day",
)

BREGGLE_HORN_LENGTH = TraitDefinition(
    trait_id="horn_length",
    name="Horn Length",
    description="A breggle's horns grow as they gain Level.",
    value=LevelTable((
        (1, '1"'),
        (2, '2"'),
        (3, '3"'),
        (4, '4"'),
        (5, '6"'),
        (6, '8"'),
        (7, '10"'),
        (8, '12"'),
        (9, '14"'),
        (10, '16"'),
    )),
)

BREGGLE_TRAITS = TraitCollection(
    active=(BREGGLE_GAZE, BREGGLE_HORNS),
    passive=(BREGGLE_FUR,),
    info=(BREGGLE_HORN_LENGTH,),
)


# =============================================================================
# BREGGLE KINDRED DEFINITION
# =============================================================================

BREGGLE_DEFINITION = KindredDefinition(
    kindred_id="breggle",
    name="Breggle",
    description=(
        "The proud and stubborn breggles, sometimes called goatfolk, have "
        "inhabited the High Wold since antiquity. The ancient breggle noble "
        "houses now rule alongside humans, swearing fealty to the Dukes of "
        "Brackenwold."
    ),
    kindred_type=KindredType.MORTAL,
    size="medium",
    native_languages=["Woldish", "Gaffe", "Caprice"],
    traits=BREGGLE_TRAITS,
    # Played as a class, a breggle keeps the same trait set
    class_traits=BREGGLE_TRAITS,
    class_prime_abilities=["strength", "intelligence"],
    source_page=32,
)
