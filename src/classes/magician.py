"""
Magician class definition for Dolmenwood.

Connoisseurs of secret arcane lore who wield powerful magic.
Arcane generalists, accumulating secret lore from any source they can get
their hands on.

Source: Dolmenwood Player Book, pages 72-73
"""

from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    MagicType,
    build_level_progression,
)
from src.classes.friar import SLOW_ATTACK_BONUSES


# =============================================================================
# LEVEL PROGRESSION
# =============================================================================

MAGICIAN_SAVES = (
    (3, (14, 14, 13, 16, 14)),
    (6, (13, 13, 12, 15, 13)),
    (9, (12, 12, 11, 14, 12)),
    (12, (11, 11, 10, 13, 11)),
    (15, (10, 10, 9, 12, 10)),
)

MAGICIAN_DETECT_MAGIC = (6, 6, 5, 5, 5, 4, 4, 4, 3, 3, 3, 3, 3, 3, 3)

MAGICIAN_LEVEL_PROGRESSION = build_level_progression(
    SLOW_ATTACK_BONUSES,
    MAGICIAN_SAVES,
    ("detect_magic",),
    [(target,) for target in MAGICIAN_DETECT_MAGIC],
)

# Arcane spell slots per rank (1-6), indexed by level
MAGICIAN_SPELL_PROGRESSION = [
    [0, 0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0, 0],
    [2, 0, 0, 0, 0, 0],
    [2, 1, 0, 0, 0, 0],
    [2, 2, 0, 0, 0, 0],
    [2, 2, 1, 0, 0, 0],
    [3, 2, 2, 0, 0, 0],
    [3, 2, 2, 1, 0, 0],
    [3, 3, 2, 2, 0, 0],
    [3, 3, 2, 2, 1, 0],
    [4, 3, 3, 2, 2, 0],
    [4, 3, 3, 2, 2, 1],
    [4, 4, 3, 3, 2, 2],
    [4, 4, 3, 3, 3, 2],
    [5, 4, 4, 3, 3, 2],
    [5, 4, 4, 3, 3, 3],
]


# =============================================================================
# MAGICIAN CLASS DEFINITION
# =============================================================================

MAGICIAN_DEFINITION = ClassDefinition(
    class_id="magician",
    name="Magician",
    description=(
        "Magicians are connoisseurs of secret arcane lore who hone innate "
        "sparks of magical sensitivity through years of arduous study."
    ),
    hit_die=HitDie.D4,
    prime_abilities=["intelligence"],
    magic_type=MagicType.ARCANE,
    spell_progression=MAGICIAN_SPELL_PROGRESSION,
    level_progression=MAGICIAN_LEVEL_PROGRESSION,
    restricted_kindreds=[],
    source_page=72,
)
