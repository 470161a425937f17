"""
Dolmenwood character class system.

Provides class definitions for the 9 Dolmenwood classes:
- Bard: Performer with special music abilities
- Cleric: Holy spellcaster (holy spells 1-5)
- Enchanter: Fairy magic user (glamours + runes)
- Fighter: Martial combatant
- Friar: Wandering holy spellcaster (holy spells 1-5)
- Hunter: Wilderness warrior and tracker
- Knight: Noble martial warrior
- Magician: Arcane spellcaster (arcane spells 1-6)
- Thief: Skilled infiltrator and rogue

plus the kindred-classes (breggle, elf, grimalkin, mossling, woodgrue).
"""

from src.classes.class_data import (
    ClassDefinition,
    HitDie,
    LevelProgression,
    MagicType,
    SavingThrows,
)
from src.classes.class_manager import ClassManager, get_class_manager

__all__ = [
    # Data structures
    "ClassDefinition",
    "HitDie",
    "LevelProgression",
    "MagicType",
    "SavingThrows",
    # Manager
    "ClassManager",
    "get_class_manager",
]
