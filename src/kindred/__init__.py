"""
Kindred (race) system for Dolmenwood.

This module provides:
- KindredDefinition: Complete data structure for a kindred
- KindredManager: Central registry for all kindreds

Available Kindreds:
- Breggle: Goat-headed folk (mortal)
- Elf: Ageless fairies from the immortal realm (fairy)
- Grimalkin: Shape-shifting cat-fairies (fairy)
- Human: Common folk of Dolmenwood (mortal)
- Mossling: Woody folk hosting moulds and fungi (mortal)
- Woodgrue: Bat-faced goblins (demi-fey)
"""

from src.kindred.kindred_data import KindredDefinition, KindredType
from src.kindred.kindred_manager import (
    KindredManager,
    creature_type_for_kindred,
    get_kindred_manager,
)

__all__ = [
    # Data structures
    "KindredDefinition",
    "KindredType",
    # Manager
    "KindredManager",
    "creature_type_for_kindred",
    "get_kindred_manager",
]
