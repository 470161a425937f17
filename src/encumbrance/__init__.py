"""
Encumbrance methods for Dolmenwood characters.
"""

from src.encumbrance.encumbrance_calculator import (
    EncumbranceCalculator,
    EncumbranceConfig,
    EncumbranceMethod,
    EncumbranceState,
    SlotLoad,
    compute_encumbrance,
)

__all__ = [
    "EncumbranceCalculator",
    "EncumbranceConfig",
    "EncumbranceMethod",
    "EncumbranceState",
    "SlotLoad",
    "compute_encumbrance",
]
