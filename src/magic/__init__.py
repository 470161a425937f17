"""
Magic traditions and spell slots for Dolmenwood characters.
"""

from src.magic.spell_slots import (
    KNACK_LEVELS,
    apply_spell_slots,
    get_knack_level,
    knacks_enabled,
    resolve_character_spell_slots,
    resolve_spell_slots,
    tradition_enabled,
)

__all__ = [
    "KNACK_LEVELS",
    "apply_spell_slots",
    "get_knack_level",
    "knacks_enabled",
    "resolve_character_spell_slots",
    "resolve_spell_slots",
    "tradition_enabled",
]
