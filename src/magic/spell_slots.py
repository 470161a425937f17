"""
Spell slot progression and magic traditions.

Arcane magic has spell ranks 1-6 and holy magic ranks 1-5; fairy magic
(glamours) has no slot table. Slot maxes come from the class's progression
table for the character's level plus the player's per-rank adjustments.
"""

import logging
from typing import Optional, Sequence, TYPE_CHECKING

from src.classes.class_data import ARCANE_RANKS, HOLY_RANKS, MagicType
from src.data_models import CharacterState, MagicState, SpellSlot

if TYPE_CHECKING:
    from src.derivation.rules_config import RulesConfig

logger = logging.getLogger(__name__)

TRADITION_RANKS = {
    MagicType.ARCANE: ARCANE_RANKS,
    MagicType.HOLY: HOLY_RANKS,
}

KNACK_LEVELS = (1, 3, 5, 7)


def _rules(config: Optional["RulesConfig"]) -> "RulesConfig":
    if config is not None:
        return config
    from src.derivation.rules_config import get_default_rules

    return get_default_rules()


def get_progression_row(
    progression: Optional[Sequence[Sequence[int]]], level: int, ranks: int
) -> list[int]:
    """
    Look up a level's slots per rank.

    Levels past the end of the table use its last row. A missing table or a
    level below 1 gives no slots.
    """
    if not progression or level < 1:
        return [0] * ranks
    index = min(level, len(progression) - 1)
    row = list(progression[index])[:ranks]
    return row + [0] * (ranks - len(row))


def resolve_spell_slots(
    progression: Optional[Sequence[Sequence[int]]],
    level: int,
    tradition: MagicType,
    manual_adjustments: Optional[dict[int, int]] = None,
    existing: Optional[dict[int, SpellSlot]] = None,
) -> dict[int, SpellSlot]:
    """
    Resolve slot maxes for a magic tradition.

    Args:
        progression: Class spell table indexed by level
        level: Character level
        tradition: ARCANE or HOLY
        manual_adjustments: Rank -> signed adjustment
        existing: Current slots; used and memorized spells are preserved

    Returns:
        Rank -> SpellSlot, with max floored at 0
    """
    ranks = TRADITION_RANKS.get(tradition, 0)
    manual_adjustments = manual_adjustments or {}
    existing = existing or {}
    row = get_progression_row(progression, level, ranks)

    slots = {}
    for rank in range(1, ranks + 1):
        current = existing.get(rank)
        slots[rank] = SpellSlot(
            max=max(0, row[rank - 1] + manual_adjustments.get(rank, 0)),
            used=current.used if current else 0,
            memorized=list(current.memorized) if current else [],
        )
    return slots


def tradition_enabled(
    character: CharacterState,
    tradition: MagicType,
    config: Optional["RulesConfig"] = None,
) -> bool:
    """
    Check whether a magic tradition is enabled for a character.

    Enabled when the class (or, for fairy magic, the kindred) is associated
    with the tradition, or the character's override flag is set.
    """
    rules = _rules(config)
    class_id = (character.character_class or "").lower()
    kindred_id = (character.kindred or "").lower()

    if tradition == MagicType.ARCANE:
        return class_id in rules.arcane_casters or character.arcane_magic.enabled_override
    if tradition == MagicType.HOLY:
        return class_id in rules.holy_casters or character.holy_magic.enabled_override
    if tradition == MagicType.FAIRY:
        return (
            class_id in rules.fairy_casters
            or kindred_id in rules.fairy_kindreds
            or character.fairy_magic.enabled_override
        )
    return False


def get_magic_state(character: CharacterState, tradition: MagicType) -> Optional[MagicState]:
    return {
        MagicType.ARCANE: character.arcane_magic,
        MagicType.HOLY: character.holy_magic,
        MagicType.FAIRY: character.fairy_magic,
    }.get(tradition)


def resolve_character_spell_slots(
    character: CharacterState, config: Optional["RulesConfig"] = None
) -> dict[MagicType, dict[int, SpellSlot]]:
    """
    Resolve slots for every enabled slot-based tradition without storing them.

    Returns:
        Tradition -> resolved slots, for enabled traditions only
    """
    rules = _rules(config)
    progression = rules.spell_progressions.get((character.character_class or "").lower())
    if progression is None:
        logger.debug(f"No spell progression for class {character.character_class}")

    manual = {
        MagicType.ARCANE: character.adjustments.arcane_slots,
        MagicType.HOLY: character.adjustments.holy_slots,
    }

    result = {}
    for tradition in (MagicType.ARCANE, MagicType.HOLY):
        if not tradition_enabled(character, tradition, rules):
            continue
        state = get_magic_state(character, tradition)
        result[tradition] = resolve_spell_slots(
            progression, character.level, tradition, manual[tradition], state.spell_slots
        )
    return result


def apply_spell_slots(
    character: CharacterState, config: Optional["RulesConfig"] = None
) -> dict[MagicType, dict[int, SpellSlot]]:
    """
    Write slot maxes for every enabled slot-based tradition.

    Disabled traditions are left untouched.

    Returns:
        Tradition -> written slots, for enabled traditions only
    """
    result = resolve_character_spell_slots(character, config)
    for tradition, slots in result.items():
        get_magic_state(character, tradition).spell_slots = slots
    return result


def knacks_enabled(character: CharacterState, config: Optional["RulesConfig"] = None) -> bool:
    """Mossling knacks are enabled by kindred."""
    return (character.kindred or "").lower() in _rules(config).knack_kindreds


def get_knack_level(level: int) -> int:
    """Highest knack ability level (1, 3, 5, 7) unlocked at a character level."""
    result = KNACK_LEVELS[0]
    for knack_level in KNACK_LEVELS:
        if level >= knack_level:
            result = knack_level
    return result
