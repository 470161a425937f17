"""
Combined character snapshot.

Bundles everything derived from a character at one instant: attributes,
encumbrance, spell slots, XP modifier, moon sign and kindred-dependent
facts. Rendering and roll resolution read the snapshot and never the raw
character.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from src.classes.class_data import MagicType
from src.data_models import CharacterState, SpellSlot
from src.derivation.attribute_engine import DerivedAttributes, derive_attributes
from src.derivation.moon_sign import MoonSign, compute_moon_sign
from src.derivation.rules_config import RulesConfig, get_default_rules
from src.derivation.xp_modifier import compute_xp_modifier
from src.encumbrance.encumbrance_calculator import EncumbranceState, compute_encumbrance
from src.kindred.kindred_data import KindredType
from src.kindred.kindred_manager import creature_type_for_kindred
from src.magic.spell_slots import (
    get_knack_level,
    knacks_enabled,
    resolve_character_spell_slots,
    tradition_enabled,
)


def _slots_to_dict(slots: dict[int, SpellSlot]) -> dict[int, dict[str, Any]]:
    return {
        rank: {"max": slot.max, "used": slot.used, "memorized": list(slot.memorized)}
        for rank, slot in slots.items()
    }


@dataclass
class CharacterSnapshot:
    """Everything derived from a character, recomputed on every change."""
    character_id: str
    attributes: DerivedAttributes
    encumbrance: EncumbranceState
    arcane_slots: dict[int, SpellSlot] = field(default_factory=dict)
    holy_slots: dict[int, SpellSlot] = field(default_factory=dict)
    fairy_magic: bool = False
    xp_modifier: int = 0
    creature_type: KindredType = KindredType.MORTAL
    knack_level: Optional[int] = None   # None when knacks are not enabled
    moon_sign: Optional[MoonSign] = None  # None when the birthday is unset

    def to_dict(self) -> dict[str, Any]:
        return {
            "character_id": self.character_id,
            "attributes": self.attributes.to_dict(),
            "encumbrance": self.encumbrance.to_dict(),
            "arcane_slots": _slots_to_dict(self.arcane_slots),
            "holy_slots": _slots_to_dict(self.holy_slots),
            "fairy_magic": self.fairy_magic,
            "xp_modifier": self.xp_modifier,
            "creature_type": self.creature_type.value,
            "knack_level": self.knack_level,
            "moon_sign": self.moon_sign.to_dict() if self.moon_sign else None,
        }


def build_character_snapshot(
    character: CharacterState, config: Optional[RulesConfig] = None
) -> CharacterSnapshot:
    """
    Derive a full snapshot for a character.

    The character is not modified; use apply_spell_slots to store slot maxes.

    Args:
        character: The character to derive
        config: Rules configuration; defaults to get_default_rules()
    """
    rules = config or get_default_rules()
    encumbrance = compute_encumbrance(character, config=rules.encumbrance)
    attributes = derive_attributes(character, rules, encumbrance)
    slots = resolve_character_spell_slots(character, rules)

    xp_modifier = compute_xp_modifier(
        {name: ability.score for name, ability in attributes.abilities.items()},
        rules.prime_abilities.get((character.character_class or "").lower()),
        character.adjustments.xp_modifier,
    )

    return CharacterSnapshot(
        character_id=character.character_id,
        attributes=attributes,
        encumbrance=encumbrance,
        arcane_slots=slots.get(MagicType.ARCANE, {}),
        holy_slots=slots.get(MagicType.HOLY, {}),
        fairy_magic=tradition_enabled(character, MagicType.FAIRY, rules),
        xp_modifier=xp_modifier,
        creature_type=creature_type_for_kindred(character.kindred),
        knack_level=get_knack_level(character.level) if knacks_enabled(character, rules) else None,
        moon_sign=compute_moon_sign(character.birth_month, character.birth_day, rules),
    )
