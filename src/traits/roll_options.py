"""
Roll-time trait options.

Roll-option traits never change the passive snapshot. When the player makes
a roll, the options whose target matches the roll are offered as opt-in
toggles that affect that single roll only.

Roll paths look like "abilities.charisma", "saves.doom", "skills.listen",
"attack.melee" or "attack.missile".
"""

from dataclasses import dataclass
from typing import Any, Optional

from src.data_models import CharacterState
from src.traits.trait_data import AdjustmentType
from src.traits.trait_resolver import get_active_traits

ALL_SAVES_TARGET = "saves.all"
ATTACK_TARGET = "attack"
ATTACK_ROLL_PATHS = ("attack.melee", "attack.missile")


@dataclass(frozen=True)
class RollOption:
    """An opt-in bonus offered for a roll."""
    trait_id: str
    name: str
    bonus: int
    condition: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.trait_id,
            "name": self.name,
            "bonus": self.bonus,
            "condition": self.condition,
        }


def target_matches(target: Optional[str], roll_path: str) -> bool:
    """
    Check whether a trait target applies to a roll path.

    Matches on the exact path, on a parent path ("saves" matches
    "saves.doom"), "saves.all" on any save, and "attack" on melee and
    missile attacks.
    """
    if not target:
        return False
    if target == roll_path or roll_path.startswith(target + "."):
        return True
    if target == ALL_SAVES_TARGET and roll_path.startswith("saves."):
        return True
    if target == ATTACK_TARGET and roll_path in ATTACK_ROLL_PATHS:
        return True
    return False


def get_roll_options(character: CharacterState, roll_path: str) -> list[RollOption]:
    """
    Get the roll-option traits eligible for a roll.

    Args:
        character: The rolling character
        roll_path: Path of the roll being made (e.g. "saves.doom")

    Returns:
        Eligible options in active-trait order
    """
    level = character.level
    options = []

    for trait in get_active_traits(character):
        if not trait.is_adjustment or trait.adjustment_type != AdjustmentType.ROLL_OPTION:
            continue
        if not target_matches(trait.adjustment_target, roll_path):
            continue
        if trait.is_locked(level):
            continue
        options.append(RollOption(
            trait_id=trait.trait_id,
            name=trait.name,
            bonus=trait.get_adjustment_value(level),
            condition=trait.adjustment_condition,
        ))

    return options


def total_selected_bonus(options: list[RollOption], selected_ids: set[str]) -> int:
    """Sum the bonuses of the options the roller toggled on."""
    return sum(option.bonus for option in options if option.trait_id in selected_ids)
