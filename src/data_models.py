"""
Shared data structures for the Dolmenwood character sheet engine.

These structures describe what the surrounding application stores for a
character: raw ability scores and base statistics, the player's manual
adjustments, the item collection and coins. The derivation engine reads them
and never writes to them (spell slot maxes are the one exception, see
src.magic.spell_slots).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from src.traits.trait_data import BuildItem


# =============================================================================
# ENUMS
# =============================================================================


class ArmorBulk(str, Enum):
    """Armour bulk tiers (p148). Medium and heavy count as heavy armour for traits."""
    NONE = "none"
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"

    @property
    def rank(self) -> int:
        return _BULK_RANKS[self]

    @classmethod
    def parse(cls, value: Any) -> "ArmorBulk":
        """Accept an ArmorBulk, its string value, or a 0-3 bulk number."""
        if isinstance(value, ArmorBulk):
            return value
        if isinstance(value, int):
            for bulk, rank in _BULK_RANKS.items():
                if rank == value:
                    return bulk
            return cls.NONE
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.NONE


_BULK_RANKS = {
    ArmorBulk.NONE: 0,
    ArmorBulk.LIGHT: 1,
    ArmorBulk.MEDIUM: 2,
    ArmorBulk.HEAVY: 3,
}


class ItemType(str, Enum):
    """Item categories carried in a character's inventory."""
    WEAPON = "weapon"
    ARMOR = "armor"
    ITEM = "item"
    TREASURE = "treasure"
    FORAGED = "foraged"


class ItemSize(str, Enum):
    """Size/fit of weapons and armour."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ConditionType(str, Enum):
    """Conditions that change derived statistics."""
    EXHAUSTED = "exhausted"


# =============================================================================
# CONSTANTS
# =============================================================================

ABILITY_NAMES = (
    "strength",
    "intelligence",
    "wisdom",
    "dexterity",
    "constitution",
    "charisma",
)

SAVE_NAMES = ("doom", "ray", "hold", "blast", "spell")

BASE_SKILL_NAMES = ("listen", "search", "survival")

MIN_LEVEL = 1
MAX_LEVEL = 15
MAX_ABILITY_SCORE = 18


def compute_ability_modifier(score: int) -> int:
    """
    Get the B/X-style modifier for an ability score.

    Always computed from the *adjusted* score so that bonuses crossing a
    breakpoint round correctly.
    """
    if score <= 3:
        return -3
    elif score <= 5:
        return -2
    elif score <= 8:
        return -1
    elif score <= 12:
        return 0
    elif score <= 15:
        return 1
    elif score <= 17:
        return 2
    else:
        return 3


# =============================================================================
# BASE ATTRIBUTES
# =============================================================================


@dataclass
class AbilityScore:
    """An ability score. The modifier is derived, never stored."""
    score: int = 10

    @property
    def modifier(self) -> int:
        return compute_ability_modifier(self.score)


def _default_abilities() -> dict[str, AbilityScore]:
    return {name: AbilityScore() for name in ABILITY_NAMES}


@dataclass
class ExtraSkill:
    """A class-specific or acquired skill (d6, roll >= target)."""
    skill_id: str
    target: int = 6


@dataclass
class BaseAttributes:
    """
    Raw stored values for a character.

    Save targets are lower-is-better (d20 >= target). Skill targets are
    d6 targets, also lower-is-better.
    """
    level: int = 1
    hp_current: int = 1
    hp_max: int = 1
    ac: int = 10                # Unarmoured AC
    attack: int = 0
    saves: dict[str, int] = field(default_factory=lambda: {name: 10 for name in SAVE_NAMES})
    skills: dict[str, int] = field(default_factory=lambda: {name: 6 for name in BASE_SKILL_NAMES})
    extra_skills: list[ExtraSkill] = field(default_factory=list)
    speed: int = 40             # Feet per round, unencumbered
    magic_resistance: int = 0
    abilities: dict[str, AbilityScore] = field(default_factory=_default_abilities)

    def get_score(self, ability: str) -> int:
        ability_score = self.abilities.get(ability)
        return ability_score.score if ability_score else 10


@dataclass
class AbilityAdjustment:
    """Manual adjustment to an ability's score and/or modifier."""
    score: int = 0
    mod: int = 0


@dataclass
class ManualAdjustments:
    """
    Player-entered bonuses and penalties, mirroring BaseAttributes.

    Every leaf is a signed integer and is always added.
    """
    abilities: dict[str, AbilityAdjustment] = field(
        default_factory=lambda: {name: AbilityAdjustment() for name in ABILITY_NAMES}
    )
    hp_max: int = 0
    ac: int = 0
    attack: int = 0
    saves: dict[str, int] = field(default_factory=dict)
    magic_resistance: int = 0
    skills: dict[str, int] = field(default_factory=dict)  # Base and extra skills by id
    speed: int = 0
    movement_exploring: int = 0
    movement_overland: int = 0
    arcane_slots: dict[int, int] = field(default_factory=dict)  # Rank -> adjustment
    holy_slots: dict[int, int] = field(default_factory=dict)
    xp_modifier: int = 0

    def ability(self, name: str) -> AbilityAdjustment:
        return self.abilities.get(name) or AbilityAdjustment()


# =============================================================================
# INVENTORY
# =============================================================================


@dataclass
class Item:
    """
    An item in inventory.

    Weight is tracked both in coins (weight methods) and in abstract gear
    slots (slot method). Both weights are per unit.
    """
    item_id: str
    name: str
    item_type: ItemType = ItemType.ITEM
    quantity: int = 1
    equipped: bool = False
    weight_coins: float = 0
    weight_slots: float = 0
    # Armour fields
    bulk: ArmorBulk = ArmorBulk.NONE
    ac: int = 0                 # Body armour: AC value. Shield: AC bonus.
    is_shield: bool = False
    # Weapons and armour
    size: ItemSize = ItemSize.MEDIUM

    @property
    def is_armor(self) -> bool:
        return self.item_type == ItemType.ARMOR

    @property
    def is_body_armor(self) -> bool:
        return self.is_armor and not self.is_shield

    def get_total_weight(self) -> float:
        """Get total coin weight of this item stack (weight × quantity)."""
        return self.weight_coins * max(self.quantity, 0)


@dataclass
class Coins:
    """Coin purse. Every coin weighs 1 coin of encumbrance."""
    copper: int = 0
    silver: int = 0
    gold: int = 0
    pellucidium: int = 0

    def total(self) -> int:
        return self.copper + self.silver + self.gold + self.pellucidium


@dataclass
class Condition:
    """A condition affecting a character."""
    condition_type: ConditionType
    severity: int = 1
    source: str = ""


# =============================================================================
# MAGIC STATE
# =============================================================================


@dataclass
class SpellSlot:
    """
    Slots for one spell rank.

    `max` is rewritten on every recompute; `used` and `memorized` persist.
    """
    max: int = 0
    used: int = 0
    memorized: list[str] = field(default_factory=list)


@dataclass
class MagicState:
    """Per-tradition magic state stored on the character."""
    enabled_override: bool = False
    spell_slots: dict[int, SpellSlot] = field(default_factory=dict)


@dataclass
class TraitUsage:
    """Uses spent on an active trait with limited uses."""
    used: int = 0


# =============================================================================
# CHARACTER
# =============================================================================


@dataclass
class CharacterState:
    """
    Stored state of an adventurer.

    `kindred_item` and `class_item` are the two build-defining items. When a
    kindred is played as a class, `class_item` carries the combined trait set
    and `kindred_item` may be absent.
    """
    character_id: str
    name: str
    kindred: str = "human"
    character_class: str = "fighter"
    alignment: str = "neutral"
    base: BaseAttributes = field(default_factory=BaseAttributes)
    adjustments: ManualAdjustments = field(default_factory=ManualAdjustments)
    items: list[Item] = field(default_factory=list)
    coins: Coins = field(default_factory=Coins)
    conditions: list[Condition] = field(default_factory=list)
    kindred_item: Optional["BuildItem"] = None
    class_item: Optional["BuildItem"] = None
    # Selections for selection-gated traits, keyed by field name
    # (e.g. "combat_talents": ["cleave"], "holy_order": "st_faxis")
    trait_selections: dict[str, Any] = field(default_factory=dict)
    trait_usage: dict[str, TraitUsage] = field(default_factory=dict)
    customize_skills: bool = False
    arcane_magic: MagicState = field(default_factory=MagicState)
    holy_magic: MagicState = field(default_factory=MagicState)
    fairy_magic: MagicState = field(default_factory=MagicState)
    birth_month: str = ""       # Month id, empty when unset
    birth_day: int = 0

    @property
    def level(self) -> int:
        return self.base.level

    def get_equipped_items(self) -> list[Item]:
        return [item for item in self.items if item.equipped]

    def get_exhaustion_penalty(self) -> int:
        """Attack penalty from exhaustion (-1 per point of severity)."""
        return -sum(
            c.severity for c in self.conditions
            if c.condition_type == ConditionType.EXHAUSTED
        )
