"""
Encumbrance per Dolmenwood rules (p148-149).

Three alternative rule sets convert a character's inventory into a
movement speed:

- Weight: every item and coin counts, in coins of weight
- Treasure: only treasure and coins count; speed comes from armour bulk and
  whether the character is significantly loaded
- Slots: abstract gear slots, tracked separately for equipped and stowed gear
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from src.data_models import CharacterState, Item, ItemType
from src.traits.trait_resolver import is_wearing_heavy_armor

logger = logging.getLogger(__name__)


class EncumbranceMethod(str, Enum):
    """Encumbrance rule sets (p148-149)."""
    WEIGHT = "weight"           # Detailed weight tracking in coins
    TREASURE = "treasure"       # Only treasure weight, with armour bulk
    SLOTS = "slots"             # Abstract slot-based system

    @classmethod
    def parse(cls, value: Union["EncumbranceMethod", str, None]) -> "EncumbranceMethod":
        """Parse a method, falling back to WEIGHT for unknown values."""
        if isinstance(value, EncumbranceMethod):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            logger.debug(f"Unknown encumbrance method {value!r}, using weight")
            return cls.WEIGHT


# Encumbrance constants (p148)
MAX_WEIGHT_CAPACITY = 1600      # Maximum weight in coins a character can carry
MAX_EQUIPPED_SLOTS = 10         # Maximum equipped gear slots
MAX_STOWED_SLOTS = 16           # Maximum stowed gear slots total
COINS_PER_SLOT = 100            # Coins per stowed gear slot
DEFAULT_SIGNIFICANT_LOAD = 0.5  # Fraction of capacity

# (max weight, speed)
WEIGHT_ENCUMBRANCE_THRESHOLDS = (
    (400, 40),
    (600, 30),
    (800, 20),
    (1600, 10),
)

# (max equipped, speed) and (max stowed, speed); worse slots give speed 10
EQUIPPED_SLOT_THRESHOLDS = ((3, 40), (5, 30), (7, 20))
STOWED_SLOT_THRESHOLDS = ((10, 40), (12, 30), (14, 20))
MIN_SLOT_SPEED = 10

# (wearing medium/heavy armour, significantly loaded) -> speed
TREASURE_SPEED_TABLE = {
    (False, False): 40,
    (False, True): 30,
    (True, False): 20,
    (True, True): 10,
}


@dataclass
class EncumbranceConfig:
    """Encumbrance settings."""
    method: EncumbranceMethod = EncumbranceMethod.WEIGHT
    significant_load_threshold: float = DEFAULT_SIGNIFICANT_LOAD
    max_weight: int = MAX_WEIGHT_CAPACITY
    max_equipped_slots: int = MAX_EQUIPPED_SLOTS
    max_stowed_slots: int = MAX_STOWED_SLOTS


@dataclass
class SlotLoad:
    """Slots used against a slot capacity."""
    current: int = 0
    max: int = 0

    @property
    def over_capacity(self) -> bool:
        return self.current > self.max


@dataclass
class EncumbranceState:
    """
    Carried load and resulting speed.

    For the slot method, `equipped` and `stowed` hold the two sub-loads and
    `current`/`max` are their totals.
    """
    method: EncumbranceMethod
    current: float = 0
    max: float = MAX_WEIGHT_CAPACITY
    speed: int = 40
    significantly_loaded: bool = False
    equipped: Optional[SlotLoad] = None
    stowed: Optional[SlotLoad] = None

    @property
    def over_capacity(self) -> bool:
        if self.equipped is not None and self.stowed is not None:
            return self.equipped.over_capacity or self.stowed.over_capacity
        return self.current > self.max

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "method": self.method.value,
            "current": self.current,
            "max": self.max,
            "speed": self.speed,
            "significantly_loaded": self.significantly_loaded,
            "over_capacity": self.over_capacity,
        }
        if self.equipped is not None and self.stowed is not None:
            data["equipped"] = {"current": self.equipped.current, "max": self.equipped.max}
            data["stowed"] = {"current": self.stowed.current, "max": self.stowed.max}
        return data


class EncumbranceCalculator:
    """
    Calculate encumbrance and speed per Dolmenwood rules (p148-149).
    """

    @classmethod
    def get_speed_from_weight(cls, total_weight: float, max_weight: int = MAX_WEIGHT_CAPACITY) -> int:
        """
        Calculate movement speed based on weight encumbrance (p148).

        The slowest tier extends to the configured capacity.

        Args:
            total_weight: Total carried weight in coins
            max_weight: Maximum capacity

        Returns:
            Movement speed (40, 30, 20, 10, or 0 when over capacity)
        """
        if total_weight > max_weight:
            return 0
        *tiers, (_, slowest) = WEIGHT_ENCUMBRANCE_THRESHOLDS
        for bound, speed in tiers:
            if total_weight <= bound:
                return speed
        return slowest

    @classmethod
    def get_speed_from_slots(cls, equipped_slots: int, stowed_slots: int) -> int:
        """
        Calculate movement speed based on slot encumbrance (p149).

        Uses the WORSE of equipped or stowed encumbrance.
        """
        return min(
            cls._slot_tier(equipped_slots, EQUIPPED_SLOT_THRESHOLDS),
            cls._slot_tier(stowed_slots, STOWED_SLOT_THRESHOLDS),
        )

    @staticmethod
    def _slot_tier(slots: int, thresholds: tuple[tuple[int, int], ...]) -> int:
        for max_slots, speed in thresholds:
            if slots <= max_slots:
                return speed
        return MIN_SLOT_SPEED

    @classmethod
    def get_speed_from_treasure(
        cls,
        treasure_weight: float,
        heavy_armor: bool,
        significant_load_threshold: float = DEFAULT_SIGNIFICANT_LOAD,
        max_weight: int = MAX_WEIGHT_CAPACITY,
    ) -> tuple[int, bool]:
        """
        Calculate speed for the treasure method (p148).

        Args:
            treasure_weight: Weight of treasure and coins
            heavy_armor: Whether medium or heavy armour is equipped
            significant_load_threshold: Fraction of capacity counted as significant
            max_weight: Maximum capacity

        Returns:
            Tuple of (movement_speed, significantly_loaded)
        """
        significantly_loaded = treasure_weight > significant_load_threshold * max_weight
        if treasure_weight > max_weight:
            return 0, significantly_loaded
        return TREASURE_SPEED_TABLE[(heavy_armor, significantly_loaded)], significantly_loaded

    @classmethod
    def get_item_slots(cls, item: Item) -> int:
        """Gear slots used by an item stack, rounded up per stack (p149)."""
        quantity = max(item.quantity, 0)
        return math.ceil(item.weight_slots * quantity)

    @classmethod
    def get_coin_slots(cls, coins: int) -> int:
        """Stowed gear slots used by coins: 1 per 100, rounded up."""
        return math.ceil(max(coins, 0) / COINS_PER_SLOT)

    @classmethod
    def get_total_weight(cls, character: CharacterState) -> float:
        """Weight of every item plus coins."""
        return sum(item.get_total_weight() for item in character.items) + character.coins.total()

    @classmethod
    def get_treasure_weight(cls, character: CharacterState) -> float:
        """Weight of treasure items plus coins."""
        treasure = sum(
            item.get_total_weight()
            for item in character.items
            if item.item_type == ItemType.TREASURE
        )
        return treasure + character.coins.total()


def compute_encumbrance(
    character: CharacterState,
    method: Union[EncumbranceMethod, str, None] = None,
    significant_load_threshold: Optional[float] = None,
    config: Optional[EncumbranceConfig] = None,
) -> EncumbranceState:
    """
    Compute a character's encumbrance.

    Args:
        character: The character carrying the inventory
        method: Encumbrance method; defaults to the config's method
        significant_load_threshold: Treasure method threshold; defaults to the config's
        config: Encumbrance settings; defaults to EncumbranceConfig()

    Returns:
        EncumbranceState with load and speed
    """
    config = config or EncumbranceConfig()
    method = EncumbranceMethod.parse(method if method is not None else config.method)
    if significant_load_threshold is None:
        significant_load_threshold = config.significant_load_threshold

    if method == EncumbranceMethod.SLOTS:
        equipped = SlotLoad(max=config.max_equipped_slots)
        stowed = SlotLoad(max=config.max_stowed_slots)
        for item in character.items:
            slots = EncumbranceCalculator.get_item_slots(item)
            if item.equipped:
                equipped.current += slots
            else:
                stowed.current += slots
        stowed.current += EncumbranceCalculator.get_coin_slots(character.coins.total())

        return EncumbranceState(
            method=method,
            current=equipped.current + stowed.current,
            max=equipped.max + stowed.max,
            speed=EncumbranceCalculator.get_speed_from_slots(equipped.current, stowed.current),
            equipped=equipped,
            stowed=stowed,
        )

    if method == EncumbranceMethod.TREASURE:
        load = EncumbranceCalculator.get_treasure_weight(character)
        speed, significantly_loaded = EncumbranceCalculator.get_speed_from_treasure(
            load,
            is_wearing_heavy_armor(character),
            significant_load_threshold,
            config.max_weight,
        )
        return EncumbranceState(
            method=method,
            current=load,
            max=config.max_weight,
            speed=speed,
            significantly_loaded=significantly_loaded,
        )

    total = EncumbranceCalculator.get_total_weight(character)
    return EncumbranceState(
        method=method,
        current=total,
        max=config.max_weight,
        speed=EncumbranceCalculator.get_speed_from_weight(total, config.max_weight),
    )
