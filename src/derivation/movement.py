"""
Movement rates derived from Speed (p146-147).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Movement:
    """Derived exploration and overland movement."""
    exploring: int = 0          # Feet per exploration turn
    overland: int = 0           # Travel Points per day

    def to_dict(self) -> dict[str, Any]:
        return {"exploring": self.exploring, "overland": self.overland}


class MovementCalculator:
    """
    Calculate movement rates per Dolmenwood rules (p146-147).

    Movement rates are derived from Speed after encumbrance and all
    adjustments:
    - Exploration (per turn): Speed × 3 feet
    - Overland (Travel Points/day): Speed ÷ 5
    """

    EXPLORATION_MULTIPLIER = 3
    TRAVEL_POINT_DIVISOR = 5

    @classmethod
    def get_exploration_movement(cls, speed: int) -> int:
        """
        Get dungeon exploration movement rate (feet per turn).

        Example: Speed 30 = 90'/turn
        """
        return speed * cls.EXPLORATION_MULTIPLIER

    @classmethod
    def get_travel_points(cls, speed: int) -> int:
        """
        Get Travel Points per day for overland travel.

        Example: Speed 30 = 6 TP/day
        """
        return speed // cls.TRAVEL_POINT_DIVISOR


def compute_movement(speed: int, exploring_adjustment: int = 0, overland_adjustment: int = 0) -> Movement:
    """Derive exploration and overland movement, each with its manual adjustment."""
    return Movement(
        exploring=MovementCalculator.get_exploration_movement(speed) + exploring_adjustment,
        overland=MovementCalculator.get_travel_points(speed) + overland_adjustment,
    )
