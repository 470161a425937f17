"""
Moon sign from a character's birthday.

The Dolmenwood year has 352 days in twelve months. A birthday is converted
to a day of the year and looked up in the moon sign table, which gives the
moon and its phase (waxing, full or waning).
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from src.derivation.rules_config import RulesConfig

logger = logging.getLogger(__name__)

# Days of the year before each month
MONTH_OFFSETS = {
    "grimvold": 0,
    "lymewald": 30,
    "haggryme": 58,
    "symswald": 88,
    "harchment": 117,
    "iggwyld": 146,
    "chysting": 176,
    "lillipythe": 207,
    "haelhold": 236,
    "reedwryme": 264,
    "obthryme": 294,
    "braghold": 322,
}

# (first day of year, last day of year, moon, phase), in year order
MOON_SIGN_TABLE = (
    (1, 3, "black", "waning"),
    (4, 17, "grinning", "waxing"),
    (18, 20, "grinning", "full"),
    (21, 33, "grinning", "waning"),
    (34, 46, "dead", "waxing"),
    (47, 49, "dead", "full"),
    (50, 62, "dead", "waning"),
    (63, 76, "beast", "waxing"),
    (77, 79, "beast", "full"),
    (80, 91, "beast", "waning"),
    (92, 105, "squamous", "waxing"),
    (106, 108, "squamous", "full"),
    (109, 121, "squamous", "waning"),
    (122, 134, "knights", "waxing"),
    (135, 137, "knights", "full"),
    (138, 150, "knights", "waning"),
    (151, 164, "rotting", "waxing"),
    (165, 167, "rotting", "full"),
    (168, 179, "rotting", "waning"),
    (180, 193, "maidens", "waxing"),
    (194, 196, "maidens", "full"),
    (197, 209, "maidens", "waning"),
    (210, 222, "witch", "waxing"),
    (223, 225, "witch", "full"),
    (226, 238, "witch", "waning"),
    (239, 252, "robbers", "waxing"),
    (253, 255, "robbers", "full"),
    (256, 267, "robbers", "waning"),
    (268, 281, "goat", "waxing"),
    (282, 284, "goat", "full"),
    (285, 297, "goat", "waning"),
    (298, 311, "narrow", "waxing"),
    (312, 314, "narrow", "full"),
    (315, 326, "narrow", "waning"),
    (327, 340, "black", "waxing"),
    (341, 343, "black", "full"),
    (344, 352, "black", "waning"),
)


@dataclass(frozen=True)
class MoonSign:
    """The moon and phase a character was born under."""
    moon: str
    phase: str

    def to_dict(self) -> dict[str, Any]:
        return {"moon": self.moon, "phase": self.phase}


def compute_moon_sign(
    birth_month: Optional[str],
    birth_day: Optional[int],
    config: Optional["RulesConfig"] = None,
) -> Optional[MoonSign]:
    """
    Look up the moon sign for a birthday.

    Args:
        birth_month: Month id (e.g. "grimvold"), case-insensitive
        birth_day: Day of the month, from 1
        config: Rules configuration holding the month and moon tables;
            defaults to get_default_rules()

    Returns:
        MoonSign, or None when the birthday is unset or outside the year
    """
    if config is None:
        from src.derivation.rules_config import get_default_rules

        config = get_default_rules()

    if not birth_month or not birth_day or birth_day <= 0:
        return None
    offset = config.month_offsets.get(birth_month.lower())
    if offset is None:
        logger.debug(f"Unknown birth month '{birth_month}'")
        return None

    day_of_year = offset + birth_day
    for start, end, moon, phase in config.moon_sign_table:
        if start <= day_of_year <= end:
            return MoonSign(moon, phase)
    logger.debug(f"Day of year {day_of_year} is outside the moon sign table")
    return None
