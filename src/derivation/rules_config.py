"""
Rules configuration for attribute derivation.

RulesConfig is passed explicitly into every derivation function. Callers
that pass None get the module default, built once from the registered class
definitions.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from src.encumbrance.encumbrance_calculator import EncumbranceConfig, EncumbranceMethod
from src.derivation.moon_sign import MONTH_OFFSETS, MOON_SIGN_TABLE

logger = logging.getLogger(__name__)


def _default_spell_progressions() -> dict[str, list[list[int]]]:
    from src.classes.class_manager import get_class_manager

    return get_class_manager().get_spell_progressions()


def _default_prime_abilities() -> dict[str, list[str]]:
    from src.classes.class_manager import get_class_manager

    return get_class_manager().get_prime_abilities()


@dataclass
class RulesConfig:
    """Rules settings for a table."""

    encumbrance: EncumbranceConfig = field(default_factory=EncumbranceConfig)
    # Encumbrance speed replaces the stored base speed
    encumbrance_sets_speed: bool = True

    # Class id -> slots per rank, indexed by level (index 0 unused)
    spell_progressions: dict[str, list[list[int]]] = field(
        default_factory=_default_spell_progressions
    )

    # Magic tradition enabling
    arcane_casters: frozenset[str] = frozenset({"magician", "enchanter"})
    holy_casters: frozenset[str] = frozenset({"cleric", "friar"})
    fairy_casters: frozenset[str] = frozenset({"enchanter"})
    fairy_kindreds: frozenset[str] = frozenset({"elf", "grimalkin"})
    knack_kindreds: frozenset[str] = frozenset({"mossling"})

    # Class id -> prime abilities, for the XP modifier
    prime_abilities: dict[str, list[str]] = field(default_factory=_default_prime_abilities)

    # Month id -> days of the year before it, and the moon sign table
    month_offsets: dict[str, int] = field(default_factory=lambda: dict(MONTH_OFFSETS))
    moon_sign_table: tuple[tuple[int, int, str, str], ...] = MOON_SIGN_TABLE

    def __post_init__(self):
        """Accept plain strings for the encumbrance method, leaving the caller's config untouched."""
        self.encumbrance = replace(
            self.encumbrance, method=EncumbranceMethod.parse(self.encumbrance.method)
        )
        for name in (
            "arcane_casters",
            "holy_casters",
            "fairy_casters",
            "fairy_kindreds",
            "knack_kindreds",
        ):
            value = getattr(self, name)
            if not isinstance(value, frozenset):
                setattr(self, name, frozenset(value))


_default_rules: Optional[RulesConfig] = None


def get_default_rules() -> RulesConfig:
    """Get the module default RulesConfig."""
    global _default_rules
    if _default_rules is None:
        _default_rules = RulesConfig()
        logger.debug("Built default rules configuration")
    return _default_rules
