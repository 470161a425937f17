"""
Attribute derivation for Dolmenwood characters.

This module provides:
- RulesConfig, the rules settings passed into derivation
- The attribute derivation engine and roll-time helpers
- Movement rates, the prime ability XP modifier and the moon sign
- The combined character snapshot
"""

from src.derivation.rules_config import RulesConfig, get_default_rules
from src.derivation.movement import Movement, MovementCalculator, compute_movement
from src.derivation.moon_sign import MoonSign, compute_moon_sign
from src.derivation.xp_modifier import compute_xp_modifier, get_prime_xp_modifier
from src.derivation.attribute_engine import (
    ACComponent,
    AttackRollModifiers,
    DerivedAbility,
    DerivedAttributes,
    apply_ability_roll_bonus,
    attack_roll_modifiers,
    derive_attributes,
)
from src.derivation.snapshot import CharacterSnapshot, build_character_snapshot

__all__ = [
    # Configuration
    "RulesConfig",
    "get_default_rules",
    # Movement and XP
    "Movement",
    "MovementCalculator",
    "compute_movement",
    "compute_xp_modifier",
    "get_prime_xp_modifier",
    # Moon sign
    "MoonSign",
    "compute_moon_sign",
    # Engine
    "ACComponent",
    "AttackRollModifiers",
    "DerivedAbility",
    "DerivedAttributes",
    "apply_ability_roll_bonus",
    "attack_roll_modifiers",
    "derive_attributes",
    # Snapshot
    "CharacterSnapshot",
    "build_character_snapshot",
]
