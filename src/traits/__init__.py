"""
Trait system for Dolmenwood kindreds and classes.

This module provides:
- TraitDefinition and level-value strategies (FixedValue, LevelTable)
- Active trait resolution and display preparation
- Aggregation of static adjustments and skill overrides
- Roll-time options
"""

from src.traits.trait_data import (
    AdjustmentType,
    BuildItem,
    BuildItemKind,
    FixedValue,
    LevelTable,
    LevelValue,
    TraitCategory,
    TraitCollection,
    TraitDefinition,
    TraitType,
    resolve_level_value,
)
from src.traits.trait_resolver import (
    PreparedTrait,
    SelectionSection,
    build_selection_sections,
    get_active_traits,
    get_alignment_restrictions,
    get_size_restriction,
    is_item_size_compatible,
    is_wearing_heavy_armor,
    prepare_traits,
)
from src.traits.trait_adjustments import TraitAdjustments, compute_trait_adjustments
from src.traits.roll_options import RollOption, get_roll_options, target_matches

__all__ = [
    # Data structures
    "AdjustmentType",
    "BuildItem",
    "BuildItemKind",
    "FixedValue",
    "LevelTable",
    "LevelValue",
    "TraitCategory",
    "TraitCollection",
    "TraitDefinition",
    "TraitType",
    "resolve_level_value",
    # Resolution
    "PreparedTrait",
    "SelectionSection",
    "build_selection_sections",
    "get_active_traits",
    "get_alignment_restrictions",
    "get_size_restriction",
    "is_item_size_compatible",
    "is_wearing_heavy_armor",
    "prepare_traits",
    # Adjustments
    "TraitAdjustments",
    "compute_trait_adjustments",
    # Roll options
    "RollOption",
    "get_roll_options",
    "target_matches",
]
