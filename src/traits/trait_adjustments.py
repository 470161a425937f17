"""
Trait adjustment aggregation.

Walks a character's active traits and collects the adjustments that feed the
passive derived-attribute snapshot:

- static adjustments are summed per attribute path
- skill overrides replace a skill's base target; when several overrides hit
  the same skill the LOWEST value wins, because skill targets are
  lower-is-better and the lowest target is the most generous

Roll options and info adjustments never reach the snapshot.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.data_models import CharacterState
from src.traits.trait_data import AdjustmentType
from src.traits.trait_resolver import get_active_traits, is_wearing_heavy_armor

logger = logging.getLogger(__name__)


@dataclass
class TraitAdjustments:
    """Aggregated static adjustments and skill overrides, keyed by path."""
    static: dict[str, int] = field(default_factory=dict)
    skill_overrides: dict[str, int] = field(default_factory=dict)
    # Path -> (trait name, value) for each static contribution, for display
    sources: dict[str, list[tuple[str, int]]] = field(default_factory=dict)

    def get(self, path: str) -> int:
        """Summed static adjustment for an exact path (0 if none)."""
        return self.static.get(path, 0)

    def get_override(self, path: str) -> Optional[int]:
        return self.skill_overrides.get(path)

    def add_static(self, path: str, value: int, source: str = "") -> None:
        self.static[path] = self.static.get(path, 0) + value
        self.sources.setdefault(path, []).append((source or path, value))

    def add_override(self, path: str, value: int) -> None:
        """Record an override unless a lower one is already recorded."""
        current = self.skill_overrides.get(path)
        if current is None or value < current:
            self.skill_overrides[path] = value


def compute_trait_adjustments(character: CharacterState) -> TraitAdjustments:
    """
    Compute the static trait adjustments that apply to a character.

    Adjustment traits are skipped when their level gate is not met, or when
    they require no heavy armour and medium or heavy armour is equipped.

    Args:
        character: The character to aggregate

    Returns:
        TraitAdjustments with per-path sums and skill overrides
    """
    adjustments = TraitAdjustments()
    level = character.level
    heavy_armor = is_wearing_heavy_armor(character)

    for trait in get_active_traits(character):
        if not trait.is_adjustment:
            continue
        if trait.is_locked(level):
            continue
        if trait.requires_no_heavy_armor and heavy_armor:
            continue

        value = trait.get_adjustment_value(level)

        if trait.adjustment_type == AdjustmentType.SKILL_OVERRIDE:
            for path in trait.adjustment_targets:
                adjustments.add_override(path, value)
            continue

        if trait.adjustment_type != AdjustmentType.STATIC:
            continue

        if not trait.adjustment_target:
            logger.debug(f"Static trait '{trait.trait_id}' has no target, ignoring")
            continue
        adjustments.add_static(trait.adjustment_target, value, trait.name)

    return adjustments
