"""
Unit tests for trait adjustment aggregation.
"""

import pytest

from src.data_models import BaseAttributes, CharacterState
from src.traits.trait_adjustments import TraitAdjustments, compute_trait_adjustments
from src.traits.trait_data import (
    AdjustmentType,
    BuildItem,
    BuildItemKind,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


def _static(trait_id, target, value, **kwargs):
    return TraitDefinition(
        trait_id=trait_id,
        name=trait_id.replace("_", " ").title(),
        trait_type=TraitType.ADJUSTMENT,
        adjustment_type=AdjustmentType.STATIC,
        adjustment_target=target,
        adjustment_value=value,
        **kwargs,
    )


def _override(trait_id, targets, value):
    return TraitDefinition(
        trait_id=trait_id,
        name=trait_id,
        trait_type=TraitType.ADJUSTMENT,
        adjustment_type=AdjustmentType.SKILL_OVERRIDE,
        adjustment_targets=targets,
        adjustment_value=value,
    )


def _character(level=1, kindred_traits=(), class_traits=()):
    return CharacterState(
        character_id="c1",
        name="Test",
        base=BaseAttributes(level=level),
        kindred_item=BuildItem("k", "Kindred", BuildItemKind.KINDRED,
                               TraitCollection(passive=tuple(kindred_traits))),
        class_item=BuildItem("c", "Class", BuildItemKind.CLASS,
                             TraitCollection(passive=tuple(class_traits))),
    )


class TestTraitAdjustments:
    """Tests for the TraitAdjustments accumulator."""

    def test_static_sums(self):
        """Test static adjustments on one path accumulate."""
        adjustments = TraitAdjustments()
        adjustments.add_static("ac", 1, "Fur")
        adjustments.add_static("ac", 2, "Faith")
        assert adjustments.get("ac") == 3
        assert adjustments.sources["ac"] == [("Fur", 1), ("Faith", 2)]

    def test_missing_path_is_zero(self):
        """Test unknown paths contribute 0."""
        assert TraitAdjustments().get("saves.doom") == 0

    def test_lowest_override_wins(self):
        """Test skill targets are lower-is-better, so the lowest override is kept."""
        adjustments = TraitAdjustments()
        adjustments.add_override("skills.listen", 5)
        adjustments.add_override("skills.listen", 3)
        adjustments.add_override("skills.listen", 4)
        assert adjustments.get_override("skills.listen") == 3


class TestComputeTraitAdjustments:
    """Tests for compute_trait_adjustments."""

    def test_competing_overrides(self):
        """Test overrides of 5 and 3 on the same skill resolve to 3."""
        character = _character(
            kindred_traits=[_override("keen", ("skills.listen",), 5)],
            class_traits=[_override("keener", ("skills.listen",), 3)],
        )
        assert compute_trait_adjustments(character).get_override("skills.listen") == 3

    @pytest.mark.parametrize("level,expected", [(4, 0), (5, 2)])
    def test_min_level_gate(self, level, expected):
        """Test a min level 5 trait applies from level 5 only."""
        character = _character(level=level, class_traits=[_static("veteran", "attack", 2, min_level=5)])
        assert compute_trait_adjustments(character).get("attack") == expected

    def test_duplicate_trait_counted_once(self):
        """Test the same trait id on both items contributes once."""
        trait = _static("tough_hide", "ac", 1)
        character = _character(kindred_traits=[trait], class_traits=[trait])
        assert compute_trait_adjustments(character).get("ac") == 1

    def test_static_traits_on_same_path_add(self):
        """Test different traits on one path accumulate."""
        character = _character(
            kindred_traits=[_static("a", "saves.doom", 1)],
            class_traits=[_static("b", "saves.doom", 2)],
        )
        assert compute_trait_adjustments(character).get("saves.doom") == 3

    def test_no_heavy_armor_gate(self, breggle_character, leather_armor, chainmail):
        """Test breggle fur applies unarmoured or in light armour only."""
        assert compute_trait_adjustments(breggle_character).get("ac") == 1

        breggle_character.items.append(leather_armor)
        assert compute_trait_adjustments(breggle_character).get("ac") == 1

        leather_armor.equipped = False
        breggle_character.items.append(chainmail)
        assert compute_trait_adjustments(breggle_character).get("ac") == 0

    def test_roll_options_and_info_excluded(self, elf_character):
        """Test roll-option and info traits never reach the snapshot."""
        adjustments = compute_trait_adjustments(elf_character)
        assert "abilities.charisma" not in adjustments.static
        assert adjustments.get_override("skills.listen") == 5
        assert adjustments.get_override("skills.search") == 5

    def test_untargeted_static_ignored(self):
        """Test a static trait without a target is skipped."""
        character = _character(class_traits=[_static("broken", None, 3)])
        assert compute_trait_adjustments(character).static == {}

    def test_level_table_value(self, character_factory):
        """Test friar armour of faith grows with level."""
        assert compute_trait_adjustments(character_factory("human", "friar", level=1)).get("ac") == 2
        assert compute_trait_adjustments(character_factory("human", "friar", level=9)).get("ac") == 4
