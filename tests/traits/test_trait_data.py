"""
Unit tests for trait definitions and level-value strategies.

Tests FixedValue, LevelTable and TraitDefinition serialisation from
src/traits/trait_data.py.
"""

import pytest

from src.traits.trait_data import (
    AdjustmentType,
    FixedValue,
    LevelTable,
    LevelValue,
    TraitCategory,
    TraitCollection,
    TraitDefinition,
    TraitType,
    resolve_level_value,
)


class TestLevelValues:
    """Tests for FixedValue and LevelTable."""

    def test_fixed_value_ignores_level(self):
        """Test a fixed value resolves the same at every level."""
        value = FixedValue(3)
        assert value.resolve(1) == 3
        assert value.resolve(15) == 3

    @pytest.mark.parametrize("level,expected", [
        (1, 2),
        (4, 2),
        (5, 3),
        (8, 3),
        (9, 4),
        (13, 5),
        (15, 5),
    ])
    def test_level_table_highest_entry_wins(self, level, expected):
        """Test the highest entry not above the level applies."""
        table = LevelTable(((1, 2), (5, 3), (9, 4), (13, 5)))
        assert table.resolve(level) == expected

    def test_level_table_below_first_entry(self):
        """Test levels below every entry use the first entry."""
        table = LevelTable(((3, "1d4+1"), (6, "1d6")))
        assert table.resolve(1) == "1d4+1"

    def test_level_table_sorts_entries(self):
        """Test entries given out of order are sorted."""
        table = LevelTable(((5, 3), (1, 2)))
        assert table.entries == ((1, 2), (5, 3))
        assert table.resolve(6) == 3

    def test_empty_level_table_raises(self):
        """Test a table without entries is rejected."""
        with pytest.raises(ValueError):
            LevelTable(())

    def test_from_dict_scalar_is_fixed(self):
        """Test a bare scalar becomes a FixedValue."""
        assert LevelValue.from_dict(2) == FixedValue(2)

    def test_from_dict_table(self):
        """Test a table dict is rebuilt."""
        value = LevelValue.from_dict({"kind": "table", "entries": [[1, 1], [6, 2]]})
        assert value == LevelTable(((1, 1), (6, 2)))

    def test_from_dict_unknown_kind_raises(self):
        """Test an unknown kind is rejected."""
        with pytest.raises(ValueError):
            LevelValue.from_dict({"kind": "formula", "value": "level/2"})

    def test_resolve_plain_int(self):
        """Test plain ints are accepted wherever a LevelValue is."""
        assert resolve_level_value(4, 10) == 4
        assert resolve_level_value(None, 10) is None


class TestTraitDefinition:
    """Tests for TraitDefinition."""

    def test_level_gate(self):
        """Test is_locked below min_level only."""
        trait = TraitDefinition(trait_id="t", name="T", min_level=5)
        assert trait.is_locked(4)
        assert not trait.is_locked(5)

    def test_no_level_gate(self):
        """Test traits without min_level are never locked."""
        trait = TraitDefinition(trait_id="t", name="T")
        assert not trait.is_locked(1)

    def test_adjustment_value_from_table(self):
        """Test adjustment values resolve through a LevelTable."""
        trait = TraitDefinition(
            trait_id="armor_of_faith",
            name="Armour of Faith",
            trait_type=TraitType.ADJUSTMENT,
            adjustment_type=AdjustmentType.STATIC,
            adjustment_target="ac",
            adjustment_value=LevelTable(((1, 2), (5, 3))),
        )
        assert trait.get_adjustment_value(1) == 2
        assert trait.get_adjustment_value(7) == 3

    def test_missing_adjustment_value_is_zero(self):
        """Test an adjustment without a value contributes 0."""
        trait = TraitDefinition(trait_id="t", name="T", trait_type=TraitType.ADJUSTMENT)
        assert trait.get_adjustment_value(3) == 0

    def test_dict_round_trip(self):
        """Test a trait survives to_dict/from_dict."""
        trait = TraitDefinition(
            trait_id="fur_defense",
            name="Fur",
            trait_type=TraitType.ADJUSTMENT,
            adjustment_type=AdjustmentType.STATIC,
            adjustment_target="ac",
            adjustment_value=1,
            requires_no_heavy_armor=True,
            min_level=2,
        )
        data = trait.to_dict()
        assert data["id"] == "fur_defense"
        rebuilt = TraitDefinition.from_dict(data)
        assert rebuilt.requires_no_heavy_armor
        assert rebuilt.min_level == 2
        assert rebuilt.get_adjustment_value(2) == 1

    def test_from_dict_unknown_type_raises(self):
        """Test an unknown trait type is rejected."""
        with pytest.raises(ValueError):
            TraitDefinition.from_dict({"id": "t", "trait_type": "mystery"})


class TestTraitCollection:
    """Tests for TraitCollection."""

    def test_flatten_category_order(self):
        """Test flatten yields active, passive, info, restrictions in order."""
        a = TraitDefinition(trait_id="a", name="A")
        p = TraitDefinition(trait_id="p", name="P")
        r = TraitDefinition(trait_id="r", name="R")
        collection = TraitCollection(restrictions=(r,), passive=(p,), active=(a,))
        assert [t.trait_id for t in collection.flatten()] == ["a", "p", "r"]

    def test_categorized(self):
        """Test categorized pairs each trait with its category."""
        p = TraitDefinition(trait_id="p", name="P")
        collection = TraitCollection(passive=(p,))
        assert collection.categorized() == [(TraitCategory.PASSIVE, p)]

    def test_dict_round_trip(self):
        """Test a collection survives to_dict/from_dict."""
        collection = TraitCollection(
            passive=(TraitDefinition(trait_id="p", name="P"),),
            info=(TraitDefinition(trait_id="i", name="I"),),
        )
        assert TraitCollection.from_dict(collection.to_dict()) == collection
