"""
Unit tests for roll-time trait options.
"""

import pytest

from src.traits.roll_options import (
    RollOption,
    get_roll_options,
    target_matches,
    total_selected_bonus,
)


class TestTargetMatches:
    """Tests for target_matches."""

    @pytest.mark.parametrize("target,path,expected", [
        ("saves.doom", "saves.doom", True),
        ("saves", "saves.doom", True),
        ("saves.all", "saves.ray", True),
        ("saves.all", "skills.listen", False),
        ("attack", "attack.melee", True),
        ("attack", "attack.missile", True),
        ("attack.melee", "attack.missile", False),
        ("abilities.charisma", "abilities.charisma", True),
        ("abilities.charisma", "abilities.strength", False),
        ("skills", "skillsx", False),
        (None, "saves.doom", False),
    ])
    def test_matching(self, target, path, expected):
        """Test exact, prefix and alias matching."""
        assert target_matches(target, path) is expected


class TestGetRollOptions:
    """Tests for get_roll_options."""

    def test_elf_charisma(self, elf_character):
        """Test elves are offered unearthly beauty on charisma rolls."""
        options = get_roll_options(elf_character, "abilities.charisma")
        assert [o.trait_id for o in options] == ["unearthly_beauty"]
        assert options[0].bonus == 2
        assert options[0].condition == "when interacting with mortals"

    def test_no_match(self, elf_character):
        """Test unrelated rolls get no options."""
        assert get_roll_options(elf_character, "saves.doom") == []

    def test_all_saves_wildcard(self, character_factory):
        """Test a saves.all option is offered on every save."""
        knight = character_factory("human", "knight", level=1)
        for save in ("doom", "ray", "hold", "blast", "spell"):
            ids = [o.trait_id for o in get_roll_options(knight, f"saves.{save}")]
            assert "strength_of_will" in ids

    def test_level_gate(self, character_factory):
        """Test level-gated options are withheld until their level."""
        knight = character_factory("human", "knight", level=4)
        assert "monster_slayer" not in [o.trait_id for o in get_roll_options(knight, "attack.melee")]
        knight.base.level = 5
        assert "monster_slayer" in [o.trait_id for o in get_roll_options(knight, "attack.melee")]

    def test_to_dict(self):
        """Test option serialisation uses the trait id."""
        option = RollOption("unearthly_beauty", "Unearthly Beauty", 2)
        assert option.to_dict()["id"] == "unearthly_beauty"


class TestSelectedBonus:
    """Tests for total_selected_bonus."""

    def test_only_selected_count(self):
        """Test only toggled options are summed."""
        options = [RollOption("a", "A", 2), RollOption("b", "B", 1)]
        assert total_selected_bonus(options, {"b"}) == 1
        assert total_selected_bonus(options, set()) == 0
