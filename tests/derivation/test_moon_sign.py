"""
Unit tests for moon sign lookup.
"""

import pytest

from src.derivation.moon_sign import MoonSign, compute_moon_sign
from src.derivation.rules_config import RulesConfig


class TestMoonSign:
    """Tests for compute_moon_sign."""

    @pytest.mark.parametrize("month,day,moon,phase", [
        ("grimvold", 1, "black", "waning"),
        ("grimvold", 3, "black", "waning"),
        ("grimvold", 4, "grinning", "waxing"),
        ("grimvold", 18, "grinning", "full"),
        ("lymewald", 4, "dead", "waxing"),
        ("braghold", 5, "black", "waxing"),
        ("braghold", 30, "black", "waning"),
    ])
    def test_table_boundaries(self, month, day, moon, phase):
        """Test birthdays either side of moon and phase changes."""
        assert compute_moon_sign(month, day) == MoonSign(moon, phase)

    def test_month_case_insensitive(self):
        """Test month ids match regardless of case."""
        assert compute_moon_sign("Grimvold", 3) == MoonSign("black", "waning")

    @pytest.mark.parametrize("month,day", [
        ("", 5),
        (None, 5),
        ("grimvold", 0),
        ("grimvold", None),
        ("grimvold", -2),
        ("smarch", 5),
        ("braghold", 31),
    ])
    def test_unset_or_out_of_range(self, month, day):
        """Test unset birthdays, unknown months and days past the year end give None."""
        assert compute_moon_sign(month, day) is None

    def test_tables_from_rules(self):
        """Test the month and moon tables are read from the rules."""
        rules = RulesConfig(
            month_offsets={"firstmonth": 0},
            moon_sign_table=((1, 10, "silver", "full"),),
        )
        assert compute_moon_sign("firstmonth", 10, rules) == MoonSign("silver", "full")
        assert compute_moon_sign("firstmonth", 11, rules) is None
        assert compute_moon_sign("grimvold", 1, rules) is None

    def test_to_dict(self):
        """Test moon sign serialisation."""
        assert MoonSign("witch", "full").to_dict() == {"moon": "witch", "phase": "full"}
