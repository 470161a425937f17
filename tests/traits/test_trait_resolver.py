"""
Unit tests for active trait resolution and trait display preparation.
"""

import pytest

from src.data_models import ArmorBulk, CharacterState, Item, ItemSize, ItemType, TraitUsage
from src.traits.trait_data import (
    AdjustmentType,
    BuildItem,
    BuildItemKind,
    TraitCategory,
    TraitCollection,
    TraitDefinition,
    TraitType,
)
from src.traits.trait_resolver import (
    build_selection_sections,
    get_active_traits,
    get_alignment_restrictions,
    get_size_restriction,
    is_item_size_compatible,
    is_wearing_heavy_armor,
    prepare_traits,
)


def _item(item_id, kind, *traits):
    return BuildItem(item_id=item_id, name=item_id.title(), kind=kind,
                     traits=TraitCollection(passive=tuple(traits)))


class TestActiveTraits:
    """Tests for get_active_traits."""

    def test_kindred_before_class(self):
        """Test kindred traits are listed before class traits."""
        kindred = _item("k", BuildItemKind.KINDRED, TraitDefinition(trait_id="a", name="A"))
        klass = _item("c", BuildItemKind.CLASS, TraitDefinition(trait_id="b", name="B"))
        character = CharacterState("c1", "Test", kindred_item=kindred, class_item=klass)
        assert [t.trait_id for t in get_active_traits(character)] == ["a", "b"]

    def test_duplicate_id_first_wins(self):
        """Test a trait id on both items is kept once, kindred version first."""
        kindred = _item("k", BuildItemKind.KINDRED, TraitDefinition(trait_id="x", name="Kindred X"))
        klass = _item("c", BuildItemKind.CLASS, TraitDefinition(trait_id="x", name="Class X"))
        character = CharacterState("c1", "Test", kindred_item=kindred, class_item=klass)
        traits = get_active_traits(character)
        assert len(traits) == 1
        assert traits[0].name == "Kindred X"

    def test_level_gate_not_applied(self):
        """Test locked traits are still returned."""
        gated = TraitDefinition(trait_id="g", name="G", min_level=5)
        character = CharacterState("c1", "Test", class_item=_item("c", BuildItemKind.CLASS, gated))
        assert get_active_traits(character) == [gated]

    def test_no_build_items(self):
        """Test a character without build items has no traits."""
        assert get_active_traits(CharacterState("c1", "Test")) == []

    def test_stable_across_calls(self, breggle_character):
        """Test resolution is stable with unchanged inputs."""
        assert get_active_traits(breggle_character) == get_active_traits(breggle_character)


class TestSelectionGate:
    """Tests for selection-gated child traits."""

    def test_unselected_talent_inactive(self, character_factory):
        """Test combat talents are inactive until selected."""
        fighter = character_factory("human", "fighter", level=2)
        ids = [t.trait_id for t in get_active_traits(fighter)]
        assert "cleave" not in ids

    def test_selected_talent_active(self, character_factory):
        """Test a multi-select list activates its entries."""
        fighter = character_factory(
            "human", "fighter", level=2, trait_selections={"combat_talents": ["cleave"]}
        )
        ids = [t.trait_id for t in get_active_traits(fighter)]
        assert "cleave" in ids
        assert "defender" not in ids

    def test_single_selection_string(self, character_factory):
        """Test a single-select field holding an id activates that child."""
        cleric = character_factory(
            "human", "cleric", level=2, trait_selections={"holy_order": "st_sedge"}
        )
        ids = [t.trait_id for t in get_active_traits(cleric)]
        assert "st_sedge" in ids
        assert "st_faxis" not in ids


class TestHeavyArmor:
    """Tests for is_wearing_heavy_armor."""

    def test_unarmoured(self, sample_fighter):
        """Test no armour is not heavy."""
        assert not is_wearing_heavy_armor(sample_fighter)

    def test_light_armor(self, sample_fighter, leather_armor):
        """Test light armour is not heavy."""
        sample_fighter.items.append(leather_armor)
        assert not is_wearing_heavy_armor(sample_fighter)

    @pytest.mark.parametrize("armor_fixture", ["chainmail", "plate_armor"])
    def test_medium_and_heavy(self, sample_fighter, armor_fixture, request):
        """Test medium and heavy armour both count as heavy."""
        sample_fighter.items.append(request.getfixturevalue(armor_fixture))
        assert is_wearing_heavy_armor(sample_fighter)

    def test_unequipped_armor_ignored(self, sample_fighter, plate_armor):
        """Test carried but unequipped armour does not count."""
        plate_armor.equipped = False
        sample_fighter.items.append(plate_armor)
        assert not is_wearing_heavy_armor(sample_fighter)

    def test_bulky_shield_ignored(self, sample_fighter, shield):
        """Test a medium-bulk shield alone does not count as heavy armour."""
        shield.bulk = ArmorBulk.MEDIUM
        sample_fighter.items.append(shield)
        assert not is_wearing_heavy_armor(sample_fighter)


class TestRestrictions:
    """Tests for alignment and size restrictions."""

    def test_knight_alignment(self, character_factory):
        """Test knights are restricted to lawful."""
        knight = character_factory("human", "knight")
        assert get_alignment_restrictions(knight) == ["lawful"]

    def test_unrestricted(self, sample_fighter):
        """Test no restriction gives None."""
        assert get_alignment_restrictions(sample_fighter) is None

    def test_alignment_intersection(self):
        """Test several restrictions intersect."""
        first = TraitDefinition(trait_id="a", name="A", trait_type=TraitType.ALIGNMENT_RESTRICTION,
                                allowed_alignments=("lawful", "neutral"))
        second = TraitDefinition(trait_id="b", name="B", trait_type=TraitType.ALIGNMENT_RESTRICTION,
                                 allowed_alignments=("neutral", "chaotic"))
        character = CharacterState(
            "c1", "Test",
            kindred_item=_item("k", BuildItemKind.KINDRED, first),
            class_item=_item("c", BuildItemKind.CLASS, second),
        )
        assert get_alignment_restrictions(character) == ["neutral"]

    def test_small_kindred(self, character_factory):
        """Test mosslings are small."""
        mossling = character_factory("mossling", "fighter")
        assert get_size_restriction(mossling) == ItemSize.SMALL

    def test_small_cannot_use_large_weapon(self, character_factory):
        """Test small characters reject large weapons."""
        mossling = character_factory("mossling", "fighter")
        great_axe = Item("axe", "Great axe", item_type=ItemType.WEAPON, size=ItemSize.LARGE)
        assert not is_item_size_compatible(mossling, great_axe)

    def test_medium_cannot_wear_small_armor(self, sample_fighter):
        """Test medium characters reject armour fitted for small folk."""
        small_mail = Item("mail", "Small mail", item_type=ItemType.ARMOR, size=ItemSize.SMALL)
        assert not is_item_size_compatible(sample_fighter, small_mail)

    def test_general_items_always_fit(self, character_factory):
        """Test non-weapon, non-armour items are always compatible."""
        mossling = character_factory("mossling", "fighter")
        rope = Item("rope", "Rope", size=ItemSize.LARGE)
        assert is_item_size_compatible(mossling, rope)


class TestPrepareTraits:
    """Tests for prepare_traits."""

    def test_locked_trait_kept_and_flagged(self, breggle_character):
        """Test level-gated traits are shown locked with their min level."""
        prepared = {p.trait_id: p for p in prepare_traits(breggle_character, breggle_character.kindred_item)}
        gaze = prepared["longhorn_gaze"]
        assert gaze.locked
        assert gaze.min_level == 4

    def test_natural_weapon_damage(self, character_factory):
        """Test natural weapon damage resolves at the character's level."""
        breggle = character_factory("breggle", "fighter", level=6)
        prepared = {p.trait_id: p for p in prepare_traits(breggle, breggle.kindred_item)}
        horns = prepared["horn_attack"]
        assert horns.is_natural_weapon
        assert horns.roll_formula == "1d6"

    def test_usage_tracking(self, character_factory):
        """Test limited-use active traits report remaining uses."""
        breggle = character_factory(
            "breggle", "fighter", level=6, trait_usage={"longhorn_gaze": TraitUsage(used=1)}
        )
        prepared = {p.trait_id: p for p in prepare_traits(breggle, breggle.kindred_item)}
        gaze = prepared["longhorn_gaze"]
        assert gaze.has_usage_tracking
        assert gaze.max_uses == 2
        assert gaze.used == 1
        assert gaze.remaining == 1

    def test_display_value_from_table(self, breggle_character):
        """Test display values resolve through a LevelTable."""
        prepared = {p.trait_id: p for p in prepare_traits(breggle_character, breggle_character.kindred_item)}
        assert prepared["horn_length"].value == '1"'
        assert prepared["horn_length"].category == TraitCategory.INFO

    def test_hidden_and_selection_parents_omitted(self, character_factory):
        """Test talents and the talent parent are not shown as traits."""
        fighter = character_factory("human", "fighter", level=2)
        ids = [p.trait_id for p in prepare_traits(fighter, fighter.class_item)]
        assert "combat_talents" not in ids
        assert "cleave" not in ids

    def test_adjustment_flags(self, elf_character):
        """Test roll options and info reminders are flagged."""
        prepared = {p.trait_id: p for p in prepare_traits(elf_character, elf_character.kindred_item)}
        assert prepared["unearthly_beauty"].is_roll_option
        assert prepared["cold_iron_vuln"].is_info_reminder

    def test_no_build_item(self, sample_fighter):
        """Test a missing build item prepares nothing."""
        assert prepare_traits(sample_fighter, None) == []


class TestSelectionSections:
    """Tests for build_selection_sections."""

    def test_combat_talents_section(self, character_factory):
        """Test the fighter's talent section lists all talents."""
        fighter = character_factory(
            "human", "fighter", level=6, trait_selections={"combat_talents": ["cleave"]}
        )
        sections = build_selection_sections(fighter)
        assert len(sections) == 1
        section = sections[0]
        assert section.is_multi
        assert len(section.choices) == 8
        assert section.selected == ["cleave"]
        assert section.unlocked_count == 2
        assert section.can_select_more

    def test_all_unlocked_talents_chosen(self, character_factory):
        """Test no more selections once every unlocked talent is chosen."""
        fighter = character_factory(
            "human", "fighter", level=2, trait_selections={"combat_talents": ["cleave"]}
        )
        assert not build_selection_sections(fighter)[0].can_select_more

    def test_single_select_hidden_before_unlock(self, character_factory):
        """Test a cleric's holy order section is omitted at level 1."""
        cleric = character_factory("human", "cleric", level=1)
        assert build_selection_sections(cleric) == []

    def test_single_select_after_unlock(self, character_factory):
        """Test a cleric's holy order section appears at level 2."""
        cleric = character_factory("human", "cleric", level=2, trait_selections={"holy_order": "st_faxis"})
        sections = build_selection_sections(cleric)
        assert len(sections) == 1
        assert not sections[0].is_multi
        assert sections[0].selected == ["st_faxis"]
        assert set(sections[0].choices) == {"st_faxis", "st_sedge", "st_signis"}
