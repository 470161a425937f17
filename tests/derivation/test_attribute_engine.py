"""
Unit tests for the attribute derivation engine.
"""

import pytest

from src.data_models import (
    AbilityAdjustment,
    BaseAttributes,
    CharacterState,
    Condition,
    ConditionType,
    ExtraSkill,
    compute_ability_modifier,
)
from src.derivation.attribute_engine import (
    ACComponent,
    DerivedAttributes,
    apply_ability_roll_bonus,
    attack_roll_modifiers,
    derive_attributes,
)
from src.derivation.rules_config import RulesConfig
from src.traits.trait_data import (
    AdjustmentType,
    BuildItem,
    BuildItemKind,
    TraitCollection,
    TraitDefinition,
    TraitType,
)


def _adjusting(*traits, **base_kwargs):
    """A character whose class item carries the given traits."""
    return CharacterState(
        character_id="c1",
        name="Test",
        base=BaseAttributes(**base_kwargs),
        class_item=BuildItem("c", "Class", BuildItemKind.CLASS, TraitCollection(passive=traits)),
    )


def _static(trait_id, target, value):
    return TraitDefinition(
        trait_id=trait_id,
        name=trait_id.title(),
        trait_type=TraitType.ADJUSTMENT,
        adjustment_type=AdjustmentType.STATIC,
        adjustment_target=target,
        adjustment_value=value,
    )


class TestAbilityModifier:
    """Tests for the ability modifier breakpoints."""

    @pytest.mark.parametrize("score,modifier", [
        (3, -3), (4, -2), (5, -2), (6, -1), (8, -1), (9, 0), (12, 0),
        (13, 1), (15, 1), (16, 2), (17, 2), (18, 3), (19, 3),
    ])
    def test_breakpoints(self, score, modifier):
        """Test every bucket boundary of the modifier table."""
        assert compute_ability_modifier(score) == modifier


class TestAbilities:
    """Tests for adjusted ability scores."""

    def test_modifier_recomputed_from_adjusted_score(self, sample_fighter):
        """Test a score bonus crossing a breakpoint changes the modifier."""
        sample_fighter.adjustments.abilities["dexterity"] = AbilityAdjustment(score=2)
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.abilities["dexterity"].score == 16
        assert derived.abilities["dexterity"].mod == 2

    def test_manual_modifier_added(self, sample_fighter):
        """Test manual modifier adjustments add on top of the recomputed modifier."""
        sample_fighter.adjustments.abilities["strength"] = AbilityAdjustment(mod=1)
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.abilities["strength"].mod == 3

    def test_trait_score_adjustment(self):
        """Test trait adjustments on ability scores."""
        character = _adjusting(_static("mighty", "abilities.strength.score", 4))
        derived = derive_attributes(character, RulesConfig())
        assert derived.abilities["strength"].score == 14
        assert derived.abilities["strength"].mod == 1

    def test_all_six_abilities(self, sample_fighter):
        """Test every ability is derived."""
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert set(derived.abilities) == {
            "strength", "intelligence", "wisdom", "dexterity", "constitution", "charisma",
        }


class TestArmorClass:
    """Tests for AC and its breakdown."""

    def test_unarmoured(self, sample_fighter):
        """Test unarmoured AC is the stored base plus DEX."""
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.ac == 11
        assert derived.ac_breakdown == [ACComponent("Unarmoured", 10), ACComponent("Dexterity", 1)]

    def test_armor_and_shield(self, sample_fighter, chainmail, shield):
        """Test body armour and shield both count."""
        sample_fighter.items.extend([chainmail, shield])
        assert derive_attributes(sample_fighter, RulesConfig()).ac == 16

    def test_best_body_armor_only(self, sample_fighter, leather_armor, chainmail):
        """Test several equipped body armours do not stack."""
        sample_fighter.items.extend([leather_armor, chainmail])
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.ac == 15
        assert derived.ac_breakdown[0] == ACComponent("Chainmail", 14)

    def test_unequipped_armor_ignored(self, sample_fighter, plate_armor):
        """Test carried armour does not change AC."""
        plate_armor.equipped = False
        sample_fighter.items.append(plate_armor)
        assert derive_attributes(sample_fighter, RulesConfig()).ac == 11

    def test_breggle_fur_light_armor(self, breggle_character, leather_armor):
        """Test breggle fur applies in light armour."""
        breggle_character.items.append(leather_armor)
        derived = derive_attributes(breggle_character, RulesConfig())
        assert derived.ac == 13
        assert ACComponent("Fur", 1) in derived.ac_breakdown

    def test_breggle_fur_heavy_armor(self, breggle_character, plate_armor):
        """Test breggle fur is lost in heavy armour."""
        breggle_character.items.append(plate_armor)
        derived = derive_attributes(breggle_character, RulesConfig())
        assert derived.ac == 16
        assert ACComponent("Fur", 1) not in derived.ac_breakdown

    def test_manual_adjustment(self, sample_fighter):
        """Test the manual AC adjustment is listed and applied."""
        sample_fighter.adjustments.ac = -2
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.ac == 9
        assert derived.ac_breakdown[-1] == ACComponent("Manual adjustment", -2)

    def test_friar_armor_of_faith(self, friar_character):
        """Test a level-scaled trait bonus."""
        derived = derive_attributes(friar_character, RulesConfig())
        assert derived.ac == 13

    @pytest.mark.parametrize("items", [[], ["chainmail"], ["leather_armor", "shield"], ["plate_armor", "shield"]])
    def test_breakdown_sums_to_ac(self, breggle_character, items, request):
        """Test the breakdown always sums to the final AC."""
        breggle_character.items.extend(request.getfixturevalue(name) for name in items)
        breggle_character.adjustments.ac = 1
        derived = derive_attributes(breggle_character, RulesConfig())
        assert sum(c.value for c in derived.ac_breakdown) == derived.ac


class TestAttack:
    """Tests for attack bonuses."""

    def test_base_manual_and_trait(self):
        """Test attack combines base, manual and trait adjustments."""
        character = _adjusting(_static("drilled", "attack", 1), attack=2)
        character.adjustments.attack = 1
        assert derive_attributes(character, RulesConfig()).attack == 4

    def test_exhaustion_penalty(self, sample_fighter):
        """Test exhaustion lowers attack by its severity."""
        sample_fighter.base.attack = 2
        sample_fighter.conditions.append(Condition(ConditionType.EXHAUSTED, severity=2))
        assert derive_attributes(sample_fighter, RulesConfig()).attack == 0

    def test_missile_bonus_kept_separate(self, character_factory):
        """Test a hunter's missile bonus is not folded into attack."""
        hunter = character_factory("human", "hunter", abilities={"dexterity": 13, "strength": 9})
        derived = derive_attributes(hunter, RulesConfig())
        assert derived.attack == 0
        assert derived.attack_missile == 1
        assert derived.attack_melee == 0

    def test_attack_roll_modifiers(self, character_factory):
        """Test melee uses STR and missile uses DEX plus its trait bonus."""
        hunter = character_factory("human", "hunter", abilities={"dexterity": 13, "strength": 9})
        hunter.base.attack = 1
        derived = derive_attributes(hunter, RulesConfig())

        missile = attack_roll_modifiers(derived, "missile")
        assert (missile.attack, missile.ability, missile.trait_bonus) == (1, 1, 1)
        assert missile.total == 3

        melee = attack_roll_modifiers(derived, "melee")
        assert melee.ability == 0
        assert melee.total == 1


class TestSavesAndSkills:
    """Tests for saves, skills and magic resistance."""

    def test_saves(self, sample_fighter):
        """Test saves combine base, manual and trait adjustments."""
        sample_fighter.base.saves["doom"] = 12
        sample_fighter.adjustments.saves["doom"] = -1
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.saves["doom"] == 11
        assert derived.saves["ray"] == 10

    def test_skill_override_replaces_base(self, elf_character):
        """Test an override replaces the stored target; manual still applies."""
        elf_character.adjustments.skills["listen"] = -1
        derived = derive_attributes(elf_character, RulesConfig())
        assert derived.skills["listen"] == 4
        assert derived.skills["search"] == 5
        assert derived.skills["survival"] == 6

    def test_override_ignores_static_skill_trait(self):
        """Test static adjustments are ignored once an override is present."""
        override = TraitDefinition(
            trait_id="keen",
            name="Keen",
            trait_type=TraitType.ADJUSTMENT,
            adjustment_type=AdjustmentType.SKILL_OVERRIDE,
            adjustment_targets=("skills.search",),
            adjustment_value=4,
        )
        character = _adjusting(override, _static("nosy", "skills.search", -1))
        assert derive_attributes(character, RulesConfig()).skills["search"] == 4

    def test_static_skill_trait_without_override(self):
        """Test static skill adjustments apply when no override exists."""
        character = _adjusting(_static("nosy", "skills.search", -1))
        assert derive_attributes(character, RulesConfig()).skills["search"] == 5

    def test_extra_skills(self, sample_fighter):
        """Test extra skills are derived alongside base skills."""
        sample_fighter.base.extra_skills.append(ExtraSkill("tracking", 5))
        sample_fighter.adjustments.skills["tracking"] = -1
        assert derive_attributes(sample_fighter, RulesConfig()).skills["tracking"] == 4

    def test_magic_resistance(self, elf_character):
        """Test fairy magic resistance is a static trait."""
        elf_character.adjustments.magic_resistance = 1
        assert derive_attributes(elf_character, RulesConfig()).magic_resistance == 3

    def test_hp_max(self, sample_fighter):
        """Test max HP combines base and manual."""
        sample_fighter.base.hp_max = 8
        sample_fighter.adjustments.hp_max = 2
        assert derive_attributes(sample_fighter, RulesConfig()).hp_max == 10


class TestSpeedAndMovement:
    """Tests for speed and movement."""

    def test_unencumbered(self, sample_fighter):
        """Test speed 40 gives 120' exploring and 8 travel points."""
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.speed == 40
        assert derived.movement.exploring == 120
        assert derived.movement.overland == 8

    def test_encumbrance_replaces_base_speed(self, sample_fighter, chainmail):
        """Test the encumbrance speed is used as the base speed."""
        chainmail.weight_coins = 450
        sample_fighter.items.append(chainmail)
        assert derive_attributes(sample_fighter, RulesConfig()).speed == 30

    def test_stored_speed_when_not_set_by_encumbrance(self, sample_fighter):
        """Test the stored base speed is used when encumbrance does not set it."""
        sample_fighter.base.speed = 30
        rules = RulesConfig(encumbrance_sets_speed=False)
        assert derive_attributes(sample_fighter, rules).speed == 30

    def test_adjustments_on_top(self, sample_fighter):
        """Test manual speed and movement adjustments apply after encumbrance."""
        sample_fighter.adjustments.speed = -10
        sample_fighter.adjustments.movement_exploring = 10
        sample_fighter.adjustments.movement_overland = 1
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert derived.speed == 30
        assert derived.movement.exploring == 100
        assert derived.movement.overland == 7


class TestDerivation:
    """Tests for derivation as a whole."""

    def test_idempotent(self, breggle_character, leather_armor, shield):
        """Test deriving twice with unchanged inputs gives equal results."""
        breggle_character.items.extend([leather_armor, shield])
        rules = RulesConfig()
        assert derive_attributes(breggle_character, rules) == derive_attributes(breggle_character, rules)

    def test_character_not_modified(self, sample_fighter):
        """Test derivation does not write to the character."""
        before = repr(sample_fighter)
        derive_attributes(sample_fighter, RulesConfig())
        assert repr(sample_fighter) == before

    def test_default_rules(self, sample_fighter):
        """Test derivation without a config uses the default rules."""
        assert derive_attributes(sample_fighter).ac == 11

    def test_to_dict(self, sample_fighter):
        """Test serialisation of derived attributes."""
        data = derive_attributes(sample_fighter, RulesConfig()).to_dict()
        assert data["ac"] == 11
        assert data["movement"] == {"exploring": 120, "overland": 8}
        assert data["abilities"]["strength"] == {"score": 16, "mod": 2}


class TestAbilityRollBonus:
    """Tests for apply_ability_roll_bonus."""

    def test_capped_at_18(self):
        """Test boosted scores are capped at 18."""
        derived = DerivedAttributes()
        derived.abilities["charisma"] = derive_attributes(
            _adjusting(_static("x", "abilities.charisma.score", 7))
        ).abilities["charisma"]
        assert apply_ability_roll_bonus(derived, "charisma", 2) == (18, 3)

    def test_modifier_recomputed(self, sample_fighter):
        """Test the boosted score's modifier is recomputed."""
        derived = derive_attributes(sample_fighter, RulesConfig())
        assert apply_ability_roll_bonus(derived, "charisma", 2) == (13, 1)
        assert apply_ability_roll_bonus(derived, "strength", 1) == (17, 2)
