"""
Attribute derivation engine.

Combines a character's stored base values, the player's manual adjustments,
static trait adjustments and encumbrance into the derived statistics shown
on the sheet and used by roll resolution.

Derivation is a pure function of the character: calling it twice with
unchanged inputs gives equal results, and the character is never modified.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from src.data_models import (
    ABILITY_NAMES,
    MAX_ABILITY_SCORE,
    CharacterState,
    Item,
    compute_ability_modifier,
)
from src.derivation.movement import Movement, compute_movement
from src.derivation.rules_config import RulesConfig, get_default_rules
from src.encumbrance.encumbrance_calculator import EncumbranceState, compute_encumbrance
from src.traits.trait_adjustments import TraitAdjustments, compute_trait_adjustments

logger = logging.getLogger(__name__)

UNARMOURED_LABEL = "Unarmoured"
DEXTERITY_LABEL = "Dexterity"
MANUAL_LABEL = "Manual adjustment"


# =============================================================================
# DERIVED VALUES
# =============================================================================


@dataclass(frozen=True)
class DerivedAbility:
    """An adjusted ability score and its modifier."""
    score: int
    mod: int

    def to_dict(self) -> dict[str, int]:
        return {"score": self.score, "mod": self.mod}


@dataclass(frozen=True)
class ACComponent:
    """One labelled contribution to Armour Class."""
    label: str
    value: int


@dataclass
class DerivedAttributes:
    """
    Final statistics for a character at one instant.

    `attack_melee` and `attack_missile` are trait bonuses added only when a
    melee or missile attack is rolled; they are not part of `attack`.
    """
    abilities: dict[str, DerivedAbility] = field(default_factory=dict)
    hp_max: int = 0
    ac: int = 10
    ac_breakdown: list[ACComponent] = field(default_factory=list)
    attack: int = 0
    attack_melee: int = 0
    attack_missile: int = 0
    saves: dict[str, int] = field(default_factory=dict)
    magic_resistance: int = 0
    skills: dict[str, int] = field(default_factory=dict)
    speed: int = 0
    movement: Movement = field(default_factory=Movement)

    def get_ability(self, ability: str) -> DerivedAbility:
        return self.abilities.get(ability) or DerivedAbility(score=10, mod=0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "abilities": {name: a.to_dict() for name, a in self.abilities.items()},
            "hp_max": self.hp_max,
            "ac": self.ac,
            "ac_breakdown": [{"label": c.label, "value": c.value} for c in self.ac_breakdown],
            "attack": self.attack,
            "attack_melee": self.attack_melee,
            "attack_missile": self.attack_missile,
            "saves": dict(self.saves),
            "magic_resistance": self.magic_resistance,
            "skills": dict(self.skills),
            "speed": self.speed,
            "movement": self.movement.to_dict(),
        }


@dataclass(frozen=True)
class AttackRollModifiers:
    """Components of an attack roll's bonus."""
    attack: int
    ability: int
    trait_bonus: int

    @property
    def total(self) -> int:
        return self.attack + self.ability + self.trait_bonus


# =============================================================================
# COMPONENT DERIVATIONS
# =============================================================================


def derive_abilities(character: CharacterState, traits: TraitAdjustments) -> dict[str, DerivedAbility]:
    """
    Adjust ability scores and recompute their modifiers.

    The modifier comes from the adjusted score, then manual and trait
    modifier adjustments are added.
    """
    abilities = {}
    names = list(ABILITY_NAMES) + [n for n in character.base.abilities if n not in ABILITY_NAMES]
    for name in names:
        manual = character.adjustments.ability(name)
        score = (
            character.base.get_score(name)
            + manual.score
            + traits.get(f"abilities.{name}.score")
        )
        mod = compute_ability_modifier(score) + manual.mod + traits.get(f"abilities.{name}.mod")
        abilities[name] = DerivedAbility(score=score, mod=mod)
    return abilities


def _best_item(items: list[Item]) -> Optional[Item]:
    best = None
    for item in items:
        if best is None or item.ac > best.ac:
            best = item
    return best


def derive_armor_class(
    character: CharacterState,
    dex_mod: int,
    traits: TraitAdjustments,
) -> tuple[int, list[ACComponent]]:
    """
    Compute AC and its breakdown.

    Only the best equipped body armour and the best equipped shield count.
    Without body armour the character's stored unarmoured AC is used. The
    breakdown values always sum to the returned AC.

    Returns:
        Tuple of (ac, breakdown)
    """
    equipped = character.get_equipped_items()
    armor = _best_item([i for i in equipped if i.is_body_armor])
    shield = _best_item([i for i in equipped if i.is_armor and i.is_shield])

    breakdown = []
    if armor is not None:
        breakdown.append(ACComponent(armor.name, armor.ac))
    else:
        breakdown.append(ACComponent(UNARMOURED_LABEL, character.base.ac))
    breakdown.append(ACComponent(DEXTERITY_LABEL, dex_mod))
    if shield is not None:
        breakdown.append(ACComponent(shield.name, shield.ac))
    for source, value in traits.sources.get("ac", []):
        breakdown.append(ACComponent(source, value))
    if character.adjustments.ac:
        breakdown.append(ACComponent(MANUAL_LABEL, character.adjustments.ac))

    return sum(c.value for c in breakdown), breakdown


def derive_skills(character: CharacterState, traits: TraitAdjustments) -> dict[str, int]:
    """
    Compute skill targets for base and extra skills.

    An override replaces the stored target and ignores static trait
    adjustments; the manual adjustment is always added.
    """
    stored = dict(character.base.skills)
    for extra in character.base.extra_skills:
        stored[extra.skill_id] = extra.target

    skills = {}
    for skill_id, target in stored.items():
        path = f"skills.{skill_id}"
        manual = character.adjustments.skills.get(skill_id, 0)
        override = traits.get_override(path)
        if override is not None:
            skills[skill_id] = override + manual
        else:
            skills[skill_id] = target + manual + traits.get(path)
    return skills


def derive_speed(
    character: CharacterState,
    traits: TraitAdjustments,
    encumbrance: EncumbranceState,
    rules: RulesConfig,
) -> int:
    """Base speed (from encumbrance when configured) plus manual and trait adjustments."""
    base_speed = encumbrance.speed if rules.encumbrance_sets_speed else character.base.speed
    return base_speed + character.adjustments.speed + traits.get("speed")


# =============================================================================
# ENGINE
# =============================================================================


def derive_attributes(
    character: CharacterState,
    config: Optional[RulesConfig] = None,
    encumbrance: Optional[EncumbranceState] = None,
) -> DerivedAttributes:
    """
    Derive a character's final attributes.

    Args:
        character: The character to derive
        config: Rules configuration; defaults to get_default_rules()
        encumbrance: Precomputed encumbrance; computed from config when None

    Returns:
        DerivedAttributes for the character's current state
    """
    rules = config or get_default_rules()
    traits = compute_trait_adjustments(character)
    if encumbrance is None:
        encumbrance = compute_encumbrance(character, config=rules.encumbrance)

    base = character.base
    manual = character.adjustments

    abilities = derive_abilities(character, traits)
    dex_mod = abilities["dexterity"].mod
    ac, ac_breakdown = derive_armor_class(character, dex_mod, traits)

    saves = {
        name: target + manual.saves.get(name, 0) + traits.get(f"saves.{name}")
        for name, target in base.saves.items()
    }

    speed = derive_speed(character, traits, encumbrance, rules)

    derived = DerivedAttributes(
        abilities=abilities,
        hp_max=base.hp_max + manual.hp_max + traits.get("hp.max"),
        ac=ac,
        ac_breakdown=ac_breakdown,
        attack=(
            base.attack
            + manual.attack
            + traits.get("attack")
            + character.get_exhaustion_penalty()
        ),
        attack_melee=traits.get("attack.melee"),
        attack_missile=traits.get("attack.missile"),
        saves=saves,
        magic_resistance=base.magic_resistance + manual.magic_resistance + traits.get("magic_resistance"),
        skills=derive_skills(character, traits),
        speed=speed,
        movement=compute_movement(speed, manual.movement_exploring, manual.movement_overland),
    )
    logger.debug(f"Derived attributes for {character.character_id}: AC {derived.ac}, speed {derived.speed}")
    return derived


# =============================================================================
# ROLL-TIME HELPERS
# =============================================================================


def apply_ability_roll_bonus(derived: DerivedAttributes, ability: str, bonus: int) -> tuple[int, int]:
    """
    Boost an ability for a single roll.

    The boosted score is capped at 18 and the modifier is recomputed from it.

    Returns:
        Tuple of (score, mod)
    """
    score = min(MAX_ABILITY_SCORE, derived.get_ability(ability).score + bonus)
    return score, compute_ability_modifier(score)


def attack_roll_modifiers(derived: DerivedAttributes, kind: str) -> AttackRollModifiers:
    """
    Get the bonus components for a melee or missile attack roll.

    Melee attacks use Strength and the melee trait bonus; missile attacks use
    Dexterity and the missile trait bonus. Unknown kinds are treated as melee.
    """
    if kind == "missile":
        return AttackRollModifiers(
            attack=derived.attack,
            ability=derived.get_ability("dexterity").mod,
            trait_bonus=derived.attack_missile,
        )
    if kind != "melee":
        logger.debug(f"Unknown attack kind {kind!r}, using melee")
    return AttackRollModifiers(
        attack=derived.attack,
        ability=derived.get_ability("strength").mod,
        trait_bonus=derived.attack_melee,
    )
