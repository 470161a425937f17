"""
Core data structures for Dolmenwood character classes.

Defines ClassDefinition and its per-level progression for the 9 classes:
Bard, Cleric, Enchanter, Fighter, Friar, Hunter, Knight, Magician, Thief,
plus the kindreds that can be played as a class.

Source: Dolmenwood Player Book
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, TypeVar

from src.data_models import MAX_LEVEL, SAVE_NAMES
from src.traits.trait_data import BuildItem, BuildItemKind, TraitCollection

T = TypeVar("T")


class MagicType(str, Enum):
    """Magic traditions."""
    NONE = "none"
    ARCANE = "arcane"           # Magician, Enchanter (ranks 1-6)
    HOLY = "holy"               # Cleric, Friar (ranks 1-5)
    FAIRY = "fairy"             # Enchanter, elves, grimalkin (glamours)


ARCANE_RANKS = 6
HOLY_RANKS = 5


class HitDie(str, Enum):
    """Hit die types by class."""
    D4 = "d4"
    D6 = "d6"
    D8 = "d8"


@dataclass
class SavingThrows:
    """
    Character saving throw values.

    Uses the 5 Dolmenwood save categories (p152-153).
    Lower is better - must roll >= target on d20.
    """
    doom: int = 14      # Death, poison, doom effects
    ray: int = 15       # Wands, rays, gaze attacks
    hold: int = 16      # Paralysis, petrification, hold
    blast: int = 17     # Breath weapons, area effects
    spell: int = 18     # Spells and spell-like effects

    def to_dict(self) -> dict[str, int]:
        return {name: getattr(self, name) for name in SAVE_NAMES}


@dataclass
class LevelProgression:
    """
    Class progression at a specific level.

    Skill targets cover base skills (listen, search, survival) and class
    skills alike, keyed by skill id.
    """
    level: int
    attack_bonus: int
    saving_throws: SavingThrows
    skill_targets: dict[str, int] = field(default_factory=dict)


def expand_level_ranges(entries: Sequence[tuple[int, T]]) -> list[T]:
    """
    Expand (up_to_level, value) entries into a per-level list for 1..15.

    The result is indexed from 0 for level 1. Levels past the last entry
    repeat its value.
    """
    result: list[T] = []
    for level in range(1, MAX_LEVEL + 1):
        value = entries[-1][1]
        for up_to_level, entry_value in entries:
            if level <= up_to_level:
                value = entry_value
                break
        result.append(value)
    return result


def build_level_progression(
    attack_bonuses: Sequence[int],
    saves_by_range: Sequence[tuple[int, tuple[int, int, int, int, int]]],
    skill_names: Sequence[str] = (),
    skill_rows: Sequence[Sequence[int]] = (),
) -> list[LevelProgression]:
    """
    Build a 15-level progression.

    Args:
        attack_bonuses: Attack bonus for levels 1..15
        saves_by_range: (up_to_level, (doom, ray, hold, blast, spell)) entries
        skill_names: Skill ids, in the column order of skill_rows
        skill_rows: Per-level skill targets for levels 1..15

    Returns:
        LevelProgression for each level
    """
    save_rows = expand_level_ranges(saves_by_range)
    progression = []
    for index, attack in enumerate(attack_bonuses):
        skills = dict(zip(skill_names, skill_rows[index])) if skill_rows else {}
        progression.append(LevelProgression(
            level=index + 1,
            attack_bonus=attack,
            saving_throws=SavingThrows(*save_rows[index]),
            skill_targets=skills,
        ))
    return progression


@dataclass
class ClassDefinition:
    """
    Complete definition of a character class.

    A kindred-class (a kindred played as a class) sets `required_kindred`;
    its traits replace both the kindred's and a class's traits.
    """
    # Identification
    class_id: str                   # e.g., "fighter", "magician"
    name: str                       # Display name
    description: str                # Flavor text description

    # Core mechanics
    hit_die: HitDie
    prime_abilities: list[str] = field(default_factory=list)

    # Magic
    magic_type: MagicType = MagicType.NONE
    # Spell slots per rank, indexed by level (index 0 unused)
    spell_progression: list[list[int]] = field(default_factory=list)

    # Level progression (levels 1-15)
    level_progression: list[LevelProgression] = field(default_factory=list)

    # Traits attached to the class item
    traits: TraitCollection = field(default_factory=TraitCollection)

    # Kindred restrictions (which kindreds CANNOT be this class)
    restricted_kindreds: list[str] = field(default_factory=list)

    # Kindred-class only
    required_kindred: Optional[str] = None

    # Source reference
    source_book: str = "Dolmenwood Player Book"
    source_page: int = 0

    @property
    def is_kindred_class(self) -> bool:
        return self.required_kindred is not None

    def get_progression_at_level(self, level: int) -> Optional[LevelProgression]:
        """Get level progression data for a specific level."""
        for prog in self.level_progression:
            if prog.level == level:
                return prog
        return None

    def get_attack_bonus(self, level: int) -> int:
        """Get attack bonus at a specific level."""
        prog = self.get_progression_at_level(level)
        if prog:
            return prog.attack_bonus
        # Fallback: find highest level <= requested level
        applicable = [p for p in self.level_progression if p.level <= level]
        if applicable:
            return max(applicable, key=lambda p: p.level).attack_bonus
        return 0

    def get_saving_throws(self, level: int) -> SavingThrows:
        """Get saving throws at a specific level."""
        prog = self.get_progression_at_level(level)
        if prog:
            return prog.saving_throws
        applicable = [p for p in self.level_progression if p.level <= level]
        if applicable:
            return max(applicable, key=lambda p: p.level).saving_throws
        return SavingThrows()

    def get_skill_targets(self, level: int) -> dict[str, int]:
        """Get class skill targets at a specific level."""
        prog = self.get_progression_at_level(level)
        return dict(prog.skill_targets) if prog else {}

    def can_be_kindred(self, kindred_id: str) -> bool:
        """Check if a kindred can be this class."""
        if self.required_kindred:
            return kindred_id.lower() == self.required_kindred
        return kindred_id.lower() not in [k.lower() for k in self.restricted_kindreds]

    def build_item(self) -> BuildItem:
        """Create the class item a character attaches."""
        return BuildItem(
            item_id=self.class_id,
            name=self.name,
            kind=BuildItemKind.KINDRED_CLASS if self.is_kindred_class else BuildItemKind.CLASS,
            traits=self.traits,
            required_kindred=self.required_kindred,
        )
