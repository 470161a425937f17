"""
Trait definitions for Dolmenwood kindreds and classes.

A trait is a named rule attached to a build item (a kindred, a class, or a
kindred played as a class). Traits are plain data: per-level values are
expressed with the LevelValue strategies below rather than callables, so a
definition can be serialised with to_dict() and rebuilt with from_dict().

Trait types:
- active: usable abilities, optionally with limited uses or a roll
- passive / info: descriptive traits
- adjustment: modifies a statistic (see AdjustmentType)
- natural_weapon: attack whose damage scales with level
- alignment_restriction / size_restriction: build restrictions

Adjustment types:
- static: always applied to the passive snapshot
- skill_override: replaces a skill's base target (lowest value wins)
- roll_option: opt-in bonus offered when a matching roll is made
- info: reminder only, never applied
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class TraitType(str, Enum):
    """Kinds of trait."""
    ACTIVE = "active"
    PASSIVE = "passive"
    INFO = "info"
    RESTRICTIONS = "restrictions"
    ADJUSTMENT = "adjustment"
    NATURAL_WEAPON = "natural_weapon"
    ALIGNMENT_RESTRICTION = "alignment_restriction"
    SIZE_RESTRICTION = "size_restriction"


class AdjustmentType(str, Enum):
    """How an adjustment trait feeds into derived statistics."""
    STATIC = "static"
    ROLL_OPTION = "roll_option"
    SKILL_OVERRIDE = "skill_override"
    INFO = "info"


class TraitCategory(str, Enum):
    """Display categories a build item organises its traits into."""
    ACTIVE = "active"
    PASSIVE = "passive"
    INFO = "info"
    RESTRICTIONS = "restrictions"


TRAIT_CATEGORY_ORDER = (
    TraitCategory.ACTIVE,
    TraitCategory.PASSIVE,
    TraitCategory.INFO,
    TraitCategory.RESTRICTIONS,
)


# =============================================================================
# LEVEL VALUES
# =============================================================================


class LevelValue:
    """Strategy for a value that may depend on character level."""

    def resolve(self, level: int) -> Any:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    @staticmethod
    def from_dict(data: Any) -> "LevelValue":
        """Rebuild a LevelValue. Bare scalars become FixedValue."""
        if isinstance(data, LevelValue):
            return data
        if not isinstance(data, dict):
            return FixedValue(data)
        kind = data.get("kind")
        if kind == "fixed":
            return FixedValue(data.get("value"))
        if kind == "table":
            entries = tuple((int(lvl), value) for lvl, value in data.get("entries", []))
            return LevelTable(entries)
        raise ValueError(f"Unknown level value kind: {kind!r}")


@dataclass(frozen=True)
class FixedValue(LevelValue):
    """The same value at every level."""
    value: Any

    def resolve(self, level: int) -> Any:
        return self.value

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "fixed", "value": self.value}


@dataclass(frozen=True)
class LevelTable(LevelValue):
    """
    Values keyed by minimum level.

    The entry with the highest min level not above the character's level
    applies. Below the first entry, the first entry's value is used.
    """
    entries: tuple[tuple[int, Any], ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("LevelTable requires at least one entry")
        object.__setattr__(self, "entries", tuple(sorted(self.entries, key=lambda e: e[0])))

    def resolve(self, level: int) -> Any:
        result = self.entries[0][1]
        for min_level, value in self.entries:
            if level >= min_level:
                result = value
        return result

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "table", "entries": [[lvl, value] for lvl, value in self.entries]}


LevelValueLike = Union[LevelValue, int, str]


def resolve_level_value(value: Optional[LevelValueLike], level: int) -> Any:
    """Resolve a LevelValue or plain scalar at a level."""
    if value is None:
        return None
    if isinstance(value, LevelValue):
        return value.resolve(level)
    return value


# =============================================================================
# TRAITS
# =============================================================================


@dataclass(frozen=True)
class TraitDefinition:
    """
    A single trait on a build item.

    Identity is `trait_id`: the same id on the kindred and class items is the
    same trait and is applied once.
    """
    trait_id: str
    name: str
    trait_type: TraitType = TraitType.INFO
    description: str = ""

    # Adjustment traits
    adjustment_type: Optional[AdjustmentType] = None
    adjustment_target: Optional[str] = None          # Path, e.g. "ac", "saves.doom"
    adjustment_targets: tuple[str, ...] = ()         # Paths for skill overrides
    adjustment_value: Optional[LevelValueLike] = None
    adjustment_condition: Optional[str] = None       # Player-facing "when" text

    # Gates
    min_level: int = 0
    requires_no_heavy_armor: bool = False
    parent_trait: Optional[str] = None               # Selection field gating this trait

    # Selection parents (e.g. combat talents)
    requires_selection: Optional[str] = None
    selection_type: str = "single"                   # "single" or "multi"
    unlock_levels: tuple[int, ...] = ()

    # Active traits
    max_uses: Optional[LevelValueLike] = None
    usage_frequency: Optional[str] = None
    rollable: bool = False
    roll_formula: Optional[LevelValueLike] = None
    roll_target: Optional[int] = None

    # Natural weapons: (min_level, damage dice) entries
    damage_progression: tuple[tuple[int, str], ...] = ()

    # Restrictions
    allowed_alignments: tuple[str, ...] = ()
    size_restriction: Optional[str] = None

    # Display
    value: Optional[LevelValueLike] = None
    hide_from_trait_tab: bool = False

    @property
    def is_adjustment(self) -> bool:
        return self.trait_type == TraitType.ADJUSTMENT

    def is_locked(self, level: int) -> bool:
        """Whether the level gate is not yet met."""
        return bool(self.min_level) and level < self.min_level

    def get_adjustment_value(self, level: int) -> int:
        value = resolve_level_value(self.adjustment_value, level)
        return int(value) if value is not None else 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        data: dict[str, Any] = {
            "id": self.trait_id,
            "name": self.name,
            "trait_type": self.trait_type.value,
        }
        if self.description:
            data["description"] = self.description
        if self.adjustment_type is not None:
            data["adjustment_type"] = self.adjustment_type.value
        if self.adjustment_target:
            data["adjustment_target"] = self.adjustment_target
        if self.adjustment_targets:
            data["adjustment_targets"] = list(self.adjustment_targets)
        for key in ("adjustment_value", "max_uses", "roll_formula", "value"):
            raw = getattr(self, key)
            if raw is not None:
                data[key] = raw.to_dict() if isinstance(raw, LevelValue) else raw
        for key in (
            "adjustment_condition",
            "parent_trait",
            "requires_selection",
            "usage_frequency",
            "roll_target",
            "size_restriction",
        ):
            raw = getattr(self, key)
            if raw is not None:
                data[key] = raw
        if self.min_level:
            data["min_level"] = self.min_level
        if self.requires_no_heavy_armor:
            data["requires_no_heavy_armor"] = True
        if self.requires_selection:
            data["selection_type"] = self.selection_type
        if self.unlock_levels:
            data["unlock_levels"] = list(self.unlock_levels)
        if self.rollable:
            data["rollable"] = True
        if self.damage_progression:
            data["damage_progression"] = [[lvl, dmg] for lvl, dmg in self.damage_progression]
        if self.allowed_alignments:
            data["allowed_alignments"] = list(self.allowed_alignments)
        if self.hide_from_trait_tab:
            data["hide_from_trait_tab"] = True
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TraitDefinition":
        """Create from dictionary. Raises ValueError on unknown enum values."""
        adjustment_type = data.get("adjustment_type")

        def level_value(key: str) -> Optional[LevelValue]:
            raw = data.get(key)
            return LevelValue.from_dict(raw) if raw is not None else None

        return cls(
            trait_id=data["id"],
            name=data.get("name", data["id"]),
            trait_type=TraitType(data.get("trait_type", "info")),
            description=data.get("description", ""),
            adjustment_type=AdjustmentType(adjustment_type) if adjustment_type else None,
            adjustment_target=data.get("adjustment_target"),
            adjustment_targets=tuple(data.get("adjustment_targets", ())),
            adjustment_value=level_value("adjustment_value"),
            adjustment_condition=data.get("adjustment_condition"),
            min_level=int(data.get("min_level", 0) or 0),
            requires_no_heavy_armor=bool(data.get("requires_no_heavy_armor", False)),
            parent_trait=data.get("parent_trait"),
            requires_selection=data.get("requires_selection"),
            selection_type=data.get("selection_type", "single"),
            unlock_levels=tuple(data.get("unlock_levels", ())),
            max_uses=level_value("max_uses"),
            usage_frequency=data.get("usage_frequency"),
            rollable=bool(data.get("rollable", False)),
            roll_formula=level_value("roll_formula"),
            roll_target=data.get("roll_target"),
            damage_progression=tuple(
                (int(lvl), dmg) for lvl, dmg in data.get("damage_progression", ())
            ),
            allowed_alignments=tuple(data.get("allowed_alignments", ())),
            size_restriction=data.get("size_restriction"),
            value=level_value("value"),
            hide_from_trait_tab=bool(data.get("hide_from_trait_tab", False)),
        )


@dataclass(frozen=True)
class TraitCollection:
    """A build item's traits, organised by display category."""
    active: tuple[TraitDefinition, ...] = ()
    passive: tuple[TraitDefinition, ...] = ()
    info: tuple[TraitDefinition, ...] = ()
    restrictions: tuple[TraitDefinition, ...] = ()

    def get_category(self, category: TraitCategory) -> tuple[TraitDefinition, ...]:
        return getattr(self, category.value)

    def flatten(self) -> list[TraitDefinition]:
        """All traits in category order (active, passive, info, restrictions)."""
        result: list[TraitDefinition] = []
        for category in TRAIT_CATEGORY_ORDER:
            result.extend(self.get_category(category))
        return result

    def categorized(self) -> list[tuple[TraitCategory, TraitDefinition]]:
        return [
            (category, trait)
            for category in TRAIT_CATEGORY_ORDER
            for trait in self.get_category(category)
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            category.value: [trait.to_dict() for trait in self.get_category(category)]
            for category in TRAIT_CATEGORY_ORDER
            if self.get_category(category)
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TraitCollection":
        return cls(**{
            category.value: tuple(
                TraitDefinition.from_dict(entry) for entry in data.get(category.value, ())
            )
            for category in TRAIT_CATEGORY_ORDER
        })


class BuildItemKind(str, Enum):
    """Which build slot an item fills."""
    KINDRED = "kindred"
    CLASS = "class"
    KINDRED_CLASS = "kindred_class"


@dataclass(frozen=True)
class BuildItem:
    """
    A build-defining item attached to a character.

    `required_kindred` is set on kindred-class items: a kindred played as a
    class, whose trait set replaces both the kindred and class traits.
    """
    item_id: str
    name: str
    kind: BuildItemKind
    traits: TraitCollection = field(default_factory=TraitCollection)
    required_kindred: Optional[str] = None

    @property
    def is_kindred_class(self) -> bool:
        return self.kind == BuildItemKind.KINDRED_CLASS
