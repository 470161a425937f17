"""
Active trait resolution for Dolmenwood characters.

Determines which traits are in force for a character from its two build
items, and prepares trait data for display. Level gating is deliberately not
applied by get_active_traits(): each consumer (display, adjustment math, roll
options) applies the gate itself.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from src.data_models import ArmorBulk, CharacterState, Item, ItemSize, ItemType
from src.traits.trait_data import (
    AdjustmentType,
    BuildItem,
    TraitCategory,
    TraitDefinition,
    TraitType,
    resolve_level_value,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ACTIVE TRAITS
# =============================================================================


def get_build_items(character: CharacterState) -> list[BuildItem]:
    """Build items in precedence order: kindred first, then class."""
    return [item for item in (character.kindred_item, character.class_item) if item]


def is_kindred_class(character: CharacterState) -> bool:
    """Check if the character plays a kindred as its class."""
    return bool(character.class_item and character.class_item.is_kindred_class)


def is_trait_selected(character: CharacterState, trait: TraitDefinition) -> bool:
    """
    Check the selection gate of a child trait.

    The character's selection field named by `parent_trait` may be a list
    (multi-select) or a single id. Anything else means nothing is selected.
    """
    if not trait.parent_trait:
        return True
    selections = character.trait_selections.get(trait.parent_trait)
    if isinstance(selections, (list, tuple, set)):
        return trait.trait_id in selections
    if isinstance(selections, str):
        return selections == trait.trait_id
    return False


def get_active_traits(character: CharacterState) -> list[TraitDefinition]:
    """
    Get all traits currently in force for a character.

    Kindred traits come before class traits, and a trait id already seen is
    dropped, so a trait present on both items applies once with the kindred
    version winning. Unselected child traits are dropped.

    Args:
        character: The character to resolve

    Returns:
        Ordered list of trait definitions
    """
    traits: list[TraitDefinition] = []
    seen_ids: set[str] = set()

    for build_item in get_build_items(character):
        for trait in build_item.traits.flatten():
            if trait.trait_id in seen_ids:
                logger.debug(
                    f"Skipping duplicate trait '{trait.trait_id}' on {build_item.item_id}"
                )
                continue
            if not is_trait_selected(character, trait):
                continue
            traits.append(trait)
            seen_ids.add(trait.trait_id)

    return traits


def is_wearing_heavy_armor(character: CharacterState) -> bool:
    """Check if any equipped body armour is medium or heavy bulk. Shields never count."""
    return any(
        item.is_body_armor and ArmorBulk.parse(item.bulk).rank >= ArmorBulk.MEDIUM.rank
        for item in character.get_equipped_items()
    )


# =============================================================================
# RESTRICTIONS
# =============================================================================


def get_alignment_restrictions(character: CharacterState) -> Optional[list[str]]:
    """
    Get the alignments a character's traits allow.

    Returns:
        Intersection of all alignment restrictions, or None if unrestricted
    """
    allowed: Optional[list[str]] = None
    for trait in get_active_traits(character):
        if trait.trait_type != TraitType.ALIGNMENT_RESTRICTION or not trait.allowed_alignments:
            continue
        if allowed is None:
            allowed = list(trait.allowed_alignments)
        else:
            allowed = [a for a in allowed if a in trait.allowed_alignments]
    return allowed


def get_size_restriction(character: CharacterState) -> Optional[ItemSize]:
    """Get the size a character's traits restrict it to, if any."""
    for trait in get_active_traits(character):
        if trait.trait_type == TraitType.SIZE_RESTRICTION and trait.size_restriction:
            try:
                return ItemSize(trait.size_restriction)
            except ValueError:
                logger.warning(
                    f"Unknown size restriction '{trait.size_restriction}' on {trait.trait_id}"
                )
    return None


def is_item_size_compatible(character: CharacterState, item: Item) -> bool:
    """
    Check whether a weapon or armour fits the character.

    Small characters cannot use large weapons or armour fitted for large
    folk. Everyone else cannot wear armour fitted for small folk.
    """
    if item.item_type not in (ItemType.WEAPON, ItemType.ARMOR):
        return True
    size = get_size_restriction(character)
    if size == ItemSize.SMALL:
        return item.size != ItemSize.LARGE
    if item.is_armor and item.size == ItemSize.SMALL:
        return False
    return True


# =============================================================================
# DISPLAY PREPARATION
# =============================================================================


@dataclass
class PreparedTrait:
    """A trait with its level-dependent values resolved for display."""
    trait_id: str
    name: str
    description: str
    category: TraitCategory
    trait_type: TraitType
    value: Any = None
    rollable: bool = False
    roll_formula: Optional[str] = None
    roll_target: Optional[int] = None
    is_natural_weapon: bool = False

    # Level gate
    locked: bool = False
    min_level: Optional[int] = None

    # Usage tracking
    has_usage_tracking: bool = False
    max_uses: int = 0
    used: int = 0
    remaining: int = 0
    usage_frequency: Optional[str] = None

    # Adjustment display
    is_info_reminder: bool = False
    is_roll_option: bool = False
    adjustment_condition: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.trait_id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "trait_type": self.trait_type.value,
            "value": self.value,
            "rollable": self.rollable,
            "roll_formula": self.roll_formula,
            "roll_target": self.roll_target,
            "is_natural_weapon": self.is_natural_weapon,
            "locked": self.locked,
            "min_level": self.min_level,
            "has_usage_tracking": self.has_usage_tracking,
            "max_uses": self.max_uses,
            "used": self.used,
            "remaining": self.remaining,
            "usage_frequency": self.usage_frequency,
            "is_info_reminder": self.is_info_reminder,
            "is_roll_option": self.is_roll_option,
            "adjustment_condition": self.adjustment_condition,
        }


def resolve_damage_progression(
    progression: tuple[tuple[int, str], ...], level: int
) -> Optional[str]:
    """Damage dice of the highest entry whose min level is not above `level`."""
    result = None
    for min_level, damage in sorted(progression, key=lambda entry: entry[0]):
        if level >= min_level:
            result = damage
    return result


def prepare_trait(
    character: CharacterState,
    trait: TraitDefinition,
    category: TraitCategory,
) -> PreparedTrait:
    """Resolve a single trait's display values at the character's level."""
    level = character.level
    prepared = PreparedTrait(
        trait_id=trait.trait_id,
        name=trait.name,
        description=trait.description,
        category=category,
        trait_type=trait.trait_type,
        value=resolve_level_value(trait.value, level),
        rollable=trait.rollable,
        roll_formula=resolve_level_value(trait.roll_formula, level),
        roll_target=trait.roll_target,
    )

    if trait.trait_type == TraitType.NATURAL_WEAPON:
        prepared.is_natural_weapon = True
        damage = resolve_damage_progression(trait.damage_progression, level)
        if damage:
            prepared.roll_formula = damage
            prepared.value = damage

    if trait.is_locked(level):
        prepared.locked = True
        prepared.min_level = trait.min_level

    if trait.trait_type == TraitType.ACTIVE and trait.max_uses is not None:
        max_uses = int(resolve_level_value(trait.max_uses, level) or 0)
        usage = character.trait_usage.get(trait.trait_id)
        used = usage.used if usage else 0
        prepared.has_usage_tracking = True
        prepared.max_uses = max_uses
        prepared.used = used
        prepared.remaining = max_uses - used
        prepared.usage_frequency = trait.usage_frequency

    if trait.is_adjustment:
        if trait.adjustment_type == AdjustmentType.INFO:
            prepared.is_info_reminder = True
            prepared.adjustment_condition = trait.adjustment_condition
        elif trait.adjustment_type == AdjustmentType.ROLL_OPTION:
            prepared.is_roll_option = True
            prepared.adjustment_condition = trait.adjustment_condition

    return prepared


def prepare_traits(
    character: CharacterState, build_item: Optional[BuildItem]
) -> list[PreparedTrait]:
    """
    Prepare a build item's traits for display.

    Hidden traits and selection parents (rendered through
    build_selection_sections) are omitted. Traits whose level gate is not
    met are kept and flagged `locked`.

    Args:
        character: The character the traits belong to
        build_item: Kindred, class or kindred-class item

    Returns:
        Prepared traits in category order
    """
    if build_item is None:
        return []

    prepared = []
    for category, trait in build_item.traits.categorized():
        if trait.hide_from_trait_tab or trait.requires_selection:
            continue
        prepared.append(prepare_trait(character, trait, category))
    return prepared


# =============================================================================
# SELECTION SECTIONS
# =============================================================================


@dataclass
class SelectionSection:
    """Selectable child traits of a selection parent (e.g. combat talents)."""
    name: str
    field_name: str
    is_multi: bool
    choices: dict[str, str] = field(default_factory=dict)   # Trait id -> name
    selected: list[str] = field(default_factory=list)
    unlock_levels: tuple[int, ...] = ()
    unlocked_count: int = 0

    @property
    def can_select_more(self) -> bool:
        return self.is_multi and len(self.selected) < self.unlocked_count


def build_selection_sections(character: CharacterState) -> list[SelectionSection]:
    """
    Build selection sections from the class item's selection parents.

    Single-select parents are omitted until their first unlock level.
    """
    class_item = character.class_item
    if class_item is None:
        return []

    level = character.level
    all_traits = class_item.traits.flatten()
    sections = []

    for parent in all_traits:
        if not parent.requires_selection:
            continue

        field_name = parent.requires_selection
        is_multi = parent.selection_type == "multi"
        unlock_levels = parent.unlock_levels

        if not is_multi and unlock_levels and level < unlock_levels[0]:
            continue
        if parent.is_locked(level):
            continue

        children = [t for t in all_traits if t.parent_trait == field_name]
        raw = character.trait_selections.get(field_name)
        if isinstance(raw, str):
            selected = [raw] if raw else []
        else:
            selected = list(raw or [])

        sections.append(SelectionSection(
            name=parent.name,
            field_name=field_name,
            is_multi=is_multi,
            choices={child.trait_id: child.name for child in children},
            selected=selected,
            unlock_levels=unlock_levels,
            unlocked_count=sum(1 for lvl in unlock_levels if level >= lvl),
        ))

    return sections
