"""
Pytest fixtures for the Dolmenwood character engine test suite.

Provides reusable characters, inventory items and rules configurations.
"""

import pytest
from typing import Optional

from src.classes.class_manager import ClassManager, get_class_manager
from src.data_models import (
    AbilityScore,
    ArmorBulk,
    BaseAttributes,
    CharacterState,
    Item,
    ItemType,
)
from src.derivation.rules_config import RulesConfig
from src.kindred.kindred_manager import KindredManager, get_kindred_manager


# =============================================================================
# REGISTRY FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def reset_registries():
    """Give every test fresh class and kindred registries."""
    ClassManager.reset()
    KindredManager.reset()
    yield
    ClassManager.reset()
    KindredManager.reset()


@pytest.fixture
def rules():
    """Default rules configuration."""
    return RulesConfig()


# =============================================================================
# CHARACTER FIXTURES
# =============================================================================


def make_character(
    kindred: str = "human",
    character_class: str = "fighter",
    level: int = 1,
    abilities: Optional[dict[str, int]] = None,
    kindred_class: bool = False,
    **kwargs,
) -> CharacterState:
    """
    Build a character with its kindred and class items attached.

    With `kindred_class`, the kindred is played as its class and the class
    item carries the combined trait set.
    """
    base = kwargs.pop("base", None) or BaseAttributes(level=level)
    base.level = level
    for name, score in (abilities or {}).items():
        base.abilities[name] = AbilityScore(score)

    if kindred_class:
        character_class = kindred
        kindred_item = None
    else:
        kindred_item = get_kindred_manager().build_item(kindred)

    return CharacterState(
        character_id=kwargs.pop("character_id", f"{kindred}_{character_class}"),
        name=kwargs.pop("name", f"Test {kindred} {character_class}"),
        kindred=kindred,
        character_class=character_class,
        base=base,
        kindred_item=kindred_item,
        class_item=get_class_manager().build_item(character_class),
        **kwargs,
    )


@pytest.fixture
def character_factory():
    """Factory for characters with build items attached."""
    return make_character


@pytest.fixture
def sample_fighter():
    """A level 3 human fighter."""
    return make_character(
        "human",
        "fighter",
        level=3,
        abilities={
            "strength": 16,
            "intelligence": 10,
            "wisdom": 12,
            "dexterity": 14,
            "constitution": 15,
            "charisma": 11,
        },
        name="Aldric the Bold",
    )


@pytest.fixture
def breggle_character():
    """A level 1 breggle fighter with average abilities."""
    return make_character("breggle", "fighter", level=1, name="Hornsby")


@pytest.fixture
def elf_character():
    """A level 2 elf magician."""
    return make_character("elf", "magician", level=2, name="Ilvara")


@pytest.fixture
def friar_character():
    """A level 5 human friar."""
    return make_character("human", "friar", level=5, name="Brother Aldwin")


@pytest.fixture
def mossling_character():
    """A level 4 mossling played as a kindred-class."""
    return make_character("mossling", level=4, kindred_class=True, name="Pudge")


# =============================================================================
# ITEM FIXTURES
# =============================================================================


@pytest.fixture
def leather_armor():
    """Equipped light armour."""
    return Item(
        item_id="leather",
        name="Leather armour",
        item_type=ItemType.ARMOR,
        equipped=True,
        weight_coins=200,
        weight_slots=2,
        bulk=ArmorBulk.LIGHT,
        ac=12,
    )


@pytest.fixture
def chainmail():
    """Equipped medium armour."""
    return Item(
        item_id="chainmail",
        name="Chainmail",
        item_type=ItemType.ARMOR,
        equipped=True,
        weight_coins=400,
        weight_slots=3,
        bulk=ArmorBulk.MEDIUM,
        ac=14,
    )


@pytest.fixture
def plate_armor():
    """Equipped heavy armour."""
    return Item(
        item_id="plate",
        name="Plate armour",
        item_type=ItemType.ARMOR,
        equipped=True,
        weight_coins=500,
        weight_slots=4,
        bulk=ArmorBulk.HEAVY,
        ac=16,
    )


@pytest.fixture
def shield():
    """Equipped shield."""
    return Item(
        item_id="shield",
        name="Shield",
        item_type=ItemType.ARMOR,
        equipped=True,
        weight_coins=100,
        weight_slots=1,
        ac=1,
        is_shield=True,
    )
