"""
Kindred-class definitions for Dolmenwood.

Breggles, elves, grimalkins, mosslings and woodgrues may be played as a
class. The class item then carries the kindred's combined trait set, which
replaces both the kindred's own traits and any class traits.

Source: Dolmenwood Player Book, pages 76-85
"""

from src.classes.class_data import ClassDefinition, HitDie, MagicType
from src.kindred.kindred_data import KindredDefinition

_HIT_DICE = {
    "breggle": HitDie.D8,
    "mossling": HitDie.D8,
}

_MAGIC_TYPES = {
    "elf": MagicType.FAIRY,
    "grimalkin": MagicType.FAIRY,
}


def build_kindred_class(kindred: KindredDefinition) -> ClassDefinition:
    """Create the ClassDefinition for a kindred played as a class."""
    if kindred.class_traits is None:
        raise ValueError(f"Kindred '{kindred.kindred_id}' cannot be played as a class")
    return ClassDefinition(
        class_id=kindred.kindred_id,
        name=kindred.name,
        description=kindred.description,
        hit_die=_HIT_DICE.get(kindred.kindred_id, HitDie.D6),
        prime_abilities=list(kindred.class_prime_abilities),
        magic_type=_MAGIC_TYPES.get(kindred.kindred_id, MagicType.NONE),
        traits=kindred.class_traits,
        required_kindred=kindred.kindred_id,
        source_page=kindred.source_page,
    )


def get_kindred_class_definitions() -> list[ClassDefinition]:
    """Build kindred-class definitions for every kindred that has one."""
    from src.kindred.kindred_manager import get_kindred_manager

    return [
        build_kindred_class(kindred)
        for kindred in get_kindred_manager().get_all()
        if kindred.has_kindred_class
    ]
