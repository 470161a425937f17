"""
Kindred data structures for Dolmenwood.

Defines the core data class for kindred (race) definitions. A kindred
carries two trait sets: the traits any character of that kindred has, and
(for kindreds that can be played as a class) the combined kindred-class set
that replaces both kindred and class traits.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from src.traits.trait_data import BuildItem, BuildItemKind, TraitCollection


class KindredType(str, Enum):
    """Classification of kindred types (creature type)."""
    MORTAL = "mortal"
    DEMI_FEY = "demi-fey"
    FAIRY = "fairy"


@dataclass
class KindredDefinition:
    """
    Complete definition of a kindred (race).
    """
    # Identity
    kindred_id: str
    name: str
    description: str
    kindred_type: KindredType

    # Size category
    size: str = "medium"

    # Languages
    native_languages: list[str] = field(default_factory=list)

    # Traits every character of this kindred has
    traits: TraitCollection = field(default_factory=TraitCollection)

    # Kindred-class traits (None if this kindred cannot be played as a class)
    class_traits: Optional[TraitCollection] = None
    class_prime_abilities: list[str] = field(default_factory=list)

    # Source reference
    source_book: str = "Dolmenwood Player Book"
    source_page: int = 0

    @property
    def has_kindred_class(self) -> bool:
        return self.class_traits is not None

    def build_item(self) -> BuildItem:
        """Create the kindred item a character attaches."""
        return BuildItem(
            item_id=self.kindred_id,
            name=self.name,
            kind=BuildItemKind.KINDRED,
            traits=self.traits,
        )
