"""
Kindred manager for Dolmenwood.

Central registry for all kindred definitions. Provides access to kindred
data and the build items characters attach.
"""

import logging
from typing import Optional

from src.kindred.kindred_data import KindredDefinition, KindredType
from src.traits.trait_data import BuildItem

logger = logging.getLogger(__name__)

# Kindreds whose creature type differs from mortal
_CREATURE_TYPES = {
    "elf": KindredType.FAIRY,
    "grimalkin": KindredType.FAIRY,
    "woodgrue": KindredType.DEMI_FEY,
}


class KindredManager:
    """
    Central registry and manager for all kindred definitions.

    Provides access to kindred data by ID and handles loading
    of kindred definitions from their respective modules.
    """

    _instance: Optional["KindredManager"] = None
    _kindreds: dict[str, KindredDefinition] = {}
    _initialized: bool = False

    def __new__(cls) -> "KindredManager":
        """Singleton pattern to ensure one global registry."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the manager (only runs once due to singleton)."""
        if not KindredManager._initialized:
            self._load_all_kindreds()
            KindredManager._initialized = True

    def _load_all_kindreds(self) -> None:
        """Load all kindred definitions from their modules."""
        from src.kindred.breggle import BREGGLE_DEFINITION
        from src.kindred.elf import ELF_DEFINITION
        from src.kindred.grimalkin import GRIMALKIN_DEFINITION
        from src.kindred.human import HUMAN_DEFINITION
        from src.kindred.mossling import MOSSLING_DEFINITION
        from src.kindred.woodgrue import WOODGRUE_DEFINITION

        for definition in (
            BREGGLE_DEFINITION,
            ELF_DEFINITION,
            GRIMALKIN_DEFINITION,
            HUMAN_DEFINITION,
            MOSSLING_DEFINITION,
            WOODGRUE_DEFINITION,
        ):
            self.register(definition)
            logger.info(f"Loaded kindred: {definition.name}")

    def register(self, kindred: KindredDefinition) -> None:
        """
        Register a kindred definition.

        Args:
            kindred: The kindred definition to register
        """
        KindredManager._kindreds[kindred.kindred_id.lower()] = kindred

    def get(self, kindred_id: str) -> Optional[KindredDefinition]:
        """
        Get a kindred definition by ID.

        Args:
            kindred_id: The kindred identifier (e.g., "breggle", "human")

        Returns:
            KindredDefinition or None if not found
        """
        return KindredManager._kindreds.get(kindred_id.lower())

    def get_all(self) -> list[KindredDefinition]:
        """Get all registered kindred definitions."""
        return list(KindredManager._kindreds.values())

    def get_all_ids(self) -> list[str]:
        """Get all registered kindred IDs."""
        return list(KindredManager._kindreds.keys())

    def is_valid_kindred(self, kindred_id: str) -> bool:
        """Check if a kindred ID is valid/registered."""
        return kindred_id.lower() in KindredManager._kindreds

    def get_kindred_class_ids(self) -> list[str]:
        """Get the IDs of kindreds that can be played as a class."""
        return [k.kindred_id for k in KindredManager._kindreds.values() if k.has_kindred_class]

    def build_item(self, kindred_id: str) -> Optional[BuildItem]:
        """Build the kindred item for a kindred ID, or None if unknown."""
        kindred = self.get(kindred_id)
        if kindred is None:
            logger.warning(f"Unknown kindred: {kindred_id}")
            return None
        return kindred.build_item()

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None
        cls._kindreds = {}
        cls._initialized = False


def creature_type_for_kindred(kindred_id: str) -> KindredType:
    """Creature type of a kindred: fairy, demi-fey or mortal."""
    return _CREATURE_TYPES.get((kindred_id or "").lower(), KindredType.MORTAL)


# Global instance for convenience
def get_kindred_manager() -> KindredManager:
    """Get the global KindredManager instance."""
    return KindredManager()
