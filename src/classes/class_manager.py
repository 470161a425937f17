"""
Class manager for Dolmenwood character classes.

Provides a singleton registry for class definitions with lazy loading.
Follows the same pattern as KindredManager.

Also provides integration with CharacterState for writing class-specific
progression (attack bonus, saving throws, skill targets) when a character
changes level.
"""

import logging
from typing import Optional, TYPE_CHECKING

from src.classes.class_data import ClassDefinition, MagicType
from src.data_models import BASE_SKILL_NAMES, MAX_LEVEL, MIN_LEVEL, ExtraSkill
from src.traits.trait_data import BuildItem

if TYPE_CHECKING:
    from src.data_models import CharacterState

logger = logging.getLogger(__name__)


class ClassManager:
    """
    Singleton manager for character class definitions.

    Provides centralized access to all class and kindred-class definitions
    with lazy loading.
    """

    _instance: Optional["ClassManager"] = None
    _initialized: bool = False

    def __new__(cls) -> "ClassManager":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if ClassManager._initialized:
            return
        self._classes: dict[str, ClassDefinition] = {}
        self._load_classes()
        ClassManager._initialized = True

    def _load_classes(self) -> None:
        """Load all class definitions."""
        from src.classes.bard import BARD_DEFINITION
        from src.classes.cleric import CLERIC_DEFINITION
        from src.classes.enchanter import ENCHANTER_DEFINITION
        from src.classes.fighter import FIGHTER_DEFINITION
        from src.classes.friar import FRIAR_DEFINITION
        from src.classes.hunter import HUNTER_DEFINITION
        from src.classes.kindred_classes import get_kindred_class_definitions
        from src.classes.knight import KNIGHT_DEFINITION
        from src.classes.magician import MAGICIAN_DEFINITION
        from src.classes.thief import THIEF_DEFINITION

        for class_def in (
            FIGHTER_DEFINITION,
            THIEF_DEFINITION,
            MAGICIAN_DEFINITION,
            CLERIC_DEFINITION,
            FRIAR_DEFINITION,
            KNIGHT_DEFINITION,
            HUNTER_DEFINITION,
            BARD_DEFINITION,
            ENCHANTER_DEFINITION,
        ):
            self.register(class_def)
            logger.info(f"Loaded class: {class_def.name}")

        for class_def in get_kindred_class_definitions():
            self.register(class_def)
            logger.info(f"Loaded kindred-class: {class_def.name}")

        logger.info(f"Loaded {len(self._classes)} character classes")

    def register(self, class_def: ClassDefinition) -> None:
        """Register a class definition."""
        self._classes[class_def.class_id.lower()] = class_def

    def get(self, class_id: str) -> Optional[ClassDefinition]:
        """Get a class definition by ID."""
        return self._classes.get((class_id or "").lower())

    def get_all(self) -> list[ClassDefinition]:
        """Get all registered class definitions."""
        return list(self._classes.values())

    def get_all_ids(self) -> list[str]:
        """Get all registered class IDs."""
        return list(self._classes.keys())

    def get_spellcasting_classes(self) -> list[ClassDefinition]:
        """Get all classes that can cast spells."""
        return [c for c in self._classes.values() if c.magic_type != MagicType.NONE]

    def can_kindred_be_class(self, kindred_id: str, class_id: str) -> bool:
        """Check if a kindred can be a specific class."""
        class_def = self.get(class_id)
        if not class_def:
            return False
        return class_def.can_be_kindred(kindred_id)

    def get_spell_progressions(self) -> dict[str, list[list[int]]]:
        """Spell slot tables of every class that has one, keyed by class ID."""
        return {
            class_id: class_def.spell_progression
            for class_id, class_def in self._classes.items()
            if class_def.spell_progression
        }

    def get_prime_abilities(self) -> dict[str, list[str]]:
        """Prime abilities of every class, keyed by class ID."""
        return {
            class_id: list(class_def.prime_abilities)
            for class_id, class_def in self._classes.items()
        }

    def build_item(self, class_id: str) -> Optional[BuildItem]:
        """Build the class item for a class ID, or None if unknown."""
        class_def = self.get(class_id)
        if class_def is None:
            logger.warning(f"Unknown class: {class_id}")
            return None
        return class_def.build_item()

    # =========================================================================
    # CHARACTER STATE INTEGRATION
    # =========================================================================

    def apply_level_progression(self, character: "CharacterState", level: int) -> bool:
        """
        Write a class's progression for a level into a character.

        Sets the character's level, attack bonus and saving throws. Unless
        the player customises skills, base and class skill targets are
        written as well.

        Args:
            character: The CharacterState to update
            level: The new level

        Returns:
            True if progression data was written
        """
        if level < MIN_LEVEL or level > MAX_LEVEL:
            logger.debug(f"Ignoring level {level} outside {MIN_LEVEL}-{MAX_LEVEL}")
            return False

        class_def = self.get(character.character_class)
        if not class_def:
            logger.warning(f"Unknown class: {character.character_class}")
            return False

        progression = class_def.get_progression_at_level(level)
        if progression is None:
            logger.debug(f"No level progression for {class_def.class_id}")
            return False

        base = character.base
        base.level = level
        base.attack = progression.attack_bonus
        base.saves = progression.saving_throws.to_dict()

        if not character.customize_skills:
            extra_skills = {skill.skill_id: skill for skill in base.extra_skills}
            for skill_id, target in progression.skill_targets.items():
                if skill_id in BASE_SKILL_NAMES:
                    base.skills[skill_id] = target
                elif skill_id in extra_skills:
                    extra_skills[skill_id].target = target
                else:
                    skill = ExtraSkill(skill_id=skill_id, target=target)
                    base.extra_skills.append(skill)
                    extra_skills[skill_id] = skill

        return True

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None
        cls._initialized = False


def get_class_manager() -> ClassManager:
    """Get the global class manager instance."""
    return ClassManager()
