"""
Prime ability XP modifier (p106).

A character's XP modifier is set by the lowest adjusted score among their
class's prime abilities.
"""

import logging
from typing import Mapping, Optional, Sequence

logger = logging.getLogger(__name__)


# =============================================================================
# PRIME ABILITY XP MODIFIER TABLE (p106)
# =============================================================================

# (max lowest prime score, XP modifier %); scores above the last row give +10%
PRIME_XP_MODIFIERS: tuple[tuple[int, int], ...] = (
    (5, -20),
    (8, -10),
    (12, 0),
    (15, 5),
)
HIGHEST_PRIME_XP_MODIFIER = 10


def get_prime_xp_modifier(lowest_prime_score: int) -> int:
    """Look up the XP modifier percentage for the lowest prime score."""
    for max_score, modifier in PRIME_XP_MODIFIERS:
        if lowest_prime_score <= max_score:
            return modifier
    return HIGHEST_PRIME_XP_MODIFIER


def compute_xp_modifier(
    adjusted_scores: Mapping[str, int],
    prime_abilities: Optional[Sequence[str]],
    manual_adjustment: int = 0,
) -> int:
    """
    Compute a character's XP modifier percentage.

    Args:
        adjusted_scores: Ability name -> adjusted score
        prime_abilities: The class's prime abilities
        manual_adjustment: Player-entered XP modifier adjustment

    Returns:
        Modifier percentage; classes without primes give only the manual term
    """
    scores = [adjusted_scores[a] for a in (prime_abilities or ()) if a in adjusted_scores]
    if not scores:
        logger.debug("No prime ability scores, XP modifier is the manual adjustment only")
        return manual_adjustment
    return get_prime_xp_modifier(min(scores)) + manual_adjustment
