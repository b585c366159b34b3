"""Entity factory for creating the fish population.

This module is the single source of truth for the starting population of a
game: one batch per start, drawn tier by tier from the engine RNG.
"""

import logging
import random
from typing import Iterable, List, Optional

from hookline.config.fish import DEFAULT_TIERS, Tier
from hookline.config.playfield import FISH_MAX_X, FISH_MIN_X
from hookline.entities import Fish
from hookline.util.rng import require_rng_param

logger = logging.getLogger(__name__)


def create_tier_fish(
    tier: Tier,
    rng: random.Random,
    *,
    first_id: int = 0,
    min_x: float = FISH_MIN_X,
    max_x: float = FISH_MAX_X,
) -> List[Fish]:
    """Create ``tier.count`` fish for a single tier.

    Args:
        tier: Tier parameters (count, depth band, value and speed ranges)
        rng: Random source
        first_id: Identifier given to the first fish; the rest count up from it
        min_x: Left edge of the fish lane
        max_x: Right edge of the fish lane

    Returns:
        Freshly generated fish in creation order
    """
    y_low, y_high = tier.y_range
    fish = []
    for offset in range(tier.count):
        fish.append(
            Fish(
                fish_id=first_id + offset,
                x=rng.uniform(min_x, max_x),
                y=rng.uniform(y_low, y_high),
                value=rng.randint(tier.value_min, tier.value_max),
                direction=rng.choice((-1, 1)),
                speed=rng.uniform(tier.speed_min, tier.speed_max),
                tier=tier.name,
            )
        )
    return fish


def generate_fish(
    rng: Optional[random.Random] = None,
    tiers: Iterable[Tier] = DEFAULT_TIERS,
    *,
    min_x: float = FISH_MIN_X,
    max_x: float = FISH_MAX_X,
) -> List[Fish]:
    """Generate the full population for a new game.

    With the default tiers this yields 18 fish: 8 surface, 6 mid and 4 deep,
    in that order. Identifiers are unique within the returned batch.

    Args:
        rng: Random source (required; pass the engine RNG)
        tiers: Tiers to generate, in order
        min_x: Left edge of the fish lane
        max_x: Right edge of the fish lane

    Returns:
        A new list; the caller owns replacing the live fish set with it
    """
    rng = require_rng_param(rng, "generate_fish")
    population: List[Fish] = []
    for tier in tiers:
        population.extend(
            create_tier_fish(tier, rng, first_id=len(population), min_x=min_x, max_x=max_x)
        )
    logger.debug("Generated %d fish", len(population))
    return population
