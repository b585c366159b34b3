"""Fish kinematics.

Fish swim horizontally at a constant speed and reverse when the next step
would leave their lane. Each fish is advanced independently; there is no
fish-fish interaction.
"""

from dataclasses import replace
from typing import Iterable, List

from hookline.config.playfield import FISH_MAX_X, FISH_MIN_X
from hookline.entities import Fish


def advance(
    fish: Fish,
    dt: float = 1.0,
    *,
    min_x: float = FISH_MIN_X,
    max_x: float = FISH_MAX_X,
) -> Fish:
    """Advance one fish by ``dt`` ticks.

    If the candidate position falls outside ``[min_x, max_x]`` the direction
    flips and the step is recomputed from the original position with the new
    sign, so a fish reverses at most once per call. The result is clamped to
    the lane so a fish can never be reported outside it.

    Args:
        fish: Fish to move
        dt: Elapsed ticks; negative values are treated as 0
        min_x: Left lane bound
        max_x: Right lane bound

    Returns:
        A new Fish with updated ``x`` and possibly flipped ``direction``
    """
    dt = max(0.0, dt)
    direction = fish.direction
    new_x = fish.x + direction * fish.speed * dt
    if new_x < min_x or new_x > max_x:
        direction = -direction
        new_x = fish.x + direction * fish.speed * dt
    new_x = min(max(new_x, min_x), max_x)
    return replace(fish, x=new_x, direction=direction)


def advance_all(
    fish: Iterable[Fish],
    dt: float = 1.0,
    *,
    min_x: float = FISH_MIN_X,
    max_x: float = FISH_MAX_X,
) -> List[Fish]:
    """Advance every fish, preserving order."""
    return [advance(f, dt, min_x=min_x, max_x=max_x) for f in fish]
