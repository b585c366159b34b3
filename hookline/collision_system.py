"""Collision detection between the hook and the fish.

Architecture Notes:
- CollisionDetector classes implement the Strategy pattern so the catch test
  can be swapped (tests use a larger radius to force catches).
- check_collisions() is the per-tick entry point used by the engine.

Selection policy: when several fish are within the radius on the same tick,
the first one in iteration order is the catch. The engine iterates fish in
generation order, so the result is deterministic for a given batch.
"""

import logging
import math
from typing import Iterable, Optional, Protocol

from hookline.config.playfield import COLLISION_RADIUS
from hookline.entities import Fish

logger = logging.getLogger(__name__)


class Point(Protocol):
    """Anything with a position."""

    x: float
    y: float


class CollisionDetector:
    """Base class for collision detection strategies."""

    def collides(self, hook: Point, fish: Fish) -> bool:
        """Check if the hook touches a fish.

        Args:
            hook: Hook position
            fish: Candidate fish

        Returns:
            True if the fish counts as caught
        """
        raise NotImplementedError("Subclasses must implement collides()")


class CircleCollisionDetector(CollisionDetector):
    """Distance-based detection: caught when strictly closer than the radius."""

    def __init__(self, radius: float = COLLISION_RADIUS) -> None:
        self.radius = radius

    def collides(self, hook: Point, fish: Fish) -> bool:
        distance = math.hypot(fish.x - hook.x, fish.y - hook.y)
        return distance < self.radius


# Default collision detector
default_collision_detector = CircleCollisionDetector()


def check_collisions(
    hook: Point,
    fish: Iterable[Fish],
    detector: Optional[CollisionDetector] = None,
) -> Optional[Fish]:
    """Return the first fish caught by the hook, or None.

    Args:
        hook: Hook position shared by every fish this tick
        fish: Fish to test, in a stable order
        detector: Detection strategy (defaults to a radius-15 circle test)

    Returns:
        At most one fish; later fish in the same pass are never reported
    """
    detector = detector or default_collision_detector
    for candidate in fish:
        if detector.collides(hook, candidate):
            logger.debug(
                "Hook at (%.1f, %.1f) caught fish %d worth %d",
                hook.x,
                hook.y,
                candidate.fish_id,
                candidate.value,
            )
            return candidate
    return None
