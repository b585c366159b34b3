"""Fish entity.

Fish are immutable values: the kinematics step returns a new Fish rather
than mutating one, so a tick can be computed in full before it is committed.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Fish:
    """A swimming target.

    Attributes:
        fish_id: Stable identifier within one generated batch
        x: Horizontal position (kept within the fish lane bounds)
        y: Depth; never changes after generation
        value: Points awarded when caught; fixed at generation
        direction: +1 swimming right, -1 swimming left
        speed: Units moved per tick; fixed at generation
        tier: Name of the tier this fish was drawn from
    """

    fish_id: int
    x: float
    y: float
    value: int
    direction: int
    speed: float
    tier: str = ""

    def __post_init__(self) -> None:
        if self.direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or +1, got {self.direction!r}")

    def view(self) -> "FishView":
        """Return the render-facing subset of this fish."""
        return FishView(fish_id=self.fish_id, x=self.x, y=self.y, value=self.value, tier=self.tier)


@dataclass(frozen=True)
class FishView:
    """What the presentation layer sees of a fish."""

    fish_id: int
    x: float
    y: float
    value: int
    tier: str = ""

    def to_dict(self) -> dict:
        return {"id": self.fish_id, "x": self.x, "y": self.y, "value": self.value, "tier": self.tier}
