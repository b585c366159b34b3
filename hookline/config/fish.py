"""Fish tier configuration.

Each tier is a depth band with its own population, value and speed ranges.
Deeper tiers hold fewer, slower, more valuable fish.
"""

from dataclasses import dataclass
from typing import Tuple

# Vertical spread of each tier below its y_min
TIER_DEPTH_SPAN = 50.0


@dataclass(frozen=True)
class Tier:
    """Generation parameters for one depth band.

    Attributes:
        name: Tier label carried onto each generated fish
        count: Number of fish generated for this tier
        y_min: Top of the band; fish spawn in [y_min, y_min + y_span)
        value_min: Lowest value a fish in this tier can have
        value_span: Number of distinct integer values (value_max = value_min + value_span - 1)
        speed_min: Slowest speed in the tier
        speed_span: Width of the speed range
        y_span: Depth of the band
    """

    name: str
    count: int
    y_min: float
    value_min: int
    value_span: int
    speed_min: float
    speed_span: float
    y_span: float = TIER_DEPTH_SPAN

    @property
    def value_max(self) -> int:
        return self.value_min + self.value_span - 1

    @property
    def speed_max(self) -> float:
        return self.speed_min + self.speed_span

    @property
    def y_range(self) -> Tuple[float, float]:
        return (self.y_min, self.y_min + self.y_span)


SURFACE_TIER = Tier(
    name="surface", count=8, y_min=200.0, value_min=10, value_span=20, speed_min=0.2, speed_span=0.3
)
MID_TIER = Tier(
    name="mid", count=6, y_min=300.0, value_min=31, value_span=30, speed_min=0.15, speed_span=0.25
)
DEEP_TIER = Tier(
    name="deep", count=4, y_min=450.0, value_min=61, value_span=40, speed_min=0.1, speed_span=0.2
)

DEFAULT_TIERS: Tuple[Tier, ...] = (SURFACE_TIER, MID_TIER, DEEP_TIER)

# 8 + 6 + 4
DEFAULT_FISH_COUNT = sum(tier.count for tier in DEFAULT_TIERS)
