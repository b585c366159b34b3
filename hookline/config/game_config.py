"""Aggregate game configuration dataclasses."""

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from hookline.config.controls import CONTINUOUS_STEP, DISCRETE_STEP
from hookline.config.display import CANVAS_HEIGHT, CANVAS_WIDTH, FRAME_RATE
from hookline.config.fish import DEFAULT_TIERS, Tier
from hookline.config.playfield import (
    COLLISION_RADIUS,
    FISH_MAX_X,
    FISH_MIN_X,
    HOOK_MAX_Y,
    HOOK_MIN_Y,
    HOOK_START_Y,
    INITIAL_PLAYER_X,
    PLAYER_MAX_X,
    PLAYER_MIN_X,
)
from hookline.exceptions import ConfigurationError


@dataclass(frozen=True)
class PlayfieldConfig:
    """Bounds and radii of the playfield."""

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    player_min_x: float = PLAYER_MIN_X
    player_max_x: float = PLAYER_MAX_X
    hook_min_y: float = HOOK_MIN_Y
    hook_max_y: float = HOOK_MAX_Y
    fish_min_x: float = FISH_MIN_X
    fish_max_x: float = FISH_MAX_X
    collision_radius: float = COLLISION_RADIUS
    initial_player_x: float = INITIAL_PLAYER_X
    hook_start_y: float = HOOK_START_Y


@dataclass(frozen=True)
class ControlConfig:
    """Step sizes for the two control sources."""

    discrete_step: float = DISCRETE_STEP
    continuous_step: float = CONTINUOUS_STEP


@dataclass
class GameConfig:
    """Everything the engine needs to run a game.

    Attributes:
        playfield: Bounds and collision radius
        controls: Per-source input step sizes
        tiers: Fish tiers, generated in this order
        frame_rate: Ticks per second for the frame clock
        seed: Optional RNG seed for reproducible games
    """

    playfield: PlayfieldConfig = field(default_factory=PlayfieldConfig)
    controls: ControlConfig = field(default_factory=ControlConfig)
    tiers: Tuple[Tier, ...] = DEFAULT_TIERS
    frame_rate: int = FRAME_RATE
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "GameConfig":
        """Build a config, reading HOOKLINE_SEED and HOOKLINE_FRAME_RATE when set."""
        raw_seed = os.getenv("HOOKLINE_SEED")
        raw_rate = os.getenv("HOOKLINE_FRAME_RATE")
        try:
            seed = int(raw_seed) if raw_seed else None
            frame_rate = int(raw_rate) if raw_rate else FRAME_RATE
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric environment setting: {e}") from e
        config = cls(seed=seed, frame_rate=frame_rate)
        config.validate()
        return config

    def with_overrides(self, **overrides) -> "GameConfig":
        """Return a copy with the given top-level fields replaced."""
        config = replace(self, **overrides)
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigurationError if the configuration cannot produce a playable game."""
        pf = self.playfield
        if pf.player_min_x > pf.player_max_x:
            raise ConfigurationError("player_min_x must not exceed player_max_x")
        if pf.hook_min_y > pf.hook_max_y:
            raise ConfigurationError("hook_min_y must not exceed hook_max_y")
        if pf.fish_min_x >= pf.fish_max_x:
            raise ConfigurationError("fish_min_x must be below fish_max_x")
        if pf.collision_radius <= 0:
            raise ConfigurationError("collision_radius must be positive")
        if self.frame_rate <= 0:
            raise ConfigurationError("frame_rate must be positive")
        if self.controls.discrete_step <= 0 or self.controls.continuous_step <= 0:
            raise ConfigurationError("control steps must be positive")
        for tier in self.tiers:
            if tier.count < 0:
                raise ConfigurationError(f"tier {tier.name!r} has a negative count")
            if tier.value_span <= 0 or tier.speed_span < 0 or tier.y_span < 0:
                raise ConfigurationError(f"tier {tier.name!r} has an empty range")
