"""Game lifecycle state and the read-only snapshot handed to presentation code."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from hookline.entities import FishView


class GamePhase(Enum):
    """Lifecycle of a game.

    IDLE -> RUNNING on start, RUNNING -> OVER on the first catch,
    OVER -> IDLE on restart.
    """

    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


@dataclass(frozen=True)
class HookState:
    """Position of the hook. ``x`` follows the player; ``y`` moves on its own."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of one committed tick.

    Attributes:
        phase: Lifecycle phase
        score: Current score (the final score once OVER)
        hook: Hook position
        player_x: Player anchor position
        fish: Render-facing fish, in generation order
        frame: Ticks run since the last start
        caught_fish_id: Identifier of the fish that ended the game, if any
    """

    phase: GamePhase
    score: int
    hook: HookState
    player_x: float
    fish: Tuple[FishView, ...] = field(default_factory=tuple)
    frame: int = 0
    caught_fish_id: Optional[int] = None

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.OVER

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form used for JSON payloads."""
        return {
            "state": self.phase.value,
            "score": self.score,
            "hook": {"x": self.hook.x, "y": self.hook.y},
            "player_x": self.player_x,
            "fish": [f.to_dict() for f in self.fish],
            "frame": self.frame,
            "caught_fish_id": self.caught_fish_id,
        }
