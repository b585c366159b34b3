"""Translate directional commands into player and hook movement.

Two control sources share this code and differ only in step size and
cadence: discrete sources (key presses) move once per event, continuous
sources (held touch buttons) move every tick while held.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from hookline.config.game_config import PlayfieldConfig
from hookline.exceptions import CommandError
from hookline.game_state import HookState


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Union[str, "Direction"]) -> "Direction":
        """Accept a Direction or its name in any case.

        Raises:
            CommandError: If the name is not a direction
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise CommandError(f"Unknown direction: {value!r}") from None


class ControlSource(Enum):
    """Where input comes from; the engine picks the step size from it."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


@dataclass(frozen=True)
class InputIntent:
    """The set of directions active for one application of movement."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @classmethod
    def from_directions(cls, directions: Iterable[Direction]) -> "InputIntent":
        active = set(directions)
        return cls(
            up=Direction.UP in active,
            down=Direction.DOWN in active,
            left=Direction.LEFT in active,
            right=Direction.RIGHT in active,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.up or self.down or self.left or self.right)


def apply_intent(
    hook: HookState,
    player_x: float,
    intent: InputIntent,
    step: float,
    bounds: PlayfieldConfig,
) -> Tuple[HookState, float]:
    """Apply one step of movement in every active direction.

    Horizontal moves shift the player and the hook together and are ignored
    once the player is at the edge. Vertical moves shift only the hook.
    Opposite directions in the same intent cancel out.

    Args:
        hook: Current hook position
        player_x: Current player anchor
        intent: Directions to apply
        step: Distance per direction
        bounds: Playfield bounds to clamp against

    Returns:
        (new hook, new player_x)
    """
    hook_x, hook_y = hook.x, hook.y

    if intent.left and player_x > bounds.player_min_x:
        player_x = max(bounds.player_min_x, player_x - step)
        hook_x = max(bounds.player_min_x, hook_x - step)
    if intent.right and player_x < bounds.player_max_x:
        player_x = min(bounds.player_max_x, player_x + step)
        hook_x = min(bounds.player_max_x, hook_x + step)
    if intent.up and hook_y > bounds.hook_min_y:
        hook_y = max(bounds.hook_min_y, hook_y - step)
    if intent.down and hook_y < bounds.hook_max_y:
        hook_y = min(bounds.hook_max_y, hook_y + step)

    return HookState(hook_x, hook_y), player_x
