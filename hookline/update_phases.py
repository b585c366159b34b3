"""Update phase definitions for explicit tick ordering.

A tick runs these phases in declaration order:

1. INPUT: apply queued key presses, then held directions
2. KINEMATICS: advance every fish one step
3. COLLISION: test the hook against the advanced fish
4. FRAME_END: score the catch (if any) and commit

Usage:
    for phase in UpdatePhase:
        handlers[phase](work)
"""

from enum import Enum, auto
from typing import Dict

__all__ = ["UpdatePhase", "PHASE_DESCRIPTIONS"]


class UpdatePhase(Enum):
    """Phases of a game tick, executed in declaration order."""

    INPUT = auto()
    KINEMATICS = auto()
    COLLISION = auto()
    FRAME_END = auto()


# Human-readable descriptions for debugging
PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.INPUT: "Applying pending player input",
    UpdatePhase.KINEMATICS: "Advancing fish",
    UpdatePhase.COLLISION: "Checking the hook against fish",
    UpdatePhase.FRAME_END: "Scoring and committing the tick",
}
