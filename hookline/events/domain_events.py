"""Domain event definitions for the game lifecycle.

Events are frozen dataclasses emitted after the tick or command that caused
them has been committed, so handlers always observe consistent state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameStartedEvent:
    """A new game began.

    Attributes:
        fish_count: Size of the freshly generated population
        player_x: Player anchor at start (the hook drops from here)
    """

    fish_count: int
    player_x: float


@dataclass(frozen=True)
class FishCaughtEvent:
    """The hook touched a fish.

    Attributes:
        fish_id: Identifier of the caught fish
        value: Points awarded
        tier: Tier the fish came from
        frame: Tick on which the catch happened
    """

    fish_id: int
    value: int
    tier: str
    frame: int


@dataclass(frozen=True)
class GameOverEvent:
    """The game ended.

    Attributes:
        final_score: Score frozen at the transition
        frame: Tick on which the game ended
    """

    final_score: int
    frame: int


@dataclass(frozen=True)
class GameResetEvent:
    """The game returned to idle after a restart.

    Attributes:
        player_x: Player anchor retained across the restart
    """

    player_x: float
