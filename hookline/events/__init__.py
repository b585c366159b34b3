"""Events module for game lifecycle notifications.

The EventBus lets presentation and telemetry code react to lifecycle
changes (start, catch, game over, reset) without polling snapshots.
"""

from hookline.events.domain_events import (
    FishCaughtEvent,
    GameOverEvent,
    GameResetEvent,
    GameStartedEvent,
)
from hookline.events.event_bus import EventBus

__all__ = [
    "EventBus",
    "FishCaughtEvent",
    "GameOverEvent",
    "GameResetEvent",
    "GameStartedEvent",
]
