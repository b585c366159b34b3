"""Data models for the REST API."""

from typing import List, Optional

from pydantic import BaseModel


class HookData(BaseModel):
    x: float
    y: float


class FishData(BaseModel):
    """A fish as seen by clients."""

    id: int
    x: float
    y: float
    value: int
    tier: str = ""


class GameStateData(BaseModel):
    """Full game snapshot."""

    state: str  # 'idle', 'running', 'over'
    score: int
    hook: HookData
    player_x: float
    fish: List[FishData]
    frame: int
    caught_fish_id: Optional[int] = None


class CommandResult(BaseModel):
    """Outcome of a lifecycle command; ``success`` is False when it was ignored."""

    success: bool
    state: GameStateData


class IntentRequest(BaseModel):
    """Press or release a held direction."""

    direction: str
    active: bool = True


class MoveRequest(BaseModel):
    """One discrete step in a direction."""

    direction: str


class InputResult(BaseModel):
    success: bool


class ServerInfo(BaseModel):
    """Information about the running server."""

    server_id: str
    version: str
    uptime_seconds: float
    frame_rate: int
