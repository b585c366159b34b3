"""Game lifecycle and input endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from backend.game_runner import GameRunner
from backend.models import CommandResult, GameStateData, InputResult, IntentRequest, MoveRequest

logger = logging.getLogger(__name__)


def _input_response(response: dict):
    if "error" in response:
        return JSONResponse({"error": response["error"]}, status_code=400)
    return InputResult(success=response["success"])


def setup_router(runner: GameRunner) -> APIRouter:
    """Create the game router bound to a runner.

    Endpoints:
        GET  /api/game
        POST /api/game/start
        POST /api/game/restart
        POST /api/game/intent
        POST /api/game/move
    """
    router = APIRouter(prefix="/api/game", tags=["game"])

    @router.get("", response_model=GameStateData)
    async def get_game():
        """Current snapshot."""
        return runner.get_state().to_dict()

    @router.post("/start", response_model=CommandResult)
    async def start_game():
        """Start a game. ``success`` is False unless the game was idle."""
        return await runner.handle_command_async("start")

    @router.post("/restart", response_model=CommandResult)
    async def restart_game():
        """Return a finished game to idle."""
        return await runner.handle_command_async("restart")

    @router.post("/intent")
    async def set_intent(request: IntentRequest):
        """Press or release a held direction."""
        response = runner.handle_command(
            "set_intent", {"direction": request.direction, "active": request.active}
        )
        return _input_response(response)

    @router.post("/move")
    async def move_once(request: MoveRequest):
        """Queue one discrete step."""
        response = runner.handle_command("move_once", {"direction": request.direction})
        return _input_response(response)

    return router
