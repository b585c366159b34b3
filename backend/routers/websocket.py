"""WebSocket endpoint for real-time game updates and input."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from backend.game_runner import GameRunner

logger = logging.getLogger(__name__)


def _get_client_label(websocket: WebSocket) -> str:
    if websocket.client:
        return f"{websocket.client.host}:{websocket.client.port}"
    return "unknown"


async def _handle_websocket(websocket: WebSocket, runner: GameRunner) -> None:
    client = _get_client_label(websocket)
    client_added = False

    try:
        await websocket.accept()
        runner.add_client(websocket)
        client_added = True
        logger.info("WebSocket client connected: %s", client)

        # Initial snapshot so new clients render immediately
        state = await runner.get_state_async()
        await websocket.send_bytes(runner.serialize_state(state))

        while True:
            try:
                raw_text = await websocket.receive_text()
            except WebSocketDisconnect:
                break

            if not raw_text:
                continue

            try:
                payload = json.loads(raw_text)
            except json.JSONDecodeError:
                await websocket.send_json({"success": False, "error": "Invalid JSON payload."})
                continue

            if not isinstance(payload, dict) or not payload.get("command"):
                await websocket.send_json({"success": False, "error": "Missing 'command'."})
                continue

            data = payload.get("data")
            if data is not None and not isinstance(data, dict):
                await websocket.send_json({"success": False, "error": "'data' must be an object."})
                continue

            response = await runner.handle_command_async(payload["command"], data)
            await websocket.send_json(response)
    except WebSocketDisconnect:
        pass
    except Exception:
        logger.exception("WebSocket error for client %s", client)
    finally:
        if client_added:
            runner.remove_client(websocket)
        logger.info("WebSocket client disconnected: %s", client)


def setup_router(runner: GameRunner) -> APIRouter:
    """Create the websocket router bound to a runner."""
    router = APIRouter()

    @router.websocket("/ws")
    async def websocket_game(websocket: WebSocket) -> None:
        await _handle_websocket(websocket, runner)

    return router
