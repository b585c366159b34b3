"""Command handlers for GameRunner.

Command handlers translate client messages into engine calls. Every handler
returns a response dict with a ``success`` flag; lifecycle handlers also
include the resulting state.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from hookline.exceptions import CommandError

if TYPE_CHECKING:
    from backend.game_runner import GameRunner

logger = logging.getLogger(__name__)


def _require_direction(data: Dict[str, Any]) -> str:
    direction = data.get("direction")
    if not direction:
        raise CommandError("Missing 'direction'")
    return direction


class CommandHandlerMixin:
    """Mixin class providing command handler methods for GameRunner."""

    def _create_error_response(self, error_msg: str) -> Dict[str, Any]:
        """Create a standardized error response."""
        return {"success": False, "error": error_msg}

    def _state_response(self: "GameRunner", success: bool) -> Dict[str, Any]:
        return {"success": success, "state": self.get_state().to_dict()}

    def _cmd_start(self: "GameRunner", data: Dict[str, Any]) -> Dict[str, Any]:
        """Handle 'start' command."""
        return self._state_response(self.start_game())

    def _cmd_restart(self: "GameRunner", data: Dict[str, Any]) -> Dict[str, Any]:
        """Handle 'restart' command."""
        return self._state_response(self.restart_game())

    def _cmd_get_state(self: "GameRunner", data: Dict[str, Any]) -> Dict[str, Any]:
        return self._state_response(True)

    def _cmd_set_intent(self: "GameRunner", data: Dict[str, Any]) -> Dict[str, Any]:
        """Handle 'set_intent' command: press or release a held control."""
        direction = _require_direction(data)
        active = bool(data.get("active", True))
        return {"success": self.engine.set_intent(direction, active)}

    def _cmd_move_once(self: "GameRunner", data: Dict[str, Any]) -> Dict[str, Any]:
        """Handle 'move_once' command: one discrete step."""
        direction = _require_direction(data)
        return {"success": self.engine.move_once(direction)}

    def handle_command(
        self: "GameRunner", command: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Handle a command from a client.

        Args:
            command: 'start', 'restart', 'get_state', 'set_intent' or 'move_once'
            data: Optional command data

        Returns:
            Response dict; ``success`` is False for ignored or malformed commands
        """
        handlers = {
            "start": self._cmd_start,
            "restart": self._cmd_restart,
            "get_state": self._cmd_get_state,
            "set_intent": self._cmd_set_intent,
            "move_once": self._cmd_move_once,
        }

        handler = handlers.get(command)
        if handler is None:
            logger.warning("Unknown command received: %s", command)
            return self._create_error_response(f"Unknown command: {command}")

        try:
            return handler(data or {})
        except CommandError as e:
            logger.info("Rejected %s command: %s", command, e)
            return self._create_error_response(str(e))
