"""Background game runner.

GameRunner owns one GameEngine and drives it from a frame clock on a
background thread. The thread is started by a successful start and exits by
itself as soon as the game leaves RUNNING; stop() and restart_game() join it,
so a finished game never has a tick pending.
"""

import asyncio
import logging
import threading
from typing import Any, Callable, Dict, Optional, Set

import orjson

from backend.runner import CommandHandlerMixin
from hookline.config.game_config import GameConfig
from hookline.engine import GameEngine
from hookline.game_loop import FixedRateClock, FrameClock, GameLoop
from hookline.game_state import GamePhase, GameSnapshot

logger = logging.getLogger(__name__)

# Seconds to wait for the loop thread when stopping
LOOP_JOIN_TIMEOUT = 2.0


class GameRunner(CommandHandlerMixin):
    """Runs a game on a background thread and serves its state.

    Attributes:
        engine: The game engine (sole owner of game state)
        connected_clients: Websocket clients receiving broadcasts
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        seed: Optional[int] = None,
        engine: Optional[GameEngine] = None,
        clock_factory: Optional[Callable[[], FrameClock]] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            config: Game configuration (ignored when ``engine`` is given)
            seed: Optional seed for deterministic fish generation
            engine: Pre-built engine, e.g. with a custom fish factory
            clock_factory: Builds the frame clock for each game; defaults to
                a FixedRateClock at the configured frame rate
        """
        self.engine = engine or GameEngine(config, seed=seed)
        frame_rate = self.engine.config.frame_rate
        self._clock_factory = clock_factory or (lambda: FixedRateClock(frame_rate))
        self.lock = threading.Lock()
        self.thread: Optional[threading.Thread] = None
        self._loop: Optional[GameLoop] = None
        self.connected_clients: Set[Any] = set()

    @property
    def loop_active(self) -> bool:
        """Whether the loop thread is currently alive."""
        thread = self.thread
        return thread is not None and thread.is_alive()

    def add_client(self, client: Any) -> None:
        self.connected_clients.add(client)

    def remove_client(self, client: Any) -> None:
        self.connected_clients.discard(client)

    def start_game(self) -> bool:
        """Start a game and its loop thread. Ignored unless the engine is idle."""
        with self.lock:
            if self.engine.phase is not GamePhase.IDLE:
                logger.debug("start ignored in phase %s", self.engine.phase.name)
                return False
            # The previous game is over, so its loop has exited or is exiting
            self._join_loop()
            if not self.engine.start():
                return False
            loop = GameLoop(self.engine, self._clock_factory())
            self._loop = loop
            self.thread = threading.Thread(
                target=self._run_loop, args=(loop,), name="hookline-game-loop", daemon=True
            )
            self.thread.start()
        return True

    def restart_game(self) -> bool:
        """Return a finished game to idle."""
        with self.lock:
            if self.engine.phase is not GamePhase.OVER:
                logger.debug("restart ignored in phase %s", self.engine.phase.name)
                return False
            self._join_loop()
            return self.engine.restart()

    def stop(self) -> None:
        """Stop the loop thread; no tick is issued after this returns."""
        with self.lock:
            self._join_loop()

    def _join_loop(self) -> None:
        loop, thread = self._loop, self.thread
        if loop is not None:
            loop.stop()
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=LOOP_JOIN_TIMEOUT)
            if thread.is_alive():
                logger.warning("Game loop thread did not exit within %.1fs", LOOP_JOIN_TIMEOUT)
        self._loop = None
        self.thread = None

    def _run_loop(self, loop: GameLoop) -> None:
        logger.info("Game loop: starting")
        try:
            loop.run()
        except Exception:
            logger.exception("Game loop: fatal error, loop exiting")
        finally:
            snapshot = self.engine.snapshot()
            logger.info(
                "Game loop: ended after %d ticks (state=%s, score=%d)",
                loop.ticks_run,
                snapshot.phase.value,
                snapshot.score,
            )

    def get_state(self) -> GameSnapshot:
        return self.engine.snapshot()

    def serialize_state(self, state: GameSnapshot) -> bytes:
        """Serialize a snapshot for the wire."""
        return orjson.dumps(state.to_dict())

    async def get_state_async(self) -> GameSnapshot:
        return self.get_state()

    async def handle_command_async(
        self, command: str, data: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Async wrapper to route commands off the event loop thread."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.handle_command, command, data)
