"""Frame clock and the loop that drives GameEngine.tick().

The loop issues one tick per frame signal and only while the engine is
RUNNING. It checks again after every wait, so neither a finished game nor a
stop() request ever receives another tick.
"""

import logging
import threading
import time
from typing import Callable, Optional, Protocol

from hookline.config.display import FRAME_RATE
from hookline.engine import GameEngine
from hookline.game_state import GameSnapshot

logger = logging.getLogger(__name__)

# Falling further behind than this resets the schedule instead of catching up
MAX_FRAME_LAG_SECONDS = 0.1


class FrameClock(Protocol):
    """Blocks until the next frame should run."""

    def wait_next_frame(self) -> None: ...


class FixedRateClock:
    """Sleeps to hold a fixed frame rate, with drift correction.

    The schedule advances by exactly one frame duration each call, so small
    oversleeps do not accumulate. When the caller lags badly the schedule is
    reset to "now" rather than running a burst of zero-delay frames.
    """

    def __init__(self, fps: int = FRAME_RATE) -> None:
        if fps <= 0:
            raise ValueError("fps must be positive")
        self.frame_time = 1.0 / fps
        self._next_frame_time: Optional[float] = None

    def reset(self) -> None:
        self._next_frame_time = time.perf_counter()

    def wait_next_frame(self) -> None:
        if self._next_frame_time is None:
            self.reset()
        self._next_frame_time += self.frame_time
        now = time.perf_counter()
        sleep_time = self._next_frame_time - now
        if sleep_time > 0:
            time.sleep(sleep_time)
        elif sleep_time < -MAX_FRAME_LAG_SECONDS:
            self._next_frame_time = now


class ImmediateClock:
    """Never waits; used for headless runs that go faster than real time."""

    def wait_next_frame(self) -> None:
        return None


class GameLoop:
    """Drives an engine from a frame clock until the game leaves RUNNING.

    Attributes:
        engine: Engine to tick
        clock: Frame signal source
        on_frame: Optional callback receiving the snapshot after each tick
    """

    def __init__(
        self,
        engine: GameEngine,
        clock: Optional[FrameClock] = None,
        on_frame: Optional[Callable[[GameSnapshot], None]] = None,
    ) -> None:
        self.engine = engine
        self.clock = clock or FixedRateClock(engine.config.frame_rate)
        self.on_frame = on_frame
        self._stop_requested = threading.Event()
        # Held across the final check and the tick so stop() cannot interleave.
        # Reentrant: event handlers run inside tick() and may call stop().
        self._tick_lock = threading.RLock()
        self.ticks_run = 0

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested.is_set()

    def stop(self) -> None:
        """Ask the loop to exit; no tick is issued after this returns.

        Safe to call from the loop thread itself, e.g. from a GameOverEvent
        handler; the current tick finishes and the loop then exits.
        """
        self._stop_requested.set()
        with self._tick_lock:
            pass

    def _should_continue(self) -> bool:
        return not self._stop_requested.is_set() and self.engine.is_running

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Tick the engine once per frame until the game ends or stop() is called.

        Args:
            max_ticks: Optional cap on ticks for this call

        Returns:
            Number of ticks issued by this call
        """
        ticks = 0
        logger.debug("Game loop: starting")
        try:
            while self._should_continue():
                if max_ticks is not None and ticks >= max_ticks:
                    break
                self.clock.wait_next_frame()
                with self._tick_lock:
                    if not self._should_continue():
                        break
                    self.engine.tick()
                ticks += 1
                self.ticks_run += 1
                if self.on_frame is not None:
                    self.on_frame(self.engine.snapshot())
        finally:
            logger.debug(
                "Game loop: ended after %d ticks (phase=%s)", ticks, self.engine.phase.name
            )
        return ticks
