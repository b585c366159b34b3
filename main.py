"""Main entry point for the hookline fishing game.

This module provides command-line options to run the game:
- Web mode (default): FastAPI backend for browser / touch clients
- Desktop mode: pygame window with keyboard controls
- Headless mode: an autopilot plays one seeded game faster than real time
"""

import argparse
import logging
import sys
from typing import Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:%(name)s:%(message)s",
)

logger = logging.getLogger(__name__)


def run_web_server() -> None:
    """Run the FastAPI backend."""
    from hookline.config.display import SEPARATOR_WIDTH
    from hookline.config.server import api_port

    try:
        import uvicorn

        from backend.main import app
    except ImportError as e:
        logger.error("Error: Required dependencies not installed: %s", e)
        logger.error("Install with: pip install -e .")
        sys.exit(1)

    port = api_port()
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("HOOKLINE - WEB SERVER")
    logger.info("=" * SEPARATOR_WIDTH)
    logger.info("API docs available at http://localhost:%d/docs", port)
    logger.info("WebSocket endpoint: ws://localhost:%d/ws", port)
    logger.info("Press Ctrl+C to stop the server")
    logger.info("=" * SEPARATOR_WIDTH)

    uvicorn.run(app, host="0.0.0.0", port=port)


def _make_autopilot(engine):
    """Steer the hook toward the most valuable fish using held controls."""
    from hookline.game_state import GamePhase
    from hookline.input_controller import Direction

    tolerance = engine.config.controls.continuous_step / 2

    def steer(snapshot) -> None:
        if snapshot.phase is not GamePhase.RUNNING or not snapshot.fish:
            return
        target = max(snapshot.fish, key=lambda f: f.value)
        dx = target.x - snapshot.player_x
        dy = target.y - snapshot.hook.y
        engine.set_intent(Direction.LEFT, dx < -tolerance)
        engine.set_intent(Direction.RIGHT, dx > tolerance)
        engine.set_intent(Direction.UP, dy < -tolerance)
        engine.set_intent(Direction.DOWN, dy > tolerance)

    return steer


def run_headless(max_ticks: int, seed: Optional[int] = None) -> int:
    """Play one game with the autopilot, without a window or real-time pacing.

    Args:
        max_ticks: Give up after this many ticks
        seed: Optional random seed for deterministic behavior

    Returns:
        Final score (0 if nothing was caught)
    """
    from hookline.engine import GameEngine
    from hookline.game_loop import GameLoop, ImmediateClock

    engine = GameEngine(seed=seed)
    steer = _make_autopilot(engine)
    engine.start()
    steer(engine.snapshot())

    loop = GameLoop(engine, ImmediateClock(), on_frame=steer)
    ticks = loop.run(max_ticks=max_ticks)
    snapshot = engine.snapshot()
    if snapshot.is_over:
        logger.info("Caught fish %s after %d ticks; score %d", snapshot.caught_fish_id, ticks, snapshot.score)
    else:
        logger.info("No catch after %d ticks", ticks)
    return snapshot.score


def main() -> None:
    """Parse command-line arguments and run the appropriate mode."""
    parser = argparse.ArgumentParser(
        description="Hookline fishing game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run web server (default)
  python main.py

  # Play in a desktop window
  python main.py --desktop

  # Desktop with held (touch-style) controls
  python main.py --desktop --hold

  # Autopilot one game, reproducibly
  python main.py --headless --seed 42
        """,
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--desktop", action="store_true", help="Play in a pygame window")
    mode.add_argument("--headless", action="store_true", help="Run one autopilot game without UI")
    parser.add_argument(
        "--hold", action="store_true", help="Desktop: treat arrow keys as held controls"
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=20000,
        help="Headless: give up after this many ticks (default: 20000)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )

    args = parser.parse_args()

    if args.headless:
        logger.info("Starting headless game (max %d ticks)", args.max_ticks)
        run_headless(args.max_ticks, seed=args.seed)
    elif args.desktop:
        import fishing_game

        game_args = ["--hold"] if args.hold else []
        if args.seed is not None:
            game_args += ["--seed", str(args.seed)]
        fishing_game.main(game_args)
    else:
        run_web_server()


if __name__ == "__main__":
    main()
