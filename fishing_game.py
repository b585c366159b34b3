"""Desktop front-end for the hookline fishing game.

Arrow keys steer the hook. By default each key press moves one discrete
step; with ``--hold`` the keys act like held touch buttons and move a
smaller step every frame while pressed.
"""

import argparse
import logging
from typing import Dict, Optional

import pygame

from hookline.config.display import CANVAS_HEIGHT, CANVAS_WIDTH, SEPARATOR_WIDTH
from hookline.config.game_config import GameConfig
from hookline.engine import GameEngine
from hookline.game_state import GamePhase
from hookline.input_controller import ControlSource, Direction
from rendering.game_renderer import GameRenderer

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


class FishingGame:
    """Pygame window around a GameEngine.

    Attributes:
        engine: The game engine
        control_source: Whether arrow keys are discrete presses or held controls
        screen: Pygame display surface
        clock: Pygame clock driving one tick per frame
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        control_source: ControlSource = ControlSource.DISCRETE,
    ) -> None:
        self.engine = engine or GameEngine(GameConfig.from_env())
        self.control_source = control_source
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.renderer: Optional[GameRenderer] = None

    def setup(self) -> None:
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        pygame.display.set_caption("Hookline - Fishing Game")
        self.renderer = GameRenderer(
            self.screen, pygame.font.Font(None, 18), pygame.font.Font(None, 28)
        )

    def handle_events(self) -> bool:
        """Forward input to the engine. Returns False when the window should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    self._handle_enter()
                elif event.key in KEY_DIRECTIONS:
                    direction = KEY_DIRECTIONS[event.key]
                    if self.control_source is ControlSource.DISCRETE:
                        self.engine.move_once(direction)
                    else:
                        self.engine.set_intent(direction, True)
            elif event.type == pygame.KEYUP and event.key in KEY_DIRECTIONS:
                if self.control_source is ControlSource.CONTINUOUS:
                    self.engine.set_intent(KEY_DIRECTIONS[event.key], False)
        return True

    def _handle_enter(self) -> None:
        if self.engine.phase is GamePhase.IDLE:
            self.engine.start()
        elif self.engine.phase is GamePhase.OVER:
            self.engine.restart()

    def render(self) -> None:
        if self.renderer is None:
            return
        self.renderer.draw(self.engine.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        """Run until the window is closed."""
        self.setup()
        logger.info("=" * SEPARATOR_WIDTH)
        logger.info("HOOKLINE - %s controls", self.control_source.value)
        logger.info("  ENTER  - Start / play again")
        logger.info("  ARROWS - Move the line")
        logger.info("  ESC    - Quit")
        logger.info("=" * SEPARATOR_WIDTH)

        frame_rate = self.engine.config.frame_rate
        while self.handle_events():
            # tick() does nothing outside RUNNING
            self.engine.tick()
            self.render()
            self.clock.tick(frame_rate)

        logger.info("Goodbye! Last score: %d", self.engine.score)


def main(argv=None) -> None:
    """Entry point for the desktop game."""
    parser = argparse.ArgumentParser(description="Hookline fishing game (desktop)")
    parser.add_argument(
        "--hold",
        action="store_true",
        help="Treat arrow keys as held controls (continuous movement)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for fish generation")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    config = GameConfig.from_env()
    if args.seed is not None:
        config = config.with_overrides(seed=args.seed)
    source = ControlSource.CONTINUOUS if args.hold else ControlSource.DISCRETE

    pygame.init()
    try:
        FishingGame(GameEngine(config), source).run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
