"""Pygame rendering for the hookline game.

The renderer only reads GameSnapshot values; it never touches the engine.
"""

from typing import Optional

import pygame

from hookline.color import fish_color
from hookline.config.display import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FISH_DRAW_RADIUS,
    FISHER_COLOR,
    FISHER_HEIGHT,
    FISHER_TOP,
    FISHER_WIDTH,
    HOOK_DRAW_RADIUS,
    LINE_COLOR,
    SKY_COLOR,
    SURFACE_BAND_HEIGHT,
    WATER_COLOR,
)
from hookline.game_state import GamePhase, GameSnapshot

TEXT_COLOR = (255, 255, 255)
BANNER_COLOR = (20, 20, 20)


class GameRenderer:
    """Draws snapshots onto a pygame surface.

    Attributes:
        screen: Pygame surface to render to
        font: Font for fish values
        banner_font: Font for score and prompts
    """

    def __init__(
        self,
        screen: pygame.Surface,
        font: pygame.font.Font,
        banner_font: Optional[pygame.font.Font] = None,
    ) -> None:
        self.screen = screen
        self.font = font
        self.banner_font = banner_font or font

    def draw(self, snapshot: GameSnapshot) -> None:
        """Draw a full frame (does not flip the display)."""
        self._draw_background()
        self._draw_fisher_and_line(snapshot)
        if snapshot.phase is not GamePhase.IDLE:
            self._draw_fish(snapshot)
        self._draw_score(snapshot)
        self._draw_prompt(snapshot)

    def _draw_background(self) -> None:
        self.screen.fill(WATER_COLOR)
        pygame.draw.rect(self.screen, SKY_COLOR, (0, 0, CANVAS_WIDTH, SURFACE_BAND_HEIGHT))

    def _draw_fisher_and_line(self, snapshot: GameSnapshot) -> None:
        player_x = snapshot.player_x
        rod_tip = (player_x, FISHER_TOP + FISHER_HEIGHT)
        pygame.draw.rect(
            self.screen,
            FISHER_COLOR,
            (player_x - FISHER_WIDTH / 2, FISHER_TOP, FISHER_WIDTH, FISHER_HEIGHT),
        )
        hook = snapshot.hook.as_tuple()
        pygame.draw.line(self.screen, LINE_COLOR, rod_tip, hook)
        pygame.draw.circle(self.screen, LINE_COLOR, hook, HOOK_DRAW_RADIUS)

    def _draw_fish(self, snapshot: GameSnapshot) -> None:
        for fish in snapshot.fish:
            center = (fish.x, fish.y)
            pygame.draw.circle(self.screen, fish_color(fish.value), center, FISH_DRAW_RADIUS)
            label = self.font.render(str(fish.value), True, TEXT_COLOR)
            self.screen.blit(label, label.get_rect(center=center))

    def _draw_score(self, snapshot: GameSnapshot) -> None:
        label = self.banner_font.render(f"Score: {snapshot.score}", True, BANNER_COLOR)
        self.screen.blit(label, (10, 10))

    def _draw_prompt(self, snapshot: GameSnapshot) -> None:
        if snapshot.phase is GamePhase.IDLE:
            text = "Press ENTER to start"
        elif snapshot.phase is GamePhase.OVER:
            text = f"Game Over! Final Score: {snapshot.score} - ENTER to play again"
        else:
            return
        label = self.banner_font.render(text, True, TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=(CANVAS_WIDTH / 2, CANVAS_HEIGHT / 2)))
