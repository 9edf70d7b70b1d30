"""Geometric skin - flat rectangles and plain text."""

from typing import Optional, TYPE_CHECKING

import pygame

from .base import BreakoutSkin, world_to_screen
from ..config import HUD_COLOR, TITLE_COLOR, GAME_OVER_COLOR
from ..game.render import DrawKind

if TYPE_CHECKING:
    from ..game.render import DrawRect, HudValues
    from ..game.viewport import ArenaBounds


class GeometricSkin(BreakoutSkin):
    """Renders the game using simple geometric shapes.

    - Bricks: Filled rectangles with a dark outline
    - Bonuses: Filled squares
    - Paddle: Filled rectangle with white outline
    - Ball: Filled circle inscribed in its box
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes in the logical colors"

    OUTLINE_COLOR = (0, 0, 0)
    PADDLE_OUTLINE = (255, 255, 255)

    def __init__(self):
        """Initialize geometric skin."""
        self._font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 36)
            self._title_font = pygame.font.Font(None, 72)

    def render_rect(
        self,
        draw: 'DrawRect',
        bounds: 'ArenaBounds',
        screen: pygame.Surface,
    ) -> None:
        rect = world_to_screen(draw.rect, bounds, screen.get_size())
        color = draw.color.as_rgb_tuple

        if draw.kind == DrawKind.BALL:
            radius = max(1, min(rect.width, rect.height) // 2)
            pygame.draw.circle(screen, color, rect.center, radius)
            return

        pygame.draw.rect(screen, color, rect)
        if draw.kind == DrawKind.BRICK:
            pygame.draw.rect(screen, self.OUTLINE_COLOR, rect, 1)
        elif draw.kind == DrawKind.PADDLE:
            pygame.draw.rect(screen, self.PADDLE_OUTLINE, rect, 1)

    def render_hud(self, screen: pygame.Surface, hud: 'HudValues') -> None:
        """Render HUD with score, level and lives."""
        self._ensure_font()

        # Score (top left)
        score_text = self._font.render(f"Score: {hud.score}", True, HUD_COLOR)
        screen.blit(score_text, (10, 10))

        # Level (top center)
        level_text = self._font.render(f"Level: {hud.level}", True, HUD_COLOR)
        level_rect = level_text.get_rect()
        level_rect.midtop = (screen.get_width() // 2, 10)
        screen.blit(level_text, level_rect)

        # Lives (top right)
        lives_text = self._font.render(f"Lives: {hud.lives}", True, HUD_COLOR)
        lives_rect = lives_text.get_rect()
        lives_rect.topright = (screen.get_width() - 10, 10)
        screen.blit(lives_text, lives_rect)

    def _blit_centered(self, screen: pygame.Surface, font: pygame.font.Font,
                       text: str, color, dy: int = 0) -> None:
        surface = font.render(text, True, color)
        rect = surface.get_rect(center=(screen.get_width() // 2, screen.get_height() // 2 + dy))
        screen.blit(surface, rect)

    def render_menu(self, screen: pygame.Surface) -> None:
        """Render title and start prompt."""
        self._ensure_font()
        self._blit_centered(screen, self._title_font, "BREAKOUT", TITLE_COLOR, -40)
        self._blit_centered(screen, self._font, "Press ENTER to start", HUD_COLOR, 20)
        self._blit_centered(screen, self._font, "Arrows move, SPACE launches, ESC quits",
                            HUD_COLOR, 60)

    def render_game_over(self, screen: pygame.Surface, hud: 'HudValues') -> None:
        """Render game over overlay with the final score."""
        self._ensure_font()
        self._blit_centered(screen, self._title_font, "GAME OVER", GAME_OVER_COLOR, -40)
        self._blit_centered(screen, self._font, f"Final Score: {hud.score}", HUD_COLOR, 20)
        self._blit_centered(screen, self._font, "Press ENTER for menu", HUD_COLOR, 60)
