"""Base class for Breakout skins.

Skins handle ALL rendering - the game only manages state and hands over
a world-space draw list plus HUD values.
"""

from abc import ABC, abstractmethod
from typing import Tuple, TYPE_CHECKING

import pygame

from models import Rectangle

if TYPE_CHECKING:
    from ..game.render import DrawRect, HudValues
    from ..game.viewport import ArenaBounds


def world_to_screen(
    rect: Rectangle,
    bounds: 'ArenaBounds',
    screen_size: Tuple[int, int],
) -> pygame.Rect:
    """Map a world rectangle (origin centre, y up) to screen pixels (y down).

    Args:
        rect: Bottom-left anchored world rectangle
        bounds: Arena half-extents the screen spans
        screen_size: (width, height) of the target surface

    Returns:
        Pixel rectangle, at least 1x1
    """
    width, height = screen_size
    scale_x = width / (2.0 * bounds.half_width)
    scale_y = height / (2.0 * bounds.half_height)

    left = (rect.left + bounds.half_width) * scale_x
    top = (bounds.half_height - rect.top) * scale_y
    return pygame.Rect(
        round(left),
        round(top),
        max(1, round(rect.width * scale_x)),
        max(1, round(rect.height * scale_y)),
    )


class BreakoutSkin(ABC):
    """Base class for game skins.

    The game logic only manages state - skins decide how to present it.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_rect(
        self,
        draw: 'DrawRect',
        bounds: 'ArenaBounds',
        screen: pygame.Surface,
    ) -> None:
        """Render one entry of the draw list.

        Args:
            draw: World-space rectangle, color and kind
            bounds: Current arena half-extents
            screen: Pygame surface to draw on
        """
        pass

    def render_hud(self, screen: pygame.Surface, hud: 'HudValues') -> None:
        """Render the heads-up display (score, lives, level)."""
        pass

    def render_menu(self, screen: pygame.Surface) -> None:
        """Render the title screen."""
        pass

    def render_game_over(self, screen: pygame.Surface, hud: 'HudValues') -> None:
        """Render the game over overlay."""
        pass
