"""Paddle entity driven by held left/right input.

The paddle slides at constant speed while a direction is held and is
always kept inside the arena's horizontal bounds.
"""

from typing import TYPE_CHECKING

from models import Color
from models.breakout import BreakoutConfig, BrickColor

from ..physics.geometry import Box
from ...config import get_color

if TYPE_CHECKING:
    from ..viewport import ArenaBounds


class Paddle:
    """Player paddle: a box and a color.

    Unlike the ball and the blocks, the paddle is mutated in place every
    frame by input, bonus effects and the ceiling shrink.
    """

    def __init__(self, box: Box, color: Color):
        """Initialize paddle.

        Args:
            box: Bounding box (bottom-left anchored)
            color: Render color
        """
        self._box = box
        self._color = color

    @classmethod
    def centered(cls, config: BreakoutConfig, shrunk: bool = False) -> 'Paddle':
        """Create a paddle centred on x=0 at the configured height.

        Args:
            config: Tuning values
            shrunk: Use half the configured width (after a ceiling hit)
        """
        width = config.paddle_width * 0.5 if shrunk else config.paddle_width
        box = Box(-width / 2, config.paddle_y, width, config.paddle_height)
        return cls(box, get_color(BrickColor.PADDLE))

    @property
    def box(self) -> Box:
        """Get paddle bounding box."""
        return self._box

    @property
    def color(self) -> Color:
        return self._color

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._box.x

    @property
    def width(self) -> float:
        return self._box.width

    @property
    def center_x(self) -> float:
        """Get paddle center X."""
        return self._box.center_x

    @property
    def top(self) -> float:
        """Get paddle top Y."""
        return self._box.top

    def _clamped_x(self, x: float, bounds: 'ArenaBounds') -> float:
        return max(-bounds.half_width, min(x, bounds.half_width - self._box.width))

    def move(self, direction: int, speed: float, dt: float, bounds: 'ArenaBounds') -> None:
        """Slide the paddle horizontally.

        Args:
            direction: -1 for left, +1 for right, 0 to stay
            speed: World units per second
            dt: Delta time in seconds
            bounds: Current arena bounds
        """
        if direction == 0:
            return
        new_x = self._box.x + direction * speed * dt
        self._box = self._box.moved_to(self._clamped_x(new_x, bounds), self._box.y)

    def set_width(self, width: float, bounds: 'ArenaBounds') -> None:
        """Resize the paddle, keeping its left edge and staying inside the arena."""
        self._box = self._box.resized(width, self._box.height)
        self.clamp_to(bounds)

    def clamp_to(self, bounds: 'ArenaBounds') -> None:
        """Pull the paddle back inside the arena after bounds or width change."""
        self._box = self._box.moved_to(self._clamped_x(self._box.x, bounds), self._box.y)
