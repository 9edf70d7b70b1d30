"""Block entity: one cell of the brick grid.

Blocks are never removed from storage. Destruction only clears the
active flag, so grid order and relayout stay stable for a whole level.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from models import Color
from models.breakout import BrickColor, BonusType

from ..physics.geometry import Box
from ...config import get_color

# hit_counter value of bricks that never take damage
INDESTRUCTIBLE: int = -1


@dataclass(frozen=True)
class Block:
    """A brick, wall or counter brick in the grid.

    Attributes:
        box: Bounding box (bottom-left anchored)
        color: Current render color
        color_type: Logical color channel (tier or wall kind)
        grid_position: (row, col) in the generated grid
        active: False once destroyed
        points: Score awarded on destruction
        hit_counter: Hits left before destruction, INDESTRUCTIBLE for walls
        is_wall: Indestructible wall brick
        is_reflective: Wall that sends the ball straight back
        is_bonus: Drops a falling bonus when destroyed
        bonus_type: Effect of the dropped bonus
    """

    box: Box
    color: Color
    color_type: BrickColor
    grid_position: Tuple[int, int] = (0, 0)
    active: bool = True
    points: int = 0
    hit_counter: int = 1
    is_wall: bool = False
    is_reflective: bool = False
    is_bonus: bool = False
    bonus_type: Optional[BonusType] = None

    @property
    def is_indestructible(self) -> bool:
        return self.hit_counter == INDESTRUCTIBLE

    def hit(self) -> 'Block':
        """Apply one hit.

        Indestructible blocks are returned unchanged. A block whose counter
        reaches zero is deactivated; one that survives is repainted in its
        normal tier color.
        """
        if self.is_indestructible:
            return self

        remaining = self.hit_counter - 1
        if remaining <= 0:
            return replace(self, hit_counter=0, active=False)
        return replace(self, hit_counter=remaining, color=get_color(self.color_type))

    def with_box(self, box: Box) -> 'Block':
        """Return a copy with new geometry and unchanged state."""
        return replace(self, box=box)
