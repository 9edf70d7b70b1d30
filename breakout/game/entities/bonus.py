"""Falling bonus entity dropped by bonus bricks."""

from dataclasses import dataclass, replace

from models import Color
from models.breakout import BonusType

from ..physics.geometry import Box


@dataclass(frozen=True)
class FallingBonus:
    """A bonus square falling at constant speed toward the paddle."""

    box: Box
    color: Color
    bonus_type: BonusType
    fall_speed: float
    active: bool = True

    def fallen(self, dt: float) -> 'FallingBonus':
        """Return the bonus moved down by fall_speed * dt."""
        return replace(self, box=self.box.moved_to(self.box.x, self.box.y - self.fall_speed * dt))

    def deactivate(self) -> 'FallingBonus':
        return replace(self, active=False)
