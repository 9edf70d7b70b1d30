"""Ball entity with constant-speed velocity physics.

The ball either rides on the paddle (stuck, zero velocity) or flies
freely. While free, the length of its velocity equals speed_magnitude;
every operation that changes speed or direction here preserves that.
"""

from dataclasses import dataclass, replace
import math
import random
from typing import TYPE_CHECKING

from models import Color

from ..physics.geometry import Box

if TYPE_CHECKING:
    from .paddle import Paddle


# Speeds at or below this are treated as zero when renormalizing
MIN_RENORMALIZE_SPEED: float = 1e-4

# Paddle deflection: |offset| below the threshold uses the shallow factor
PADDLE_ZONE_THRESHOLD: float = 0.5
PADDLE_SHALLOW_FACTOR: float = 0.2
PADDLE_STEEP_FACTOR: float = 0.8

# Launch: horizontal share of the speed, drawn uniformly from this range
LAUNCH_FACTOR_MIN: float = 0.2
LAUNCH_FACTOR_MAX: float = 0.7


def _vertical_component(speed: float, vx: float) -> float:
    """Length of the vertical component that keeps |(vx, vy)| == speed."""
    return math.sqrt(max(0.0, speed * speed - vx * vx))


@dataclass(frozen=True)
class Ball:
    """Immutable ball state; every operation returns a new Ball."""

    box: Box
    color: Color
    vx: float = 0.0
    vy: float = 0.0
    speed_magnitude: float = 1.0
    stuck_to_paddle: bool = True
    hit_count: int = 0

    @classmethod
    def on_paddle(
        cls,
        paddle: 'Paddle',
        size: float,
        color: Color,
        speed_magnitude: float,
    ) -> 'Ball':
        """Create a ball glued to the top-centre of the paddle.

        Args:
            paddle: Paddle to sit on
            size: Edge length of the ball's bounding box
            color: Render color
            speed_magnitude: Speed the ball will launch with
        """
        ball = cls(
            Box(0.0, 0.0, size, size),
            color,
            speed_magnitude=speed_magnitude,
        )
        return ball.glued_to(paddle)

    @property
    def speed(self) -> float:
        """Current length of the velocity vector."""
        return math.hypot(self.vx, self.vy)

    @property
    def center_x(self) -> float:
        return self.box.center_x

    def glued_to(self, paddle: 'Paddle') -> 'Ball':
        """Return the ball resting on the paddle's top centre, not moving."""
        box = self.box.moved_to(paddle.center_x - self.box.width / 2, paddle.top)
        return replace(self, box=box, vx=0.0, vy=0.0, stuck_to_paddle=True)

    def launch(self, rng: random.Random) -> 'Ball':
        """Leave the paddle upward at a random, mostly vertical angle.

        The horizontal sign is a coin flip and the horizontal share of the
        speed is drawn from [LAUNCH_FACTOR_MIN, LAUNCH_FACTOR_MAX], so the
        vertical component always dominates.

        Args:
            rng: General-purpose random source

        Returns:
            New Ball in free flight
        """
        direction = -1.0 if rng.random() < 0.5 else 1.0
        factor = rng.uniform(LAUNCH_FACTOR_MIN, LAUNCH_FACTOR_MAX)
        vx = direction * self.speed_magnitude * factor
        vy = _vertical_component(self.speed_magnitude, vx)
        return replace(self, vx=vx, vy=vy, stuck_to_paddle=False)

    def update(self, dt: float) -> 'Ball':
        """Integrate position over dt seconds."""
        if self.stuck_to_paddle:
            return self
        box = self.box.moved_to(self.box.x + self.vx * dt, self.box.y + self.vy * dt)
        return replace(self, box=box)

    def set_position(self, x: float, y: float) -> 'Ball':
        """Move the bottom-left corner to (x, y)."""
        return replace(self, box=self.box.moved_to(x, y))

    def with_velocity(self, vx: float, vy: float) -> 'Ball':
        return replace(self, vx=vx, vy=vy)

    def bounce_horizontal(self) -> 'Ball':
        """Reverse X velocity (vertical surface)."""
        return replace(self, vx=-self.vx)

    def bounce_vertical(self) -> 'Ball':
        """Reverse Y velocity (horizontal surface)."""
        return replace(self, vy=-self.vy)

    def reverse(self) -> 'Ball':
        """Reverse both velocity components (mirror return)."""
        return replace(self, vx=-self.vx, vy=-self.vy)

    def bounce_off_paddle(self, paddle: 'Paddle') -> 'Ball':
        """Leave the paddle upward at an angle set by the impact offset.

        The offset runs from -1 (left edge) through 0 (centre) to +1
        (right edge). Near the centre the horizontal component is a small
        share of the speed for fine control; past the zone threshold it
        jumps to a large share for sharp angles. The vertical component is
        recomputed so the speed is unchanged and always points up.

        Args:
            paddle: Paddle that was hit

        Returns:
            New Ball resting on the paddle top with its new velocity
        """
        half_width = paddle.width / 2
        offset = (self.center_x - paddle.center_x) / half_width if half_width > 0 else 0.0
        offset = max(-1.0, min(1.0, offset))

        if abs(offset) < PADDLE_ZONE_THRESHOLD:
            vx = offset * self.speed_magnitude * PADDLE_SHALLOW_FACTOR
        else:
            vx = offset * self.speed_magnitude * PADDLE_STEEP_FACTOR
        vy = _vertical_component(self.speed_magnitude, vx)

        box = self.box.moved_to(self.box.x, paddle.top)
        return replace(self, box=box, vx=vx, vy=vy)

    def normalized(self) -> 'Ball':
        """Rescale velocity to speed_magnitude, keeping its direction.

        A stuck ball keeps zero velocity. A free ball whose velocity has
        collapsed to (near) zero is sent straight up instead.
        """
        if self.stuck_to_paddle:
            return replace(self, vx=0.0, vy=0.0)

        current = self.speed
        if current > MIN_RENORMALIZE_SPEED:
            scale = self.speed_magnitude / current
            return replace(self, vx=self.vx * scale, vy=self.vy * scale)
        return replace(self, vx=0.0, vy=self.speed_magnitude)

    def with_speed(self, speed_magnitude: float) -> 'Ball':
        """Set a new target speed and renormalize velocity to it."""
        return replace(self, speed_magnitude=speed_magnitude).normalized()

    def with_horizontal_share(self, share: float) -> 'Ball':
        """Force |vx| to share * speed, keeping both component signs.

        The vertical component is recomputed so the speed is unchanged.
        """
        sign_x = 1.0 if self.vx > 0 else -1.0
        sign_y = 1.0 if self.vy > 0 else -1.0
        vx = sign_x * self.speed_magnitude * share
        vy = sign_y * _vertical_component(self.speed_magnitude, vx)
        return replace(self, vx=vx, vy=vy)

    def register_hit(self) -> 'Ball':
        """Count one resolved brick hit."""
        return replace(self, hit_count=self.hit_count + 1)
