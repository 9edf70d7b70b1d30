"""Collision detection and resolution for Breakout.

Handles ball-wall, ball-paddle and ball-brick collisions. The frame
update runs them in that order; a later resolver may overwrite the
position correction of an earlier one.
"""

from typing import NamedTuple, Optional, Literal, Sequence, Tuple, TYPE_CHECKING

from .geometry import Box, overlaps

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.block import Block
    from ..viewport import ArenaBounds


Axis = Literal["x", "y"]


class BlockCollision(NamedTuple):
    """Outcome of resolving one ball-brick contact."""

    ball: 'Ball'
    block: 'Block'
    destroyed: bool


def check_wall_collision(ball: 'Ball', bounds: 'ArenaBounds') -> Tuple['Ball', bool]:
    """Clamp-and-reflect the ball on the left, right and top edges.

    Left and right are exclusive; the ceiling is checked independently.
    Each reflection points the velocity component away from the edge and
    snaps the ball onto the boundary.

    Args:
        ball: Ball to check
        bounds: Current arena bounds

    Returns:
        Tuple of (updated ball, True if the ceiling was hit)
    """
    new_ball = ball
    hit_ceiling = False

    # Left wall
    if ball.box.left <= bounds.left:
        new_ball = new_ball.with_velocity(abs(new_ball.vx), new_ball.vy)
        new_ball = new_ball.set_position(bounds.left, new_ball.box.y)

    # Right wall
    elif ball.box.right >= bounds.right:
        new_ball = new_ball.with_velocity(-abs(new_ball.vx), new_ball.vy)
        new_ball = new_ball.set_position(bounds.right - ball.box.width, new_ball.box.y)

    # Ceiling
    if ball.box.top >= bounds.top:
        new_ball = new_ball.with_velocity(new_ball.vx, -abs(new_ball.vy))
        new_ball = new_ball.set_position(new_ball.box.x, bounds.top - ball.box.height)
        hit_ceiling = True

    return new_ball, hit_ceiling


def is_ball_lost(ball: 'Ball', bounds: 'ArenaBounds') -> bool:
    """True once the ball's top edge has dropped below the arena floor."""
    return ball.box.top < bounds.bottom


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball should bounce off the paddle.

    Only a descending ball collides; an ascending or resting ball that
    still touches the paddle is ignored so it cannot bounce twice.
    """
    if ball.vy >= 0:
        return False
    return overlaps(ball.box, paddle.box)


def find_colliding_block(ball: 'Ball', blocks: Sequence['Block']) -> Optional[int]:
    """Index of the first active block the ball overlaps, in storage order."""
    for index, block in enumerate(blocks):
        if block.active and overlaps(ball.box, block.box):
            return index
    return None


def _overlaps_by_side(ball: Box, block: Box) -> Tuple[float, float, float, float]:
    """Penetration depth measured from each face: (left, right, bottom, top)."""
    return (
        ball.right - block.left,
        block.right - ball.left,
        ball.top - block.bottom,
        block.top - ball.bottom,
    )


def get_collision_axis(ball: 'Ball', block: 'Block') -> Axis:
    """Axis of least penetration between the ball and a block.

    Returns "x" for a side hit and "y" for a top/bottom hit. Ties go to "y".
    """
    left, right, bottom, top = _overlaps_by_side(ball.box, block.box)
    if min(left, right) < min(bottom, top):
        return "x"
    return "y"


def _push_out(ball: 'Ball', block: 'Block', axis: Axis, epsilon: float) -> 'Ball':
    """Place the ball flush against the block face it penetrated least, plus epsilon."""
    left, right, bottom, top = _overlaps_by_side(ball.box, block.box)
    if axis == "x":
        if left < right:
            return ball.set_position(block.box.left - ball.box.width - epsilon, ball.box.y)
        return ball.set_position(block.box.right + epsilon, ball.box.y)

    if bottom < top:
        return ball.set_position(ball.box.x, block.box.bottom - ball.box.height - epsilon)
    return ball.set_position(ball.box.x, block.box.top + epsilon)


def bounce_off_block(ball: 'Ball', block: 'Block', epsilon: float) -> 'Ball':
    """Bounce the ball off a block without touching the block.

    Reflective walls send the ball straight back along its path. Everything
    else reverses only the axis of least penetration. In both cases the
    ball is moved out of the block so the contact does not re-trigger.
    """
    axis = get_collision_axis(ball, block)
    pushed = _push_out(ball, block, axis, epsilon)

    if block.is_reflective:
        return pushed.reverse()
    if axis == "x":
        return pushed.bounce_horizontal()
    return pushed.bounce_vertical()


def resolve_block_collision(
    ball: 'Ball',
    block: 'Block',
    epsilon: float,
) -> BlockCollision:
    """Resolve ball-brick contact: bounce, damage and hit counting.

    Walls only bounce the ball. Destructible bricks also lose one hit and
    count toward the ball's hit total.

    Args:
        ball: Ball touching the block
        block: Block that was hit
        epsilon: Extra clearance when moving the ball out of the block

    Returns:
        BlockCollision with the updated ball and block
    """
    new_ball = bounce_off_block(ball, block, epsilon)
    if block.is_wall:
        return BlockCollision(new_ball, block, False)

    new_block = block.hit()
    new_ball = new_ball.register_hit()
    return BlockCollision(new_ball, new_block, not new_block.active)
