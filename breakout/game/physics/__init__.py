"""Breakout physics: geometry, collision resolution and speed policy."""

from .geometry import Box, overlaps
from .collision import (
    BlockCollision,
    check_wall_collision,
    check_paddle_collision,
    is_ball_lost,
    find_colliding_block,
    get_collision_axis,
    bounce_off_block,
    resolve_block_collision,
)
from .speed import ContactFlags, apply_speed_increase

__all__ = [
    'Box',
    'overlaps',
    'BlockCollision',
    'check_wall_collision',
    'check_paddle_collision',
    'is_ball_lost',
    'find_colliding_block',
    'get_collision_axis',
    'bounce_off_block',
    'resolve_block_collision',
    'ContactFlags',
    'apply_speed_increase',
]
