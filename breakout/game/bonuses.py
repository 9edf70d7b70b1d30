"""Falling bonus subsystem.

Bonus bricks drop a FallingBonus when destroyed. Bonuses fall at constant
speed; one that leaves the bottom of the arena is lost, one that touches
the paddle applies its effect. Every effect is clamped to sane bounds.
"""

from typing import List

from models.breakout import BreakoutConfig, BonusType

from .entities import Block, FallingBonus
from .physics.geometry import Box, overlaps
from .state import SimulationState
from ..config import BONUS_COLORS
from ..logging import get_logger

log = get_logger('bonuses')

# Effect multipliers
WIDEN_FACTOR: float = 1.25
SHRINK_FACTOR: float = 0.75
SLOW_FACTOR: float = 0.8
FAST_FACTOR: float = 1.2

# Caps, as multiples of the arena half-width or the configured base values
WIDEN_CAP_OF_BOUND: float = 1.5
SHRINK_FLOOR_OF_BASE: float = 0.25
SLOW_FLOOR_OF_INITIAL: float = 0.5
FAST_CAP_OF_INITIAL: float = 3.0

# Horizontal share of the speed after a direction bonus
STRAIGHTEN_SHARE: float = 0.2
ANGLE_SHARE: float = 0.7

# Direction bonuses only act on a component larger than this
MIN_COMPONENT: float = 0.01


def spawn_bonus(block: Block, config: BreakoutConfig) -> FallingBonus:
    """Create a falling bonus at the former position of a destroyed brick.

    Args:
        block: Bonus-carrying brick that was just destroyed
        config: Bonus size and fall speed

    Returns:
        Active FallingBonus colored by its type
    """
    size = config.bonus_size
    return FallingBonus(
        box=Box(block.box.x, block.box.y, size, size),
        color=BONUS_COLORS[block.bonus_type],
        bonus_type=block.bonus_type,
        fall_speed=config.bonus_fall_speed,
    )


def apply_bonus(sim: SimulationState, bonus_type: BonusType, config: BreakoutConfig) -> None:
    """Apply the effect of a caught bonus to the simulation state."""
    ball = sim.ball
    paddle = sim.paddle

    if bonus_type == BonusType.LIFE_ADD:
        sim.lives = min(sim.lives + 1, config.max_lives)

    elif bonus_type == BonusType.LIFE_REMOVE:
        sim.lives = max(sim.lives - 1, 1)

    elif bonus_type == BonusType.PADDLE_WIDEN:
        width = min(paddle.width * WIDEN_FACTOR, sim.bounds.half_width * WIDEN_CAP_OF_BOUND)
        paddle.set_width(width, sim.bounds)

    elif bonus_type == BonusType.PADDLE_SHRINK:
        width = max(paddle.width * SHRINK_FACTOR, config.paddle_width * SHRINK_FLOOR_OF_BASE)
        paddle.set_width(width, sim.bounds)

    elif bonus_type == BonusType.BALL_SLOW:
        speed = max(ball.speed_magnitude * SLOW_FACTOR,
                    config.initial_ball_speed * SLOW_FLOOR_OF_INITIAL)
        sim.ball = ball.with_speed(speed)

    elif bonus_type == BonusType.BALL_FAST:
        speed = min(ball.speed_magnitude * FAST_FACTOR,
                    config.initial_ball_speed * FAST_CAP_OF_INITIAL)
        sim.ball = ball.with_speed(speed)

    elif bonus_type == BonusType.BALL_STRAIGHTEN:
        if abs(ball.vx) > MIN_COMPONENT:
            sim.ball = ball.with_horizontal_share(STRAIGHTEN_SHARE)

    elif bonus_type == BonusType.BALL_ANGLE:
        if abs(ball.vy) > MIN_COMPONENT:
            sim.ball = ball.with_horizontal_share(ANGLE_SHARE)

    log.debug("Bonus %s applied (lives=%d, paddle=%.3f, speed=%.3f)",
              bonus_type.name, sim.lives, sim.paddle.width, sim.ball.speed_magnitude)


def update_bonuses(sim: SimulationState, dt: float, config: BreakoutConfig) -> List[BonusType]:
    """Move every falling bonus, resolve catches and purge inactive ones.

    Args:
        sim: Simulation state (bonuses, paddle, ball and lives are updated)
        dt: Delta time in seconds
        config: Tuning values for the effects

    Returns:
        Types of the bonuses caught this frame, in catch order
    """
    caught: List[BonusType] = []
    updated: List[FallingBonus] = []

    for bonus in sim.bonuses:
        if not bonus.active:
            continue

        bonus = bonus.fallen(dt)
        if bonus.box.top < sim.bounds.bottom:
            bonus = bonus.deactivate()
        elif overlaps(bonus.box, sim.paddle.box):
            apply_bonus(sim, bonus.bonus_type, config)
            caught.append(bonus.bonus_type)
            bonus = bonus.deactivate()
        updated.append(bonus)

    sim.bonuses = [bonus for bonus in updated if bonus.active]
    return caught
