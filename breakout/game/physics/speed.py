"""Ball speed-increase policy.

The ball speeds up by a fixed multiplier when its hit count reaches one of
the configured trigger counts, and on the first contact of a level with a
tier-A (red) and a tier-B (orange) brick. Every bump renormalizes the
velocity so its length matches the new speed.
"""

from dataclasses import dataclass, replace
from typing import Tuple, TYPE_CHECKING

from models.breakout import BreakoutConfig, BrickColor

from ...logging import get_logger

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.block import Block

log = get_logger('speed')


@dataclass(frozen=True)
class ContactFlags:
    """One-shot first-contact triggers, re-armed every level."""

    first_contact_red: bool = True
    first_contact_orange: bool = True


def apply_speed_increase(
    ball: 'Ball',
    block: 'Block',
    flags: ContactFlags,
    config: BreakoutConfig,
) -> Tuple['Ball', ContactFlags]:
    """Apply every speed bump triggered by the hit just counted on ball.

    Args:
        ball: Ball whose hit_count already includes this hit
        block: Brick that was hit
        flags: Current first-contact flags
        config: Tuning values (multiplier and trigger counts)

    Returns:
        Tuple of (ball with new speed, updated flags)
    """
    bumps = 0
    if ball.hit_count in config.speed_up_hit_counts:
        bumps += 1

    if flags.first_contact_orange and block.color_type == BrickColor.ORANGE:
        flags = replace(flags, first_contact_orange=False)
        bumps += 1

    if flags.first_contact_red and block.color_type == BrickColor.RED:
        flags = replace(flags, first_contact_red=False)
        bumps += 1

    if bumps == 0:
        return ball, flags

    new_speed = ball.speed_magnitude * (config.speed_increment ** bumps)
    log.debug("Speed bump x%d at hit %d: %.3f -> %.3f",
              bumps, ball.hit_count, ball.speed_magnitude, new_speed)
    return ball.with_speed(new_speed), flags
