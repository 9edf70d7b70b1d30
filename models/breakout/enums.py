"""
Breakout-specific enumerations.

These enums tag bricks and falling bonuses with the game-logic channel
they belong to, independently of the color they are painted with.
"""

from enum import Enum, IntEnum


class BrickColor(str, Enum):
    """Logical color channel of a brick, paddle or ball.

    Brick rows are grouped into four tiers, top to bottom:
    RED (tier A), ORANGE (tier B), GREEN (tier C), YELLOW (tier D).
    The speed-increase policy keys off this channel, never off the
    rendered RGB value.

    Attributes:
        RED: Tier A bricks (highest points)
        ORANGE: Tier B bricks
        GREEN: Tier C bricks
        YELLOW: Tier D bricks (lowest points)
        GRAY: Indestructible wall bricks
        WHITE: Indestructible reflective wall bricks
        PADDLE: The player's paddle
        BALL: The ball
    """
    RED = "red"
    ORANGE = "orange"
    GREEN = "green"
    YELLOW = "yellow"
    GRAY = "gray"
    WHITE = "white"
    PADDLE = "paddle"
    BALL = "ball"


# Row tiers in top-to-bottom order, with the points each tier awards.
BRICK_TIERS = (
    (BrickColor.RED, 7),
    (BrickColor.ORANGE, 5),
    (BrickColor.GREEN, 3),
    (BrickColor.YELLOW, 1),
)


class BonusType(IntEnum):
    """Effect carried by a falling bonus.

    Values are the ids drawn uniformly from [0, 8) by the level generator.
    """
    LIFE_ADD = 0
    LIFE_REMOVE = 1
    PADDLE_WIDEN = 2
    PADDLE_SHRINK = 3
    BALL_SLOW = 4
    BALL_FAST = 5
    BALL_STRAIGHTEN = 6
    BALL_ANGLE = 7
