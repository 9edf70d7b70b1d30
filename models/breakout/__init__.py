"""
Breakout-specific models package.

Contains the enums that tag bricks and bonuses and the validated
configuration model.
"""

from .enums import (
    BrickColor,
    BonusType,
    BRICK_TIERS,
)

from .config import BreakoutConfig

__all__ = [
    # Enums
    "BrickColor",
    "BonusType",
    "BRICK_TIERS",
    # Configuration
    "BreakoutConfig",
]
