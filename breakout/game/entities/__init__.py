"""Breakout game entities."""

from .paddle import Paddle
from .ball import Ball
from .block import Block, INDESTRUCTIBLE
from .bonus import FallingBonus

__all__ = [
    'Paddle',
    'Ball',
    'Block', 'INDESTRUCTIBLE',
    'FallingBonus',
]
