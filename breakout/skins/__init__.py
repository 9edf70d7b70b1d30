"""Breakout skins."""

from .base import BreakoutSkin, world_to_screen
from .geometric import GeometricSkin

__all__ = ['BreakoutSkin', 'GeometricSkin', 'world_to_screen']
