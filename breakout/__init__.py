"""Breakout - arcade brick breaker with a window-free simulation core."""

from breakout.game_mode import BreakoutGame
from breakout.game_state import GameState

__all__ = ['BreakoutGame', 'GameState']
