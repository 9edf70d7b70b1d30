"""GameState enum for Breakout.

The run moves MENU -> PLAYING -> GAME_OVER -> MENU. Quitting is a side
exit available from every state, not a state of its own.
"""
from enum import Enum


class GameState(Enum):
    """Top-level states of a Breakout run.

    States:
        MENU: Idle title screen, waiting for the start command
        PLAYING: Simulation active
        GAME_OVER: Lives exhausted, waiting for the return-to-menu command
    """
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"
