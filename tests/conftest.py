"""Shared fixtures for the Breakout test suite."""

import random
from dataclasses import replace

import pytest

from models import Resolution
from models.breakout import BreakoutConfig, BrickColor
from breakout import logging as breakout_logging
from breakout.config import get_color
from breakout.game_mode import BreakoutGame
from breakout.game.entities import Ball, Block
from breakout.game.physics.geometry import Box
from breakout.game.state import SimulationState
from breakout.game.viewport import ArenaBounds


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence console output and drop sinks registered by a test."""
    settings = breakout_logging._settings
    saved = replace(
        settings,
        module_levels=dict(settings.module_levels),
        channels={name: dict(opts) for name, opts in settings.channels.items()},
    )
    breakout_logging.disable_logging()
    yield
    breakout_logging.close_all_sinks()
    settings.default_level = saved.default_level
    settings.module_levels = saved.module_levels
    settings.record_dir = saved.record_dir
    settings.channels = saved.channels


@pytest.fixture
def config():
    return BreakoutConfig()


@pytest.fixture
def unit_bounds():
    """Square arena spanning [-1, 1] on both axes."""
    return ArenaBounds(half_width=1.0, half_height=1.0)


@pytest.fixture
def sim(config, unit_bounds):
    """Simulation state in a square arena, paddle centred, ball stuck."""
    return SimulationState.initial(config, unit_bounds)


@pytest.fixture
def make_ball():
    """Factory for a free-flying ball."""
    def _make(x=0.0, y=0.0, vx=0.0, vy=1.0, speed=None, size=0.04, hit_count=0):
        if speed is None:
            speed = (vx * vx + vy * vy) ** 0.5
        return Ball(
            Box(x, y, size, size),
            get_color(BrickColor.BALL),
            vx=vx,
            vy=vy,
            speed_magnitude=speed,
            stuck_to_paddle=False,
            hit_count=hit_count,
        )
    return _make


@pytest.fixture
def make_block():
    """Factory for a destructible brick."""
    def _make(x=0.0, y=0.0, width=0.2, height=0.06,
              color_type=BrickColor.YELLOW, **kwargs):
        kwargs.setdefault('points', 1)
        return Block(Box(x, y, width, height), get_color(color_type), color_type, **kwargs)
    return _make


@pytest.fixture
def game(config):
    """Game in the menu with a 960x540 window and a seeded random source."""
    return BreakoutGame(config, Resolution(width=960, height=540), rng=random.Random(1234))


@pytest.fixture
def playing_game(game):
    """Game that has just started level 1."""
    game.start_game()
    return game
