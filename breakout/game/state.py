"""Owned simulation state for one Breakout run.

Everything the frame update reads or writes lives here, so a game can be
built, stepped and inspected without a window.
"""

from dataclasses import dataclass, field
from typing import List

from models.breakout import BreakoutConfig, BrickColor

from .entities import Ball, Block, FallingBonus, Paddle
from .physics.speed import ContactFlags
from .viewport import ArenaBounds
from ..config import get_color
from ..game_state import GameState


@dataclass
class SimulationState:
    """Counters, flags and entities of the current run.

    Attributes:
        bounds: Current arena half-extents
        paddle: Player paddle (mutated in place)
        ball: Current ball (replaced on every change)
        state: Top-level state machine position
        score: Points collected this game
        lives: Lives left, in [0, max_lives]
        level: Current level, starting at 1
        contact_flags: First-contact speed triggers of this level
        paddle_shrunk: Ceiling has been hit and the paddle halved
        blocks: Brick grid in generation order, never shrinks mid-level
        bonuses: Falling bonuses still in play
    """

    bounds: ArenaBounds
    paddle: Paddle
    ball: Ball
    state: GameState = GameState.MENU
    score: int = 0
    lives: int = 3
    level: int = 1
    contact_flags: ContactFlags = field(default_factory=ContactFlags)
    paddle_shrunk: bool = False
    blocks: List[Block] = field(default_factory=list)
    bonuses: List[FallingBonus] = field(default_factory=list)

    @classmethod
    def initial(cls, config: BreakoutConfig, bounds: ArenaBounds) -> 'SimulationState':
        """Fresh state sitting in the menu with no bricks."""
        paddle = Paddle.centered(config)
        ball = new_ball(config, paddle, config.initial_ball_speed)
        return cls(bounds=bounds, paddle=paddle, ball=ball, lives=config.starting_lives)

    @property
    def remaining_bricks(self) -> int:
        """Number of active destructible bricks."""
        return sum(1 for block in self.blocks if block.active and not block.is_wall)


def new_ball(config: BreakoutConfig, paddle: Paddle, speed: float) -> Ball:
    """Ball glued to the paddle, ready to launch at the given speed."""
    return Ball.on_paddle(
        paddle,
        config.ball_size,
        get_color(BrickColor.BALL),
        speed_magnitude=speed,
    )
