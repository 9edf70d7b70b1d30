"""Breakout - the simulation core behind the window.

BreakoutGame owns the simulation state and advances it one frame at a time
from elapsed time and the player's FrameInput. It never touches pygame;
the front end reads draw_list() and hud() to paint each frame.
"""

import random
from typing import List, Optional

from models import Resolution
from models.breakout import BreakoutConfig

from .config import WINDOW_WIDTH, WINDOW_HEIGHT
from .game_state import GameState
from .input.input_event import FrameInput, NO_INPUT
from .game.entities import Paddle
from .game.bonuses import spawn_bonus, update_bonuses
from .game.level_generator import LevelGenerator
from .game.physics.collision import (
    check_wall_collision,
    check_paddle_collision,
    find_colliding_block,
    is_ball_lost,
    resolve_block_collision,
)
from .game.physics.speed import ContactFlags, apply_speed_increase
from .game.render import DrawRect, HudValues, build_draw_list, hud_values
from .game.state import SimulationState, new_ball
from .game.viewport import ArenaBounds, compute_bounds
from .logging import get_logger, emit_record

log = get_logger('game_mode')

# Ceiling contact halves the paddle once per game
CEILING_SHRINK_FACTOR: float = 0.5


class BreakoutGame:
    """Breakout game mode.

    Features:
    - Menu -> Playing -> GameOver state machine with a global quit
    - Deterministic brick layout with walls, counter and bonus bricks
    - Ball speed-up on hit counts and first contact with top tiers
    - Falling bonuses that change lives, paddle width and ball motion
    """

    def __init__(
        self,
        config: Optional[BreakoutConfig] = None,
        resolution: Optional[Resolution] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize Breakout game.

        Args:
            config: Tuning values (defaults if omitted)
            resolution: Initial window size in pixels
            rng: General-purpose random source for launch angles and bonus types
        """
        self._config = config or BreakoutConfig()
        self._rng = rng if rng is not None else random.Random()
        self._generator = LevelGenerator(self._config, self._rng)

        if resolution is None:
            resolution = Resolution(width=WINDOW_WIDTH, height=WINDOW_HEIGHT)
        self._sim = SimulationState.initial(self._config, compute_bounds(resolution))
        self._quit_requested = False

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def config(self) -> BreakoutConfig:
        return self._config

    @property
    def simulation(self) -> SimulationState:
        """Live simulation state (mutable, for inspection and tests)."""
        return self._sim

    @property
    def state(self) -> GameState:
        return self._sim.state

    @property
    def score(self) -> int:
        return self._sim.score

    @property
    def lives(self) -> int:
        return self._sim.lives

    @property
    def level(self) -> int:
        return self._sim.level

    @property
    def bounds(self) -> ArenaBounds:
        return self._sim.bounds

    @property
    def quit_requested(self) -> bool:
        """True once the player asked to quit; the main loop should stop."""
        return self._quit_requested

    def draw_list(self) -> List[DrawRect]:
        """Paint-ordered snapshot of the current frame."""
        return build_draw_list(self._sim)

    def hud(self) -> HudValues:
        return hud_values(self._sim)

    # =========================================================================
    # State transitions
    # =========================================================================

    def _set_state(self, new_state: GameState) -> None:
        if new_state != self._sim.state:
            log.info("State %s -> %s", self._sim.state.name, new_state.name)
            self._sim.state = new_state

    def _record(self, event: str) -> None:
        emit_record('session', {
            'event': event,
            'state': self._sim.state.value,
            'score': self._sim.score,
            'lives': self._sim.lives,
            'level': self._sim.level,
        })

    def _reset_paddle_and_ball(self, speed: float) -> None:
        """Re-centre the paddle and glue a fresh ball onto it."""
        sim = self._sim
        sim.paddle = Paddle.centered(self._config, shrunk=sim.paddle_shrunk)
        sim.paddle.clamp_to(sim.bounds)
        sim.ball = new_ball(self._config, sim.paddle, speed)

    def start_game(self) -> None:
        """Begin a new game at level 1 from scratch."""
        sim = self._sim
        sim.score = 0
        sim.lives = self._config.starting_lives
        sim.level = 1
        sim.contact_flags = ContactFlags()
        sim.paddle_shrunk = False
        sim.blocks = self._generator.generate(sim.bounds.half_width)
        self._reset_paddle_and_ball(self._config.initial_ball_speed)
        sim.bonuses = []
        self._set_state(GameState.PLAYING)
        self._record('game_started')

    def return_to_menu(self) -> None:
        self._set_state(GameState.MENU)
        self._record('menu')

    def _lose_life(self) -> None:
        """Handle a ball that fell out of the arena."""
        sim = self._sim
        sim.lives = max(0, sim.lives - 1)
        log.info("Ball lost, %d lives left", sim.lives)

        if sim.lives == 0:
            self._set_state(GameState.GAME_OVER)
            self._record('game_over')
            return

        self._reset_paddle_and_ball(sim.ball.speed_magnitude)
        self._record('life_lost')

    def _advance_level(self) -> None:
        """Move to the next level, keeping the score."""
        sim = self._sim
        sim.level += 1
        sim.contact_flags = ContactFlags()
        sim.blocks = self._generator.generate(sim.bounds.half_width)
        self._reset_paddle_and_ball(self._config.initial_ball_speed)
        sim.bonuses = []
        log.info("Level cleared, now on level %d (score %d)", sim.level, sim.score)
        self._record('level_cleared')

    # =========================================================================
    # Frame update
    # =========================================================================

    def update(self, dt: float, frame_input: FrameInput = NO_INPUT) -> None:
        """Advance the game by one frame.

        Args:
            dt: Elapsed time in seconds (negative values count as zero)
            frame_input: Player intent sampled for this frame
        """
        if frame_input.quit:
            if not self._quit_requested:
                log.info("Quit requested in %s", self._sim.state.name)
            self._quit_requested = True
            return

        dt = max(0.0, dt)
        state = self._sim.state

        if state == GameState.MENU:
            if frame_input.confirm:
                self.start_game()
        elif state == GameState.GAME_OVER:
            if frame_input.confirm:
                self.return_to_menu()
        else:
            self._update_playing(dt, frame_input)

    def _update_playing(self, dt: float, frame_input: FrameInput) -> None:
        sim = self._sim
        config = self._config

        sim.paddle.move(frame_input.horizontal, config.paddle_speed, dt, sim.bounds)

        if sim.ball.stuck_to_paddle:
            sim.ball = sim.ball.glued_to(sim.paddle)
            if frame_input.launch:
                sim.ball = sim.ball.launch(self._rng)
                log.debug("Ball launched (vx=%.3f, vy=%.3f)", sim.ball.vx, sim.ball.vy)
        else:
            sim.ball = sim.ball.update(dt)
            self._resolve_collisions()

        # Lose before win: a simultaneous clear with no lives left is game over
        if is_ball_lost(sim.ball, sim.bounds):
            self._lose_life()
            if sim.state != GameState.PLAYING:
                return

        if sim.remaining_bricks == 0:
            if sim.lives <= 0:
                self._set_state(GameState.GAME_OVER)
                self._record('game_over')
                return
            self._advance_level()

        update_bonuses(sim, dt, config)

    def _resolve_collisions(self) -> None:
        """Walls, then paddle, then at most one brick."""
        sim = self._sim
        config = self._config

        ball, hit_ceiling = check_wall_collision(sim.ball, sim.bounds)
        if hit_ceiling and not sim.paddle_shrunk:
            sim.paddle_shrunk = True
            sim.paddle.set_width(sim.paddle.width * CEILING_SHRINK_FACTOR, sim.bounds)
            log.debug("Ceiling hit, paddle shrunk to %.3f", sim.paddle.width)

        if check_paddle_collision(ball, sim.paddle):
            ball = ball.bounce_off_paddle(sim.paddle)

        index = find_colliding_block(ball, sim.blocks)
        if index is not None:
            block = sim.blocks[index]
            result = resolve_block_collision(ball, block, config.collision_epsilon)
            ball = result.ball
            sim.blocks[index] = result.block

            if not block.is_wall:
                if result.destroyed:
                    sim.score += block.points
                    if block.is_bonus:
                        sim.bonuses.append(spawn_bonus(block, config))
                        log.debug("Bonus %s dropped", block.bonus_type.name)
                ball, sim.contact_flags = apply_speed_increase(
                    ball, block, sim.contact_flags, config
                )

        sim.ball = ball

    # =========================================================================
    # Viewport
    # =========================================================================

    def resize(self, resolution: Resolution) -> None:
        """Apply a new window size before the next frame.

        Bounds, paddle clamp and brick relayout happen together so no frame
        sees a partial resize.
        """
        sim = self._sim
        sim.bounds = compute_bounds(resolution)
        sim.paddle.clamp_to(sim.bounds)
        if sim.blocks:
            sim.blocks = self._generator.relayout(sim.blocks, sim.bounds.half_width)
        if sim.ball.stuck_to_paddle:
            sim.ball = sim.ball.glued_to(sim.paddle)
        log.debug("Resized to %s, bounds %.3f x %.3f",
                  resolution, sim.bounds.half_width, sim.bounds.half_height)
