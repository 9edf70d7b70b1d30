"""
Game Mode Tests

Tests for the Menu -> Playing -> GameOver state machine and the frame update.

Run with: pytest tests/test_game_mode.py -v
"""

import random
from dataclasses import replace
from unittest.mock import patch

import pytest

from models import Resolution
from models.breakout import BonusType
from breakout.game_mode import BreakoutGame
from breakout.game_state import GameState
from breakout.game.bonuses import spawn_bonus
from breakout.game.entities import INDESTRUCTIBLE
from breakout.input import FrameInput


DT = 1 / 60
CONFIRM = FrameInput(confirm=True)
LAUNCH = FrameInput(launch=True)
QUIT = FrameInput(quit=True)


def _clear_board(sim):
    sim.blocks = [
        block if block.is_wall else replace(block, active=False, hit_counter=0)
        for block in sim.blocks
    ]


class TestStateMachine:
    """Test top-level transitions."""

    def test_starts_in_menu(self, game):
        assert game.state == GameState.MENU
        assert game.simulation.blocks == []

    def test_confirm_starts_game(self, game, config):
        game.update(DT, CONFIRM)

        assert game.state == GameState.PLAYING
        assert game.score == 0
        assert game.lives == config.starting_lives
        assert game.level == 1
        assert len(game.simulation.blocks) == config.brick_rows * config.bricks_per_row
        assert game.simulation.ball.stuck_to_paddle

    def test_menu_ignores_other_input(self, game):
        game.update(DT, LAUNCH)
        assert game.state == GameState.MENU

    def test_start_resets_previous_game(self, playing_game, config):
        sim = playing_game.simulation
        sim.score = 99
        sim.level = 4
        sim.paddle_shrunk = True
        sim.bonuses.append(spawn_bonus(next(b for b in sim.blocks if b.is_bonus), config))

        playing_game.start_game()

        assert (sim.score, sim.level, sim.paddle_shrunk) == (0, 1, False)
        assert sim.bonuses == []
        assert sim.contact_flags.first_contact_red
        assert sim.paddle.width == config.paddle_width

    def test_game_over_confirm_returns_to_menu(self, playing_game):
        playing_game.simulation.state = GameState.GAME_OVER
        playing_game.update(DT, CONFIRM)
        assert playing_game.state == GameState.MENU

    @pytest.mark.parametrize("state", list(GameState))
    def test_quit_from_any_state(self, game, state):
        game.simulation.state = state
        game.update(DT, QUIT)
        assert game.quit_requested
        assert game.state == state


class TestPlaying:
    """Test paddle, launch and collision flow inside a frame."""

    def test_paddle_moves_and_ball_follows(self, playing_game, config):
        sim = playing_game.simulation
        start = sim.paddle.x

        playing_game.update(0.1, FrameInput(move_right=True))

        assert sim.paddle.x == pytest.approx(start + config.paddle_speed * 0.1)
        assert sim.ball.center_x == pytest.approx(sim.paddle.center_x)

    def test_negative_dt_is_ignored(self, playing_game):
        sim = playing_game.simulation
        start = sim.paddle.x
        playing_game.update(-1.0, FrameInput(move_left=True))
        assert sim.paddle.x == start

    def test_launch(self, playing_game, config):
        playing_game.update(DT, LAUNCH)
        ball = playing_game.simulation.ball

        assert not ball.stuck_to_paddle
        assert ball.vy > 0
        assert ball.speed == pytest.approx(config.initial_ball_speed)

    def test_single_brick_per_step(self, playing_game, make_ball):
        sim = playing_game.simulation
        left = sim.blocks[50]
        # Ball straddles the gap between two neighbouring bricks
        x = left.box.right - 0.01
        sim.ball = make_ball(x=x, y=left.box.bottom - 0.035, vx=0.0, vy=1.0)
        before = [b.hit_counter for b in sim.blocks]

        playing_game.update(0.0)

        after = [b.hit_counter for b in sim.blocks]
        changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
        assert changed == [50]

    def test_destroying_brick_scores_points(self, playing_game, make_ball):
        sim = playing_game.simulation
        index = next(i for i, b in enumerate(sim.blocks)
                     if b.hit_counter == 1 and not b.is_bonus and b.grid_position[0] == 7)
        block = sim.blocks[index]
        sim.ball = make_ball(x=block.box.center_x - 0.02, y=block.box.bottom - 0.035)

        playing_game.update(0.0)

        assert not sim.blocks[index].active
        assert sim.score == block.points
        assert sim.ball.vy < 0
        assert sim.ball.hit_count == 1

    def test_bonus_brick_drops_bonus(self, playing_game, make_ball):
        sim = playing_game.simulation
        index = next(i for i, b in enumerate(sim.blocks)
                     if b.is_bonus and b.grid_position[0] == 7)
        block = sim.blocks[index]
        sim.ball = make_ball(x=block.box.center_x - 0.02, y=block.box.bottom - 0.035)

        playing_game.update(0.0)

        assert len(sim.bonuses) == 1
        assert sim.bonuses[0].bonus_type == block.bonus_type
        assert isinstance(sim.bonuses[0].bonus_type, BonusType)

    def test_ceiling_halves_paddle_once(self, playing_game, make_ball, config):
        sim = playing_game.simulation
        sim.blocks = [replace(b, box=b.box.moved_to(b.box.x, -5.0)) for b in sim.blocks]
        sim.ball = make_ball(x=0.0, y=0.99, vx=0.0, vy=1.0)

        playing_game.update(0.0)
        assert sim.paddle_shrunk
        assert sim.paddle.width == pytest.approx(config.paddle_width / 2)

        sim.ball = make_ball(x=0.0, y=0.99, vx=0.0, vy=1.0)
        playing_game.update(0.0)
        assert sim.paddle.width == pytest.approx(config.paddle_width / 2)

    def test_paddle_bounce_in_frame(self, playing_game, make_ball):
        sim = playing_game.simulation
        sim.ball = make_ball(x=sim.paddle.center_x - 0.02, y=sim.paddle.top - 0.01,
                             vx=0.0, vy=-1.0)

        playing_game.update(0.0)

        assert sim.ball.vx == pytest.approx(0.0)
        assert sim.ball.vy == pytest.approx(1.0)

    def test_speed_invariant_over_long_run(self, config):
        game = BreakoutGame(config, Resolution(width=960, height=540), rng=random.Random(2024))
        game.start_game()
        steer = random.Random(99)

        for _ in range(5000):
            if game.state != GameState.PLAYING:
                break
            direction = steer.choice([
                FrameInput(launch=True),
                FrameInput(move_left=True),
                FrameInput(move_right=True),
                FrameInput(),
            ])
            game.update(DT, direction)

            ball = game.simulation.ball
            if ball.stuck_to_paddle:
                assert (ball.vx, ball.vy) == (0.0, 0.0)
            else:
                assert ball.speed == pytest.approx(ball.speed_magnitude, rel=1e-9)
            assert 0 <= game.lives <= config.max_lives


class TestLivesAndLevels:
    """Test losing the ball and clearing the board."""

    def test_lose_life_keeps_speed_and_resets_hits(self, playing_game, make_ball):
        sim = playing_game.simulation
        sim.score = 17
        sim.ball = make_ball(x=0.5, y=-1.2, vx=0.0, vy=-1.5, hit_count=6)

        playing_game.update(0.0)

        assert playing_game.state == GameState.PLAYING
        assert sim.lives == 2
        assert sim.score == 17
        assert sim.ball.stuck_to_paddle
        assert sim.ball.speed_magnitude == pytest.approx(1.5)
        assert sim.ball.hit_count == 0

    def test_life_loss_to_zero_is_game_over(self, playing_game, make_ball):
        sim = playing_game.simulation
        sim.lives = 1
        sim.ball = make_ball(x=0.5, y=-1.2, vx=0.0, vy=-1.0)

        playing_game.update(0.0)

        assert playing_game.state == GameState.GAME_OVER
        assert sim.lives == 0
        assert not sim.ball.stuck_to_paddle
        assert sim.ball.box.y == pytest.approx(-1.2)

    def test_level_clear(self, playing_game, config):
        sim = playing_game.simulation
        sim.score = 123
        sim.contact_flags = replace(sim.contact_flags, first_contact_red=False)
        _clear_board(sim)

        playing_game.update(0.0)

        assert sim.level == 2
        assert sim.score == 123
        assert sim.lives == config.starting_lives
        assert all(block.active for block in sim.blocks)
        assert sum(b.hit_counter == INDESTRUCTIBLE for b in sim.blocks) == 4
        assert all(b.is_wall for b in sim.blocks if b.hit_counter == INDESTRUCTIBLE)
        assert sim.contact_flags.first_contact_red
        assert sim.ball.stuck_to_paddle
        assert sim.ball.hit_count == 0
        assert sim.ball.speed_magnitude == config.initial_ball_speed
        assert sim.bonuses == []

    def test_clear_with_last_ball_lost_is_game_over(self, playing_game, make_ball):
        sim = playing_game.simulation
        sim.lives = 1
        _clear_board(sim)
        sim.ball = make_ball(x=0.5, y=-1.2, vx=0.0, vy=-1.0)

        playing_game.update(0.0)

        assert playing_game.state == GameState.GAME_OVER
        assert sim.level == 1

    def test_session_records_emitted(self, playing_game, make_ball):
        sim = playing_game.simulation
        sim.ball = make_ball(x=0.5, y=-1.2, vx=0.0, vy=-1.0)

        with patch('breakout.game_mode.emit_record') as emit:
            playing_game.update(0.0)

        module, record = emit.call_args[0]
        assert module == 'session'
        assert record['event'] == 'life_lost'
        assert record['lives'] == 2


class TestResize:
    """Test viewport changes."""

    def test_resize_relayouts_bricks(self, playing_game):
        sim = playing_game.simulation
        sim.blocks[60] = replace(sim.blocks[60], active=False, hit_counter=0)

        playing_game.resize(Resolution(width=600, height=600))

        assert sim.bounds.half_width == 1.0
        assert not sim.blocks[60].active
        for block in sim.blocks:
            assert block.box.left >= -1.0 - 1e-9
            assert block.box.right <= 1.0 + 1e-9
            assert block.box.top <= sim.bounds.top

    def test_resize_clamps_paddle(self, playing_game):
        sim = playing_game.simulation
        playing_game.update(10.0, FrameInput(move_right=True))

        playing_game.resize(Resolution(width=600, height=600))

        assert sim.paddle.box.right <= 1.0 + 1e-9
        assert sim.ball.center_x == pytest.approx(sim.paddle.center_x)

    def test_resize_in_menu_keeps_board_empty(self, game):
        game.resize(Resolution(width=500, height=1000))
        assert game.simulation.blocks == []
        assert game.bounds.half_height == pytest.approx(2.0)
