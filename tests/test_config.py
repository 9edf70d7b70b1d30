"""
Configuration Tests

Tests for the pydantic models, the color tables and YAML config loading.

Run with: pytest tests/test_config.py -v
"""

import pytest
from pydantic import ValidationError

from models import Color, Rectangle
from models.breakout import BreakoutConfig, BrickColor
from breakout.config import (
    CONFIG_ENV_VAR,
    DARKEN_FACTOR,
    ConfigError,
    get_color,
    load_config,
)


class TestPrimitives:
    """Test shared pydantic primitives."""

    def test_color_range_validated(self):
        with pytest.raises(ValidationError):
            Color(r=256, g=0, b=0)

    def test_color_from_floats(self):
        assert Color.from_floats(1.0, 0.0, 0.2).as_tuple == (255, 0, 51, 255)

    def test_color_darkened_keeps_alpha(self):
        color = Color(r=100, g=200, b=10, a=128).darkened(0.5)
        assert color.as_tuple == (50, 100, 5, 128)

    def test_rectangle_rejects_negative_size(self):
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=-1.0, height=1.0)

    def test_rectangle_edges(self):
        rect = Rectangle(x=-0.5, y=0.25, width=1.0, height=0.5)
        assert (rect.left, rect.right, rect.bottom, rect.top) == (-0.5, 0.5, 0.25, 0.75)


class TestBreakoutConfig:
    """Test tuning defaults and validation."""

    def test_defaults(self):
        config = BreakoutConfig()
        assert (config.brick_rows, config.bricks_per_row) == (8, 14)
        assert config.speed_up_hit_counts == (4, 12)
        assert config.speed_increment == 1.19
        assert config.ball_size == pytest.approx(0.04)
        assert config.bonus_size == pytest.approx(0.03)
        assert (config.starting_lives, config.max_lives) == (3, 5)

    def test_frozen(self):
        config = BreakoutConfig()
        with pytest.raises(ValidationError):
            config.brick_rows = 3

    def test_too_few_columns(self):
        with pytest.raises(ValidationError):
            BreakoutConfig(bricks_per_row=3)

    def test_starting_lives_above_cap(self):
        with pytest.raises(ValidationError):
            BreakoutConfig(starting_lives=6, max_lives=5)

    def test_speed_increment_must_grow(self):
        with pytest.raises(ValidationError):
            BreakoutConfig(speed_increment=1.0)

    def test_hit_counts_positive(self):
        with pytest.raises(ValidationError):
            BreakoutConfig(speed_up_hit_counts=(0, 4))

    def test_gaps_fill_the_row(self):
        with pytest.raises(ValidationError):
            BreakoutConfig(bricks_per_row=150, brick_gap=0.02)

    def test_wide_grid_with_room_for_bricks(self):
        config = BreakoutConfig(bricks_per_row=100, brick_gap=0.01)
        assert config.bricks_per_row == 100


class TestColors:
    """Test the logical color tables."""

    def test_darker_variant(self):
        base = get_color(BrickColor.RED)
        assert get_color(BrickColor.RED, darker=True) == base.darkened(DARKEN_FACTOR)

    def test_every_channel_has_a_color(self):
        for channel in BrickColor:
            assert isinstance(get_color(channel), Color)


class TestLoadConfig:
    """Test YAML loading and error wrapping."""

    def test_defaults_without_path(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert load_config() == BreakoutConfig()

    def test_partial_file(self, tmp_path):
        path = tmp_path / "tuning.yaml"
        path.write_text("paddle_speed: 2.5\nspeed_up_hit_counts: [3, 9]\n")

        config = load_config(path)

        assert config.paddle_speed == 2.5
        assert config.speed_up_hit_counts == (3, 9)
        assert config.brick_rows == 8

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == BreakoutConfig()

    def test_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "env.yaml"
        path.write_text("starting_lives: 5\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config().starting_lives == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.yaml")
        assert exc_info.value.path == tmp_path / "nope.yaml"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("paddle_speed: [1, 2\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("brick_rows: 0\n")
        with pytest.raises(ConfigError, match="Invalid config values"):
            load_config(path)
