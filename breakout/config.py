"""Configuration for Breakout.

Contains window defaults, color tables, and loading of tuning values
from YAML into a validated BreakoutConfig.
"""

import os
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from models import Color
from models.breakout import BreakoutConfig, BrickColor, BonusType

# Window defaults (can be overridden on the command line)
WINDOW_WIDTH: int = 960
WINDOW_HEIGHT: int = 540
WINDOW_TITLE: str = "Breakout"
TARGET_FPS: int = 60

# Environment variable naming a YAML config file
CONFIG_ENV_VAR: str = "BREAKOUT_CONFIG"

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (26, 26, 31)
HUD_COLOR: Tuple[int, int, int] = (255, 255, 255)
TITLE_COLOR: Tuple[int, int, int] = (153, 153, 255)
GAME_OVER_COLOR: Tuple[int, int, int] = (255, 50, 50)

# Counter bricks are drawn at this intensity until their first hit
DARKEN_FACTOR: float = 0.7

BRICK_COLORS: Dict[BrickColor, Color] = {
    BrickColor.RED: Color.from_floats(1.0, 0.2, 0.2),
    BrickColor.ORANGE: Color.from_floats(1.0, 0.6, 0.2),
    BrickColor.GREEN: Color.from_floats(0.2, 1.0, 0.2),
    BrickColor.YELLOW: Color.from_floats(1.0, 1.0, 0.2),
    BrickColor.GRAY: Color.from_floats(0.5, 0.5, 0.5),
    BrickColor.WHITE: Color.from_floats(1.0, 1.0, 1.0),
    BrickColor.PADDLE: Color.from_floats(0.8, 0.8, 0.8),
    BrickColor.BALL: Color.from_floats(1.0, 1.0, 1.0),
}

BONUS_COLORS: Dict[BonusType, Color] = {
    BonusType.LIFE_ADD: Color.from_floats(0.2, 1.0, 0.2),
    BonusType.LIFE_REMOVE: Color.from_floats(1.0, 0.2, 0.2),
    BonusType.PADDLE_WIDEN: Color.from_floats(0.2, 0.8, 1.0),
    BonusType.PADDLE_SHRINK: Color.from_floats(1.0, 0.5, 0.0),
    BonusType.BALL_SLOW: Color.from_floats(1.0, 1.0, 0.2),
    BonusType.BALL_FAST: Color.from_floats(0.8, 0.2, 1.0),
    BonusType.BALL_STRAIGHTEN: Color.from_floats(1.0, 1.0, 1.0),
    BonusType.BALL_ANGLE: Color.from_floats(0.6, 0.6, 0.6),
}


def get_color(color_type: BrickColor, darker: bool = False) -> Color:
    """Get the render color for a logical color channel.

    Args:
        color_type: Logical channel of the brick/paddle/ball
        darker: Return the darkened variant used by counter bricks
    """
    color = BRICK_COLORS[color_type]
    if darker:
        return color.darkened(DARKEN_FACTOR)
    return color


class ConfigError(Exception):
    """Raised when a config file cannot be read or fails validation."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        location = f" ({path})" if path else ""
        super().__init__(f"{message}{location}")


def load_config(path: Optional[Union[str, Path]] = None) -> BreakoutConfig:
    """Load tuning values from a YAML file.

    With no path, the file named by $BREAKOUT_CONFIG is used if set;
    otherwise the built-in defaults are returned. Keys missing from the
    file keep their defaults.

    Args:
        path: YAML file holding a mapping of BreakoutConfig fields

    Returns:
        Validated BreakoutConfig

    Raises:
        ConfigError: If the file is missing, unparsable, or invalid
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return BreakoutConfig()
        path = env_path

    path = Path(path).expanduser()
    if not path.exists():
        raise ConfigError("Config file not found", path)

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", path) from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Config must be a mapping, got {type(data).__name__}", path
        )

    try:
        return BreakoutConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config values: {e}", path) from e
