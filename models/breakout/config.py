"""
Pydantic v2 model for breakout tuning values.

Every constant the simulation reads lives here so a YAML file can
override it. Values are in world units (the shorter window axis spans
[-1, 1]) and seconds.
"""

from typing import Tuple
from pydantic import BaseModel, Field, field_validator, model_validator


class BreakoutConfig(BaseModel):
    """
    Validated tuning values for a breakout run.

    Defaults reproduce the reference game: an 8x14 brick grid, a paddle a
    quarter unit wide near the bottom edge, and a ball that starts at one
    unit per second.
    """
    model_config = {"frozen": True}

    # Brick grid
    brick_rows: int = Field(default=8, ge=1, description="Number of brick rows")
    bricks_per_row: int = Field(
        default=14,
        ge=4,
        description="Bricks per row; four edge columns hold the top-row walls"
    )
    brick_height: float = Field(default=0.06, gt=0.0)
    brick_gap: float = Field(default=0.01, ge=0.0)
    brick_start_y: float = Field(
        default=0.85,
        description="Bottom edge of the top row"
    )
    layout_seed: int = Field(
        default=42,
        description="Seed for bonus/counter column placement"
    )

    # Paddle
    paddle_width: float = Field(default=0.25, gt=0.0)
    paddle_height: float = Field(default=0.04, gt=0.0)
    paddle_y: float = Field(default=-0.9, description="Bottom edge of the paddle")
    paddle_speed: float = Field(default=1.5, gt=0.0)

    # Ball
    ball_radius: float = Field(default=0.02, gt=0.0)
    initial_ball_speed: float = Field(default=1.0, gt=0.0)
    speed_increment: float = Field(
        default=1.19,
        gt=1.0,
        description="Multiplier applied on every speed bump"
    )
    speed_up_hit_counts: Tuple[int, ...] = Field(
        default=(4, 12),
        description="Brick hit counts that each trigger one speed bump"
    )
    collision_epsilon: float = Field(default=0.001, ge=0.0)

    # Bonuses
    bonus_fall_speed: float = Field(default=1.0, gt=0.0)
    bonus_size_factor: float = Field(
        default=1.5,
        gt=0.0,
        description="Bonus edge length as a multiple of the ball radius"
    )

    # Lives
    starting_lives: int = Field(default=3, ge=1)
    max_lives: int = Field(default=5, ge=1)

    @field_validator('speed_up_hit_counts')
    @classmethod
    def validate_hit_counts(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Hit-count triggers must be positive."""
        if any(count < 1 for count in v):
            raise ValueError(f'speed_up_hit_counts must be positive, got {v}')
        return v

    @model_validator(mode='after')
    def validate_lives(self) -> 'BreakoutConfig':
        """Starting lives cannot exceed the cap."""
        if self.starting_lives > self.max_lives:
            raise ValueError(
                f"starting_lives ({self.starting_lives}) exceeds max_lives ({self.max_lives})"
            )
        return self

    @model_validator(mode='after')
    def validate_grid_fits(self) -> 'BreakoutConfig':
        """Row gaps must leave room for bricks in the narrowest arena (2 units)."""
        total_gap = (self.bricks_per_row - 1) * self.brick_gap
        if total_gap >= 2.0:
            raise ValueError(
                f"{self.bricks_per_row} bricks with gap {self.brick_gap} "
                f"leave no room for bricks (total gap {total_gap:.3f})"
            )
        return self

    @property
    def ball_size(self) -> float:
        """Edge length of the ball's bounding box."""
        return self.ball_radius * 2.0

    @property
    def bonus_size(self) -> float:
        """Edge length of a falling bonus."""
        return self.ball_radius * self.bonus_size_factor
