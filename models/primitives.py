"""
Shared primitive data types for the breakout game.

This module provides the basic geometric and color types used by the
simulation snapshot, the viewport adapter and the pygame skins.

World coordinates are centred on the arena: x grows to the right, y grows
upward, and rectangles are anchored at their bottom-left corner.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Resolution(BaseModel):
    """Window or framebuffer size in pixels.

    Attributes:
        width: Width in pixels (at least 1)
        height: Height in pixels (at least 1)

    Examples:
        >>> Resolution(width=960, height=540).aspect_ratio
        1.7777777777777777
    """
    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio (width / height)."""
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha component (0-255), where 255 is fully opaque
    """
    r: int
    g: int
    b: int
    a: int = 255

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> 'Color':
        """Build a color from normalized [0, 1] channel intensities."""
        return cls(
            r=round(r * 255),
            g=round(g * 255),
            b=round(b * 255),
            a=round(a * 255),
        )

    def darkened(self, factor: float) -> 'Color':
        """Return a copy with RGB scaled by factor (alpha untouched).

        Args:
            factor: Intensity multiplier in [0, 1]
        """
        return Color(
            r=round(self.r * factor),
            g=round(self.g * factor),
            b=round(self.b * factor),
            a=self.a,
        )

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable rectangle defined by its bottom-left corner and size.

    Used for the drawable snapshot handed to the presentation layer.

    Attributes:
        x: X coordinate of bottom-left corner
        y: Y coordinate of bottom-left corner
        width: Width of rectangle (non-negative)
        height: Height of rectangle (non-negative)

    Examples:
        >>> rect = Rectangle(x=-0.125, y=-0.9, width=0.25, height=0.04)
        >>> rect.right
        0.125
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_dimensions(cls, v: float) -> float:
        """Validate dimensions are non-negative."""
        if v < 0:
            raise ValueError(f'Rectangle dimensions must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y + self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.3f}, y={self.y:.3f}, w={self.width:.3f}, h={self.height:.3f})"
