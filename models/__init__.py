"""
Models library for the Breakout project.

This package provides the Pydantic data models shared across the game:
- Primitives: Color, Rectangle and Resolution
- Breakout: Brick/bonus enums and the validated tuning configuration

Usage:
    >>> from models import Resolution, Color
    >>> from models.breakout import BreakoutConfig, BonusType
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Resolution,
    Color,
    Rectangle,
)

# Top-level exports - most commonly used models
__all__ = [
    "Resolution",
    "Color",
    "Rectangle",
]
