"""
Viewport Tests

Tests for arena half-extents computed from the window aspect ratio.

Run with: pytest tests/test_viewport.py -v
"""

import pytest
from pydantic import ValidationError

from models import Resolution
from breakout.game.viewport import ArenaBounds, compute_bounds


class TestComputeBounds:
    """Shorter window axis always maps to [-1, 1]."""

    def test_landscape(self):
        bounds = compute_bounds(Resolution(width=960, height=540))
        assert bounds.half_width == pytest.approx(960 / 540)
        assert bounds.half_height == 1.0

    def test_portrait(self):
        bounds = compute_bounds(Resolution(width=500, height=1000))
        assert bounds.half_width == 1.0
        assert bounds.half_height == pytest.approx(2.0)

    def test_square(self):
        assert compute_bounds(Resolution(width=600, height=600)) == ArenaBounds(1.0, 1.0)

    def test_edges(self):
        bounds = ArenaBounds(half_width=1.5, half_height=1.0)
        assert (bounds.left, bounds.right, bounds.bottom, bounds.top) == (-1.5, 1.5, -1.0, 1.0)

    def test_zero_size_rejected(self):
        with pytest.raises(ValidationError):
            Resolution(width=0, height=540)
