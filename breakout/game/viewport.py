"""Viewport adapter: world half-extents from the window's aspect ratio.

The shorter window axis always maps to world range [-1, 1]; the longer
axis is stretched by the aspect ratio.
"""

from dataclasses import dataclass

from models import Resolution


@dataclass(frozen=True)
class ArenaBounds:
    """Half-extents of the playable arena, centred on the origin."""

    half_width: float = 1.0
    half_height: float = 1.0

    @property
    def left(self) -> float:
        return -self.half_width

    @property
    def right(self) -> float:
        return self.half_width

    @property
    def bottom(self) -> float:
        return -self.half_height

    @property
    def top(self) -> float:
        return self.half_height


def compute_bounds(resolution: Resolution) -> ArenaBounds:
    """Compute arena half-extents for a window size.

    Examples:
        >>> compute_bounds(Resolution(width=960, height=540))
        ArenaBounds(half_width=1.7777777777777777, half_height=1.0)
        >>> compute_bounds(Resolution(width=500, height=1000))
        ArenaBounds(half_width=1.0, half_height=2.0)
    """
    aspect = resolution.aspect_ratio
    if resolution.width >= resolution.height:
        return ArenaBounds(half_width=aspect, half_height=1.0)
    return ArenaBounds(half_width=1.0, half_height=1.0 / aspect)
