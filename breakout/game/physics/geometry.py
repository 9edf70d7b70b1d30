"""Axis-aligned bounding boxes and the overlap test shared by all resolvers."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Box:
    """Axis-aligned box anchored at its bottom-left corner (y up)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    def moved_to(self, x: float, y: float) -> 'Box':
        """Return a copy with the bottom-left corner at (x, y)."""
        return replace(self, x=x, y=y)

    def resized(self, width: float, height: float) -> 'Box':
        """Return a copy with a new size and the same corner."""
        return replace(self, width=width, height=height)


def overlaps(a: Box, b: Box) -> bool:
    """Check whether two boxes intersect on both axes.

    Intervals are closed, so boxes that only share an edge overlap. A ball
    that lands exactly on the paddle top is caught in the same frame.
    """
    return (a.left <= b.right and b.left <= a.right and
            a.bottom <= b.top and b.bottom <= a.top)
