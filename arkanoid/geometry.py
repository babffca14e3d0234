"""Basic value types: colours, points, sizes, rectangles and bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0


@dataclass(frozen=True)
class Point:
    """A point in screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    """A width and height pair."""

    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_point_size(cls, point: Point, size: Size) -> Rect:
        return cls(point.x, point.y, size.width, size.height)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap; touching edges do not count."""
        return (
            self.left < other.right
            and self.top < other.bottom
            and self.right > other.left
            and self.bottom > other.top
        )


@dataclass(frozen=True)
class AABB:
    """An axis-aligned bounding box given by its centre and half extents."""

    center: Point = field(default_factory=Point)
    radius: tuple[float, float] = (0.0, 0.0)

    def test(self, other: AABB) -> bool:
        """Return True if the boxes overlap or touch."""
        if abs(self.center.x - other.center.x) > self.radius[0] + other.radius[0]:
            return False
        if abs(self.center.y - other.center.y) > self.radius[1] + other.radius[1]:
            return False
        return True