"""Base class for everything placed in the game world."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from arkanoid.geometry import AABB, Point, Rect, Size


class GameObject(ABC):
    """An object with a position, size and matching bounding box."""

    def __init__(self) -> None:
        self._position = Point()
        self._size = Size()
        self._aabb = AABB()

    def setup_player_input(self, input_handler: Any) -> None:
        """Bind player controls; objects without controls bind nothing."""

    def update(self, delta_time: float) -> None:
        """Advance the object by ``delta_time`` seconds; static by default."""

    @abstractmethod
    def draw(self, renderer: Any) -> None:
        """Draw the object with ``renderer``."""

    def on_collision_enter(self, other: GameObject) -> None:
        """React to touching ``other``; ignored by default."""

    @property
    def should_be_destroyed(self) -> bool:
        return False

    @property
    def rect(self) -> Rect:
        return Rect.from_point_size(self._position, self._size)

    @rect.setter
    def rect(self, rect: Rect) -> None:
        self.size = Size(rect.width, rect.height)
        self.position = Point(rect.x, rect.y)

    @property
    def size(self) -> Size:
        return self._size

    @size.setter
    def size(self, size: Size) -> None:
        self._size = size
        self._aabb = AABB(self._aabb.center, (size.width * 0.5, size.height * 0.5))

    @property
    def position(self) -> Point:
        return self._position

    @position.setter
    def position(self, position: Point) -> None:
        self._position = position
        radius = self._aabb.radius
        self._aabb = AABB(Point(position.x + radius[0], position.y + radius[1]), radius)

    @property
    def center(self) -> Point:
        return self._aabb.center

    @center.setter
    def center(self, point: Point) -> None:
        radius = self._aabb.radius
        self._position = Point(point.x - radius[0], point.y - radius[1])
        self._aabb = AABB(point, radius)

    @property
    def width(self) -> float:
        return self._size.width

    @property
    def height(self) -> float:
        return self._size.height

    @property
    def aabb(self) -> AABB:
        return self._aabb