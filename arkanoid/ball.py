"""The ball that bounces around the level."""

from __future__ import annotations

import math
import weakref
from typing import Any, Optional

from arkanoid.game_object import GameObject
from arkanoid.geometry import Color, Point, Size

UP_DIRECTION = Point(0.0, -1.0)


class Ball(GameObject):
    """A ball that either rides on a parent object or flies freely."""

    SPEED = 600.0
    BACKGROUND_COLOR = Color(100, 100, 100, 255)
    MIDDLE_COLOR = Color(125, 125, 125, 255)
    FOREGROUND_COLOR = Color(150, 150, 150, 255)

    def __init__(self) -> None:
        super().__init__()
        self.size = Size(14.0, 14.0)
        self._parent: Optional[weakref.ref] = None
        self._destroyed = False
        self._direction = UP_DIRECTION

    @property
    def direction(self) -> Point:
        """Unit vector of the ball's flight."""
        return self._direction

    @property
    def parent(self) -> Optional[GameObject]:
        return self._parent() if self._parent is not None else None

    def update(self, delta_time: float) -> None:
        parent = self.parent
        if parent is not None:
            box = parent.aabb
            self.center = Point(
                box.center.x, box.center.y - box.radius[1] - self.aabb.radius[1] - 1.0
            )
        else:
            position = self.position
            step = self.SPEED * delta_time
            self.position = Point(
                position.x + step * self._direction.x, position.y + step * self._direction.y
            )

    def on_collision_enter(self, other: GameObject) -> None:
        from arkanoid.level import Level

        center = self.aabb.center
        if not isinstance(other, Level):
            dx = (center.x - other.center.x) / other.width
            dy = -1.0 if self._direction.y > 0 else 1.0
            length = math.hypot(dx, dy)
            self._direction = Point(dx / length, dy / length)
            return

        radius = self.aabb.radius[0]
        bounds = other.position
        dx, dy = self._direction.x, self._direction.y
        if center.x - radius <= bounds.x or center.x + radius >= bounds.x + other.width:
            dx = -dx
        if center.y - radius <= bounds.y:
            dy = -dy
        elif center.y + radius >= bounds.y + other.height:
            self._destroyed = True
        self._direction = Point(dx, dy)

    @property
    def should_be_destroyed(self) -> bool:
        return self._destroyed

    def attach_to(self, parent: GameObject) -> None:
        """Ride on ``parent``, ready to be launched straight up."""
        self._parent = weakref.ref(parent)
        self._destroyed = False
        self._direction = UP_DIRECTION

    def detach(self) -> None:
        self._parent = None

    def draw(self, renderer: Any) -> None:
        radius = self.aabb.radius[0]
        center = self.aabb.center
        renderer.set_color(self.BACKGROUND_COLOR)
        renderer.fill_circle(center, radius)
        renderer.set_color(self.MIDDLE_COLOR)
        renderer.fill_circle(Point(center.x - 2.0, center.y - 2.5), radius * 0.5)
        renderer.set_color(self.FOREGROUND_COLOR)
        renderer.fill_circle(Point(center.x - 4.0, center.y - 3.0), radius * 0.25)