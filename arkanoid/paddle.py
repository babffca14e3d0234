"""The player-controlled paddle."""

from __future__ import annotations

from typing import Any

from arkanoid.game_object import GameObject
from arkanoid.geometry import Color, Point, Rect, Size
from arkanoid.input import InputKey, InputState


class Paddle(GameObject):
    """A paddle moved left and right with the arrow keys."""

    SPEED = 500.0
    BACKGROUND_COLOR = Color(120, 120, 120, 255)
    FOREGROUND_COLOR = Color(150, 150, 150, 255)

    def __init__(self) -> None:
        super().__init__()
        self.size = Size(80.0, 14.0)
        self.gun_color = Color(80, 80, 80, 255)
        self.has_gun = False
        self._move_speed = 0.0

    @property
    def move_speed(self) -> float:
        return self._move_speed

    def setup_player_input(self, input_handler: Any) -> None:
        input_handler.bind_key(InputKey.LEFT_ARROW, self.move_left)
        input_handler.bind_key(InputKey.RIGHT_ARROW, self.move_right)

    def move_right(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self._move_speed = self.SPEED
        elif state == InputState.RELEASED:
            self._move_speed = 0.0

    def move_left(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self._move_speed = -self.SPEED
        elif state == InputState.RELEASED:
            self._move_speed = 0.0

    def update(self, delta_time: float) -> None:
        if self._move_speed != 0.0:
            position = self.position
            self.position = Point(position.x + self._move_speed * delta_time, position.y)

    def draw(self, renderer: Any) -> None:
        position, size = self.position, self.size
        half_height = self.aabb.radius[1]
        center_y = self.center.y
        left_cap = Point(position.x + half_height, center_y)
        right_cap = Point(position.x + size.width - half_height - 1.0, center_y)

        renderer.set_color(self.BACKGROUND_COLOR)
        renderer.fill_circle(left_cap, half_height)
        renderer.fill_circle(right_cap, half_height)
        renderer.fill_rect(
            Rect(position.x + half_height, position.y, size.width - size.height, size.height + 1.0)
        )

        offset = 2.0
        renderer.set_color(self.FOREGROUND_COLOR)
        renderer.fill_circle(left_cap, half_height - offset)
        renderer.fill_circle(right_cap, half_height - offset)
        renderer.fill_rect(
            Rect(
                position.x + half_height + offset,
                position.y + offset,
                size.width - size.height - 2.0 * offset,
                size.height + 1.0 - 2.0 * offset,
            )
        )

        if self.has_gun:
            gun_width = size.width * 0.125
            gun_height = size.height * 0.25
            half_gun_width = gun_width * 0.5
            half_gun_height = gun_height * 0.5

            renderer.set_color(self.gun_color)
            renderer.fill_rect(Rect(position.x, position.y - gun_height, gun_width, gun_height))
            renderer.fill_rect(
                Rect(
                    position.x + (half_gun_width - half_gun_height),
                    position.y - gun_width,
                    gun_height,
                    gun_width,
                )
            )
            renderer.fill_rect(
                Rect(
                    position.x + size.width - gun_width,
                    position.y - gun_height,
                    gun_width,
                    gun_height,
                )
            )
            renderer.fill_rect(
                Rect(
                    position.x + size.width - (half_gun_width + half_gun_height),
                    position.y - gun_width,
                    gun_height,
                    gun_width,
                )
            )