"""The playing field: walls, bricks, the paddle and the ball."""

from __future__ import annotations

from typing import Any, Optional

from arkanoid.ball import Ball
from arkanoid.block import Block, BlockType
from arkanoid.config import CELL_COUNT, COL_NUM, ROW_NUM
from arkanoid.game_object import GameObject
from arkanoid.geometry import Color, Point, Rect
from arkanoid.input import InputKey, InputState
from arkanoid.level_manager import LevelManager, default_level_manager
from arkanoid.paddle import Paddle
from arkanoid.score_manager import ScoreManager, default_score_manager


class Level(GameObject):
    """Owns every object in play and resolves their collisions."""

    BORDER_COLOR = Color(125, 125, 125, 255)

    def __init__(
        self,
        level_manager: Optional[LevelManager] = None,
        score_manager: Optional[ScoreManager] = None,
    ) -> None:
        super().__init__()
        self._level_manager = level_manager if level_manager is not None else default_level_manager()
        self._score_manager = score_manager if score_manager is not None else default_score_manager()
        self.border_size = 5.0
        self.paddle = Paddle()
        self.ball = Ball()
        self._blocks: list[Optional[Block]] = [None] * CELL_COUNT
        self._alive_blocks = 0
        self._lives = 3
        self._level = 1

    @property
    def rect(self) -> Rect:
        return GameObject.rect.fget(self)

    @rect.setter
    def rect(self, rect: Rect) -> None:
        border = self.border_size
        GameObject.rect.fset(
            self,
            Rect(rect.x + border, rect.y + border, rect.width - 2.0 * border, rect.height - 2.0 * border),
        )

    @property
    def blocks(self) -> tuple[Optional[Block], ...]:
        """The brick in every grid cell, None where the cell is empty."""
        return tuple(self._blocks)

    @property
    def current_level(self) -> int:
        return self._level

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def alive_blocks(self) -> int:
        return self._alive_blocks

    def _reset_paddle(self) -> None:
        self.paddle.center = Point(
            self.position.x + self.aabb.radius[0], self.size.height - self.paddle.height
        )
        self.ball.attach_to(self.paddle)

    def start_game(self, level: int = 1) -> bool:
        """Lay out the bricks of ``level``; False if there is no such level."""
        if level > self._level_manager.level_count:
            return False
        self._level = level
        self._reset_paddle()

        offset = 2.0
        border = self.border_size
        left = self.position.x + border + offset
        top = self.position.y + border + offset
        brick_width = (self.size.width - 2.0 * border - offset) / COL_NUM
        brick_height = (self.size.height - 2.0 * border - offset) / ROW_NUM

        schema = self._level_manager.level_schema(level)
        for index, code in enumerate(schema):
            block_type = BlockType(code)
            if block_type == BlockType.UNKNOWN:
                continue
            row, column = divmod(index, COL_NUM)
            block = Block(block_type)
            block.rect = Rect(
                left + column * brick_width,
                top + row * brick_height,
                brick_width - offset,
                brick_height - offset,
            )
            self._blocks[index] = block
            self._alive_blocks += 1
        return True

    def setup_player_input(self, input_handler: Any) -> None:
        input_handler.bind_key(InputKey.SPACE, self.release_ball)
        self.paddle.setup_player_input(input_handler)

    def release_ball(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self.ball.detach()

    def update(self, delta_time: float) -> None:
        self.paddle.update(delta_time)
        self._keep_inside(self.paddle)
        self.ball.update(delta_time)
        self._keep_inside(self.ball)

        if self.ball.should_be_destroyed:
            self._reset_paddle()
            self._lives -= 1

        self._check_collision()

    def _check_collision(self) -> None:
        ball_box = self.ball.aabb
        if ball_box.test(self.paddle.aabb):
            self.ball.on_collision_enter(self.paddle)
            self.paddle.on_collision_enter(self.ball)
            return

        for index, block in reversed(list(enumerate(self._blocks))):
            if block is None or not ball_box.test(block.aabb):
                continue
            block.on_collision_enter(self.ball)
            self.ball.on_collision_enter(block)
            if block.should_be_destroyed:
                score = block.score
                if block.block_type == BlockType.SILVER:
                    score *= self._level
                self._score_manager.update_score(score)
                self._alive_blocks -= 1
                self._blocks[index] = None
            break

    def _keep_inside(self, obj: GameObject) -> None:
        box = obj.aabb
        half_width, half_height = box.radius
        x, y = box.center.x, box.center.y
        right = self.position.x + self.size.width
        bottom = self.position.y + self.size.height
        collided = False

        if box.center.x - half_width < self.position.x:
            x = self.position.x + half_width
            collided = True
        elif box.center.x + half_width > right:
            x = right - half_width
            collided = True

        if box.center.y - half_height < self.position.y:
            y = self.position.y + half_height
            collided = True
        elif box.center.y + half_height >= bottom:
            y = bottom - half_height
            collided = True

        if collided:
            obj.center = Point(x, y)
            obj.on_collision_enter(self)

    def finish(self) -> None:
        """End the game, recording the score as the high score if it beats it."""
        self._score_manager.finish_game()

    def draw(self, renderer: Any) -> None:
        border = self.border_size
        position, size = self.position, self.size
        renderer.set_color(self.BORDER_COLOR)
        renderer.fill_rect(
            Rect(position.x - border, position.y - border, border, size.height + 2.0 * border)
        )
        renderer.fill_rect(
            Rect(position.x - border, position.y - border, size.width + 2.0 * border, border)
        )
        renderer.fill_rect(
            Rect(position.x + size.width, position.y - border, border, size.height + 2.0 * border)
        )
        renderer.fill_rect(
            Rect(position.x - border, position.y + size.height, size.width + 2.0 * border, border)
        )

        for block in self._blocks:
            if block is not None:
                block.draw(renderer)

        self.ball.draw(renderer)
        self.paddle.draw(renderer)