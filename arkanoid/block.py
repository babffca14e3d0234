"""Breakable bricks that make up a level."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from arkanoid.game_object import GameObject
from arkanoid.geometry import Color, Rect


class BlockType(IntEnum):
    """Kinds of brick; the value is the code stored in level files."""

    UNKNOWN = 0
    WHITE = 1
    ORANGE = 2
    LIGHT_BLUE = 3
    GREEN = 4
    RED = 5
    BLUE = 6
    PINK = 7
    YELLOW = 8
    SILVER = 9
    GOLD = 10


@dataclass(frozen=True)
class _BlockSettings:
    health: int
    score: int
    main_color: Color
    second_color: Color = Color()


_BLOCK_SETTINGS = {
    BlockType.UNKNOWN: _BlockSettings(0, 0, Color()),
    BlockType.WHITE: _BlockSettings(1, 50, Color(252, 252, 252, 255)),
    BlockType.ORANGE: _BlockSettings(1, 60, Color(252, 116, 96, 255)),
    BlockType.LIGHT_BLUE: _BlockSettings(1, 70, Color(60, 188, 252, 255)),
    BlockType.GREEN: _BlockSettings(1, 80, Color(128, 208, 16, 255)),
    BlockType.RED: _BlockSettings(1, 90, Color(216, 40, 0, 255)),
    BlockType.BLUE: _BlockSettings(1, 100, Color(0, 112, 236, 255)),
    BlockType.PINK: _BlockSettings(1, 110, Color(252, 116, 180, 255)),
    BlockType.YELLOW: _BlockSettings(1, 120, Color(252, 152, 56, 255)),
    BlockType.SILVER: _BlockSettings(
        2, 50, Color(148, 148, 148, 255), Color(188, 188, 188, 255)
    ),
    BlockType.GOLD: _BlockSettings(2, 0, Color(200, 148, 20, 255), Color(240, 188, 60, 255)),
}

_INNER_OFFSET = 3.0


class Block(GameObject):
    """A brick that loses health on every hit; gold bricks never break."""

    def __init__(self, block_type: BlockType) -> None:
        super().__init__()
        self._type = BlockType(block_type)
        settings = _BLOCK_SETTINGS[self._type]
        self._health = settings.health
        self._score = settings.score
        self.main_color = settings.main_color
        self.second_color = settings.second_color

    @property
    def block_type(self) -> BlockType:
        return self._type

    @property
    def score(self) -> int:
        return self._score

    @property
    def health(self) -> int:
        return self._health

    def on_collision_enter(self, other: GameObject) -> None:
        if self._type != BlockType.GOLD:
            self._health -= 1

    @property
    def should_be_destroyed(self) -> bool:
        return self._health == 0

    def draw(self, renderer: Any) -> None:
        renderer.set_color(self.main_color)
        renderer.fill_rect(self.rect)
        if self._health > 1:
            position, size = self.position, self.size
            renderer.set_color(self.second_color)
            renderer.fill_rect(
                Rect(
                    position.x + _INNER_OFFSET,
                    position.y + _INNER_OFFSET,
                    size.width - 2.0 * _INNER_OFFSET,
                    size.height - 2.0 * _INNER_OFFSET,
                )
            )