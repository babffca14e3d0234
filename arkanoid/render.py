"""Drawing primitives, images and text on top of pygame surfaces."""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from enum import Enum, IntEnum
from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

import pygame

from arkanoid.geometry import Color, Point, Rect

logger = logging.getLogger(__name__)


class Justify(Enum):
    """Where a drawn image sits relative to the point it is drawn at."""

    LEFT_TOP = "left_top"
    LEFT_MIDDLE = "left_middle"
    LEFT_BOTTOM = "left_bottom"
    CENTERED_TOP = "centered_top"
    CENTERED_MIDDLE = "centered_middle"
    CENTERED_BOTTOM = "centered_bottom"
    RIGHT_TOP = "right_top"
    RIGHT_MIDDLE = "right_middle"
    RIGHT_BOTTOM = "right_bottom"


# Horizontal and vertical shift, in units of image width and height.
_JUSTIFY_FACTORS = {
    Justify.LEFT_TOP: (-1.0, 0.0),
    Justify.LEFT_MIDDLE: (-1.0, -0.5),
    Justify.LEFT_BOTTOM: (-1.0, -1.0),
    Justify.CENTERED_TOP: (-0.5, 0.0),
    Justify.CENTERED_MIDDLE: (-0.5, -0.5),
    Justify.CENTERED_BOTTOM: (-0.5, -1.0),
    Justify.RIGHT_TOP: (0.0, 0.0),
    Justify.RIGHT_MIDDLE: (0.0, -0.5),
    Justify.RIGHT_BOTTOM: (0.0, -1.0),
}


def justify_offset(justify: Justify, width: float, height: float) -> Point:
    """Offset from the anchor point to the top-left corner of a ``width`` x ``height`` image.

    The horizontal part names the side of the anchor the image ends on: a
    left-justified image lies entirely left of the anchor.
    """
    fx, fy = _JUSTIFY_FACTORS[justify]
    return Point(width * fx, height * fy)


def _midpoint_offsets(radius: float) -> Iterator[tuple[float, float]]:
    offset_x = 0.0
    offset_y = float(radius)
    error = radius - 1.0
    while offset_y >= offset_x:
        yield offset_x, offset_y
        if error >= 2.0 * offset_x:
            error -= 2.0 * offset_x + 1.0
            offset_x += 1.0
        elif error < 2.0 * (radius - offset_y):
            error += 2.0 * offset_y - 1.0
            offset_y -= 1.0
        else:
            error += 2.0 * (offset_y - offset_x - 1.0)
            offset_y -= 1.0
            offset_x += 1.0


def circle_outline_points(center: Point, radius: float) -> list[Point]:
    """Points of a circle outline by the midpoint algorithm, eight per step."""
    cx, cy = center.x, center.y
    points: list[Point] = []
    for ox, oy in _midpoint_offsets(radius):
        points.extend(
            (
                Point(cx + ox, cy + oy),
                Point(cx + oy, cy + ox),
                Point(cx - ox, cy + oy),
                Point(cx - oy, cy + ox),
                Point(cx + ox, cy - oy),
                Point(cx + oy, cy - ox),
                Point(cx - ox, cy - oy),
                Point(cx - oy, cy - ox),
            )
        )
    return points


def circle_spans(center: Point, radius: float) -> list[tuple[Point, Point]]:
    """Horizontal lines that together fill a circle, four per step."""
    cx, cy = center.x, center.y
    spans: list[tuple[Point, Point]] = []
    for ox, oy in _midpoint_offsets(radius):
        spans.extend(
            (
                (Point(cx - oy, cy + ox), Point(cx + oy, cy + ox)),
                (Point(cx - ox, cy + oy), Point(cx + ox, cy + oy)),
                (Point(cx - ox, cy - oy), Point(cx + ox, cy - oy)),
                (Point(cx - oy, cy - ox), Point(cx + oy, cy - ox)),
            )
        )
    return spans


def _define_format(pixel_type: int, order: int, layout: int, bits: int, nbytes: int) -> int:
    return (1 << 28) | (pixel_type << 24) | (order << 20) | (layout << 16) | (bits << 8) | nbytes


_INDEX1, _INDEX8, _PACKED16, _PACKED32, _ARRAYU8 = 1, 3, 5, 6, 7
_ORDER_4321, _ORDER_1234 = 1, 2
_XRGB, _RGBX, _ARGB, _RGBA, _BGRA = 1, 2, 3, 4, 8
_ARRAY_RGB, _ARRAY_BGR = 1, 4
_L4444, _L1555, _L565, _L8888 = 2, 3, 5, 6

_ARGB32 = (
    _define_format(_PACKED32, _BGRA, _L8888, 32, 4)
    if sys.byteorder == "little"
    else _define_format(_PACKED32, _ARGB, _L8888, 32, 4)
)


class PixelFormat(IntEnum):
    """Pixel formats, numerically equal to the SDL pixel format codes."""

    UNKNOWN = 0
    MONO = _define_format(_INDEX1, _ORDER_1234, 0, 1, 0)
    MONO_LSB = _define_format(_INDEX1, _ORDER_4321, 0, 1, 0)
    INDEXED8 = _define_format(_INDEX8, 0, 0, 8, 1)
    RGB32 = _define_format(_PACKED32, _XRGB, _L8888, 24, 4)
    ARGB32 = _ARGB32
    RGB16 = _define_format(_PACKED16, _XRGB, _L565, 16, 2)
    RGB555 = _define_format(_PACKED16, _XRGB, _L1555, 15, 2)
    RGB888 = _define_format(_PACKED32, _XRGB, _L8888, 24, 4)
    RGB444 = _define_format(_PACKED16, _XRGB, _L4444, 12, 2)
    ARGB4444 = _define_format(_PACKED16, _ARGB, _L4444, 16, 2)
    RGBX8888 = _define_format(_PACKED32, _RGBX, _L8888, 24, 4)
    RGBA8888 = _define_format(_PACKED32, _RGBA, _L8888, 32, 4)
    BGR24 = _define_format(_ARRAYU8, _ARRAY_BGR, 0, 24, 3)
    RGB24 = _define_format(_ARRAYU8, _ARRAY_RGB, 0, 24, 3)

    @property
    def bits_per_pixel(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def bytes_per_pixel(self) -> int:
        return self.value & 0xFF


class Palette:
    """An ordered list of colours for indexed surfaces."""

    def __init__(self, colors: Sequence[Color] = ()) -> None:
        self.colors: list[Color] = list(colors)

    @classmethod
    def from_bytes(cls, data: bytes) -> Palette:
        """Build a palette from RGBA byte quadruples; trailing bytes are ignored."""
        count = len(data) >> 2
        return cls(Color(*data[i * 4 : i * 4 + 4]) for i in range(count))

    def __len__(self) -> int:
        return len(self.colors)


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (color.red, color.green, color.blue, color.alpha)


class Surface:
    """A pixel image that can be drawn by a :class:`Renderer`."""

    def __init__(self, native: pygame.Surface) -> None:
        self.native = native

    @classmethod
    def from_pixels(
        cls,
        pixels: bytes,
        width: int,
        height: int,
        depth: int,
        palette: Optional[Palette] = None,
    ) -> Surface:
        """Create a surface of ``depth`` bits per pixel and copy ``pixels`` into it raw."""
        try:
            native = pygame.Surface((width, height), 0, depth)
        except (pygame.error, ValueError) as error:
            raise ValueError(f"unable to create surface: {error}") from error
        data = bytes(pixels)
        buffer = native.get_buffer()
        if len(data) > buffer.length:
            raise ValueError(
                f"{len(data)} bytes of pixels do not fit a surface of {buffer.length} bytes"
            )
        buffer.write(data, 0)
        del buffer
        surface = cls(native)
        if palette is not None:
            surface.set_palette(palette)
        return surface

    @classmethod
    def from_image(cls, path: Union[str, Path]) -> Surface:
        """Load an image file."""
        try:
            return cls(pygame.image.load(str(path)))
        except (pygame.error, OSError) as error:
            raise OSError(f"unable to load image {path}: {error}") from error

    @property
    def width(self) -> int:
        return self.native.get_width()

    @property
    def height(self) -> int:
        return self.native.get_height()

    def set_palette(self, palette: Palette) -> None:
        self.native.set_palette([(c.red, c.green, c.blue) for c in palette.colors])


class Renderer:
    """Draws shapes, images and text onto a target pygame surface with alpha blending."""

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self._color = Color(0, 0, 0, 255)
        self._font: Optional[pygame.font.Font] = None
        self._font_cache: dict[tuple[str, int], pygame.font.Font] = {}

    @property
    def color(self) -> Color:
        return self._color

    def set_color(self, color: Color) -> None:
        self._color = color

    def clear(self, color: Color) -> None:
        self.set_color(color)
        self.target.fill(_rgba(color))

    def present(self) -> None:
        """Show the frame if the target is the display surface."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.target:
            pygame.display.flip()

    @contextmanager
    def _canvas(self) -> Iterator[pygame.Surface]:
        if self._color.alpha >= 255:
            yield self.target
            return
        layer = pygame.Surface(self.target.get_size(), pygame.SRCALPHA)
        yield layer
        self.target.blit(layer, (0, 0))

    @staticmethod
    def _native_rect(rect: Rect) -> pygame.Rect:
        return pygame.Rect(int(rect.x), int(rect.y), int(rect.width), int(rect.height))

    def draw_rect(self, rect: Rect) -> None:
        with self._canvas() as canvas:
            pygame.draw.rect(canvas, _rgba(self._color), self._native_rect(rect), 1)

    def fill_rect(self, rect: Rect) -> None:
        with self._canvas() as canvas:
            pygame.draw.rect(canvas, _rgba(self._color), self._native_rect(rect))

    def draw_circle(self, center: Point, radius: float) -> None:
        width, height = self.target.get_size()
        color = _rgba(self._color)
        with self._canvas() as canvas:
            for point in circle_outline_points(center, radius):
                x, y = int(point.x), int(point.y)
                if 0 <= x < width and 0 <= y < height:
                    canvas.set_at((x, y), color)

    def fill_circle(self, center: Point, radius: float) -> None:
        color = _rgba(self._color)
        with self._canvas() as canvas:
            for start, end in circle_spans(center, radius):
                pygame.draw.line(
                    canvas, color, (int(start.x), int(start.y)), (int(end.x), int(end.y))
                )

    def draw_surface(
        self,
        surface: Surface,
        position: Point,
        rotation: float = 0.0,
        justify: Justify = Justify.CENTERED_MIDDLE,
    ) -> None:
        """Draw ``surface`` anchored at ``position``, rotated clockwise by ``rotation`` degrees."""
        self._draw_native(surface.native, position, rotation, justify)

    def _draw_native(
        self, image: pygame.Surface, position: Point, rotation: float, justify: Justify
    ) -> None:
        width, height = image.get_size()
        offset = justify_offset(justify, width, height)
        left = position.x + offset.x
        top = position.y + offset.y
        if rotation:
            rotated = pygame.transform.rotate(image, -rotation)
            center = (left + width * 0.5, top + height * 0.5)
            dest = rotated.get_rect(center=(int(center[0]), int(center[1])))
            self.target.blit(rotated, dest)
        else:
            self.target.blit(image, (int(left), int(top)))

    def set_font(self, font_name: Union[str, Path], font_size: int) -> bool:
        """Select a font for :meth:`draw_text`; False and a logged error if it cannot load."""
        key = (str(font_name), int(font_size))
        cached = self._font_cache.get(key)
        if cached is not None:
            self._font = cached
            return True
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            font = pygame.font.Font(key[0], key[1])
        except (OSError, pygame.error) as error:
            logger.error("unable to load font %s: %s", font_name, error)
            return False
        self._font_cache[key] = font
        self._font = font
        return True

    def draw_text(self, text: str, position: Point, justify: Justify, color: Color) -> None:
        """Draw ``text`` with the current font; without a font nothing is drawn."""
        if self._font is None:
            logger.error("no font selected for text %r", text)
            return
        image = self._font.render(text, True, _rgba(color))
        if color.alpha < 255:
            image.set_alpha(color.alpha)
        self._draw_native(image, position, 0.0, justify)