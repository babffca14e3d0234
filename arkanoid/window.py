"""The game window and its event pump, on top of pygame."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import pygame

from arkanoid.input import (
    InputState,
    KeyboardEvent,
    MessageHandler,
    MouseButtonEvent,
    MouseMotionEvent,
)
from arkanoid.render import Renderer

logger = logging.getLogger(__name__)


@contextmanager
def pygame_context() -> Iterator[None]:
    """Initialise pygame's display and fonts for the duration of the block."""
    pygame.init()
    if not pygame.display.get_init():
        try:
            pygame.display.init()
        except pygame.error as error:
            logger.critical("unable to initialise video: %s", error)
            raise RuntimeError(f"unable to initialise video: {error}") from error
    if not pygame.font.get_init():
        try:
            pygame.font.init()
        except pygame.error as error:
            pygame.quit()
            logger.critical("unable to initialise fonts: %s", error)
            raise RuntimeError(f"unable to initialise fonts: {error}") from error
    try:
        yield
    finally:
        pygame.quit()


def _button_mask(buttons: tuple) -> int:
    return sum(1 << index for index, pressed in enumerate(buttons) if pressed)


class Window:
    """A single game window that forwards its input to a message handler."""

    def __init__(self) -> None:
        self._surface: Optional[pygame.Surface] = None
        self._renderer: Optional[Renderer] = None
        self._message_handler: Optional[MessageHandler] = None
        self._has_focus = False
        self._size = (0, 0)

    def create(self, title: str, width: int, height: int) -> bool:
        """Open a hidden window of the given size; False if that fails."""
        try:
            pygame.display.set_caption(title)
            self._surface = pygame.display.set_mode((width, height), pygame.HIDDEN)
        except pygame.error as error:
            logger.critical("unable to create window: %s", error)
            return False
        self._size = (width, height)
        self._renderer = Renderer(self._surface)
        return True

    def _set_mode(self, flags: int) -> None:
        if self._surface is None:
            return
        self._surface = pygame.display.set_mode(self._size, flags)
        if self._renderer is not None:
            self._renderer.target = self._surface

    def show(self) -> None:
        self._set_mode(pygame.SHOWN)

    def hide(self) -> None:
        self._set_mode(pygame.HIDDEN)

    @property
    def width(self) -> int:
        return self._surface.get_width() if self._surface is not None else 0

    @property
    def height(self) -> int:
        return self._surface.get_height() if self._surface is not None else 0

    @property
    def has_focus(self) -> bool:
        return self._has_focus

    @property
    def renderer(self) -> Optional[Renderer]:
        return self._renderer

    @property
    def message_handler(self) -> Optional[MessageHandler]:
        return self._message_handler

    @message_handler.setter
    def message_handler(self, handler: Optional[MessageHandler]) -> None:
        self._message_handler = handler

    def _accepts_input(self) -> bool:
        return self._has_focus and self._message_handler is not None

    def dispatch(self, event: pygame.event.Event) -> bool:
        """Forward one event to the message handler; False when it asks to quit."""
        handler = self._message_handler
        kind = event.type
        if kind == pygame.QUIT:
            return False
        if kind in (pygame.KEYDOWN, pygame.KEYUP):
            if self._accepts_input():
                is_repeat = bool(getattr(event, "repeat", False))
                if kind == pygame.KEYDOWN:
                    handler.on_key_down(KeyboardEvent(InputState.PRESSED, is_repeat, event.key))
                else:
                    handler.on_key_up(KeyboardEvent(InputState.RELEASED, is_repeat, event.key))
        elif kind == pygame.MOUSEMOTION:
            if self._accepts_input():
                x, y = event.pos
                dx, dy = event.rel
                handler.on_mouse_motion(
                    MouseMotionEvent(_button_mask(event.buttons), x, y, dx, dy)
                )
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if self._accepts_input():
                x, y = event.pos
                clicks = getattr(event, "clicks", 1)
                if kind == pygame.MOUSEBUTTONDOWN:
                    handler.on_mouse_button_down(
                        MouseButtonEvent(event.button, InputState.PRESSED, clicks, x, y)
                    )
                else:
                    handler.on_mouse_button_up(
                        MouseButtonEvent(event.button, InputState.RELEASED, clicks, x, y)
                    )
        elif kind == pygame.WINDOWFOCUSGAINED:
            self._has_focus = True
            if handler is not None:
                handler.on_focus_gained()
        elif kind == pygame.WINDOWFOCUSLOST:
            self._has_focus = False
            if handler is not None:
                handler.on_focus_lost()
        return True

    def handle_events(self) -> bool:
        """Process all pending events; False once a quit request is seen."""
        return all(self.dispatch(event) for event in pygame.event.get())

    @staticmethod
    def send_quit_message() -> None:
        """Queue a quit request for the event loop."""
        pygame.event.post(pygame.event.Event(pygame.QUIT))