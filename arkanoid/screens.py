"""Screen states and the stack-based screen manager."""

from __future__ import annotations

import logging
import weakref
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

from arkanoid.config import ScreenRequestReason
from arkanoid.geometry import Color
from arkanoid.input import (
    InputHandler,
    InputKey,
    InputState,
    KeyboardEvent,
    MessageHandler,
    MouseButtonEvent,
    MouseMotionEvent,
)
from arkanoid.window import Window

logger = logging.getLogger(__name__)

INVALID_SCREEN_ID = -1

RequestSolver = Callable[["ScreenState", int, int], bool]
KeyDelegate = Callable[[InputState], None]


class ScreenState(InputHandler, ABC):
    """One screen of the user interface, owned by a :class:`ScreensManager`."""

    text_color = Color(255, 255, 255, 255)

    def __init__(self, owner: Optional[ScreensManager]) -> None:
        super().__init__()
        self._owner = weakref.ref(owner) if owner is not None else None
        self._screen_key_bindings: dict[InputKey, KeyDelegate] = {}
        self.initialized = False
        self.elapsed = 0.0
        self.focused = True

    @property
    def owner(self) -> Optional[ScreensManager]:
        return self._owner() if self._owner is not None else None

    @property
    @abstractmethod
    def screen_id(self) -> int:
        """The identifier of this kind of screen."""

    def init(self) -> None:
        """Prepare the screen after creation."""
        self.initialized = True

    def update(self, delta_time: float) -> None:
        """Advance the screen by ``delta_time`` seconds."""
        self.elapsed += delta_time

    @abstractmethod
    def draw(self, renderer: Any) -> None:
        """Draw the screen."""

    @property
    def should_draw_prev_screen(self) -> bool:
        return True

    @property
    def should_update_prev_states(self) -> bool:
        return False

    @property
    def should_handle_inputs_prev_states(self) -> bool:
        return False

    def on_focus_gained(self) -> None:
        """Called when the window regains focus while this screen is on top."""
        self.focused = True

    def on_focus_lost(self) -> None:
        """Called when the window loses focus while this screen is on top."""
        self.focused = False

    def request_transition(
        self, screen_id: int, reason: int = ScreenRequestReason.DEFAULT
    ) -> None:
        """Ask the owning manager to switch to ``screen_id``."""
        owner = self.owner
        if owner is not None:
            owner.request_screen_transition(self, screen_id, reason)

    def has_bindings(self) -> bool:
        """Whether any key is bound on this screen."""
        return bool(self._screen_key_bindings)

    def delegate_for(self, key: InputKey) -> Optional[KeyDelegate]:
        """The function bound to ``key``, or None."""
        return self._screen_key_bindings.get(key)

    def bind_key(self, key: InputKey, func: KeyDelegate) -> None:
        """Bind ``func`` to ``key``; a key may be bound only once."""
        if key in self._screen_key_bindings:
            raise ValueError(f"key {key!r} is already bound")
        self._screen_key_bindings[key] = func


class ScreensCreator(ABC):
    """Builds screens by identifier."""

    INVALID_SCREEN_ID = INVALID_SCREEN_ID

    def __init__(self, default_screen_id: int = 0) -> None:
        self.default_screen_id = default_screen_id

    @property
    @abstractmethod
    def screens_count(self) -> int:
        """How many kinds of screen the creator knows."""

    @abstractmethod
    def __call__(self, owner: ScreensManager, screen_id: int) -> Optional[ScreenState]:
        """Create and initialise the screen ``screen_id``, or None if unknown."""


class ScreensManager(MessageHandler):
    """Keeps a stack of screens, the newest first, and routes input to them."""

    def __init__(
        self,
        creator: ScreensCreator,
        request_solver: Optional[RequestSolver] = None,
        quit_callback: Optional[Callable[[], None]] = None,
    ) -> None:
        self._creator = creator
        self._request_solver = request_solver
        self._quit_callback = quit_callback or Window.send_quit_message
        self.background_color = Color(30, 30, 30, 255)
        self._request_screen_id = creator.default_screen_id
        self._active_screens: list[ScreenState] = []
        self.last_mouse_event: Optional[Union[MouseButtonEvent, MouseMotionEvent]] = None

    @property
    def active_screens(self) -> tuple[ScreenState, ...]:
        """The screens on the stack, the one on top first."""
        return tuple(self._active_screens)

    def update(self, delta_time: float) -> None:
        if self._request_screen_id != INVALID_SCREEN_ID:
            self._transit_state()
        for screen in list(self._active_screens):
            screen.update(delta_time)
            if not screen.should_update_prev_states:
                break

    def draw(self, renderer: Any) -> None:
        """Draw from the bottom of the stack up, skipping screens hidden by the one above."""
        renderer.clear(self.background_color)
        screens = self._active_screens
        for index in range(len(screens) - 1, -1, -1):
            if index == 0 or screens[index - 1].should_draw_prev_screen:
                screens[index].draw(renderer)
        renderer.present()

    def request_screen_transition(
        self,
        requester: ScreenState,
        screen_id: int,
        reason: int = ScreenRequestReason.DEFAULT,
    ) -> None:
        """Accept a transition from the top screen, or any the solver approves."""
        if not self._active_screens:
            return
        front = self._active_screens[0]
        if front.screen_id == requester.screen_id or (
            self._request_solver is not None
            and self._request_solver(requester, screen_id, reason)
        ):
            self._request_screen_id = screen_id

    def request_to_quit(self) -> None:
        self._quit_callback()

    def _transit_state(self) -> None:
        requested = self._request_screen_id
        self._request_screen_id = INVALID_SCREEN_ID
        index = next(
            (i for i, screen in enumerate(self._active_screens) if screen.screen_id == requested),
            None,
        )
        if index is None:
            screen = self._creator(self, requested)
            if screen is None:
                raise ValueError(f"unknown screen id {requested}")
            self._active_screens.insert(0, screen)
        else:
            del self._active_screens[:index]

    def _dispatch_key(self, event: KeyboardEvent) -> None:
        for screen in list(self._active_screens):
            if screen.has_bindings():
                delegate = screen.delegate_for(event.key)
                if delegate is not None:
                    delegate(event.state)
            if not screen.should_handle_inputs_prev_states:
                break

    def on_key_down(self, event: KeyboardEvent) -> None:
        self._dispatch_key(event)

    def on_key_up(self, event: KeyboardEvent) -> None:
        self._dispatch_key(event)

    def on_mouse_button_down(self, event: MouseButtonEvent) -> None:
        """Remember the event; screens do not react to mouse buttons."""
        self.last_mouse_event = event

    def on_mouse_button_up(self, event: MouseButtonEvent) -> None:
        """Remember the event; screens do not react to mouse buttons."""
        self.last_mouse_event = event

    def on_mouse_motion(self, event: MouseMotionEvent) -> None:
        """Remember the event; screens do not react to mouse movement."""
        self.last_mouse_event = event

    def on_focus_gained(self) -> None:
        if self._active_screens:
            self._active_screens[0].on_focus_gained()
        logger.debug("window focus gained")

    def on_focus_lost(self) -> None:
        if self._active_screens:
            self._active_screens[0].on_focus_lost()
        logger.debug("window focus lost")