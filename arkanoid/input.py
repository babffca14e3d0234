"""Input events, key codes and the input and message handler interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional

_SCANCODE_MASK = 1 << 30


def _scancode(code: int) -> int:
    return code | _SCANCODE_MASK


class InputState(IntEnum):
    RELEASED = 0
    PRESSED = 1


class MouseButton(IntEnum):
    LEFT = 1
    MIDDLE = 2
    RIGHT = 3
    X1 = 4
    X2 = 5


class InputKey(IntEnum):
    """Keyboard key codes, numerically equal to the SDL key codes."""

    UNKNOWN = 0

    RETURN = ord("\r")
    ESCAPE = 0x1B
    BACKSPACE = ord("\b")
    TAB = ord("\t")
    SPACE = ord(" ")
    EXCLAIM = ord("!")
    DOUBLE_QUOTES = ord('"')
    HASH = ord("#")
    PERCENT = ord("%")
    DOLLAR = ord("$")
    AMPERSAND = ord("&")
    SINGLE_QUOTE = ord("'")
    LEFT_PARENTHESIS = ord("(")
    RIGHT_PARENTHESIS = ord(")")
    ASTERISK = ord("*")
    PLUS = ord("+")
    COMMA = ord(",")
    MINUS = ord("-")
    PERIOD = ord(".")
    SLASH = ord("/")
    NUM0 = ord("0")
    NUM1 = ord("1")
    NUM2 = ord("2")
    NUM3 = ord("3")
    NUM4 = ord("4")
    NUM5 = ord("5")
    NUM6 = ord("6")
    NUM7 = ord("7")
    NUM8 = ord("8")
    NUM9 = ord("9")
    COLON = ord(":")
    SEMICOLON = ord(";")
    LESS = ord("<")
    EQUAL = ord("=")
    GREATER = ord(">")
    QUESTION = ord("?")
    AT = ord("@")

    LEFT_BRACKET = ord("[")
    BACKSLASH = ord("\\")
    RIGHT_BRACKET = ord("]")
    CARET = ord("^")
    UNDERSCORE = ord("_")
    BACKQUOTE = ord("`")
    A = ord("a")
    B = ord("b")
    C = ord("c")
    D = ord("d")
    E = ord("e")
    F = ord("f")
    G = ord("g")
    H = ord("h")
    I = ord("i")  # noqa: E741
    J = ord("j")
    K = ord("k")
    L = ord("l")
    M = ord("m")
    N = ord("n")
    O = ord("o")  # noqa: E741
    P = ord("p")
    Q = ord("q")
    R = ord("r")
    S = ord("s")
    T = ord("t")
    U = ord("u")
    V = ord("v")
    W = ord("w")
    X = ord("x")
    Y = ord("y")
    Z = ord("z")

    CAPS_LOCK = _scancode(57)

    F1 = _scancode(58)
    F2 = _scancode(59)
    F3 = _scancode(60)
    F4 = _scancode(61)
    F5 = _scancode(62)
    F6 = _scancode(63)
    F7 = _scancode(64)
    F8 = _scancode(65)
    F9 = _scancode(66)
    F10 = _scancode(67)
    F11 = _scancode(68)
    F12 = _scancode(69)

    PRINT_SCREEN = _scancode(70)
    SCROLL_LOCK = _scancode(71)
    PAUSE = _scancode(72)
    INSERT = _scancode(73)
    HOME = _scancode(74)
    PAGE_UP = _scancode(75)
    DELETE = 0x7F
    END = _scancode(77)
    PAGE_DOWN = _scancode(78)
    RIGHT_ARROW = _scancode(79)
    LEFT_ARROW = _scancode(80)
    DOWN_ARROW = _scancode(81)
    UP_ARROW = _scancode(82)

    NUM_LOCK_CLEAR = _scancode(83)
    KEYPAD_DIVIDE = _scancode(84)
    KEYPAD_MULTIPLY = _scancode(85)
    KEYPAD_MINUS = _scancode(86)
    KEYPAD_PLUS = _scancode(87)
    KEYPAD_ENTER = _scancode(88)
    KEYPAD1 = _scancode(89)
    KEYPAD2 = _scancode(90)
    KEYPAD3 = _scancode(91)
    KEYPAD4 = _scancode(92)
    KEYPAD5 = _scancode(93)
    KEYPAD6 = _scancode(94)
    KEYPAD7 = _scancode(95)
    KEYPAD8 = _scancode(96)
    KEYPAD9 = _scancode(97)
    KEYPAD0 = _scancode(98)
    KEYPAD_PERIOD = _scancode(99)

    LEFT_CTRL = _scancode(224)
    LEFT_SHIFT = _scancode(225)
    LEFT_ALT = _scancode(226)
    LEFT_GUI = _scancode(227)
    RIGHT_CTRL = _scancode(228)
    RIGHT_SHIFT = _scancode(229)
    RIGHT_ALT = _scancode(230)
    RIGHT_GUI = _scancode(231)


@dataclass(frozen=True)
class KeyboardEvent:
    state: InputState
    is_repeat: bool
    key: int


@dataclass(frozen=True)
class MouseMotionEvent:
    state: int
    x: int
    y: int
    dx: int
    dy: int


@dataclass(frozen=True)
class MouseButtonEvent:
    button: int
    state: InputState
    clicks: int
    x: int
    y: int


InputDelegate = Callable[[InputState], None]


class InputHandler:
    """Keeps a single callback per key and looks them up on demand."""

    def __init__(self) -> None:
        self._key_bindings: dict[int, InputDelegate] = {}

    def has_bindings(self) -> bool:
        return bool(self._key_bindings)

    def delegate_for(self, key: int) -> Optional[InputDelegate]:
        """Return the callback bound to ``key``, or None."""
        return self._key_bindings.get(key)

    def bind_key(self, key: int, func: InputDelegate) -> None:
        """Bind ``func`` to ``key``; a key may be bound only once."""
        if key in self._key_bindings:
            raise ValueError(f"key {key!r} is already bound")
        self._key_bindings[key] = func


class MessageHandler(ABC):
    """Receives window input and focus notifications."""

    @abstractmethod
    def on_key_down(self, event: KeyboardEvent) -> None:
        """Handle a key press."""

    @abstractmethod
    def on_key_up(self, event: KeyboardEvent) -> None:
        """Handle a key release."""

    @abstractmethod
    def on_mouse_button_down(self, event: MouseButtonEvent) -> None:
        """Handle a mouse button press."""

    @abstractmethod
    def on_mouse_button_up(self, event: MouseButtonEvent) -> None:
        """Handle a mouse button release."""

    @abstractmethod
    def on_mouse_motion(self, event: MouseMotionEvent) -> None:
        """Handle mouse movement."""

    @abstractmethod
    def on_focus_gained(self) -> None:
        """Handle the window gaining focus."""

    @abstractmethod
    def on_focus_lost(self) -> None:
        """Handle the window losing focus."""