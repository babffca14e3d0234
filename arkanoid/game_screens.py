"""The concrete screens of the game: title, play, pause and game over."""

from __future__ import annotations

import dataclasses
import weakref
from typing import Any, Callable, Optional

from arkanoid import config
from arkanoid.config import ScreenRequestReason, ScreenType
from arkanoid.geometry import Color, Point, Rect
from arkanoid.input import InputKey, InputState
from arkanoid.level import Level
from arkanoid.level_manager import LevelManager, default_level_manager
from arkanoid.render import Justify
from arkanoid.score_manager import ScoreManager, default_score_manager
from arkanoid.screens import ScreensManager, ScreenState

_OVERLAY_COLOR = Color(30, 30, 30, 191)
_WHITE = Color(255, 255, 255, 255)


def _window_center() -> tuple[float, float]:
    return config.WINDOW_WIDTH * 0.5, config.WINDOW_HEIGHT * 0.5


def _draw_overlay(renderer: Any) -> None:
    renderer.set_color(_OVERLAY_COLOR)
    renderer.fill_rect(Rect(0.0, 0.0, float(config.WINDOW_WIDTH), float(config.WINDOW_HEIGHT)))


class GameScreen(ScreenState):
    """The playing screen: the level on the left, score and help on the right."""

    level_manager_factory: Callable[[], LevelManager] = staticmethod(default_level_manager)
    score_manager_factory: Callable[[], ScoreManager] = staticmethod(default_score_manager)

    def __init__(self, owner: Optional[ScreensManager]) -> None:
        super().__init__(owner)
        self.score_manager = self.score_manager_factory()
        self.level = Level(self.level_manager_factory(), self.score_manager)
        self.ui_rect = Rect()
        # The game is over once the screen goes away, however it leaves.
        self._finalizer = weakref.finalize(self, self.level.finish)

    @property
    def screen_id(self) -> int:
        return ScreenType.GAME

    @property
    def should_draw_prev_screen(self) -> bool:
        return False

    def init(self) -> None:
        super().init()
        border = config.BORDER_SIZE
        level_width = (config.WINDOW_WIDTH - border) * config.LEVEL_RATIO
        self.level.rect = Rect(border, border, level_width, config.WINDOW_HEIGHT - 2.0 * border)
        self.ui_rect = Rect(
            border + level_width,
            border,
            (config.WINDOW_WIDTH - 2.0 * border) - level_width,
            config.WINDOW_HEIGHT - 2.0 * border,
        )
        self.level.setup_player_input(self)
        self.bind_key(InputKey.ESCAPE, self.pause)
        self.score_manager.start_game()
        self.level.start_game()

    def on_focus_lost(self) -> None:
        super().on_focus_lost()
        self.request_transition(ScreenType.PAUSE, ScreenRequestReason.FORCE)

    def pause(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self.request_transition(ScreenType.PAUSE, ScreenRequestReason.DEFAULT)

    def update(self, delta_time: float) -> None:
        level = self.level
        if level.lives <= 0:
            self.request_transition(ScreenType.SCORE, ScreenRequestReason.DEFAULT)
        elif level.alive_blocks > 0:
            level.update(delta_time)
        elif not level.start_game(level.current_level + 1):
            self.request_transition(ScreenType.SCORE, ScreenRequestReason.DEFAULT)

    def draw(self, renderer: Any) -> None:
        self.level.draw(renderer)

        ui = self.ui_rect
        color = self.text_color
        x = ui.x + ui.width * 0.5
        y = ui.y

        renderer.set_font(config.ANCIENT_FONT, 70)
        renderer.draw_text("Arkanoid", Point(x, y), Justify.CENTERED_TOP, color)

        y += ui.height * 0.5
        renderer.set_font(config.OPEN_SANS_FONT, 30)
        renderer.draw_text(f"Lives: {self.level.lives}", Point(x, y), Justify.CENTERED_TOP, color)

        y -= 100.0
        renderer.set_font(config.ANCIENT_FONT, 40)
        renderer.draw_text("Score", Point(x, y), Justify.CENTERED_BOTTOM, color)
        renderer.set_font(config.OPEN_SANS_FONT, 30)
        renderer.draw_text(
            str(self.score_manager.current_score), Point(x, y), Justify.CENTERED_TOP, color
        )

        y -= 100.0
        renderer.set_font(config.ANCIENT_FONT, 40)
        renderer.draw_text("Hight Score", Point(x, y), Justify.CENTERED_BOTTOM, color)
        renderer.set_font(config.OPEN_SANS_FONT, 30)
        renderer.draw_text(
            str(self.score_manager.high_score), Point(x, y), Justify.CENTERED_TOP, color
        )

        y = ui.height + ui.y
        renderer.set_font(config.OPEN_SANS_FONT, 15)
        for line in (
            "Space -- Release Ball",
            "Arrow Right -- Move Right",
            "Arrow Left -- Move Left",
            "Esc -- Game Pause",
        ):
            renderer.draw_text(line, Point(x, y), Justify.CENTERED_BOTTOM, color)
            y -= 20.0


class MainScreen(ScreenState):
    """The title screen with a blinking prompt."""

    def __init__(self, owner: Optional[ScreensManager]) -> None:
        super().__init__(owner)
        self.font_color = _WHITE

    @property
    def screen_id(self) -> int:
        return ScreenType.MAIN

    def init(self) -> None:
        super().init()
        self.bind_key(InputKey.RETURN, self.start_game)
        self.bind_key(InputKey.ESCAPE, self.quit)

    def start_game(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self.request_transition(ScreenType.GAME, ScreenRequestReason.DEFAULT)

    def quit(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            owner = self.owner
            if owner is not None:
                owner.request_to_quit()

    def update(self, delta_time: float) -> None:
        alpha = (self.font_color.alpha + 2) % 256
        self.font_color = dataclasses.replace(self.font_color, alpha=alpha)

    def draw(self, renderer: Any) -> None:
        center = Point(*_window_center())
        renderer.set_font(config.ANCIENT_FONT, 170)
        renderer.draw_text("Arkanoid", center, Justify.CENTERED_BOTTOM, _WHITE)
        renderer.set_font(config.OPEN_SANS_FONT, 30)
        renderer.draw_text("Press Enter to Start", center, Justify.CENTERED_TOP, self.font_color)


class PauseScreen(ScreenState):
    """A dimming overlay shown over the paused game."""

    def __init__(self, owner: Optional[ScreensManager]) -> None:
        super().__init__(owner)

    @property
    def screen_id(self) -> int:
        return ScreenType.PAUSE

    def init(self) -> None:
        super().init()
        self.bind_key(InputKey.ESCAPE, self.close)
        self.bind_key(InputKey.RETURN, self.resume)

    def close(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self.request_transition(ScreenType.MAIN, ScreenRequestReason.FORCE)

    def resume(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self.request_transition(ScreenType.GAME, ScreenRequestReason.DEFAULT)

    def draw(self, renderer: Any) -> None:
        x, y = _window_center()
        _draw_overlay(renderer)
        renderer.set_font(config.ANCIENT_FONT, 200)
        renderer.draw_text("Game Pause", Point(x, y), Justify.CENTERED_BOTTOM, self.text_color)
        renderer.set_font(config.OPEN_SANS_FONT, 20)
        renderer.draw_text(
            "Press Enter to Continue", Point(x, y), Justify.CENTERED_TOP, self.text_color
        )
        y += 30.0
        renderer.draw_text(
            "Or Press Esc to Exit", Point(x, y), Justify.CENTERED_TOP, self.text_color
        )


class ScoreScreen(ScreenState):
    """The game over overlay showing the final score."""

    score_manager_factory: Callable[[], ScoreManager] = staticmethod(default_score_manager)

    def __init__(self, owner: Optional[ScreensManager]) -> None:
        super().__init__(owner)
        self.score_manager = self.score_manager_factory()

    @property
    def screen_id(self) -> int:
        return ScreenType.SCORE

    def init(self) -> None:
        super().init()
        self.bind_key(InputKey.ESCAPE, self.resume)

    def resume(self, state: InputState) -> None:
        if state == InputState.PRESSED:
            self.request_transition(ScreenType.MAIN, ScreenRequestReason.DEFAULT)

    def draw(self, renderer: Any) -> None:
        x, y = _window_center()
        _draw_overlay(renderer)
        renderer.set_font(config.ANCIENT_FONT, 200)
        renderer.draw_text("Game Over", Point(x, y), Justify.CENTERED_BOTTOM, self.text_color)
        y += 20.0
        renderer.set_font(config.ANCIENT_FONT, 70)
        renderer.draw_text(
            f"Score: {self.score_manager.current_score}",
            Point(x, y),
            Justify.CENTERED_TOP,
            self.text_color,
        )
        y += 100.0
        renderer.set_font(config.OPEN_SANS_FONT, 20)
        renderer.draw_text(
            "Press Enter to Exit", Point(x, y), Justify.CENTERED_TOP, self.text_color
        )