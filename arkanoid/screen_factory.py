"""Creation of the game's screens by identifier."""

from __future__ import annotations

from typing import Optional

from arkanoid.config import ScreenType
from arkanoid.game_screens import GameScreen, MainScreen, PauseScreen, ScoreScreen
from arkanoid.screens import ScreensCreator, ScreensManager, ScreenState


class ArkanoidScreensCreator(ScreensCreator):
    """Builds the title, game, pause and score screens, starting at the title."""

    def __init__(self) -> None:
        super().__init__(ScreenType.MAIN)
        self.screen_classes: dict[int, type[ScreenState]] = {
            ScreenType.MAIN: MainScreen,
            ScreenType.GAME: GameScreen,
            ScreenType.PAUSE: PauseScreen,
            ScreenType.SCORE: ScoreScreen,
        }

    @property
    def screens_count(self) -> int:
        return ScreenType.SCORE + 1

    def __call__(self, owner: ScreensManager, screen_id: int) -> Optional[ScreenState]:
        screen_class = self.screen_classes.get(screen_id)
        if screen_class is None:
            return None
        screen = screen_class(owner)
        screen.init()
        return screen