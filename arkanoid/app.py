"""The game application: window, screens and the main loop."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from arkanoid import config
from arkanoid.frame_rate import FixedFrameRate
from arkanoid.level_manager import default_level_manager
from arkanoid.screen_factory import ArkanoidScreensCreator
from arkanoid.screens import ScreensManager
from arkanoid.window import Window, pygame_context

logger = logging.getLogger(__name__)

FRAME_RATE = 60


class ArkanoidGame:
    """Owns the main window and the screens shown in it."""

    def __init__(self) -> None:
        self.window = Window()
        self.screens_manager: Optional[ScreensManager] = None

    def init(self) -> bool:
        """Open the window and set up the screens; False if the window cannot open."""
        if not self.window.create(config.WINDOW_TITLE, config.WINDOW_WIDTH, config.WINDOW_HEIGHT):
            return False
        self.screens_manager = ScreensManager(ArkanoidScreensCreator())
        self.window.message_handler = self.screens_manager
        default_level_manager()
        self.window.show()
        return True

    def loop(self) -> int:
        """Run frames until the window asks to quit; return the exit status."""
        manager = self.screens_manager
        if manager is None:
            raise RuntimeError("the game has not been initialised")
        frame_rate = FixedFrameRate(FRAME_RATE)
        while self.window.handle_events():
            manager.update(frame_rate.delta_time)
            manager.draw(self.window.renderer)
            frame_rate.wait()
            logger.debug("FPS: %d", frame_rate.current_frame_rate)
        return 0

    def close(self) -> None:
        """Detach the screens from the window."""
        self.window.message_handler = None
        self.screens_manager = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="arkanoid", description="Play Arkanoid.")
    parser.parse_args(argv)
    try:
        with pygame_context():
            game = ArkanoidGame()
            try:
                if game.init():
                    return game.loop()
                return 1
            finally:
                game.close()
    except RuntimeError as error:
        logger.critical("%s", error)
        return 1


if __name__ == "__main__":
    sys.exit(main())