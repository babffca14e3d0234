"""Tracking of the current score and the persisted high score."""

from __future__ import annotations

import atexit
import functools
import logging
import re
from pathlib import Path
from typing import Any, Union

SCORE_FILE = Path("Data/Score")

_INTEGER = re.compile(r"\s*([+-]?\d+)")

logger = logging.getLogger(__name__)


class ScoreManager:
    """Keeps the running score and the best score, stored as text in a file."""

    def __init__(self, path: Union[str, Path] = SCORE_FILE) -> None:
        self._path = Path(path)
        self._high_score = 0
        self._current_score = 0
        try:
            text = self._path.read_bytes().decode("latin-1")
        except OSError:
            return
        match = _INTEGER.match(text)
        if match:
            self._high_score = int(match.group(1))

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def current_score(self) -> int:
        return self._current_score

    def start_game(self) -> None:
        self._current_score = 0

    def update_score(self, score: int) -> None:
        self._current_score += score

    def finish_game(self) -> None:
        """Record the current score as the high score if it beats it."""
        if self._current_score > self._high_score:
            self._high_score = self._current_score

    def save(self) -> None:
        """Write the high score to the score file; failures are only logged."""
        try:
            self._path.write_text(str(self._high_score), encoding="ascii")
        except OSError as error:
            logger.warning("unable to save score to %s: %s", self._path, error)

    def __enter__(self) -> ScoreManager:
        return self

    def __exit__(self, *args: Any) -> None:
        self.save()


@functools.lru_cache(maxsize=None)
def default_score_manager() -> ScoreManager:
    """The shared score manager; its high score is saved when the program exits."""
    manager = ScoreManager(SCORE_FILE)
    atexit.register(manager.save)
    return manager