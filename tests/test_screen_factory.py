import pytest

from arkanoid.block import BlockType
from arkanoid.config import ScreenType
from arkanoid.game_screens import GameScreen, MainScreen, PauseScreen, ScoreScreen
from arkanoid.input import InputKey, InputState, KeyboardEvent
from arkanoid.level_manager import BlockData, LevelManager
from arkanoid.score_manager import ScoreManager
from arkanoid.screen_factory import ArkanoidScreensCreator
from arkanoid.screens import ScreensManager


class Owner:
    pass


class RecordingRenderer:
    def __init__(self):
        self.texts = []

    def set_color(self, color):
        pass

    def fill_rect(self, rect):
        pass

    def draw_rect(self, rect):
        pass

    def fill_circle(self, center, radius):
        pass

    def set_font(self, font_name, font_size):
        return True

    def draw_text(self, text, position, justify, color):
        self.texts.append(text)

    def clear(self, color):
        pass

    def present(self):
        pass


@pytest.fixture
def creator(tmp_path):
    score = ScoreManager(tmp_path / "score")
    levels = LevelManager([[BlockData(1, BlockType.WHITE)]])

    class _Game(GameScreen):
        level_manager_factory = staticmethod(lambda: levels)
        score_manager_factory = staticmethod(lambda: score)

    class _Score(ScoreScreen):
        score_manager_factory = staticmethod(lambda: score)

    made = ArkanoidScreensCreator()
    made.screen_classes[ScreenType.GAME] = _Game
    made.screen_classes[ScreenType.SCORE] = _Score
    return made


def press(key):
    return KeyboardEvent(InputState.PRESSED, False, key)


def test_defaults():
    creator = ArkanoidScreensCreator()
    assert creator.default_screen_id == ScreenType.MAIN
    assert creator.screens_count == len(ScreenType)


@pytest.mark.parametrize(
    "screen_id, screen_class",
    [(ScreenType.MAIN, MainScreen), (ScreenType.PAUSE, PauseScreen)],
)
def test_creates_initialised_screens(screen_id, screen_class):
    owner = Owner()
    screen = ArkanoidScreensCreator()(owner, screen_id)
    assert isinstance(screen, screen_class)
    assert screen.screen_id == screen_id
    assert screen.has_bindings() is True
    assert screen.owner is owner


def test_creates_game_screen(creator):
    owner = Owner()
    screen = creator(owner, ScreenType.GAME)
    assert isinstance(screen, GameScreen)
    assert screen.level.alive_blocks == 1


def test_unknown_ids_give_none():
    creator = ArkanoidScreensCreator()
    assert creator(Owner(), ScreenType.UNKNOWN) is None
    assert creator(Owner(), 99) is None


def test_manager_starts_on_main_screen(creator):
    manager = ScreensManager(creator, quit_callback=lambda: None)
    manager.update(0.0)
    assert [s.screen_id for s in manager.active_screens] == [ScreenType.MAIN]


def test_manager_flow_through_pause(creator):
    manager = ScreensManager(creator, quit_callback=lambda: None)
    manager.update(0.0)
    manager.on_key_down(press(InputKey.RETURN))
    manager.update(0.0)
    assert [s.screen_id for s in manager.active_screens] == [ScreenType.GAME, ScreenType.MAIN]

    manager.on_key_down(press(InputKey.ESCAPE))
    manager.update(0.0)
    assert [s.screen_id for s in manager.active_screens] == [
        ScreenType.PAUSE,
        ScreenType.GAME,
        ScreenType.MAIN,
    ]

    manager.on_key_down(press(InputKey.RETURN))
    manager.update(0.0)
    assert [s.screen_id for s in manager.active_screens] == [ScreenType.GAME, ScreenType.MAIN]


def test_game_screen_hides_main_screen(creator):
    manager = ScreensManager(creator, quit_callback=lambda: None)
    manager.update(0.0)
    manager.on_key_down(press(InputKey.RETURN))
    manager.update(0.0)
    renderer = RecordingRenderer()
    manager.draw(renderer)
    assert "Lives: 3" in renderer.texts
    assert "Press Enter to Start" not in renderer.texts


def test_escape_on_main_quits(creator):
    calls = []
    manager = ScreensManager(creator, quit_callback=lambda: calls.append("quit"))
    manager.update(0.0)
    manager.on_key_down(press(InputKey.ESCAPE))
    assert calls == ["quit"]