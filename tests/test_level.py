import pytest

from arkanoid.block import BlockType
from arkanoid.geometry import Color, Point, Rect
from arkanoid.input import InputHandler, InputKey, InputState
from arkanoid.level import Level
from arkanoid.level_manager import BlockData, LevelManager
from arkanoid.score_manager import ScoreManager


class RecordingRenderer:
    def __init__(self):
        self.colors = []
        self.rects = []
        self.circles = []

    def set_color(self, color):
        self.colors.append(color)

    def fill_rect(self, rect):
        self.rects.append(rect)

    def fill_circle(self, center, radius):
        self.circles.append((center, radius))


LAYOUT = [[BlockData(3, 1), BlockData(2, 0), BlockData(1, 9)]]


@pytest.fixture
def scores(tmp_path):
    return ScoreManager(tmp_path / "score")


@pytest.fixture
def level(scores):
    lvl = Level(LevelManager(LAYOUT), scores)
    lvl.rect = Rect(0.0, 0.0, 300.0, 600.0)
    return lvl


def test_rect_is_inset_by_border(scores):
    lvl = Level(LevelManager(LAYOUT), scores)
    lvl.rect = Rect(10.0, 10.0, 300.0, 600.0)
    border = lvl.border_size
    assert lvl.rect == Rect(10.0 + border, 10.0 + border, 300.0 - 2 * border, 600.0 - 2 * border)


def test_start_game_places_blocks(level):
    assert level.start_game(1)
    assert level.alive_blocks == 4
    types = [block.block_type if block else None for block in level.blocks[:6]]
    assert types == [
        BlockType.WHITE,
        BlockType.WHITE,
        BlockType.WHITE,
        None,
        None,
        BlockType.SILVER,
    ]
    assert all(block is None for block in level.blocks[6:])
    first, second = level.blocks[0], level.blocks[1]
    assert first.position.y == second.position.y
    assert second.position.x > first.rect.right


def test_start_missing_level_fails(level):
    assert not level.start_game(2)
    assert level.alive_blocks == 0
    assert level.current_level == 1


def test_start_attaches_ball_above_paddle(level):
    level.start_game(1)
    level.update(0.0)
    assert level.ball.center.x == pytest.approx(level.paddle.center.x)
    assert level.ball.rect.bottom < level.paddle.position.y
    assert level.lives == 3


def test_hitting_white_block_scores(level, scores):
    scores.start_game()
    level.start_game(1)
    level.release_ball(InputState.PRESSED)
    level.ball.center = level.blocks[0].center
    level.update(0.0)
    assert level.blocks[0] is None
    assert level.alive_blocks == 3
    assert scores.current_score == 50


def test_silver_block_needs_two_hits(level, scores):
    scores.start_game()
    level.start_game(1)
    level.release_ball(InputState.PRESSED)
    target = level.blocks[5].center
    level.ball.center = target
    level.update(0.0)
    assert level.blocks[5] is not None and level.blocks[5].health == 1
    assert scores.current_score == 0
    level.ball.center = target
    level.update(0.0)
    assert level.blocks[5] is None
    assert scores.current_score == 50
    assert level.alive_blocks == 3


def test_losing_ball_costs_a_life(level):
    level.start_game(1)
    level.release_ball(InputState.PRESSED)
    level.ball.center = Point(level.position.x + 20.0, level.rect.bottom)
    level.update(0.0)
    assert level.lives == 2
    assert not level.ball.should_be_destroyed
    level.update(0.0)
    assert level.ball.center.x == pytest.approx(level.paddle.center.x)


def test_release_on_key_up_keeps_ball_attached(level):
    level.start_game(1)
    level.release_ball(InputState.RELEASED)
    level.update(0.5)
    assert level.ball.center.x == pytest.approx(level.paddle.center.x)
    assert level.ball.rect.bottom < level.paddle.position.y


def test_player_input_moves_paddle(level):
    level.start_game(1)
    handler = InputHandler()
    level.setup_player_input(handler)
    start = level.paddle.center.x
    handler.delegate_for(InputKey.LEFT_ARROW)(InputState.PRESSED)
    level.update(0.1)
    assert level.paddle.center.x < start


def test_space_releases_ball(level):
    level.start_game(1)
    handler = InputHandler()
    level.setup_player_input(handler)
    level.update(0.0)
    start_y = level.ball.center.y
    handler.delegate_for(InputKey.SPACE)(InputState.PRESSED)
    level.update(0.1)
    assert level.ball.center.y < start_y


def test_paddle_kept_inside(level):
    level.start_game(1)
    level.paddle.move_left(InputState.PRESSED)
    level.update(10.0)
    assert level.paddle.position.x == pytest.approx(level.position.x)


def test_finish_records_high_score(level, scores):
    scores.start_game()
    level.start_game(1)
    level.release_ball(InputState.PRESSED)
    level.ball.center = level.blocks[1].center
    level.update(0.0)
    level.finish()
    assert scores.high_score == scores.current_score == 50


def test_draw_includes_border_and_blocks(level):
    level.start_game(1)
    renderer = RecordingRenderer()
    level.draw(renderer)
    assert renderer.colors[0] == Level.BORDER_COLOR
    assert Color(252, 252, 252, 255) in renderer.colors
    assert level.blocks[0].rect in renderer.rects
    assert renderer.rects[0].right == pytest.approx(level.position.x)