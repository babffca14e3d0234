# arkanoid

A small brick breaker in the spirit of Arkanoid, drawn with pygame.

Steer the paddle, launch the ball and clear every block on the board.
When a level is cleared the next one starts; when the last level is done,
or all three lives are gone, the score screen shows the final score. The
best score is written to a file and read back the next time.

## Installing

```
pip install .
```

## Playing

```
arkanoid
```

The same entry point is `arkanoid.app.main`, which also runs with
`python -m arkanoid.app`.

Controls:

| Screen     | Key         | Action                          |
|------------|-------------|---------------------------------|
| Title      | Enter       | Start a game                    |
| Title      | Esc         | Quit                            |
| Game       | Left arrow  | Move the paddle left            |
| Game       | Right arrow | Move the paddle right           |
| Game       | Space       | Release the ball                |
| Game       | Esc         | Pause                           |
| Pause      | Enter       | Resume the game                 |
| Pause      | Esc         | Leave the game, back to title   |
| Game over  | Esc         | Back to the title screen        |

When the window loses focus during play, the game pauses. The mouse is
not used.

Blocks come in ten colours. Silver blocks take two hits and score 50
times the level number; gold blocks never break and score nothing.

## Files the game uses

All paths are relative to the directory the game is started in:

- `Assets/Levels` – the level layouts (format below).
- `Assets/Ancient Medium.ttf` and `Assets/Open Sans.ttf` – the fonts for
  all text on screen.
- `Data/Score` – the high score, as a plain decimal number. A missing or
  unreadable file counts as a high score of 0; the score is written back
  when the program exits, and a failed write is only logged.

## What the package does not include

The package ships no level files and no fonts. Without `Assets/Levels`
there are no levels, so starting a game goes straight to the game over
screen. A font that cannot be loaded is logged as an error and the text
that needs it is not drawn.

## Level file format

`Assets/Levels` is a sequence of levels. Each level is a little-endian
64-bit count of runs followed by that many little-endian 16-bit run
records: the low 10 bits hold how many cells the run covers, the high
6 bits hold the block type (0 for an empty cell, 1–10 for the block
kinds in `arkanoid.block.BlockType`). The runs fill an 11 × 28 grid row
by row; cells after the last run are empty.

`arkanoid.level_manager.parse_levels` and `encode_levels` read and write
this format, `BlockData` is one run, and `LevelManager.level_schema(n)`
returns the 308 cell types of the 1-based level `n`.

## Using the pieces

The engine parts can be used on their own:

- `arkanoid.geometry` – `Color`, `Point`, `Size`, `Rect` and `AABB`.
- `arkanoid.frame_rate.FixedFrameRate` – keeps a loop at a fixed rate and
  reports the frame time; the clock and sleep functions can be passed in.
- `arkanoid.screens.ScreensManager` – a stack of `ScreenState` objects
  built by a `ScreensCreator`, with key bindings passed to the top screen.
- `arkanoid.render.Renderer` – rectangles, circles, images and text on a
  pygame surface, with `justify_offset`, `circle_outline_points` and
  `circle_spans` as plain helpers.
- `arkanoid.score_manager.ScoreManager` – current and high score; as a
  context manager it saves the high score on exit.

## Running the tests

```
pip install .[test]
pytest
```