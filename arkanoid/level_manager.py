"""Loading of level layouts from the packed levels file."""

from __future__ import annotations

import functools
import struct
from dataclasses import dataclass
from itertools import chain, repeat
from pathlib import Path
from typing import Iterable, Sequence, Union

from arkanoid.config import CELL_COUNT

LEVELS_FILE = Path("Assets/Levels")

_COUNT_BITS = 10
_TYPE_BITS = 6
_COUNT_MASK = (1 << _COUNT_BITS) - 1
_TYPE_MASK = (1 << _TYPE_BITS) - 1

_SIZE = struct.Struct("<q")
_WORD_SIZE = 2


@dataclass(frozen=True)
class BlockData:
    """A run of ``count`` consecutive cells holding blocks of ``block_type``."""

    count: int
    block_type: int

    def __post_init__(self) -> None:
        if not 0 <= self.count <= _COUNT_MASK:
            raise ValueError(f"block count {self.count} does not fit in {_COUNT_BITS} bits")
        if not 0 <= self.block_type <= _TYPE_MASK:
            raise ValueError(f"block type {self.block_type} does not fit in {_TYPE_BITS} bits")

    @classmethod
    def from_word(cls, word: int) -> BlockData:
        return cls(word & _COUNT_MASK, (word >> _COUNT_BITS) & _TYPE_MASK)

    @property
    def word(self) -> int:
        """The 16-bit packed form: count in the low bits, type in the high bits."""
        return self.count | (self.block_type << _COUNT_BITS)


def parse_levels(data: bytes) -> list[list[BlockData]]:
    """Decode a levels file: per level, a 64-bit run count then 16-bit runs."""
    levels: list[list[BlockData]] = []
    offset = 0
    while offset < len(data):
        if len(data) - offset < _SIZE.size:
            raise ValueError("truncated level header")
        (size,) = _SIZE.unpack_from(data, offset)
        offset += _SIZE.size
        if size < 0:
            raise ValueError(f"negative level size {size}")
        end = offset + size * _WORD_SIZE
        if end > len(data):
            raise ValueError("truncated level data")
        words = struct.unpack_from(f"<{size}H", data, offset)
        levels.append([BlockData.from_word(word) for word in words])
        offset = end
    return levels


def encode_levels(levels: Iterable[Sequence[BlockData]]) -> bytes:
    """Encode levels in the format read by :func:`parse_levels`."""
    return b"".join(
        _SIZE.pack(len(level)) + struct.pack(f"<{len(level)}H", *(block.word for block in level))
        for level in levels
    )


class LevelManager:
    """Holds the run-length encoded layouts of all levels."""

    def __init__(self, levels: Iterable[Sequence[BlockData]] = ()) -> None:
        self._levels = [list(level) for level in levels]

    @classmethod
    def from_file(cls, path: Union[str, Path] = LEVELS_FILE) -> LevelManager:
        """Load levels from ``path``; a missing file gives no levels."""
        path = Path(path)
        if not path.exists():
            return cls()
        return cls(parse_levels(path.read_bytes()))

    @property
    def level_count(self) -> int:
        return len(self._levels)

    def level_schema(self, level: int) -> list[int]:
        """Return the block type of every grid cell of the 1-based ``level``."""
        if not 1 <= level <= len(self._levels):
            raise IndexError(f"level {level} out of range 1..{len(self._levels)}")
        cells = list(
            chain.from_iterable(
                repeat(block.block_type, block.count) for block in self._levels[level - 1]
            )
        )
        if len(cells) > CELL_COUNT:
            raise ValueError(f"level {level} has {len(cells)} cells, more than {CELL_COUNT}")
        return cells + [0] * (CELL_COUNT - len(cells))


@functools.lru_cache(maxsize=None)
def default_level_manager() -> LevelManager:
    """The shared level manager, loaded once from the game's levels file."""
    return LevelManager.from_file(LEVELS_FILE)