"""The tile map of the colony."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

TILE_SIZE = 12
MAP_WIDTH = 50
MAP_HEIGHT = 50
NUM_TILES = 5

# The noise range is split using single-precision 2.2.
_NOISE_SPAN = struct.unpack("f", struct.pack("f", 2.2))[0]


def tile_for_noise(value: float, divisions: int = NUM_TILES) -> int:
    """Map a noise value (roughly -1 to 1.2) onto one of `divisions` tile types."""
    if divisions < 1:
        raise ValueError("divisions must be positive")
    step = _NOISE_SPAN / divisions
    threshold = -1.0
    for tile in range(divisions):
        threshold += step
        if value <= threshold:
            return tile
    return divisions - 1


class GameMap:
    """A rectangular grid of tile types, addressed as (x, y)."""

    def __init__(self, tiles: Iterable[Iterable[int]]) -> None:
        rows = [list(row) for row in tiles]
        if not rows or not rows[0]:
            raise ValueError("a map needs at least one tile")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows of a map must have the same length")
        self._rows = rows

    @classmethod
    def from_noise(cls, noise: Iterable[Iterable[float]], divisions: int = NUM_TILES) -> GameMap:
        """Build a map from rows of noise values."""
        return cls([[tile_for_noise(v, divisions) for v in row] for row in noise])

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) is outside the map")

    def tile_at(self, x: int, y: int) -> int:
        """Tile type at column x, row y."""
        self._check(x, y)
        return self._rows[y][x]

    def update_tile(self, x: int, y: int, tile: int) -> None:
        """Set the tile type at column x, row y."""
        self._check(x, y)
        self._rows[y][x] = tile

    def level_data(self) -> list[int]:
        """All tiles, row by row."""
        return [tile for row in self._rows for tile in row]

    def rows(self) -> Sequence[Sequence[int]]:
        """A copy of the tile rows."""
        return [list(row) for row in self._rows]