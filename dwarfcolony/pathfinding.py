"""A* path search over a rectangular tile grid."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

DEFAULT_WIDTH = 50
DEFAULT_HEIGHT = 50

_WALKABLE_TILE = 2
_BLOCKING_TILES = frozenset({1, 4})


@dataclass(eq=False)
class _Node:
    x: int
    y: int
    obstacle: bool = False
    visited: bool = False
    global_goal: float = math.inf
    local_goal: float = math.inf
    parent: _Node | None = None
    neighbors: list[_Node] = field(default_factory=list)


def _distance(a: _Node, b: _Node) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


class PathFinding:
    """Finds a four-connected path between two cells of a tile map.

    Tiles of type 2 are walkable, types 1 and 4 block movement; other tile
    types keep whatever blocking state the cell had from the previous search.
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self._level: list[int] = []
        self._path_x: list[int] = []
        self._path_y: list[int] = []
        self._start: _Node | None = None
        self._end: _Node | None = None
        self.obstacle_position: tuple[int, int] | None = None
        self._nodes = [_Node(x, y) for y in range(height) for x in range(width)]
        for node in self._nodes:
            x, y = node.x, node.y
            if y > 0:
                node.neighbors.append(self._node(x, y - 1))
            if y < height - 1:
                node.neighbors.append(self._node(x, y + 1))
            if x > 0:
                node.neighbors.append(self._node(x - 1, y))
            if x < width - 1:
                node.neighbors.append(self._node(x + 1, y))

    def _node(self, x: int, y: int) -> _Node:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        return self._nodes[y * self.width + x]

    def set_level_data(self, level) -> None:
        """Replace the tile data, given row-major, one value per cell."""
        self._level = list(level)

    def set_start_end_nodes(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Choose the start cell (x1, y1) and the end cell (x2, y2)."""
        self._start = self._node(x1, y1)
        self._end = self._node(x2, y2)

    def set_obstacle_node(self, x: int, y: int) -> None:
        """Remember the position of a moving obstacle."""
        self.obstacle_position = (x, y)

    def solve(self) -> bool:
        """Run the search from the start node towards the end node."""
        if len(self._level) < self.width * self.height:
            raise ValueError("level data does not cover the whole grid")
        if self._start is None or self._end is None:
            raise ValueError("start and end nodes must be set before solving")

        for node, tile in zip(self._nodes, self._level):
            node.visited = False
            node.global_goal = math.inf
            node.local_goal = math.inf
            node.parent = None
            if tile == _WALKABLE_TILE:
                node.obstacle = False
            elif tile in _BLOCKING_TILES:
                node.obstacle = True

        start, end = self._start, self._end
        start.local_goal = 0.0
        start.global_goal = _distance(start, end)

        current = start
        untested = [start]
        while untested and current is not end:
            untested.sort(key=lambda n: n.global_goal)
            while untested and untested[0].visited:
                untested.pop(0)
            if not untested:
                break

            current = untested[0]
            current.visited = True

            for neighbor in current.neighbors:
                if not neighbor.visited and not neighbor.obstacle:
                    untested.append(neighbor)
                lower = current.local_goal + _distance(current, neighbor)
                if lower < neighbor.local_goal:
                    neighbor.parent = current
                    neighbor.local_goal = lower
                    neighbor.global_goal = lower + _distance(neighbor, end)
        return True

    def update(self) -> None:
        """Append the found path, from the end node back towards the start."""
        if self._end is None:
            return
        start = self._start
        node = self._end
        while node.parent is not None:
            if start is None or (node.x, node.y) != (start.x, start.y):
                self._path_x.append(node.x)
                self._path_y.append(node.y)
            node = node.parent

    def clear_path(self) -> None:
        """Forget the collected path."""
        self._path_x.clear()
        self._path_y.clear()

    def path_x(self) -> list[int]:
        """X coordinates of the collected path."""
        return list(self._path_x)

    def path_y(self) -> list[int]:
        """Y coordinates of the collected path."""
        return list(self._path_y)