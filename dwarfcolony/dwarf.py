"""The dwarves of the colony: jobs, states, inventory and path following."""

from __future__ import annotations

from enum import IntEnum
from itertools import pairwise

from dwarfcolony.pathfinding import PathFinding
from dwarfcolony.world import TILE_SIZE

WOOD_CAPACITY = 20

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
CYAN: Color = (0, 255, 255)
YELLOW: Color = (255, 255, 0)


class DwarfState(IntEnum):
    """What a dwarf is doing right now."""

    IDLE = 0
    WALK = 1
    CUTTING = 2
    BUILDING = 3
    WORKING = 4


class DwarfJob(IntEnum):
    """The job a dwarf has been given."""

    FREE = 0
    LUMBERJACK = 1
    MINER = 2
    BUILDER = 3
    PORTER = 4


_SETTABLE_STATES = frozenset(
    {DwarfState.IDLE, DwarfState.WALK, DwarfState.CUTTING, DwarfState.BUILDING}
)
_JOBS = frozenset(DwarfJob)

# Job -> (colour when not selected, colour when selected).
_JOB_COLORS: dict[DwarfJob, tuple[Color, Color]] = {
    DwarfJob.LUMBERJACK: (CYAN, YELLOW),
    DwarfJob.BUILDER: ((255, 69, 0), (165, 42, 42)),
    DwarfJob.PORTER: ((75, 0, 130), (238, 130, 238)),
}


class Dwarf:
    """A dwarf at a pixel position that follows path instructions cell by cell."""

    def __init__(self, number: int, position: tuple[float, float]) -> None:
        self.number = number
        self.x, self.y = position
        self.vel_x = 0
        self.vel_y = 0
        self.state = DwarfState.IDLE
        self.job = DwarfJob.FREE
        self.is_selected = False

        self.hp = 100
        self.strength = 10
        self.lvl = 1

        self.wood = 0
        self.stone = 0
        self.berries = 0
        self.meat = 0
        self.must_put_away = False
        self.is_there_any_stock = False

        self.is_going = False
        self.update_instructions = False

        self.ins_x: list[list[int]] = []
        self.ins_y: list[list[int]] = []
        self.sizes: list[int] = []
        self.path_target: tuple[int, int] = (0, 0)
        self.pathfinder: PathFinding | None = None
        self._index = 0

    @property
    def pos_x(self) -> float:
        return self.x / TILE_SIZE

    @property
    def pos_y(self) -> float:
        return self.y / TILE_SIZE

    def update(self, dt: float) -> bool:
        """Take one step along the current path; return whether the dwarf moved."""
        self._move()
        moved = bool(self.vel_x or self.vel_y)
        self.x += self.vel_x
        self.y += self.vel_y
        self.vel_x = 0
        self.vel_y = 0
        return moved

    def _move(self) -> None:
        if self.state is not DwarfState.WALK:
            return
        target_x, target_y = self.path_target
        if target_x <= 0 and target_y <= 0:
            return
        x, y = self.pos_x, self.pos_y
        if target_x < x:
            self.vel_x, self.vel_y = -TILE_SIZE, 0
        if target_x > x:
            self.vel_x, self.vel_y = TILE_SIZE, 0
        if target_y < y:
            self.vel_x, self.vel_y = 0, -TILE_SIZE
        if target_y > y:
            self.vel_x, self.vel_y = 0, TILE_SIZE

    def path_set_map(self, level) -> None:
        """Start a fresh path search over the given level data."""
        if self.update_instructions:
            self.pathfinder = PathFinding()
            self.pathfinder.set_level_data(level)

    def path_set_positions(self, x: int, y: int) -> None:
        """Search from the target cell (x, y) back to the dwarf's cell."""
        if self.update_instructions and self.pathfinder is not None:
            self.pathfinder.set_start_end_nodes(x, y, int(self.pos_x), int(self.pos_y))

    def path_find(self, size: int) -> None:
        """Solve the search and store its path as walking instructions."""
        if self.update_instructions and self.pathfinder is not None:
            self.pathfinder.solve()
            self.pathfinder.update()
            self.set_instructions_move(
                self.pathfinder.path_x(), self.pathfinder.path_y(), size, DwarfState.WALK
            )
            self.update_instructions = False

    def set_instructions_move(self, path_x, path_y, index: int, state: int) -> None:
        """Add one candidate path and switch to the given state."""
        path_x = list(path_x)
        path_y = list(path_y)
        self.sizes.append(len(path_x))
        self.ins_x.append(path_x)
        self.ins_y.append(path_y)
        self.set_state(state)
        self._index = index

    def path_instruction_solution(self) -> None:
        """Pick the next cell to walk to from the shortest candidate path."""
        if self._index <= 0:
            return
        nonzero = [size for size in self.sizes if size != 0]
        self.sizes = [min(nonzero)] if nonzero else [0]
        shortest = self.sizes[0]
        here = (self.pos_x, self.pos_y)
        for xs, ys in zip(self.ins_x, self.ins_y):
            if len(xs) != shortest or len(ys) != shortest:
                continue
            for previous, following in pairwise(zip(xs, ys)):
                if here == previous:
                    self.path_target = following

    def set_state(self, state: int) -> None:
        """Switch state; values other than idle, walk, cutting and building are ignored."""
        if state in _SETTABLE_STATES:
            self.state = DwarfState(state)

    def set_job(self, job: int) -> None:
        """Switch job; unknown values are ignored."""
        if job in _JOBS:
            self.job = DwarfJob(job)

    def add_wood(self, amount: int) -> None:
        """Add carried wood; a full load, or any load for a porter, must be put away."""
        self.wood += amount
        if self.wood == WOOD_CAPACITY:
            self.must_put_away = True
        if self.job is DwarfJob.PORTER and self.wood > 0:
            self.must_put_away = True

    def reset_wood(self) -> None:
        """Drop all carried wood."""
        self.wood = 0
        self.must_put_away = False

    def clear_path_vec(self) -> None:
        """Forget every stored candidate path."""
        self.sizes.clear()
        self.ins_x.clear()
        self.ins_y.clear()

    def path_clear_path_vec(self) -> None:
        """Clear the path collected by the search, if any paths are stored."""
        if self.sizes and self.pathfinder is not None:
            self.pathfinder.clear_path()

    def color(self) -> Color:
        """The RGB tint of the dwarf, by job and selection."""
        colors = _JOB_COLORS.get(self.job)
        if colors is None:
            return RED if self.is_selected else BLUE
        unselected, selected = colors
        return selected if self.is_selected else unselected