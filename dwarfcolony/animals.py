"""Wandering animals."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum

from dwarfcolony.world import TILE_SIZE, GameMap

_WALKABLE = frozenset({2, 3})
_MIN_CELL = 1
_MAX_CELL = 49


class Direction(Enum):
    """A step direction, as (dx, dy) in cells."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Animal(ABC):
    """An animal at a pixel position that wanders between walkable tiles."""

    def __init__(self, position: tuple[float, float], rng: random.Random | None = None) -> None:
        self.x, self.y = position
        self.rng = rng if rng is not None else random.Random()
        self.vel_x = 0
        self.vel_y = 0
        self.hp = 0
        self.strength = 0
        self.panic = False
        self.is_walking = False
        self.can_set_random = False
        self.allowed: list[Direction] = []

    @property
    def pos_x(self) -> int:
        return int(self.x / TILE_SIZE)

    @property
    def pos_y(self) -> int:
        return int(self.y / TILE_SIZE)

    def movement_controller(self, game_map: GameMap) -> None:
        """Work out which neighbouring tiles the animal may step onto."""
        x, y = self.pos_x, self.pos_y
        checks = {
            Direction.UP: y - 1 > _MIN_CELL,
            Direction.DOWN: y + 1 < _MAX_CELL,
            Direction.LEFT: x - 1 > _MIN_CELL,
            Direction.RIGHT: x + 1 < _MAX_CELL,
        }
        self.allowed = [
            direction
            for direction, in_bounds in checks.items()
            if in_bounds
            and game_map.tile_at(x + direction.value[0], y + direction.value[1]) in _WALKABLE
        ]

    def move(self) -> None:
        """Pick a random allowed direction and set the velocity towards it."""
        if not self.allowed:
            self.vel_x = self.vel_y = 0
            return
        dx, dy = self.allowed[self.rng.randrange(len(self.allowed))].value
        self.vel_x = dx * TILE_SIZE
        self.vel_y = dy * TILE_SIZE

    def random_float(self, a: float, b: float) -> float:
        """A random number between a and b."""
        return a + self.rng.random() * (b - a)

    @abstractmethod
    def update(self, dt: float) -> bool:
        """Advance the animal by dt seconds; return whether it moved."""


class Beaver(Animal):
    """A beaver that takes a step every one to three seconds."""

    def __init__(self, position: tuple[float, float], rng: random.Random | None = None) -> None:
        super().__init__(position, rng)
        self.hp = 100
        self.strength = 1
        self._elapsed = 0.0
        self._restart_after = self.random_float(0.5, 4.0)

    def update(self, dt: float) -> bool:
        self._elapsed += dt
        if self._elapsed <= self._restart_after:
            return False
        self.move()
        self.x += self.vel_x
        self.y += self.vel_y
        self._restart_after = self.random_float(1.0, 3.0)
        self._elapsed = 0.0
        return True