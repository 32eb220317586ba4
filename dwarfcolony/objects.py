"""Static map objects and the building interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from dwarfcolony.world import TILE_SIZE

TextureRect = tuple[int, int, int, int]

EMPTY_BUSH_RECT: TextureRect = (48, 12, 12, 12)
BERRY_BUSH_RECT: TextureRect = (0, 24, 12, 12)
HIGHLIGHTED_BUSH_RECT: TextureRect = (12, 24, 12, 12)


class GameObject(ABC):
    """Anything placed on a map tile that the cursor can interact with."""

    @abstractmethod
    def update(self, dt: float) -> bool:
        """Advance the object by dt seconds; return whether it changed."""

    @property
    @abstractmethod
    def pos_x(self) -> int:
        """Column of the object's tile."""

    @property
    @abstractmethod
    def pos_y(self) -> int:
        """Row of the object's tile."""

    @property
    @abstractmethod
    def object_type(self) -> str:
        """Name of the kind of object."""

    @property
    @abstractmethod
    def can_interact(self) -> bool:
        """Whether the object can currently be interacted with."""

    @abstractmethod
    def set_can_interact(self, can_interact: bool) -> None:
        """Allow or forbid interaction with the object."""


class Building(GameObject):
    """A building that dwarves construct and that stores goods.

    A building carries a ``level_type`` and a ``building_status``
    (0 while being built, 1 once built).
    """

    level_type: int
    building_status: int

    @abstractmethod
    def check_if_dwarf_next_to_building(self, dwarf) -> None:
        """Note whether the dwarf stands next to the building."""

    @property
    @abstractmethod
    def is_dwarf_next_to_building(self) -> bool:
        """Result of the last neighbour check."""

    @abstractmethod
    def change_texture(self, building_state: int) -> None:
        """Show the texture that belongs to a building state."""

    @abstractmethod
    def change_level_type_texture(self) -> None:
        """Show the texture that belongs to the current level type."""

    @abstractmethod
    def goods(self, kind: int) -> int:
        """Amount of goods of the given kind held by the building."""

    @abstractmethod
    def add_goods(self, amount: int, kind: int) -> None:
        """Change the amount of goods of the given kind by amount."""


class Bushes(GameObject):
    """A bush, empty or carrying berries, at a pixel position."""

    def __init__(self, position: tuple[float, float], with_berries: bool) -> None:
        self.x, self.y = position
        self._can_interact = False
        self.with_berries = bool(with_berries)
        self.texture_rect: TextureRect = BERRY_BUSH_RECT if self.with_berries else EMPTY_BUSH_RECT
        self._name = "bushesBerries" if self.with_berries else "bushesEmpty"
        self.elapsed = 0.0

    def update(self, dt: float) -> bool:
        """Add dt to the bush's elapsed time; its state never changes, so return False."""
        self.elapsed += dt
        return False

    @property
    def pos_x(self) -> int:
        return int(self.x / TILE_SIZE)

    @property
    def pos_y(self) -> int:
        return int(self.y / TILE_SIZE)

    @property
    def object_type(self) -> str:
        return self._name

    @property
    def can_interact(self) -> bool:
        return self._can_interact

    def set_can_interact(self, can_interact: bool) -> None:
        """Allow or forbid interaction, highlighting the bush while allowed."""
        self._can_interact = bool(can_interact)
        self.texture_rect = HIGHLIGHTED_BUSH_RECT if self._can_interact else BERRY_BUSH_RECT

    def change_state(self, with_berries: bool) -> None:
        """Grow or lose berries, updating the name and texture to match."""
        self.with_berries = bool(with_berries)
        self._name = "bushesBerries" if self.with_berries else "bushesEmpty"
        self.texture_rect = BERRY_BUSH_RECT if self.with_berries else EMPTY_BUSH_RECT