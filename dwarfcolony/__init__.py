"""Game logic for a tile-based dwarf colony: maps, A* path finding, dwarves, animals, objects and the status panel."""

__version__ = "0.1.0"
__all__ = ["pathfinding", "world", "animals", "dwarf", "objects", "interface"]