[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dwarfcolony"
version = "0.1.0"
description = "Game logic for a small tile-based dwarf colony simulation: tile maps, A* path finding, dwarves, animals and map objects."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "colony", "pathfinding", "a-star", "tile-map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dwarfcolony"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
