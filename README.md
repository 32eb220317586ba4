# dwarfcolony

The game logic of a small tile-based colony simulation. Dwarves take jobs,
follow paths across a 50 × 50 tile map and carry wood. Beavers wander about on
their own. Bushes sit on the map, with or without berries.

The package holds the state and the rules only. It draws nothing and reads no
input, so you can drive it from any front end or from tests.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `dwarfcolony.world`

- `GameMap(tiles)` is a rectangular grid of integer tile codes, given as rows.
  Every row must have the same length. `tile_at(x, y)` reads a tile and
  `update_tile(x, y, tile)` changes one. Both raise `IndexError` outside the
  map. `level_data()` returns all tiles row by row, and `rows()` returns a copy
  of the grid. `width` and `height` give the size.
- `tile_for_noise(value, divisions=5)` maps a noise value, roughly from -1 to
  1.2, onto one of `divisions` tile codes.
- `GameMap.from_noise(noise, divisions=5)` builds a map from rows of noise
  values that you supply.
- The constants are `TILE_SIZE` (12 pixels per tile), `MAP_WIDTH`,
  `MAP_HEIGHT` and `NUM_TILES`.

### `dwarfcolony.pathfinding`

`PathFinding(width=50, height=50)` runs an A* search over the grid in four
directions.

1. `set_level_data(level)` takes the tiles row by row.
2. `set_start_end_nodes(x1, y1, x2, y2)` sets the start and end cells.
3. `solve()` runs the search.
4. `update()` appends the path, read from the end cell back towards the start.
   The start cell itself is left out.

`path_x()` and `path_y()` return the coordinates collected so far, and
`clear_path()` forgets them.

Tile 2 is walkable. Tiles 1 and 4 block the way. Any other tile code keeps the
blocking state its cell had after the previous search. `set_obstacle_node(x, y)`
only records a position in `obstacle_position`.

### `dwarfcolony.animals`

`Animal` is an abstract base class for a creature at a pixel position.

- `movement_controller(game_map)` notes which neighbouring tiles it may step
  onto. A tile counts if it is code 2 or 3 and lies within the map's inner
  bounds.
- `move()` picks one of those directions at random and sets `vel_x` and
  `vel_y` to one tile's worth of pixels. If no direction is allowed, both are
  set to zero.
- `random_float(a, b)` returns a random number between `a` and `b`.

`Direction` is the enum of the four step directions.

`Beaver(position, rng=None)` has 100 hp and strength 1. `update(dt)` adds up
the elapsed time. Once that passes a random interval, the beaver takes a step
and returns `True`. The first interval is 0.5–4 s and later ones are 1–3 s.
Pass a `random.Random` as `rng` to get repeatable behaviour.

### `dwarfcolony.dwarf`

`Dwarf(number, position)` is a worker at a pixel position. Its attributes are:

- `job`, a `DwarfJob`: `FREE`, `LUMBERJACK`, `MINER`, `BUILDER` or `PORTER`.
- `state`, a `DwarfState`: `IDLE`, `WALK`, `CUTTING`, `BUILDING` or `WORKING`.
- `is_selected`.
- Stats `hp`, `strength` and `lvl`.
- Carried goods, such as `wood`.

Its methods are:

- `set_job(job)` and `set_state(state)` take integer codes and ignore unknown
  ones. `set_state` also ignores `WORKING`.
- `add_wood(amount)` adds wood. The dwarf then has to put it away when it
  holds exactly 20 (`WOOD_CAPACITY`). A porter has to put away any amount
  above zero. `reset_wood()` empties the load.
- Path following goes in steps, and each step acts only while
  `update_instructions` is true:
  - `path_set_map(level)` creates a 50 × 50 `PathFinding`.
  - `path_set_positions(x, y)` searches from the target cell back to the
    dwarf's cell.
  - `path_find(size)` stores the result as a candidate path and switches to
    `WALK`.
  - `path_instruction_solution()` picks the next cell from the shortest
    non-empty candidate.
  - `update(dt)` takes one tile step towards that cell.
- `clear_path_vec()` and `path_clear_path_vec()` forget the stored candidates
  and the search's collected path.
- `color()` returns the RGB tint, chosen by job and by selection.

### `dwarfcolony.objects`

- `GameObject` is the abstract interface for things placed on a tile.
- `Building` is the abstract interface for buildings. It covers goods, textures
  per state, level type, build status and whether a dwarf stands next to the
  building.
- `Bushes(position, with_berries)` is a concrete object. Its `object_type` is
  `"bushesBerries"` or `"bushesEmpty"`, and its `texture_rect` follows its
  state.
  - `set_can_interact(flag)` switches between the highlighted and the berry
    texture.
  - `change_state(with_berries)` changes the name and the texture.

### `dwarfcolony.interface`

`Interface` holds the text of the status panel.

- `update_wood_value(value)` sets `wood_value` and `wood_text`.
- `update_planks_value(value)` sets `planks_value` and `planks_text`.
- `set_cursor_position(x, y)` sets `cursor_text` to `"x:y"`.
- `set_data_from_dwarf(...)` fills `dwarf_data` with the number, hit points,
  job name, state name and strength.
- `reset_data()` blanks `dwarf_data`.

## Example

```python
from dwarfcolony.world import GameMap, TILE_SIZE
from dwarfcolony.pathfinding import PathFinding
from dwarfcolony.dwarf import Dwarf

game_map = GameMap([[2] * 50 for _ in range(50)])

finder = PathFinding(50, 50)
finder.set_level_data(game_map.level_data())
finder.set_start_end_nodes(10, 10, 3, 3)
finder.solve()
finder.update()
print(list(zip(finder.path_x(), finder.path_y())))

dwarf = Dwarf(1, (5 * TILE_SIZE, 5 * TILE_SIZE))
dwarf.update_instructions = True
dwarf.path_set_map(game_map.level_data())
dwarf.path_set_positions(8, 5)
dwarf.path_find(1)
dwarf.path_instruction_solution()
dwarf.update(0.1)
print(dwarf.pos_x, dwarf.pos_y)  # 6.0 5.0
```

## What the package does not do

The package has no game loop and no command to start a game. It also has
none of the following:

- Rendering, windows, textures, fonts or keyboard and cursor handling.
- A noise generator. `GameMap.from_noise` needs noise values from you.
- Trees, and any concrete building. `Building` is an interface only.
- Logic that assigns dwarves to trees, stockpiles or construction sites.
- A way to save a game.

All of that is left to the program that uses these modules.