import pytest

from dwarfcolony.dwarf import Dwarf, DwarfJob, DwarfState, WOOD_CAPACITY
from dwarfcolony.pathfinding import DEFAULT_HEIGHT, DEFAULT_WIDTH
from dwarfcolony.world import TILE_SIZE


def at(x, y, number=1):
    return Dwarf(number, (x * TILE_SIZE, y * TILE_SIZE))


def test_initial_stats():
    d = at(5, 5)
    assert (d.hp, d.strength, d.lvl) == (100, 10, 1)
    assert d.state is DwarfState.IDLE
    assert d.job is DwarfJob.FREE
    assert d.wood == 0
    assert not d.must_put_away


def test_grid_position():
    d = at(5, 7)
    assert (d.pos_x, d.pos_y) == (5, 7)


def test_full_load_must_be_put_away():
    d = at(5, 5)
    d.add_wood(10)
    assert not d.must_put_away
    d.add_wood(10)
    assert d.wood == WOOD_CAPACITY
    assert d.must_put_away
    d.reset_wood()
    assert d.wood == 0
    assert not d.must_put_away


def test_overshooting_capacity_does_not_flag():
    d = at(5, 5)
    d.add_wood(15)
    d.add_wood(10)
    assert d.wood == 15 + 10
    assert not d.must_put_away


def test_porter_puts_away_any_load():
    d = at(5, 5)
    d.set_job(DwarfJob.PORTER)
    d.add_wood(0)
    assert not d.must_put_away
    d.add_wood(5)
    assert d.must_put_away


def test_set_state_ignores_unknown_values():
    d = at(5, 5)
    d.set_state(2)
    assert d.state is DwarfState.CUTTING
    d.set_state(DwarfState.WORKING)
    assert d.state is DwarfState.CUTTING
    d.set_state(99)
    assert d.state is DwarfState.CUTTING


def test_set_job_ignores_unknown_values():
    d = at(5, 5)
    d.set_job(3)
    assert d.job is DwarfJob.BUILDER
    d.set_job(7)
    assert d.job is DwarfJob.BUILDER


@pytest.mark.parametrize(
    "job, selected, expected",
    [
        (DwarfJob.FREE, False, (0, 0, 255)),
        (DwarfJob.FREE, True, (255, 0, 0)),
        (DwarfJob.MINER, False, (0, 0, 255)),
        (DwarfJob.LUMBERJACK, False, (0, 255, 255)),
        (DwarfJob.LUMBERJACK, True, (255, 255, 0)),
        (DwarfJob.BUILDER, False, (255, 69, 0)),
        (DwarfJob.BUILDER, True, (165, 42, 42)),
        (DwarfJob.PORTER, False, (75, 0, 130)),
        (DwarfJob.PORTER, True, (238, 130, 238)),
    ],
)
def test_color(job, selected, expected):
    d = at(5, 5)
    d.set_job(job)
    d.is_selected = selected
    assert d.color() == expected


def test_walks_along_instructions():
    d = at(5, 5)
    d.set_instructions_move([5, 6, 7], [5, 5, 5], 1, DwarfState.WALK)
    assert d.state is DwarfState.WALK
    d.path_instruction_solution()
    assert d.path_target == (6, 5)
    assert d.update(0.1)
    d.path_instruction_solution()
    d.update(0.1)
    assert (d.pos_x, d.pos_y) == (7, 5)
    d.path_instruction_solution()
    assert not d.update(0.1)
    assert (d.pos_x, d.pos_y) == (7, 5)


def test_idle_dwarf_does_not_move():
    d = at(5, 5)
    d.set_instructions_move([5, 6], [5, 5], 1, DwarfState.IDLE)
    d.path_instruction_solution()
    assert not d.update(0.1)
    assert (d.pos_x, d.pos_y) == (5, 5)


def test_walking_without_target_does_not_move():
    d = at(5, 5)
    d.set_state(DwarfState.WALK)
    assert not d.update(0.1)
    assert (d.x, d.y) == (5 * TILE_SIZE, 5 * TILE_SIZE)


def test_solution_prefers_shortest_path():
    d = at(5, 5)
    long_x, long_y = [5, 5, 5, 5], [5, 4, 3, 2]
    short_x, short_y = [5, 6], [5, 5]
    d.set_instructions_move(long_x, long_y, 2, DwarfState.WALK)
    d.set_instructions_move(short_x, short_y, 2, DwarfState.WALK)
    d.path_instruction_solution()
    assert d.sizes == [len(short_x)]
    assert d.path_target == (short_x[1], short_y[1])


def test_solution_with_zero_index_does_nothing():
    d = at(5, 5)
    d.set_instructions_move([5, 6], [5, 5], 0, DwarfState.WALK)
    d.path_instruction_solution()
    assert d.path_target == (0, 0)
    assert d.sizes == [2]


def test_clear_path_vec():
    d = at(5, 5)
    d.set_instructions_move([5, 6], [5, 5], 1, DwarfState.WALK)
    d.clear_path_vec()
    assert (d.sizes, d.ins_x, d.ins_y) == ([], [], [])


def test_path_find_requires_update_instructions():
    d = at(5, 5)
    d.path_set_map([2] * (DEFAULT_WIDTH * DEFAULT_HEIGHT))
    d.path_set_positions(8, 5)
    d.path_find(1)
    assert d.pathfinder is None
    assert d.ins_x == []


def test_finds_and_follows_path_to_target():
    d = at(5, 5)
    d.update_instructions = True
    d.path_set_map([2] * (DEFAULT_WIDTH * DEFAULT_HEIGHT))
    d.path_set_positions(8, 5)
    d.path_find(1)
    assert not d.update_instructions
    assert d.state is DwarfState.WALK
    assert (d.ins_x[0][0], d.ins_y[0][0]) == (5, 5)
    for _ in range(10):
        d.path_instruction_solution()
        d.update(0.1)
    assert abs(d.pos_x - 8) + abs(d.pos_y - 5) == 1


def test_path_clear_path_vec_clears_search_path():
    d = at(5, 5)
    d.update_instructions = True
    d.path_set_map([2] * (DEFAULT_WIDTH * DEFAULT_HEIGHT))
    d.path_set_positions(8, 5)
    d.path_find(1)
    assert d.pathfinder.path_x()
    d.path_clear_path_vec()
    assert d.pathfinder.path_x() == []
    assert d.pathfinder.path_y() == []