import pytest

from dwarfcolony.objects import Building, Bushes, GameObject
from dwarfcolony.world import TILE_SIZE


def test_bush_with_berries():
    bush = Bushes((0.0, 0.0), True)
    assert bush.object_type == "bushesBerries"
    assert bush.texture_rect == (0, 24, 12, 12)
    assert not bush.can_interact


def test_empty_bush():
    bush = Bushes((0.0, 0.0), False)
    assert bush.object_type == "bushesEmpty"
    assert bush.texture_rect == (48, 12, 12, 12)


def test_bush_grid_position():
    bush = Bushes((4 * TILE_SIZE, 9 * TILE_SIZE), False)
    assert (bush.pos_x, bush.pos_y) == (4, 9)


def test_interaction_changes_texture():
    bush = Bushes((0.0, 0.0), True)
    bush.set_can_interact(True)
    assert bush.can_interact
    assert bush.texture_rect == (12, 24, 12, 12)
    bush.set_can_interact(False)
    assert not bush.can_interact
    assert bush.texture_rect == (0, 24, 12, 12)


def test_change_state_round_trip():
    bush = Bushes((0.0, 0.0), True)
    original = (bush.object_type, bush.texture_rect)
    bush.change_state(False)
    assert bush.object_type == "bushesEmpty"
    assert not bush.with_berries
    bush.change_state(True)
    assert (bush.object_type, bush.texture_rect) == original


def test_bush_update_changes_nothing():
    bush = Bushes((TILE_SIZE, TILE_SIZE), True)
    assert bush.update(0.5) is False
    assert (bush.pos_x, bush.pos_y, bush.object_type) == (1, 1, "bushesBerries")


@pytest.mark.parametrize("cls", [GameObject, Building])
def test_abstract_classes_cannot_be_created(cls):
    with pytest.raises(TypeError):
        cls()