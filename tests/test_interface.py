from dwarfcolony.dwarf import DwarfJob, DwarfState
from dwarfcolony.interface import Interface


def test_initial_values():
    ui = Interface()
    assert (ui.wood_value, ui.planks_value) == (0, 0)
    assert (ui.wood_text, ui.planks_text) == ("0", "0")
    assert ui.dwarf_data == [" "] * len(ui.dwarf_data)


def test_cursor_position():
    ui = Interface()
    ui.set_cursor_position(3, 4)
    assert ui.cursor_text == "3:4"


def test_wood_value():
    ui = Interface()
    ui.update_wood_value(40)
    assert ui.wood_value == 40
    assert ui.wood_text == str(40)


def test_planks_value():
    ui = Interface()
    ui.update_planks_value(20)
    assert ui.planks_value == 20
    assert ui.planks_text == str(20)
    assert ui.wood_value == 0


def test_dwarf_data():
    ui = Interface()
    ui.set_data_from_dwarf(1, 100, 1, 2, 10, 1)
    assert ui.dwarf_data == ["1", "100", "Lumberjack", "Cutting", "10"]


def test_dwarf_data_accepts_enums():
    ui = Interface()
    ui.set_data_from_dwarf(2, 100, DwarfJob.PORTER, DwarfState.BUILDING, 10, 1)
    assert ui.dwarf_data[2:4] == ["Porter", "Building"]


def test_unknown_job_and_state_keep_previous_names():
    ui = Interface()
    ui.set_data_from_dwarf(1, 100, 3, 1, 10, 1)
    ui.set_data_from_dwarf(1, 100, 9, DwarfState.WORKING, 10, 1)
    assert ui.dwarf_data[2:4] == ["Builder", "Walking"]


def test_reset_data():
    ui = Interface()
    ui.set_data_from_dwarf(1, 100, 0, 0, 10, 1)
    assert ui.dwarf_data[2:4] == ["Free", "Idle"]
    ui.reset_data()
    assert all(field == " " for field in ui.dwarf_data)