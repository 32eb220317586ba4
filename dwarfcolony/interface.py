"""The colony's status panel: stock counters, cursor position and dwarf details."""

from __future__ import annotations

JOB_NAMES = {0: "Free", 1: "Lumberjack", 2: "Miner", 3: "Builder", 4: "Porter"}
STATE_NAMES = {0: "Idle", 1: "Walking", 2: "Cutting", 3: "Building"}

_DWARF_FIELDS = 5
_BLANK = " "


class Interface:
    """Text shown in the status panel.

    ``dwarf_data`` holds, in order, the selected dwarf's number, hit points,
    job, state and strength.
    """

    def __init__(self) -> None:
        self.wood_value = 0
        self.planks_value = 0
        self.wood_text = "0"
        self.planks_text = "0"
        self.cursor_text = ""
        self.dwarf_data = [_BLANK] * _DWARF_FIELDS
        self._job_name = ""
        self._state_name = ""

    def set_cursor_position(self, x: int, y: int) -> None:
        """Show the cursor's tile as "x:y"."""
        self.cursor_text = f"{x}:{y}"

    def update_wood_value(self, value: int) -> None:
        """Show the amount of wood in store."""
        self.wood_value = value
        self.wood_text = str(value)

    def update_planks_value(self, value: int) -> None:
        """Show the amount of planks made."""
        self.planks_value = value
        self.planks_text = str(value)

    def set_data_from_dwarf(
        self, dwarf_id: int, hp: int, job: int, state: int, strength: int, lvl: int
    ) -> None:
        """Show the details of a dwarf; unknown jobs or states keep the previous name."""
        self._job_name = JOB_NAMES.get(job, self._job_name)
        self._state_name = STATE_NAMES.get(state, self._state_name)
        self.dwarf_data = [
            str(dwarf_id),
            str(hp),
            self._job_name,
            self._state_name,
            str(strength),
        ]

    def reset_data(self) -> None:
        """Blank out the dwarf details."""
        self.dwarf_data = [_BLANK] * _DWARF_FIELDS