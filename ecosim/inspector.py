"""State of the cell inspection panel and the text shown in the top bar."""

from __future__ import annotations

from enum import Enum

from ecosim import config
from ecosim.cell import Cell

# Reference layout: a maximised window, not full screen.
REFERENCE_RESOLUTION = (1920, 1001)

TEXT_SIZE_SMALL = 14
TEXT_SIZE_MEDIUM = 18
TEXT_SIZE_BIG = 20
TEXT_SIZE_HUGE = 24

TOP_BAR_HEIGHT = 30
TOP_BAR_HEIGHT_WITH_SCROLL = 42
WIDGET_HORIZONTAL_MARGIN = 10
MENU_BAR_FIXED_SIZE = 105
RIGHT_PANEL_X_WINDOW_SHARE = 0.2
RIGHT_PANEL_TITLE_RATIO = 0.06

CELL_TAB_NAME = "Cell"
ANIMAL_TAB_NAME = "Animal"
GENES_TAB_NAME = "Genes"

TITLE_TEXT_FREE = "INSERT"
TITLE_TEXT_INSERT = "INSERT"
TITLE_TEXT_INSPECT = "INSPECT"
BUTTON_TEXT_FREE = "BIND"
BUTTON_TEXT_INSERT = "UNBIND"
BUTTON_TEXT_INSPECT = "BIND"
CELL_ID_FREE = "N/A"

PROPERTY_MIN = 0.0
PROPERTY_MAX = 100.0
DEFAULT_PROPERTY_VALUE = 2.1


class ControlMode(Enum):
    """What a click on a grid cell does."""

    FREE = 0
    INSERT = 1
    INSPECT = 2


DEFAULT_CONTROL_MODE = ControlMode.FREE

_MODE_TEXTS = {
    ControlMode.FREE: (TITLE_TEXT_FREE, BUTTON_TEXT_FREE),
    ControlMode.INSERT: (TITLE_TEXT_INSERT, BUTTON_TEXT_INSERT),
    ControlMode.INSPECT: (TITLE_TEXT_INSPECT, BUTTON_TEXT_INSPECT),
}


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Inspector:
    """Tracks the selected cell and the values shown for it in the side panel.

    The displayed values use the panel's 0..100 scale; in insert mode they
    are written back to the clicked cell instead of being read from it.
    """

    def __init__(self) -> None:
        cell_range = config.MAX_TEMP - config.MIN_TEMP
        property_range = PROPERTY_MAX - PROPERTY_MIN
        self._multiplier = property_range / cell_range
        self._offset = config.MIN_TEMP

        self.mode = DEFAULT_CONTROL_MODE
        self.tracked_cell: Cell | None = None

        self.cell_id_text = CELL_ID_FREE
        self.vegetation = DEFAULT_PROPERTY_VALUE
        self.temperature = DEFAULT_PROPERTY_VALUE
        self.humidity = DEFAULT_PROPERTY_VALUE
        self.elevation = DEFAULT_PROPERTY_VALUE

        self.title_text = ""
        self.button_text = ""
        self._update_for_control_mode()

    def _update_for_control_mode(self) -> None:
        self.title_text, self.button_text = _MODE_TEXTS[self.mode]
        if self.mode is not ControlMode.INSPECT:
            self.cell_id_text = CELL_ID_FREE

    def _set_mode(self, mode: ControlMode) -> None:
        self.mode = mode
        self._update_for_control_mode()

    def forward_clicked_cell(self, cell: Cell) -> None:
        """React to a click on ``cell`` according to the control mode."""
        self.tracked_cell = cell
        if self.mode is ControlMode.FREE:
            self._set_mode(ControlMode.INSPECT)
            self.update_inspection()
        elif self.mode is ControlMode.INSERT:
            self.apply_to_cell()
        else:
            self.update_inspection()

    def update_inspection(self) -> bool:
        """Refresh the shown values from the tracked cell.

        Returns whether anything was refreshed: only in inspect mode with a
        tracked cell.
        """
        cell = self.tracked_cell
        if self.mode is not ControlMode.INSPECT or cell is None:
            return False
        self.cell_id_text = f"({cell.pos_x}, {cell.pos_y})"
        self.vegetation = self._display_value(cell.vegetation)
        self.temperature = self._display_value(cell.temperature)
        self.humidity = self._display_value(cell.humidity)
        self.elevation = self._display_value(cell.elevation)
        return True

    def toggle_bind(self) -> None:
        """Switch between insert mode and free mode."""
        if self.mode is ControlMode.INSERT:
            self._set_mode(ControlMode.FREE)
        else:
            self._set_mode(ControlMode.INSERT)

    def bind(self) -> None:
        """Enter insert mode."""
        self._set_mode(ControlMode.INSERT)

    def unbind(self) -> None:
        """Leave insert or inspect mode for free mode."""
        if self.mode in (ControlMode.INSERT, ControlMode.INSPECT):
            self._set_mode(ControlMode.FREE)

    def apply_to_cell(self) -> None:
        """Write the shown values into the tracked cell."""
        cell = self.tracked_cell
        if cell is None:
            raise RuntimeError("no cell is being tracked")
        cell.vegetation = self.untranslate_property(self.vegetation)
        cell.update_climate(
            self.untranslate_property(self.temperature),
            self.untranslate_property(self.humidity),
            self.untranslate_property(self.elevation),
        )

    def translate_property(self, val: float) -> float:
        """Map a cell property onto the panel scale, biased for rounding."""
        return self._offset + val * self._multiplier + 0.5

    def untranslate_property(self, val: float) -> float:
        """Map a panel value back onto the cell property scale."""
        return val / self._multiplier - self._offset

    def _display_value(self, val: float) -> int:
        shown = _clamp(self.translate_property(val), PROPERTY_MIN, PROPERTY_MAX)
        return int(shown)


def format_fps(fps: float) -> str:
    """Text of the frames-per-second label."""
    return f"FPS: {int(fps)}"


def format_iteration(iteration: int) -> str:
    """Text of the iteration counter label."""
    return f"Iteration: {iteration}"


def format_speed(speed: int) -> str:
    """Text of the simulation speed label."""
    return f"Speed: {speed} UPS"


def pause_button_text(paused: bool) -> str:
    """Text of the pause/resume button for the given state."""
    return ">" if paused else "||"


def scale_text_size(reference_size: int, window_size: tuple[int, int]) -> int:
    """Scale a text size by how the window compares to the reference layout."""
    width, height = window_size
    ratio_x = width / REFERENCE_RESOLUTION[0]
    ratio_y = height / REFERENCE_RESOLUTION[1]
    average_ratio = (ratio_x + ratio_y) / 2.0
    return int(reference_size * average_ratio)