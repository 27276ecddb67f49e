"""Visualisation modes and the data that describes how each is drawn."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Color = tuple[int, int, int]

BLUE: Color = (0, 0, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
WHITE: Color = (255, 255, 255)


class VisMode(Enum):
    """Which cell property the grid is coloured by."""

    TEMPERATURE = "Temperature"
    HUMIDITY = "Humidity"
    ELEVATION = "Elevation"
    VEGETATION = "Vegetation"


@dataclass(frozen=True)
class VisModeData:
    """Display name, legend labels and gradient end colours of a mode."""

    vis_mode: VisMode
    name: str
    low_end_name: str
    high_end_name: str
    low_end_color: Color
    high_end_color: Color


DEFAULT_MODE = VisMode.TEMPERATURE

VIS_MODE_DATA: tuple[VisModeData, ...] = (
    VisModeData(VisMode.TEMPERATURE, "Temperature", "Cold", "Hot", BLUE, RED),
    VisModeData(VisMode.HUMIDITY, "Humidity", "Arid", "Water", (139, 69, 19), (0, 120, 255)),
    VisModeData(VisMode.ELEVATION, "Elevation", "Lowland", "Highland", (0, 255, 0), (139, 69, 19)),
    VisModeData(VisMode.VEGETATION, "Vegetation", "Barren", "Lush", WHITE, GREEN),
)


def get_data(mode: VisMode) -> VisModeData:
    """Return the display data for ``mode``."""
    for data in VIS_MODE_DATA:
        if data.vis_mode is mode:
            return data
    raise ValueError(f"unmapped vis mode: {mode!r}")


def to_string(mode: VisMode) -> str:
    """Return the display name of ``mode``."""
    return get_data(mode).name


def to_vis_mode(name: str) -> VisMode:
    """Return the mode whose display name is ``name``."""
    for data in VIS_MODE_DATA:
        if data.name == name:
            return data.vis_mode
    raise ValueError(f"unmapped vis mode name: {name}")