"""The movable, zoomable view onto the grid and the colouring of cells."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ecosim import config
from ecosim.cell import Cell
from ecosim.vismode import Color, VisMode, get_data

Point = tuple[float, float]

# Value range and property name that each mode colours cells by.
_MODE_RANGES: dict[VisMode, tuple[str, float, float]] = {
    VisMode.TEMPERATURE: ("temperature", config.MIN_TEMP, config.MAX_TEMP),
    VisMode.HUMIDITY: ("humidity", config.MIN_HUMIDITY, config.MAX_HUMIDITY),
    VisMode.ELEVATION: ("elevation", config.MIN_ELEVATION, config.MAX_ELEVATION),
    VisMode.VEGETATION: ("vegetation", 0.0, config.VEG_BASE_GROWTH_MAX),
}


class GridView:
    """A rectangle of world space shown in a rectangle of the window.

    ``viewport`` is the on-screen rectangle ``(left, top, width, height)`` in
    pixels; ``size`` is how much world space it shows, around ``center``.
    """

    def __init__(self, viewport: Sequence[float], size: Sequence[float]) -> None:
        left, top, width, height = (float(v) for v in viewport)
        if width <= 0 or height <= 0:
            raise ValueError(f"viewport must have a positive size, got {width} x {height}")
        size_w, size_h = float(size[0]), float(size[1])
        if size_w <= 0 or size_h <= 0:
            raise ValueError(f"view size must be positive, got {size_w} x {size_h}")
        self.viewport = (left, top, width, height)
        self.size = (size_w, size_h)
        self.center: Point = (size_w / 2.0, size_h / 2.0)

    def zoom(self, factor: float) -> None:
        """Scale the visible world area by ``factor`` (below 1 zooms in)."""
        if factor <= 0:
            raise ValueError(f"zoom factor must be positive, got {factor}")
        self.size = (self.size[0] * factor, self.size[1] * factor)

    def move(self, dx: float, dy: float) -> None:
        """Shift the view's centre by an offset in world units."""
        self.center = (self.center[0] + dx, self.center[1] + dy)

    def _scale(self) -> tuple[float, float]:
        _, _, width, height = self.viewport
        return width / self.size[0], height / self.size[1]

    def world_to_screen(self, point: Sequence[float]) -> Point:
        """Map a world point to window pixels."""
        left, top, width, height = self.viewport
        scale_x, scale_y = self._scale()
        return (
            left + width / 2.0 + (point[0] - self.center[0]) * scale_x,
            top + height / 2.0 + (point[1] - self.center[1]) * scale_y,
        )

    def screen_to_world(self, point: Sequence[float]) -> Point:
        """Map window pixels to a world point."""
        left, top, width, height = self.viewport
        scale_x, scale_y = self._scale()
        return (
            self.center[0] + (point[0] - left - width / 2.0) / scale_x,
            self.center[1] + (point[1] - top - height / 2.0) / scale_y,
        )

    def contains_screen_point(self, point: Sequence[float]) -> bool:
        """Whether a window pixel lies inside the viewport."""
        left, top, width, height = (int(v) for v in self.viewport)
        x, y = point[0], point[1]
        return left <= x < left + width and top <= y < top + height


def compute_cell_size(viewport_size: Sequence[float], grid_width: int, grid_height: int) -> float:
    """The largest cell size that fits the whole grid into the viewport."""
    if grid_width <= 0 or grid_height <= 0:
        raise ValueError(f"grid dimensions must be positive, got {grid_width} x {grid_height}")
    width, height = viewport_size[0], viewport_size[1]
    return min(width / grid_width, height / grid_height)


def lerp_color(start: Color, end: Color, t: float) -> Color:
    """Interpolate between two colours; ``t`` is clamped to [0, 1]."""
    t = max(0.0, min(t, 1.0))
    red, green, blue = (int(s + t * (e - s)) for s, e in zip(start, end))
    return red, green, blue


def property_colors(cells: Iterable[Cell], mode: VisMode) -> list[Color]:
    """Colour each cell by the property that ``mode`` shows."""
    attribute, min_val, max_val = _MODE_RANGES[mode]
    data = get_data(mode)
    norm_multiplier = 1.0 / (max_val - min_val)
    return [
        lerp_color(
            data.low_end_color,
            data.high_end_color,
            (getattr(cell, attribute) - min_val) * norm_multiplier,
        )
        for cell in cells
    ]