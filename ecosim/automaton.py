"""The grid of cells and its simulation step."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator

from ecosim import config
from ecosim.cell import Cell

logger = logging.getLogger(__name__)


class Automaton:
    """A width x height grid of cells, stored row-major."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._cells: list[Cell] = self._generate_cells()

    def _generate_cells(self) -> list[Cell]:
        cells = []
        for i in range(self.width * self.height):
            temperature = self._rng.uniform(config.MIN_TEMP, config.MAX_TEMP)
            humidity = self._rng.uniform(config.MIN_HUMIDITY, config.MAX_HUMIDITY)
            elevation = self._rng.uniform(config.MIN_ELEVATION, config.MAX_ELEVATION)
            y, x = divmod(i, self.width)
            cells.append(Cell(x, y, temperature, humidity, elevation))
        return cells

    @property
    def cells(self) -> tuple[Cell, ...]:
        """All cells in row-major order."""
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def reset(self) -> None:
        """Regenerate every cell with a fresh random climate."""
        logger.info("resetting automaton")
        self._cells = self._generate_cells()

    def update(self) -> None:
        """Advance every cell by one step."""
        for cell in self._cells:
            cell.process()

    def modify_cell(self, x: int, y: int) -> str:
        """Describe the cell at (x, y) and return the description."""
        cell = self.cell_at(x, y)
        report = "\n".join(
            (
                f"Cell ({x}, {y})",
                f"Growth limit: {cell.growth_limit}",
                f"Growth factor: {cell.growth_factor}",
                f"Vegetation: {cell.vegetation}",
                f"Temperature: {cell.temperature}",
                f"Humidity: {cell.humidity}",
                f"Elevation: {cell.elevation}",
            )
        )
        logger.info("%s", report)
        return report

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y); raise ValueError outside the grid."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"invalid cell position ({x}, {y})")
        return self._cells[x + self.width * y]