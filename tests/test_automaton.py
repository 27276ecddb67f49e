import random

import pytest

from ecosim import config
from ecosim.automaton import Automaton


def make(width=5, height=4, seed=7):
    return Automaton(width, height, random.Random(seed))


def test_cell_count():
    automaton = make()
    assert len(automaton) == 20
    assert len(automaton.cells) == len(automaton)


def test_climate_within_bounds():
    automaton = make(10, 10)
    for cell in automaton:
        assert config.MIN_TEMP <= cell.temperature <= config.MAX_TEMP
        assert config.MIN_HUMIDITY <= cell.humidity <= config.MAX_HUMIDITY
        assert config.MIN_ELEVATION <= cell.elevation <= config.MAX_ELEVATION
        assert cell.vegetation == 0.0


def test_same_seed_same_grid():
    first = [(c.temperature, c.humidity, c.elevation) for c in make()]
    second = [(c.temperature, c.humidity, c.elevation) for c in make()]
    assert first == second


def test_cell_at_positions_match():
    automaton = make(5, 3)
    for y in range(3):
        for x in range(5):
            cell = automaton.cell_at(x, y)
            assert (cell.pos_x, cell.pos_y) == (x, y)


def test_cells_are_row_major():
    automaton = make(4, 3)
    assert automaton.cells[4 + 1] is automaton.cell_at(1, 1)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 4), (5, 4)])
def test_cell_at_out_of_range(x, y):
    with pytest.raises(ValueError):
        make().cell_at(x, y)


def test_update_grows_every_cell():
    automaton = make()
    automaton.update()
    for cell in automaton:
        assert cell.vegetation == pytest.approx(min(cell.growth_factor, cell.growth_limit))


def test_many_updates_respect_limit():
    automaton = make()
    for _ in range(50):
        automaton.update()
    for cell in automaton:
        assert 0.0 <= cell.vegetation <= cell.growth_limit


def test_reset_keeps_size_and_clears_vegetation():
    automaton = make()
    before = [c.temperature for c in automaton]
    for _ in range(10):
        automaton.update()
    automaton.reset()
    assert len(automaton) == 20
    assert all(c.vegetation == 0.0 for c in automaton)
    assert [c.temperature for c in automaton] != before


def test_modify_cell_reports_properties():
    automaton = make()
    cell = automaton.cell_at(2, 1)
    report = automaton.modify_cell(2, 1)
    assert f"Vegetation: {cell.vegetation}" in report
    assert f"Temperature: {cell.temperature}" in report
    assert f"Growth limit: {cell.growth_limit}" in report


def test_modify_cell_out_of_range():
    with pytest.raises(ValueError):
        make().modify_cell(10, 10)