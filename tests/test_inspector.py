import pytest

from ecosim.cell import Cell
from ecosim.inspector import (
    CELL_ID_FREE,
    REFERENCE_RESOLUTION,
    ControlMode,
    Inspector,
    format_fps,
    format_iteration,
    format_speed,
    pause_button_text,
    scale_text_size,
)


def make_cell(x=3, y=4, temperature=0.5, humidity=0.7, elevation=0.2, vegetation=0.3):
    return Cell(x, y, temperature, humidity, elevation, vegetation)


def test_initial_state_is_free():
    inspector = Inspector()
    assert inspector.mode is ControlMode.FREE
    assert inspector.title_text == "INSERT"
    assert inspector.button_text == "BIND"
    assert inspector.cell_id_text == CELL_ID_FREE
    assert inspector.tracked_cell is None


def test_click_in_free_mode_switches_to_inspect():
    inspector = Inspector()
    cell = make_cell()
    inspector.forward_clicked_cell(cell)
    assert inspector.mode is ControlMode.INSPECT
    assert inspector.title_text == "INSPECT"
    assert inspector.button_text == "BIND"
    assert inspector.cell_id_text == "(3, 4)"
    assert inspector.tracked_cell is cell


def test_inspection_values_are_on_panel_scale():
    inspector = Inspector()
    cell = make_cell(temperature=0.0, humidity=1.0)
    inspector.forward_clicked_cell(cell)
    assert inspector.temperature == 0
    assert inspector.humidity == 100
    assert 0 <= inspector.vegetation <= 100
    assert 0 <= inspector.elevation <= 100


def test_update_inspection_requires_inspect_mode():
    inspector = Inspector()
    assert inspector.update_inspection() is False
    inspector.tracked_cell = make_cell()
    assert inspector.update_inspection() is False
    assert inspector.cell_id_text == CELL_ID_FREE


def test_update_inspection_follows_cell_changes():
    inspector = Inspector()
    cell = make_cell(vegetation=0.0)
    inspector.forward_clicked_cell(cell)
    before = inspector.vegetation
    for _ in range(200):
        cell.process()
    assert inspector.update_inspection() is True
    assert inspector.vegetation > before


def test_toggle_bind_cycles_insert_and_free():
    inspector = Inspector()
    inspector.toggle_bind()
    assert inspector.mode is ControlMode.INSERT
    assert inspector.button_text == "UNBIND"
    inspector.toggle_bind()
    assert inspector.mode is ControlMode.FREE
    assert inspector.button_text == "BIND"


def test_toggle_bind_from_inspect_goes_to_insert_and_clears_id():
    inspector = Inspector()
    inspector.forward_clicked_cell(make_cell())
    inspector.toggle_bind()
    assert inspector.mode is ControlMode.INSERT
    assert inspector.cell_id_text == CELL_ID_FREE


def test_unbind_from_free_keeps_free():
    inspector = Inspector()
    inspector.unbind()
    assert inspector.mode is ControlMode.FREE


@pytest.mark.parametrize("start", ["bind", "inspect"])
def test_unbind_returns_to_free(start):
    inspector = Inspector()
    if start == "bind":
        inspector.bind()
    else:
        inspector.forward_clicked_cell(make_cell())
    inspector.unbind()
    assert inspector.mode is ControlMode.FREE
    assert inspector.title_text == "INSERT"
    assert inspector.cell_id_text == CELL_ID_FREE


def test_click_in_insert_mode_writes_values_to_cell():
    source = make_cell(temperature=0.25, humidity=0.75, elevation=0.5, vegetation=0.5)
    inspector = Inspector()
    inspector.forward_clicked_cell(source)

    target = make_cell(x=0, y=0, temperature=0.9, humidity=0.1, elevation=0.9, vegetation=0.0)
    inspector.bind()
    inspector.forward_clicked_cell(target)

    assert inspector.mode is ControlMode.INSERT
    assert target.temperature == pytest.approx(source.temperature, abs=0.011)
    assert target.humidity == pytest.approx(source.humidity, abs=0.011)
    assert target.elevation == pytest.approx(source.elevation, abs=0.011)
    assert target.vegetation == pytest.approx(source.vegetation, abs=0.011)


def test_apply_recomputes_growth_parameters():
    reference = make_cell(temperature=0.5, humidity=0.7, elevation=0.2)
    inspector = Inspector()
    inspector.forward_clicked_cell(reference)
    target = make_cell(temperature=0.0, humidity=0.0, elevation=0.0)
    inspector.tracked_cell = target
    inspector.apply_to_cell()
    assert target.growth_limit == pytest.approx(
        Cell(0, 0, target.temperature, target.humidity, target.elevation).growth_limit
    )
    assert target.growth_limit > 0.9


def test_apply_without_cell_raises():
    with pytest.raises(RuntimeError):
        Inspector().apply_to_cell()


@pytest.mark.parametrize("value", [0.0, 0.25, 0.5, 0.99, 1.0])
def test_translate_round_trip(value):
    inspector = Inspector()
    shown = inspector.translate_property(value)
    assert inspector.untranslate_property(shown - 0.5) == pytest.approx(value)


def test_translate_bounds():
    inspector = Inspector()
    assert inspector.translate_property(0.0) == pytest.approx(0.5)
    assert inspector.translate_property(1.0) == pytest.approx(100.5)


def test_label_texts():
    assert format_fps(60) == "FPS: 60"
    assert format_fps(60.9) == "FPS: 60"
    assert format_iteration(0) == "Iteration: 0"
    assert format_speed(60) == "Speed: 60 UPS"


def test_pause_button_text():
    assert pause_button_text(True) == ">"
    assert pause_button_text(False) == "||"


def test_scale_text_size_at_reference_is_unchanged():
    assert scale_text_size(20, REFERENCE_RESOLUTION) == 20


def test_scale_text_size_grows_with_window():
    width, height = REFERENCE_RESOLUTION
    small = scale_text_size(18, (width // 2, height // 2))
    big = scale_text_size(18, (width * 2, height * 2))
    assert small < 18 < big
    assert big == 36