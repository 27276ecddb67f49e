import pygame
import pytest

from ecosim import keybinds
from ecosim.cell import Cell
from ecosim.inspector import (
    BUTTON_TEXT_FREE,
    BUTTON_TEXT_INSERT,
    PROPERTY_MAX,
    TITLE_TEXT_INSERT,
    TOP_BAR_HEIGHT,
    TOP_BAR_HEIGHT_WITH_SCROLL,
    ControlMode,
    format_fps,
    format_iteration,
    format_speed,
    pause_button_text,
)
from ecosim.ui import UI, Button
from ecosim.vismode import DEFAULT_MODE, VIS_MODE_DATA, VisMode, get_data, to_string


def _click(ui, name, button=keybinds.MOUSE_CELL_SELECT_BUTTON):
    pos = ui.buttons[name].rect.center
    return ui.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"pos": pos, "button": button}))


@pytest.fixture
def ui():
    return UI((1280, 720))


def test_button_contains():
    button = Button("ok", "OK", (10, 10, 20, 20))
    assert button.contains((15, 15))
    assert not button.contains((40, 40))
    assert button.rect.width == 20


def test_initial_texts(ui):
    assert ui.inspector.title_text == TITLE_TEXT_INSERT
    assert ui.buttons["bind_button"].text == BUTTON_TEXT_FREE
    assert ui.buttons["view_mode_button"].text == to_string(DEFAULT_MODE)
    assert ui.buttons["pause_resume_button"].text == pause_button_text(True)


def test_labels_follow_setters(ui):
    ui.set_fps(42)
    ui.set_iteration(7)
    ui.set_speed(30)
    assert ui.labels["fps_label"] == format_fps(42)
    assert ui.labels["iteration_label"] == format_iteration(7)
    assert ui.labels["speed_label"] == format_speed(30)


def test_long_label_pushes_following_widgets(ui):
    before = ui.buttons["fit_grid_button"].rect.left
    ui.set_fps(10**12)
    assert ui.buttons["fit_grid_button"].rect.left > before


def test_top_bar_items_do_not_overlap(ui):
    rects = sorted(
        [*ui.label_rects.values(), *(ui.buttons[n].rect for n in (
            "fit_grid_button", "reset_button", "slow_down_button", "pause_resume_button", "speed_up_button"))],
        key=lambda r: r.left,
    )
    for left, right in zip(rects, rects[1:]):
        assert left.right <= right.left


def test_top_bar_height_depends_on_width():
    assert UI((1920, 1001)).top_bar_height == TOP_BAR_HEIGHT
    assert UI((200, 600)).top_bar_height == TOP_BAR_HEIGHT_WITH_SCROLL


def test_set_paused(ui):
    ui.set_paused(False)
    assert ui.buttons["pause_resume_button"].text == pause_button_text(False)


def test_cycle_vis_mode_visits_all(ui):
    seen = [ui.cycle_vis_mode() for _ in VIS_MODE_DATA]
    assert set(seen) == {data.vis_mode for data in VIS_MODE_DATA}
    assert ui.vis_mode is DEFAULT_MODE


def test_set_vis_mode_updates_legend(ui):
    ui.set_vis_mode(VisMode.HUMIDITY)
    data = get_data(VisMode.HUMIDITY)
    assert ui.legend_names == (data.low_end_name, data.high_end_name)
    assert ui.buttons["view_mode_button"].text == data.name


def test_click_top_button_returns_name(ui):
    assert _click(ui, "reset_button") == "reset_button"


def test_click_elsewhere_returns_none(ui):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"pos": (300, 400), "button": 1})
    assert ui.handle_event(event) is None


def test_other_mouse_button_ignored(ui):
    assert _click(ui, "reset_button", button=keybinds.MOUSE_DRAG_BUTTON) is None


def test_click_bind_button_toggles(ui):
    _click(ui, "bind_button")
    assert ui.inspector.mode is ControlMode.INSERT
    assert ui.buttons["bind_button"].text == BUTTON_TEXT_INSERT
    _click(ui, "bind_button")
    assert ui.inspector.mode is ControlMode.FREE


def test_click_view_mode_button_cycles(ui):
    assert _click(ui, "view_mode_button") == "view_mode_button"
    assert ui.vis_mode is VIS_MODE_DATA[1].vis_mode


def test_bind_keys_edge_triggered(ui):
    ui.update({keybinds.BIND_INSERTION_KEY: True})
    assert ui.inspector.mode is ControlMode.INSERT
    ui.inspector.unbind()
    ui.update({keybinds.BIND_INSERTION_KEY: True})
    assert ui.inspector.mode is ControlMode.FREE
    ui.update({})
    ui.update({keybinds.BIND_INSERTION_KEY: True})
    assert ui.inspector.mode is ControlMode.INSERT
    ui.update({keybinds.UNBIND_INSERTION_KEY: True})
    assert ui.inspector.mode is ControlMode.FREE


def test_forward_clicked_cell_inspects(ui):
    cell = Cell(1, 2, 0.5, 0.7, 0.1)
    ui.forward_clicked_cell(cell)
    assert ui.inspector.mode is ControlMode.INSPECT
    assert ui.value_of("cell_id") == "(1, 2)"
    assert ui.update_inspection() is True


def test_spin_buttons_clamp(ui):
    ui.inspector.temperature = PROPERTY_MAX
    _click(ui, "temperature_inc")
    assert ui.value_of("temperature") == PROPERTY_MAX
    _click(ui, "temperature_dec")
    assert ui.value_of("temperature") == PROPERTY_MAX - 1


def test_tab_switch_changes_buttons(ui):
    assert _click(ui, "tab_genes") == "tab_genes"
    assert ui.active_tab == "genes"
    assert "temperature_inc" not in ui.buttons
    before = ui.value_of("speed")
    _click(ui, "speed_inc")
    assert ui.value_of("speed") == before + 1


def test_resize_moves_panel(ui):
    ui.handle_event(pygame.event.Event(pygame.VIDEORESIZE, {"size": (1000, 800), "w": 1000, "h": 800}))
    assert ui.window_size == (1000, 800)
    assert ui.right_panel_rect.right == 1000
    assert ui.right_panel_rect.top == ui.top_bar_height


def test_draw_legend_gradient_ends(ui):
    surface = pygame.Surface(ui.window_size)
    ui.draw(surface)
    data = get_data(ui.vis_mode)
    rect = ui.legend_rect
    assert tuple(surface.get_at((rect.left, rect.centery)))[:3] == data.low_end_color
    assert tuple(surface.get_at((rect.right - 1, rect.centery)))[:3] == data.high_end_color