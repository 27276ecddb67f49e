"""The top bar and the right-hand inspection panel drawn over the grid."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

import pygame

from ecosim import keybinds
from ecosim.cell import Cell
from ecosim.inspector import (
    ANIMAL_TAB_NAME,
    CELL_ID_FREE,
    CELL_TAB_NAME,
    DEFAULT_PROPERTY_VALUE,
    GENES_TAB_NAME,
    MENU_BAR_FIXED_SIZE,
    PROPERTY_MAX,
    PROPERTY_MIN,
    RIGHT_PANEL_TITLE_RATIO,
    RIGHT_PANEL_X_WINDOW_SHARE,
    TEXT_SIZE_BIG,
    TEXT_SIZE_HUGE,
    TEXT_SIZE_MEDIUM,
    TEXT_SIZE_SMALL,
    TOP_BAR_HEIGHT,
    TOP_BAR_HEIGHT_WITH_SCROLL,
    WIDGET_HORIZONTAL_MARGIN,
    Inspector,
    format_fps,
    format_iteration,
    format_speed,
    pause_button_text,
    scale_text_size,
)
from ecosim.vismode import DEFAULT_MODE, VIS_MODE_DATA, Color, VisMode, get_data, to_string

MENU_TEXT = "File  Edit"
VIEW_MODE_TEXT = "VIEW MODE"
ANIMALS_TEXT = "Animals:"
ANIMAL_LIST_SAMPLE = ("H103", "P233", "P204", "P234", "P023", "H1031", "P1201", "H201")

TOP_BAR_COLOR: Color = (230, 230, 230)
PANEL_COLOR: Color = (240, 240, 240)
BUTTON_COLOR: Color = (250, 250, 250)
ACTIVE_TAB_COLOR: Color = (200, 215, 240)
BORDER_COLOR: Color = (60, 60, 60)
TEXT_COLOR: Color = (20, 20, 20)

_TOP_MARGIN = 3
_TEXT_PADDING = 6

# (name, is_button, placeholder text used for the minimal width, text size)
_TOP_BAR_ITEMS = (
    ("menu_bar", False, MENU_TEXT, TEXT_SIZE_MEDIUM),
    ("fps_label", False, "FPS: 1000", TEXT_SIZE_MEDIUM),
    ("fit_grid_button", True, "Fit Grid to View", TEXT_SIZE_SMALL),
    ("reset_button", True, "Reset", TEXT_SIZE_SMALL),
    ("slow_down_button", True, "-", TEXT_SIZE_SMALL),
    ("pause_resume_button", True, ">", TEXT_SIZE_SMALL),
    ("speed_up_button", True, "+", TEXT_SIZE_SMALL),
    ("speed_label", False, "Speed: 60 UPS", TEXT_SIZE_MEDIUM),
    ("iteration_label", False, "Iteration: 1000", TEXT_SIZE_MEDIUM),
)

# Rows of each tab: (key, label text, is editable number)
_TAB_ROWS: dict[str, tuple[tuple[str, str, bool], ...]] = {
    "cell": (
        ("cell_id", "Position: ", False),
        ("vegetation", "Vegetation: ", True),
        ("temperature", "Temperature: ", True),
        ("humidity", "Humidity: ", True),
        ("elevation", "Elevation: ", True),
    ),
    "animal": (
        ("animal_id", "ID: ", False),
        ("energy", "Energy: ", True),
        ("age", "Age: ", True),
    ),
    "genes": (
        ("ideal_temperature", "Ideal temperature: ", True),
        ("ideal_humidity", "Ideal humidity: ", True),
        ("perception_range", "Perception range: ", True),
        ("speed", "Speed: ", True),
        ("food_needs", "Food needs: ", True),
        ("max_lifespan", "Max lifespan: ", True),
        ("maturity_age", "Maturity age: ", True),
    ),
}

_TABS = (("cell", CELL_TAB_NAME), ("animal", ANIMAL_TAB_NAME), ("genes", GENES_TAB_NAME))
_INSPECTOR_KEYS = ("vegetation", "temperature", "humidity", "elevation")


def _estimate_width(text: str, size: int) -> int:
    return int(len(text) * size * 0.55) + 2 * _TEXT_PADDING


def _is_down(pressed_keys: Mapping[int, bool], key: int) -> bool:
    try:
        return bool(pressed_keys[key])
    except (KeyError, IndexError):
        return False


def _lerp(start: Color, end: Color, t: float) -> Color:
    t = max(0.0, min(t, 1.0))
    return tuple(int(s + t * (e - s)) for s, e in zip(start, end))  # type: ignore[return-value]


@dataclass
class Button:
    """A clickable rectangle with a caption."""

    name: str
    text: str
    rect: pygame.Rect

    def __post_init__(self) -> None:
        self.rect = pygame.Rect(self.rect)

    def contains(self, pos: tuple[int, int]) -> bool:
        """Whether ``pos`` lies inside the button."""
        return bool(self.rect.collidepoint(pos))


@dataclass
class _Row:
    key: str
    label: str
    label_rect: pygame.Rect
    value_rect: pygame.Rect


class UI:
    """Widgets of the top bar and the side panel, with their layout and state."""

    def __init__(self, window_size: tuple[int, int]) -> None:
        self.window_size = tuple(window_size)
        self.inspector = Inspector()
        self.vis_mode: VisMode = DEFAULT_MODE
        self.paused = True
        self.active_tab = "cell"
        self.labels: dict[str, str] = {
            "menu_bar": MENU_TEXT,
            "fps_label": format_fps(60),
            "speed_label": format_speed(60),
            "iteration_label": format_iteration(0),
        }
        self.label_rects: dict[str, pygame.Rect] = {}
        self.spin_values: dict[str, float] = {
            key: DEFAULT_PROPERTY_VALUE
            for tab in ("animal", "genes")
            for key, _, editable in _TAB_ROWS[tab]
            if editable
        }
        self.top_bar_height = TOP_BAR_HEIGHT
        self.right_panel_rect = pygame.Rect(0, 0, 0, 0)
        self.legend_rect = pygame.Rect(0, 0, 0, 0)

        self._top_buttons = {
            name: Button(name, placeholder, (0, 0, 0, 0))
            for name, is_button, placeholder, _ in _TOP_BAR_ITEMS
            if is_button
        }
        self._top_buttons["pause_resume_button"].text = pause_button_text(self.paused)

        self._panel_buttons = {
            "view_mode_button": Button("view_mode_button", to_string(self.vis_mode), (0, 0, 0, 0)),
            "bind_button": Button("bind_button", self.inspector.button_text, (0, 0, 0, 0)),
        }
        for tab, title in _TABS:
            self._panel_buttons[f"tab_{tab}"] = Button(f"tab_{tab}", title, (0, 0, 0, 0))

        self._spin_buttons: dict[str, dict[str, Button]] = {}
        self._spin_actions: dict[str, tuple[str, int]] = {}
        for tab, rows in _TAB_ROWS.items():
            self._spin_buttons[tab] = {}
            for key, _, editable in rows:
                if not editable:
                    continue
                for suffix, text, delta in (("dec", "-", -1), ("inc", "+", 1)):
                    name = f"{key}_{suffix}"
                    self._spin_buttons[tab][name] = Button(name, text, (0, 0, 0, 0))
                    self._spin_actions[name] = (key, delta)

        self._rows: dict[str, list[_Row]] = {}
        self._panel_rects: dict[str, pygame.Rect] = {}
        self._tab_content_rect = pygame.Rect(0, 0, 0, 0)
        self._previous_keys: dict[int, bool] = {}
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self._layout()

    # Public state access

    @property
    def buttons(self) -> dict[str, Button]:
        """Every button that is currently shown, by name."""
        return {**self._top_buttons, **self._panel_buttons, **self._spin_buttons[self.active_tab]}

    @property
    def legend_names(self) -> tuple[str, str]:
        """The low-end and high-end labels of the legend."""
        data = get_data(self.vis_mode)
        return data.low_end_name, data.high_end_name

    def value_of(self, key: str) -> float | str:
        """The value shown in the row named ``key``."""
        if key == "cell_id":
            return self.inspector.cell_id_text
        if key == "animal_id":
            return CELL_ID_FREE
        if key in _INSPECTOR_KEYS:
            return getattr(self.inspector, key)
        return self.spin_values[key]

    # Layout

    def resize(self, window_size: tuple[int, int]) -> None:
        """Lay the widgets out again for a new window size."""
        self.window_size = tuple(window_size)
        self._layout()

    def _text_size(self, reference: int) -> int:
        return max(1, scale_text_size(reference, self.window_size))

    def _layout(self) -> None:
        self._layout_top_bar()
        self._layout_right_panel()

    def _layout_top_bar(self) -> None:
        width = self.window_size[0]
        item_height = TOP_BAR_HEIGHT - 2 * _TOP_MARGIN
        x = 0
        for name, is_button, placeholder, size in _TOP_BAR_ITEMS:
            if name == "menu_bar":
                rect = pygame.Rect(x, 0, MENU_BAR_FIXED_SIZE, TOP_BAR_HEIGHT - 3)
                self.label_rects[name] = rect
            elif is_button:
                rect = pygame.Rect(x, _TOP_MARGIN, _estimate_width(placeholder, size), item_height)
                self._top_buttons[name].rect = rect
            else:
                minimal = _estimate_width(placeholder, size)
                current = _estimate_width(self.labels[name], size)
                rect = pygame.Rect(x, _TOP_MARGIN, max(current, minimal), item_height)
                self.label_rects[name] = rect
            x += rect.width + WIDGET_HORIZONTAL_MARGIN
        content_width = x - WIDGET_HORIZONTAL_MARGIN
        self.top_bar_height = TOP_BAR_HEIGHT_WITH_SCROLL if content_width > width else TOP_BAR_HEIGHT

    def _layout_right_panel(self) -> None:
        width, height = self.window_size
        panel_width = int(width * RIGHT_PANEL_X_WINDOW_SHARE)
        top = self.top_bar_height
        panel = pygame.Rect(width - panel_width, top, panel_width, max(0, height - top))
        self.right_panel_rect = panel

        pad_x = panel.width * 0.03
        pad_top = panel.height * 0.02
        pad_bottom = panel.height * 0.005
        inner_left = panel.left + pad_x
        inner_width = max(0.0, panel.width - 2 * pad_x)
        inner_height = max(0.0, panel.height - pad_top - pad_bottom)

        weights = (
            ("view_label", 0.04),
            ("view_mode", 0.04),
            (None, 0.02),
            ("legend", 0.08),
            ("title", RIGHT_PANEL_TITLE_RATIO),
            ("tabs", 1.0),
            (None, 0.005),
            ("bind", 0.05),
            (None, 0.002),
            (None, 0.005),
        )
        total = sum(weight for _, weight in weights)
        y = panel.top + pad_top
        rects: dict[str, pygame.Rect] = {}
        for key, weight in weights:
            part = inner_height * weight / total
            if key is not None:
                rects[key] = pygame.Rect(round(inner_left), round(y), round(inner_width), round(part))
            y += part
        self._panel_rects = rects

        legend = rects["legend"]
        self.legend_rect = pygame.Rect(legend.left, legend.top, legend.width, legend.height // 2)
        self._panel_buttons["view_mode_button"].rect = rects["view_mode"]
        self._panel_buttons["bind_button"].rect = rects["bind"]

        tabs = rects["tabs"]
        header = min(tabs.height, self._text_size(TEXT_SIZE_SMALL) + 8)
        tab_width = tabs.width // len(_TABS)
        for index, (tab, _) in enumerate(_TABS):
            self._panel_buttons[f"tab_{tab}"].rect = pygame.Rect(
                tabs.left + index * tab_width, tabs.top, tab_width, header
            )
        content = pygame.Rect(tabs.left, tabs.top + header, tabs.width, max(0, tabs.height - header))
        self._tab_content_rect = content
        self._layout_rows(content)

    def _layout_rows(self, content: pygame.Rect) -> None:
        size = self._text_size(TEXT_SIZE_BIG)
        row_height = size + 4
        spacing = max(1, round(content.height * 0.01))
        left = content.left + round(content.width * 0.03)
        for tab, rows in _TAB_ROWS.items():
            y = content.top + spacing
            laid_out = []
            for key, label, editable in rows:
                label_rect = pygame.Rect(left, y, _estimate_width(label, size), row_height)
                if editable:
                    dec_rect = pygame.Rect(label_rect.right, y, row_height, row_height)
                    value_rect = pygame.Rect(dec_rect.right, y, max(1, int(content.width * 0.2)), row_height)
                    inc_rect = pygame.Rect(value_rect.right, y, row_height, row_height)
                    self._spin_buttons[tab][f"{key}_dec"].rect = dec_rect
                    self._spin_buttons[tab][f"{key}_inc"].rect = inc_rect
                else:
                    value_rect = pygame.Rect(label_rect.right, y, _estimate_width(CELL_ID_FREE, size) * 2, row_height)
                laid_out.append(_Row(key, label, label_rect, value_rect))
                y += row_height + spacing
            self._rows[tab] = laid_out

    # Events and updates

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """Handle a pygame event; return the name of a clicked button, if any."""
        if event.type == pygame.VIDEORESIZE:
            self.resize(event.size)
            return None
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != keybinds.MOUSE_CELL_SELECT_BUTTON:
            return None
        for button in self.buttons.values():
            if button.contains(event.pos):
                self._activate(button.name)
                self._refresh_texts()
                return button.name
        return None

    def _activate(self, name: str) -> None:
        if name == "view_mode_button":
            self.cycle_vis_mode()
        elif name == "bind_button":
            self.inspector.toggle_bind()
        elif name.startswith("tab_"):
            self.active_tab = name[len("tab_"):]
        elif name in self._spin_actions:
            key, delta = self._spin_actions[name]
            self._adjust(key, delta)

    def _adjust(self, key: str, delta: int) -> None:
        value = max(PROPERTY_MIN, min(float(self.value_of(key)) + delta, PROPERTY_MAX))
        if key in _INSPECTOR_KEYS:
            setattr(self.inspector, key, value)
        else:
            self.spin_values[key] = value

    def update(self, pressed_keys: Mapping[int, bool]) -> None:
        """React to the bind and unbind keys going down."""
        actions: tuple[tuple[int, Callable[[], None]], ...] = (
            (keybinds.BIND_INSERTION_KEY, self.inspector.bind),
            (keybinds.UNBIND_INSERTION_KEY, self.inspector.unbind),
        )
        for key, action in actions:
            down = _is_down(pressed_keys, key)
            if down and not self._previous_keys.get(key, False):
                action()
            self._previous_keys[key] = down
        self._refresh_texts()

    def _refresh_texts(self) -> None:
        self._panel_buttons["bind_button"].text = self.inspector.button_text
        self._panel_buttons["view_mode_button"].text = to_string(self.vis_mode)
        self._top_buttons["pause_resume_button"].text = pause_button_text(self.paused)

    def set_fps(self, fps: float) -> None:
        """Show a new frame rate."""
        self.labels["fps_label"] = format_fps(fps)
        self._layout()

    def set_iteration(self, iteration: int) -> None:
        """Show a new iteration count."""
        self.labels["iteration_label"] = format_iteration(iteration)
        self._layout()

    def set_speed(self, speed: int) -> None:
        """Show a new simulation speed."""
        self.labels["speed_label"] = format_speed(speed)
        self._layout()

    def set_paused(self, paused: bool) -> None:
        """Show the pause button for the given state."""
        self.paused = paused
        self._refresh_texts()

    def set_vis_mode(self, mode: VisMode) -> None:
        """Show ``mode`` in the selector and the legend."""
        self.vis_mode = mode
        self._refresh_texts()

    def cycle_vis_mode(self) -> VisMode:
        """Select the next visualisation mode and return it."""
        modes = [data.vis_mode for data in VIS_MODE_DATA]
        next_mode = modes[(modes.index(self.vis_mode) + 1) % len(modes)]
        self.set_vis_mode(next_mode)
        return next_mode

    def forward_clicked_cell(self, cell: Cell) -> None:
        """Pass a clicked cell on to the inspector."""
        self.inspector.forward_clicked_cell(cell)
        self._refresh_texts()

    def update_inspection(self) -> bool:
        """Refresh the shown values from the tracked cell."""
        return self.inspector.update_inspection()

    # Drawing

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get((size, bold))
        if font is None:
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
            self._fonts[(size, bold)] = font
        return font

    def _draw_text(
        self,
        surface: pygame.Surface,
        text: str,
        size: int,
        rect: pygame.Rect,
        align: str = "left",
        bold: bool = False,
    ) -> None:
        rendered = self._font(size, bold).render(text, True, TEXT_COLOR)
        target = rendered.get_rect()
        target.centery = rect.centery
        if align == "center":
            target.centerx = rect.centerx
        elif align == "right":
            target.right = rect.right - _TEXT_PADDING
        else:
            target.left = rect.left + _TEXT_PADDING
        surface.blit(rendered, target)

    def _draw_button(self, surface: pygame.Surface, button: Button, size: int, fill: Color = BUTTON_COLOR) -> None:
        pygame.draw.rect(surface, fill, button.rect)
        pygame.draw.rect(surface, BORDER_COLOR, button.rect, 1)
        self._draw_text(surface, button.text, size, button.rect, align="center")

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the top bar and the side panel onto ``surface``."""
        width = self.window_size[0]
        pygame.draw.rect(surface, TOP_BAR_COLOR, (0, 0, width, self.top_bar_height))
        pygame.draw.line(surface, BORDER_COLOR, (0, self.top_bar_height - 1), (width, self.top_bar_height - 1))
        for name, rect in self.label_rects.items():
            self._draw_text(surface, self.labels[name], TEXT_SIZE_MEDIUM, rect)
        for button in self._top_buttons.values():
            self._draw_button(surface, button, TEXT_SIZE_SMALL)

        panel = self.right_panel_rect
        pygame.draw.rect(surface, PANEL_COLOR, panel)
        pygame.draw.rect(surface, BORDER_COLOR, panel, 1)

        rects = self._panel_rects
        self._draw_text(
            surface, VIEW_MODE_TEXT, self._text_size(TEXT_SIZE_BIG - 1), rects["view_label"], "center", True
        )
        self._draw_button(surface, self._panel_buttons["view_mode_button"], self._text_size(TEXT_SIZE_MEDIUM - 1))
        self._draw_legend(surface)
        self._draw_text(
            surface, self.inspector.title_text, self._text_size(TEXT_SIZE_HUGE), rects["title"], "center", True
        )

        for tab, _ in _TABS:
            button = self._panel_buttons[f"tab_{tab}"]
            fill = ACTIVE_TAB_COLOR if tab == self.active_tab else BUTTON_COLOR
            self._draw_button(surface, button, self._text_size(TEXT_SIZE_SMALL), fill)
        pygame.draw.rect(surface, BORDER_COLOR, self._tab_content_rect, 1)
        self._draw_rows(surface)

        self._draw_button(surface, self._panel_buttons["bind_button"], self._text_size(TEXT_SIZE_BIG - 1))

    def _draw_legend(self, surface: pygame.Surface) -> None:
        data = get_data(self.vis_mode)
        rect = self.legend_rect
        span = max(1, rect.width - 1)
        for offset in range(rect.width):
            color = _lerp(data.low_end_color, data.high_end_color, offset / span)
            x = rect.left + offset
            pygame.draw.line(surface, color, (x, rect.top), (x, rect.bottom - 1))
        pygame.draw.rect(surface, BORDER_COLOR, rect.inflate(2, 2), 1)
        labels_rect = pygame.Rect(rect.left, rect.bottom, rect.width, self._panel_rects["legend"].height - rect.height)
        size = self._text_size(TEXT_SIZE_MEDIUM)
        self._draw_text(surface, data.low_end_name, size, labels_rect, "left")
        self._draw_text(surface, data.high_end_name, size, labels_rect, "right")

    def _draw_rows(self, surface: pygame.Surface) -> None:
        size = self._text_size(TEXT_SIZE_BIG)
        rows = self._rows[self.active_tab]
        for row in rows:
            self._draw_text(surface, row.label, size, row.label_rect, bold=True)
            value = self.value_of(row.key)
            text = value if isinstance(value, str) else f"{value:.0f}"
            if row.key in ("cell_id", "animal_id"):
                self._draw_text(surface, text, size, row.value_rect)
            else:
                pygame.draw.rect(surface, BUTTON_COLOR, row.value_rect)
                pygame.draw.rect(surface, BORDER_COLOR, row.value_rect, 1)
                self._draw_text(surface, text, size, row.value_rect, "center")
        for button in self._spin_buttons[self.active_tab].values():
            self._draw_button(surface, button, size)

        if self.active_tab == "cell" and rows:
            last = rows[-1].label_rect
            spacing = round(self._tab_content_rect.height * 0.04)
            heading = pygame.Rect(last.left, last.bottom + spacing, self._tab_content_rect.width // 2, last.height)
            self._draw_text(surface, ANIMALS_TEXT, size, heading, bold=True)
            item_size = self._text_size(TEXT_SIZE_BIG - 1)
            y = heading.bottom
            for item in ANIMAL_LIST_SAMPLE:
                item_rect = pygame.Rect(heading.left, y, int(self._tab_content_rect.width * 0.9), item_size + 4)
                if item_rect.bottom > self._tab_content_rect.bottom:
                    break
                self._draw_text(surface, item, item_size, item_rect)
                y = item_rect.bottom