"""The window's grid view: drawing, camera control and cell picking."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from time import monotonic

import pygame

from ecosim import config, keybinds
from ecosim.camera import GridView, compute_cell_size, property_colors
from ecosim.cell import Cell
from ecosim.inspector import RIGHT_PANEL_X_WINDOW_SHARE
from ecosim.ui import UI
from ecosim.vismode import Color, VisMode, DEFAULT_MODE

BACKGROUND_COLOR: Color = (50, 50, 150)
BLACK: Color = (0, 0, 0)


def _is_down(pressed_keys: Mapping[int, bool], key: int) -> bool:
    try:
        return bool(pressed_keys[key])
    except (KeyError, IndexError):
        return False


class Visualization:
    """Shows the automaton grid beside the UI and turns input into view changes."""

    def __init__(
        self,
        window_size: tuple[int, int],
        grid_width: int,
        grid_height: int,
        surface: pygame.Surface | None,
    ) -> None:
        if grid_width <= 0 or grid_height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {grid_width} x {grid_height}")
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.surface = surface
        self.ui = UI(self.window_size)
        self.vis_mode: VisMode = DEFAULT_MODE
        self.is_open = True

        self.zoom_factor = 1.0
        self.is_dragging = False
        self._last_mouse_world = (0.0, 0.0)
        self._mouse_pos: tuple[int, int] = (0, 0)
        self._press_time = monotonic()
        self._last_clicked: tuple[int, int] | None = None

        self.view = GridView((0, 0, 1, 1), (1, 1))
        self._update_grid_view()
        self.cell_size = 0.0
        self._compute_grid_positions()
        self.colors: list[Color] = [BLACK] * (grid_width * grid_height)
        self._center_grid()

    # Geometry

    def _viewport_geometry(self) -> tuple[float, float, float]:
        window_width, window_height = self.window_size
        top_offset = float(self.ui.top_bar_height)
        width_ratio = 1.0 - RIGHT_PANEL_X_WINDOW_SHARE
        height_ratio = (window_height - top_offset) / window_height
        return top_offset, window_width * width_ratio, window_height * height_ratio

    def _update_grid_view(self) -> None:
        top, pixel_width, pixel_height = self._viewport_geometry()
        old_center = self.view.center
        self.view = GridView((0.0, top, pixel_width, pixel_height), (pixel_width, pixel_height))
        self.view.center = old_center
        self.view.zoom(self.zoom_factor)

    def _compute_grid_positions(self) -> None:
        _, pixel_width, pixel_height = self._viewport_geometry()
        self.cell_size = compute_cell_size((pixel_width, pixel_height), self.grid_width, self.grid_height)

    def _center_grid(self) -> None:
        self.view.center = (
            self.grid_width * self.cell_size / 2.0,
            self.grid_height * self.cell_size / 2.0,
        )

    def resize(self, window_size: tuple[int, int]) -> None:
        """Adapt the UI and the grid view to a new window size."""
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.ui.resize(self.window_size)
        self._update_grid_view()

    def fit_grid_to_view(self) -> None:
        """Undo zooming and fit the whole grid into the view, centred."""
        self.view.zoom(1.0 / self.zoom_factor)
        self.zoom_factor = 1.0
        self._compute_grid_positions()
        self._center_grid()

    # Events

    def process_event(self, event: pygame.event.Event) -> str | None:
        """Handle one event; return the name of a UI button it clicked, if any."""
        clicked = self.ui.handle_event(event)
        etype = event.type
        if etype == pygame.QUIT:
            self.is_open = False
        elif etype == pygame.VIDEORESIZE:
            self.resize(event.size)
        elif etype == pygame.MOUSEMOTION:
            self._mouse_pos = tuple(event.pos)
        elif etype == pygame.MOUSEWHEEL:
            self._handle_zoom(event.y)
        elif etype == pygame.MOUSEBUTTONDOWN:
            self._mouse_pos = tuple(event.pos)
            if clicked is None and self.view.contains_screen_point(event.pos):
                if event.button == keybinds.MOUSE_DRAG_BUTTON:
                    self.is_dragging = True
                    self._last_mouse_world = self.view.screen_to_world(event.pos)
                elif event.button == keybinds.MOUSE_CELL_SELECT_BUTTON:
                    self._press_time = monotonic()
        elif etype == pygame.MOUSEBUTTONUP:
            self._mouse_pos = tuple(event.pos)
            if event.button == keybinds.MOUSE_DRAG_BUTTON:
                self.is_dragging = False
            elif event.button == keybinds.MOUSE_CELL_SELECT_BUTTON:
                now = monotonic()
                held = now - self._press_time
                self._press_time = now
                if held <= config.MOUSE_IS_HELD_THRESHOLD:
                    self._detect_clicked_cell(event.pos)
        return clicked

    def _handle_zoom(self, delta: float) -> None:
        if not self.view.contains_screen_point(self._mouse_pos):
            return
        if delta > 0:
            change = 1.0 - config.ZOOM_STEP
        elif delta < 0:
            change = 1.0 + config.ZOOM_STEP
        else:
            return
        self.zoom_factor *= change
        self.view.zoom(change)

    def _detect_clicked_cell(self, pos: tuple[int, int]) -> None:
        if not self.view.contains_screen_point(pos):
            return
        world_x, world_y = self.view.screen_to_world(pos)
        cell_x = int(world_x / self.cell_size)
        cell_y = int(world_y / self.cell_size)
        if 0 <= cell_x < self.grid_width and 0 <= cell_y < self.grid_height:
            self._last_clicked = (cell_x, cell_y)

    def pop_clicked_cell(self) -> tuple[int, int] | None:
        """Return the last clicked cell's coordinates once, then forget them."""
        clicked, self._last_clicked = self._last_clicked, None
        return clicked

    # Per-frame updates

    def handle_frame(self, delta_time: float, pressed_keys: Mapping[int, bool]) -> None:
        """Move the camera by keyboard input and by mouse dragging."""
        self._handle_camera_movement(delta_time, pressed_keys)
        self._handle_dragging()

    def _handle_camera_movement(self, delta_time: float, pressed_keys: Mapping[int, bool]) -> None:
        if _is_down(pressed_keys, keybinds.MOVEMENT_SPEED_UP_KEY):
            speed = config.CAMERA_MOVEMENT_SPEED_FAST
        else:
            speed = config.CAMERA_MOVEMENT_SPEED_BASE
        speed *= self.zoom_factor * delta_time

        dx = dy = 0.0
        if _is_down(pressed_keys, keybinds.MOVEMENT_UP_KEY):
            dy += speed
        if _is_down(pressed_keys, keybinds.MOVEMENT_LEFT_KEY):
            dx += speed
        if _is_down(pressed_keys, keybinds.MOVEMENT_DOWN_KEY):
            dy -= speed
        if _is_down(pressed_keys, keybinds.MOVEMENT_RIGHT_KEY):
            dx -= speed
        self.view.move(dx, dy)

    def _handle_dragging(self) -> None:
        if not self.is_dragging:
            return
        new_x, new_y = self.view.screen_to_world(self._mouse_pos)
        last_x, last_y = self._last_mouse_world
        self.view.move(last_x - new_x, last_y - new_y)
        self._last_mouse_world = self.view.screen_to_world(self._mouse_pos)

    def set_vis_mode(self, mode: VisMode) -> None:
        """Choose the property that the grid is coloured by."""
        self.vis_mode = mode

    def update(self, cells: Iterable[Cell]) -> None:
        """Recolour the grid from the cells, in row-major order."""
        colors = property_colors(cells, self.vis_mode)
        self.colors[: len(colors)] = colors

    # Drawing

    def draw(self) -> None:
        """Draw the background, the grid and the UI onto the surface."""
        surface = self.surface
        if surface is None:
            raise RuntimeError("visualization has no surface to draw on")
        surface.fill(BACKGROUND_COLOR)

        left, top, width, height = self.view.viewport
        previous_clip = surface.get_clip()
        surface.set_clip(pygame.Rect(int(left), int(top), int(width), int(height)))
        size = self.cell_size
        for index, color in enumerate(self.colors):
            y, x = divmod(index, self.grid_width)
            x0, y0 = self.view.world_to_screen((x * size, y * size))
            x1, y1 = self.view.world_to_screen(((x + 1) * size, (y + 1) * size))
            rect = pygame.Rect(round(x0), round(y0), max(1, round(x1) - round(x0)), max(1, round(y1) - round(y0)))
            surface.fill(color, rect)
        surface.set_clip(previous_clip)

        self.ui.draw(surface)