"""The main loop that ties the automaton, the grid view and the UI together."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Mapping, Sequence

import pygame

from ecosim import config, keybinds
from ecosim.automaton import Automaton
from ecosim.visualization import Visualization

logger = logging.getLogger(__name__)

DEFAULT_UPDATES_PER_SECOND = 30
DEFAULT_FPS_UPDATE_INTERVAL = 1.0

DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
DEFAULT_GRID_WIDTH = 50
DEFAULT_GRID_HEIGHT = 50


def _is_down(pressed_keys: Mapping[int, bool], key: int) -> bool:
    try:
        return bool(pressed_keys[key])
    except (KeyError, IndexError):
        return False


class SimulationClock:
    """Decides when the simulation takes a step, at a set number of updates per second."""

    def __init__(self, updates_per_second: int = DEFAULT_UPDATES_PER_SECOND) -> None:
        if updates_per_second <= 0:
            raise ValueError(f"updates per second must be positive, got {updates_per_second}")
        self.updates_per_second = int(updates_per_second)
        self.update_interval = 1.0 / self.updates_per_second
        self.since_last_update = 0.0
        self.paused = True

    def toggle_pause(self) -> bool:
        """Flip the paused state and return it.

        When resuming, the wait for the first update is skipped.
        """
        self.paused = not self.paused
        if not self.paused:
            self.since_last_update = self.update_interval
        return self.paused

    def change_speed(self, direction: int, step: int) -> int:
        """Change the speed by ``step`` in ``direction``, clamped; return the new speed.

        The next call to :meth:`advance` that is not paused triggers an update.
        """
        new_speed = int(self.updates_per_second + step * direction)
        new_speed = max(config.MIN_SIM_SPEED, min(new_speed, config.MAX_SIM_SPEED))
        self.updates_per_second = new_speed
        self.update_interval = 1.0 / new_speed
        self.since_last_update = self.update_interval
        return new_speed

    def advance(self, delta_time: float) -> bool:
        """Let ``delta_time`` seconds pass; return whether an update is due now."""
        if self.paused:
            return False
        self.since_last_update += delta_time
        if self.since_last_update >= self.update_interval:
            self.since_last_update = 0.0
            return True
        return False


class FpsCounter:
    """Averages frame times and reports frames per second once per interval."""

    def __init__(self, update_interval: float = DEFAULT_FPS_UPDATE_INTERVAL) -> None:
        if update_interval <= 0:
            raise ValueError(f"update interval must be positive, got {update_interval}")
        self.update_interval = update_interval
        self.total_time = 0.0
        self.frames = 0

    def tick(self, delta_time: float) -> float | None:
        """Count a frame of ``delta_time`` seconds; return the FPS when an interval is over."""
        self.total_time += delta_time
        self.frames += 1
        if self.total_time <= self.update_interval:
            return None
        average_frame_time = self.total_time / self.frames
        self.total_time = 0.0
        self.frames = 0
        return 1.0 / average_frame_time


class Controller:
    """Owns the window, runs the main loop and routes input to the simulation."""

    def __init__(self, window_width: int, window_height: int, grid_width: int, grid_height: int) -> None:
        pygame.init()
        surface = pygame.display.set_mode((window_width, window_height), pygame.RESIZABLE)
        pygame.display.set_caption(config.WINDOW_TITLE)

        self.visualization = Visualization((window_width, window_height), grid_width, grid_height, surface)
        self.ui = self.visualization.ui
        self.automaton = Automaton(grid_width, grid_height)
        self.sim_clock = SimulationClock(DEFAULT_UPDATES_PER_SECOND)
        self.fps_counter = FpsCounter(DEFAULT_FPS_UPDATE_INTERVAL)
        self.iteration = 0
        self._previous_keys: dict[int, bool] = {}

        self.ui.set_speed(self.sim_clock.updates_per_second)
        self.ui.set_paused(self.sim_clock.paused)
        self.visualization.update(self.automaton)

    # Main loop

    def run(self) -> None:
        """Process events, update and render until the window is closed."""
        frame_clock = pygame.time.Clock()
        while self.visualization.is_open:
            self._process_events()
            delta_time = frame_clock.tick() / 1000.0
            self.step(delta_time)
            self._render()

    def step(self, delta_time: float) -> bool:
        """Update everything for a frame of ``delta_time`` seconds.

        Returns whether the automaton advanced by one iteration.
        """
        fps = self.fps_counter.tick(delta_time)
        if fps is not None:
            self.ui.set_fps(fps)

        self._transfer_pos()

        if pygame.key.get_focused():
            pressed_keys = pygame.key.get_pressed()
            self._handle_inputs(pressed_keys)
            self.visualization.handle_frame(delta_time, pressed_keys)
            self.ui.update(pressed_keys)

        if not self.sim_clock.advance(delta_time):
            return False

        self.automaton.update()
        self.visualization.update(self.automaton)
        self.ui.update_inspection()
        self.iteration += 1
        self.ui.set_iteration(self.iteration)
        return True

    # Helpers

    def _process_events(self) -> None:
        for event in pygame.event.get():
            clicked = self.visualization.process_event(event)
            if clicked is not None:
                self._on_button(clicked)

    def _render(self) -> None:
        self.visualization.draw()
        pygame.display.flip()

    def _handle_inputs(self, pressed_keys: Mapping[int, bool]) -> None:
        key = keybinds.PAUSE_TOGGLE_KEY
        down = _is_down(pressed_keys, key)
        if down and not self._previous_keys.get(key, False):
            self.sim_clock.paused = not self.sim_clock.paused
            self.ui.set_paused(self.sim_clock.paused)
        self._previous_keys[key] = down

    def _transfer_pos(self) -> None:
        clicked = self.visualization.pop_clicked_cell()
        if clicked is None:
            return
        x, y = clicked
        try:
            cell = self.automaton.cell_at(x, y)
        except ValueError:
            logger.exception("clicked position outside the automaton")
            return
        self.ui.forward_clicked_cell(cell)
        if self.sim_clock.paused:
            self.ui.update_inspection()
            self.visualization.update(self.automaton)
            logger.debug("updated cell at x=%d y=%d", x, y)

    def _change_update_speed(self, direction: int) -> None:
        pressed_keys = pygame.key.get_pressed()
        if _is_down(pressed_keys, pygame.K_LSHIFT):
            step = config.SIM_SPEED_CHANGE_FAST
        elif _is_down(pressed_keys, pygame.K_LCTRL):
            step = config.SIM_SPEED_CHANGE_SLOW
        else:
            step = config.SIM_SPEED_CHANGE_BASE
        speed = self.sim_clock.change_speed(direction, step)
        self.ui.set_speed(speed)

    def _on_button(self, name: str) -> None:
        if name == "speed_up_button":
            self._change_update_speed(+1)
        elif name == "slow_down_button":
            self._change_update_speed(-1)
        elif name == "pause_resume_button":
            self.ui.set_paused(self.sim_clock.toggle_pause())
        elif name == "fit_grid_button":
            self.visualization.fit_grid_to_view()
        elif name == "reset_button":
            self.automaton.reset()
            if self.sim_clock.paused:
                self.visualization.update(self.automaton)
        elif name == "view_mode_button":
            self.visualization.set_vis_mode(self.ui.vis_mode)
            if self.sim_clock.paused:
                self.visualization.update(self.automaton)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ecosim", description="Run the ecosystem simulation.")
    parser.add_argument("--width", type=int, default=DEFAULT_WINDOW_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_WINDOW_HEIGHT, help="window height in pixels")
    parser.add_argument("--grid-width", type=int, default=DEFAULT_GRID_WIDTH, help="number of grid columns")
    parser.add_argument("--grid-height", type=int, default=DEFAULT_GRID_HEIGHT, help="number of grid rows")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the simulation window and run until it is closed."""
    args = _parse_args(argv)
    try:
        controller = Controller(args.width, args.height, args.grid_width, args.grid_height)
        controller.run()
    finally:
        pygame.quit()
    return 0