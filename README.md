# ecosim

An interactive ecosystem simulation on a rectangular grid. Every cell has a
temperature, a humidity and an elevation, each between 0 and 1; vegetation
grows in each cell at a rate and up to a limit set by how close its climate
is to the ideal (temperature 0.5, humidity 0.7, elevation no higher than
0.95). The grid is drawn in a window where you can pan, zoom, inspect cells
and overwrite their properties.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window. For the tests:

```
pip install ".[test]"
pytest
```

## Running

```
ecosim
```

This opens a resizable 1280×720 window holding a 50×50 grid of cells with a
random climate. The simulation starts paused, at 30 updates per second.

Options:

- `--width`, `--height` – window size in pixels (default 1280×720).
- `--grid-width`, `--grid-height` – number of grid columns and rows
  (default 50×50).

### Controls

- **Space** – pause or resume the simulation (also the pause button in the
  top bar, which shows `>` while paused and `||` while running).
- **+ / -** buttons – speed the simulation up or slow it down by 5 updates per
  second. Hold **Left Shift** for steps of 20 or **Left Ctrl** for steps of 1.
  The speed stays between 1 and 240 updates per second.
- **W / A / S / D** – move the camera; hold **Left Shift** to move faster.
- **Mouse wheel** – zoom in and out while the pointer is over the grid.
- **Middle mouse button** – drag the grid.
- **Left click** on a cell – in free mode this switches to inspecting the
  cell and shows its values (on a 0–100 scale) in the side panel; in insert
  mode the values from the side panel are written into the cell.
- **Left Ctrl** – enter insert mode; **Escape** – leave insert or inspect
  mode. The bind button in the side panel switches insert mode on and off.
- The small `-` / `+` buttons beside each value in the side panel change it
  by one.
- **Fit Grid to View** – reset the zoom and centre the grid.
- **Reset** – give every cell a fresh random climate and no vegetation.
- The view mode button in the side panel cycles through temperature,
  humidity, elevation and vegetation, each shown as a colour gradient with a
  legend.
- The top bar also shows the frame rate and the number of iterations run.

## Using the model in code

The simulation model can be used without a window:

```python
import random

from ecosim.automaton import Automaton

automaton = Automaton(20, 20, random.Random(1))
for _ in range(100):
    automaton.update()

cell = automaton.cell_at(3, 4)
print(cell.vegetation, cell.growth_factor, cell.growth_limit)
print(automaton.modify_cell(3, 4))  # a text description of the cell
```

- `ecosim.cell.Cell` holds one cell's climate and vegetation. Setting
  `temperature`, `humidity`, `elevation` or `vegetation` clamps the value to
  its range; `update_climate` sets all three climate values at once;
  `process` grows the vegetation by one step.
- `ecosim.automaton.Automaton` is the grid, stored row-major: `update`,
  `reset`, `cell_at` (raises `ValueError` outside the grid) and `modify_cell`.
  It can be iterated over and has a length.
- `ecosim.vismode` names the view modes (`VisMode`) with their colours and
  legend labels (`to_string`, `to_vis_mode`, `get_data`).
- `ecosim.camera` has the grid view geometry (`GridView`) and the colouring
  helpers `compute_cell_size`, `lerp_color` and `property_colors`.
- `ecosim.controller` has `SimulationClock` and `FpsCounter`, the timing
  pieces of the main loop, which work without a window.

## What it does not do

There are no animals in the model. The Animal and Genes tabs of the side
panel and the list under "Animals:" only show placeholder values; the values
there can be changed but have no effect. The "File" and "Edit" menu in the
top bar is only a caption: the simulation cannot be saved or loaded, and
nothing can be undone.