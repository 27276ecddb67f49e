"""Tuning constants for cells, the simulation clock and the grid view."""

# Climate constraints
MIN_TEMP = 0.0
MAX_TEMP = 1.0

MIN_HUMIDITY = 0.0
MAX_HUMIDITY = 1.0

MIN_ELEVATION = 0.0
MAX_ELEVATION = 1.0

# Vegetation growth
VEG_BASE_GROWTH_FACTOR = 0.001
VEG_BASE_GROWTH_MAX = 1.0

VEG_TEMP_IDEAL = 0.5
VEG_TEMP_PENALTY = 3.0

VEG_HUMIDITY_IDEAL = 0.7
VEG_HUMIDITY_PENALTY = 3.0

VEG_ELEVATION_MAX = 0.95
VEG_ELEVATION_PENALTY = 6.0

# Simulation speed, in updates per second
MIN_SIM_SPEED = 1
MAX_SIM_SPEED = 240
SIM_SPEED_CHANGE_BASE = 5
SIM_SPEED_CHANGE_FAST = 20
SIM_SPEED_CHANGE_SLOW = 1

# Window and grid view
WINDOW_TITLE = "Ecosystem"
VERTS_PER_CELL = 4
MOUSE_IS_HELD_THRESHOLD = 0.15
ZOOM_STEP = 0.1
CAMERA_MOVEMENT_SPEED_BASE = 300.0
CAMERA_MOVEMENT_SPEED_FAST = 500.0