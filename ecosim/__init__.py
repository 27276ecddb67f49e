"""Grid ecosystem simulation with climate-driven vegetation growth, shown in a pygame window."""

__version__ = "0.1.0"