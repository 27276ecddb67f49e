"""A single grid cell with climate properties and growing vegetation."""

from __future__ import annotations

import math

from ecosim import config


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


class Cell:
    """A cell whose vegetation grows according to its climate."""

    def __init__(
        self,
        pos_x: int,
        pos_y: int,
        temperature: float,
        humidity: float,
        elevation: float,
        vegetation: float = 0.0,
    ) -> None:
        self._pos_x = pos_x
        self._pos_y = pos_y
        self._temperature = temperature
        self._humidity = humidity
        self._elevation = elevation
        self._vegetation = vegetation
        self._growth_factor = 0.0
        self._growth_limit = 0.0
        self._update_growth_parameters()

    def __repr__(self) -> str:
        return (
            f"Cell(pos_x={self._pos_x}, pos_y={self._pos_y}, "
            f"temperature={self._temperature}, humidity={self._humidity}, "
            f"elevation={self._elevation}, vegetation={self._vegetation})"
        )

    @property
    def pos_x(self) -> int:
        return self._pos_x

    @property
    def pos_y(self) -> int:
        return self._pos_y

    @property
    def growth_factor(self) -> float:
        return self._growth_factor

    @property
    def growth_limit(self) -> float:
        return self._growth_limit

    @property
    def vegetation(self) -> float:
        return self._vegetation

    @vegetation.setter
    def vegetation(self, value: float) -> None:
        self._vegetation = _clamp(value, 0.0, config.VEG_BASE_GROWTH_MAX)

    @property
    def temperature(self) -> float:
        return self._temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        self._temperature = _clamp(value, config.MIN_TEMP, config.MAX_TEMP)
        self._update_growth_parameters()

    @property
    def humidity(self) -> float:
        return self._humidity

    @humidity.setter
    def humidity(self, value: float) -> None:
        self._humidity = _clamp(value, config.MIN_HUMIDITY, config.MAX_HUMIDITY)
        self._update_growth_parameters()

    @property
    def elevation(self) -> float:
        return self._elevation

    @elevation.setter
    def elevation(self, value: float) -> None:
        self._elevation = _clamp(value, config.MIN_ELEVATION, config.MAX_ELEVATION)
        self._update_growth_parameters()

    def process(self) -> None:
        """Grow the vegetation by one step, up to the growth limit."""
        self._vegetation = min(self._vegetation + self._growth_factor, self._growth_limit)

    def update_climate(self, temperature: float, humidity: float, elevation: float) -> None:
        """Set all climate properties, clamped, and recompute growth once."""
        self._temperature = _clamp(temperature, config.MIN_TEMP, config.MAX_TEMP)
        self._humidity = _clamp(humidity, config.MIN_HUMIDITY, config.MAX_HUMIDITY)
        self._elevation = _clamp(elevation, config.MIN_ELEVATION, config.MAX_ELEVATION)
        self._update_growth_parameters()

    def _update_growth_parameters(self) -> None:
        temp_diff = abs(self._temperature - config.VEG_TEMP_IDEAL)
        temp_mod = math.pow(1.0 - temp_diff, config.VEG_TEMP_PENALTY)

        hum_diff = abs(self._humidity - config.VEG_HUMIDITY_IDEAL)
        hum_mod = math.pow(1.0 - hum_diff, config.VEG_HUMIDITY_PENALTY)

        elev_mod = 1.0
        if self._elevation > config.VEG_ELEVATION_MAX:
            elev_diff = self._elevation - config.VEG_ELEVATION_MAX
            elev_mod = math.pow(1.0 - elev_diff, config.VEG_ELEVATION_PENALTY)

        combined = temp_mod * hum_mod * elev_mod
        self._growth_factor = config.VEG_BASE_GROWTH_FACTOR * combined
        self._growth_limit = config.VEG_BASE_GROWTH_MAX * combined