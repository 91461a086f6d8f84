"""
Temperature and push/pull compensation.

Temperature compensation looks up a multiplier for the development
temperature rounded to the nearest 0.5°C, interpolating linearly between the
whole degrees around it when the half degree itself is not tabulated.
Temperatures outside the table get no compensation (multiplier 1.0).

Push/pull resolution replaces the baseline time with an explicit override
when the process data has one. Without an override, black-and-white times
are scaled by the push/pull multiplier table, while C-41 and E-6 fall back to
fixed times for the supported stop counts.
"""

import math
from typing import Union

from filmdev.core.logging import LoggingMixin
from filmdev.core.models import (
    BlackAndWhiteEntry,
    ColorNegativeEntry,
    CompensationTable,
    SlideEntry,
)
from filmdev.core.types import ProcessFamily

NO_COMPENSATION = 1.0

# Fixed C-41 developer times (minutes) used when a film has no override
COLOR_NEGATIVE_FALLBACK_TIMES: dict[int, float] = {
    1: 4.5,
    2: 6.5,
    -1: 2.5,
}

# Fixed E-6 first developer times (minutes) used when a film has no override
SLIDE_FALLBACK_TIMES: dict[int, float] = {
    1: 8.0,
    2: 10.0,
    -1: 4.5,
}

AnyProcessEntry = Union[BlackAndWhiteEntry, ColorNegativeEntry, SlideEntry]


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


def round_to_half_degree(temperature: float) -> float:
    """Round a temperature to the nearest 0.5°C."""
    return round_half_up(temperature * 2) / 2


class CompensationEngine(LoggingMixin):
    """Computes temperature multipliers and push/pull adjusted times."""

    def __init__(self, table: CompensationTable):
        """Initialize the engine.

        Args:
            table: Temperature and push/pull multipliers.
        """
        self.table = table

    def compensate(self, temperature: float) -> float:
        """Development time multiplier for ``temperature`` (°C)."""
        temps = self.table.temperature
        low, high = self.table.temperature_range
        if not low - 0.25 <= temperature < high + 0.25:
            self.logger.warning(
                f"Temperature {temperature}°C outside compensation table "
                f"({low}-{high}°C), no compensation applied"
            )
            return NO_COMPENSATION

        rounded = round_to_half_degree(temperature)
        if rounded in temps:
            return temps[rounded]

        lower = float(math.floor(rounded))
        upper = float(math.ceil(rounded))
        if lower not in temps or upper not in temps:
            self.logger.warning(
                f"Temperature {temperature}°C falls in a gap of the compensation table, "
                f"no compensation applied"
            )
            return NO_COMPENSATION

        factor = rounded - lower
        return temps[lower] + (temps[upper] - temps[lower]) * factor

    def resolve_push_pull(self, entry: AnyProcessEntry, stops: int) -> float:
        """Development time (minutes) for ``stops`` before temperature compensation."""
        base_time = entry.base_time
        if stops == 0:
            return base_time

        override = entry.override_for(stops)
        if override is not None:
            self.logger.debug(f"Using explicit {stops:+d} stop time {override} min")
            return override

        family = ProcessFamily(entry.family)
        if family == ProcessFamily.BLACK_WHITE:
            multiplier = self.table.push_pull.get(stops)
            if multiplier is None:
                return base_time
            return base_time * multiplier

        fallback_times = (
            COLOR_NEGATIVE_FALLBACK_TIMES
            if family == ProcessFamily.COLOR_NEGATIVE
            else SLIDE_FALLBACK_TIMES
        )
        if stops not in fallback_times:
            self.logger.debug(f"{family.label} has no {stops:+d} stop time, using baseline")
            return base_time
        return fallback_times[stops]

    def adjust(self, entry: AnyProcessEntry, stops: int, temperature: float) -> tuple[float, float]:
        """Adjusted time and the temperature multiplier that produced it.

        Returns:
            Tuple of (adjusted time in minutes, temperature multiplier).
        """
        resolved = self.resolve_push_pull(entry, stops)
        multiplier = self.compensate(temperature)
        return resolved * multiplier, multiplier
