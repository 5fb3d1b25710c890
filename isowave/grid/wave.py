"""Radial wave color function.

Every cell oscillates between a light and a dark gray. The phase of a cell
is delayed in proportion to its distance from the grid origin, so the wave
starts at the center and travels outward.
"""

import math

from .constants import PERIOD, DELAY_FACTOR, LIGHT_LEVEL, DARK_LEVEL


def lerp(start: float, stop: float, amount: float) -> float:
    """Linear interpolation between start and stop."""
    return start + (stop - start) * amount


def phase_value(
    i: int,
    j: int,
    time_seconds: float,
    period: float = PERIOD,
    delay_factor: float = DELAY_FACTOR,
) -> float:
    """Get the wave value of cell (i, j) at the given time.

    Args:
        i: First grid axis
        j: Second grid axis
        time_seconds: Monotonic time in seconds
        period: Oscillation period in seconds
        delay_factor: Seconds of delay per unit of grid distance

    Returns:
        Value in [-1, 1]
    """
    distance = math.hypot(i, j)
    return math.sin(2 * math.pi * (time_seconds - distance * delay_factor) / period)


def shade(value: float) -> float:
    """Map a wave value from [-1, 1] to [0, 1]."""
    return (value + 1) / 2


def gray_level(shade_normalized: float) -> float:
    """Interpolate from the light to the dark gray.

    Returns:
        Channel intensity in [0, 1], used for R, G and B alike
    """
    return lerp(LIGHT_LEVEL, DARK_LEVEL, shade_normalized) / 255


def cell_shade(i: int, j: int, time_seconds: float) -> float:
    """Normalized shade of cell (i, j) at the given time."""
    return shade(phase_value(i, j, time_seconds))


def cell_gray(i: int, j: int, time_seconds: float) -> float:
    """Gray level of cell (i, j) at the given time."""
    return gray_level(cell_shade(i, j, time_seconds))
