"""
isowave: animated isometric wave grid

Renders a full-window isometric grid of diamond cells whose gray shade
pulses as a radial wave from the grid origin, through two interchangeable
Qt backends that share one geometric and temporal model.
"""

__version__ = "0.1.0"
__author__ = "isowave Contributors"

from .grid import (
    CoordinateTransformer,
    ViewportBounds,
    phase_value,
    shade,
    gray_level,
    cell_gray,
)
from .utils.logging_config import setup_logging

__all__ = [
    # Grid model
    "CoordinateTransformer",
    "ViewportBounds",
    "phase_value",
    "shade",
    "gray_level",
    "cell_gray",

    # Logging
    "setup_logging",
]
