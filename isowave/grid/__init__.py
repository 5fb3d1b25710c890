"""Grid-animation model shared by all rendering backends.

This package provides pure, backend-agnostic computations:
- CoordinateTransformer: isometric projection, culling and diamond geometry
- ViewportBounds: rectangle the culling rule tests against
- wave: phase, shade and gray level of a cell at a given time
"""

from .constants import (
    TILE_WIDTH,
    TILE_HEIGHT,
    PERIOD,
    DELAY_FACTOR,
    LIGHT_LEVEL,
    DARK_LEVEL,
    BACKGROUND_LEVEL,
    OUTLINE_LEVEL,
    OUTLINE_WIDTH,
)
from .coord_transformer import CoordinateTransformer, ViewportBounds
from .wave import phase_value, shade, gray_level, lerp, cell_shade, cell_gray

__all__ = [
    "TILE_WIDTH",
    "TILE_HEIGHT",
    "PERIOD",
    "DELAY_FACTOR",
    "LIGHT_LEVEL",
    "DARK_LEVEL",
    "BACKGROUND_LEVEL",
    "OUTLINE_LEVEL",
    "OUTLINE_WIDTH",
    "CoordinateTransformer",
    "ViewportBounds",
    "phase_value",
    "shade",
    "gray_level",
    "lerp",
    "cell_shade",
    "cell_gray",
]
