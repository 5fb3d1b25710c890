"""Coordinate transformations for the isometric grid.

This module handles the mapping from discrete grid coordinates to
screen-space cell positions, the culling rule and diamond geometry.
"""

import math
from dataclasses import dataclass
from typing import Iterator

from .constants import TILE_WIDTH, TILE_HEIGHT

Point = tuple[float, float]


@dataclass(frozen=True)
class ViewportBounds:
    """Axis-aligned viewport rectangle in the space cells are placed in."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_size(cls, width: float, height: float) -> "ViewportBounds":
        """Bounds of a surface whose origin is its top-left corner."""
        return cls(0.0, 0.0, float(width), float(height))

    @classmethod
    def centered(cls, width: float, height: float) -> "ViewportBounds":
        """Bounds of a camera centered on the coordinate-system origin."""
        return cls(-width / 2, -height / 2, width / 2, height / 2)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Point:
        return ((self.left + self.right) / 2, (self.top + self.bottom) / 2)


class CoordinateTransformer:
    """Handles the 2:1 isometric projection and per-cell geometry."""

    def __init__(self, tile_width: float = TILE_WIDTH, tile_height: float = TILE_HEIGHT):
        """Initialize the coordinate transformer.

        Args:
            tile_width: Width of a single diamond in pixels
            tile_height: Height of a single diamond in pixels
        """
        self.tile_width = tile_width
        self.tile_height = tile_height

    @property
    def half_width(self) -> float:
        return self.tile_width / 2

    @property
    def half_height(self) -> float:
        return self.tile_height / 2

    def grid_extent(self, width: float, height: float) -> int:
        """Half-width of the square candidate range covering a viewport.

        Args:
            width: Viewport width in pixels
            height: Viewport height in pixels

        Returns:
            Extent E; candidate coordinates range over [-E, E] on both axes
        """
        return math.ceil((width + height) / self.tile_height)

    def candidate_coordinates(self, extent: int) -> Iterator[tuple[int, int]]:
        """Iterate the full square of grid coordinates, i outer, j inner."""
        for i in range(-extent, extent + 1):
            for j in range(-extent, extent + 1):
                yield (i, j)

    def cell_center(self, i: int, j: int, origin: Point = (0.0, 0.0)) -> Point:
        """Convert grid coordinates to the screen-space center of a cell.

        (i - j) drives the horizontal offset and (i + j) the vertical one,
        which produces the diamond lattice.

        Args:
            i: First grid axis
            j: Second grid axis
            origin: Screen position of cell (0, 0)

        Returns:
            (x, y) of the diamond center
        """
        origin_x, origin_y = origin
        x = origin_x + (i - j) * self.tile_width / 2
        y = origin_y + (i + j) * self.tile_height / 2
        return (x, y)

    def is_visible(self, x: float, y: float, bounds: ViewportBounds) -> bool:
        """Check whether a diamond centered at (x, y) may touch the viewport.

        The diamond's bounding box is compared against the bounds with exact
        half-extents; a box tangent to an edge counts as visible.
        """
        if x + self.half_width < bounds.left:
            return False
        if x - self.half_width > bounds.right:
            return False
        if y + self.half_height < bounds.top:
            return False
        if y - self.half_height > bounds.bottom:
            return False
        return True

    def diamond_vertices(self, center: Point) -> list[Point]:
        """Get the diamond corners in top, right, bottom, left order.

        The polygon is implicitly closed from the left vertex back to the top.
        """
        cx, cy = center
        return [
            (cx, cy - self.half_height),
            (cx + self.half_width, cy),
            (cx, cy + self.half_height),
            (cx - self.half_width, cy),
        ]

    def divider_segment(self, center: Point) -> tuple[Point, Point]:
        """Get the line splitting a diamond into two triangles (left to right)."""
        cx, cy = center
        return ((cx - self.half_width, cy), (cx + self.half_width, cy))

    def visible_cells(
        self, bounds: ViewportBounds, origin: Point = (0.0, 0.0)
    ) -> Iterator[tuple[int, int, float, float]]:
        """Enumerate the candidate range for the bounds and cull it.

        Args:
            bounds: Viewport bounds in the same space as origin
            origin: Screen position of cell (0, 0)

        Yields:
            (i, j, x, y) for every visible cell
        """
        extent = self.grid_extent(bounds.width, bounds.height)
        for i, j in self.candidate_coordinates(extent):
            x, y = self.cell_center(i, j, origin)
            if self.is_visible(x, y, bounds):
                yield (i, j, x, y)
