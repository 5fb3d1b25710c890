"""Unit tests for the grid-animation model."""

import math

import pytest

from isowave.grid import (
    CoordinateTransformer,
    ViewportBounds,
    cell_gray,
    cell_shade,
    gray_level,
    phase_value,
    shade,
    PERIOD,
)


@pytest.fixture
def transformer() -> CoordinateTransformer:
    return CoordinateTransformer()


class TestCellCenter:
    """Test the isometric projection."""

    @pytest.mark.parametrize("i, j", [(0, 0), (1, 0), (0, 1), (-3, 7), (12, -5), (-9, -9)])
    def test_projection_formula(self, transformer: CoordinateTransformer, i: int, j: int) -> None:
        """Center is origin + ((i-j)*tileW/2, (i+j)*tileH/2)."""
        origin = (400.0, 300.0)
        assert transformer.cell_center(i, j, origin) == (
            400.0 + (i - j) * 20,
            300.0 + (i + j) * 10,
        )

    def test_default_origin_is_zero(self, transformer: CoordinateTransformer) -> None:
        assert transformer.cell_center(0, 0) == (0.0, 0.0)
        assert transformer.cell_center(2, 1) == (20.0, 30.0)

    def test_neighbours_form_diamond_lattice(self, transformer: CoordinateTransformer) -> None:
        """Stepping i moves down-right, stepping j moves down-left."""
        x0, y0 = transformer.cell_center(0, 0)
        xi, yi = transformer.cell_center(1, 0)
        xj, yj = transformer.cell_center(0, 1)
        assert (xi - x0, yi - y0) == (20.0, 10.0)
        assert (xj - x0, yj - y0) == (-20.0, 10.0)


class TestDiamondGeometry:
    """Test diamond vertices and divider."""

    def test_vertex_order(self, transformer: CoordinateTransformer) -> None:
        """Vertices go top, right, bottom, left."""
        assert transformer.diamond_vertices((100.0, 50.0)) == [
            (100.0, 40.0),
            (120.0, 50.0),
            (100.0, 60.0),
            (80.0, 50.0),
        ]

    def test_divider_joins_left_and_right(self, transformer: CoordinateTransformer) -> None:
        vertices = transformer.diamond_vertices((10.0, 10.0))
        left, right = transformer.divider_segment((10.0, 10.0))
        assert left == vertices[3]
        assert right == vertices[1]


class TestVisibility:
    """Test the culling predicate."""

    def test_center_cell_is_visible(self, transformer: CoordinateTransformer) -> None:
        bounds = ViewportBounds.from_size(800, 600)
        assert transformer.is_visible(400, 300, bounds)

    def test_tangent_cells_are_kept(self, transformer: CoordinateTransformer) -> None:
        """A bounding box touching an edge counts as visible."""
        bounds = ViewportBounds.from_size(800, 600)
        assert transformer.is_visible(-20, 300, bounds)
        assert transformer.is_visible(820, 300, bounds)
        assert transformer.is_visible(400, -10, bounds)
        assert transformer.is_visible(400, 610, bounds)

    def test_cells_just_outside_are_culled(self, transformer: CoordinateTransformer) -> None:
        bounds = ViewportBounds.from_size(800, 600)
        assert not transformer.is_visible(-20.001, 300, bounds)
        assert not transformer.is_visible(820.001, 300, bounds)
        assert not transformer.is_visible(400, -10.001, bounds)
        assert not transformer.is_visible(400, 610.001, bounds)

    def test_centered_bounds(self, transformer: CoordinateTransformer) -> None:
        bounds = ViewportBounds.centered(800, 600)
        assert bounds == ViewportBounds(-400, -300, 400, 300)
        assert bounds.center == (0.0, 0.0)
        assert transformer.is_visible(-420, 0, bounds)
        assert not transformer.is_visible(0, 310.5, bounds)


class TestGridExtent:
    """Test candidate range sizing."""

    def test_extent_formula(self, transformer: CoordinateTransformer) -> None:
        assert transformer.grid_extent(800, 600) == 70
        assert transformer.grid_extent(801, 600) == 71
        assert transformer.grid_extent(0, 0) == 0

    def test_extent_grows_with_viewport(self, transformer: CoordinateTransformer) -> None:
        assert transformer.grid_extent(1600, 1200) > transformer.grid_extent(800, 600)

    def test_candidate_range_is_full_square(self, transformer: CoordinateTransformer) -> None:
        coords = list(transformer.candidate_coordinates(2))
        assert len(coords) == 25
        assert coords[0] == (-2, -2)
        assert coords[-1] == (2, 2)

    @pytest.mark.parametrize("width, height", [(800, 600), (320, 240), (1920, 300)])
    def test_no_visible_cell_outside_range(
        self, transformer: CoordinateTransformer, width: int, height: int
    ) -> None:
        """Coordinates beyond the extent never pass culling."""
        extent = transformer.grid_extent(width, height)
        bounds = ViewportBounds.from_size(width, height)
        origin = bounds.center
        margin = 4
        for i in range(-extent - margin, extent + margin + 1):
            for j in range(-extent - margin, extent + margin + 1):
                if max(abs(i), abs(j)) <= extent:
                    continue
                x, y = transformer.cell_center(i, j, origin)
                assert not transformer.is_visible(x, y, bounds), (i, j)

    def test_visible_cells_cover_viewport_center(self, transformer: CoordinateTransformer) -> None:
        cells = {(i, j) for i, j, _, _ in transformer.visible_cells(ViewportBounds.centered(800, 600))}
        assert (0, 0) in cells
        assert (1, -1) in cells
        assert (40, 40) not in cells


class TestWave:
    """Test phase, shade and gray level."""

    def test_origin_has_no_delay(self) -> None:
        for t in (0.0, 0.1, 0.37, 1.5, 3.2):
            assert phase_value(0, 0, t) == pytest.approx(math.sin(2 * math.pi * t / PERIOD))

    @pytest.mark.parametrize("i, j", [(0, 0), (3, 4), (-7, 2), (15, -15)])
    def test_phase_is_periodic(self, i: int, j: int) -> None:
        for t in (0.0, 0.25, 0.9):
            assert phase_value(i, j, t + PERIOD) == pytest.approx(phase_value(i, j, t), abs=1e-9)

    def test_farther_cells_lag_behind(self) -> None:
        """A cell at distance 5 repeats the origin's value 0.25s later."""
        assert phase_value(3, 4, 0.75) == pytest.approx(phase_value(0, 0, 0.5))

    def test_shade_mapping(self) -> None:
        assert shade(-1.0) == 0.0
        assert shade(0.0) == 0.5
        assert shade(1.0) == 1.0

    def test_shade_is_monotonic(self) -> None:
        values = [-1 + k * 0.1 for k in range(21)]
        shades = [shade(v) for v in values]
        assert shades == sorted(shades)

    def test_gray_endpoints(self) -> None:
        assert gray_level(0.0) == 240 / 255
        assert gray_level(1.0) == 60 / 255

    def test_gray_is_linear(self) -> None:
        assert gray_level(0.25) == pytest.approx(195 / 255)
        assert gray_level(0.5) == pytest.approx(150 / 255)


class TestEndToEnd:
    """Known values for the fixed constants."""

    def test_origin_at_time_zero(self) -> None:
        value = phase_value(0, 0, 0.0)
        assert value == 0.0
        assert shade(value) == 0.5
        assert cell_gray(0, 0, 0.0) == pytest.approx(150 / 255)

    def test_origin_at_quarter_period(self) -> None:
        value = phase_value(0, 0, 0.5)
        assert value == pytest.approx(1.0)
        assert cell_gray(0, 0, 0.5) == pytest.approx(60 / 255)

    def test_cell_gray_uses_cell_shade(self) -> None:
        for i, j, t in [(0, 0, 0.0), (3, 4, 0.75), (-2, 5, 1.3)]:
            assert cell_shade(i, j, t) == shade(phase_value(i, j, t))
            assert cell_gray(i, j, t) == gray_level(cell_shade(i, j, t))
