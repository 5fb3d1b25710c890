"""Immediate-mode grid backend.

Every frame the whole candidate square is walked again; each visible
cell's diamond and gray are recomputed from the grid model and painted
with QPainter. Nothing but the grid extent survives between frames.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from PySide6.QtCore import Qt, QPointF, QRectF
from PySide6.QtGui import QBrush, QPainter, QPaintEvent, QPen, QPolygonF, QResizeEvent
from PySide6.QtWidgets import QWidget

from isowave.grid import CoordinateTransformer, ViewportBounds, cell_gray
from isowave.grid.coord_transformer import Point
from isowave.settings import AppSettings

from ..frame_loop import FrameLoop, LoopHandle
from .lifecycle import GridViewLifecycleMixin
from .palette import BACKGROUND_COLOR, gray_to_qcolor, outline_pen


@dataclass
class CellFrame:
    """Geometry and color of one visible cell for one frame.

    Attributes:
        i: First grid axis
        j: Second grid axis
        center: Diamond center in widget pixels
        vertices: Top, right, bottom, left corners
        divider: Left and right vertex
        gray: Fill intensity in [0, 1]
    """
    i: int
    j: int
    center: Point
    vertices: list[Point]
    divider: tuple[Point, Point]
    gray: float


class ImmediateGridView(GridViewLifecycleMixin, QWidget):
    """Widget that repaints the animated grid from scratch every frame."""

    def __init__(
        self,
        settings: AppSettings,
        parent: Optional[QWidget] = None,
        frame_loop: Optional[FrameLoop] = None,
    ):
        """Initialize the immediate-mode view.

        Args:
            settings: Application settings (for the frame interval)
            parent: Parent widget
            frame_loop: Frame loop to drive the view; a new one by default
        """
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings
        self.transformer = CoordinateTransformer()
        self.frame_loop = frame_loop or FrameLoop(settings.view.frame_interval)
        self._loop_handle: Optional[LoopHandle] = None
        self._container: Optional[QWidget] = None

        self.grid_extent = self.transformer.grid_extent(self.width(), self.height())
        self._time = 0.0
        self._outline_pen = outline_pen()
        self._inactive_painter_logged = False

        # Every pixel is repainted each frame
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

        self.logger.debug("Immediate grid view initialized")

    # === LIFECYCLE HOOKS ===

    def _create_surface(self, width: int, height: int) -> bool:
        self.update_grid_extent(width, height)
        self.update()
        return True

    def _release_surface(self) -> None:
        self._time = 0.0

    def on_frame(self, time_seconds: float) -> None:
        """Store the frame time and schedule a repaint."""
        self._time = time_seconds
        self.update()

    @property
    def frame_time(self) -> float:
        """Time of the frame the next repaint draws."""
        return self._time

    # === GRID ===

    def update_grid_extent(self, width: int, height: int) -> int:
        """Recompute the candidate range for a new viewport size."""
        self.grid_extent = self.transformer.grid_extent(width, height)
        self.logger.debug(f"Grid extent {self.grid_extent} for {width}x{height}")
        return self.grid_extent

    def visible_cells(self, width: float, height: float, time_seconds: float) -> Iterator[CellFrame]:
        """Enumerate the cells to paint for one frame.

        The grid origin sits at the widget center; cells are culled against
        the widget rectangle.

        Args:
            width: Widget width in pixels
            height: Widget height in pixels
            time_seconds: Frame time

        Yields:
            CellFrame for every visible cell
        """
        bounds = ViewportBounds.from_size(width, height)
        origin = bounds.center

        for i, j in self.transformer.candidate_coordinates(self.grid_extent):
            center = self.transformer.cell_center(i, j, origin)
            if not self.transformer.is_visible(center[0], center[1], bounds):
                continue

            yield CellFrame(
                i=i,
                j=j,
                center=center,
                vertices=self.transformer.diamond_vertices(center),
                divider=self.transformer.divider_segment(center),
                gray=cell_gray(i, j, time_seconds),
            )

    # === PAINTING ===

    def paint_frame(self, painter: QPainter, width: float, height: float, time_seconds: float) -> int:
        """Clear the surface and draw every visible cell.

        Returns:
            Number of cells drawn
        """
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(QRectF(0, 0, width, height), BACKGROUND_COLOR)

        drawn = 0
        for cell in self.visible_cells(width, height, time_seconds):
            self.paint_cell(painter, cell, self._outline_pen)
            drawn += 1
        return drawn

    @staticmethod
    def paint_cell(painter: QPainter, cell: CellFrame, pen: QPen) -> None:
        """Draw one filled, outlined diamond with its divider."""
        painter.setPen(pen)
        painter.setBrush(QBrush(gray_to_qcolor(cell.gray)))
        painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in cell.vertices]))

        left, right = cell.divider
        painter.drawLine(QPointF(*left), QPointF(*right))

    def paintEvent(self, event: QPaintEvent) -> None:
        """Paint the current frame."""
        painter = QPainter(self)
        if not painter.isActive():
            if not self._inactive_painter_logged:
                self.logger.warning("Painter could not be activated, skipping frames")
                self._inactive_painter_logged = True
            return

        try:
            self.paint_frame(painter, self.width(), self.height(), self._time)
        finally:
            painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        """Recompute the grid extent and redraw everything."""
        super().resizeEvent(event)
        self.update_grid_extent(event.size().width(), event.size().height())
        self.update()
