"""Retained-scene grid backend.

Cell items are built once on a QGraphicsScene; every frame only their
brushes change. The view acts as an orthographic camera centered on the
grid origin, and a resize only moves the camera bounds.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import Qt, QLineF, QPointF, QRectF
from PySide6.QtGui import QBrush, QPainter, QPolygonF, QResizeEvent
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsLineItem,
    QGraphicsPolygonItem,
    QGraphicsScene,
    QGraphicsView,
    QWidget,
)

from isowave.grid import CoordinateTransformer, ViewportBounds, cell_shade, gray_level
from isowave.settings import AppSettings

from ..frame_loop import FrameLoop, LoopHandle
from .lifecycle import GridViewLifecycleMixin
from .palette import BACKGROUND_COLOR, gray_to_qcolor, outline_pen


@dataclass
class CellRecord:
    """Persistent cell of the retained scene.

    Attributes:
        i: First grid axis
        j: Second grid axis
        item: Diamond item; its divider line is a child item
        shade: Normalized shade applied on the last frame
    """
    i: int
    j: int
    item: QGraphicsPolygonItem
    shade: float = 0.0


class SceneGridView(GridViewLifecycleMixin, QGraphicsView):
    """Graphics view that animates a persistent grid of diamond items."""

    def __init__(
        self,
        settings: AppSettings,
        parent: Optional[QWidget] = None,
        frame_loop: Optional[FrameLoop] = None,
    ):
        """Initialize the retained-scene view.

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

        self._scene: Optional[QGraphicsScene] = None
        self.cells: list[CellRecord] = []
        self.grid_extent = 0

        # Templates shared by every cell, centered on the cell position
        origin = (0.0, 0.0)
        self._diamond_template = QPolygonF(
            [QPointF(x, y) for x, y in self.transformer.diamond_vertices(origin)]
        )
        left, right = self.transformer.divider_segment(origin)
        self._divider_template = QLineF(QPointF(*left), QPointF(*right))
        self._outline_pen = outline_pen()

        # Configure view as a fixed camera
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setBackgroundBrush(QBrush(BACKGROUND_COLOR))

        self.logger.debug("Scene grid view initialized")

    @property
    def graphics_scene(self) -> Optional[QGraphicsScene]:
        """The scene holding the cell items, None once released."""
        return self._scene

    # === LIFECYCLE HOOKS ===

    def _create_surface(self, width: int, height: int) -> bool:
        self.build_cells(width, height)
        self.update_camera(width, height)
        return True

    def _release_surface(self) -> None:
        """Drop cell records and dispose of the scene."""
        self.cells.clear()
        if self._scene is None:
            return

        self._scene.clear()
        self._scene.deleteLater()
        self._scene = None
        self.logger.debug("Scene released")

    def on_frame(self, time_seconds: float) -> None:
        """Recolor every cell for the frame time and re-composite."""
        for cell in self.cells:
            cell.shade = cell_shade(cell.i, cell.j, time_seconds)
            cell.item.setBrush(QBrush(gray_to_qcolor(gray_level(cell.shade))))

        if self._scene is not None:
            self._scene.update()

    # === SCENE ===

    def _ensure_scene(self) -> QGraphicsScene:
        if self._scene is None:
            self._scene = QGraphicsScene(self)
            self._scene.setBackgroundBrush(QBrush(BACKGROUND_COLOR))
            self.setScene(self._scene)
        return self._scene

    def build_cells(self, width: int, height: int) -> int:
        """Create one persistent item per visible cell.

        Cells are placed relative to the scene origin; the camera handles
        centering.

        Args:
            width: Viewport width in pixels
            height: Viewport height in pixels

        Returns:
            Number of cells created
        """
        scene = self._ensure_scene()
        if self.cells:
            scene.clear()
            self.cells.clear()

        self.grid_extent = self.transformer.grid_extent(width, height)
        bounds = ViewportBounds.centered(width, height)

        for i, j, x, y in self.transformer.visible_cells(bounds):
            item = QGraphicsPolygonItem(self._diamond_template)
            item.setPen(self._outline_pen)
            item.setBrush(QBrush(Qt.GlobalColor.white))
            item.setPos(x, y)

            divider = QGraphicsLineItem(self._divider_template, item)
            divider.setPen(self._outline_pen)

            scene.addItem(item)
            self.cells.append(CellRecord(i=i, j=j, item=item))

        self.logger.debug(
            f"Built {len(self.cells)} cells (extent {self.grid_extent}) for {width}x{height}"
        )
        return len(self.cells)

    def update_camera(self, width: float, height: float) -> None:
        """Point the camera at the grid origin with the given viewport size."""
        bounds = ViewportBounds.centered(width, height)
        self.setSceneRect(QRectF(bounds.left, bounds.top, bounds.width, bounds.height))

    def resizeEvent(self, event: QResizeEvent) -> None:
        """Update the camera bounds only; cells are kept as built."""
        super().resizeEvent(event)
        self.update_camera(event.size().width(), event.size().height())
