"""Grid view package.

This package provides the two rendering backends for the animated grid:
- ImmediateGridView: repaints every visible cell each frame with QPainter
- SceneGridView: keeps persistent QGraphicsScene items and recolors them
- GridViewLifecycleMixin: mount/unmount contract shared by both
"""

from .immediate_view import ImmediateGridView, CellFrame
from .scene_view import SceneGridView, CellRecord
from .lifecycle import GridViewLifecycleMixin
from .palette import BACKGROUND_COLOR, OUTLINE_COLOR, gray_to_qcolor, outline_pen

__all__ = [
    "ImmediateGridView",
    "CellFrame",
    "SceneGridView",
    "CellRecord",
    "GridViewLifecycleMixin",
    "BACKGROUND_COLOR",
    "OUTLINE_COLOR",
    "gray_to_qcolor",
    "outline_pen",
]
