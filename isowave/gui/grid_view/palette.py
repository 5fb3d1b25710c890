"""Qt colors and pens shared by both grid backends."""

from PySide6.QtGui import QColor, QPen

from isowave.grid import BACKGROUND_LEVEL, OUTLINE_LEVEL, OUTLINE_WIDTH

BACKGROUND_COLOR = QColor(BACKGROUND_LEVEL, BACKGROUND_LEVEL, BACKGROUND_LEVEL)
OUTLINE_COLOR = QColor(OUTLINE_LEVEL, OUTLINE_LEVEL, OUTLINE_LEVEL)


def gray_to_qcolor(level: float) -> QColor:
    """Neutral gray with R = G = B = level (0.0 - 1.0)."""
    return QColor.fromRgbF(level, level, level)


def outline_pen() -> QPen:
    """Faint grid line pen, one device pixel wide at any scale."""
    pen = QPen(OUTLINE_COLOR)
    pen.setWidthF(OUTLINE_WIDTH)
    pen.setCosmetic(True)
    return pen
