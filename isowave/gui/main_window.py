"""
Main application window for isowave.
"""

import logging
from typing import Optional, Union

import qtawesome as qta  # type: ignore
from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction, QActionGroup, QCloseEvent, QKeySequence, QShowEvent
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from ..settings import AppSettings
from ..settings.view import BACKEND_IMMEDIATE, BACKEND_RETAINED
from .grid_view import ImmediateGridView, SceneGridView

GridView = Union[ImmediateGridView, SceneGridView]

BACKEND_CLASSES: dict[str, type] = {
    BACKEND_IMMEDIATE: ImmediateGridView,
    BACKEND_RETAINED: SceneGridView,
}

BACKEND_TITLES = {
    BACKEND_IMMEDIATE: "Immediate (QPainter)",
    BACKEND_RETAINED: "Retained (QGraphicsScene)",
}


class MainWindow(QMainWindow):
    """Main application window hosting one grid backend at a time."""

    action_exit: QAction
    action_immediate: QAction
    action_retained: QAction

    def __init__(self, settings: AppSettings, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.setObjectName("main_window")
        self.settings = settings
        self.active_view: Optional[GridView] = None
        self.active_backend: Optional[str] = None
        self._first_show = True

        # Container the backends mount into
        self.container = QWidget(self)
        layout = QVBoxLayout(self.container)
        layout.setContentsMargins(0, 0, 0, 0)
        self.setCentralWidget(self.container)

        self.setup_actions()
        self.setup_menus()
        self.setup_status_bar()

        self.resize(1200, 800)
        self.setWindowTitle("isowave - Isometric Wave Grid")

        # Frame timing readout
        self._stats_update_timer = QTimer(self)
        self._stats_update_timer.timeout.connect(self._update_frame_stats)
        self._stats_update_timer.start(500)

        self.logger.info("Main window initialized")

    def setup_actions(self) -> None:
        """Create menu actions."""
        self.action_exit = QAction(qta.icon("mdi.exit-to-app"), "E&xit", self)  # type: ignore[arg-type]
        self.action_exit.setShortcut(QKeySequence.StandardKey.Quit)
        self.action_exit.setStatusTip("Exit the application")
        self.action_exit.triggered.connect(self.close)

        self.backend_group = QActionGroup(self)
        self.backend_group.setExclusive(True)

        self.action_immediate = QAction(qta.icon("mdi.brush"), BACKEND_TITLES[BACKEND_IMMEDIATE], self)  # type: ignore[arg-type]
        self.action_immediate.setCheckable(True)
        self.action_immediate.setShortcut("Ctrl+1")
        self.action_immediate.setStatusTip("Redraw every cell each frame")
        self.action_immediate.triggered.connect(lambda: self.set_backend(BACKEND_IMMEDIATE))
        self.backend_group.addAction(self.action_immediate)

        self.action_retained = QAction(qta.icon("mdi.layers"), BACKEND_TITLES[BACKEND_RETAINED], self)  # type: ignore[arg-type]
        self.action_retained.setCheckable(True)
        self.action_retained.setShortcut("Ctrl+2")
        self.action_retained.setStatusTip("Keep cell items and recolor them each frame")
        self.action_retained.triggered.connect(lambda: self.set_backend(BACKEND_RETAINED))
        self.backend_group.addAction(self.action_retained)

        self.logger.debug("Actions created")

    def setup_menus(self) -> None:
        """Create the menu bar."""
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(self.action_exit)

        view_menu = menubar.addMenu("&View")
        view_menu.addAction(self.action_immediate)
        view_menu.addAction(self.action_retained)

        self.logger.debug("Menus created")

    def setup_status_bar(self) -> None:
        """Setup the status bar."""
        self.status_bar = self.statusBar()
        self.status_bar.showMessage("Ready", 5000)

    def showEvent(self, event: QShowEvent) -> None:
        """Mount the configured backend once the container has its size."""
        super().showEvent(event)
        if self._first_show:
            self._first_show = False
            QTimer.singleShot(0, lambda: self.set_backend(self.settings.view.backend))  # type: ignore[arg-type]

    def set_backend(self, name: str) -> bool:
        """Replace the active view with a fresh view of the named backend.

        Args:
            name: "immediate" or "retained"

        Returns:
            True if the new view was mounted
        """
        view_class = BACKEND_CLASSES.get(name)
        if view_class is None:
            self.logger.error(f"Unknown rendering backend: {name}")
            return False

        if name == self.active_backend and self.active_view is not None:
            return True

        self._unmount_active_view()

        view = view_class(self.settings)
        if not view.mount(self.container):
            view.deleteLater()
            self.status_bar.showMessage(f"Could not start {BACKEND_TITLES[name]}")
            return False

        self.active_view = view
        self.active_backend = name
        self.settings.view.backend = name

        action = self.action_immediate if name == BACKEND_IMMEDIATE else self.action_retained
        action.setChecked(True)

        self.logger.info(f"Rendering backend: {BACKEND_TITLES[name]}")
        return True

    def _unmount_active_view(self) -> None:
        if self.active_view is None:
            return

        self.active_view.unmount()
        self.active_view.deleteLater()
        self.active_view = None
        self.active_backend = None

    def _update_frame_stats(self) -> None:
        """Show frame timing of the active view in the status bar."""
        if self.active_view is None or self.active_backend is None:
            return

        frame_delta_ms = self.active_view.frame_loop.frame_delta_ms()
        fps = int(1000 / frame_delta_ms) if frame_delta_ms > 0 else 0
        self.status_bar.showMessage(
            f"{BACKEND_TITLES[self.active_backend]}: {frame_delta_ms}ms / {fps}fps"
        )

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop the animation before the window goes away."""
        self._stats_update_timer.stop()
        self._unmount_active_view()
        super().closeEvent(event)
