"""Mount and unmount handling for grid views.

This module provides the lifecycle shared by both backends: attaching the
view to a host container, starting and stopping its frame loop, and
releasing the drawing surface.
"""

import logging
from typing import Optional

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QVBoxLayout, QWidget

from ..frame_loop import FrameLoop, LoopHandle


class GridViewLifecycleMixin:
    """Mixin class for grid view lifecycle.

    Subclasses provide:
    - _create_surface(width, height) -> bool
    - _release_surface()
    - on_frame(time_seconds)
    """

    logger: logging.Logger
    frame_loop: FrameLoop
    _loop_handle: Optional[LoopHandle]
    _container: Optional[QWidget]

    def mount(self, container: Optional[QWidget]) -> bool:
        """Attach the view to a container and start the frame loop.

        Args:
            container: Host widget; its layout receives the view

        Returns:
            True if the view is mounted and animating
        """
        if container is None:
            self.logger.warning("No container to mount into, view stays idle")
            return False

        if self._loop_handle is not None:
            self.logger.debug("View already mounted")
            return True

        layout = container.layout()
        if layout is None:
            layout = QVBoxLayout(container)
            layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self)  # type: ignore[arg-type]
        self._container = container

        if not self._create_surface(container.width(), container.height()):  # type: ignore[attr-defined]
            self.logger.error("Drawing surface could not be created, view stays idle")
            self._release_surface()  # type: ignore[attr-defined]
            self._detach()
            return False

        self._loop_handle = self.frame_loop.start_loop(self.on_frame)  # type: ignore[attr-defined]
        self.logger.debug(f"View mounted at {container.width()}x{container.height()}")
        return True

    def unmount(self) -> None:
        """Stop the frame loop, release the surface and detach the view.

        Safe to call on a view that was never mounted or already unmounted.
        """
        if self._loop_handle is not None:
            self.frame_loop.stop(self._loop_handle)
            self._loop_handle = None
            self.logger.debug("View unmounted")

        self._release_surface()  # type: ignore[attr-defined]
        self._detach()

    def is_mounted(self) -> bool:
        return self._loop_handle is not None

    def _detach(self) -> None:
        """Remove the view from its container."""
        if self._container is None:
            return

        layout = self._container.layout()
        if layout is not None:
            layout.removeWidget(self)  # type: ignore[arg-type]
        self.setParent(None)  # type: ignore[attr-defined]
        self._container = None

    def closeEvent(self, event: QCloseEvent) -> None:
        """Unmount when the view is closed as a window."""
        self.unmount()
        super().closeEvent(event)  # type: ignore[misc]
