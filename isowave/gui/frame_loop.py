"""Per-view frame loop.

Stands in for a display-refresh callback: a QTimer fires at the configured
interval and every active handle is called with the time in seconds read
from a monotonic clock. Each mounted view owns its own loop, so there is
no shared timer state between views.
"""

import itertools
import logging
import time
from dataclasses import dataclass
from typing import Callable

from PySide6.QtCore import Qt, QTimer

FrameCallback = Callable[[float], None]


@dataclass
class LoopHandle:
    """Registration of one frame callback; returned by FrameLoop.start_loop."""

    handle_id: int
    callback: FrameCallback
    active: bool = True


class FrameLoop:
    """Drives registered frame callbacks from a single repeating QTimer."""

    # EWMA weight for the frame delta readout
    SMOOTHING = 0.2

    def __init__(self, interval_ms: int = 16, clock: Callable[[], float] = time.perf_counter):
        """Initialize the frame loop.

        Args:
            interval_ms: Timer interval in milliseconds
            clock: Monotonic clock returning seconds
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._clock = clock
        self._origin = clock()
        self._interval = interval_ms

        self.timer = QTimer()
        self.timer.setSingleShot(False)
        self.timer.setTimerType(Qt.TimerType.PreciseTimer)
        self.timer.timeout.connect(self._on_tick)

        self._handles: dict[int, LoopHandle] = {}
        self._ids = itertools.count(1)

        # Frame timing tracking
        self._last_frame_time: float = 0
        self._frame_delta_ms: float = 0

    def start_loop(self, callback: FrameCallback) -> LoopHandle:
        """Register a callback to be invoked once per frame.

        Args:
            callback: Called with the elapsed time in seconds

        Returns:
            Handle to pass to stop()
        """
        handle = LoopHandle(handle_id=next(self._ids), callback=callback)
        self._handles[handle.handle_id] = handle

        if not self.timer.isActive():
            self.timer.start(self._interval)
            self.logger.debug(f"Frame timer started with interval: {self._interval}ms")

        self.logger.debug(f"Frame callback {handle.handle_id} registered")
        return handle

    def stop(self, handle: LoopHandle) -> None:
        """Stop invoking the callback behind handle. Safe to call repeatedly."""
        handle.active = False
        if self._handles.pop(handle.handle_id, None) is not None:
            self.logger.debug(f"Frame callback {handle.handle_id} stopped")

        if not self._handles and self.timer.isActive():
            self.timer.stop()
            self._last_frame_time = 0
            self.logger.debug("No callbacks left, frame timer stopped")

    def is_active(self) -> bool:
        """Check whether any callback is registered and the timer is running."""
        return bool(self._handles) and self.timer.isActive()

    def elapsed_seconds(self) -> float:
        """Seconds since this loop was created."""
        return self._clock() - self._origin

    def frame_delta_ms(self) -> int:
        """Smoothed time between the last frames in milliseconds."""
        return int(self._frame_delta_ms)

    def _on_tick(self) -> None:
        """Handle timer tick - run every active callback to completion."""
        now = self.elapsed_seconds()
        self._track_frame_time(now)

        for handle in list(self._handles.values()):
            if not handle.active:
                continue
            try:
                handle.callback(now)
            except Exception as e:
                self.logger.error(
                    f"Frame callback {handle.handle_id} failed, stopping it: {e}",
                    exc_info=True,
                )
                self.stop(handle)

    def _track_frame_time(self, now: float) -> None:
        """Update the smoothed frame delta."""
        current_ms = now * 1000
        if self._last_frame_time > 0:
            delta = current_ms - self._last_frame_time
            if self._frame_delta_ms > 0:
                self._frame_delta_ms = (
                    self.SMOOTHING * delta + (1 - self.SMOOTHING) * self._frame_delta_ms
                )
            else:
                self._frame_delta_ms = delta
        self._last_frame_time = current_ms
