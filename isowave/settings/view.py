"""
View-related settings for isowave.
"""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

BACKEND_IMMEDIATE = "immediate"
BACKEND_RETAINED = "retained"
BACKEND_NAMES = (BACKEND_IMMEDIATE, BACKEND_RETAINED)


class ViewSettings:
    """Manages which backend is shown and how often it is refreshed."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return int(cast(str | int, value))
        except (ValueError, TypeError):
            return default

    @property
    def backend(self) -> str:
        """Get the name of the rendering backend to mount."""
        return self._get_str("view/backend", BACKEND_IMMEDIATE)

    @backend.setter
    def backend(self, value: str) -> None:
        self.settings.setValue("view/backend", value)
        self.settings.sync()

    @property
    def frame_interval(self) -> int:
        """Get the frame loop interval in milliseconds (1-1000 ms)."""
        value = self._get_int("view/frame_interval", 16)
        return max(1, min(1000, value))

    @frame_interval.setter
    def frame_interval(self, value: int) -> None:
        validated = max(1, min(1000, value))
        self.settings.setValue("view/frame_interval", validated)
        self.settings.sync()
