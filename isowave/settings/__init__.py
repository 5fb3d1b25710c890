"""
Settings package for isowave.

This package provides a small, type-safe configuration layer
using Qt's QSettings for cross-platform storage.

Usage:
    from isowave.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ValidationResult
from .logging import LoggingSettings
from .view import ViewSettings, BACKEND_NAMES

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ValidationResult",
    "LoggingSettings",
    "ViewSettings",
    "BACKEND_NAMES",
]
