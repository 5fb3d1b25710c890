"""
Settings validation system for isowave.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult
from .view import BACKEND_NAMES
from .logging import VALID_LEVELS

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        backend = self.settings.view.backend
        if backend not in BACKEND_NAMES:
            errors.append(
                f"Unknown rendering backend: {backend} (expected one of {', '.join(BACKEND_NAMES)})"
            )

        level = self.settings.console_log_level
        if level.upper() not in VALID_LEVELS:
            warnings.append(f"Unknown console log level: {level}, INFO will be used")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
