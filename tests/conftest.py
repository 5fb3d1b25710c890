"""Shared fixtures for isowave tests."""

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """Single QApplication for the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app  # type: ignore[return-value]


@pytest.fixture
def settings(qapp: QApplication):
    """Settings bound to a throwaway profile."""
    from isowave.settings import AppSettings

    settings_obj = AppSettings(profile="pytest")
    yield settings_obj
    settings_obj.settings.remove("")
    settings_obj.settings.sync()


class FakeClock:
    """Monotonic clock driven by the test."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
