"""Basic unit tests for isowave settings, logging and the main window."""

import logging

from PySide6.QtGui import QCloseEvent


class TestSettingsInitialization:
    """Test settings initialization and basic operations."""

    def test_app_settings_init(self, settings) -> None:
        """Test AppSettings can be initialized."""
        assert settings is not None
        assert settings.version == "1.0"

    def test_defaults(self, settings) -> None:
        assert settings.view.backend == "immediate"
        assert settings.view.frame_interval == 16
        assert settings.console_logging is True
        assert settings.file_logging is False
        assert settings.log_file_path == "logs/isowave.csv"

    def test_frame_interval_is_clamped(self, settings) -> None:
        settings.view.frame_interval = 0
        assert settings.view.frame_interval == 1
        settings.view.frame_interval = 5000
        assert settings.view.frame_interval == 1000

    def test_invalid_log_level_is_ignored(self, settings) -> None:
        settings.console_log_level = "debug"
        settings.console_log_level = "chatty"
        assert settings.console_log_level == "DEBUG"


class TestSettingsValidation:
    """Test settings validation."""

    def test_default_settings_are_valid(self, settings) -> None:
        validation = settings.validate()
        assert validation.is_valid
        assert validation.errors == []

    def test_unknown_backend_is_an_error(self, settings) -> None:
        settings.view.backend = "webgl"
        validation = settings.validate()
        assert not validation.is_valid
        assert any("webgl" in error for error in validation.errors)


class TestUtilsLogging:
    """Test logging configuration."""

    def test_logging_setup_with_settings(self, settings) -> None:
        """Test logging setup works with settings."""
        from isowave.utils.logging_config import setup_logging

        settings.console_use_colors = False
        setup_logging(settings=settings)

        logger = logging.getLogger("isowave")
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in logging.getLogger().handlers)

    def test_csv_formatter_escapes_quotes(self) -> None:
        from isowave.utils.logging_config import CSVFormatter

        record = logging.LogRecord("isowave.test", logging.INFO, __file__, 10, 'say "hi"', None, None)
        line = CSVFormatter().format(record)
        assert line.endswith('"say ""hi"""')
        assert '"isowave.test"' in line

    def test_colored_formatter_wraps_level(self) -> None:
        from isowave.utils.logging_config import ColoredFormatter

        record = logging.LogRecord("isowave.test", logging.WARNING, __file__, 10, "careful", None, None)
        line = ColoredFormatter(fmt="%(levelname)s : %(message)s").format(record)
        assert line == "\033[33mWARNING\033[0m : careful"


class TestMainWindow:
    """Test backend switching in the main window."""

    def test_switch_backends(self, settings) -> None:
        from isowave.gui.main_window import MainWindow
        from isowave.gui.grid_view import ImmediateGridView, SceneGridView

        window = MainWindow(settings)
        window.container.resize(800, 600)

        assert window.set_backend("immediate")
        first = window.active_view
        assert isinstance(first, ImmediateGridView)
        assert first.is_mounted()

        assert window.set_backend("retained")
        assert isinstance(window.active_view, SceneGridView)
        assert not first.is_mounted()
        assert settings.view.backend == "retained"
        assert window.action_retained.isChecked()

        window.closeEvent(QCloseEvent())
        assert window.active_view is None
        assert not window._stats_update_timer.isActive()

    def test_unknown_backend_is_rejected(self, settings) -> None:
        from isowave.gui.main_window import MainWindow

        window = MainWindow(settings)
        assert window.set_backend("webgl") is False
        assert window.active_view is None
        window.closeEvent(QCloseEvent())

    def test_failed_backend_message_survives_stats_refresh(self, settings, monkeypatch) -> None:
        from isowave.gui import main_window
        from isowave.gui.grid_view import SceneGridView

        class BrokenSceneView(SceneGridView):
            def _create_surface(self, width: int, height: int) -> bool:
                return False

        monkeypatch.setitem(main_window.BACKEND_CLASSES, "retained", BrokenSceneView)
        window = main_window.MainWindow(settings)
        window.container.resize(800, 600)

        assert window.set_backend("immediate")
        assert window.set_backend("retained") is False
        assert window.active_view is None

        window._update_frame_stats()
        assert window.status_bar.currentMessage().startswith("Could not start")
        window.closeEvent(QCloseEvent())
