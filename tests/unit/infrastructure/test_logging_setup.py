# tests/unit/infrastructure/test_logging_setup.py

"""Tests for logging configuration"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import INFO
from logging import StreamHandler
from logging import getLogger

# Local imports
from boardlab_picker.infrastructure.logging import get_default_log_path
from boardlab_picker.infrastructure.logging import setup_logging


class TestSetUpLogging:
    """Test root logger configuration"""

    def test_console_only_by_default(self):
        """Test that only a console handler is installed by default"""
        assert setup_logging(log_level="INFO") is None

        root_logger = getLogger()
        assert root_logger.level == INFO
        assert [type(handler) for handler in root_logger.handlers] == [StreamHandler]

    def test_silent(self):
        """Test that silent mode installs no console handler"""
        setup_logging(silent=True)

        assert getLogger().handlers == []

    def test_log_file(self, tmp_path):
        """Test that a log file receives debug output"""
        log_file = str(tmp_path / "picker.log")

        assert setup_logging(log_file=log_file, silent=True) == log_file

        handlers = getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], FileHandler)
        assert handlers[0].level == DEBUG

        getLogger("boardlab_picker.test").debug("debug line")
        handlers[0].flush()
        assert "debug line" in (tmp_path / "picker.log").read_text(encoding="utf-8")

    def test_unknown_level_falls_back_to_info(self):
        """Test that an unknown level name is treated as INFO"""
        setup_logging(log_level="chatty", silent=True)

        assert getLogger().level == INFO

    def test_default_log_path(self, tmp_path):
        """Test that default log paths live in the log directory"""
        path = get_default_log_path(str(tmp_path / "logs"))

        assert path.startswith(str(tmp_path / "logs"))
        assert path.endswith(".log")
