"""Tests for the command line logging setup."""
import logging

import pytest

from chatmd.logging_utils import LOG_FORMAT, PACKAGE_LOGGER, TRACE_FORMAT, configure_logging


@pytest.fixture
def package_logger():
    """Restore the chatmd logger after each test."""
    target = logging.getLogger(PACKAGE_LOGGER)
    saved_level = target.level
    saved_handlers = list(target.handlers)
    yield target
    for handler in list(target.handlers):
        if handler not in saved_handlers:
            target.removeHandler(handler)
            handler.close()
    target.setLevel(saved_level)


@pytest.mark.unit
class TestConfigureLogging:
    """Test handler installation and formatting."""

    def test_returns_package_logger(self, package_logger: logging.Logger) -> None:
        """Test the chatmd logger is configured, not the root logger."""
        root_handlers = list(logging.getLogger().handlers)

        assert configure_logging("INFO") is package_logger
        assert logging.getLogger().handlers == root_handlers

    @pytest.mark.parametrize(
        "log_level,expected",
        [("debug", logging.DEBUG), ("WARNING", logging.WARNING), (logging.ERROR, logging.ERROR), ("nope", logging.INFO)],
    )
    def test_level(self, package_logger: logging.Logger, log_level, expected: int) -> None:
        """Test level names and numbers are accepted."""
        configure_logging(log_level)

        assert package_logger.level == expected
        assert all(handler.level == expected for handler in package_logger.handlers)

    def test_formats(self, package_logger: logging.Logger) -> None:
        """Test trace mode adds timestamps and logger names."""
        (handler,) = configure_logging("INFO").handlers
        assert handler.formatter._fmt == LOG_FORMAT

        (handler,) = configure_logging("INFO", trace_mode=True).handlers
        assert handler.formatter._fmt == TRACE_FORMAT

    def test_reconfiguring_replaces_handlers(self, package_logger: logging.Logger) -> None:
        """Test repeated calls do not stack handlers."""
        configure_logging("INFO")
        configure_logging("DEBUG")

        assert len(package_logger.handlers) == 1

    def test_log_file(self, package_logger: logging.Logger, tmp_path) -> None:
        """Test records are appended to the log file."""
        log_file = tmp_path / "chatmd.log"
        configure_logging("INFO", log_file=str(log_file))

        logging.getLogger("chatmd.serializers").info("serialized")
        for handler in package_logger.handlers:
            handler.flush()

        assert "INFO: serialized" in log_file.read_text(encoding="utf-8")
        assert len(package_logger.handlers) == 2

    def test_unusable_log_file(self, package_logger: logging.Logger, tmp_path, caplog) -> None:
        """Test a log file that cannot be opened is skipped with a warning."""
        missing = tmp_path / "missing" / "chatmd.log"

        with caplog.at_level(logging.WARNING, logger=PACKAGE_LOGGER):
            configure_logging("INFO", log_file=str(missing))

        assert len(package_logger.handlers) == 1
        assert any("not opened" in record.getMessage() for record in caplog.records)
