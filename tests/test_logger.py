"""
Tests for logging setup.
"""

import logging
from unittest.mock import Mock

import pytest

from src.dwml_extract.core.logger import LoggerContext, setup_logger


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("LOG_FILE", raising=False)


class TestSetupLogger:
    """Test cases for setup_logger."""

    def test_console_only_without_file(self):
        logger = setup_logger("dwml_extract.test.console")

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
        assert not logger.propagate

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "run.log"
        logger = setup_logger("dwml_extract.test.file", log_file=str(log_file), log_level="DEBUG")

        logger.debug("Duplicate location key 'a'")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
        assert "Duplicate location key 'a'" in log_file.read_text(encoding="utf-8")

    def test_log_file_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "env.log"))
        logger = setup_logger("dwml_extract.test.env")

        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logger("dwml_extract.test.repeat")
        logger = setup_logger("dwml_extract.test.repeat")

        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logger("dwml_extract.test.level", log_level="chatty")

        assert logger.level == logging.INFO


class TestLoggerContext:
    """Test cases for LoggerContext."""

    def test_logs_completion(self):
        logger = Mock()

        with LoggerContext(logger, "parsing") as context:
            pass

        assert context.duration is not None
        assert logger.info.call_count == 2
        logger.error.assert_not_called()

    def test_logs_and_reraises_failure(self):
        logger = Mock()

        with pytest.raises(ValueError):
            with LoggerContext(logger, "parsing"):
                raise ValueError("bad input")

        logger.error.assert_called_once()
        assert logger.error.call_args.kwargs["exc_info"] is True
