"""tests/test_logger.py"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.logging import RichHandler

from src.utils.logger import get_logger, set_log_level


class TestGetLogger:
    def test_cached_by_name(self):
        assert get_logger("test.cached") is get_logger("test.cached")

    def test_console_writes_to_stderr(self, monkeypatch):
        monkeypatch.setenv("LOG_TO_FILE", "0")
        logger = get_logger("test.console")
        consoles = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(consoles) == 1
        assert consoles[0].console.stderr is True

    def test_file_handler_under_log_dir(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        monkeypatch.delenv("LOG_TO_FILE", raising=False)
        logger = get_logger("test.file")
        files = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(files) == 1
        assert Path(files[0].baseFilename) == tmp_path / "test.file.log"
        assert files[0].maxBytes == 10 * 1024 * 1024
        assert files[0].backupCount == 5

    def test_file_logging_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("LOG_TO_FILE", "false")
        logger = get_logger("test.nofile")
        assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_TO_FILE", "0")
        assert get_logger("test.level").level == logging.WARNING

    def test_set_log_level_updates_existing_loggers(self, monkeypatch):
        monkeypatch.setenv("LOG_TO_FILE", "0")
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        logger = get_logger("test.verbose")
        set_log_level("DEBUG")
        try:
            assert logger.level == logging.DEBUG
        finally:
            set_log_level("INFO")
