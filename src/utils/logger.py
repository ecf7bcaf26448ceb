"""
src/utils/logger.py
Named loggers: Rich console on stderr + optional rotating file per logger.
"""
import logging
import os
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    return getattr(logging, name, logging.INFO)


def _file_logging_enabled() -> bool:
    return os.getenv("LOG_TO_FILE", "1").lower() not in ("0", "false", "no")


def _build_file_handler(name: str) -> RotatingFileHandler:
    log_dir = os.getenv("LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    handler = RotatingFileHandler(
        os.path.join(log_dir, f"{name}.log"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def get_logger(name: str = "loto") -> logging.Logger:
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(None))

    if not logger.handlers:
        # stdout is reserved for the JSON reports printed by scripts/
        console = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        console.setLevel(logging.DEBUG)
        logger.addHandler(console)

        if _file_logging_enabled():
            logger.addHandler(_build_file_handler(name))

    _loggers[name] = logger
    return logger


def set_log_level(level: str) -> None:
    """Change the level of every logger handed out so far (e.g. --verbose)."""
    resolved = _resolve_level(level)
    for logger in _loggers.values():
        logger.setLevel(resolved)
