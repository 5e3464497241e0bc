"""
Logging setup for the dwml-extract command line.

Library modules only call logging.getLogger(__name__) or use an injected
logger; handlers are installed here, by the application, once per run.
Parameter summaries go to the console; the optional log file also gets the
DEBUG lines (duplicate keys, skipped elements) with their source location.
"""

import logging
import os
from pathlib import Path
from typing import Optional
from datetime import datetime

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_file: str) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(
    name: str = "dwml_extract",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Set up the application logger.

    Args:
        name: Logger name
        log_file: Log file path. If None, uses the LOG_FILE env var; when that
                  is unset too, only the console handler is installed
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    log_file = log_file or os.getenv("LOG_FILE")

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Repeated setup (tests, several runs in one process) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_console_handler())
    if log_file:
        logger.addHandler(_file_handler(log_file))

    logger.propagate = False
    return logger


class LoggerContext:
    """
    Log the start, end and duration of one extraction stage.

    Failures are logged with their traceback and re-raised.
    """

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.start_time: Optional[datetime] = None
        self.duration: Optional[float] = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.info("Starting %s", self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is not None:
            self.logger.error(
                "Failed %s after %.2fs: %s", self.operation, self.duration, exc_val,
                exc_info=True
            )
        else:
            self.logger.info("Completed %s in %.2fs", self.operation, self.duration)
        return False
