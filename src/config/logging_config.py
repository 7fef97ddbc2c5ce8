"""Logging setup shared by the calculator, the policy loader and the CLI.

Every module asks for its logger through get_logger(__name__); the root
logger is configured once, on import, from the LOG_LEVEL setting.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from src.config.settings import get_settings

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _make_handler(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the root logger.

    Installs a stream handler (stdout unless another stream is given) and, if log_file is given, a UTF-8 file
    handler. Existing root handlers are replaced so repeated calls do not
    duplicate output.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL). Unknown
            names fall back to INFO.
        log_file: Optional path to a log file. Parent directories are created.
        format_string: Optional custom format string.
        stream: Stream for the console handler. Defaults to sys.stdout.

    Returns:
        The configured root logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    format_string = format_string or DEFAULT_FORMAT

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(
        _make_handler(logging.StreamHandler(stream or sys.stdout), numeric_level, format_string)
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root_logger.addHandler(
            _make_handler(logging.FileHandler(log_file, encoding="utf-8"), numeric_level, format_string)
        )

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass __name__)."""
    return logging.getLogger(name)


_settings = get_settings()
setup_logging(level=_settings.log_level, log_file=_settings.log_file)
