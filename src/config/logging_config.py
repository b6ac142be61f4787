# src/config/logging_config.py

"""One log file per launch for the ``jumia_reseller`` logger tree.

``serve`` and the headless commands both call :func:`setup_logging` on
startup and get back the path of ``logs/run_<YYYYMMDD>_<HHMMSS>.log``.
Scraper, service and API records all land there at DEBUG; stderr only
sees what the caller asks for. The server run also hangs uvicorn's own
loggers off the same file handler.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

LOGGER_NAME = "jumia_reseller"

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)
_STDERR_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SERVER_LOGGERS = ("uvicorn.error", "uvicorn.access")


def _run_log_path() -> Path:
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Settings.LOGS_DIR / f"run_{stamp}.log"


def _handler(
    handler: logging.Handler, level: int, fmt: str
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATE_FORMAT))
    return handler


def setup_logging(
    console_level: int = logging.WARNING,
    include_server: bool = False,
) -> Path:
    """Attach the run file and stderr handlers, once per process.

    A second call returns a fresh path but leaves the handlers from the
    first call in place, so nothing is logged twice.

    Args:
        console_level: Lowest level written to stderr. ``serve`` passes
            ``logging.INFO``; the CLI keeps the WARNING default so its
            JSON on stdout stays clean.
        include_server: Add the run file handler to uvicorn's loggers.

    Returns:
        Path of the log file for this run.
    """
    log_file = _run_log_path()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return log_file

    to_file = _handler(
        logging.FileHandler(log_file, encoding="utf-8"),
        logging.DEBUG,
        _FILE_FORMAT,
    )
    logger.addHandler(to_file)
    logger.addHandler(
        _handler(
            logging.StreamHandler(sys.stderr), console_level, _STDERR_FORMAT
        )
    )

    if include_server:
        for name in _SERVER_LOGGERS:
            logging.getLogger(name).addHandler(to_file)

    logger.info("Writing this run's log to %s", log_file)
    return log_file
