"""
Basic logging configuration for the application.

``setup_logging`` configures the root logger with a console handler
and, optionally, a file handler.  It is safe to call repeatedly: once
the root logger has handlers only the level is updated, which matters
when ``create_app`` runs once per test.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per‑request access lines from uvicorn are noisy next to the store's
# own INFO records.
QUIET_LOGGERS = ("uvicorn.access",)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.  Relative paths are resolved against the
        current working directory.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger()
    logger.setLevel(numeric_level)

    # At DEBUG everything is shown; otherwise access logs are reduced
    # to warnings.
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level if numeric_level <= logging.DEBUG else logging.WARNING)

    if logger.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
