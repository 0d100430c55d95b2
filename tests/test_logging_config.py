"""Unit tests for logging setup."""

import logging
from contextlib import contextmanager

from marketplace_api.app.core.logging_config import setup_logging


@contextmanager
def private_root():
    """Swap a fresh root logger in for the duration of the block.

    pytest attaches its capture handlers to the real root when a test
    starts, so the swap happens inside the test body where those
    handlers are already in place on the logger being replaced.
    """
    root = logging.RootLogger(logging.WARNING)
    saved_root = logging.root
    access = logging.getLogger("uvicorn.access")
    access_level = access.level
    logging.root = root
    try:
        yield root
    finally:
        logging.root = saved_root
        for handler in root.handlers:
            handler.close()
        access.setLevel(access_level)


def test_configures_console_handler_once():
    with private_root() as root:
        setup_logging("debug")
        setup_logging("debug")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.DEBUG


def test_repeated_call_updates_level():
    with private_root() as root:
        setup_logging("INFO")
        setup_logging("WARNING")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1


def test_unknown_level_falls_back_to_info():
    with private_root() as root:
        setup_logging("chatty")

        assert root.level == logging.INFO
        assert logging.getLogger("uvicorn.access").level == logging.WARNING


def test_file_handler(tmp_path):
    logfile = tmp_path / "api.log"

    with private_root() as root:
        setup_logging("INFO", str(logfile))
        root.info("hello")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    assert "hello" in logfile.read_text(encoding="utf-8")
