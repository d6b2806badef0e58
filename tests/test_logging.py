"""
Tests for logging setup.
"""

import logging
from pathlib import Path

import pytest

from lnxconfig.logging import (
    RESET,
    ROOT_LOGGER,
    ColoredFormatter,
    get_logger,
    level_from_flags,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    root_logger = logging.getLogger(ROOT_LOGGER)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()


@pytest.mark.parametrize(
    "flags, level",
    [
        ({}, logging.WARNING),
        ({"verbose": True}, logging.INFO),
        ({"debug": True}, logging.DEBUG),
        ({"quiet": True}, logging.ERROR),
        ({"debug": True, "quiet": True}, logging.DEBUG),
    ],
)
def test_level_from_flags(flags: dict, level: int) -> None:
    assert level_from_flags(**flags) == level


def test_get_logger_prefixes_component() -> None:
    assert get_logger("config.parser").name == "lnxconfig.config.parser"
    assert get_logger("lnxconfig.main").name == "lnxconfig.main"
    assert get_logger("lnxconfigx").name == "lnxconfig.lnxconfigx"


def test_setup_replaces_handlers() -> None:
    setup_logging()
    setup_logging()

    handlers = logging.getLogger(ROOT_LOGGER).handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING


def test_log_file_receives_debug_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "check.log"

    setup_logging(console_level=logging.ERROR, log_file=str(log_file))
    get_logger("test").debug("parsed interface if0")

    assert "parsed interface if0" in log_file.read_text(encoding="utf-8")


def test_colored_formatter_wraps_line() -> None:
    formatter = ColoredFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("lnxconfig", logging.WARNING, __file__, 1, "careful", None, None)

    line = formatter.format(record)

    assert line.endswith(RESET)
    assert "WARNING careful" in line
    assert record.levelname == "WARNING"
