"""
Logging setup for lnxconfig.

All loggers live under the "lnxconfig" tree. The command-line checker
attaches a console handler (colored when stderr is a terminal) and,
optionally, a plain file handler; library callers get no handlers and
decide for themselves.
"""

import logging
import sys
from pathlib import Path


ROOT_LOGGER = "lnxconfig"

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[2m\033[36m",   # dim cyan
    logging.INFO: "\033[32m",           # green
    logging.WARNING: "\033[33m",        # yellow
    logging.ERROR: "\033[31m",          # red
    logging.CRITICAL: "\033[1m\033[91m",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the whole line by log level."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return line
        return f"{color}{line}{RESET}"


def level_from_flags(debug: bool = False, verbose: bool = False, quiet: bool = False) -> int:
    """Map the -d/-v/-q command-line flags to a console log level."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    if quiet:
        return logging.ERROR
    return logging.WARNING


def setup_logging(
    console_level: int = logging.WARNING,
    colors: bool = True,
    log_file: str | None = None,
) -> None:
    """
    Attach handlers to the lnxconfig logger tree.

    Args:
        console_level: Minimum level printed to stderr
        colors: Color console output when stderr is a terminal
        log_file: Append every record (DEBUG and up) to this file
    """
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers.clear()

    # stdout is reserved for the configuration summary
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    if colors and sys.stderr.isatty():
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a component.

    Args:
        name: Component name (will be prefixed with lnxconfig)

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER or name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
