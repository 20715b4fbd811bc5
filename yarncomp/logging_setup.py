"""Logging setup and utilities.

Completion output owns stdout, so every handler installed here writes either
to stderr or to a file.
"""

import logging

from .ansi import LogStyles, make_style, should_colorize
from .debug import is_debug, set_debug

__all__ = [
    "LogObjects",
    "get_logger",
    "init_logger",
]

FILE_FORMAT = r"%(asctime)s [%(levelname)s] %(name)s :: %(message)s :: %(filename)s:%(lineno)d"


class LogObjects:
    """Handlers shared by every logger."""

    handlers: list[logging.Handler] = []


class ScreenLogFormatter(logging.Formatter):
    """Formatter for stderr, coloring warnings and errors when the terminal allows it."""

    def __init__(self) -> None:
        super().__init__()
        fmt = r"%(name)15s - %(message)s // %(filename)s:%(lineno)d" if is_debug() else r"%(message)s"
        styles = {
            logging.WARNING: LogStyles.WARNING,
            logging.ERROR: LogStyles.ERROR,
            logging.CRITICAL: LogStyles.CRITICAL,
        }
        colors = should_colorize()
        self._plain = logging.Formatter(fmt)
        self._styled: dict[int, logging.Formatter] = {}
        for level, codes in styles.items():
            prefix, suffix = make_style(*codes) if colors else ("", "")
            self._styled[level] = logging.Formatter(prefix + fmt + suffix)

    def format(self, record: logging.LogRecord) -> str:
        return self._styled.get(record.levelno, self._plain).format(record)


def init_logger(filename: str | None = None, force_debug: bool = False, screen: bool = True) -> None:
    """Initialize the logging system.

    Args:
        filename: Optional filename to log to
        force_debug: If True, force debug level
        screen: If False, nothing is written to stderr (used while completing)
    """
    if force_debug:
        set_debug(True)

    LogObjects.handlers.clear()
    if filename:
        file_handler = logging.FileHandler(filename)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT))
        LogObjects.handlers.append(file_handler)
    if screen:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(ScreenLogFormatter())
        LogObjects.handlers.append(stream_handler)
    if not LogObjects.handlers:
        LogObjects.handlers.append(logging.NullHandler())


def get_logger(name: str = "yarncomp", level: int | None = None) -> logging.Logger:
    """Return a named logger using the shared handlers.

    Args:
        name (str): logger's name
        level (int): logger's level (DEBUG in debug mode, WARNING otherwise, if not set)

    Returns:
        The logger instance
    """
    logger = logging.getLogger(name)
    if level is None:
        level = logging.DEBUG if is_debug() else logging.WARNING
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in LogObjects.handlers:
        logger.addHandler(handler)
    return logger
