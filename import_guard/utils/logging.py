"""Logging for Import Guard.

Log records carry file paths, patterns and rule reasons taken from user input,
so the Rich handler renders them verbatim (markup disabled).
"""

import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Literal

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "import_guard"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# Diagnostics go to stderr so reports on stdout stay machine readable
console = Console(stderr=True)

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


def effective_level(configured: LogLevel, verbose: bool = False) -> LogLevel:
    """Level to use for a run; ``--verbose`` always means DEBUG."""
    return "DEBUG" if verbose else configured


def setup_logging(level: LogLevel = "INFO", log_file: Path | None = None) -> logging.Logger:
    """Route the ``import_guard`` logger to the terminal and optionally a file.

    Calling it again replaces the handlers of a previous call. The file
    handler always records DEBUG output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    terminal = RichHandler(
        console=console,
        level=level,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    terminal.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(terminal)

    if log_file:
        logger.addHandler(_file_handler(log_file))
    return logger


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger below the ``import_guard`` namespace, e.g. ``import_guard.tree``."""
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)


@contextmanager
def log_phase(description: str, logger: logging.Logger | None = None) -> Iterator[None]:
    """Log the start and the outcome of one phase, with its duration."""
    logger = logger or get_logger()
    started = time.perf_counter()
    logger.debug(f">>> {description}")
    try:
        yield
    except Exception:
        elapsed = int((time.perf_counter() - started) * 1000)
        logger.error(f"<<< {description} failed after {elapsed} ms")
        raise
    elapsed = int((time.perf_counter() - started) * 1000)
    logger.debug(f"<<< {description} done in {elapsed} ms")
