"""
Logging configuration for distlab.

Progress and diagnostics ("Cloning ...", "Installing ESLint...", sample
file lists) go through ``logging`` to stderr; histograms and reports are
printed to stdout, so ``distlab count URL > out.txt`` captures only results.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "distlab"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbosity: str = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route distlab logging to a rich stderr handler, plus ``log_file`` if given.

    Args:
        verbosity: "quiet" (errors only), "normal" (progress) or "verbose"
            (debug output with timestamps and source locations)
        log_file: Optional path; appended to, always at DEBUG level

    Returns:
        The ``distlab`` logger
    """
    level = LEVELS.get(verbosity, logging.INFO)
    verbose = verbosity == "verbose"

    console_handler = RichHandler(
        console=Console(stderr=True),
        level=level,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # force=True so repeated CLI invocations in one process pick up new levels
    logging.basicConfig(level=logging.WARNING, format="%(message)s", handlers=handlers, force=True)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if log_file else level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``distlab`` namespace (``repo`` -> ``distlab.repo``)."""
    if name is None or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
