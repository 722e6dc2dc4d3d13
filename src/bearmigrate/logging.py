"""Logging configuration for bearmigrate."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Log to stderr so that reports printed on stdout stay clean
console = Console(stderr=True)


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Set up console logging, and file logging if requested.

    Args:
        level: Level for the bearmigrate loggers
        log_file: Optional file receiving every bearmigrate log record
    """
    rich_handler = RichHandler(
        console=console,
        show_path=False,
        omit_repeated_times=False,
        show_time=False,
        level=level,
    )

    package_logger = logging.getLogger("bearmigrate")
    package_logger.setLevel(logging.DEBUG if log_file else level)
    package_logger.handlers = [rich_handler]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        file_handler.setLevel(logging.DEBUG)
        package_logger.addHandler(file_handler)
