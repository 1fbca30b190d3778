"""Define utility functions to simplify logging to the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger(__name__)
console = Console()


def log_info(message: str) -> None:
    """Log the given string to standard output."""
    logger.info(message)


def configure_logging(level: int = logging.INFO) -> None:
    """Route records from the `nominal_types` loggers through a Rich handler on the console."""
    package_logger = logging.getLogger("nominal_types")
    package_logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))
