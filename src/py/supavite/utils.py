"""Console and logging helpers shared by the CLI and the scaffolder."""

import logging
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from collections.abc import Sequence

    from supavite.config import LoggingConfig

__all__ = ("configure_logging", "console", "err_console", "format_command", "logger")

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("supavite")


def format_command(command: "Sequence[str] | None") -> str:
    """Render a command list for display."""
    if not command:
        return ""
    return " ".join(command)


def configure_logging(config: "LoggingConfig") -> None:
    """Attach a rich handler to the package logger at the configured level."""
    logger.setLevel(config.log_level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=err_console, show_time=False, show_path=False)
        logger.addHandler(handler)
    logger.propagate = False
