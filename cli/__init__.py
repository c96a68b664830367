"""CLI package for ics-maker."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from icsmaker.config import CalendarConfig

LOG_FILE_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _console_level(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    config: CalendarConfig | None = None,
    log_file: bool = True,
) -> None:
    """Route log records to stderr and, for commands that write files, a log file.

    Warnings from validation fallbacks reach the terminal through Rich on
    stderr, so stdout carries only the rendered document.

    Args:
        verbose: Show info messages on the console
        quiet: Show errors only on the console
        config: Source of the log directory and file name
        log_file: Also keep a debug log under ``config.log_dir``
    """
    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(_console_level(verbose, quiet))
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        config = config or CalendarConfig.from_env()
        config.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            config.log_dir / config.log_filename, encoding="utf-8"
        )
        file_handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers[:] = handlers


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["main", "setup_logging"]
