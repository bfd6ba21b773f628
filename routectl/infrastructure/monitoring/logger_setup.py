"""Logging configuration for routectl.

Diagnostics go to stderr through rich, so they never mix with command
output on stdout. An optional log file receives plain formatted records.
Only the `routectl` logger hierarchy is configured; third-party loggers
keep their own settings.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "routectl"
DEFAULT_LOG_LEVEL = logging.WARNING
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    log_level: int = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Configures the package logger and returns it.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Minimum level for both handlers.
        log_format: Format of log file records. The console handler renders
            its own time and level columns.
        log_file: Optional path of a file that also receives records.
        console: Console for the stderr handler (a new stderr Console if None).
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    package_logger.propagate = False
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(log_level)
    package_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            package_logger.error(f"Failed to set up file logging to {log_file}: {e}")
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(logging.Formatter(log_format))
            package_logger.addHandler(file_handler)

    package_logger.debug(f"Logging configured. Level={logging.getLevelName(log_level)}")
    return package_logger


def level_from_name(name: str) -> int:
    """Maps 'debug', 'INFO', ... to a logging level, defaulting to WARNING."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL
