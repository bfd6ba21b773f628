import io
import logging
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

from routectl.infrastructure.monitoring.logger_setup import PACKAGE_LOGGER, level_from_name, setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    yield
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def test_console_handler_writes_to_given_console():
    stream = io.StringIO()
    logger = setup_logging(log_level=logging.INFO, console=Console(file=stream, width=200))

    logging.getLogger("routectl.core.services.route_service").info("Listing routes for space s1")

    assert logger.level == logging.INFO
    assert [type(h) for h in logger.handlers] == [RichHandler]
    assert "Listing routes for space s1" in stream.getvalue()


def test_file_handler_uses_format(tmp_path: Path):
    log_file = tmp_path / "routectl.log"
    setup_logging(
        log_level=logging.DEBUG,
        log_format="%(levelname)s|%(name)s|%(message)s",
        log_file=str(log_file),
        console=Console(file=io.StringIO()),
    )

    logging.getLogger("routectl.main").warning("careful")
    for handler in logging.getLogger(PACKAGE_LOGGER).handlers:
        handler.flush()

    assert "WARNING|routectl.main|careful" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_replaces_handlers():
    setup_logging(console=Console(file=io.StringIO()))
    logger = setup_logging(console=Console(file=io.StringIO()))

    assert len(logger.handlers) == 1


def test_unusable_log_file_keeps_console_logging(tmp_path: Path):
    logger = setup_logging(log_file=str(tmp_path / "missing-dir" / "x.log"), console=Console(file=io.StringIO()))

    assert [type(h) for h in logger.handlers] == [RichHandler]


def test_other_loggers_are_untouched():
    other = logging.getLogger("some.library")
    before = list(other.handlers)

    setup_logging(console=Console(file=io.StringIO()))

    assert other.handlers == before


@pytest.mark.parametrize(
    "name, expected",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("bogus", logging.WARNING)],
)
def test_level_from_name(name, expected):
    assert level_from_name(name) == expected
