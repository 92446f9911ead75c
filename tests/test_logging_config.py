"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from depscope.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    namespace_level = logging.getLogger("depscope").level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("depscope").setLevel(namespace_level)


def test_get_logger_namespaces_names():
    assert get_logger().name == "depscope"
    assert get_logger("depscope.graph").name == "depscope.graph"
    assert get_logger("plugins").name == "depscope.plugins"


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.WARNING),
        (True, False, logging.DEBUG),
        (False, True, logging.ERROR),
        (True, True, logging.ERROR),
    ],
)
def test_levels(verbose, quiet, expected):
    assert setup_logging(verbose=verbose, quiet=quiet).level == expected


def test_rich_handler_leaves_brackets_alone():
    setup_logging()
    rich_handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert rich_handlers[0].markup is False


def test_repeated_setup_replaces_handlers():
    setup_logging()
    setup_logging()
    assert sum(isinstance(h, RichHandler) for h in logging.getLogger().handlers) == 1


def test_log_file(tmp_path):
    log_file = tmp_path / "depscope.log"
    setup_logging(log_file=str(log_file))
    get_logger("graph").warning("3 cycle group(s) in pages/[id].tsx")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "pages/[id].tsx" in log_file.read_text()
