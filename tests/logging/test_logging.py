"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from wgraph.algorithms import BreadthFirstSearch, DijkstraSearch
from wgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("wgraph.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()

    logger.removeHandler(handler)


def test_global_level_propagates_to_children_and_new_loggers():
    logger1 = get_logger("wgraph.module1")
    logger2 = get_logger("wgraph.module2")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("wgraph.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("wgraph")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1

    set_global_log_level(logging.ERROR)
    assert root_logger.level == logging.ERROR


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    logger = get_logger("wgraph.test.format")
    logger.info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:wgraph.test.format" in out
    assert "MSG:hello" in out


def test_search_debug_messages(sample, caplog):
    """Searches report outcomes at DEBUG and stay quiet at INFO."""
    with caplog.at_level(logging.INFO, logger="wgraph"):
        BreadthFirstSearch(sample).find_path("A", "D")
    assert caplog.records == []

    with caplog.at_level(logging.DEBUG, logger="wgraph"):
        BreadthFirstSearch(sample).find_path("A", "D")
        DijkstraSearch(sample).find_path("A", "D")
        DijkstraSearch(sample).find_path("D", "A")
        DijkstraSearch(sample).find_path("A", "Z")
    text = caplog.text
    assert "BFS 'A' -> 'D': 2 hops" in text
    assert "Dijkstra 'A' -> 'D': cost 4.0 over 3 hops" in text
    assert "Dijkstra 'D' -> 'A': unreachable" in text
    assert "endpoint missing" in text


def test_set_global_log_level_accepts_names():
    set_global_log_level("debug")
    assert logging.getLogger("wgraph").level == logging.DEBUG
    set_global_log_level("WARNING")
    assert logging.getLogger("wgraph").level == logging.WARNING
    with pytest.raises(ValueError, match="Unknown log level 'chatty'"):
        set_global_log_level("chatty")


def test_reset_logging_keeps_foreign_handlers():
    root_logger = logging.getLogger("wgraph")
    foreign = logging.StreamHandler(StringIO())
    root_logger.addHandler(foreign)
    try:
        setup_root_logger()
        assert len(root_logger.handlers) == 2
        reset_logging()
        assert root_logger.handlers == [foreign]
        assert root_logger.level == logging.NOTSET
    finally:
        root_logger.removeHandler(foreign)
