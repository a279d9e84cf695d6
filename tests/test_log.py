"""Tests for dagkit logging setup."""

import logging

import pytest

from dagkit.dag import Dag
from dagkit.log import configure_logging


@pytest.fixture
def dagkit_logger():
    logger = logging.getLogger("dagkit")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


@pytest.mark.short
@pytest.mark.parametrize("debug, level", [(True, logging.DEBUG), (False, logging.INFO)])
def test_configure_logging_level(dagkit_logger, debug, level):
    configure_logging(debug)

    assert dagkit_logger.level == level


@pytest.mark.short
def test_rejections_are_logged(capture_logs):
    graph = Dag()
    graph.add_edge("a", "b")

    graph.add_edge("b", "a")
    graph.remove_edge("a", "z")
    graph.replace_vertex("a", "b")

    output = capture_logs.getvalue()
    assert "Rejected edge 'b' -> 'a': Added a cycle." in output
    assert "vertex 'z' not found" in output
    assert "'b' already exists" in output
