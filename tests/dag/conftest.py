"""Pytest configuration for DAG tests."""

import pytest

from dagkit.dag import BreadthFirstSearch, DepthFirstSearch, Dag, DagConfig


@pytest.fixture(params=[BreadthFirstSearch, DepthFirstSearch], ids=["bfs", "dfs"])
def algorithm(request):
    """Each traversal algorithm in turn."""
    return request.param()


@pytest.fixture(
    params=[True, False], ids=["memoized", "not-memoized"]
)
def graph(request, algorithm):
    """An empty graph for every algorithm, with and without the validation memo."""
    return Dag(
        DagConfig(traversal_algorithm=algorithm, memoize_validation=request.param)
    )
