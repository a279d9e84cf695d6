"""Graph builders and assertion helpers shared by the DAG tests."""

from typing import Iterable, Tuple

from dagkit.dag import Dag, DagConfig


def add_edge_successfully(graph: Dag, parent, child) -> None:
    result = graph.add_edge(parent, child)
    assert result.successful, result.message


def add_edge_unsuccessfully(graph: Dag, parent, child) -> str:
    result = graph.add_edge(parent, child)
    assert not result.successful
    return result.message


def make_graph(edges: Iterable[Tuple[str, str]], **config) -> Dag:
    """Build a graph from (parent, child) pairs, failing on any rejection."""
    graph = Dag(DagConfig(**config)) if config else Dag()
    for parent, child in edges:
        add_edge_successfully(graph, parent, child)
    return graph


def make_vehicle_graph(**config) -> Dag:
    #          |--> car --> honda
    # vehicle -|
    #          |--> moto
    return make_graph(
        [("vehicle", "car"), ("vehicle", "moto"), ("car", "honda")], **config
    )


def values(vertices) -> set:
    return {vertex.value for vertex in vertices}


def assert_mirrored(graph: Dag) -> None:
    """Every child link has its parent link and vice versa."""
    for vertex in graph.get_all_vertices():
        for child in vertex.get_children():
            assert vertex in child.get_parents()
        for parent in vertex.get_parents():
            assert vertex in parent.get_children()


def assert_acyclic(graph: Dag) -> None:
    """No vertex is its own ancestor."""
    for vertex in graph.get_all_vertices():
        assert vertex.value not in graph.ancestors(vertex.value)
