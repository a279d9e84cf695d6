"""In-memory directed acyclic graph."""

import logging
from typing import Any, Dict, List, Optional, Set, Tuple

from .config import DagConfig
from .errors import InvalidVertexError
from .result import ValidationResult
from .traversal import Direction, TraversalAlgorithm
from .vertex import Vertex

logger = logging.getLogger(__name__)

CYCLE_MESSAGE = "Added a cycle."
DUPLICATE_MESSAGE = "Added a duplicate."


def _require(value: Any, argument: str) -> None:
    if value is None:
        raise InvalidVertexError(argument)


class Dag:
    """
    A graph of uniquely-valued vertices joined by parent -> child edges.

    Edges that would close a cycle are rejected, so the graph is acyclic
    between any two calls. Topology problems are reported as
    ``ValidationResult`` values; only ``None`` identities raise.

    Example usage:
        graph = Dag()
        graph.add_edge("vehicle", "car")
        graph.add_edge("car", "honda")
        graph.add_edge("honda", "vehicle").message  # "Added a cycle."
        graph.ancestors("honda")  # {"car", "vehicle"}
    """

    def __init__(self, config: Optional[DagConfig] = None) -> None:
        self.config = config if config is not None else DagConfig()
        self._vertices: Dict[Any, Vertex] = {}
        self._edges: List[Tuple[Any, Any]] = []
        self._last_validation: Optional[Tuple[Any, Any, ValidationResult]] = None

    @property
    def traversal_algorithm(self) -> TraversalAlgorithm:
        return self.config.traversal_algorithm

    @property
    def edges(self) -> List[Tuple[Any, Any]]:
        """Edges as (parent, child) pairs in insertion order."""
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, value: Any) -> bool:
        return value in self._vertices

    def __repr__(self) -> str:
        return f"Dag(vertices={len(self._vertices)}, edges={len(self._edges)})"

    def add_edge(self, parent: Any, child: Any) -> ValidationResult:
        """
        Add an edge, creating either vertex if it is not yet in the graph.

        Returns:
            A failed result with "Added a cycle." or "Added a duplicate." when
            the edge is rejected; the graph is then left unchanged.

        Raises:
            InvalidVertexError: If ``parent`` or ``child`` is None.
        """
        result = self.validate_add_edge(parent, child)
        if not result.successful:
            logger.debug(f"Rejected edge {parent!r} -> {child!r}: {result.message}")
            return result

        parent_vertex = self._get_or_create(parent)
        child_vertex = self._get_or_create(child)

        parent_vertex._children.add(child_vertex)
        child_vertex._parents.add(parent_vertex)
        self._edges.append((parent, child))
        self._last_validation = None

        logger.debug(f"Added edge {parent!r} -> {child!r}")
        return ValidationResult.success()

    def validate_add_edge(self, parent: Any, child: Any) -> ValidationResult:
        """Check whether ``add_edge(parent, child)`` would succeed, without adding it."""
        _require(parent, "parent")
        _require(child, "child")

        if self.config.memoize_validation and self._last_validation is not None:
            last_parent, last_child, last_result = self._last_validation
            if last_parent == parent and last_child == child:
                logger.debug(f"Reusing validation of {parent!r} -> {child!r}")
                return last_result

        result = self._validate(parent, child)
        if self.config.memoize_validation:
            self._last_validation = (parent, child, result)
        return result

    def _validate(self, parent: Any, child: Any) -> ValidationResult:
        if parent == child:
            return ValidationResult.failure(CYCLE_MESSAGE)

        parent_vertex = self._vertices.get(parent)
        child_vertex = self._vertices.get(child)

        # a new endpoint has no path to or from anything yet
        if parent_vertex is None or child_vertex is None:
            return ValidationResult.success()

        if child_vertex in parent_vertex._children:
            return ValidationResult.failure(DUPLICATE_MESSAGE)

        ancestors = self.traversal_algorithm.explore(
            self, parent, child, Direction.PARENTS
        )
        if child_vertex in ancestors:
            return ValidationResult.failure(CYCLE_MESSAGE)

        return ValidationResult.success()

    def remove_edge(self, vertex1: Any, vertex2: Any) -> ValidationResult:
        """
        Remove the edge between two vertices, whichever its direction.

        Both vertices stay in the graph, even when left without edges.

        Raises:
            InvalidVertexError: If either value is None.
        """
        _require(vertex1, "vertex1")
        _require(vertex2, "vertex2")

        first = self.get_vertex(vertex1)
        second = self.get_vertex(vertex2)

        for value, vertex in ((vertex1, first), (vertex2, second)):
            if vertex is None:
                logger.debug(f"Cannot remove edge: vertex {value!r} not found")
                return ValidationResult.failure(f"Vertex {value} was not found")

        first._children.discard(second)
        first._parents.discard(second)
        second._children.discard(first)
        second._parents.discard(first)

        pairs = {(vertex1, vertex2), (vertex2, vertex1)}
        self._edges = [edge for edge in self._edges if edge not in pairs]
        self._last_validation = None

        logger.debug(f"Removed edge between {vertex1!r} and {vertex2!r}")
        return ValidationResult.success()

    def replace_vertex(self, old_value: Any, new_value: Any) -> ValidationResult:
        """
        Rekey a vertex, keeping all of its edges.

        Raises:
            InvalidVertexError: If either value is None.
        """
        _require(old_value, "old_value")
        _require(new_value, "new_value")

        vertex = self.get_vertex(old_value)
        if vertex is None:
            return ValidationResult.failure(f"Vertex {old_value} was not found")

        existing = self.get_vertex(new_value)
        if existing is vertex:
            return ValidationResult.success()
        if existing is not None:
            logger.debug(f"Cannot replace {old_value!r}: {new_value!r} already exists")
            return ValidationResult.failure(
                f"Vertex {new_value} was already in the graph"
            )

        vertex._value = new_value
        del self._vertices[old_value]
        self._vertices[new_value] = vertex

        self._edges = [
            (
                new_value if parent == old_value else parent,
                new_value if child == old_value else child,
            )
            for parent, child in self._edges
        ]
        self._last_validation = None

        logger.debug(f"Replaced vertex {old_value!r} with {new_value!r}")
        return ValidationResult.success()

    def copy(self) -> "Dag":
        """Return an independent graph with the same vertices and edges."""
        duplicate = Dag(self.config)
        for parent, child in self._edges:
            duplicate.add_edge(parent, child)

        # vertices isolated by remove_edge are not in the edge log
        for value in self._vertices:
            if value not in duplicate._vertices:
                duplicate._vertices[value] = Vertex(value)

        return duplicate

    def get_vertex(self, value: Any) -> Optional[Vertex]:
        """Return the vertex for ``value``, or None if it is not in the graph."""
        return self._vertices.get(value)

    def get_all_vertices(self) -> List[Vertex]:
        return list(self._vertices.values())

    def ancestors(self, value: Any) -> Set[Any]:
        """Values of every vertex from which ``value`` can be reached."""
        return self._reachable(value, Direction.PARENTS)

    def descendants(self, value: Any) -> Set[Any]:
        """Values of every vertex reachable from ``value``."""
        return self._reachable(value, Direction.CHILDREN)

    def _reachable(self, value: Any, direction: Direction) -> Set[Any]:
        visited = self.traversal_algorithm.explore(self, value, None, direction)
        return {vertex.value for vertex in visited if vertex.value != value}

    def _get_or_create(self, value: Any) -> Vertex:
        vertex = self._vertices.get(value)
        if vertex is None:
            vertex = Vertex(value)
            self._vertices[value] = vertex
        return vertex
