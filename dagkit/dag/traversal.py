"""Breadth-first and depth-first exploration of a ``Dag``.

The same algorithm walks either direction: ``Direction.CHILDREN`` visits
descendants, ``Direction.PARENTS`` visits ancestors. The engine uses the
backward walk to reject cycles; callers use either walk for reachability
queries such as tagging a leaf with all of its categories.
"""

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Set, Type

from .errors import InvalidVertexError, VertexNotFoundError
from .vertex import Vertex

if TYPE_CHECKING:
    from .graph import Dag


class Direction(str, Enum):
    """Which neighbours of a vertex to follow."""

    CHILDREN = "children"
    PARENTS = "parents"

    def neighbours(self, vertex: Vertex) -> Iterable[Vertex]:
        if self is Direction.CHILDREN:
            return vertex._children
        return vertex._parents


class TraversalAlgorithm(ABC):
    """Strategy interface for graph exploration."""

    name: str = ""

    @abstractmethod
    def explore(
        self,
        graph: "Dag",
        source: Any,
        destination: Optional[Any] = None,
        direction: Direction = Direction.CHILDREN,
    ) -> Set[Vertex]:
        """
        Explore ``graph`` from ``source`` following ``direction``.

        Args:
            graph: Graph to explore; it is never modified.
            source: Value of the start vertex.
            destination: Optional value to stop at. The returned set then holds
                everything visited up to that point, not just a path.
            direction: Follow children (descendants) or parents (ancestors).

        Returns:
            The set of visited vertices, including the source.

        Raises:
            InvalidVertexError: If ``source`` is None.
            VertexNotFoundError: If ``source`` is not in the graph.
        """
        ...

    @staticmethod
    def _start(graph: "Dag", source: Any) -> Vertex:
        if source is None:
            raise InvalidVertexError("source")
        vertex = graph.get_vertex(source)
        if vertex is None:
            raise VertexNotFoundError(source)
        return vertex

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BreadthFirstSearch(TraversalAlgorithm):
    """Level-order exploration; vertices are marked when enqueued."""

    name = "breadth_first"

    def explore(
        self,
        graph: "Dag",
        source: Any,
        destination: Optional[Any] = None,
        direction: Direction = Direction.CHILDREN,
    ) -> Set[Vertex]:
        start = self._start(graph, source)
        queue: deque[Vertex] = deque([start])
        visited: Set[Vertex] = {start}

        while queue:
            current = queue.popleft()
            if destination is not None and current.value == destination:
                return visited

            for neighbour in direction.neighbours(current):
                if neighbour in visited:
                    continue
                queue.append(neighbour)
                visited.add(neighbour)

        return visited


class DepthFirstSearch(TraversalAlgorithm):
    """Stack-based exploration; vertices are marked when popped."""

    name = "depth_first"

    def explore(
        self,
        graph: "Dag",
        source: Any,
        destination: Optional[Any] = None,
        direction: Direction = Direction.CHILDREN,
    ) -> Set[Vertex]:
        start = self._start(graph, source)
        stack = [start]
        visited: Set[Vertex] = set()

        while stack:
            current = stack.pop()
            # the same vertex can be pushed by several parents
            if current in visited:
                continue

            visited.add(current)
            if destination is not None and current.value == destination:
                return visited

            stack.extend(direction.neighbours(current))

        return visited


_ALGORITHMS: Dict[str, Type[TraversalAlgorithm]] = {
    "breadth_first": BreadthFirstSearch,
    "bfs": BreadthFirstSearch,
    "depth_first": DepthFirstSearch,
    "dfs": DepthFirstSearch,
}


def get_traversal_algorithm(name: str) -> TraversalAlgorithm:
    """Return a traversal algorithm instance by its configuration name."""
    try:
        return _ALGORITHMS[name.strip().lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown traversal algorithm '{name}'. "
            f"Expected one of: {', '.join(sorted(_ALGORITHMS))}"
        ) from None
