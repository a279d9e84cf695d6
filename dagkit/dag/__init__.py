"""DAG (Directed Acyclic Graph) implementation for dagkit."""

from .errors import DagError, InvalidVertexError, VertexNotFoundError
from .result import ValidationResult
from .vertex import Vertex
from .traversal import (
    Direction,
    TraversalAlgorithm,
    BreadthFirstSearch,
    DepthFirstSearch,
    get_traversal_algorithm,
)
from .config import DagConfig
from .graph import Dag

__all__ = [
    "Dag",
    "DagConfig",
    "DagError",
    "InvalidVertexError",
    "VertexNotFoundError",
    "ValidationResult",
    "Vertex",
    "Direction",
    "TraversalAlgorithm",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "get_traversal_algorithm",
]
