"""In-memory directed acyclic graphs with pluggable traversal."""

from dagkit.dag import (
    Dag,
    DagConfig,
    ValidationResult,
    Vertex,
    Direction,
    BreadthFirstSearch,
    DepthFirstSearch,
)

__version__ = "0.1.0"

__all__ = [
    "Dag",
    "DagConfig",
    "ValidationResult",
    "Vertex",
    "Direction",
    "BreadthFirstSearch",
    "DepthFirstSearch",
]
