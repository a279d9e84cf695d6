"""Exceptions raised on misuse of the DAG API."""


class DagError(Exception):
    """Base class for dagkit errors."""

    pass


class InvalidVertexError(DagError, ValueError):
    """Raised when a required vertex value is missing (None)."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' cannot be None")


class VertexNotFoundError(DagError, KeyError):
    """Raised when a traversal starts from a value that is not in the graph."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(value)

    def __str__(self) -> str:
        return f"Vertex {self.value} was not found"
