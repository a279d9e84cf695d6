"""Graph vertex holding a value and its mirrored adjacency."""

from typing import Any, Set, Tuple


class Vertex:
    """A node identified by ``value``.

    Vertices hash by identity: the value may be rekeyed by
    ``Dag.replace_vertex`` while the vertex stays in its neighbours' sets.
    Adjacency is only modified by the owning ``Dag``.
    """

    __slots__ = ("_value", "_children", "_parents")

    def __init__(self, value: Any) -> None:
        self._value = value
        self._children: Set["Vertex"] = set()
        self._parents: Set["Vertex"] = set()

    @property
    def value(self) -> Any:
        """Identity of the vertex; rekeyed only through ``Dag.replace_vertex``."""
        return self._value

    def get_children(self) -> Tuple["Vertex", ...]:
        """Return a snapshot of the outgoing neighbours."""
        return tuple(self._children)

    def get_parents(self) -> Tuple["Vertex", ...]:
        """Return a snapshot of the incoming neighbours."""
        return tuple(self._parents)

    @property
    def child_values(self) -> Set[Any]:
        return {child.value for child in self._children}

    @property
    def parent_values(self) -> Set[Any]:
        return {parent.value for parent in self._parents}

    def __repr__(self) -> str:
        return f"Vertex({self.value!r})"
