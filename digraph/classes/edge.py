"""
Directed edge representation.
"""

from typing import Any, Hashable, Tuple

from .vertex import pyvertex


class pyedge:
    """
    A directed edge from one vertex to another.

    Equality and hashing are based on the ordered pair of endpoint keys. Edges
    carry no weight or other attributes.
    """

    __slots__ = ('_vertex_from', '_vertex_to')

    def __init__(self, vertex_from: pyvertex, vertex_to: pyvertex):
        """
        Initialize an edge.

        Args:
            vertex_from: Source vertex
            vertex_to: Target vertex
        """
        if not isinstance(vertex_from, pyvertex) or not isinstance(vertex_to, pyvertex):
            raise TypeError("Edge endpoints must be pyvertex instances")
        object.__setattr__(self, '_vertex_from', vertex_from)
        object.__setattr__(self, '_vertex_to', vertex_to)

    @property
    def vertex_from(self) -> pyvertex:
        return self._vertex_from

    @property
    def vertex_to(self) -> pyvertex:
        return self._vertex_to

    @property
    def key(self) -> Tuple[Hashable, Hashable]:
        """Ordered (from_key, to_key) pair identifying this edge."""
        return (self._vertex_from.key, self._vertex_to.key)

    def is_self_loop(self) -> bool:
        return self._vertex_from == self._vertex_to

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, pyedge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"pyedge({self._vertex_from.key!r} -> {self._vertex_to.key!r})"
