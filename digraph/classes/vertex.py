"""
Vertex representation for directed graphs.
"""

from typing import Any, Hashable


class pyvertex:
    """
    A graph vertex identified by an opaque, hashable key.

    Two vertices are equal if and only if their keys are equal, so vertices can
    be used as set members and dictionary keys. The key cannot be changed once
    the vertex is created.
    """

    __slots__ = ('_key',)

    def __init__(self, key: Hashable):
        """
        Initialize a vertex.

        Args:
            key: Identifying key, e.g. an integer or a string
        """
        if key is None:
            raise ValueError("Vertex key must not be None")
        hash(key)  # rejects unhashable keys
        object.__setattr__(self, '_key', key)

    @property
    def key(self) -> Hashable:
        return self._key

    def __setattr__(self, name: str, value: Any):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: 'pyvertex') -> bool:
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self._key < other._key

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"pyvertex({self._key!r})"

    def __str__(self) -> str:
        return str(self._key)
