"""
Exception hierarchy for the digraph package.

All errors raised by the graph container, the traversal algorithms and the
text formats derive from GraphError, so callers can catch them in one place.
"""

from typing import Any, Hashable


class GraphError(Exception):
    """Base class for all digraph errors."""


class UnknownVertexError(GraphError, KeyError):
    """
    Raised when an operation references a vertex that was never added.

    Args:
        key: Key of the missing vertex
    """

    def __init__(self, key: Hashable):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown vertex: {self.key!r}"


class DuplicateVertexError(GraphError, ValueError):
    """Raised when a vertex key is registered twice in the same graph."""

    def __init__(self, key: Hashable):
        super().__init__(f"Vertex {key!r} already exists")
        self.key = key


class GraphFormatError(GraphError, ValueError):
    """
    Raised on malformed input while reading a graph text format.

    Args:
        message: Description of the problem
        line_number: 1-based line number in the input stream
        line: The offending line text
    """

    def __init__(self, message: str, line_number: int, line: Any):
        super().__init__(f"{message} at line # {line_number}: {line}")
        self.line_number = line_number
        self.line = line
