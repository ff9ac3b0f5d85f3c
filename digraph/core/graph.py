"""
Graph capability contracts.

This module defines the read-only graph contract (lookup, iteration and
traversal) and the mutable graph contract that adds construction operations.
Concrete containers such as AdjacencyListGraph implement both.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterator, List, Optional, Union

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge

VertexVisitor = Callable[[pyvertex], Any]
EdgeVisitor = Callable[[pyedge], Any]


class Graph(ABC):
    """
    Read-only view of a directed graph.

    Provides vertex lookup, bulk iteration over vertices and edges, and
    breadth-first / depth-first traversal entry points.
    """

    @abstractmethod
    def get_vertex(self, key: Hashable) -> Optional[pyvertex]:
        """
        Look up a vertex by key.

        Args:
            key: Vertex key

        Returns:
            The vertex, or None if no vertex has this key
        """

    @abstractmethod
    def get_outgoing_edges(self, vertex: Union[pyvertex, Hashable]) -> List[pyedge]:
        """
        Get the outgoing edges of a vertex in insertion order.

        Raises:
            UnknownVertexError: If the vertex is not in the graph
        """

    @abstractmethod
    def iter_vertices(self) -> Iterator[pyvertex]:
        """Iterate over all vertices in insertion order."""

    @abstractmethod
    def iter_edges(self) -> Iterator[pyedge]:
        """Iterate over all edges, grouped by source vertex."""

    @abstractmethod
    def get_vertex_count(self) -> int:
        """Get the number of vertices."""

    @abstractmethod
    def get_edge_count(self) -> int:
        """Get the number of stored edges, parallel edges included."""

    def for_each_vertex(self, visitor: VertexVisitor) -> None:
        """Invoke visitor once per vertex, in insertion order."""
        for vertex in self.iter_vertices():
            visitor(vertex)

    def for_each_edge(self, visitor: EdgeVisitor) -> None:
        """Invoke visitor once per stored edge."""
        for edge in self.iter_edges():
            visitor(edge)

    def get_vertices(self) -> List[pyvertex]:
        return list(self.iter_vertices())

    def get_edges(self) -> List[pyedge]:
        return list(self.iter_edges())

    @abstractmethod
    def visit_breadth_first_from(self, start: Union[pyvertex, Hashable], visitor: VertexVisitor) -> int:
        """
        Visit every vertex reachable from start in breadth-first order.

        Returns:
            Number of vertices visited
        """

    @abstractmethod
    def visit_depth_first_from(self, start: Union[pyvertex, Hashable], visitor: VertexVisitor) -> int:
        """
        Visit every vertex reachable from start in depth-first order.

        Returns:
            Number of vertices visited
        """

    def __contains__(self, item: object) -> bool:
        key = item.key if isinstance(item, pyvertex) else item
        try:
            return self.get_vertex(key) is not None
        except TypeError:
            # unhashable
            return False

    def __len__(self) -> int:
        return self.get_vertex_count()


class MutableGraph(Graph):
    """
    A graph that supports append-only construction.
    """

    @abstractmethod
    def add_vertex(self, vertex: pyvertex) -> None:
        """
        Register a vertex under its key.

        Raises:
            DuplicateVertexError: If a vertex with the same key already exists
        """

    @abstractmethod
    def add_edge(self, edge: pyedge) -> None:
        """
        Register a directed edge.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph
        """

    def add_vertex_by_key(self, key: Hashable) -> pyvertex:
        """
        Get the vertex for key, creating and registering it if absent.

        Args:
            key: Vertex key

        Returns:
            The registered vertex
        """
        vertex = self.get_vertex(key)
        if vertex is None:
            vertex = pyvertex(key)
            self.add_vertex(vertex)
        return vertex

    def add_edge_by_keys(self, from_key: Hashable, to_key: Hashable) -> pyedge:
        """
        Add an edge between two keys, creating either endpoint on first mention.

        Returns:
            The edge that was added
        """
        edge = pyedge(self.add_vertex_by_key(from_key), self.add_vertex_by_key(to_key))
        self.add_edge(edge)
        return edge
