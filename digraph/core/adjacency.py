"""
Adjacency-list graph container.

This module provides the concrete directed graph used throughout the package.
Vertices and outgoing-edge lists are stored by vertex key, so the container
holds no reference cycles between vertices and edges.
"""

import logging
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Union

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from ..analysis.traversal import GraphTraversal
from ..exceptions import DuplicateVertexError, UnknownVertexError
from .graph import MutableGraph, VertexVisitor

logger = logging.getLogger(__name__)


class AdjacencyListGraph(MutableGraph):
    """
    Directed graph backed by per-vertex outgoing-edge lists.

    This class manages:
    - Vertex registration by key (duplicate keys are rejected)
    - Outgoing adjacency lists in insertion order
    - Degree tracking (in/out)
    - Basic graph queries (sources, sinks, vertex lookup)

    Self-loops are allowed, and parallel edges are kept: adding the same
    ordered pair twice stores it twice.
    """

    def __init__(self, vertices: Optional[Iterable[pyvertex]] = None,
                 edges: Optional[Iterable[pyedge]] = None):
        """
        Initialize the graph, optionally populating it.

        Args:
            vertices: Optional vertices to add, in order
            edges: Optional edges to add after the vertices
        """
        # Vertex mappings
        self._id_to_vertex: Dict[Hashable, pyvertex] = {}

        # Graph structure
        self._adjacency_list: Dict[Hashable, List[pyedge]] = {}
        self._in_degree: Dict[Hashable, int] = {}
        self._out_degree: Dict[Hashable, int] = {}
        self._edge_count = 0

        self._traversal = GraphTraversal(self)

        for vertex in vertices or ():
            self.add_vertex(vertex)
        for edge in edges or ():
            self.add_edge(edge)

        if vertices is not None or edges is not None:
            logger.debug(f"Built graph with {len(self._id_to_vertex)} vertices and {self._edge_count} edges")

    def __repr__(self) -> str:
        return f"AdjacencyListGraph(V={len(self._id_to_vertex)}, E={self._edge_count})"

    # ========================================================================
    # CONSTRUCTION
    # ========================================================================

    def add_vertex(self, vertex: pyvertex) -> None:
        if not isinstance(vertex, pyvertex):
            raise TypeError(f"Expected pyvertex, got {type(vertex).__name__}")

        key = vertex.key
        if key in self._id_to_vertex:
            raise DuplicateVertexError(key)

        self._id_to_vertex[key] = vertex
        self._adjacency_list[key] = []
        self._in_degree[key] = 0
        self._out_degree[key] = 0

    def add_edge(self, edge: pyedge) -> None:
        if not isinstance(edge, pyedge):
            raise TypeError(f"Expected pyedge, got {type(edge).__name__}")

        start_id, end_id = edge.key
        if start_id not in self._id_to_vertex:
            raise UnknownVertexError(start_id)
        if end_id not in self._id_to_vertex:
            raise UnknownVertexError(end_id)

        # store the edge on the graph's own vertex objects
        self._adjacency_list[start_id].append(
            pyedge(self._id_to_vertex[start_id], self._id_to_vertex[end_id]))
        self._out_degree[start_id] += 1
        self._in_degree[end_id] += 1
        self._edge_count += 1

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_vertex(self, key: Hashable) -> Optional[pyvertex]:
        try:
            return self._id_to_vertex.get(key)
        except TypeError:
            # unhashable
            return None

    def _require_key(self, vertex: Union[pyvertex, Hashable]) -> Hashable:
        key = vertex.key if isinstance(vertex, pyvertex) else vertex
        if key not in self._id_to_vertex:
            raise UnknownVertexError(key)
        return key

    def get_outgoing_edges(self, vertex: Union[pyvertex, Hashable]) -> List[pyedge]:
        return list(self._adjacency_list[self._require_key(vertex)])

    def get_in_degree(self, vertex: Union[pyvertex, Hashable]) -> int:
        """Get the number of edges ending at vertex."""
        return self._in_degree[self._require_key(vertex)]

    def get_out_degree(self, vertex: Union[pyvertex, Hashable]) -> int:
        """Get the number of edges starting at vertex."""
        return self._out_degree[self._require_key(vertex)]

    def get_sources(self) -> List[pyvertex]:
        """Get vertices with no incoming edges."""
        return [vertex for key, vertex in self._id_to_vertex.items() if self._in_degree[key] == 0]

    def get_sinks(self) -> List[pyvertex]:
        """Get vertices with no outgoing edges."""
        return [vertex for key, vertex in self._id_to_vertex.items() if self._out_degree[key] == 0]

    def get_vertex_count(self) -> int:
        return len(self._id_to_vertex)

    def get_edge_count(self) -> int:
        return self._edge_count

    # ========================================================================
    # ITERATION
    # ========================================================================

    def iter_vertices(self) -> Iterator[pyvertex]:
        return iter(list(self._id_to_vertex.values()))

    def iter_edges(self) -> Iterator[pyedge]:
        for key in self._id_to_vertex:
            yield from list(self._adjacency_list[key])

    # ========================================================================
    # TRAVERSAL
    # ========================================================================

    def breadth_first(self, start: Union[pyvertex, Hashable]) -> Iterator[pyvertex]:
        """Lazily yield vertices reachable from start in breadth-first order."""
        return self._traversal.breadth_first(start)

    def depth_first(self, start: Union[pyvertex, Hashable]) -> Iterator[pyvertex]:
        """Lazily yield vertices reachable from start in depth-first order."""
        return self._traversal.depth_first(start)

    def visit_breadth_first_from(self, start: Union[pyvertex, Hashable], visitor: VertexVisitor) -> int:
        return self._traversal.visit_breadth_first(start, visitor)

    def visit_depth_first_from(self, start: Union[pyvertex, Hashable], visitor: VertexVisitor) -> int:
        return self._traversal.visit_depth_first(start, visitor)
