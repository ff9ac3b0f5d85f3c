"""
PyDigraph - In-memory Directed Graph Library

A Python library for building directed graphs incrementally and walking them
with breadth-first and depth-first traversal. Graphs can be imported from and
exported to the SNAP-style edge-list text format.

Main Classes:
    AdjacencyListGraph: Concrete directed graph container
    Graph / MutableGraph: Read-only and mutable graph contracts
    pyvertex: Vertex identified by an opaque key
    pyedge: Directed edge between two vertices
    TextFormat: Edge-list text reader/writer

Example:
    >>> from digraph import TextFormat
    >>> graph = TextFormat().read_graph("edges.txt")
    >>> graph.visit_breadth_first_from(1, print)
"""

__version__ = "0.1.0"

from digraph.classes.vertex import pyvertex
from digraph.classes.edge import pyedge
from digraph.classes.utils import GraphUtils
from digraph.core.graph import Graph, MutableGraph
from digraph.core.adjacency import AdjacencyListGraph
from digraph.analysis.traversal import GraphTraversal
from digraph.formats.edge_list import EdgeListModel, TextFormat
from digraph.exceptions import (
    GraphError,
    UnknownVertexError,
    DuplicateVertexError,
    GraphFormatError,
)

__all__ = [
    'AdjacencyListGraph',
    'Graph',
    'MutableGraph',
    'GraphTraversal',
    'GraphUtils',
    'pyvertex',
    'pyedge',
    'EdgeListModel',
    'TextFormat',
    'GraphError',
    'UnknownVertexError',
    'DuplicateVertexError',
    'GraphFormatError',
]
