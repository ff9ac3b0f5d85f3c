"""
Core graph data structures and management.

This module contains the graph contracts and the adjacency-list container.
"""

from .graph import Graph, MutableGraph
from .adjacency import AdjacencyListGraph

__all__ = ['Graph', 'MutableGraph', 'AdjacencyListGraph']
