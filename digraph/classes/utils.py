"""
Utility functions for digraph.

This module provides numpy-based helpers for exporting a graph's structure as
arrays, e.g. for handing it to numerical code.
"""

import logging
from typing import Hashable, List, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class GraphUtils:
    """
    Array representations of a graph.

    All arrays are indexed by vertex insertion order; the accompanying key
    list maps indices back to vertex keys.
    """

    @staticmethod
    def vertex_index(graph) -> Tuple[List[Hashable], dict]:
        """
        Build the index <-> key mapping for a graph.

        Returns:
            Tuple of (keys in insertion order, dict mapping key -> index)
        """
        keys = [vertex.key for vertex in graph.iter_vertices()]
        return keys, {key: index for index, key in enumerate(keys)}

    @staticmethod
    def to_adjacency_matrix(graph) -> Tuple[np.ndarray, List[Hashable]]:
        """
        Convert a graph to a dense adjacency count matrix.

        Entry [i, j] is the number of edges from vertex i to vertex j, so
        parallel edges add up and self-loops land on the diagonal.

        Args:
            graph: Graph to convert

        Returns:
            Tuple of (n x n integer matrix, vertex keys in row order)
        """
        keys, index = GraphUtils.vertex_index(graph)
        matrix = np.zeros((len(keys), len(keys)), dtype=np.int64)

        for edge in graph.iter_edges():
            start_id, end_id = edge.key
            matrix[index[start_id], index[end_id]] += 1

        logger.debug(f"Built {len(keys)}x{len(keys)} adjacency matrix with {int(matrix.sum())} edges")
        return matrix, keys

    @staticmethod
    def degree_arrays(graph) -> Tuple[np.ndarray, np.ndarray]:
        """
        Compute in- and out-degree arrays.

        Returns:
            Tuple of (in_degrees, out_degrees), indexed by vertex insertion order
        """
        matrix, _ = GraphUtils.to_adjacency_matrix(graph)
        return matrix.sum(axis=0), matrix.sum(axis=1)
