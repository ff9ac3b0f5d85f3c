"""
Breadth-first and depth-first traversal for directed graphs.

Traversals are exposed both as lazy generators and as visitor-driven loops.
Each vertex reachable from the start is produced exactly once; cycles and
disconnected components are handled through a visited set keyed by vertex key.
"""

import logging
from typing import Any, Callable, Hashable, Iterator, List, Set, Union
from collections import deque

from ..classes.vertex import pyvertex
from ..exceptions import UnknownVertexError

logger = logging.getLogger(__name__)


class GraphTraversal:
    """
    Traversal algorithms over a read-only graph.

    This class provides:
    - Breadth-first traversal (FIFO frontier, marked on enqueue)
    - Depth-first traversal (LIFO stack, marked on first pop)
    - Visitor-driven variants with early termination

    The graph must not be mutated while a traversal is in progress.
    """

    def __init__(self, graph):
        """
        Initialize the traversal helper.

        Args:
            graph: Graph instance to traverse
        """
        self.graph = graph

    def _resolve_start(self, start: Union[pyvertex, Hashable]) -> pyvertex:
        key = start.key if isinstance(start, pyvertex) else start
        vertex = self.graph.get_vertex(key)
        if vertex is None:
            raise UnknownVertexError(key)
        return vertex

    def _successors(self, vertex: pyvertex) -> List[pyvertex]:
        return [self.graph.get_vertex(edge.vertex_to.key)
                for edge in self.graph.get_outgoing_edges(vertex)]

    def breadth_first(self, start: Union[pyvertex, Hashable]) -> Iterator[pyvertex]:
        """
        Yield vertices reachable from start in breadth-first order.

        Vertices are marked visited when enqueued, so a vertex discovered
        through several edges is queued only once.

        Args:
            start: Start vertex or its key

        Raises:
            UnknownVertexError: If start is not in the graph
        """
        return self._breadth_first(self._resolve_start(start))

    def _breadth_first(self, start_vertex: pyvertex) -> Iterator[pyvertex]:
        visited: Set[Hashable] = {start_vertex.key}
        queue = deque([start_vertex])

        while queue:
            current = queue.popleft()
            yield current

            for neighbor in self._successors(current):
                if neighbor.key not in visited:
                    visited.add(neighbor.key)
                    queue.append(neighbor)

    def depth_first(self, start: Union[pyvertex, Hashable]) -> Iterator[pyvertex]:
        """
        Yield vertices reachable from start in depth-first order.

        Neighbors are pushed in adjacency-list order, so the last-listed
        neighbor is explored first.

        Args:
            start: Start vertex or its key

        Raises:
            UnknownVertexError: If start is not in the graph
        """
        return self._depth_first(self._resolve_start(start))

    def _depth_first(self, start_vertex: pyvertex) -> Iterator[pyvertex]:
        visited: Set[Hashable] = set()
        stack = [start_vertex]

        while stack:
            current = stack.pop()
            if current.key in visited:
                continue

            visited.add(current.key)
            yield current

            for neighbor in self._successors(current):
                if neighbor.key not in visited:
                    stack.append(neighbor)

    def visit_breadth_first(self, start: Union[pyvertex, Hashable],
                            visitor: Callable[[pyvertex], Any]) -> int:
        """
        Invoke visitor on each vertex in breadth-first order.

        The traversal stops early if visitor returns False.

        Returns:
            Number of vertices visited
        """
        return self._drive(self.breadth_first(start), visitor, "breadth-first")

    def visit_depth_first(self, start: Union[pyvertex, Hashable],
                          visitor: Callable[[pyvertex], Any]) -> int:
        """
        Invoke visitor on each vertex in depth-first order.

        The traversal stops early if visitor returns False.

        Returns:
            Number of vertices visited
        """
        return self._drive(self.depth_first(start), visitor, "depth-first")

    @staticmethod
    def _drive(vertices: Iterator[pyvertex], visitor: Callable[[pyvertex], Any], label: str) -> int:
        count = 0
        for vertex in vertices:
            count += 1
            if visitor(vertex) is False:
                logger.debug(f"Visitor stopped {label} traversal after {count} vertices")
                break
        else:
            logger.debug(f"Completed {label} traversal, visited {count} vertices")
        return count
