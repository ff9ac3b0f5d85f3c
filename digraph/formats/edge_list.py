"""
Edge-list text format.

This is the format used by the Stanford Network Analysis Project (SNAP): plain
text files with one "<from> <to>" pair of integer vertex IDs per line, and
comment lines prefixed with '#'. Some variants start with lines holding the
vertex and edge counts; these can be skipped with skip_lines.
"""

import logging
import operator
import os
import re
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, TextIO, Tuple

from ..core.adjacency import AdjacencyListGraph
from ..core.graph import Graph
from ..exceptions import GraphFormatError
from .base import GraphFormat, GraphModel

logger = logging.getLogger(__name__)

HEADER_COMMENT = "# Generated by pydigraph\n"

# optionally signed decimal integer, ASCII digits only
VERTEX_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


@contextmanager
def _open_text(target: Any, mode: str) -> Iterator[TextIO]:
    """Open a path, or pass through an already open stream without closing it."""
    if isinstance(target, (str, os.PathLike)):
        with open(target, mode, encoding='utf-8') as stream:
            yield stream
    else:
        yield target


class EdgeListModel(GraphModel):
    """
    Ultra-simple data model for text formats that are just lists of edges.

    Edges are kept as (from_id, to_id) integer pairs in the order they were
    read; repeated pairs are kept.
    """

    def __init__(self, support_comments: bool = True):
        self.edges: List[Tuple[int, int]] = []
        self.support_comments = support_comments

    def __len__(self) -> int:
        return len(self.edges)

    def add_edge(self, vid1: int, vid2: int) -> None:
        self.edges.append((vid1, vid2))

    @classmethod
    def from_graph(cls, graph: Graph, support_comments: bool = True) -> 'EdgeListModel':
        """
        Capture a graph's edges for export.

        Vertex keys must be integers (or integer-like, e.g. numpy integers);
        floats, strings and other keys raise ValueError instead of being
        converted.
        Vertices without any edges cannot be represented in this format and
        are dropped.

        Args:
            graph: Graph to export
            support_comments: Whether to write the header comment

        Returns:
            A model listing the graph's edges in iteration order
        """
        model = cls(support_comments=support_comments)
        mentioned = set()
        for edge in graph.iter_edges():
            start_id, end_id = edge.key
            try:
                model.add_edge(operator.index(start_id), operator.index(end_id))
            except TypeError as e:
                raise ValueError(f"Edge {edge!r} has non-integer vertex keys") from e
            mentioned.update(edge.key)

        isolated = sum(1 for vertex in graph.iter_vertices() if vertex.key not in mentioned)
        if isolated:
            logger.warning(f"{isolated} isolated vertices cannot be written to an edge list")
        return model

    def vertex_ids(self) -> set:
        """Get the set of vertex IDs mentioned by any edge."""
        return {vid for edge in self.edges for vid in edge}

    def write(self, stream: TextIO, support_comments: Optional[bool] = None) -> None:
        """Write the edges to an open text stream; support_comments overrides the model's flag."""
        if support_comments is None:
            support_comments = self.support_comments
        if support_comments:
            stream.write(HEADER_COMMENT)
        for vid1, vid2 in self.edges:
            stream.write(f"{vid1} {vid2}\n")

    def compile(self) -> AdjacencyListGraph:
        """
        Converts this model to a uniform representation for analysis.

        Vertices are created on first mention, so vertex order follows the
        order in which IDs appear in the edge list.
        """
        graph = AdjacencyListGraph()
        for vid1, vid2 in self.edges:
            graph.add_edge_by_keys(vid1, vid2)

        logger.debug(f"Compiled graph with {graph.get_vertex_count()} vertices and {graph.get_edge_count()} edges")
        return graph


class TextFormat(GraphFormat):
    """
    Reader and writer for the edge-list text format.

    Args:
        skip_lines: Number of leading lines to skip unconditionally
        support_comments: Whether written files start with a '#' header line
    """

    def __init__(self, skip_lines: int = 0, support_comments: bool = True):
        if skip_lines < 0:
            raise ValueError(f"skip_lines must be non-negative, got {skip_lines}")
        self.skip_lines = skip_lines
        self.support_comments = support_comments

    def get_supported_content_types(self) -> List[str]:
        return ["text/plain"]

    def read(self, source: Any,
             model_consumer: Optional[Callable[[EdgeListModel], Any]] = None) -> EdgeListModel:
        model = EdgeListModel(support_comments=self.support_comments)

        with _open_text(source, 'r') as stream:
            for line_number, raw_line in enumerate(stream, start=1):
                if line_number <= self.skip_lines:
                    # some formats have # nodes / edges as first two lines
                    continue

                line = raw_line.strip()
                if not line or line.startswith('#'):
                    continue

                parts = line.split()
                if len(parts) != 2:
                    logger.warning(f"Rejecting edge list line {line_number}: {line!r}")
                    raise GraphFormatError("invalid line", line_number, line)
                if not all(VERTEX_ID_PATTERN.fullmatch(part) for part in parts):
                    logger.warning(f"Rejecting edge list line {line_number}: {line!r}")
                    raise GraphFormatError("invalid node ID", line_number, line)
                model.add_edge(int(parts[0]), int(parts[1]))

        logger.debug(f"Read {len(model)} edges from edge list")
        if model_consumer is not None:
            model_consumer(model)
        return model

    def read_graph(self, source: Any) -> AdjacencyListGraph:
        """Read a source and compile it straight into a graph."""
        return self.read(source).compile()

    def write(self, target: Any, model: EdgeListModel) -> None:
        with _open_text(target, 'w') as stream:
            model.write(stream, support_comments=self.support_comments)
        logger.debug(f"Wrote {len(model)} edges to edge list")

    def write_graph(self, target: Any, graph: Graph) -> None:
        """Write a graph's edges to a path or text stream."""
        self.write(target, EdgeListModel.from_graph(graph, support_comments=self.support_comments))
