"""
Tests for the edge-list text format.
"""

import io
import logging
from collections import Counter

import numpy as np
import pytest

from digraph import AdjacencyListGraph, EdgeListModel, GraphFormatError, TextFormat


SNAP_SAMPLE = """\
# Directed graph (each unordered pair of nodes is saved once): sample.txt
# Nodes: 4 Edges: 5
# FromNodeId\tToNodeId
1\t2
1\t3

2 4
   3    4
4 1
"""


def edge_multiset(graph):
    return Counter(edge.key for edge in graph.get_edges())


def test_read_skips_comments_and_blank_lines():
    model = TextFormat().read(io.StringIO(SNAP_SAMPLE))
    assert model.edges == [(1, 2), (1, 3), (2, 4), (3, 4), (4, 1)]


def test_read_invokes_consumer():
    received = []
    model = TextFormat().read(io.StringIO("1 2\n"), received.append)
    assert received == [model]


def test_compile_creates_vertices_on_first_mention():
    graph = TextFormat().read_graph(io.StringIO(SNAP_SAMPLE))

    assert isinstance(graph, AdjacencyListGraph)
    assert [v.key for v in graph.get_vertices()] == [1, 2, 3, 4]
    assert graph.get_edge_count() == 5
    assert [v.key for v in graph.breadth_first(1)] == [1, 2, 3, 4]


def test_compile_keeps_parallel_edges():
    graph = TextFormat().read_graph(io.StringIO("1 2\n1 2\n2 2\n"))
    assert edge_multiset(graph) == Counter({(1, 2): 2, (2, 2): 1})


@pytest.mark.parametrize("text, line_number, bad_line", [
    ("1 2\n1 2 3\n", 2, "1 2 3"),
    ("a b\n", 1, "a b"),
    ("# header\n\n7\n", 3, "7"),
    ("1 2\n1 2.5\n", 2, "1 2.5"),
])
def test_malformed_lines(text, line_number, bad_line):
    with pytest.raises(GraphFormatError) as exc_info:
        TextFormat().read(io.StringIO(text))

    assert exc_info.value.line_number == line_number
    assert exc_info.value.line == bad_line
    assert f"line # {line_number}" in str(exc_info.value)


def test_malformed_line_aborts_consumer():
    received = []
    with pytest.raises(GraphFormatError):
        TextFormat().read(io.StringIO("1 2\nx y\n"), received.append)
    assert received == []


def test_skip_lines():
    text = "4\n3\n1 2\n2 3\n3 4\n"
    model = TextFormat(skip_lines=2).read(io.StringIO(text))
    assert model.edges == [(1, 2), (2, 3), (3, 4)]


def test_skip_lines_counts_toward_line_numbers():
    with pytest.raises(GraphFormatError) as exc_info:
        TextFormat(skip_lines=1).read(io.StringIO("count\n1 2\nbad\n"))
    assert exc_info.value.line_number == 3


def test_negative_skip_lines_rejected():
    with pytest.raises(ValueError):
        TextFormat(skip_lines=-1)


def test_write_with_and_without_header():
    model = EdgeListModel()
    model.add_edge(1, 2)
    model.add_edge(2, 3)

    out = io.StringIO()
    TextFormat().write(out, model)
    assert out.getvalue() == "# Generated by pydigraph\n1 2\n2 3\n"

    out = io.StringIO()
    TextFormat(support_comments=False).write(out, model)
    assert out.getvalue() == "1 2\n2 3\n"


def test_round_trip_through_file(tmp_path):
    graph = AdjacencyListGraph()
    for start, end in [(1, 2), (1, 3), (3, 1), (2, 2), (1, 2)]:
        graph.add_edge_by_keys(start, end)

    path = tmp_path / "graph.txt"
    text_format = TextFormat()
    text_format.write_graph(path, graph)
    restored = text_format.read_graph(str(path))

    assert {v.key for v in restored.get_vertices()} == {v.key for v in graph.get_vertices()}
    assert edge_multiset(restored) == edge_multiset(graph)


def test_from_graph_rejects_non_integer_keys():
    graph = AdjacencyListGraph()
    graph.add_edge_by_keys("A", "B")
    with pytest.raises(ValueError):
        EdgeListModel.from_graph(graph)


def test_from_graph_preserves_edge_order():
    graph = AdjacencyListGraph()
    graph.add_edge_by_keys(5, 1)
    graph.add_edge_by_keys(1, 7)
    graph.add_edge_by_keys(5, 7)

    assert EdgeListModel.from_graph(graph).edges == [(5, 1), (5, 7), (1, 7)]


def test_content_types():
    assert TextFormat().get_supported_content_types() == ["text/plain"]


@pytest.mark.parametrize("start, end", [(1.2, 1.7), ("007", 3), (1, 2.0)])
def test_from_graph_rejects_keys_that_would_change(start, end):
    graph = AdjacencyListGraph()
    graph.add_edge_by_keys(start, end)

    with pytest.raises(ValueError):
        EdgeListModel.from_graph(graph)
    with pytest.raises(ValueError):
        TextFormat().write_graph(io.StringIO(), graph)


def test_from_graph_accepts_numpy_integer_keys():
    graph = AdjacencyListGraph()
    graph.add_edge_by_keys(np.int64(4), np.int32(5))

    assert EdgeListModel.from_graph(graph).edges == [(4, 5)]


def test_isolated_vertex_warning_counts_only_isolated(caplog):
    graph = AdjacencyListGraph()
    graph.add_edge_by_keys(1, 2)
    graph.add_edge_by_keys(3, 1)

    with caplog.at_level(logging.WARNING, logger="digraph.formats.edge_list"):
        EdgeListModel.from_graph(graph)
    assert "isolated" not in caplog.text

    graph.add_vertex_by_key(8)
    graph.add_vertex_by_key(9)
    with caplog.at_level(logging.WARNING, logger="digraph.formats.edge_list"):
        EdgeListModel.from_graph(graph)
    assert "2 isolated vertices" in caplog.text


def test_signed_vertex_ids_are_accepted():
    model = TextFormat().read(io.StringIO("+3 -4\n"))
    assert model.edges == [(3, -4)]


@pytest.mark.parametrize("bad_line", ["1_000 2", "1 ２", "0x1 2"])
def test_non_decimal_vertex_ids_rejected(bad_line):
    with pytest.raises(GraphFormatError) as exc_info:
        TextFormat().read(io.StringIO(bad_line + "\n"))
    assert exc_info.value.line_number == 1
    assert exc_info.value.line == bad_line
