"""
Shared fixtures.

The acyclic fixtures use this graph:

                 A
               /  \
              B   C
            /   / |  \
           D   E  F   G
              /        \
             H          I

while the cyclic fixtures use this one:

                 A
               /  \
              B----C
            /   / |  \
           D---E--F---G
              /        \
             H----------I
"""

import pytest

from digraph import AdjacencyListGraph, pyedge, pyvertex

VERTEX_IDS = ["A", "B", "C", "D", "E", "F", "G", "H", "I"]

ACYCLIC_EDGES = [
    ("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"),
    ("C", "F"), ("C", "G"), ("E", "H"), ("G", "I"),
]

CYCLIC_EDGES = [
    ("A", "B"), ("A", "C"), ("B", "D"), ("B", "C"), ("C", "E"),
    ("C", "F"), ("C", "G"), ("E", "H"), ("G", "I"), ("D", "E"),
    ("E", "F"), ("F", "G"), ("H", "I"),
]


def build_graph(vertex_map, edge_pairs):
    graph = AdjacencyListGraph()
    for vid in VERTEX_IDS:
        graph.add_vertex(vertex_map[vid])
    for start, end in edge_pairs:
        graph.add_edge(pyedge(vertex_map[start], vertex_map[end]))
    return graph


@pytest.fixture
def vertex_map():
    return {vid: pyvertex(vid) for vid in VERTEX_IDS}


@pytest.fixture
def acyclic_graph(vertex_map):
    return build_graph(vertex_map, ACYCLIC_EDGES)


@pytest.fixture
def cyclic_graph(vertex_map):
    return build_graph(vertex_map, CYCLIC_EDGES)
