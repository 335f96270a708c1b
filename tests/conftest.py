"""Shared graph fixtures.

Edges are listed in insertion order; that order drives route enumeration and
cheapest-route tie-breaking, so fixtures must not be reordered.
"""

from __future__ import annotations

import pytest

from routegraph.lib.graph import RouteGraph

REFERENCE_EDGES = ["AB1", "AC4", "AD10", "BE3", "CD4", "CF2", "DE1", "EB3", "EA2", "FD1"]


@pytest.fixture
def reference_edges():
    return list(REFERENCE_EDGES)


@pytest.fixture
def reference_graph():
    # Same graph as REFERENCE_EDGES:
    #   A -> B [1], C [4], D [10]
    #   B -> E [3]
    #   C -> D [4], F [2]
    #   D -> E [1]
    #   E -> B [3], A [2]
    #   F -> D [1]
    return RouteGraph.from_adjacency(
        {
            "A": {"B": 1, "C": 4, "D": 10},
            "B": {"E": 3},
            "C": {"D": 4, "F": 2},
            "D": {"E": 1},
            "E": {"B": 3, "A": 2},
            "F": {"D": 1},
        }
    )


@pytest.fixture
def line1():
    # A ──[1]──► B ──[2]──► C
    g = RouteGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    return g


@pytest.fixture
def triangle1():
    #       [1]
    #   A ───────► B
    #   ▲          │
    #   │[3]       │[2]
    #   │          ▼
    #   └───────── C
    #
    # Plus a direct A->C shortcut of cost 4.
    g = RouteGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 4)
    g.add_edge("B", "C", 2)
    g.add_edge("C", "A", 3)
    return g


@pytest.fixture
def square_ties():
    # Two equal-cost routes A->D:
    #   A ─[1]─► B ─[1]─► D
    #   A ─[1]─► C ─[1]─► D
    g = RouteGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 1)
    g.add_edge("B", "D", 1)
    g.add_edge("C", "D", 1)
    return g


@pytest.fixture
def self_loop():
    # A ─[2]─► A, A ─[5]─► B
    g = RouteGraph()
    g.add_edge("A", "A", 2)
    g.add_edge("A", "B", 5)
    return g
