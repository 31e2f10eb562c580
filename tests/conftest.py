"""Shared graph fixtures.

Each fixture returns ``(graph, vertices)`` where ``vertices`` maps a label to
the vertex created for it. Payloads are the integers shown in the diagrams.
"""

from __future__ import annotations

import pytest

from ugraph.graph import Graph


@pytest.fixture
def abc_graph():
    #      A(1)
    #     /    \
    #    ▼      ▼
    #  B(2) ──► C(3)
    #
    # Edges added in order A->B, A->C, B->C.
    g = Graph()
    a = g.add_vertex(1)
    b = g.add_vertex(2)
    c = g.add_vertex(3)
    g.add_edge(a, b, "A->B")
    g.add_edge(a, c, "A->C")
    g.add_edge(b, c, "B->C")
    return g, {"A": a, "B": b, "C": c}


@pytest.fixture
def cycle_graph():
    #  A(1) ◄──► B(2)
    g = Graph()
    a = g.add_vertex(1)
    b = g.add_vertex(2)
    g.add_edge(a, b, "A->B")
    g.add_edge(b, a, "B->A")
    return g, {"A": a, "B": b}


@pytest.fixture
def two_components():
    # Component 1:  A(1) ──► B(2) ──► C(3)
    # Component 2:  D(4) ──► E(5)
    g = Graph()
    a, b, c, d, e = (g.add_vertex(i) for i in range(1, 6))
    g.add_edge(a, b)
    g.add_edge(b, c)
    g.add_edge(d, e)
    return g, {"A": a, "B": b, "C": c, "D": d, "E": e}


@pytest.fixture
def diamond_graph():
    #        A(1)
    #       /    \
    #      ▼      ▼
    #    B(2)    C(3)
    #      \      /
    #       ▼    ▼
    #        D(4) ──► E(5)
    g = Graph()
    a, b, c, d, e = (g.add_vertex(i) for i in range(1, 6))
    g.add_edge(a, b)
    g.add_edge(a, c)
    g.add_edge(b, d)
    g.add_edge(c, d)
    g.add_edge(d, e)
    return g, {"A": a, "B": b, "C": c, "D": d, "E": e}
