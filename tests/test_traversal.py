import logging
import sys

import networkx as nx
import pytest

from ugraph.config import GraphConfig
from ugraph.convert import to_networkx
from ugraph.exceptions import InvalidArgumentError
from ugraph.graph import Graph
from ugraph.model import Vertex
from ugraph.traversal import dft, iter_dft, reachable


def _record(graph, start):
    order = []
    graph.dft(start, lambda v: order.append(v.info))
    return order


def test_dft_single_vertex():
    g = Graph()
    a = g.add_vertex("A")
    calls = []
    g.dft(a, calls.append)
    assert calls == [a]


def test_dft_visits_children_in_reverse_edge_order(abc_graph):
    g, v = abc_graph
    assert _record(g, v["A"]) == [1, 3, 2]


def test_dft_from_inner_vertex(abc_graph):
    g, v = abc_graph
    assert _record(g, v["B"]) == [2, 3]
    assert _record(g, v["C"]) == [3]


def test_dft_cycle_terminates(cycle_graph):
    g, v = cycle_graph
    assert _record(g, v["A"]) == [1, 2]
    assert _record(g, v["B"]) == [2, 1]


def test_dft_self_loop():
    g = Graph()
    a = g.add_vertex("A")
    g.add_edge(a, a)
    g.add_edge(a, a)
    assert _record(g, a) == ["A"]


def test_dft_disjoint_components(two_components):
    g, v = two_components
    assert _record(g, v["A"]) == [1, 2, 3]
    assert g.reachable(v["A"]) == {v["A"].id, v["B"].id, v["C"].id}
    assert v["D"].id not in g.reachable(v["A"])
    assert v["E"].id not in g.reachable(v["A"])


def test_dft_diamond_visits_shared_vertex_once(diamond_graph):
    g, v = diamond_graph
    # A pushes B, C; C pops first and pushes D; D pushes E; then B pushes D again
    # (already visited, skipped on pop).
    assert _record(g, v["A"]) == [1, 3, 4, 5, 2]


def test_dft_repeated_traversals_are_independent(two_components):
    g, v = two_components
    assert _record(g, v["A"]) == [1, 2, 3]
    assert _record(g, v["D"]) == [4, 5]
    assert _record(g, v["B"]) == [2, 3]
    assert _record(g, v["A"]) == [1, 2, 3]


def test_nested_traversal_inside_visitor(cycle_graph):
    g, v = cycle_graph
    outer, inner = [], []

    def visit(vertex):
        outer.append(vertex.info)
        inner.append(_record(g, vertex))

    g.dft(v["A"], visit)
    assert outer == [1, 2]
    assert inner == [[1, 2], [2, 1]]


def test_dft_rejects_none_start():
    g = Graph()
    with pytest.raises(InvalidArgumentError):
        g.dft(None, lambda v: None)  # type: ignore[arg-type]


def test_dft_rejects_non_vertex_start():
    g = Graph()
    g.add_vertex("A")
    with pytest.raises(InvalidArgumentError, match="must be a Vertex"):
        g.dft("A", lambda v: None)  # type: ignore[arg-type]


def test_dft_rejects_foreign_start():
    g = Graph()
    with pytest.raises(InvalidArgumentError, match="not in this graph"):
        g.dft(Vertex("A"), lambda v: None)


@pytest.mark.parametrize("visit", [None, 42, "not callable"])
def test_dft_rejects_bad_visitor(visit):
    g = Graph()
    a = g.add_vertex("A")
    with pytest.raises(InvalidArgumentError, match="callable"):
        g.dft(a, visit)  # type: ignore[arg-type]


def test_invalid_argument_is_value_error():
    g = Graph()
    with pytest.raises(ValueError):
        dft(g, None, print)  # type: ignore[arg-type]


def test_iter_dft_validates_eagerly():
    g = Graph()
    with pytest.raises(InvalidArgumentError):
        iter_dft(g, Vertex("A"))


def test_iter_dft_matches_visitor_order(abc_graph):
    g, v = abc_graph
    assert [x.info for x in g.iter_dft(v["A"])] == _record(g, v["A"])


def test_iter_dft_is_lazy(abc_graph):
    g, v = abc_graph
    it = g.iter_dft(v["A"])
    assert next(it) is v["A"]
    assert next(it) is v["C"]


def test_visitor_exception_propagates(abc_graph):
    g, v = abc_graph

    def visit(vertex):
        if vertex.info == 3:
            raise RuntimeError("stop")

    with pytest.raises(RuntimeError, match="stop"):
        g.dft(v["A"], visit)
    # next traversal starts clean
    assert _record(g, v["A"]) == [1, 3, 2]


def test_deep_chain_does_not_hit_recursion_limit():
    g = Graph()
    depth = sys.getrecursionlimit() * 3
    prev = first = g.add_vertex(0)
    for i in range(1, depth):
        cur = g.add_vertex(i)
        g.add_edge(prev, cur)
        prev = cur
    count = 0

    def visit(_):
        nonlocal count
        count += 1

    g.dft(first, visit)
    assert count == depth


def test_reachable_matches_networkx_descendants(diamond_graph, two_components):
    for g, v in (diamond_graph, two_components):
        nxg = to_networkx(g)
        for vertex in v.values():
            expected = nx.descendants(nxg, vertex.id) | {vertex.id}
            assert reachable(g, vertex) == expected


def test_dft_debug_logging(caplog, abc_graph):
    g, v = abc_graph
    with caplog.at_level(logging.DEBUG, logger="ugraph"):
        g.dft(v["A"], lambda _: None)
    messages = [r.getMessage() for r in caplog.records if r.name == "ugraph.traversal"]
    assert any("DFT start" in m for m in messages)
    assert any("visited 3 vertices" in m for m in messages)


def test_dft_logging_disabled_by_config(caplog):
    g = Graph(config=GraphConfig(log_traversals=False))
    a = g.add_vertex("A")
    with caplog.at_level(logging.DEBUG, logger="ugraph"):
        g.dft(a, lambda _: None)
    assert not [r for r in caplog.records if r.name == "ugraph.traversal"]
