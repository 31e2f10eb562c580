"""Conversion between `Graph` and NetworkX graphs.

`to_networkx` produces a ``networkx.MultiDiGraph`` keyed by vertex id, so
graphs with equal payloads on different vertices convert without collisions.
`from_networkx` goes the other way, using each NetworkX node as a vertex
payload.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=10)
    >>> graph, vertex_map = from_networkx(G)
    >>> graph.out_edges(vertex_map["A"])[0].info
    {'cost': 10}
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Tuple

import networkx as nx

from ugraph.graph import Graph
from ugraph.logging import get_logger
from ugraph.model import Vertex

logger = get_logger(__name__)


def to_networkx(graph: Graph[Any, Any]) -> nx.MultiDiGraph:
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    Nodes are vertex ids with the payload stored in the ``info`` attribute.
    Every edge becomes one multi-edge carrying its payload in ``info``;
    parallel edges keep their creation order as NetworkX keys.

    Args:
        graph: Graph to convert.

    Returns:
        A new MultiDiGraph.
    """
    nx_graph = nx.MultiDiGraph()
    for vertex in graph:
        nx_graph.add_node(vertex.id, info=vertex.info)
    for edge in graph.edges():
        nx_graph.add_edge(edge.origin.id, edge.destination.id, info=edge.info)
    logger.debug(
        "Converted graph to MultiDiGraph: %d nodes, %d edges",
        nx_graph.number_of_nodes(),
        nx_graph.number_of_edges(),
    )
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
) -> Tuple[Graph[Hashable, Dict[str, Any]], Dict[Hashable, Vertex[Hashable]]]:
    """Build a `Graph` from any NetworkX graph.

    Each node becomes a vertex whose payload is the node key. Each edge
    becomes an edge whose payload is a copy of its attribute dict. Undirected
    edges are added in both directions.

    Args:
        nx_graph: Source graph (Graph, DiGraph, MultiGraph or MultiDiGraph).

    Returns:
        The new graph and a mapping from node key to vertex.
    """
    graph: Graph[Hashable, Dict[str, Any]] = Graph()
    vertex_map: Dict[Hashable, Vertex[Hashable]] = {}
    for node in nx_graph.nodes:
        vertex_map[node] = graph.add_vertex(node)

    directed = nx_graph.is_directed()
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(vertex_map[u], vertex_map[v], dict(data))
        if not directed and u != v:
            graph.add_edge(vertex_map[v], vertex_map[u], dict(data))
    return graph, vertex_map
