"""uGraph: a generic in-memory directed graph.

Primary API:
    Graph - adjacency-list container with typed vertex and edge payloads
    Vertex, Edge - records stored by the graph
    to_networkx(), from_networkx() - NetworkX interop

Example:
    from ugraph import Graph

    g = Graph()
    a = g.add_vertex(1)
    b = g.add_vertex(2)
    c = g.add_vertex(3)
    g.add_edge(a, b)
    g.add_edge(a, c)
    g.add_edge(2, 3)  # endpoints looked up by payload

    order = []
    g.dft(a, lambda v: order.append(v.info))  # [1, 3, 2]
"""

from __future__ import annotations

from ugraph import logging
from ugraph.config import GRAPH_CONFIG, GraphConfig
from ugraph.convert import from_networkx, to_networkx
from ugraph.exceptions import GraphError, InvalidArgumentError, VertexNotFoundError
from ugraph.graph import Graph
from ugraph.model import Edge, Vertex

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Vertex",
    "Edge",
    # Errors
    "GraphError",
    "InvalidArgumentError",
    "VertexNotFoundError",
    # Configuration
    "GraphConfig",
    "GRAPH_CONFIG",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
