"""Depth-first traversal over a `Graph`.

The traversal uses an explicit stack, so depth is not bounded by the Python
recursion limit. A vertex is marked visited when it is popped, not when it is
pushed; a vertex reachable through several incoming edges may sit on the
stack more than once and is skipped after its first visit.

Children are pushed in outgoing-edge order and therefore popped, and visited,
in reverse of that order. For edges added A->B, A->C, B->C a traversal from A
visits A, C, B.

The visited set is local to each call. Repeated or nested traversals of the
same graph do not interfere with each other.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterator, List, Set

from ugraph.exceptions import InvalidArgumentError
from ugraph.logging import get_logger
from ugraph.model import Vertex, VertexID

if TYPE_CHECKING:
    from ugraph.graph import Graph

logger = get_logger(__name__)

Visitor = Callable[[Vertex[Any]], Any]


def _check_start(graph: Graph[Any, Any], start: Vertex[Any]) -> None:
    if start is None:
        raise InvalidArgumentError("Start vertex must not be None.")
    if not isinstance(start, Vertex):
        raise InvalidArgumentError(
            f"Start vertex must be a Vertex, got {type(start).__name__}."
        )
    if not graph.contains(start):
        raise InvalidArgumentError(f"Start vertex '{start.id}' is not in this graph.")


def _walk(graph: Graph[Any, Any], start: Vertex[Any]) -> Iterator[Vertex[Any]]:
    visited: Set[VertexID] = set()
    stack: List[Vertex[Any]] = [start]
    while stack:
        vertex = stack.pop()
        if vertex.id in visited:
            continue
        visited.add(vertex.id)
        yield vertex
        for edge in graph.out_edges(vertex):
            stack.append(edge.destination)


def iter_dft(graph: Graph[Any, Any], start: Vertex[Any]) -> Iterator[Vertex[Any]]:
    """Yield the vertices reachable from ``start`` in depth-first order.

    Arguments are validated eagerly, before the iterator is returned.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from; must belong to ``graph``.

    Returns:
        Iterator over each reachable vertex, once, starting with ``start``.

    Raises:
        InvalidArgumentError: If ``start`` is None, not a vertex, or not a
            member of ``graph``.
    """
    _check_start(graph, start)
    return _walk(graph, start)


def dft(graph: Graph[Any, Any], start: Vertex[Any], visit: Visitor) -> None:
    """Call ``visit`` once for every vertex reachable from ``start``.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from; must belong to ``graph``.
        visit: Callable invoked with each vertex in depth-first order.

    Raises:
        InvalidArgumentError: If ``start`` is invalid or ``visit`` is not
            callable. Nothing is visited in that case.
    """
    _check_start(graph, start)
    if visit is None or not callable(visit):
        raise InvalidArgumentError("Visitor must be a callable.")

    log = graph.config.log_traversals
    if log:
        logger.debug(
            "DFT start from vertex %s (graph has %d vertices)",
            start.id,
            graph.vertex_count,
        )

    count = 0
    for vertex in _walk(graph, start):
        visit(vertex)
        count += 1

    if log:
        logger.debug("DFT from vertex %s visited %d vertices", start.id, count)


def reachable(graph: Graph[Any, Any], start: Vertex[Any]) -> Set[VertexID]:
    """Return the ids of all vertices reachable from ``start``, itself included."""
    return {vertex.id for vertex in iter_dft(graph, start)}
