"""Generic directed graph built on adjacency lists.

`Graph` owns every vertex it is given and every edge it creates. Vertices live
in an insertion-ordered arena; each arena slot has a matching outgoing-edge
list. Edges refer to their endpoints by arena index.

There is no removal: the arena and the edge lists only grow.

Example:
    >>> g = Graph()
    >>> a, b = g.add_vertex("A"), g.add_vertex("B")
    >>> e = g.add_edge(a, b, "A->B")
    >>> e.destination is b
    True
    >>> g.add_edge("B", "A", "B->A").origin is b
    True
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    Optional,
    Set,
    Tuple,
    Union,
)

from ugraph import traversal
from ugraph.config import GRAPH_CONFIG, GraphConfig
from ugraph.exceptions import VertexNotFoundError
from ugraph.logging import get_logger
from ugraph.model import E, Edge, V, Vertex, VertexID

logger = get_logger(__name__)


class Graph(Generic[V, E]):
    """Directed graph over vertex payloads ``V`` and edge payloads ``E``.

    Payload lookups (`contains` with a value, `find_first`, and `add_edge`
    with payload endpoints) scan the vertex arena and cost O(n) in the vertex
    count. They rely on the payload type's ``__eq__`` being an equivalence
    relation. Vertex-based membership is O(1).

    The graph is not thread-safe. Do not mutate it while iterating or
    traversing.
    """

    def __init__(self, config: Optional[GraphConfig] = None) -> None:
        self.config = config if config is not None else GRAPH_CONFIG
        self._vertices: List[Vertex[V]] = []
        # Vertex id -> arena index; holds exactly the ids in _vertices.
        self._index: Dict[VertexID, int] = {}
        self._out: List[List[Edge[E]]] = []
        self._edge_count = 0

    #
    # Vertices
    #
    def add_vertex(self, vertex_or_info: Union[Vertex[V], V]) -> Vertex[V]:
        """Register a vertex, or create one around a payload.

        A `Vertex` argument is registered as-is. Any other argument becomes
        the payload of a new vertex with a fresh identifier.

        Args:
            vertex_or_info: A pre-built vertex or a payload value.

        Returns:
            The registered vertex.

        Raises:
            ValueError: If a vertex with the same id is already registered.
        """
        if isinstance(vertex_or_info, Vertex):
            vertex = vertex_or_info
            if vertex.id in self._index:
                raise ValueError(f"Vertex '{vertex.id}' already exists in this graph.")
        else:
            vertex = Vertex(vertex_or_info)

        self._index[vertex.id] = len(self._vertices)
        self._vertices.append(vertex)
        self._out.append([])
        logger.debug("Added vertex %s (vertex count %d)", vertex.id, len(self._vertices))
        return vertex

    @property
    def vertices(self) -> Tuple[Vertex[V], ...]:
        """All vertices in insertion order."""
        return tuple(self._vertices)

    @property
    def vertex_count(self) -> int:
        return len(self._index)

    def find_first(self, predicate: Callable[[V], bool]) -> Optional[Vertex[V]]:
        """Return the first vertex whose payload satisfies ``predicate``.

        Returns:
            The matching vertex, or None if no payload matches.
        """
        for vertex in self._vertices:
            if predicate(vertex.info):
                return vertex
        return None

    def contains(self, item: Union[Vertex[V], V]) -> bool:
        """Check membership of a vertex or of a payload value.

        A `Vertex` is matched by identifier in O(1). Any other value is
        compared against every vertex payload with ``==``.
        """
        if isinstance(item, Vertex):
            return item.id in self._index
        return any(vertex.info == item for vertex in self._vertices)

    def __contains__(self, item: object) -> bool:
        return self.contains(item)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.vertex_count

    def __iter__(self) -> Iterator[Vertex[V]]:
        if not self.config.snapshot_iteration:
            return iter(self._vertices)
        return self._iter_bounded(len(self._vertices))

    def _iter_bounded(self, count: int) -> Iterator[Vertex[V]]:
        for index in range(count):
            yield self._vertices[index]

    #
    # Edges
    #
    def add_edge(
        self,
        origin: Union[Vertex[V], V],
        destination: Union[Vertex[V], V],
        info: Optional[E] = None,
    ) -> Edge[E]:
        """Create a directed edge from ``origin`` to ``destination``.

        Each endpoint is either a `Vertex` of this graph or a payload value.
        A payload value is resolved to the first vertex whose payload equals
        it, which is a linear scan of the vertex arena per endpoint. Both
        endpoints are resolved before the graph is modified.

        Args:
            origin: Origin vertex or payload value.
            destination: Destination vertex or payload value.
            info: Edge payload.

        Returns:
            The new edge, appended to the origin's outgoing edges.

        Raises:
            VertexNotFoundError: If an endpoint does not resolve to a vertex
                of this graph. ``endpoint`` names the side that failed.
        """
        origin_index = self._resolve(origin, "origin")
        destination_index = self._resolve(destination, "destination")

        edge: Edge[E] = Edge(info, origin_index, destination_index, self._vertices)  # type: ignore[arg-type]
        self._out[origin_index].append(edge)
        self._edge_count += 1
        logger.debug(
            "Added edge %s -> %s (edge count %d)",
            self._vertices[origin_index].id,
            self._vertices[destination_index].id,
            self._edge_count,
        )
        return edge

    def _resolve(self, endpoint: Union[Vertex[V], V], side: str) -> int:
        if isinstance(endpoint, Vertex):
            index = self._index.get(endpoint.id)
            if index is None:
                raise VertexNotFoundError(side, endpoint)
            return index
        for index, vertex in enumerate(self._vertices):
            if vertex.info == endpoint:
                return index
        raise VertexNotFoundError(side, endpoint)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def out_edges(self, vertex: Vertex[V]) -> Tuple[Edge[E], ...]:
        """Outgoing edges of ``vertex`` in creation order.

        Raises:
            VertexNotFoundError: If ``vertex`` is not in this graph.
        """
        index = self._index.get(vertex.id)
        if index is None:
            raise VertexNotFoundError("vertex", vertex)
        return tuple(self._out[index])

    def edges(self) -> Iterator[Edge[E]]:
        """Iterate over all edges, grouped by origin in vertex order."""
        for out in self._out:
            yield from out

    #
    # Traversal
    #
    def dft(self, start: Vertex[V], visit: Callable[[Vertex[V]], Any]) -> None:
        """Depth-first traversal from ``start``; see `ugraph.traversal.dft`."""
        traversal.dft(self, start, visit)

    def iter_dft(self, start: Vertex[V]) -> Iterator[Vertex[V]]:
        return traversal.iter_dft(self, start)

    def reachable(self, start: Vertex[V]) -> Set[VertexID]:
        return traversal.reachable(self, start)

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
