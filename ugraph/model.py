"""Vertex and edge records stored by `ugraph.graph.Graph`.

A `Vertex` carries a caller-supplied payload and a process-unique identifier.
Equality and hashing use the identifier only, so two vertices wrapping equal
payloads are still distinct.

An `Edge` is an immutable record of its payload and the arena indices of its
endpoints inside the owning graph. The ``origin`` and ``destination``
properties resolve those indices through the graph's vertex arena; the edge
never holds a vertex directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, TypeVar

from ugraph.utils.ids import new_vertex_id

V = TypeVar("V")
E = TypeVar("E")

VertexID = str


class Vertex(Generic[V]):
    """A graph vertex wrapping a payload of type ``V``.

    Attributes:
        info: The payload the vertex represents.
    """

    __slots__ = ("_id", "info")

    def __init__(self, info: V) -> None:
        self._id: VertexID = new_vertex_id()
        self.info = info

    @property
    def id(self) -> VertexID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Vertex(id={self._id!r}, info={self.info!r})"


@dataclass(frozen=True, eq=False)
class Edge(Generic[E]):
    """A directed edge with a payload of type ``E``.

    Attributes:
        info: The edge payload.
        origin_index: Arena index of the origin vertex in the owning graph.
        destination_index: Arena index of the destination vertex.
    """

    info: E
    origin_index: int
    destination_index: int
    _arena: List[Vertex[Any]] = field(repr=False)

    @property
    def origin(self) -> Vertex[Any]:
        return self._arena[self.origin_index]

    @property
    def destination(self) -> Vertex[Any]:
        return self._arena[self.destination_index]
