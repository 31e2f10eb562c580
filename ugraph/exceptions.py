"""Exceptions raised by uGraph."""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for errors raised by a `Graph`."""


class InvalidArgumentError(GraphError, ValueError):
    """A required argument is missing or unusable (e.g. a non-callable visitor)."""


class VertexNotFoundError(GraphError, LookupError):
    """An edge endpoint could not be resolved to a vertex of the graph.

    Attributes:
        endpoint: Which side failed, ``"origin"`` or ``"destination"``.
        value: The vertex or payload value that was looked up.
    """

    def __init__(self, endpoint: str, value: Any) -> None:
        self.endpoint = endpoint
        self.value = value
        super().__init__(f"{endpoint.capitalize()} vertex {value!r} does not exist.")
