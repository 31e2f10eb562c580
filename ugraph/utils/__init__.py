"""Small, self-contained helpers used across uGraph."""

from ugraph.utils.ids import new_vertex_id

__all__ = ["new_vertex_id"]
