"""dagette utilities."""

from .ids import new_node_id, edge_id

__all__ = [
    "new_node_id",
    "edge_id",
]
