from __future__ import annotations
"""Exceptions raised at the package edges (file loading, edit helpers).

The engine itself never raises for graph findings; see ``core.result``.
"""

__all__ = ["GraphFormatError", "UnknownNodeError"]


class GraphFormatError(ValueError):
    """A graph file or document could not be read into nodes and edges."""


class UnknownNodeError(KeyError):
    """An edit referenced a node id missing from the node list."""

    def __init__(self, node_id: str):
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:  # KeyError would repr() the id
        return f"Unknown node '{self.node_id}'"
