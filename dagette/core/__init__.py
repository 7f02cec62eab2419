"""Pure graph engine: model, reachability, validation, guard and layout."""

from .graph import Position, Node, Edge, node_ids, build_adjacency, build_undirected_adjacency
from .reachability import has_directed_path, is_weakly_connected, has_cycle
from .result import ValidationResult, ConnectionDecision
from .validator import validate
from .guard import can_connect
from .layout import LayoutConfig, compute_ranks, rank_bands, layout

__all__ = [
    "Position",
    "Node",
    "Edge",
    "node_ids",
    "build_adjacency",
    "build_undirected_adjacency",
    "has_directed_path",
    "is_weakly_connected",
    "has_cycle",
    "ValidationResult",
    "ConnectionDecision",
    "validate",
    "can_connect",
    "LayoutConfig",
    "compute_ranks",
    "rank_bands",
    "layout",
]
