"""dagette: tiny, deterministic DAG validation and layout for graph editors.

Main components:
* `validate`: full DAG check (size, self-loops, cycles, connectivity)
* `can_connect`: decide whether a new edge keeps the graph a DAG
* `layout`: hierarchical rank-based positions
* `Node` / `Edge`: immutable graph snapshot types
"""

# Version info
__version__ = "0.1.0"

# Core components
from dagette.core.graph import (
    Position,
    Node,
    Edge,
    build_adjacency,
    build_undirected_adjacency,
)
from dagette.core.reachability import has_directed_path, is_weakly_connected, has_cycle
from dagette.core.result import ValidationResult, ConnectionDecision
from dagette.core.validator import validate
from dagette.core.guard import can_connect
from dagette.core.layout import LayoutConfig, compute_ranks, layout

# Editor helpers
from dagette.core.edits import create_node, add_node, connect, remove_items, apply_layout, graph_stats
from dagette.errors import GraphFormatError, UnknownNodeError

# Export all important symbols
__all__ = [
    # Model
    "Position",
    "Node",
    "Edge",
    "ValidationResult",
    "ConnectionDecision",
    "LayoutConfig",

    # Engine
    "validate",
    "can_connect",
    "layout",
    "compute_ranks",
    "build_adjacency",
    "build_undirected_adjacency",
    "has_directed_path",
    "is_weakly_connected",
    "has_cycle",

    # Editor helpers
    "create_node",
    "add_node",
    "connect",
    "remove_items",
    "apply_layout",
    "graph_stats",

    # Errors
    "GraphFormatError",
    "UnknownNodeError",
]
