from __future__ import annotations
"""Full-graph DAG validation.

Four checks always run so every flag is populated for partial feedback:
minimum size, self-loops, cycles and weak connectivity.  Messages follow
that order.
"""
from logging import getLogger
from typing import List, Sequence

from .graph import Edge, Node, build_adjacency, build_undirected_adjacency, node_ids
from .reachability import has_cycle, is_weakly_connected
from .result import ValidationResult

__all__ = ["validate", "MIN_NODES"]

log = getLogger(__name__)

MIN_NODES = 2

MSG_NO_NODES = "No nodes present - add at least 2 nodes"
MSG_ONE_NODE = "Only one node present - add at least one more node"
MSG_SELF_LOOPS = "Self-loops detected - a node cannot connect to itself"
MSG_CYCLE = "Cycle detected - graph is not a valid DAG"
MSG_NO_EDGES = "No connections - all nodes must be connected"
MSG_ISOLATED = "Some nodes are isolated - all nodes must be connected"


def validate(nodes: Sequence[Node], edges: Sequence[Edge]) -> ValidationResult:  # noqa: D401
    """Return a :class:`ValidationResult` for the graph ``(nodes, edges)``."""
    errors: List[str] = []
    ids = node_ids(nodes)

    # 1. size
    has_min_nodes = len(ids) >= MIN_NODES
    if not has_min_nodes:
        errors.append(MSG_NO_NODES if not ids else MSG_ONE_NODE)

    # 2. self-loops
    has_self_loops = any(e.is_self_loop for e in edges)
    if has_self_loops:
        errors.append(MSG_SELF_LOOPS)

    # 3. cycles (edgeless and singleton graphs skip the walk)
    has_cycles = False
    if edges and len(ids) > 1:
        has_cycles = has_cycle(ids, build_adjacency(ids, edges))
        if has_cycles:
            errors.append(MSG_CYCLE)

    # 4. weak connectivity
    undirected = build_undirected_adjacency(ids, edges)
    all_nodes_connected = is_weakly_connected(ids, undirected)
    if not all_nodes_connected and len(ids) > 1:
        linked = any(undirected[nid] for nid in ids)
        errors.append(MSG_ISOLATED if linked else MSG_NO_EDGES)

    is_valid = has_min_nodes and not has_cycles and all_nodes_connected and not has_self_loops
    log.debug("validated %d nodes / %d edges: valid=%s", len(ids), len(edges), is_valid)

    return ValidationResult(
        is_valid=is_valid,
        errors=tuple(errors),
        has_min_nodes=has_min_nodes,
        has_cycles=has_cycles,
        has_self_loops=has_self_loops,
        all_nodes_connected=all_nodes_connected,
    )
