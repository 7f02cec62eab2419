from __future__ import annotations
"""Connection guard: decide whether a proposed edge may be added.

Evaluated before the edge exists.  ``source -> target`` closes a cycle
exactly when ``target`` already reaches ``source``, so a single directed
reachability query replaces a full re-validation.
"""
from logging import getLogger
from typing import Dict, Iterable, List, Sequence

from .graph import Adjacency, Edge
from .reachability import has_directed_path
from .result import ConnectionDecision

__all__ = ["can_connect", "edge_adjacency"]

log = getLogger(__name__)

REASON_SELF = "Cannot connect node to itself"
REASON_EXISTS = "Connection already exists"
REASON_CYCLE = "Would create a cycle"


def edge_adjacency(edges: Iterable[Edge]) -> Adjacency:
    """Directed adjacency built from edge endpoints alone (no node list)."""
    adj: Dict[str, List[str]] = {}
    for edge in edges:
        targets = adj.setdefault(edge.source, [])
        if edge.target not in targets:
            targets.append(edge.target)
    return adj


def can_connect(source_id: str, target_id: str, edges: Sequence[Edge]) -> ConnectionDecision:
    """Return whether ``source_id -> target_id`` keeps the graph a DAG."""
    if source_id == target_id:
        decision = ConnectionDecision.rejected(REASON_SELF)
    elif any(e.source == source_id and e.target == target_id for e in edges):
        decision = ConnectionDecision.rejected(REASON_EXISTS)
    elif has_directed_path(target_id, source_id, edge_adjacency(edges)):
        decision = ConnectionDecision.rejected(REASON_CYCLE)
    else:
        decision = ConnectionDecision.allowed()

    if not decision.can_connect:
        log.debug("rejected %s -> %s: %s", source_id, target_id, decision.reason)
    return decision
