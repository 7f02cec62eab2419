from __future__ import annotations
"""Pure counterparts of the editor's actions.

Each helper takes the current ``(nodes, edges)`` snapshot and returns new
lists; nothing is mutated in place.  Outcomes are also published on the
event bus so a UI can surface them (toasts, status bar, logs).
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from dagette.errors import UnknownNodeError
from dagette.utils.events import (
    ConnectionCreated,
    ConnectionRejected,
    ItemsDeleted,
    LayoutApplied,
    LayoutSkipped,
    publish,
)
from dagette.utils.ids import edge_id, new_node_id

from .graph import Edge, Node, Position
from .guard import can_connect
from .layout import LayoutConfig, layout
from .result import ConnectionDecision
from .validator import MIN_NODES

__all__ = [
    "GraphStats",
    "create_node",
    "add_node",
    "connect",
    "remove_items",
    "apply_layout",
    "graph_stats",
]


@dataclass(frozen=True, slots=True)
class GraphStats:  # noqa: D101
    node_count: int
    edge_count: int


def create_node(label: str, position: Optional[Position] = None, *, node_id: Optional[str] = None) -> Node:
    """Return a new node; *label* is stripped and must not be blank."""
    name = (label or "").strip()
    if not name:
        raise ValueError("Node name is required")
    return Node(id=node_id or new_node_id(), label=name, position=position or Position())


def add_node(nodes: Sequence[Node], label: str, position: Optional[Position] = None) -> List[Node]:
    return [*nodes, create_node(label, position)]


def connect(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    source: str,
    target: str,
) -> Tuple[List[Edge], ConnectionDecision]:
    """Add ``source -> target`` if the guard allows it.

    Returns ``(edges', decision)``; on rejection ``edges'`` equals *edges*.
    Raises :class:`UnknownNodeError` if either endpoint is not in *nodes*.
    """
    known = {n.id for n in nodes}
    for nid in (source, target):
        if nid not in known:
            raise UnknownNodeError(nid)

    decision = can_connect(source, target, edges)
    if not decision.can_connect:
        publish(ConnectionRejected(source=source, target=target, reason=decision.reason or ""))
        return list(edges), decision

    edge = Edge(id=edge_id(source, target), source=source, target=target)
    publish(ConnectionCreated(edge_id=edge.id, source=source, target=target))
    return [*edges, edge], decision


def remove_items(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    node_ids: Iterable[str] = (),
    edge_ids: Iterable[str] = (),
) -> Tuple[List[Node], List[Edge], int]:
    """Drop selected nodes (with their incident edges) and selected edges.

    The count covers selected items that were actually present; edges removed
    only because an endpoint went away are not counted.
    """
    drop_nodes = set(node_ids)
    drop_edges = set(edge_ids)

    kept_nodes = [n for n in nodes if n.id not in drop_nodes]
    kept_edges = [
        e for e in edges
        if e.id not in drop_edges and e.source not in drop_nodes and e.target not in drop_nodes
    ]
    count = (len(nodes) - len(kept_nodes)) + sum(1 for e in edges if e.id in drop_edges)
    if count:
        publish(ItemsDeleted(count=count))
    return kept_nodes, kept_edges, count


def apply_layout(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    config: Optional[LayoutConfig] = None,
) -> List[Node]:
    """Run :func:`layout` unless the graph is too small to be worth it."""
    if len(nodes) < MIN_NODES:
        publish(LayoutSkipped(reason=f"At least {MIN_NODES} nodes required for auto layout"))
        return list(nodes)

    placed = layout(nodes, edges, config)
    bands = len({n.position.y for n in placed})
    publish(LayoutApplied(node_count=len(placed), band_count=bands))
    return placed


def graph_stats(nodes: Sequence[Node], edges: Sequence[Edge]) -> GraphStats:
    return GraphStats(node_count=len(nodes), edge_count=len(edges))
