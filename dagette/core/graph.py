from __future__ import annotations
"""Graph model: nodes, edges and the adjacency builders every algorithm uses.

Nodes and edges are frozen pydantic models.  The engine never mutates them;
layout and the edit helpers hand back copies.  Adjacency lists are rebuilt
from scratch on every call (no caching), keep input order and behave like
ordered sets so duplicate edges never count twice.
"""
from logging import getLogger
from typing import Dict, Iterable, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "Position",
    "Node",
    "Edge",
    "Adjacency",
    "node_ids",
    "build_adjacency",
    "build_undirected_adjacency",
]

log = getLogger(__name__)

Adjacency = Dict[str, List[str]]


class Position(BaseModel):  # noqa: D101
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class Node(BaseModel):
    """A graph vertex.  Only *id* matters for validity."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str = ""
    position: Position = Field(default_factory=Position)


class Edge(BaseModel):
    """Directed edge ``source -> target``.

    Self-loops and duplicate pairs are representable on purpose: the
    validator reports them, the model does not reject them.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    source: str
    target: str

    @property
    def pair(self) -> tuple[str, str]:  # noqa: D401
        return self.source, self.target

    @property
    def is_self_loop(self) -> bool:  # noqa: D401
        return self.source == self.target


# --------------------------------------------------------------------------- #
# Adjacency builders
# --------------------------------------------------------------------------- #

def node_ids(nodes: Iterable[Node]) -> List[str]:
    """Return node ids in input order."""
    return [n.id for n in nodes]


def _append_once(adj: Adjacency, key: str, value: str) -> None:
    neighbours = adj[key]
    if value not in neighbours:
        neighbours.append(value)


def build_adjacency(ids: Sequence[str], edges: Iterable[Edge]) -> Adjacency:
    """Return directed adjacency ``source -> [targets]`` for *ids*.

    Every id gets an entry, even without outgoing edges.  Edges touching an
    unknown id are skipped (logged at debug level).
    """
    adj: Adjacency = {nid: [] for nid in ids}
    for edge in edges:
        if edge.source not in adj or edge.target not in adj:
            log.debug("ignoring edge %s: unknown endpoint in %s -> %s", edge.id, edge.source, edge.target)
            continue
        _append_once(adj, edge.source, edge.target)
    return adj


def build_undirected_adjacency(ids: Sequence[str], edges: Iterable[Edge]) -> Adjacency:
    """Return adjacency where each edge links both endpoints to each other."""
    adj: Adjacency = {nid: [] for nid in ids}
    for edge in edges:
        if edge.source not in adj or edge.target not in adj:
            log.debug("ignoring edge %s: unknown endpoint in %s -- %s", edge.id, edge.source, edge.target)
            continue
        _append_once(adj, edge.source, edge.target)
        _append_once(adj, edge.target, edge.source)
    return adj
