from __future__ import annotations
"""Fluent operator-based DSL for building small graphs.

Example::

    nodes, edges = (pipe("load") >> ["clean", "sample"] >> "train").to_graph()

A string is one node; a list fans out from (or into) every member.  Each
edge goes through :func:`can_connect`, so an expression that would close a
cycle or loop a node onto itself fails fast with the guard's reason.
"""
from typing import Dict, List, Tuple, Union

from dagette.core.graph import Edge, Node
from dagette.core.guard import REASON_EXISTS, can_connect
from dagette.utils.ids import edge_id

Target = Union[str, List[str], "_Pipe"]

__all__ = ["pipe"]


class _Pipe:  # noqa: D401 – tiny helper
    def __init__(self, frontier: List[str], labels: Dict[str, str], edges: List[Edge]):
        self.frontier = frontier
        self.labels = labels  # insertion ordered: first-seen node order
        self.edges = edges

    # sequence operator >> -------------------------------------------------- #
    def __rshift__(self, other: Target) -> "_Pipe":
        if isinstance(other, _Pipe):
            labels = {**self.labels, **other.labels}
            heads = [nid for nid in other.labels if not any(e.target == nid for e in other.edges)]
            edges = self._link(list(self.edges), heads)
            for e in other.edges:
                edges = self._add(edges, e.source, e.target)
            return _Pipe(other.frontier, labels, edges)

        targets = [other] if isinstance(other, str) else list(other)
        labels = dict(self.labels)
        for nid in targets:
            labels.setdefault(nid, nid)
        return _Pipe(targets, labels, self._link(list(self.edges), targets))

    def _link(self, edges: List[Edge], targets: List[str]) -> List[Edge]:
        for src in self.frontier:
            for dst in targets:
                edges = self._add(edges, src, dst)
        return edges

    @staticmethod
    def _add(edges: List[Edge], src: str, dst: str) -> List[Edge]:
        decision = can_connect(src, dst, edges)
        if decision.reason == REASON_EXISTS:
            return edges
        if not decision:
            raise ValueError(f"{src} -> {dst}: {decision.reason}")
        edges.append(Edge(id=edge_id(src, dst), source=src, target=dst))
        return edges

    # convert --------------------------------------------------------------- #
    def to_graph(self) -> Tuple[List[Node], List[Edge]]:  # noqa: D401
        nodes = [Node(id=nid, label=label) for nid, label in self.labels.items()]
        return nodes, list(self.edges)


# public constructor --------------------------------------------------------- #

def pipe(start: str | List[str]) -> _Pipe:  # noqa: D401
    """Return a DSL wrapper starting at *start* (one id or a list of ids)."""
    ids = [start] if isinstance(start, str) else list(start)
    return _Pipe(ids, {nid: nid for nid in ids}, [])
