from __future__ import annotations
"""Deterministic hierarchical (rank based) auto-layout.

1. rank   = longest directed path ending at the node (sources are rank 0),
            computed with Kahn-style topological processing;
2. bands  = one horizontal band per rank, nodes kept in input order;
3. coords = fixed slot width / band height, bands centred under the widest.

Layout is total.  Nodes sitting on a cycle, or downstream of one, are never
released by the topological pass; they are *unresolved* and placed in band 0.
Each node is processed at most once so the pass is bounded by ``len(nodes)``
whatever the edges look like.
"""
from collections import deque
from dataclasses import dataclass, field
from logging import getLogger
from typing import Any, Deque, Dict, List, Optional, Sequence

from .graph import Edge, Node, Position, build_adjacency, node_ids

__all__ = ["LayoutConfig", "compute_ranks", "rank_bands", "layout"]

log = getLogger(__name__)


@dataclass
class LayoutConfig:
    """Footprint and spacing (pixels) used to place nodes.

    Defaults match the editor canvas: 150x50 nodes, 80 px between siblings
    and 100 px between bands.
    """

    node_width: float = 150
    node_height: float = 50
    node_sep: float = 80
    rank_sep: float = 100

    # Unknown keys read from config files
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def slot_width(self) -> float:  # noqa: D401
        return self.node_width + self.node_sep

    @property
    def band_height(self) -> float:  # noqa: D401
        return self.node_height + self.rank_sep


# --------------------------------------------------------------------------- #
# Ranking
# --------------------------------------------------------------------------- #

def compute_ranks(ids: Sequence[str], edges: Sequence[Edge]) -> Dict[str, int]:
    """Return ``{node_id: rank}`` for every id.

    Self-loops and duplicate edges are ignored.  Unresolved nodes (cycles)
    fall back to rank 0.
    """
    ids = list(dict.fromkeys(ids))
    adjacency = build_adjacency(ids, [e for e in edges if not e.is_self_loop])
    indegree: Dict[str, int] = {nid: 0 for nid in ids}
    for targets in adjacency.values():
        for target in targets:
            indegree[target] += 1

    rank: Dict[str, int] = {nid: 0 for nid in ids}
    queue: Deque[str] = deque(nid for nid in ids if indegree[nid] == 0)
    resolved = 0
    while queue:
        current = queue.popleft()
        resolved += 1
        for target in adjacency[current]:
            rank[target] = max(rank[target], rank[current] + 1)
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)

    if resolved < len(ids):
        log.warning("layout: %d node(s) on or below a cycle placed at rank 0", len(ids) - resolved)
        for nid in ids:
            if indegree[nid] > 0:
                rank[nid] = 0
    return rank


def rank_bands(ids: Sequence[str], ranks: Dict[str, int]) -> List[List[str]]:
    """Group *ids* into bands ``0..max_rank`` keeping input order."""
    if not ids:
        return []
    bands: List[List[str]] = [[] for _ in range(max(ranks.values()) + 1)]
    for nid in ids:
        bands[ranks[nid]].append(nid)
    return bands


# --------------------------------------------------------------------------- #
# Placement
# --------------------------------------------------------------------------- #

def layout(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    config: Optional[LayoutConfig] = None,
) -> List[Node]:
    """Return copies of *nodes* (same order) with positions rewritten.

    ``position`` is the top-left corner: the slot centre minus half the node
    footprint.
    """
    cfg = config or LayoutConfig()
    ids = list(dict.fromkeys(node_ids(nodes)))
    bands = rank_bands(ids, compute_ranks(ids, edges))
    widest = max((len(b) for b in bands), default=0)

    placed: Dict[str, Position] = {}
    for r, band in enumerate(bands):
        offset = (widest - len(band)) * cfg.slot_width / 2
        cy = r * cfg.band_height + cfg.node_height / 2
        for i, nid in enumerate(band):
            cx = offset + i * cfg.slot_width + cfg.node_width / 2
            placed[nid] = Position(x=cx - cfg.node_width / 2, y=cy - cfg.node_height / 2)

    log.debug("layout: %d nodes in %d band(s)", len(ids), len(bands))
    return [n.model_copy(update={"position": placed[n.id]}) for n in nodes]
