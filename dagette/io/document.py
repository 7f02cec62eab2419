"""
Graph document codec – the JSON export shown and downloaded by the editor.

Shape::

    {
      "nodes": [{"id": ..., "name": ..., "position": {"x": ..., "y": ...}}],
      "edges": [{"id": ..., "source": ..., "target": ...}],
      "metadata": {"nodeCount": ..., "edgeCount": ..., "timestamp": "...Z"}
    }
"""

from __future__ import annotations

import json
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dagette.core.graph import Edge, Node, Position
from dagette.errors import GraphFormatError

__all__ = [
    "GraphDocument",
    "to_document",
    "from_document",
    "dumps_document",
    "write_document",
    "read_document",
    "default_filename",
]


class _DocNode(BaseModel):
    id: str
    name: str = ""
    position: Position = Field(default_factory=Position)


class _DocEdge(BaseModel):
    id: str
    source: str
    target: str


class _Metadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    node_count: int = Field(alias="nodeCount")
    edge_count: int = Field(alias="edgeCount")
    timestamp: str


class GraphDocument(BaseModel):  # noqa: D101
    nodes: List[_DocNode] = Field(default_factory=list)
    edges: List[_DocEdge] = Field(default_factory=list)
    metadata: _Metadata | None = None


# -------------------------------------------------------------- #

def _iso_z(ts: datetime) -> str:
    ts = ts.astimezone(timezone.utc)
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def to_document(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    *,
    timestamp: datetime | None = None,
) -> Dict[str, Any]:
    """Return the JSON-ready export dict for ``(nodes, edges)``."""
    doc = GraphDocument(
        nodes=[_DocNode(id=n.id, name=n.label, position=n.position) for n in nodes],
        edges=[_DocEdge(id=e.id, source=e.source, target=e.target) for e in edges],
        metadata=_Metadata(
            node_count=len(nodes),
            edge_count=len(edges),
            timestamp=_iso_z(timestamp or datetime.now(timezone.utc)),
        ),
    )
    return doc.model_dump(mode="json", by_alias=True)


def from_document(data: Any) -> Tuple[List[Node], List[Edge]]:
    """Parse an export dict back into engine nodes and edges.

    Metadata is optional and ignored; counts are recomputed from the lists.
    """
    try:
        doc = GraphDocument.model_validate(data)
    except ValidationError as e:
        raise GraphFormatError(f"invalid graph document: {e}") from e
    nodes = [Node(id=n.id, label=n.name, position=n.position) for n in doc.nodes]
    edges = [Edge(id=e.id, source=e.source, target=e.target) for e in doc.edges]
    return nodes, edges


def dumps_document(nodes: Sequence[Node], edges: Sequence[Edge], **kw: Any) -> str:
    """Serialise with 2-space indent, keeping non-ASCII labels readable."""
    return json.dumps(to_document(nodes, edges, **kw), indent=2, ensure_ascii=False)


def write_document(path: Path, nodes: Sequence[Node], edges: Sequence[Edge], **kw: Any) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps_document(nodes, edges, **kw) + "\n")
    return path


def read_document(path: Path) -> Tuple[List[Node], List[Edge]]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise GraphFormatError(f"{path}: cannot read JSON ({e})") from e
    return from_document(data)


def default_filename(today: date | None = None) -> str:
    """Return ``dag-YYYY-MM-DD.json`` (the editor's download name)."""
    return f"dag-{(today or date.today()).isoformat()}.json"
