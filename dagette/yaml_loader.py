from __future__ import annotations
"""Minimal YAML/JSON → graph loader.

Accepts the editor's export document as-is, and a compact authoring form:

```yaml
nodes:
  - extract                 # bare id, label = id
  - {id: clean, label: Clean data}
edges:
  - extract -> clean        # arrow string
  - [clean, train]          # pair
  - {source: train, target: report, id: e4}
```

JSON is valid YAML, so one ``yaml.safe_load`` reads both.  Files are
checked against a JSON Schema before any model is built.

Also hosts :func:`load_layout_config` for layout spacing files.
"""
import warnings
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml
from jsonschema import ValidationError as SchemaError
from jsonschema import validate as _js_validate
from pydantic import ValidationError

from dagette.core.graph import Edge, Node, Position
from dagette.core.layout import LayoutConfig
from dagette.errors import GraphFormatError
from dagette.utils.ids import edge_id

__all__ = ["load_graph", "parse_graph", "load_layout_config"]


# --------------------------------------------------------------------------- #

def _read_yaml(path: str | Path) -> Any:
    try:
        return yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError, OSError) as e:
        raise GraphFormatError(f"{path}: cannot parse ({e})") from e


def _check(data: Any, schema: Dict[str, Any], where: str) -> None:
    try:
        _js_validate(instance=data, schema=schema)
    except SchemaError as e:
        raise GraphFormatError(f"{where}: {e.message}") from e


def _node(item: Any) -> Node:  # noqa: D401
    if isinstance(item, str):
        return Node(id=item, label=item)
    label = item.get("label", item.get("name"))
    return Node(
        id=item["id"],
        label=item["id"] if label is None else label,
        position=Position(**item.get("position", {})),
    )


def _edge(item: Any) -> Edge:  # noqa: D401
    if isinstance(item, str):
        parts = [part.strip() for part in item.split("->")]
        if len(parts) != 2 or not all(parts):
            raise GraphFormatError(f"edge '{item}' must look like 'source -> target'")
        source, target = parts
    elif isinstance(item, list):
        source, target = item
    else:
        source, target = item["source"], item["target"]
        if item.get("id"):
            return Edge(id=item["id"], source=source, target=target)
    return Edge(id=edge_id(source, target), source=source, target=target)


def parse_graph(data: Any, where: str = "<graph>") -> Tuple[List[Node], List[Edge]]:
    """Validate *data* (already decoded) and build nodes/edges."""
    _check(data, _GRAPH_SCHEMA, where)
    try:
        nodes = [_node(item) for item in data.get("nodes") or []]
        edges = [_edge(item) for item in data.get("edges") or []]
    except ValidationError as e:
        raise GraphFormatError(f"{where}: {e}") from e
    return nodes, edges


def load_graph(path: str | Path) -> Tuple[List[Node], List[Edge]]:  # noqa: D401
    """Load YAML or JSON file at *path* into ``(nodes, edges)``."""
    return parse_graph(_read_yaml(path), where=str(path))


def load_layout_config(path: str | Path) -> LayoutConfig:
    """Load a YAML mapping of :class:`LayoutConfig` fields.

    Unknown keys are kept in ``extra`` (with a warning) so newer files still
    load.
    """
    data = _read_yaml(path) or {}
    _check(data, _LAYOUT_SCHEMA, str(path))
    known = {f.name for f in fields(LayoutConfig)} - {"extra"}
    extra = {k: v for k, v in data.items() if k not in known}
    if extra:
        warnings.warn(f"unknown layout option(s) ignored: {', '.join(sorted(extra))}", UserWarning)
    return LayoutConfig(**{k: v for k, v in data.items() if k in known}, extra=extra)


# --------------------------------------------------------------------------- #
# JSON Schemas
# --------------------------------------------------------------------------- #

_POSITION = {
    "type": "object",
    "properties": {"x": {"type": "number"}, "y": {"type": "number"}},
    "additionalProperties": False,
}

_GRAPH_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "nodes": {
            "type": ["array", "null"],
            "items": {
                "anyOf": [
                    {"type": "string", "minLength": 1},
                    {
                        "type": "object",
                        "required": ["id"],
                        "properties": {
                            "id": {"type": "string", "minLength": 1},
                            "label": {"type": "string"},
                            "name": {"type": "string"},
                            "position": _POSITION,
                        },
                    },
                ]
            },
        },
        "edges": {
            "type": ["array", "null"],
            "items": {
                "anyOf": [
                    {"type": "string", "pattern": "->"},
                    {
                        "type": "array",
                        "items": {"type": "string"},
                        "minItems": 2,
                        "maxItems": 2,
                    },
                    {
                        "type": "object",
                        "required": ["source", "target"],
                        "properties": {
                            "id": {"type": "string"},
                            "source": {"type": "string"},
                            "target": {"type": "string"},
                        },
                    },
                ]
            },
        },
        "metadata": {"type": "object"},
    },
}

_LAYOUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "node_width": {"type": "number", "exclusiveMinimum": 0},
        "node_height": {"type": "number", "exclusiveMinimum": 0},
        "node_sep": {"type": "number", "minimum": 0},
        "rank_sep": {"type": "number", "minimum": 0},
    },
}
