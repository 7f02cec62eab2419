import json
from datetime import date, datetime, timezone

import pytest

from dagette.core.graph import Node, Position
from dagette.errors import GraphFormatError
from dagette.io.document import default_filename, dumps_document, from_document, read_document, to_document, write_document

from conftest import make_graph

TS = datetime(2024, 5, 1, 12, 30, 0, 250000, tzinfo=timezone.utc)


def test_document_shape(chain_abc):
    doc = to_document(*chain_abc, timestamp=TS)
    assert doc["nodes"][0] == {"id": "A", "name": "A", "position": {"x": 0.0, "y": 0.0}}
    assert doc["edges"][1] == {"id": "edge_B_C", "source": "B", "target": "C"}
    assert doc["metadata"] == {"nodeCount": 3, "edgeCount": 2, "timestamp": "2024-05-01T12:30:00.250Z"}


def test_round_trip_keeps_fields():
    nodes = [Node(id="n1", label="Load – données", position=Position(x=12.5, y=-3))]
    _, edges = make_graph([], [("n1", "n2")])
    back_nodes, back_edges = from_document(to_document(nodes, edges))
    assert back_nodes == nodes
    assert back_edges == edges


def test_metadata_is_optional():
    nodes, edges = from_document({"nodes": [{"id": "a"}], "edges": []})
    assert nodes[0].label == "" and edges == []


def test_bad_document_raises():
    with pytest.raises(GraphFormatError):
        from_document({"nodes": [{"name": "missing id"}]})


def test_write_and_read(tmp_path, chain_abc):
    path = write_document(tmp_path / "out" / "g.json", *chain_abc)
    text = path.read_text(encoding="utf-8")
    assert json.loads(text)["metadata"]["nodeCount"] == 3
    assert read_document(path) == (chain_abc[0], chain_abc[1])


def test_read_invalid_json(tmp_path):
    f = tmp_path / "bad.json"
    f.write_text("{nope")
    with pytest.raises(GraphFormatError):
        read_document(f)


def test_dumps_keeps_unicode():
    text = dumps_document([Node(id="x", label="é")], [])
    assert '"é"' in text


def test_default_filename():
    assert default_filename(date(2024, 1, 2)) == "dag-2024-01-02.json"


def test_read_invalid_utf8(tmp_path):
    f = tmp_path / "bad.json"
    f.write_bytes(b'{"nodes": ["\xff"]}')
    with pytest.raises(GraphFormatError):
        read_document(f)
