import pytest

from dagette.core.graph import Edge, Node
from dagette.utils.ids import edge_id


def make_graph(ids, pairs):
    """Build ``(nodes, edges)`` from ids and ``(source, target)`` pairs."""
    nodes = [Node(id=i, label=i) for i in ids]
    edges = [Edge(id=edge_id(s, t), source=s, target=t) for s, t in pairs]
    return nodes, edges


@pytest.fixture
def chain_abc():
    return make_graph("ABC", [("A", "B"), ("B", "C")])


@pytest.fixture(autouse=True)
def _clean_event_registry():
    import dagette.utils.events as ev

    saved = {k: list(v) for k, v in ev._REGISTRY.items()}
    yield
    ev._REGISTRY.clear()
    ev._REGISTRY.update(saved)


@pytest.fixture(autouse=True)
def _logging_enabled():
    # The CLI silences logging globally when --verbose is off
    import logging

    yield
    logging.disable(logging.NOTSET)
