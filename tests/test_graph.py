from dagette.core.graph import Edge, Node, Position, build_adjacency, build_undirected_adjacency, node_ids

from conftest import make_graph


def test_directed_adjacency_has_every_node():
    nodes, edges = make_graph("ABCD", [("A", "B"), ("A", "C"), ("C", "D")])
    adj = build_adjacency(node_ids(nodes), edges)
    assert adj == {"A": ["B", "C"], "B": [], "C": ["D"], "D": []}


def test_undirected_adjacency_links_both_endpoints():
    nodes, edges = make_graph("ABC", [("A", "B"), ("C", "B")])
    adj = build_undirected_adjacency(node_ids(nodes), edges)
    assert adj == {"A": ["B"], "B": ["A", "C"], "C": ["B"]}


def test_unknown_endpoints_are_ignored():
    nodes, _ = make_graph("AB", [])
    edges = [Edge(id="e1", source="A", target="ghost"), Edge(id="e2", source="ghost", target="B")]
    assert build_adjacency(node_ids(nodes), edges) == {"A": [], "B": []}
    assert build_undirected_adjacency(node_ids(nodes), edges) == {"A": [], "B": []}


def test_duplicate_edges_count_once():
    nodes, edges = make_graph("AB", [("A", "B"), ("A", "B")])
    assert build_adjacency(node_ids(nodes), edges) == {"A": ["B"], "B": []}
    assert build_undirected_adjacency(node_ids(nodes), edges) == {"A": ["B"], "B": ["A"]}


def test_self_loop_kept_in_directed_view():
    nodes, edges = make_graph("A", [("A", "A")])
    assert build_adjacency(["A"], edges) == {"A": ["A"]}
    assert build_undirected_adjacency(["A"], edges) == {"A": ["A"]}
    assert edges[0].is_self_loop


def test_node_defaults_and_immutability():
    n = Node(id="x")
    assert n.label == "" and n.position == Position(x=0, y=0)
    moved = n.model_copy(update={"position": Position(x=1, y=2)})
    assert n.position.x == 0 and moved.position.y == 2
