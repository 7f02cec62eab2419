import sys

from dagette.core.reachability import has_cycle, has_directed_path, is_weakly_connected, reachable


def test_directed_path_follows_direction():
    adj = {"A": ["B"], "B": ["C"], "C": []}
    assert has_directed_path("A", "C", adj)
    assert not has_directed_path("C", "A", adj)


def test_directed_path_trivial_self():
    assert has_directed_path("A", "A", {})
    assert not has_directed_path("ghost", "A", {"A": []})


def test_reachable_is_dfs_preorder():
    adj = {"A": ["B", "D"], "B": ["C"], "C": [], "D": []}
    assert reachable("A", adj) == ["A", "B", "C", "D"]


def test_weak_connectivity_degenerate_cases():
    assert is_weakly_connected([], {})
    assert is_weakly_connected(["A"], {"A": []})
    assert not is_weakly_connected(["A", "B"], {"A": [], "B": []})


def test_weak_connectivity_ignores_direction():
    und = {"A": ["B"], "B": ["A", "C"], "C": ["B"]}
    assert is_weakly_connected(["A", "B", "C"], und)
    assert not is_weakly_connected(["A", "B", "C", "D"], {**und, "D": []})


def test_cycle_in_second_component_is_found():
    # First root exhausts A -> B; the cycle lives in C <-> D.
    adj = {"A": ["B"], "B": [], "C": ["D"], "D": ["C"]}
    assert has_cycle(["A", "B", "C", "D"], adj)


def test_diamond_is_not_a_cycle():
    adj = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": []}
    assert not has_cycle(["A", "B", "C", "D"], adj)


def test_no_nodes_or_no_edges():
    assert not has_cycle([], {})
    assert not has_cycle(["A", "B"], {"A": [], "B": []})


def test_self_loop_is_a_cycle():
    assert has_cycle(["A"], {"A": ["A"]})


def test_deep_chain_does_not_hit_recursion_limit():
    n = sys.getrecursionlimit() * 2
    ids = [str(i) for i in range(n)]
    adj = {ids[i]: [ids[i + 1]] for i in range(n - 1)}
    adj[ids[-1]] = []
    assert not has_cycle(ids, adj)
    assert has_directed_path(ids[0], ids[-1], adj)
    adj[ids[-1]] = [ids[0]]
    assert has_cycle(ids, adj)
