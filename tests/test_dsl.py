import pytest

from dagette.core.validator import validate
from dagette.dsl import pipe


def test_pipe_chain_to_graph():
    nodes, edges = (pipe("load") >> "clean" >> "train").to_graph()
    assert [n.id for n in nodes] == ["load", "clean", "train"]
    assert [(e.source, e.target) for e in edges] == [("load", "clean"), ("clean", "train")]
    assert edges[0].id == "edge_load_clean"
    assert validate(nodes, edges).is_valid


def test_fan_out_and_in():
    nodes, edges = (pipe("a") >> ["b", "c"] >> "d").to_graph()
    assert {(e.source, e.target) for e in edges} == {("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")}


def test_joining_pipes():
    left = pipe("a") >> "b"
    right = pipe("c") >> "d"
    nodes, edges = (left >> right).to_graph()
    assert [n.id for n in nodes] == ["a", "b", "c", "d"]
    assert ("b", "c") in {(e.source, e.target) for e in edges}


def test_repeated_edge_is_merged():
    nodes, edges = (pipe("a") >> ["b", "b"]).to_graph()
    assert [n.id for n in nodes] == ["a", "b"]
    assert len(edges) == 1


def test_cycle_expression_raises():
    with pytest.raises(ValueError, match="cycle"):
        pipe("a") >> "b" >> "a"


def test_self_loop_expression_raises():
    with pytest.raises(ValueError, match="itself"):
        pipe("a") >> "a"
