from rich.console import Console

from dagette.core.validator import validate
from dagette.utils.dag import RenderOptions, build_rich_tree, build_status_table

from conftest import make_graph


def _render(renderable) -> str:
    console = Console(force_terminal=False, width=80, record=True)
    console.print(renderable)
    return console.export_text()


def test_band_tree_lists_ranks():
    nodes, edges = make_graph("ABCD", [("A", "B"), ("A", "C"), ("B", "D")])
    out = _render(build_rich_tree(nodes, edges, opts=RenderOptions(icons_on=False)))
    assert "Layout bands" in out
    assert "rank 0" in out and "rank 2" in out
    assert out.index("B") < out.index("C") < out.index("D")


def test_band_tree_truncates():
    nodes, edges = make_graph("ABCDE", [])
    out = _render(build_rich_tree(nodes, edges, opts=RenderOptions(icons_on=False, max_nodes=2)))
    assert "+3 more" in out
    assert "E" not in out.split("rank 0")[1].split("+3")[0]


def test_show_ids():
    nodes, edges = make_graph("A", [])
    out = _render(build_rich_tree(nodes, edges, opts=RenderOptions(show_ids=True)))
    assert "A A" in out


def test_status_table_marks():
    res = validate(*make_graph("ABC", [("A", "B"), ("B", "C"), ("C", "A")]))
    out = _render(build_status_table(res))
    assert "DAG Validation" in out
    assert "No Cycles" in out and "✗" in out
    assert "No" in out
