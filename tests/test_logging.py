from dagette.utils.logging import get, show_dag_tree, show_validation
from dagette.core.validator import validate
from dagette.utils.dag import RenderOptions

from conftest import make_graph


def test_logger_levels():
    logger = get("debug")
    assert logger.level == 10  # DEBUG
    logger = get("error")
    assert logger.level == 40  # ERROR
    logger = get("nonsense")
    assert logger.level == 20  # falls back to INFO


def test_dag_tree_snapshot(capsys):
    nodes, edges = make_graph("AB", [("A", "B")])
    show_dag_tree(nodes, edges, opts=RenderOptions(icons_on=False))
    captured = capsys.readouterr()
    assert "Layout bands" in captured.out
    assert "rank 1" in captured.out


def test_show_validation_prints_errors(capsys):
    show_validation(validate(*make_graph("AB", [])))
    out = capsys.readouterr().out
    assert "All Connected" in out
    assert "No connections" in out
