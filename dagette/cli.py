from __future__ import annotations

"""dagette Command Line Interface."""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.markup import escape

from dagette.core.edits import apply_layout, graph_stats
from dagette.core.graph import Edge, Node
from dagette.core.guard import can_connect
from dagette.core.layout import LayoutConfig
from dagette.core.validator import validate
from dagette.errors import GraphFormatError
from dagette.io.document import default_filename, dumps_document, write_document
from dagette.utils.dag import RenderOptions
from dagette.utils.logging import console, get, show_dag_tree, show_validation
from dagette.utils.constants import SYMBOLS
from dagette.yaml_loader import load_graph, load_layout_config

app = typer.Typer(
    name="dagette",
    help="CLI for dagette: DAG validation, connection checks and auto-layout.",
    add_completion=False,
)

_GRAPH_ARG = typer.Argument(..., help="Graph file (YAML or JSON export).", exists=True, file_okay=True, dir_okay=False, readable=True)


@app.callback()
def _main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs.")):
    """Validate and lay out directed graphs."""
    if verbose:
        logging.disable(logging.NOTSET)
        get("debug")
    else:
        # Silence library logs; command output goes through the console
        logging.disable(logging.CRITICAL)


def _load(path: Path) -> Tuple[List[Node], List[Edge]]:
    try:
        return load_graph(path)
    except GraphFormatError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/]", highlight=False)
        raise typer.Exit(code=1)


def _emit(text: str, output: Optional[Path]) -> None:
    if output is None:
        console.print_json(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    console.print(f"{SYMBOLS['success']}Wrote {output}", highlight=False)


@app.command("validate")
def validate_cmd(
    graph_file: Path = _GRAPH_ARG,
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON."),
):
    """Check that the graph is a valid DAG (exit 1 otherwise)."""
    nodes, edges = _load(graph_file)
    result = validate(nodes, edges)
    if as_json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        show_validation(result)
    if not result.is_valid:
        raise typer.Exit(code=1)


@app.command("check-edge")
def check_edge(
    graph_file: Path = _GRAPH_ARG,
    source: str = typer.Argument(..., help="Source node id."),
    target: str = typer.Argument(..., help="Target node id."),
):
    """Tell whether SOURCE -> TARGET could be added without breaking the DAG."""
    _, edges = _load(graph_file)
    decision = can_connect(source, target, edges)
    if decision.can_connect:
        console.print(f"{SYMBOLS['success']}{source} → {target} can be connected", highlight=False)
        return
    console.print(f"{SYMBOLS['error']}{source} → {target}: {decision.reason}", highlight=False)
    raise typer.Exit(code=1)


@app.command()
def layout(
    graph_file: Path = _GRAPH_ARG,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with layout spacing.", exists=True, dir_okay=False),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the laid-out document here instead of stdout."),
    icons: bool = typer.Option(True, "--icons/--no-icons", help="Show icons in the band tree."),
):
    """Assign hierarchical positions and print the resulting document."""
    nodes, edges = _load(graph_file)
    cfg = LayoutConfig()
    if config is not None:
        try:
            cfg = load_layout_config(config)
        except GraphFormatError as e:
            console.print(f"[bold red]Error: {escape(str(e))}[/]", highlight=False)
            raise typer.Exit(code=1)

    if len(nodes) < 2:
        console.print("[yellow]At least 2 nodes required for auto layout – positions unchanged.[/]")
        placed = list(nodes)
    else:
        placed = apply_layout(nodes, edges, cfg)
    if output is not None:
        show_dag_tree(placed, edges, opts=RenderOptions(icons_on=icons))
    _emit(dumps_document(placed, edges), output)


@app.command()
def export(
    graph_file: Path = _GRAPH_ARG,
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Target file or directory."),
):
    """Write the graph as an editor export document."""
    nodes, edges = _load(graph_file)
    if output is None:
        console.print_json(dumps_document(nodes, edges))
        return
    if output.is_dir():
        output = output / default_filename()
    write_document(output, nodes, edges)
    console.print(f"{SYMBOLS['success']}Wrote {output}", highlight=False)


@app.command()
def stats(graph_file: Path = _GRAPH_ARG):
    """Show node and edge counts."""
    nodes, edges = _load(graph_file)
    s = graph_stats(nodes, edges)
    console.print(f"Nodes: [bold]{s.node_count}[/]  Edges: [bold]{s.edge_count}[/]")


if __name__ == "__main__":
    app()
