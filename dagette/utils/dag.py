from __future__ import annotations

"""DAG renderers (no side-effects).

build_rich_tree(nodes, edges) returns a Rich *Tree* of layout bands.
build_status_table(result) returns the validation checklist as a Rich *Table*.
"""
from dataclasses import dataclass
from typing import Dict, Sequence

from dagette.core.graph import Edge, Node, node_ids
from dagette.core.layout import compute_ranks, rank_bands
from dagette.core.result import ValidationResult
from dagette.utils.constants import CHECK, CROSS, STYLE, SYMBOLS

__all__ = [
    "RenderOptions",
    "build_rich_tree",
    "build_status_table",
]


@dataclass
class RenderOptions:  # noqa: D101
    icons_on: bool = True
    max_nodes: int = 12  # per band, rest collapsed into "+N more"
    show_ids: bool = False


# --------------------------------------------------------------------------- #
# Band tree
# --------------------------------------------------------------------------- #

def build_rich_tree(
    nodes: Sequence[Node],
    edges: Sequence[Edge],
    opts: RenderOptions | None = None,
):  # noqa: D401 – return type is Tree but avoid import
    """Return a *rich.tree.Tree* with one branch per layout band."""
    from rich.tree import Tree  # local import keeps this module lightweight

    opts = opts or RenderOptions()
    ids = list(dict.fromkeys(node_ids(nodes)))
    labels: Dict[str, str] = {n.id: n.label or n.id for n in nodes}
    bands = rank_bands(ids, compute_ranks(ids, edges))

    title_icon = SYMBOLS["graph"] if opts.icons_on else ""
    tree = Tree(f"{title_icon}[bold]Layout bands[/]")
    for r, band in enumerate(bands):
        band_icon = SYMBOLS["band"] if opts.icons_on else ""
        branch = tree.add(f"{band_icon}[{STYLE['band']}]rank {r}[/] [dim]({len(band)})[/]")
        for nid in band[: opts.max_nodes]:
            node_icon = SYMBOLS["node"] if opts.icons_on else ""
            text = f"{node_icon}[{STYLE['node']}]{labels[nid]}[/]"
            if opts.show_ids:
                text += f" [dim]{nid}[/]"
            branch.add(text)
        hidden = len(band) - opts.max_nodes
        if hidden > 0:
            branch.add(f"[dim]+{hidden} more…[/]")
    return tree


# --------------------------------------------------------------------------- #
# Validation checklist
# --------------------------------------------------------------------------- #

def _mark(ok: bool) -> str:
    return f"[{STYLE['success']}]{CHECK}[/]" if ok else f"[{STYLE['error']}]{CROSS}[/]"


def build_status_table(result: ValidationResult):  # noqa: D401
    """Return a *rich.table.Table* mirroring the editor's validation panel."""
    from rich.table import Table

    table = Table(title="DAG Validation", show_header=False, title_style=STYLE["header"])
    table.add_column("Check", style="dim")
    table.add_column("Status", justify="center")

    table.add_row("Valid DAG", "[bold green]Yes[/]" if result.is_valid else "[bold red]No[/]")
    table.add_row("Min Nodes (≥2)", _mark(result.has_min_nodes))
    table.add_row("No Self-Loops", _mark(not result.has_self_loops))
    table.add_row("No Cycles", _mark(not result.has_cycles))
    table.add_row("All Connected", _mark(result.all_nodes_connected))
    return table
