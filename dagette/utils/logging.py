from __future__ import annotations
"""Rich logger and console helpers.

Plain log records go through a ``RichHandler``; graph summaries (band tree,
validation checklist) are printed on the shared console.  Event subscribers
turn editor events into log lines the way the canvas shows toasts.
"""
from typing import Sequence
from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR, basicConfig
from rich.logging import RichHandler

from rich.console import Console

from dagette.core.graph import Edge, Node
from dagette.core.result import ValidationResult
from dagette.utils.constants import SYMBOLS
from dagette.utils.dag import RenderOptions, build_rich_tree, build_status_table
from dagette.utils.events import (
    subscribe,
    ConnectionCreated,
    ConnectionRejected,
    ItemsDeleted,
    LayoutApplied,
    LayoutSkipped,
)

console = Console()

__all__ = [
    "console",
    "get",
    "log",
    "show_dag_tree",
    "show_validation",
]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

# Configure root once with Rich handler for plain log messages
basicConfig(
    level=INFO,
    format="%(message)s",
    datefmt="%H:%M:%S",
    handlers=[RichHandler(console=console, rich_tracebacks=True, markup=False)],
)

log: Logger = getLogger("dagette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("dagette")
    lg.setLevel(lvl)
    return lg


# --------------------------------------------------------------------------- #
# Console output
# --------------------------------------------------------------------------- #

def show_dag_tree(nodes: Sequence[Node], edges: Sequence[Edge], opts: RenderOptions | None = None) -> None:
    console.print(build_rich_tree(nodes, edges, opts=opts))


def show_validation(result: ValidationResult) -> None:
    """Print the checklist followed by each error message."""
    console.print(build_status_table(result))
    for err in result.errors:
        console.print(f"{SYMBOLS['error']}{err}", highlight=False)


# --------------------------------------------------------------------------- #
# Editor notifications
# --------------------------------------------------------------------------- #

@subscribe(ConnectionCreated)
def _on_created(evt: ConnectionCreated) -> None:
    log.info("Connection created: %s -> %s", evt.source, evt.target)


@subscribe(ConnectionRejected)
def _on_rejected(evt: ConnectionRejected) -> None:
    log.warning("Cannot connect %s -> %s: %s", evt.source, evt.target, evt.reason)


@subscribe(ItemsDeleted)
def _on_deleted(evt: ItemsDeleted) -> None:
    log.info("Deleted %d item(s)", evt.count)


@subscribe(LayoutApplied)
def _on_layout(evt: LayoutApplied) -> None:
    log.info("Auto layout applied (%d nodes, %d bands)", evt.node_count, evt.band_count)


@subscribe(LayoutSkipped)
def _on_layout_skipped(evt: LayoutSkipped) -> None:
    log.warning("Auto layout skipped: %s", evt.reason)
