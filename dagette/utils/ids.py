from __future__ import annotations

"""dagette.utils.ids
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Tiny helpers for consistent identifier formatting.

Node ids look like ``node_k3j9x0a2b`` and edge ids like ``edge_<src>_<dst>``,
the shapes the editor canvas produces.
"""

import secrets
import string

__all__ = ["new_node_id", "edge_id"]

_ALPHABET = string.digits + string.ascii_lowercase


def new_node_id() -> str:
    """Return ``node_`` followed by 9 random base-36 characters."""
    return "node_" + "".join(secrets.choice(_ALPHABET) for _ in range(9))


def edge_id(source: str, target: str) -> str:  # noqa: D401
    """Return the canonical id for the edge ``source -> target``."""
    return f"edge_{source}_{target}"
