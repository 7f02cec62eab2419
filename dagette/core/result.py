from __future__ import annotations
"""Result records returned by the validator and the connection guard.

Findings travel as data, never as exceptions: a cycle or an illegal edge is
an answer, not a failure.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

__all__ = ["ValidationResult", "ConnectionDecision"]


@dataclass(frozen=True, slots=True)
class ValidationResult:  # noqa: D101
    is_valid: bool
    errors: Tuple[str, ...] = ()
    has_min_nodes: bool = False
    has_cycles: bool = False
    has_self_loops: bool = False
    all_nodes_connected: bool = False

    # ------------------------------------------------------------------ #
    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase shape the editor panels consume."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "hasMinNodes": self.has_min_nodes,
            "hasCycles": self.has_cycles,
            "hasSelfLoops": self.has_self_loops,
            "allNodesConnected": self.all_nodes_connected,
        }


@dataclass(frozen=True, slots=True)
class ConnectionDecision:  # noqa: D101
    can_connect: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.can_connect

    # Convenience constructors ----------------------------------------- #
    @staticmethod
    def allowed() -> "ConnectionDecision":  # noqa: D401
        return ConnectionDecision(can_connect=True)

    @staticmethod
    def rejected(reason: str) -> "ConnectionDecision":  # noqa: D401
        return ConnectionDecision(can_connect=False, reason=reason)

    # ------------------------------------------------------------------ #
    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"canConnect": self.can_connect}
        if self.reason is not None:
            out["reason"] = self.reason
        return out
