from __future__ import annotations
"""Ultra-lightweight pub/sub **EventBus** for editor notifications.

The edit helpers publish what happened (edge created, edge refused, items
deleted, layout applied); a UI subscribes and turns events into toasts or
log lines.  The pure engine in ``dagette.core`` never publishes.

Example
-------
```python
from dagette.utils.events import subscribe, ConnectionRejected

@subscribe(ConnectionRejected)
def _on_reject(evt: ConnectionRejected):
    print(f"cannot connect {evt.source} -> {evt.target}: {evt.reason}")
```
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Type, TypeVar

__all__ = [
    "Event",
    "ConnectionCreated",
    "ConnectionRejected",
    "ItemsDeleted",
    "LayoutApplied",
    "LayoutSkipped",
    "subscribe",
    "unsubscribe",
    "publish",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=_now)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class ConnectionCreated(Event):
    edge_id: str
    source: str
    target: str


@dataclass(slots=True)
class ConnectionRejected(Event):
    source: str
    target: str
    reason: str


@dataclass(slots=True)
class ItemsDeleted(Event):
    count: int


@dataclass(slots=True)
class LayoutApplied(Event):
    node_count: int
    band_count: int


@dataclass(slots=True)
class LayoutSkipped(Event):
    reason: str


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[T], func: _Handler) -> None:
    """Remove *func* from *event_type* subscribers (no-op if absent)."""
    handlers = _REGISTRY.get(event_type, [])
    if func in handlers:
        handlers.remove(func)


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in list(_REGISTRY.get(type(evt), [])):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # Failure to handle an event must never crash the main program.
            from dagette.utils.logging import log

            log.warning("event handler %s failed: %s", func.__name__, e)
