from __future__ import annotations
"""Depth-first reachability queries over adjacency maps.

All walks use an explicit stack of ``(node, neighbour-iterator)`` frames, so
the visiting order is exactly that of the textbook recursive DFS while deep
graphs cannot exhaust the interpreter's recursion limit.
"""
from typing import Iterator, List, Mapping, Sequence, Set, Tuple

__all__ = ["has_directed_path", "is_weakly_connected", "has_cycle", "reachable"]

_Frame = Tuple[str, Iterator[str]]


def reachable(start: str, adjacency: Mapping[str, Sequence[str]]) -> List[str]:
    """Return every node reachable from *start* (itself included) in DFS preorder."""
    seen: Set[str] = {start}
    order: List[str] = [start]
    stack: List[_Frame] = [(start, iter(adjacency.get(start, ())))]
    while stack:
        _, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt not in seen:
                seen.add(nxt)
                order.append(nxt)
                stack.append((nxt, iter(adjacency.get(nxt, ()))))
                break
        else:
            stack.pop()
    return order


def has_directed_path(start: str, goal: str, adjacency: Mapping[str, Sequence[str]]) -> bool:
    """Return True if *goal* is reachable from *start* following edge direction.

    ``start == goal`` is trivially reachable; callers that need a non-empty
    path must check that case themselves.
    """
    if start == goal:
        return True
    seen: Set[str] = {start}
    stack: List[_Frame] = [(start, iter(adjacency.get(start, ())))]
    while stack:
        _, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt == goal:
                return True
            if nxt not in seen:
                seen.add(nxt)
                stack.append((nxt, iter(adjacency.get(nxt, ()))))
                break
        else:
            stack.pop()
    return False


def is_weakly_connected(ids: Sequence[str], undirected: Mapping[str, Sequence[str]]) -> bool:
    """Return True when one walk from the first id reaches every id.

    Zero or one node is connected; two or more nodes without edges are not.
    """
    if len(ids) <= 1:
        return True
    visited = set(reachable(ids[0], undirected))
    return all(nid in visited for nid in ids)


def has_cycle(ids: Sequence[str], adjacency: Mapping[str, Sequence[str]]) -> bool:
    """White/gray/black DFS cycle check, trying every node as a root."""
    if not ids or not any(adjacency.get(nid) for nid in ids):
        return False

    visited: Set[str] = set()
    on_stack: Set[str] = set()

    for root in ids:
        if root in visited:
            continue
        visited.add(root)
        on_stack.add(root)
        stack: List[_Frame] = [(root, iter(adjacency.get(root, ())))]
        while stack:
            current, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt in on_stack:
                    return True
                if nxt not in visited:
                    visited.add(nxt)
                    on_stack.add(nxt)
                    stack.append((nxt, iter(adjacency.get(nxt, ()))))
                    break
            else:
                on_stack.discard(current)
                stack.pop()
    return False
