"""Enumeration of Hamilton cycles through a given vertex."""

from __future__ import annotations

from collections.abc import Iterable

from graphtrr.representation import _square


def hamilton_cycles(matrix: Iterable[Iterable[int]], start: int) -> list[list[int]]:
    """All Hamilton cycles from ``start`` in the adjacency matrix, in lexicographic order.

    Each cycle lists the ``n`` vertices followed by ``start`` again; a cycle and its
    reverse are both reported.
    """
    rows = _square(matrix)
    n = len(rows)
    if not 1 <= start <= n:
        raise ValueError(f"start vertex {start} is outside 1..{n}")
    path = [start]
    visited = {start}
    cycles: list[list[int]] = []

    def extend() -> None:
        for vertex, entry in enumerate(rows[path[-1] - 1], 1):
            if entry != 1:
                continue
            if len(path) == n and vertex == start:
                cycles.append(path + [start])
            elif vertex not in visited:
                visited.add(vertex)
                path.append(vertex)
                extend()
                path.pop()
                visited.remove(vertex)

    extend()
    return cycles