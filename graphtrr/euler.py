"""Euler cycles and trails in undirected graphs."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence

from graphtrr.representation import edges_to_adjacency


class EulerKind(enum.IntEnum):
    """What kind of Euler tour a graph has."""

    NONE = 0
    CYCLE = 1
    PATH = 2


def is_connected(n: int, edges: Iterable[Sequence[int]]) -> bool:
    """True when the ``n`` vertices form exactly one connected component."""
    adjacency = edges_to_adjacency(n, edges)
    seen: set[int] = set()
    components = 0
    for root in range(1, n + 1):
        if root in seen:
            continue
        components += 1
        seen.add(root)
        stack = [root]
        while stack:
            u = stack.pop()
            for v in adjacency[u - 1]:
                if v not in seen:
                    seen.add(v)
                    stack.append(v)
    return components == 1


def classify(n: int, edges: Iterable[Sequence[int]]) -> EulerKind:
    """Classify the graph: Euler cycle, Euler trail, or neither."""
    edges = list(edges)
    if not is_connected(n, edges):
        return EulerKind.NONE
    odd = sum(1 for group in edges_to_adjacency(n, edges) if len(group) % 2)
    if odd == 0:
        return EulerKind.CYCLE
    if odd <= 2:
        return EulerKind.PATH
    return EulerKind.NONE


def euler_cycle(n: int, edges: Iterable[Sequence[int]], start: int) -> list[int]:
    """Walk every edge once from ``start``, always taking the smallest free neighbour.

    Repeated edges count once. The walk is returned as a list of vertices.
    """
    adjacency = [set(group) for group in edges_to_adjacency(n, edges)]
    if not 1 <= start <= n:
        raise ValueError(f"start vertex {start} is outside 1..{n}")
    stack = [start]
    circuit: list[int] = []
    while stack:
        u = stack[-1]
        free = adjacency[u - 1]
        if free:
            v = min(free)
            free.discard(v)
            adjacency[v - 1].discard(u)
            stack.append(v)
        else:
            circuit.append(stack.pop())
    circuit.reverse()
    return circuit