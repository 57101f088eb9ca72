"""Conversions between adjacency matrices, edge lists, adjacency lists and incidence matrices.

Vertices are numbered from 1. Matrices are lists of rows, and row ``i - 1``
describes vertex ``i``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

Matrix = list[list[int]]
Edge = tuple[int, int]


def _square(matrix: Iterable[Iterable[int]]) -> Matrix:
    """Return the matrix as a list of lists, checking that it is square."""
    rows = [list(row) for row in matrix]
    size = len(rows)
    for number, row in enumerate(rows, 1):
        if len(row) != size:
            raise ValueError(
                f"row {number} has {len(row)} entries, expected {size}"
            )
    return rows


def _edge_list(n: int, edges: Iterable[Sequence[int]]) -> list[Edge]:
    """Return the edges as tuples, checking that every endpoint is a vertex."""
    if n < 0:
        raise ValueError(f"vertex count must not be negative: {n}")
    result = []
    for edge in edges:
        u, v = edge
        for vertex in (u, v):
            if not 1 <= vertex <= n:
                raise ValueError(f"vertex {vertex} is outside 1..{n}")
        result.append((u, v))
    return result


def _incidence(n: int, edges: Sequence[Edge]) -> Matrix:
    return [[1 if vertex in edge else 0 for edge in edges] for vertex in range(1, n + 1)]


def matrix_degrees(matrix: Iterable[Iterable[int]]) -> list[int]:
    """Degree of every vertex: the number of ones in its row."""
    return [sum(1 for entry in row if entry == 1) for row in _square(matrix)]


def matrix_to_edges(matrix: Iterable[Iterable[int]]) -> list[Edge]:
    """Edges ``(i, j)`` with ``i < j`` read from the upper triangle, in row order."""
    rows = _square(matrix)
    return [
        (i, j)
        for i, row in enumerate(rows, 1)
        for j, entry in enumerate(row, 1)
        if i < j and entry == 1
    ]


def matrix_to_adjacency(matrix: Iterable[Iterable[int]]) -> list[list[int]]:
    """Sorted neighbour list of every vertex; each one in the matrix links both ways."""
    rows = _square(matrix)
    neighbours: list[set[int]] = [set() for _ in rows]
    for i, row in enumerate(rows, 1):
        for j, entry in enumerate(row, 1):
            if entry == 1:
                neighbours[i - 1].add(j)
                neighbours[j - 1].add(i)
    return [sorted(group) for group in neighbours]


def matrix_to_incidence(matrix: Iterable[Iterable[int]]) -> Matrix:
    """Vertex-by-edge incidence matrix, with edges ordered as in :func:`matrix_to_edges`."""
    rows = _square(matrix)
    return _incidence(len(rows), matrix_to_edges(rows))


def edge_degrees(n: int, edges: Iterable[Sequence[int]]) -> list[int]:
    """Degree of every vertex counted from the edge list; a loop counts twice."""
    counts: Counter[int] = Counter()
    for u, v in _edge_list(n, edges):
        counts[u] += 1
        counts[v] += 1
    return [counts[vertex] for vertex in range(1, n + 1)]


def edges_to_matrix(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """Symmetric 0/1 adjacency matrix of the edge list; repeated edges collapse."""
    matrix = [[0] * n for _ in range(n)]
    for u, v in _edge_list(n, edges):
        matrix[u - 1][v - 1] = 1
        matrix[v - 1][u - 1] = 1
    return matrix


def edges_to_adjacency(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Sorted neighbour list of every vertex; repeated edges collapse."""
    neighbours: list[set[int]] = [set() for _ in range(n)]
    for u, v in _edge_list(n, edges):
        neighbours[u - 1].add(v)
        neighbours[v - 1].add(u)
    return [sorted(group) for group in neighbours]


def edges_to_incidence(n: int, edges: Iterable[Sequence[int]]) -> Matrix:
    """Vertex-by-edge incidence matrix with one column per listed edge."""
    return _incidence(n, _edge_list(n, edges))