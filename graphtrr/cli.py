"""Command-line front end that reads the graph exercises' text format."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from graphtrr.euler import classify, euler_cycle
from graphtrr.hamilton import hamilton_cycles
from graphtrr.representation import (
    Edge,
    Matrix,
    edge_degrees,
    edges_to_adjacency,
    edges_to_incidence,
    edges_to_matrix,
    matrix_degrees,
    matrix_to_adjacency,
    matrix_to_edges,
    matrix_to_incidence,
)


class _Tokens:
    """Integers read one after another from whitespace-separated text."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def take(self) -> int:
        try:
            item = next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        try:
            return int(item)
        except ValueError:
            raise ValueError(f"not an integer: {item!r}") from None

    def count(self) -> int:
        value = self.take()
        if value < 0:
            raise ValueError(f"count must not be negative: {value}")
        return value

    def matrix(self, n: int) -> Matrix:
        return [[self.take() for _ in range(n)] for _ in range(n)]

    def edges(self, m: int) -> list[Edge]:
        return [(self.take(), self.take()) for _ in range(m)]


def _row(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values)


def _lines(rows: Iterable[Iterable[int]]) -> str:
    return "".join(_row(row) + "\n" for row in rows)


def _adjacency_text(adjacency: list[list[int]]) -> str:
    body = "".join(f"{len(group)} {_row(group)}\n" for group in adjacency)
    return f"{len(adjacency)}\n{body}"


def _matrix_edges(matrix: Matrix) -> str:
    m = sum(matrix_degrees(matrix)) // 2
    body = "".join(f"{u} {v}\n" for u, v in matrix_to_edges(matrix))
    return f"{len(matrix)} {m}\n{body}"


def _matrix_incidence(matrix: Matrix) -> str:
    m = len(matrix_to_edges(matrix))
    return f"{len(matrix)} {m}\n{_lines(matrix_to_incidence(matrix))}"


def _matrix_task(convert: Callable[[Matrix], str]) -> Callable[[_Tokens], str]:
    def run(tokens: _Tokens) -> str:
        mode = tokens.take()
        n = tokens.count()
        matrix = tokens.matrix(n)
        if mode == 1:
            return _row(matrix_degrees(matrix))
        if mode == 2:
            return convert(matrix)
        return ""

    return run


def _edges_task(convert: Callable[[int, list[Edge]], str]) -> Callable[[_Tokens], str]:
    def run(tokens: _Tokens) -> str:
        mode = tokens.take()
        n = tokens.count()
        edges = tokens.edges(tokens.count())
        if mode == 1:
            return _row(edge_degrees(n, edges))
        if mode == 2:
            return convert(n, edges)
        return ""

    return run


def _euler(tokens: _Tokens) -> str:
    if tokens.take() == 1:
        n = tokens.count()
        edges = tokens.edges(tokens.count())
        return str(classify(n, edges).value)
    n = tokens.count()
    m = tokens.count()
    start = tokens.take()
    return _row(euler_cycle(n, tokens.edges(m), start))


def _hamilton(tokens: _Tokens) -> str:
    n = tokens.count()
    start = tokens.take()
    cycles = hamilton_cycles(tokens.matrix(n), start)
    return f"{len(cycles)}\n{_lines(cycles)}"


_TASKS: dict[str, Callable[[_Tokens], str]] = {
    "matrix-edges": _matrix_task(_matrix_edges),
    "matrix-adjacency": _matrix_task(
        lambda matrix: _adjacency_text(matrix_to_adjacency(matrix))
    ),
    "matrix-incidence": _matrix_task(_matrix_incidence),
    "edges-matrix": _edges_task(
        lambda n, edges: f"{n}\n{_lines(edges_to_matrix(n, edges))}"
    ),
    "edges-adjacency": _edges_task(
        lambda n, edges: _adjacency_text(edges_to_adjacency(n, edges))
    ),
    "edges-incidence": _edges_task(
        lambda n, edges: f"{n} {len(edges)}\n{_lines(edges_to_incidence(n, edges))}"
    ),
    "euler": _euler,
    "hamilton": _hamilton,
}


def solve(task: str, text: str) -> str:
    """Run one named exercise on its input text and return the output text."""
    try:
        handler = _TASKS[task]
    except KeyError:
        raise ValueError(f"unknown task: {task!r}") from None
    return handler(_Tokens(text))


def main(argv: list[str] | None = None) -> int:
    """Read a task's input, solve it and write the answer."""
    parser = argparse.ArgumentParser(
        prog="graphtrr", description="Graph representation and tour exercises."
    )
    parser.add_argument("task", choices=sorted(_TASKS))
    parser.add_argument("-i", "--input", type=Path, help="input file (default: stdin)")
    parser.add_argument("-o", "--output", type=Path, help="output file (default: stdout)")
    args = parser.parse_args(argv)

    text = args.input.read_text() if args.input else sys.stdin.read()
    try:
        result = solve(args.task, text)
    except ValueError as error:
        print(f"graphtrr: {error}", file=sys.stderr)
        return 1
    if args.output:
        args.output.write_text(result)
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())