# graphtrr

Small tools for undirected graphs whose vertices are numbered `1..n`:

- converting an adjacency matrix or an edge list into vertex degrees, edge
  lists, adjacency lists, adjacency matrices and incidence matrices;
- checking whether a graph has an Euler cycle or an Euler path, and walking
  the Euler cycle from a chosen start vertex;
- listing every Hamilton cycle that starts and ends at a given vertex.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Library use

Matrices are lists of rows; row `i - 1` describes vertex `i`.

```python
from graphtrr.representation import matrix_degrees, matrix_to_edges, edges_to_matrix
from graphtrr.euler import EulerKind, classify, euler_cycle
from graphtrr.hamilton import hamilton_cycles

matrix = [
    [0, 1, 1],
    [1, 0, 1],
    [1, 1, 0],
]
matrix_degrees(matrix)          # [2, 2, 2]
matrix_to_edges(matrix)         # [(1, 2), (1, 3), (2, 3)]

edges = [(1, 2), (2, 3), (3, 1)]
edges_to_matrix(3, edges)       # the same matrix as above
classify(3, edges)              # EulerKind.CYCLE
euler_cycle(3, edges, 1)        # [1, 2, 3, 1]

hamilton_cycles(matrix, 1)      # [[1, 2, 3, 1], [1, 3, 2, 1]]
```

### `graphtrr.representation`

- `matrix_degrees(matrix)` – number of ones in each row.
- `matrix_to_edges(matrix)` – edges `(i, j)` with `i < j` from the upper
  triangle, in row order.
- `matrix_to_adjacency(matrix)` – sorted neighbour list of every vertex.
- `matrix_to_incidence(matrix)` – vertex-by-edge matrix, edges ordered as in
  `matrix_to_edges`.
- `edge_degrees(n, edges)` – degrees counted from an edge list (a loop counts
  twice).
- `edges_to_matrix(n, edges)`, `edges_to_adjacency(n, edges)` – repeated
  edges collapse into one.
- `edges_to_incidence(n, edges)` – one column per listed edge.

A matrix that is not square, a negative vertex count or an endpoint outside
`1..n` raises `ValueError`.

### `graphtrr.euler`

- `is_connected(n, edges)` – true when the graph has exactly one component.
- `classify(n, edges)` – `EulerKind.CYCLE` for a connected graph with no odd
  vertex, `EulerKind.PATH` for one with at most two, `EulerKind.NONE`
  otherwise. `EulerKind` is an `IntEnum` with values 0, 1 and 2.
- `euler_cycle(n, edges, start)` – walks every edge once from `start`, always
  taking the smallest unused neighbour; repeated edges count once.

### `graphtrr.hamilton`

- `hamilton_cycles(matrix, start)` – every Hamilton cycle through `start`, in
  lexicographic order, each ending with `start` again. A cycle and its
  reverse are both listed.

## Command line

```
graphtrr TASK [-i INPUT] [-o OUTPUT]
```

The input is whitespace-separated integers, read from `INPUT` or standard
input; the answer goes to `OUTPUT` or standard output. Malformed input is
reported on standard error with exit status 1.

| Task | Input | Output for mode 2 |
| --- | --- | --- |
| `matrix-edges` | mode, `n`, `n×n` matrix | `n m`, then one edge per line |
| `matrix-adjacency` | mode, `n`, `n×n` matrix | `n`, then per vertex its neighbour count and neighbours |
| `matrix-incidence` | mode, `n`, `n×n` matrix | `n m`, then the incidence matrix |
| `edges-matrix` | mode, `n`, `m`, `m` edges | `n`, then the adjacency matrix |
| `edges-adjacency` | mode, `n`, `m`, `m` edges | `n`, then per vertex its neighbour count and neighbours |
| `edges-incidence` | mode, `n`, `m`, `m` edges | `n m`, then the incidence matrix |

For these six tasks mode 1 prints the degree of every vertex on one line, and
any other mode prints nothing.

- `euler`: with mode 1, input `n m` and `m` edges, output `0`, `1` or `2` as
  `classify` gives. With any other mode, input `n m start` and `m` edges,
  output the Euler walk from `start`.
- `hamilton`: input `n start` and an `n×n` matrix; output the number of
  Hamilton cycles, then one cycle per line.

From Python the same work is done by `graphtrr.cli.solve(task, text)`, which
returns the output text and raises `ValueError` for an unknown task or bad
input.

```
echo "1 3 0 1 1 1 0 1 1 1 0" | graphtrr matrix-edges
```

prints `2 2 2 `.

## What it does not do

The graphs are undirected and unweighted; there are no directed graphs,
weighted edges, shortest paths or spanning trees. Hamilton cycles are found
by plain backtracking, so only small graphs are practical.