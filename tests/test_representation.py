import pytest

from graphtrr.representation import (
    edge_degrees,
    edges_to_adjacency,
    edges_to_incidence,
    edges_to_matrix,
    matrix_degrees,
    matrix_to_adjacency,
    matrix_to_edges,
    matrix_to_incidence,
)

EDGES = [(1, 2), (2, 3), (1, 3), (3, 4), (4, 5)]
N = 5


def test_edges_matrix_round_trip():
    matrix = edges_to_matrix(N, EDGES)
    assert matrix_to_edges(matrix) == sorted(EDGES)


def test_matrix_is_symmetric_with_zero_diagonal():
    matrix = edges_to_matrix(N, EDGES)
    assert all(matrix[i][j] == matrix[j][i] for i in range(N) for j in range(N))
    assert all(matrix[i][i] == 0 for i in range(N))


def test_empty_graph_matrix():
    matrix = edges_to_matrix(3, [])
    assert len(matrix) == 3
    assert all(entry == 0 for row in matrix for entry in row)
    assert matrix_to_edges(matrix) == []


def test_degrees_agree_between_representations():
    matrix = edges_to_matrix(N, EDGES)
    assert matrix_degrees(matrix) == edge_degrees(N, EDGES)
    assert sum(edge_degrees(N, EDGES)) == 2 * len(EDGES)


def test_loop_counts_twice_in_edge_degrees():
    assert edge_degrees(2, [(1, 1)]) == [2, 0]


def test_matrix_degrees_count_row_only():
    assert matrix_degrees([[0, 1], [0, 0]]) == [1, 0]


def test_matrix_adjacency_symmetrises():
    assert matrix_to_adjacency([[0, 1], [0, 0]]) == [[2], [1]]


def test_adjacency_agrees_between_representations():
    adjacency = edges_to_adjacency(N, EDGES)
    assert adjacency == matrix_to_adjacency(edges_to_matrix(N, EDGES))
    for u, group in enumerate(adjacency, 1):
        assert group == sorted(group)
        for v in group:
            assert u in adjacency[v - 1]


def test_adjacency_collapses_duplicates():
    adjacency = edges_to_adjacency(3, [(1, 2), (2, 1), (1, 2)])
    assert adjacency == edges_to_adjacency(3, [(1, 2)])


def test_matrix_incidence_columns_follow_edges():
    matrix = edges_to_matrix(N, EDGES)
    incidence = matrix_to_incidence(matrix)
    edges = matrix_to_edges(matrix)
    assert len(incidence) == N
    for column, (u, v) in enumerate(edges):
        ones = [vertex for vertex in range(1, N + 1) if incidence[vertex - 1][column] == 1]
        assert ones == [u, v]


def test_edges_incidence_keeps_every_listed_edge():
    edges = [(1, 2), (1, 2), (2, 3)]
    incidence = edges_to_incidence(3, edges)
    assert all(len(row) == len(edges) for row in incidence)
    for column in range(len(edges)):
        assert sum(row[column] for row in incidence) == 2
    assert [sum(row) for row in incidence] == edge_degrees(3, edges)


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        matrix_degrees([[0, 1], [1]])


def test_edge_out_of_range_rejected():
    with pytest.raises(ValueError):
        edges_to_matrix(2, [(1, 3)])
    with pytest.raises(ValueError):
        edge_degrees(2, [(0, 1)])