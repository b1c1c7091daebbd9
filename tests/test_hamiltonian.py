"""Tests for the pruned Hamiltonian path search and result assembly."""

import sys
import os
import random
from itertools import permutations

import numpy as np
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import board_positions
from core.errors import SearchBudgetExceededError
from solvers import (
    build_adjacency,
    find_hamiltonian_path,
    to_coordinates,
    is_valid_path,
    HamiltonianSearch
)


def random_graph(n_nodes, edge_prob, rng):
    neighbours = [set() for _ in range(n_nodes)]
    for i in range(n_nodes):
        for j in range(i + 1, n_nodes):
            if rng.random() < edge_prob:
                neighbours[i].add(j)
                neighbours[j].add(i)
    return [sorted(nbrs) for nbrs in neighbours]


def brute_force_exists(neighbours, origin):
    rest = [n for n in range(len(neighbours)) if n != origin]
    for perm in permutations(rest):
        path = (origin,) + perm
        if all(b in neighbours[a] for a, b in zip(path, path[1:])):
            return True
    return False


def three_cell_board():
    """A=(0,0), B=(1,2), C=(3,1): only A-B and B-C are knight moves."""
    board = np.zeros((4, 4), dtype=bool)
    board[0, 0] = board[1, 2] = board[3, 1] = True
    return board


def test_three_cell_scenario():
    board = three_cell_board()
    graph = build_adjacency(board)

    path = find_hamiltonian_path(graph, 0, graph.size)

    assert path == [0, 1, 2]
    assert to_coordinates(path, board_positions(board, one_based=True)) == [(1, 1), (2, 3), (4, 2)]
    assert to_coordinates(path, graph.cells) == [(0, 0), (1, 2), (3, 1)]


def test_single_cell_is_trivial_path():
    graph = build_adjacency([[True]])
    search = HamiltonianSearch(graph)

    assert search.run(0, 1) == [0]
    assert search.nodes == 0


def test_isolated_origin_not_found():
    board = np.zeros((3, 3), dtype=bool)
    board[0, 0] = board[1, 1] = True

    assert find_hamiltonian_path(build_adjacency(board), 0, 2) is None


def test_zero_degree_node_prunes_branch():
    # Node 3 hangs off the origin only; once the path leaves 0 for 1,
    # node 3 can never be reached again.
    neighbours = [[1, 3], [0, 2], [1], [0]]
    search = HamiltonianSearch(neighbours)
    visited = np.array([True, True, False, False])

    assert search.candidates([0, 1], visited) == []
    assert search.candidates([0, 1], visited, prune=False) == [2]
    assert search.run(0, 4) is None
    # 0 -> 3 (pruned: two dead ends), 0 -> 1 (pruned: node 3 unreachable)
    assert search.nodes == 2


def test_two_dead_ends_prune_branch():
    # Triangle 0-1-2 with tail 2-3; path 0-2 strands both 1 and 3
    neighbours = [[1, 2], [0, 2], [0, 1, 3], [2]]
    search = HamiltonianSearch(neighbours)
    visited = np.array([True, False, True, False])

    assert search.candidates([0, 2], visited) == []
    assert search.run(0, 4) == [0, 1, 2, 3]


def test_pruning_skipped_at_origin():
    # Both leaves have degree 1 but only the origin is on the path
    neighbours = [[1, 2], [0], [0]]
    search = HamiltonianSearch(neighbours)
    visited = np.array([True, False, False])

    assert search.candidates([0], visited) == [1, 2]
    assert search.run(0, 3) is None


def test_candidates_ordered_by_remaining_degree():
    # From 0: node 1 has remaining degree 3, node 2 has 2, node 3 has 2
    neighbours = [[1, 2, 3], [0, 2, 3], [0, 1], [0, 1]]
    search = HamiltonianSearch(neighbours)
    visited = np.array([True, False, False, False])

    # ties keep ascending index order
    assert search.candidates([0], visited) == [2, 3, 1]


def test_current_cell_counts_towards_remaining_degree():
    # Path 0-1 leaves node 2 reachable only through the current cell 1
    neighbours = [[1], [0, 2], [1]]
    search = HamiltonianSearch(neighbours)
    visited = np.array([True, True, False])

    degree = search.remaining_degrees(visited, 1)
    assert degree[2] == 1
    assert search.candidates([0, 1], visited) == [2]


@pytest.mark.parametrize("seed", range(60))
def test_matches_brute_force(seed):
    rng = random.Random(seed)
    n_nodes = rng.randint(1, 8)
    neighbours = random_graph(n_nodes, rng.choice([0.25, 0.4, 0.55]), rng)

    path = find_hamiltonian_path(neighbours, 0, n_nodes)

    assert (path is not None) == brute_force_exists(neighbours, 0)
    if path is not None:
        assert len(path) == n_nodes
        assert path[0] == 0
        assert len(set(path)) == n_nodes
        assert all(b in neighbours[a] for a, b in zip(path, path[1:]))


def test_full_5x5_board_tour():
    graph = build_adjacency(np.ones((5, 5), dtype=bool))
    path = find_hamiltonian_path(graph, 0, graph.size)

    assert path is not None
    assert path[0] == 0
    assert is_valid_path(path, graph)


def test_search_is_deterministic():
    graph = build_adjacency(np.ones((5, 5), dtype=bool))
    runs = [find_hamiltonian_path(graph, 0, graph.size) for _ in range(3)]

    assert runs[0] == runs[1] == runs[2]

    neighbours = random_graph(8, 0.5, random.Random(11))
    assert find_hamiltonian_path(neighbours, 0, 8) == find_hamiltonian_path(neighbours, 0, 8)


def test_shorter_target_length():
    neighbours = [[1], [0, 2], [1, 3], [2]]
    assert find_hamiltonian_path(neighbours, 0, 2) == [0, 1]


def test_budget_exceeded():
    graph = build_adjacency(np.ones((5, 5), dtype=bool))

    with pytest.raises(SearchBudgetExceededError) as exc_info:
        find_hamiltonian_path(graph, 0, graph.size, max_nodes=1)

    assert exc_info.value.nodes == 2
    assert exc_info.value.max_nodes == 1


@pytest.mark.parametrize("origin, target_length", [(-1, 2), (3, 2), (0, 0), (0, 4)])
def test_out_of_range_arguments(origin, target_length):
    with pytest.raises(ValueError):
        find_hamiltonian_path([[1], [0, 2], [1]], origin, target_length)


def test_invalid_budget():
    with pytest.raises(ValueError, match="max_nodes"):
        HamiltonianSearch([[1], [0]], max_nodes=0)


def test_is_valid_path_rejects_broken_paths():
    graph = build_adjacency(three_cell_board())

    assert is_valid_path([0, 1, 2], graph)
    assert not is_valid_path([0, 2, 1], graph)
    assert not is_valid_path([0, 1], graph)
    assert not is_valid_path([0, 1, 1], graph)


def test_to_coordinates_with_sequence_lookup():
    assert to_coordinates([2, 0, 1], [(5, 5), (6, 7), (8, 9)]) == [(8, 9), (5, 5), (6, 7)]
