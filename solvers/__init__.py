"""
Knight-path solver for Troyis boards.

Usage:
    from solvers import build_adjacency, find_hamiltonian_path, to_coordinates

    graph = build_adjacency(board)
    path = find_hamiltonian_path(graph, 0, graph.size)
    cells = to_coordinates(path, graph.cells)
"""
from .knight_graph import (
    KnightGraph,
    build_adjacency,
    as_adjacency_matrix,
    knight_adjacency
)
from .hamiltonian import HamiltonianSearch, find_hamiltonian_path
from .assembly import to_coordinates, is_valid_path
