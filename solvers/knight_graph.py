"""
Knight-move graph over the marked cells of a board.

Two marked cells are adjacent when their row and column distances are
{1, 2} or {2, 1}. The graph is built once and never modified; the
adjacency matrix is returned read-only so it can be shared freely.
"""

import numpy as np
from dataclasses import dataclass
from typing import Sequence, Tuple

from core.board import validate_board


@dataclass(frozen=True)
class KnightGraph:
    """
    Adjacency between active cells.

    Attributes:
        cells: (row, col) of each active cell, indexed in row-major order
        neighbours: Sorted neighbour indices of each active cell
        matrix: Read-only M x M boolean adjacency matrix
    """
    cells: Tuple[Tuple[int, int], ...]
    neighbours: Tuple[Tuple[int, ...], ...]
    matrix: np.ndarray

    @property
    def size(self) -> int:
        return len(self.cells)

    def degree(self, index: int) -> int:
        return len(self.neighbours[index])


def knight_adjacency(rows: np.ndarray, cols: np.ndarray) -> np.ndarray:
    """Pairwise knight-move test between cells given by row/col vectors."""
    row_dist = np.abs(rows[:, None] - rows[None, :])
    col_dist = np.abs(cols[:, None] - cols[None, :])
    return ((row_dist == 1) & (col_dist == 2)) | ((row_dist == 2) & (col_dist == 1))


def _freeze(matrix: np.ndarray) -> np.ndarray:
    matrix = np.array(matrix, dtype=bool)
    matrix.setflags(write=False)
    return matrix


def build_adjacency(board) -> KnightGraph:
    """
    Build the knight-move graph of a board.

    Args:
        board: N x N boolean matrix with the origin (0, 0) marked

    Returns:
        KnightGraph whose index 0 is the origin

    Raises:
        InvalidBoardError: If the board is malformed
    """
    grid = validate_board(board)
    positions = np.argwhere(grid)

    matrix = _freeze(knight_adjacency(positions[:, 0], positions[:, 1]))
    cells = tuple((int(r), int(c)) for r, c in positions)
    neighbours = tuple(tuple(int(j) for j in np.flatnonzero(row)) for row in matrix)

    return KnightGraph(cells=cells, neighbours=neighbours, matrix=matrix)


def as_adjacency_matrix(adjacency) -> np.ndarray:
    """
    Normalise an adjacency description to a read-only boolean matrix.

    Args:
        adjacency: KnightGraph, square boolean matrix, or a sequence with
            the neighbour indices of each node

    Returns:
        Symmetric M x M boolean matrix

    Raises:
        ValueError: If the graph is not square, not symmetric, has
            self-loops or references unknown nodes
    """
    if isinstance(adjacency, KnightGraph):
        return adjacency.matrix

    if isinstance(adjacency, np.ndarray) and adjacency.ndim == 2:
        matrix = adjacency.astype(bool)
        if matrix.shape[0] != matrix.shape[1]:
            raise ValueError(f"Adjacency matrix must be square, got {matrix.shape}")
    else:
        matrix = _matrix_from_neighbours(adjacency)

    if np.any(np.diag(matrix)):
        raise ValueError("Adjacency must not contain self-loops")
    if not np.array_equal(matrix, matrix.T):
        raise ValueError("Adjacency must be symmetric")

    return _freeze(matrix)


def _matrix_from_neighbours(neighbours: Sequence) -> np.ndarray:
    n_nodes = len(neighbours)
    matrix = np.zeros((n_nodes, n_nodes), dtype=bool)
    for node, adjacent in enumerate(neighbours):
        for other in adjacent:
            if not 0 <= other < n_nodes:
                raise ValueError(f"Node {node}: neighbour {other} out of range 0..{n_nodes - 1}")
            matrix[node, other] = True
    return matrix
