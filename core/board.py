"""Board matrix validation and active cell enumeration."""

import numpy as np
from typing import Dict, List, Tuple

from .errors import InvalidBoardError


ORIGIN = (0, 0)


def validate_board(board) -> np.ndarray:
    """
    Check a board matrix and return it as a boolean numpy array.

    Args:
        board: N x N matrix (array-like) with True for cells to visit

    Returns:
        Boolean numpy array of shape (N, N)

    Raises:
        InvalidBoardError: If the board is empty, not square, has no marked
            cells, or the top-left origin is not marked
    """
    grid = np.asarray(board)

    if grid.ndim != 2:
        raise InvalidBoardError(f"Board must be a 2-D matrix, got {grid.ndim} dimension(s)")

    n_rows, n_cols = grid.shape
    if n_rows == 0 or n_cols == 0:
        raise InvalidBoardError("Board is empty")
    if n_rows != n_cols:
        raise InvalidBoardError(f"Board must be square, got {n_rows}x{n_cols}")

    grid = grid.astype(bool)
    if not grid.any():
        raise InvalidBoardError("Board has no marked cells")
    if not grid[ORIGIN]:
        raise InvalidBoardError("Origin cell (0, 0) must be marked")

    return grid


def active_cells(board) -> List[Tuple[int, int]]:
    """Return (row, col) of every marked cell in row-major order."""
    grid = validate_board(board)
    return [(int(r), int(c)) for r, c in np.argwhere(grid)]


def board_positions(board, one_based: bool = False) -> Dict[int, Tuple[int, int]]:
    """
    Map each active cell index to its board position.

    Index 0 is always the origin since enumeration is row-major and
    starts at the top-left cell.
    """
    offset = 1 if one_based else 0
    return {
        idx: (row + offset, col + offset)
        for idx, (row, col) in enumerate(active_cells(board))
    }
