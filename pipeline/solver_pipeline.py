"""
Solver Pipeline

Orchestrates solving a Troyis board:
1. Screenshot → board matrix + cell centres (optional)
2. Board → knight graph → Hamiltonian path from the origin
3. Path → board coordinates / screen points → click script (optional)
"""

import time
import numpy as np
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from core.errors import PathNotFoundError
from core.grid_detection import parse_board_screenshot, GridThresholds, DEFAULT_THRESHOLDS
from solvers.knight_graph import build_adjacency
from solvers.hamiltonian import HamiltonianSearch
from solvers.assembly import to_coordinates
from .click_script import write_click_script


@dataclass
class SolveResult:
    """
    Outcome of a successful solve.

    Attributes:
        board: Validated boolean board
        path: Active cell indices in visiting order (index 0 = origin)
        coordinates: Board (row, col) of each visited cell
        points: Screenshot pixel (x, y) of each visited cell, if parsed
        nodes: Path extensions made by the search
        elapsed: Search time in seconds
    """
    board: np.ndarray
    path: List[int]
    coordinates: List[Tuple[int, int]]
    points: List[Tuple[int, int]] = field(default_factory=list)
    nodes: int = 0
    elapsed: float = 0.0


def solve_board(board, max_nodes: Optional[int] = None,
                verbose: bool = False) -> SolveResult:
    """
    Find a knight path through every marked cell of a board.

    Args:
        board: N x N boolean matrix, origin (0, 0) marked
        max_nodes: Optional cap on search expansions
        verbose: Print progress info

    Returns:
        SolveResult with the path and its board coordinates

    Raises:
        InvalidBoardError: If the board is malformed
        PathNotFoundError: If no such path exists
        SearchBudgetExceededError: If max_nodes is exceeded
    """
    graph = build_adjacency(board)

    if verbose:
        n = len(board)
        isolated = sum(1 for nbrs in graph.neighbours if not nbrs)
        print(f"Board: {n}x{n}, {graph.size} cells to visit, {isolated} isolated")

    search = HamiltonianSearch(graph, max_nodes=max_nodes)
    start = time.perf_counter()
    path = search.run(0, graph.size)
    elapsed = time.perf_counter() - start

    if verbose:
        print(f"Search: {search.nodes} expansions in {elapsed:.3f}s")

    if path is None:
        raise PathNotFoundError(
            f"No knight path visits all {graph.size} marked cells from the origin"
        )

    coordinates = to_coordinates(path, graph.cells)

    if verbose:
        print(f"Path: {' -> '.join(f'({r},{c})' for r, c in coordinates)}")

    return SolveResult(
        board=np.asarray(board, dtype=bool),
        path=path,
        coordinates=coordinates,
        nodes=search.nodes,
        elapsed=elapsed
    )


def solve_screenshot(image_path: str, script_path: Optional[str] = None,
                     x_start: int = 0, y_start: int = 0, sleep_time: int = 0,
                     thresholds: GridThresholds = DEFAULT_THRESHOLDS,
                     max_nodes: Optional[int] = None,
                     verbose: bool = True) -> SolveResult:
    """
    Complete pipeline: screenshot → board → path → click script.

    Args:
        image_path: Path to the board screenshot
        script_path: Optional path for the AutoHotkey click script
        x_start: Screen x of the screenshot's top-left corner
        y_start: Screen y of the screenshot's top-left corner
        sleep_time: Pause in ms between clicks
        thresholds: Grid detection thresholds
        max_nodes: Optional cap on search expansions
        verbose: Print progress info

    Returns:
        SolveResult with screen points filled in
    """
    if verbose:
        print("\n" + "=" * 60)
        print("PHASE 1: Board Detection")
        print("=" * 60)

    grid = parse_board_screenshot(image_path, thresholds)

    if verbose:
        print(f"Detected {grid.size}x{grid.size} grid")
        for row in grid.board:
            print("  " + " ".join("#" if cell else "." for cell in row))

        print("\n" + "=" * 60)
        print("PHASE 2: Path Search")
        print("=" * 60)

    result = solve_board(grid.board, max_nodes=max_nodes, verbose=verbose)
    result.points = [grid.centre(row, col) for row, col in result.coordinates]

    if script_path:
        output = write_click_script(result.points, script_path, x_start, y_start, sleep_time)
        if verbose:
            print(f"\nSaved: {output}")

    return result
