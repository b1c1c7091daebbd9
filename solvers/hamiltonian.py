"""
Hamiltonian Path Search - Pruned Depth-First Backtracking

Finds one path that starts at the origin and visits every node exactly
once, moving only along graph edges.

Algorithm:
- Depth-first extension from the origin, first complete path wins
- Remaining-degree pruning: abandon a prefix as soon as some unvisited
  node can no longer be reached, or two unvisited nodes are forced dead ends
- Warnsdorff-style ordering: most constrained candidates are tried first
- Explicit stack of candidate iterators, so depth is not bounded by the
  interpreter's recursion limit
"""

import numpy as np
from typing import List, Optional

from core.errors import SearchBudgetExceededError
from .knight_graph import as_adjacency_matrix


class HamiltonianSearch:
    """
    Backtracking search over a fixed adjacency matrix.

    The matrix is read-only; all mutable state (path, visited mask and
    candidate stack) is local to one call of ``run``. ``nodes`` holds the
    number of path extensions made by the last run.
    """

    def __init__(self, adjacency, max_nodes: Optional[int] = None):
        if max_nodes is not None and max_nodes < 1:
            raise ValueError(f"max_nodes must be positive, got {max_nodes}")
        self.matrix = as_adjacency_matrix(adjacency)
        self.max_nodes = max_nodes
        self.nodes = 0

    @property
    def size(self) -> int:
        return self.matrix.shape[0]

    def remaining_degrees(self, visited: np.ndarray, current: int) -> np.ndarray:
        """
        Count, for every node, its neighbours that are still available.

        Available means unvisited, or the current end of the path, which
        the next move leaves from and so can still be joined.
        """
        available = ~visited
        available[current] = True
        return self.matrix[:, available].sum(axis=1)

    def candidates(self, path: List[int], visited: np.ndarray, prune: bool = True) -> List[int]:
        """
        Ordered next moves from the end of ``path``.

        Returns an empty list when the prefix cannot be completed.
        """
        current = path[-1]
        degree = self.remaining_degrees(visited, current)

        if prune and len(path) > 1:
            unvisited_degree = degree[~visited]
            if np.any(unvisited_degree == 0):
                return []
            if np.count_nonzero(unvisited_degree == 1) > 1:
                return []

        elected = np.flatnonzero(self.matrix[current] & ~visited)
        order = np.argsort(degree[elected], kind="stable")
        return [int(node) for node in elected[order]]

    def run(self, origin: int, target_length: int) -> Optional[List[int]]:
        """
        Search for a path of ``target_length`` distinct nodes from ``origin``.

        Returns:
            The path as a list of node indices, or None if none exists

        Raises:
            ValueError: If origin or target_length is out of range
            SearchBudgetExceededError: If more than max_nodes extensions
                are needed
        """
        if not 0 <= origin < self.size:
            raise ValueError(f"origin must be in 0..{self.size - 1}, got {origin}")
        if not 1 <= target_length <= self.size:
            raise ValueError(f"target_length must be in 1..{self.size}, got {target_length}")

        self.nodes = 0
        path = [origin]
        if target_length == 1:
            return path

        # Degree pruning assumes every node must be covered
        prune = target_length == self.size

        visited = np.zeros(self.size, dtype=bool)
        visited[origin] = True
        stack = [iter(self.candidates(path, visited, prune))]

        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                visited[path.pop()] = False
                continue

            path.append(step)
            visited[step] = True
            self.nodes += 1

            if self.max_nodes is not None and self.nodes > self.max_nodes:
                raise SearchBudgetExceededError(self.nodes, self.max_nodes)

            if len(path) == target_length:
                return list(path)

            stack.append(iter(self.candidates(path, visited, prune)))

        return None


def find_hamiltonian_path(adjacency, origin: int, target_length: int,
                          max_nodes: Optional[int] = None) -> Optional[List[int]]:
    """
    Find one path visiting ``target_length`` nodes, starting at ``origin``.

    Args:
        adjacency: KnightGraph, boolean adjacency matrix or neighbour lists
        origin: Index of the forced first node
        target_length: Number of nodes the path must contain (normally all)
        max_nodes: Optional cap on path extensions

    Returns:
        List of node indices, or None when no such path exists
    """
    return HamiltonianSearch(adjacency, max_nodes=max_nodes).run(origin, target_length)
