"""Mapping solved index paths back to board or screen positions."""

from typing import List, Sequence, Tuple


def to_coordinates(path: Sequence[int], positions) -> List[Tuple]:
    """
    Look up the position of every node in a path.

    Args:
        path: Node indices as returned by the path search
        positions: Index -> position lookup (dict or sequence), e.g.
            board (row, col) or pixel (x, y)

    Returns:
        Positions in path order
    """
    return [tuple(positions[idx]) for idx in path]


def is_valid_path(path: Sequence[int], graph) -> bool:
    """Check that a path covers every node once and follows graph edges."""
    if len(path) != graph.size or len(set(path)) != len(path):
        return False
    return all(b in graph.neighbours[a] for a, b in zip(path, path[1:]))
