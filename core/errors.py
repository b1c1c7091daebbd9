"""Exception classes shared by the board parser, solver and pipeline."""


class InvalidBoardError(ValueError):
    """Raised when a board matrix cannot describe a Troyis puzzle."""


class GridDetectionError(ValueError):
    """Raised when a screenshot cannot be parsed into a square grid."""


class PathNotFoundError(RuntimeError):
    """Raised when no knight path visits every marked cell."""


class SearchBudgetExceededError(RuntimeError):
    """Raised when the path search expands more nodes than allowed."""

    def __init__(self, nodes: int, max_nodes: int):
        super().__init__(
            f"Search stopped after {nodes} expansions "
            f"(budget: {max_nodes}). Board may be unsolvable or too large."
        )
        self.nodes = nodes
        self.max_nodes = max_nodes
