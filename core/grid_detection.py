"""Board detection for Troyis screenshots.

The board is drawn as dark or red cells separated by bright grid lines.
Grid lines are found from brightness profiles along each axis; the red
channel at each cell centre decides whether the cell must be visited.
"""

import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .errors import GridDetectionError
from .image_utils import load_image, to_unit_rgb


@dataclass(frozen=True)
class GridThresholds:
    """
    Brightness thresholds for screenshot parsing.

    Attributes:
        line_threshold: Mean brightness above which a pixel column/row
            belongs to a grid line
        cell_threshold: Red level above which a cell is marked
    """
    line_threshold: float = 0.9
    cell_threshold: float = 0.8

    def __post_init__(self):
        for name in ("line_threshold", "cell_threshold"):
            value = getattr(self, name)
            if not 0.0 < value < 1.0:
                raise ValueError(f"{name} must be in (0, 1), got {value}")


DEFAULT_THRESHOLDS = GridThresholds()


@dataclass
class BoardGrid:
    """
    Parsed board plus the pixel centre of every grid row/column.

    Attributes:
        board: N x N boolean matrix, True for cells to visit
        x_cells: Pixel x of each column centre (length N)
        y_cells: Pixel y of each row centre (length N)
    """
    board: np.ndarray
    x_cells: np.ndarray
    y_cells: np.ndarray

    @property
    def size(self) -> int:
        return self.board.shape[0]

    def centre(self, row: int, col: int) -> Tuple[int, int]:
        """Pixel (x, y) of a board cell."""
        return int(self.x_cells[col]), int(self.y_cells[row])


def line_positions(profile, threshold):
    """
    Locate grid lines in a 1D brightness profile.

    Args:
        profile: Mean brightness per pixel column (or row)
        threshold: Brightness above which a pixel is part of a line

    Returns:
        Index of the last pixel of each run of line pixels
    """
    mask = (np.asarray(profile) > threshold).astype(np.int8)
    edges = np.diff(np.concatenate(([0], mask, [0])))
    return np.flatnonzero(edges == -1) - 1


def cell_centres(lines):
    """Rounded midpoints between consecutive grid lines."""
    lines = np.asarray(lines, dtype=np.float64)
    return np.round((lines[1:] + lines[:-1]) / 2).astype(int)


def parse_board_image(image, thresholds: GridThresholds = DEFAULT_THRESHOLDS) -> BoardGrid:
    """
    Parse a Troyis board from a screenshot array.

    Args:
        image: Screenshot as numpy array (RGB, uint8 or float)
        thresholds: Line and cell brightness thresholds

    Returns:
        BoardGrid with the origin cell forced to True

    Raises:
        GridDetectionError: If the grid lines do not form a square grid
    """
    rgb = to_unit_rgb(image)
    brightness = rgb.mean(axis=2)

    x_lines = line_positions(brightness.mean(axis=0), thresholds.line_threshold)
    y_lines = line_positions(brightness.mean(axis=1), thresholds.line_threshold)

    if len(x_lines) < 2 or len(y_lines) < 2:
        raise GridDetectionError(
            f"could not find grid lines ({len(x_lines)} vertical, {len(y_lines)} horizontal)"
        )

    x_cells = cell_centres(x_lines)
    y_cells = cell_centres(y_lines)

    if len(x_cells) != len(y_cells):
        raise GridDetectionError(
            f"could not parse a square grid ({len(y_cells)} rows, {len(x_cells)} columns)"
        )

    red = rgb[:, :, 0]
    board = red[np.ix_(y_cells, x_cells)] > thresholds.cell_threshold
    board[0, 0] = True

    return BoardGrid(board=board, x_cells=x_cells, y_cells=y_cells)


def parse_board_screenshot(image_path, thresholds: GridThresholds = DEFAULT_THRESHOLDS) -> BoardGrid:
    """Load a screenshot file and parse its board."""
    try:
        image = load_image(image_path)
    except OSError as e:
        raise GridDetectionError(f"Could not load image: {image_path} ({e})") from e
    return parse_board_image(image, thresholds)
