"""Board model and screenshot parsing."""
from .errors import (
    InvalidBoardError,
    GridDetectionError,
    PathNotFoundError,
    SearchBudgetExceededError
)
from .board import validate_board, active_cells, board_positions
from .image_utils import load_image, load_image_bgr, save_image
from .grid_detection import (
    parse_board_image,
    parse_board_screenshot,
    BoardGrid,
    GridThresholds,
    DEFAULT_THRESHOLDS
)
