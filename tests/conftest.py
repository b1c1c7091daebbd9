"""Shared fixtures: synthetic Troyis screenshots."""

import numpy as np
import pytest
from PIL import Image

CELL = 20
LINE = 2
DARK = (40, 40, 40)
RED = (230, 30, 30)


def render_board(pattern, cell=CELL, line=LINE):
    """
    Draw a board as the game shows it: white grid lines, red cells to
    visit, dark cells otherwise. Pattern may be rectangular.
    """
    n_rows, n_cols = len(pattern), len(pattern[0])
    step = cell + line
    img = np.full((n_rows * step + line, n_cols * step + line, 3), DARK, dtype=np.uint8)

    for k in range(n_rows + 1):
        img[k * step:k * step + line, :, :] = 255
    for k in range(n_cols + 1):
        img[:, k * step:k * step + line, :] = 255

    for r, row in enumerate(pattern):
        for c, marked in enumerate(row):
            if marked:
                y, x = r * step + line, c * step + line
                img[y:y + cell, x:x + cell] = RED
    return img


@pytest.fixture
def make_screenshot():
    return render_board


@pytest.fixture
def screenshot_file(tmp_path):
    """Save a rendered board as PNG and return its path."""
    def _save(pattern, name="board.png"):
        path = tmp_path / name
        Image.fromarray(render_board(pattern)).save(path)
        return path
    return _save
