"""Tests for solution rendering."""

import sys
import os

import matplotlib
matplotlib.use("Agg")

import numpy as np

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from visualization import draw_path_overlay, save_solution_figure


def test_draw_path_overlay_returns_copy():
    image = np.zeros((68, 68, 3), dtype=np.uint8)

    annotated = draw_path_overlay(image, [(12, 12), (56, 34)])

    assert annotated.shape == image.shape
    assert annotated.any()
    assert not image.any()
    # marker drawn on the start cell
    assert annotated[12, 12].any()


def test_save_solution_figure(tmp_path):
    board = np.zeros((4, 4), dtype=bool)
    board[0, 0] = board[1, 2] = board[3, 1] = True
    output = tmp_path / "figs" / "solution.png"

    save_solution_figure(board, [(0, 0), (1, 2), (3, 1)], str(output))

    assert output.exists()
    assert output.stat().st_size > 0


def test_cli_saves_figure(screenshot_file, tmp_path):
    from solve_puzzle import main

    pattern = [[True, False, False, False],
               [False, False, True, False],
               [False, False, False, False],
               [False, True, False, False]]
    figure = tmp_path / "solution.png"

    code = main([str(screenshot_file(pattern)), "0", "0", "0",
                 str(tmp_path / "clicks.ahk"), "-q", "--figure", str(figure)])

    assert code == 0
    assert figure.exists()
