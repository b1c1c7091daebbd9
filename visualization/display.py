"""Display utilities for solved boards."""

import cv2
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Optional, Sequence, Tuple
from pathlib import Path


def draw_path_overlay(image: np.ndarray, points: Sequence[Tuple[int, int]],
                      color: tuple = (0, 200, 0), thickness: int = 2) -> np.ndarray:
    """
    Draw the move sequence on top of a board screenshot.

    Args:
        image: Screenshot (H, W, 3), uint8
        points: Pixel (x, y) of each cell in path order
        color: Line/marker colour in the image's channel order
        thickness: Line thickness in pixels

    Returns:
        Annotated copy of the image
    """
    output = np.ascontiguousarray(image, dtype=np.uint8).copy()
    pts = [(int(x), int(y)) for x, y in points]

    for a, b in zip(pts, pts[1:]):
        cv2.line(output, a, b, color, thickness)

    font = cv2.FONT_HERSHEY_SIMPLEX
    for step, (x, y) in enumerate(pts, start=1):
        cv2.circle(output, (x, y), thickness * 3, color, -1)
        text = str(step)
        (text_w, _), _ = cv2.getTextSize(text, font, 0.4, 1)
        cv2.putText(output, text, (x - text_w // 2, y - thickness * 4),
                    font, 0.4, (0, 0, 0), 3)
        cv2.putText(output, text, (x - text_w // 2, y - thickness * 4),
                    font, 0.4, (255, 255, 255), 1)

    return output


def plot_solution(ax, board: np.ndarray, coordinates: Sequence[Tuple[int, int]],
                  title: Optional[str] = None):
    """
    Plot a board and the knight path over it on a matplotlib axis.

    Marked cells are drawn light, unmarked cells dark; each visited cell
    is labelled with its step number.
    """
    board = np.asarray(board, dtype=bool)
    n = board.shape[0]

    ax.imshow(board.astype(float), cmap='gray', vmin=0, vmax=1.4)

    if coordinates:
        rows = [r for r, _ in coordinates]
        cols = [c for _, c in coordinates]
        ax.plot(cols, rows, '-', color='tab:red', linewidth=1.5)
        ax.plot(cols[0], rows[0], 'o', color='tab:green', markersize=10)
        for step, (r, c) in enumerate(coordinates, start=1):
            ax.text(c, r, str(step), ha='center', va='center', fontsize=8)

    ax.set_xticks(np.arange(-0.5, n, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, n, 1), minor=True)
    ax.grid(which='minor', color='black', linewidth=0.5)
    ax.tick_params(which='both', length=0, labelbottom=False, labelleft=False)

    if title:
        ax.set_title(title)


def display_solution(board: np.ndarray, coordinates: Sequence[Tuple[int, int]],
                     screenshot: Optional[np.ndarray] = None,
                     points: Optional[List[Tuple[int, int]]] = None,
                     figsize: tuple = (12, 6)):
    """
    Show the solved board, next to the annotated screenshot if given.

    Args:
        board: Boolean board matrix
        coordinates: Board (row, col) of each cell in path order
        screenshot: Optional RGB screenshot
        points: Pixel (x, y) of each cell, required with screenshot
        figsize: Figure size
    """
    if screenshot is None:
        fig, ax = plt.subplots(1, 1, figsize=(figsize[1], figsize[1]))
        plot_solution(ax, board, coordinates, title=f"Solved ({len(coordinates)} cells)")
    else:
        fig, axes = plt.subplots(1, 2, figsize=figsize)
        plot_solution(axes[0], board, coordinates, title=f"Solved ({len(coordinates)} cells)")
        axes[1].imshow(draw_path_overlay(screenshot, points or []))
        axes[1].set_title("Screenshot")
        axes[1].axis('off')

    plt.tight_layout()
    plt.show()


def save_solution_figure(board: np.ndarray, coordinates: Sequence[Tuple[int, int]],
                         output_path: str, dpi: int = 150):
    """
    Save the solved board plot to file.

    Args:
        board: Boolean board matrix
        coordinates: Board (row, col) of each cell in path order
        output_path: Path to save the figure
        dpi: Output DPI
    """
    fig, ax = plt.subplots(1, 1, figsize=(6, 6))
    plot_solution(ax, board, coordinates, title=f"Solved ({len(coordinates)} cells)")
    plt.tight_layout()

    output_dir = Path(output_path).parent
    if output_dir and str(output_dir) != '.':
        output_dir.mkdir(parents=True, exist_ok=True)

    plt.savefig(output_path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
