"""Visualization utilities for solved boards."""
from .display import (
    draw_path_overlay,
    plot_solution,
    display_solution,
    save_solution_figure
)
