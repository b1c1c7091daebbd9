#!/usr/bin/env python
"""
Troyis Board Solver

Usage:
    python solve_puzzle.py <screenshot> <x_start> <y_start> <sleep_time> <output_file>

Examples:
    python solve_puzzle.py board.png 412 236 50 clicks.ahk
    python solve_puzzle.py board.png 412 236 0 clicks.ahk --overlay debug/path.png

Pipeline:
    Phase 1: Parse the screenshot into a board and cell centres
    Phase 2: Find a knight path through every marked cell
    Output:  AutoHotkey script clicking each cell in order
"""

import argparse
import os
import sys

from core.errors import (
    GridDetectionError,
    PathNotFoundError,
    SearchBudgetExceededError
)
from core.grid_detection import GridThresholds
from pipeline import solve_screenshot


DEFAULT_MAX_NODES = 2_000_000


def build_parser():
    parser = argparse.ArgumentParser(
        description="Knight-path solver for Troyis puzzle screenshots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
x_start/y_start give the screen position of the screenshot's top-left
corner, so that clicks land on the live board.
        """
    )
    parser.add_argument("screenshot", help="PNG screenshot of the board")
    parser.add_argument("x_start", type=int, help="Screen x of the screenshot's left edge")
    parser.add_argument("y_start", type=int, help="Screen y of the screenshot's top edge")
    parser.add_argument("sleep_time", type=int, help="Pause between clicks in ms (0 disables)")
    parser.add_argument("output_file", help="Output path for the AutoHotkey script")
    parser.add_argument("--max-nodes", type=int, default=DEFAULT_MAX_NODES,
                        help=f"Search expansion budget (default: {DEFAULT_MAX_NODES}, 0 = unlimited)")
    parser.add_argument("--line-threshold", type=float, default=0.9,
                        help="Brightness above which a pixel line is a grid line")
    parser.add_argument("--cell-threshold", type=float, default=0.8,
                        help="Red level above which a cell must be visited")
    parser.add_argument("--overlay", help="Save the screenshot with the path drawn on it")
    parser.add_argument("--figure", help="Save a plot of the solved board")
    parser.add_argument("--display", action="store_true", help="Show the solved board")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress output")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if not os.path.exists(args.screenshot):
        print(f"Error: Image not found: {args.screenshot}")
        return 1

    if args.sleep_time < 0:
        print(f"Error: sleep_time must be >= 0, got {args.sleep_time}")
        return 1

    verbose = not args.quiet

    try:
        thresholds = GridThresholds(args.line_threshold, args.cell_threshold)
        result = solve_screenshot(
            args.screenshot,
            script_path=args.output_file,
            x_start=args.x_start,
            y_start=args.y_start,
            sleep_time=args.sleep_time,
            thresholds=thresholds,
            max_nodes=args.max_nodes or None,
            verbose=verbose
        )
    except (GridDetectionError, PathNotFoundError, SearchBudgetExceededError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if verbose:
        print(f"\nMoves: {len(result.path) - 1}")

    if args.figure:
        from visualization import save_solution_figure
        save_solution_figure(result.board, result.coordinates, args.figure)
        if verbose:
            print(f"Saved: {args.figure}")

    if args.overlay or args.display:
        from core.image_utils import load_image
        screenshot = load_image(args.screenshot)

        if args.overlay:
            from core.image_utils import save_image
            from visualization import draw_path_overlay
            save_image(draw_path_overlay(screenshot, result.points), args.overlay)
            if verbose:
                print(f"Saved: {args.overlay}")

        if args.display:
            from visualization import display_solution
            display_solution(result.board, result.coordinates, screenshot, result.points)

    return 0


if __name__ == "__main__":
    sys.exit(main())
