"""
Pipeline orchestration modules.

1. solve_board() - board matrix → knight path
2. solve_screenshot() - screenshot → board → path → click script
3. write_click_script() - path points → AutoHotkey script
"""
from .solver_pipeline import (
    SolveResult,
    solve_board,
    solve_screenshot
)
from .click_script import render_click_script, write_click_script
