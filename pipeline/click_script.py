"""AutoHotkey click script output for solved boards."""

from pathlib import Path
from typing import List, Sequence, Tuple


HEADER = "CoordMode, Mouse, Screen"


def render_click_script(points: Sequence[Tuple[int, int]], x_start: int = 0,
                        y_start: int = 0, sleep_time: int = 0) -> List[str]:
    """
    Build the lines of a click script.

    The first point is the origin, which the game selects already, so no
    click is emitted for it.

    Args:
        points: Screenshot pixel (x, y) of each cell, in path order
        x_start: Screen x of the screenshot's top-left corner
        y_start: Screen y of the screenshot's top-left corner
        sleep_time: Pause in ms after each click (0 disables)

    Returns:
        Script lines without trailing newlines
    """
    if sleep_time < 0:
        raise ValueError(f"sleep_time must be >= 0, got {sleep_time}")

    lines = [HEADER]
    for x, y in list(points)[1:]:
        lines.append(f"Click {int(x) + x_start}, {int(y) + y_start}")
        if sleep_time > 0:
            lines.append(f"Sleep, {sleep_time}")
    return lines


def write_click_script(points: Sequence[Tuple[int, int]], script_path,
                       x_start: int = 0, y_start: int = 0,
                       sleep_time: int = 0) -> Path:
    """Render a click script and write it to ``script_path``."""
    lines = render_click_script(points, x_start, y_start, sleep_time)

    output = Path(script_path)
    if output.parent and str(output.parent) != '.':
        output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text("\n".join(lines) + "\n")
    return output
