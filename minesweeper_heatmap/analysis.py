"""Rendering and summary tools for probability reports."""

from typing import Dict, List, Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes

from .board import BoardSnapshot
from .cells import Mark, is_clue
from .report import ProbabilityReport

_ANSI_RESET = "\033[0m"
_ANSI_COORD = "\033[96m"
_ANSI_MINE = "\033[91m"
_ANSI_SAFE = "\033[92m"


def _c(s: str, color: bool) -> str:
    """Wrap string in coordinate color."""
    return f"{_ANSI_COORD}{s}{_ANSI_RESET}" if color else s


def cell_label(board: BoardSnapshot, report: ProbabilityReport, x: int, y: int) -> str:
    """
    Return the short text shown for one cell.

    Clues show their digit, flags show "F", unopened cells show their
    likelihood as a whole percentage and "?" when it is unknown.
    """
    cell = board.cell_at(x, y)
    if is_clue(cell):
        return str(cell)
    if cell is Mark.FLAGGED:
        return "F"
    likelihood = report.likelihood_at(x, y)
    if likelihood is None:
        return "?"
    return f"{round(likelihood * 100)}%"


def format_heatmap(
    board: BoardSnapshot,
    report: ProbabilityReport,
    *,
    color: bool = False,
    show_coords: bool = True,
) -> str:
    """
    Format a board and its report as a multi-line text grid.

    Args:
        board: The snapshot the report was computed for.
        report: Result of ProbabilityEngine.compute for that board.
        color: If True, use ANSI colors (certain mines red, certain safes green).
        show_coords: If True, include coordinate labels and a header.

    Returns:
        A text grid with one 4-character column per cell.
    """
    w, h = board.width, board.height

    def cell_str(x: int, y: int) -> str:
        s = f"{cell_label(board, report, x, y):>4}"
        if not color:
            return s
        likelihood = report.likelihood_at(x, y)
        if likelihood == 1:
            return f"{_ANSI_MINE}{s}{_ANSI_RESET}"
        if likelihood == 0:
            return f"{_ANSI_SAFE}{s}{_ANSI_RESET}"
        return s

    lines: List[str] = []
    if show_coords:
        header = "".join(f"{x:4d}" for x in range(w))
        lines.append(_c("   " + header, color))
        lines.append(_c("   " + "-" * (4 * w), color))

    for y in range(h):
        row = "".join(cell_str(x, y) for x in range(w))
        lines.append(_c(f"{y:2d}|", color) + row if show_coords else row)

    return "\n".join(lines)


def likelihood_color(likelihood: float) -> str:
    """
    Map a likelihood to a translucent CSS color: green when safe, through
    yellow, to red when certainly a mine.
    """
    if not 0 <= likelihood <= 1:
        raise ValueError(f"likelihood must be in [0, 1], got {likelihood}.")
    return f"hsl({(1 - likelihood) * 120:g} 100% 50% / 25%)"


def plot_heatmap(
    board: BoardSnapshot,
    report: ProbabilityReport,
    ax: Optional[Axes] = None,
    *,
    annotate: bool = True,
) -> Axes:
    """
    Draw the report as an image: red for likely mines, green for likely safe,
    blank where nothing is known.

    Args:
        board: The snapshot the report was computed for.
        report: Result of ProbabilityEngine.compute for that board.
        ax: Axes to draw on; a new figure is created when omitted.
        annotate: If True, write each cell's label on top of the image.

    Returns:
        The axes that were drawn on.
    """
    if ax is None:
        _, ax = plt.subplots()  # type: ignore[misc]

    grid = np.ma.masked_invalid(report.to_array())
    ax.imshow(grid, cmap="RdYlGn_r", vmin=0.0, vmax=1.0)  # type: ignore[misc]
    ax.set_xticks(np.arange(board.width))
    ax.set_yticks(np.arange(board.height))
    ax.set_title(f"Mine likelihood ({report.solution_count} solutions)")

    if annotate:
        for x, y, _ in board.cells():
            ax.text(  # type: ignore[misc]
                x, y, cell_label(board, report, x, y),
                ha="center", va="center", fontsize=8,
            )

    return ax


def summarize_report(report: ProbabilityReport) -> Dict[str, Optional[float]]:
    """
    Summarize a report.

    Returns:
        Dict with keys:
        - solution_count: number of consistent frontier assignments
        - frontier_cells, elsewhere_cells: sizes of the two cell groups
        - certain_mines, certain_safes, uncertain_cells: cell counts
        - min_likelihood: lowest known likelihood (None if nothing is known)
        - elsewhere: the likelihood applied outside the frontier (or None)
    """
    known = [
        report.likelihood_at(x, y) for x, y in report.covered_cells()
    ]

    return {
        "solution_count": report.solution_count,
        "frontier_cells": len(report.candidates),
        "elsewhere_cells": len(report.elsewhere_cells),
        "certain_mines": len(report.certain_mines()),
        "certain_safes": len(report.certain_safes()),
        "uncertain_cells": len(report.uncertain_cells()),
        "min_likelihood": min(known) if known else None,  # type: ignore[type-var]
        "elsewhere": report.elsewhere,
    }
