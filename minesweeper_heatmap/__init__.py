"""
Minesweeper Heatmap

A probability engine for Minesweeper boards. Given a partially revealed board
and the total mine count, it computes the likelihood that each unopened cell
hides a mine:
- Exact likelihoods for cells next to a clue, by enumerating every
  consistent placement over the frontier (pruned depth-first search)
- One uniform likelihood for all remaining unopened cells
- Empty reports (everything unknown) for boards no placement can satisfy
"""

from .analysis import (
    format_heatmap,
    likelihood_color,
    plot_heatmap,
    summarize_report,
)
from .board import BoardSnapshot, GameView
from .cells import Cell, Mark
from .cli import explore_cli
from .constraints import ConstraintValidator, LocalConstraint
from .engine import (
    FrontierTooLargeError,
    ProbabilityEngine,
    compute,
    compute_for_game,
)
from .report import Candidate, ProbabilityReport
from .solver import FrontierSolver, SearchStats, Solution

__version__ = "1.0.0"

__all__ = [
    # Core classes
    "BoardSnapshot",
    "Cell",
    "Mark",
    "GameView",
    "LocalConstraint",
    "ConstraintValidator",
    "FrontierSolver",
    "Solution",
    "SearchStats",
    "Candidate",
    "ProbabilityReport",
    "ProbabilityEngine",
    "FrontierTooLargeError",
    # Entry points
    "compute",
    "compute_for_game",
    "explore_cli",
    # Analysis functions
    "format_heatmap",
    "likelihood_color",
    "plot_heatmap",
    "summarize_report",
]
