"""Probability engine: board snapshot + mine count -> ProbabilityReport."""

import logging
import time
from typing import Any, Sequence, Union

from .aggregator import WEIGHTINGS, ProbabilityAggregator
from .board import BoardSnapshot, GameView
from .constraints import ConstraintValidator
from .report import ProbabilityReport
from .solver import FrontierSolver

logger = logging.getLogger(__name__)

BoardLike = Union[BoardSnapshot, str, Sequence[Sequence[object]]]


class FrontierTooLargeError(RuntimeError):
    """Raised when the frontier exceeds the caller's max_frontier_len policy."""


def as_board(board: BoardLike) -> BoardSnapshot:
    """Accept a snapshot, its text encoding or a knowledge grid."""
    if isinstance(board, BoardSnapshot):
        return board
    if isinstance(board, str):
        return BoardSnapshot.parse(board)
    return BoardSnapshot.from_rows(board)


class ProbabilityEngine:
    """
    Stateless engine computing mine likelihoods for a board.

    The pipeline is: pre-check (ConstraintValidator) -> enumerate
    (FrontierSolver) -> summarize (ProbabilityAggregator). Nothing is kept
    between calls, so one engine may serve many boards and threads.
    """

    def __init__(
        self,
        weighting: str = "uniform",
        max_frontier_len: Union[int, float] = float("inf"),
    ) -> None:
        """
        Args:
            weighting: How solutions are combined.
                "uniform" (default): every consistent frontier assignment
                counts once.
                "bayesian": assignments are weighted by the number of ways the
                remaining mines fit into the non-frontier cells.
            max_frontier_len: Refuse boards whose frontier has more cells than
                this (raises FrontierTooLargeError). Unlimited by default; the
                search itself has no cap.
        """
        if weighting not in WEIGHTINGS:
            raise ValueError('weighting must be "uniform" or "bayesian".')
        if max_frontier_len < 0:
            raise ValueError("max_frontier_len must be non-negative.")

        self.weighting = weighting
        self.max_frontier_len: Union[int, float] = max_frontier_len

    def compute(self, board: BoardLike, mines_count: int) -> ProbabilityReport:
        """
        Compute the mine likelihood of every unopened cell.

        Args:
            board: A BoardSnapshot, its text encoding, or a knowledge grid.
            mines_count: Total mines on the board, flagged or not.

        Returns:
            A ProbabilityReport. It is empty (every cell unknown) when the
            board fails the pre-check or no placement satisfies it.

        Raises:
            ValueError: If the board is malformed or mines_count is outside
                [0, width * height].
            FrontierTooLargeError: If the frontier exceeds max_frontier_len.
        """
        snapshot = as_board(board)
        width, height = snapshot.width, snapshot.height

        if not 0 <= mines_count <= width * height:
            raise ValueError(
                f"mines_count must be in [0, {width * height}], got {mines_count}."
            )

        started = time.perf_counter()

        validator = ConstraintValidator.create(snapshot)
        if not validator.validate(snapshot, mines_count):
            return ProbabilityReport.empty(width, height)

        solver = FrontierSolver(snapshot, mines_count)
        if len(solver.frontier) > self.max_frontier_len:
            logger.warning(
                "Frontier of %d cells exceeds max_frontier_len=%s; not searching.",
                len(solver.frontier),
                self.max_frontier_len,
            )
            raise FrontierTooLargeError(
                f"Frontier has {len(solver.frontier)} cells, "
                f"limit is {self.max_frontier_len}."
            )

        aggregator = ProbabilityAggregator(
            solver.frontier, mines_count, solver.elsewhere_cells, self.weighting
        )
        aggregator.add_all(solver.solutions())
        report = aggregator.report(width, height, stats=solver.stats)

        logger.debug(
            "Frontier %d cells, %d solutions, %d nodes, %d pruned in %.4fs",
            solver.stats.frontier_len,
            solver.stats.solutions_found,
            solver.stats.nodes_visited,
            solver.stats.branches_pruned,
            time.perf_counter() - started,
        )
        return report

    def compute_for_game(self, game: GameView) -> ProbabilityReport:
        """Snapshot a live game and compute its report."""
        return self.compute(BoardSnapshot.from_game(game), game.mines_count)


def compute(board: BoardLike, mines_count: int, **options: Any) -> ProbabilityReport:
    """Shortcut for ProbabilityEngine(**options).compute(board, mines_count)."""
    return ProbabilityEngine(**options).compute(board, mines_count)


def compute_for_game(game: GameView, **options: Any) -> ProbabilityReport:
    return ProbabilityEngine(**options).compute_for_game(game)
