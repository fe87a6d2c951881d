"""Turns enumerated solutions into a ProbabilityReport."""

from math import comb
from typing import AbstractSet, Iterable, List, Optional, Sequence, Tuple

from .report import Candidate, ProbabilityReport
from .solver import SearchStats, Solution
from .utils import Coord

WEIGHTINGS = ("uniform", "bayesian")


class ProbabilityAggregator:
    """
    Streaming summary of a solution set.

    With "uniform" weighting every solution counts once:
        P(c)      = #solutions flagging c / #solutions
        elsewhere = (mines_count - mean flags per solution) / elsewhere_count

    With "bayesian" weighting a solution flagging f cells counts
    comb(elsewhere_count, mines_count - f) times, the number of ways its
    leftover mines can be spread over the non-frontier cells.

    All sums are kept as ints and divided once at the end, so certainties
    come out as exactly 0.0 and 1.0.
    """

    def __init__(
        self,
        frontier: Sequence[Coord],
        mines_count: int,
        elsewhere_cells: AbstractSet[Coord],
        weighting: str = "uniform",
    ) -> None:
        if weighting not in WEIGHTINGS:
            raise ValueError('weighting must be "uniform" or "bayesian".')

        self.frontier: Tuple[Coord, ...] = tuple(frontier)
        self.mines_count = mines_count
        self.elsewhere_cells = frozenset(elsewhere_cells)
        self.weighting = weighting

        self.solution_count: int = 0
        self._total_weight: int = 0
        # sum of weight * (mines_count - flags) over solutions
        self._remaining_weight: int = 0
        self._mine_weights: List[int] = [0] * len(self.frontier)

    def _weight(self, solution: Solution) -> int:
        if self.weighting == "uniform":
            return 1
        return comb(len(self.elsewhere_cells), self.mines_count - solution.flag_count)

    def add(self, solution: Solution) -> None:
        weight = self._weight(solution)
        self.solution_count += 1
        self._total_weight += weight
        self._remaining_weight += weight * (self.mines_count - solution.flag_count)
        for i, cell in enumerate(self.frontier):
            if solution.is_mine(cell):
                self._mine_weights[i] += weight

    def add_all(self, solutions: Iterable[Solution]) -> "ProbabilityAggregator":
        for solution in solutions:
            self.add(solution)
        return self

    def report(
        self, width: int, height: int, stats: Optional[SearchStats] = None
    ) -> ProbabilityReport:
        """
        Build the report. No solutions means an empty report (all unknown);
        no elsewhere cells means the elsewhere value is omitted.
        """
        if self.solution_count == 0 or self._total_weight == 0:
            return ProbabilityReport.empty(width, height, stats=stats)

        candidates = tuple(
            Candidate(x, y, mine_weight / self._total_weight)
            for (x, y), mine_weight in zip(self.frontier, self._mine_weights)
        )

        elsewhere: Optional[float] = None
        if self.elsewhere_cells:
            elsewhere = self._remaining_weight / (
                self._total_weight * len(self.elsewhere_cells)
            )

        return ProbabilityReport(
            width,
            height,
            candidates=candidates,
            elsewhere=elsewhere,
            elsewhere_cells=self.elsewhere_cells if elsewhere is not None else frozenset(),
            solution_count=self.solution_count,
            stats=stats,
        )
