"""Per-cell mine likelihoods produced by one engine invocation."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple

import numpy as np

from .solver import SearchStats
from .utils import Coord, iter_coords


@dataclass(frozen=True)
class Candidate:
    """Exact mine likelihood of one frontier cell."""

    x: int
    y: int
    likelihood: float

    @property
    def coords(self) -> Coord:
        return (self.x, self.y)


@dataclass(frozen=True)
class ProbabilityReport:
    """
    Immutable result of ProbabilityEngine.compute.

    candidates holds one exact likelihood per frontier cell (cells next to a
    clue), in frontier order. elsewhere, when present, applies uniformly to
    every unopened cell in elsewhere_cells. Everything else is unknown: opened
    cells, flags, off-board coordinates, and every cell of a board that has
    no consistent solution.
    """

    width: int
    height: int
    candidates: Tuple[Candidate, ...] = ()
    elsewhere: Optional[float] = None
    elsewhere_cells: FrozenSet[Coord] = frozenset()
    solution_count: int = 0
    stats: Optional[SearchStats] = field(default=None, compare=False)
    _by_coords: Dict[Coord, float] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_by_coords", {c.coords: c.likelihood for c in self.candidates}
        )

    @classmethod
    def empty(
        cls, width: int, height: int, stats: Optional[SearchStats] = None
    ) -> "ProbabilityReport":
        """Report for an unsatisfiable board: every cell is unknown."""
        return cls(width, height, stats=stats)

    @property
    def has_solutions(self) -> bool:
        return self.solution_count > 0

    def likelihood_at(self, x: int, y: int) -> Optional[float]:
        """
        Return the mine likelihood at (x, y), or None when unknown.
        """
        likelihood = self._by_coords.get((x, y))
        if likelihood is not None:
            return likelihood
        if (x, y) in self.elsewhere_cells:
            return self.elsewhere
        return None

    def covered_cells(self) -> List[Coord]:
        """All coordinates with a known likelihood, in row-major order."""
        return [
            (x, y)
            for x, y in iter_coords(self.width, self.height)
            if self.likelihood_at(x, y) is not None
        ]

    def certain_mines(self) -> List[Coord]:
        return [c for c in self.covered_cells() if self.likelihood_at(*c) == 1]

    def certain_safes(self) -> List[Coord]:
        return [c for c in self.covered_cells() if self.likelihood_at(*c) == 0]

    def uncertain_cells(self) -> List[Coord]:
        return [
            c for c in self.covered_cells() if 0 < self.likelihood_at(*c) < 1  # type: ignore[operator]
        ]

    def to_array(self) -> np.ndarray:
        """Return a (height, width) float array with np.nan for unknown cells."""
        grid = np.full((self.height, self.width), np.nan)
        for x, y in self.covered_cells():
            grid[y, x] = self.likelihood_at(x, y)
        return grid
