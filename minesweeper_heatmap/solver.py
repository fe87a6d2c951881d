"""Exhaustive, pruned enumeration of mine placements over the frontier."""

from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple

from .board import BoardSnapshot
from .cells import Mark
from .utils import Coord


@dataclass(frozen=True)
class Solution:
    """A frontier assignment consistent with every clue and the mine count."""

    board: BoardSnapshot
    flag_count: int

    def is_mine(self, pos: Coord) -> bool:
        x, y = pos
        return self.board.cell_at(x, y) is Mark.FLAGGED

    def flagged_cells(self) -> FrozenSet[Coord]:
        return frozenset(
            (x, y) for x, y, cell in self.board.cells() if cell is Mark.FLAGGED
        )


@dataclass
class SearchStats:
    """Counters collected while enumerating solutions (for analysis)."""

    frontier_len: int = 0
    nodes_visited: int = 0
    branches_pruned: int = 0
    solutions_found: int = 0


# Stack frame: (snapshot, index of the next frontier cell, flags on snapshot)
_Frame = Tuple[BoardSnapshot, int, int]


class FrontierSolver:
    """
    Depth-first search over every frontier cell, in frontier order.

    Each node resolves the next frontier cell to SAFE, then to FLAGGED. A
    branch is pruned as soon as the changed cell breaks a neighbouring clue
    (BoardSnapshot.with_cell_set) or its flags exceed mines_count. A fully
    resolved snapshot counts as a solution only when the mines left over
    still fit into the unopened cells away from the frontier.

    The search runs on an explicit stack, so its depth is bounded by memory
    rather than by the interpreter's recursion limit. There is no iteration
    cap: pathological boards are exponential by nature.
    """

    def __init__(
        self,
        board: BoardSnapshot,
        mines_count: int,
        frontier: Optional[Sequence[Coord]] = None,
    ) -> None:
        """
        Prepare a search over one board.

        Args:
            board: The snapshot to complete; it must already pass the
                ConstraintValidator pre-check.
            mines_count: Total number of mines on the board, flagged or not.
            frontier: Cells to assign, in assignment order. Defaults to
                board.frontier().
        """
        self.board = board
        self.mines_count = mines_count
        self.frontier: Tuple[Coord, ...] = tuple(
            board.frontier() if frontier is None else frontier
        )

        frontier_set = set(self.frontier)
        self.elsewhere_cells: FrozenSet[Coord] = frozenset(
            (x, y)
            for x, y, cell in board.cells()
            if cell is Mark.UNOPENED and (x, y) not in frontier_set
        )
        self.elsewhere_count: int = board.count_unopened() - len(self.frontier)
        self.initial_flags: int = board.count_flags()

        self.stats = SearchStats(frontier_len=len(self.frontier))

    def solutions(self) -> Iterator[Solution]:
        """Yield every solution in a fixed, reproducible order."""
        frontier = self.frontier
        stack: List[_Frame] = [(self.board, 0, self.initial_flags)]

        while stack:
            board, i, flags = stack.pop()
            self.stats.nodes_visited += 1

            if i == len(frontier):
                if flags + self.elsewhere_count < self.mines_count:
                    self.stats.branches_pruned += 1
                    continue
                self.stats.solutions_found += 1
                yield Solution(board, flags)
                continue

            cell = frontier[i]
            if board.cell_at(*cell) is not Mark.UNOPENED:
                stack.append((board, i + 1, flags))
                continue

            # Pushed first so the SAFE branch is explored first.
            flagged = (
                board.with_cell_set(cell, Mark.FLAGGED)
                if flags < self.mines_count
                else None
            )
            if flagged is None:
                self.stats.branches_pruned += 1
            else:
                stack.append((flagged, i + 1, flags + 1))

            safe = board.with_cell_set(cell, Mark.SAFE)
            if safe is None:
                self.stats.branches_pruned += 1
            else:
                stack.append((safe, i + 1, flags))

    def solve(self) -> List[Solution]:
        return list(self.solutions())
