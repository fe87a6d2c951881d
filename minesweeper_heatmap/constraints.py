"""Local clue constraints and the whole-board pre-check."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .cells import Mark, is_clue
from .utils import Coord

if TYPE_CHECKING:
    from .board import BoardSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalConstraint:
    """
    The rule induced by one clue cell: exactly required_mines of its
    neighbours are mines.
    """

    x: int
    y: int
    required_mines: int
    neighbors: Tuple[Coord, ...]

    @classmethod
    def at(cls, board: "BoardSnapshot", x: int, y: int) -> "LocalConstraint":
        """
        Derive the constraint of the clue at (x, y).

        Raises:
            ValueError: If (x, y) does not hold a clue.
        """
        cell = board.cell_at(x, y)
        if not is_clue(cell):
            raise ValueError(f"Cell ({x}, {y}) is not a clue: {cell!r}")
        return cls(x, y, cell, board.neighbors_of(x, y))  # type: ignore[arg-type]

    def tally(self, board: "BoardSnapshot") -> Tuple[int, int]:
        """Return (flagged, unopened) counts among the neighbours."""
        flag_count = 0
        unopened_count = 0
        for nx, ny in self.neighbors:
            cell = board.cell_at(nx, ny)
            if cell is Mark.FLAGGED:
                flag_count += 1
            elif cell is Mark.UNOPENED:
                unopened_count += 1
        return flag_count, unopened_count

    def holds(self, board: "BoardSnapshot") -> bool:
        """
        Check the clue against a board.

        Flags already account for flag_count mines; the rest of the budget
        must fit into the still-unopened neighbours. SAFE hypotheses count as
        neither.
        """
        flag_count, unopened_count = self.tally(board)
        return flag_count <= self.required_mines <= flag_count + unopened_count


class ConstraintValidator:
    """Validates a whole board against every clue plus the global mine count."""

    def __init__(self, constraints: Sequence[LocalConstraint]) -> None:
        self.constraints: Tuple[LocalConstraint, ...] = tuple(constraints)

    @classmethod
    def create(cls, board: "BoardSnapshot") -> "ConstraintValidator":
        """
        Build one constraint per clue on the board.

        Clues with no unopened neighbour are included too: their flags must
        already match the clue exactly.
        """
        return cls([LocalConstraint.at(board, x, y) for x, y in board.clue_cells()])

    def explain(self, board: "BoardSnapshot", mines_count: int) -> Optional[str]:
        """
        Return why the board cannot be completed, or None if it passes.

        Checks, in order: every local constraint, a running flag tally that
        must never exceed mines_count, and whether enough flagged or unopened
        cells exist to hold all mines.
        """
        for constraint in self.constraints:
            if not constraint.holds(board):
                flags, unopened = constraint.tally(board)
                return (
                    f"Clue {constraint.required_mines} at ({constraint.x}, {constraint.y}) "
                    f"has {flags} flagged and {unopened} unopened neighbours."
                )

        flags = 0
        for _, _, cell in board.cells():
            if cell is Mark.FLAGGED:
                flags += 1
                if flags > mines_count:
                    return f"More than {mines_count} flags on the board."

        capacity = board.count_unopened() + flags
        if capacity < mines_count:
            return f"Only {capacity} cells can hold the {mines_count} mines."

        return None

    def validate(self, board: "BoardSnapshot", mines_count: int) -> bool:
        reason = self.explain(board, mines_count)
        if reason is not None:
            logger.debug("Board rejected by pre-check: %s", reason)
            return False
        logger.debug(
            "Board passed pre-check (%d constraints).", len(self.constraints)
        )
        return True
