"""Cell states understood by the probability engine."""

from enum import Enum
from typing import Union


class Mark(Enum):
    """Non-numeric cell states. Numeric clues are stored as plain ints."""

    UNOPENED = "."
    FLAGGED = "F"
    # Hypothesis used only while searching: "assumed safe on this branch".
    SAFE = "s"


# A cell is either a Mark or a revealed clue count in 0..8.
Cell = Union[Mark, int]

FLAG_SYMBOLS = frozenset({"F", "M"})
# Detonated / revealed mines behave exactly like flags under the constraints.
DETONATED_SYMBOLS = frozenset({"X", "!", "*"})


def is_clue(cell: object) -> bool:
    """Return True if the cell is a revealed clue count."""
    return isinstance(cell, int) and not isinstance(cell, bool)


def to_cell(value: object) -> Cell:
    """
    Normalize an external cell value into a Cell.

    Accepts the text symbols ("." unopened, "F"/"M" flag, "X"/"!"/"*" detonated,
    "s" safe hypothesis, "0".."8" clue), the knowledge-grid values used by
    solvers (None for unknown) and Mark/int values directly.

    Raises:
        ValueError: If the value is not a recognised cell state.
    """
    if value is None:
        return Mark.UNOPENED
    if isinstance(value, Mark):
        return value
    if is_clue(value):
        return _check_clue(value)  # type: ignore[arg-type]
    if isinstance(value, str):
        s = value.strip()
        if s == Mark.UNOPENED.value:
            return Mark.UNOPENED
        if s == Mark.SAFE.value:
            return Mark.SAFE
        if s in FLAG_SYMBOLS or s in DETONATED_SYMBOLS:
            return Mark.FLAGGED
        if len(s) == 1 and s.isdigit():
            return _check_clue(int(s))
    raise ValueError(f"Unrecognized cell value: {value!r}")


def cell_symbol(cell: Cell) -> str:
    """Return the one-character text symbol for a cell."""
    if isinstance(cell, Mark):
        return cell.value
    return str(cell)


def _check_clue(count: int) -> int:
    if not 0 <= count <= 8:
        raise ValueError(f"Clue counts must be in 0..8, got {count}.")
    return count
