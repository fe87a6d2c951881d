"""Immutable board snapshots decoupled from any live game object."""

from typing import Iterator, List, Optional, Protocol, Sequence, Tuple

from .cells import Cell, Mark, cell_symbol, is_clue, to_cell
from .constraints import LocalConstraint
from .utils import Coord, Neighborhoods, get_neighborhoods, in_bounds, iter_coords

Rows = Tuple[Tuple[Cell, ...], ...]


class GameView(Protocol):
    """
    Read-only view of a game the engine can snapshot.

    cell_state(x, y) returns a knowledge-grid value: None for an unopened
    cell, "M"/"F" for a marked one, "X"/"!" for a detonated mine, or the
    revealed clue count as an int or digit string.
    """

    width: int
    height: int
    mines_count: int

    def cell_state(self, x: int, y: int) -> object:
        ...


class BoardSnapshot:
    """
    A width x height grid of cell states that never changes after creation.

    Derived snapshots (with_cell_set / replace) copy only the row that
    changed and share every other row with their parent, so a search can
    branch freely without any state leaking between branches.
    """

    __slots__ = ("width", "height", "_rows", "_neighborhoods")

    def __init__(self, rows: Sequence[Sequence[object]]) -> None:
        """
        Build a snapshot from rows of cell values (see cells.to_cell).

        Raises:
            ValueError: If the grid is empty, ragged, or holds unknown values.
        """
        if not rows or not rows[0]:
            raise ValueError("A board needs at least one row and one column.")

        width = len(rows[0])
        normalized: List[Tuple[Cell, ...]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {y} has {len(row)} cells, expected {width}."
                )
            normalized.append(tuple(to_cell(v) for v in row))

        self._assign(tuple(normalized))

    def _assign(self, rows: Rows) -> None:
        self._rows = rows
        self.height = len(rows)
        self.width = len(rows[0])
        self._neighborhoods: Neighborhoods = get_neighborhoods(
            self.width, self.height
        )

    def _derive(self, rows: Rows) -> "BoardSnapshot":
        board = object.__new__(BoardSnapshot)
        board._rows = rows
        board.height = self.height
        board.width = self.width
        board._neighborhoods = self._neighborhoods
        return board

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[object]]) -> "BoardSnapshot":
        """Build a snapshot from a knowledge grid (rows[y][x])."""
        return cls(rows)

    @classmethod
    def parse(cls, text: str) -> "BoardSnapshot":
        """
        Parse the text encoding: one line per row, one symbol per cell.

        Whitespace inside a line is ignored and blank lines are skipped, so
        both "2FF" and "2 F F" describe the same row.
        """
        rows: List[List[str]] = []
        for line in text.splitlines():
            symbols = "".join(line.split())
            if symbols:
                rows.append(list(symbols))
        return cls(rows)

    @classmethod
    def from_game(cls, game: GameView) -> "BoardSnapshot":
        """Copy the visible state of a game into a new snapshot."""
        return cls(
            [
                [game.cell_state(x, y) for x in range(game.width)]
                for y in range(game.height)
            ]
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> Rows:
        return self._rows

    def cell_at(self, x: int, y: int) -> Cell:
        """
        Return the state of the cell at (x, y).

        Raises:
            IndexError: If (x, y) is outside the board.
        """
        if not in_bounds(x, y, self.width, self.height):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.width}x{self.height} board."
            )
        return self._rows[y][x]

    def neighbors_of(self, x: int, y: int) -> Tuple[Coord, ...]:
        """Return the in-bounds 8-neighbourhood of (x, y) in row-major order."""
        self.cell_at(x, y)
        return self._neighborhoods[(x, y)]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield (x, y, cell) for every position in row-major order."""
        for x, y in iter_coords(self.width, self.height):
            yield x, y, self._rows[y][x]

    def clue_cells(self) -> Iterator[Coord]:
        for x, y, cell in self.cells():
            if is_clue(cell):
                yield x, y

    def count_flags(self) -> int:
        return sum(row.count(Mark.FLAGGED) for row in self._rows)

    def count_unopened(self) -> int:
        return sum(row.count(Mark.UNOPENED) for row in self._rows)

    def frontier(self) -> List[Coord]:
        """
        Return the unopened cells adjacent to at least one clue.

        The list is in row-major order; the solver assigns cells in exactly
        this order, which keeps enumeration deterministic.
        """
        coords: List[Coord] = []
        for x, y, cell in self.cells():
            if cell is not Mark.UNOPENED:
                continue
            if any(
                is_clue(self._rows[ny][nx]) for nx, ny in self._neighborhoods[(x, y)]
            ):
                coords.append((x, y))
        return coords

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def replace(self, pos: Coord, state: object) -> "BoardSnapshot":
        """Return a copy with one cell changed, without any consistency check."""
        x, y = pos
        self.cell_at(x, y)
        row = list(self._rows[y])
        row[x] = to_cell(state)
        return self._derive(self._rows[:y] + (tuple(row),) + self._rows[y + 1:])

    def with_cell_set(self, pos: Coord, state: object) -> Optional["BoardSnapshot"]:
        """
        Return a copy with one cell changed, or None if that breaks a clue.

        Only the clues touching pos (and pos itself, if it becomes a clue) are
        re-checked, so the cost is bounded by the neighbourhood size and not by
        the board size.
        """
        board = self.replace(pos, state)
        x, y = pos

        to_check: List[Coord] = [
            (nx, ny)
            for nx, ny in self._neighborhoods[(x, y)]
            if is_clue(board._rows[ny][nx])
        ]
        if is_clue(board._rows[y][x]):
            to_check.append(pos)

        for cx, cy in to_check:
            if not LocalConstraint.at(board, cx, cy).holds(board):
                return None
        return board

    # -------------------------------------------------------------------------
    # Display / comparison
    # -------------------------------------------------------------------------

    def format(self) -> str:
        """Render the snapshot back into its text encoding."""
        return "\n".join(
            "".join(cell_symbol(cell) for cell in row) for row in self._rows
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardSnapshot):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"BoardSnapshot({self.width}x{self.height})"
