import pytest

from minesweeper_heatmap import BoardSnapshot, Mark


class FakeGame:
    width = 2
    height = 2
    mines_count = 1

    def __init__(self):
        self.grid = [[None, "M"], ["!", 2]]

    def cell_state(self, x, y):
        return self.grid[y][x]


def test_parse_symbols():
    board = BoardSnapshot.parse("2F.\n*X8")
    assert (board.width, board.height) == (3, 2)
    assert board.rows == (
        (2, Mark.FLAGGED, Mark.UNOPENED),
        (Mark.FLAGGED, Mark.FLAGGED, 8),
    )


def test_parse_ignores_spacing_and_blank_lines():
    spaced = BoardSnapshot.parse("\n  2 F .\n\n  1 . .\n")
    compact = BoardSnapshot.parse("2F.\n1..")
    assert spaced == compact
    assert hash(spaced) == hash(compact)


@pytest.mark.parametrize("text", ["", "12\n1", "9..", "?.."])
def test_parse_rejects_malformed_boards(text):
    with pytest.raises(ValueError):
        BoardSnapshot.parse(text)


def test_from_rows_accepts_knowledge_grid():
    board = BoardSnapshot.from_rows([[None, "M"], ["X", "3"]])
    assert board.rows == ((Mark.UNOPENED, Mark.FLAGGED), (Mark.FLAGGED, 3))


def test_from_game_treats_detonated_as_flag():
    board = BoardSnapshot.from_game(FakeGame())
    assert board.cell_at(0, 1) is Mark.FLAGGED
    assert board.cell_at(1, 1) == 2
    assert board.count_flags() == 2
    assert board.count_unopened() == 1


def test_cell_at_out_of_range():
    board = BoardSnapshot.parse("..\n..")
    with pytest.raises(IndexError):
        board.cell_at(-1, 0)
    with pytest.raises(IndexError):
        board.cell_at(2, 0)


def test_neighbors_are_row_major():
    board = BoardSnapshot.parse("...\n...\n...")
    assert board.neighbors_of(1, 1) == (
        (0, 0), (1, 0), (2, 0),
        (0, 1), (2, 1),
        (0, 2), (1, 2), (2, 2),
    )
    assert board.neighbors_of(0, 0) == ((1, 0), (0, 1), (1, 1))
    assert board.neighbors_of(2, 2) == ((1, 1), (2, 1), (1, 2))


def test_frontier(corner_board):
    assert corner_board.frontier() == [(1, 1), (2, 1), (1, 2)]
    assert list(corner_board.clue_cells()) == [(1, 0), (2, 0), (0, 1), (0, 2)]


def test_counts(corner_board):
    assert corner_board.count_flags() == 1
    assert corner_board.count_unopened() == 4


def test_with_cell_set_returns_independent_snapshot():
    board = BoardSnapshot.parse("1.\n..")
    flagged = board.with_cell_set((1, 0), Mark.FLAGGED)

    assert flagged is not None
    assert flagged.cell_at(1, 0) is Mark.FLAGGED
    assert board.cell_at(1, 0) is Mark.UNOPENED
    # Untouched rows are shared, not copied.
    assert flagged.rows[1] is board.rows[1]


def test_with_cell_set_rejects_overflagged_clue():
    board = BoardSnapshot.parse("1.\n..")
    flagged = board.with_cell_set((1, 0), Mark.FLAGGED)
    assert flagged.with_cell_set((0, 1), Mark.FLAGGED) is None


def test_with_cell_set_rejects_starved_clue():
    board = BoardSnapshot.parse("1.\n..")
    step = board.with_cell_set((1, 0), Mark.SAFE)
    step = step.with_cell_set((0, 1), Mark.SAFE)
    assert step is not None
    assert step.with_cell_set((1, 1), Mark.SAFE) is None
    assert step.with_cell_set((1, 1), Mark.FLAGGED) is not None


def test_with_cell_set_checks_new_clue():
    board = BoardSnapshot.parse("F.\n..")
    assert board.with_cell_set((1, 1), 0) is None
    assert board.with_cell_set((1, 1), 1) is not None


def test_format_round_trip(corner_board):
    assert corner_board.format() == "F21\n2..\n1.."
    assert BoardSnapshot.parse(corner_board.format()) == corner_board
