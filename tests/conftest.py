import matplotlib

matplotlib.use("Agg")

import pytest

from minesweeper_heatmap import BoardSnapshot

# Row 0 holds a flag and two clues; the bottom-right cell touches no clue.
CORNER_BOARD = """
F 2 1
2 . .
1 . .
"""

# Two clues sharing the middle cell; (5, 0) and (6, 0) touch no clue.
ROW_BOARD = ". 1 . 1 . . ."


@pytest.fixture
def corner_board():
    return BoardSnapshot.parse(CORNER_BOARD)


@pytest.fixture
def row_board():
    return BoardSnapshot.parse(ROW_BOARD)
