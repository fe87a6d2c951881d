from minesweeper_heatmap import BoardSnapshot, FrontierSolver, Mark


def test_single_clue_enumerates_every_placement():
    board = BoardSnapshot.parse("1.\n..")
    solver = FrontierSolver(board, 1)

    solutions = solver.solve()

    # SAFE is tried before FLAGGED, cell by cell in frontier order.
    assert [s.flagged_cells() for s in solutions] == [
        frozenset({(1, 1)}),
        frozenset({(0, 1)}),
        frozenset({(1, 0)}),
    ]
    assert all(s.flag_count == 1 for s in solutions)
    assert solver.elsewhere_count == 0


def test_solutions_resolve_every_frontier_cell():
    board = BoardSnapshot.parse("1.\n..")
    for solution in FrontierSolver(board, 1).solutions():
        for x, y in board.frontier():
            assert solution.board.cell_at(x, y) in (Mark.SAFE, Mark.FLAGGED)


def test_flag_budget_prunes_during_search(corner_board):
    solver = FrontierSolver(corner_board, 2)
    solutions = solver.solve()

    assert len(solutions) == 1
    assert solutions[0].flagged_cells() == frozenset({(0, 0), (1, 1)})
    assert solutions[0].is_mine((1, 1))
    assert not solutions[0].is_mine((2, 1))
    assert solver.stats.solutions_found == 1
    assert solver.stats.branches_pruned > 0
    assert solver.stats.frontier_len == 3


def test_leftover_mines_must_fit_elsewhere(corner_board):
    solver = FrontierSolver(corner_board, 4)
    solutions = solver.solve()

    assert solver.elsewhere_cells == frozenset({(2, 2)})
    assert [s.flagged_cells() for s in solutions] == [
        frozenset({(0, 0), (2, 1), (1, 2)}),
    ]


def test_unsatisfiable_board_yields_nothing():
    # The clues force exactly one mine and no cell lies away from them.
    board = BoardSnapshot.parse("1.0\n...")
    solver = FrontierSolver(board, 3)
    assert solver.solve() == []
    assert solver.stats.solutions_found == 0


def test_empty_frontier_yields_the_board_itself():
    board = BoardSnapshot.parse("...\n...")
    solver = FrontierSolver(board, 3)
    solutions = solver.solve()

    assert solver.frontier == ()
    assert len(solutions) == 1
    assert solutions[0].board == board
    assert solutions[0].flag_count == 0


def test_enumeration_is_deterministic(row_board):
    first = [s.flagged_cells() for s in FrontierSolver(row_board, 2).solutions()]
    second = [s.flagged_cells() for s in FrontierSolver(row_board, 2).solutions()]
    assert first == second == [
        frozenset({(2, 0)}),
        frozenset({(0, 0), (4, 0)}),
    ]


def test_large_frontier_does_not_hit_recursion_limit():
    # A 1-row strip alternating unknowns and 1-clues, deeper than the
    # default recursion limit. Mines sit on every other unknown.
    row = ". 1 " * 1000 + "."
    board = BoardSnapshot.parse(row)
    solver = FrontierSolver(board, 501)

    solutions = solver.solve()

    assert len(solver.frontier) == 1001
    assert len(solutions) == 1
    assert solutions[0].flag_count == 501
    assert solutions[0].is_mine((0, 0))
