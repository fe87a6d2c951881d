"""
Quickstart example for the Minesweeper Heatmap engine.

This script demonstrates basic usage of the engine.
"""

from minesweeper_heatmap import (
    BoardSnapshot,
    ProbabilityEngine,
    compute,
    format_heatmap,
    summarize_report,
)


def main():
    print("=" * 60)
    print("Minesweeper Heatmap - Quickstart Example")
    print("=" * 60)

    # Example 1: Likelihoods for a small board
    print("\n1. A 3x3 board with one flag and 2 mines in total...")
    print("-" * 60)

    board = BoardSnapshot.parse("""
        F 2 1
        2 . .
        1 . .
    """)

    report = compute(board, 2)
    print(format_heatmap(board, report))
    print(f"Solutions: {report.solution_count}")
    print(f"Certain mines: {report.certain_mines()}")
    print(f"Certain safe cells: {report.certain_safes()}")

    # Example 2: Same board, more mines
    print("\n2. The same board with 4 mines in total...")
    print("-" * 60)

    report = compute(board, 4)
    print(format_heatmap(board, report))
    print(f"Likelihood at (2, 2): {report.likelihood_at(2, 2)}")

    # Example 3: An inconsistent board
    print("\n3. A clue with too many flags around it...")
    print("-" * 60)

    bad_board = BoardSnapshot.parse("""
        2 F .
        F F 2
    """)
    report = compute(bad_board, 3)
    print(format_heatmap(bad_board, report))
    print(f"Has solutions: {report.has_solutions}")

    # Example 4: Compare weightings
    print("\n4. Uniform vs Bayesian weighting...")
    print("-" * 60)

    row_board = BoardSnapshot.parse(". 1 . 1 . . .")
    for weighting in ("uniform", "bayesian"):
        report = ProbabilityEngine(weighting=weighting).compute(row_board, 2)
        summary = summarize_report(report)
        print(f"{weighting:10s}: {format_heatmap(row_board, report, show_coords=False)}")
        print(f"{'':10s}  elsewhere = {summary['elsewhere']:.3f}")

    print("\n" + "=" * 60)
    print("Done! Run `minesweeper-heatmap --help` for the command-line tool.")
    print("=" * 60)


if __name__ == "__main__":
    main()
