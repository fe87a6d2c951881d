"""Terminal front-ends: a one-shot heatmap printer and an interactive explorer."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .aggregator import WEIGHTINGS
from .analysis import format_heatmap, summarize_report
from .board import BoardSnapshot
from .cells import Mark
from .engine import FrontierTooLargeError, ProbabilityEngine
from .report import ProbabilityReport

_HELP = (
    "Commands (0-based coordinates):\n"
    "  f x y    toggle a flag on an unopened cell\n"
    "  n x y k  reveal a clue showing k\n"
    "  u x y    turn a cell back into an unopened cell\n"
    "  q        quit"
)


def describe_report(report: ProbabilityReport) -> str:
    """One-line status shown under the heatmap."""
    if not report.has_solutions:
        return "No mine placement is consistent with this board."
    summary = summarize_report(report)
    return (
        f"{report.solution_count} solutions, "
        f"{summary['certain_mines']} certain mines, "
        f"{summary['certain_safes']} certain safe cells."
    )


def apply_command(board: BoardSnapshot, parts: List[str]) -> BoardSnapshot:
    """
    Apply one explorer command to a board.

    Raises:
        ValueError: On malformed commands or cells that cannot take the edit.
        IndexError: On coordinates outside the board.
    """
    if not parts:
        raise ValueError("empty command.")

    op, args = parts[0].lower(), parts[1:]
    expected = 3 if op == "n" else 2
    if op not in {"f", "n", "u"} or len(args) != expected:
        raise ValueError(f"unknown command {' '.join(parts)!r}.")

    x, y = int(args[0]), int(args[1])
    cell = board.cell_at(x, y)

    if op == "f":
        if cell is Mark.UNOPENED:
            return board.replace((x, y), Mark.FLAGGED)
        if cell is Mark.FLAGGED:
            return board.replace((x, y), Mark.UNOPENED)
        raise ValueError("only unopened cells can be flagged.")
    if op == "n":
        return board.replace((x, y), int(args[2]))
    return board.replace((x, y), Mark.UNOPENED)


def explore_cli(
    board: BoardSnapshot,
    mines_count: int,
    engine: Optional[ProbabilityEngine] = None,
    *,
    color: bool = False,
) -> BoardSnapshot:
    """
    Run a terminal loop that edits a board and reprints its heatmap.

    Args:
        board: Starting board.
        mines_count: Total mines on the board.
        engine: Engine to use; a default ProbabilityEngine when omitted.
        color: Use ANSI colors in the heatmap.

    Returns:
        The board as it was when the user quit.
    """
    engine = engine or ProbabilityEngine()
    print("Minesweeper heatmap explorer. Type 'q' to quit.\n")
    print(_HELP)

    while True:
        report = engine.compute(board, mines_count)
        print()
        print(format_heatmap(board, report, color=color))
        print(describe_report(report))

        s = input("\nCommand: ").strip()
        if s.lower() in {"q", "quit", "exit"}:
            print("Quit.")
            return board

        parts = s.replace(",", " ").split()
        try:
            board = apply_command(board, parts)
        except (ValueError, IndexError) as exc:
            print(f"Invalid command: {exc}")
            print(_HELP)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="minesweeper-heatmap",
        description="Print the mine likelihood of every unopened cell of a board.",
    )
    parser.add_argument(
        "board", nargs="?", default="-",
        help="board text file ('.' unopened, 'F' flag, '0'-'8' clue); '-' reads stdin",
    )
    parser.add_argument("-m", "--mines", type=int, required=True, help="total mine count")
    parser.add_argument("--weighting", choices=WEIGHTINGS, default="uniform")
    parser.add_argument("--max-frontier", type=int, default=None)
    parser.add_argument("-i", "--interactive", action="store_true")
    parser.add_argument("--color", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.board == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.board).read_text(encoding="utf-8")

    try:
        board = BoardSnapshot.parse(text)
        engine = ProbabilityEngine(
            weighting=args.weighting,
            max_frontier_len=(
                float("inf") if args.max_frontier is None else args.max_frontier
            ),
        )
        if args.interactive:
            explore_cli(board, args.mines, engine, color=args.color)
            return 0
        report = engine.compute(board, args.mines)
    except (ValueError, FrontierTooLargeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(format_heatmap(board, report, color=args.color))
    print(describe_report(report))
    if report.elsewhere is not None:
        print(f"Cells away from every clue: {report.elsewhere:.1%} each.")
    return 0
