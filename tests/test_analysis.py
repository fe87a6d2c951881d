import pytest
from matplotlib.axes import Axes

from minesweeper_heatmap import (
    ProbabilityReport,
    compute,
    format_heatmap,
    likelihood_color,
    plot_heatmap,
    summarize_report,
)
from minesweeper_heatmap.analysis import cell_label


def test_cell_labels(corner_board):
    report = compute(corner_board, 2)
    assert cell_label(corner_board, report, 0, 0) == "F"
    assert cell_label(corner_board, report, 1, 0) == "2"
    assert cell_label(corner_board, report, 1, 1) == "100%"
    assert cell_label(corner_board, report, 2, 2) == "0%"


def test_cell_label_unknown(corner_board):
    report = ProbabilityReport.empty(3, 3)
    assert cell_label(corner_board, report, 1, 1) == "?"


def test_format_heatmap(corner_board):
    text = format_heatmap(corner_board, compute(corner_board, 2))
    lines = text.splitlines()

    assert len(lines) == 2 + corner_board.height
    assert lines[0] == "      0   1   2"
    assert lines[3] == " 1|   2100%  0%"


def test_format_heatmap_without_coords(row_board):
    text = format_heatmap(row_board, compute(row_board, 2), show_coords=False)
    assert text == " 50%   1 50%   1 50% 25% 25%"


def test_format_heatmap_color_marks_certain_cells(corner_board):
    text = format_heatmap(corner_board, compute(corner_board, 2), color=True)
    assert "\033[91m100%" in text
    assert "\033[92m  0%" in text


def test_likelihood_color():
    assert likelihood_color(0) == "hsl(120 100% 50% / 25%)"
    assert likelihood_color(0.5) == "hsl(60 100% 50% / 25%)"
    assert likelihood_color(1) == "hsl(0 100% 50% / 25%)"
    with pytest.raises(ValueError):
        likelihood_color(1.5)


def test_plot_heatmap(corner_board):
    ax = plot_heatmap(corner_board, compute(corner_board, 2))
    assert isinstance(ax, Axes)
    assert len(ax.images) == 1
    assert len(ax.texts) == 9


def test_plot_heatmap_on_given_axes(row_board):
    import matplotlib.pyplot as plt

    _, ax = plt.subplots()
    assert plot_heatmap(row_board, compute(row_board, 2), ax, annotate=False) is ax
    assert len(ax.texts) == 0


def test_summarize_report(row_board):
    summary = summarize_report(compute(row_board, 2))
    assert summary == {
        "solution_count": 2,
        "frontier_cells": 3,
        "elsewhere_cells": 2,
        "certain_mines": 0,
        "certain_safes": 0,
        "uncertain_cells": 5,
        "min_likelihood": 0.25,
        "elsewhere": 0.25,
    }


def test_summarize_empty_report():
    summary = summarize_report(ProbabilityReport.empty(2, 2))
    assert summary["solution_count"] == 0
    assert summary["min_likelihood"] is None
    assert summary["elsewhere"] is None
