"""
Minesweeper Heatmap - Interactive Demo

Run with: streamlit run app/demo.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import streamlit as st
from typing import List, Tuple

from minesweeper_heatmap import (
    BoardSnapshot,
    Mark,
    ProbabilityEngine,
    ProbabilityReport,
    likelihood_color,
    plot_heatmap,
    summarize_report,
)
from minesweeper_heatmap.analysis import cell_label

SAMPLE_BOARD = """\
F21
2..
1..
"""


def render_heatmap_html(board: BoardSnapshot, report: ProbabilityReport) -> str:
    """Render the board as an HTML table tinted by mine likelihood."""
    # Scale cell size based on board width
    if board.width >= 30:
        cell_size = 22
        font_size = "9px"
    elif board.width >= 16:
        cell_size = 28
        font_size = "11px"
    else:
        cell_size = 36
        font_size = "13px"

    colors = {
        "1": "#0000ff",
        "2": "#008000",
        "3": "#ff0000",
        "4": "#000080",
        "5": "#800000",
        "6": "#008080",
        "7": "#000000",
        "8": "#808080",
    }

    html = '<div style="font-family: monospace; line-height: 1.2;">'
    html += '<table style="border-collapse: collapse; margin: auto;">'

    for y in range(board.height):
        html += "<tr>"
        for x in range(board.width):
            cell = board.cell_at(x, y)
            label = cell_label(board, report, x, y)
            likelihood = report.likelihood_at(x, y)

            if cell is Mark.FLAGGED:
                bg = "#ffa500"
                text_color = "#ffffff"
            elif cell is Mark.UNOPENED:
                bg = likelihood_color(likelihood) if likelihood is not None else "#c0c0c0"
                text_color = "#333333"
                # Certain cells are called out explicitly instead of by tint
                if likelihood == 1:
                    label = "M"
                    text_color = "#ff0000"
                elif likelihood == 0:
                    label = "S"
                    text_color = "#008000"
            else:
                bg = "#f0f0f0" if label == "0" else "#ffffff"
                text_color = colors.get(label, "#cccccc")

            display = label if label != "0" else " "

            html += f'''<td style="
                width: {cell_size}px; height: {cell_size}px;
                text-align: center;
                background: {bg};
                border: 1px solid #999;
                color: {text_color};
                font-weight: bold;
                font-size: {font_size};
            ">{display}</td>'''
        html += "</tr>"

    html += "</table></div>"
    return html


def main():
    st.set_page_config(
        page_title="Minesweeper Heatmap",
        page_icon="💣",
        layout="wide",
    )

    st.title("Minesweeper Heatmap")
    st.markdown("""
    Mine likelihood for every unopened cell, from an exhaustive search over the
    cells next to a clue.
    """)

    # Sidebar configuration
    st.sidebar.header("Board")

    board_text = st.sidebar.text_area(
        "Board",
        SAMPLE_BOARD,
        height=240,
        help="One line per row. '.' unopened, 'F' flag, '*' detonated, '0'-'8' clue.",
    )
    mines = st.sidebar.number_input("Total mines", min_value=0, value=2, step=1)

    weighting = st.sidebar.selectbox(
        "Weighting",
        ["uniform", "bayesian"],
        format_func=lambda x: "Uniform (per solution)" if x == "uniform" else "Bayesian",
        help="uniform: every consistent frontier assignment counts once. "
             "bayesian: assignments are weighted by how many ways the remaining "
             "mines fit into cells away from the clues.",
    )

    max_frontier = st.sidebar.selectbox(
        "Max Frontier Size",
        [16, 24, 32, 48, "Unlimited"],
        index=4,
        help="Refuse boards with more frontier cells than this.",
    )
    max_frontier_val: float = float("inf") if max_frontier == "Unlimited" else float(max_frontier)

    try:
        board = BoardSnapshot.parse(board_text)
        engine = ProbabilityEngine(weighting=weighting, max_frontier_len=max_frontier_val)
        report = engine.compute(board, int(mines))
    except (ValueError, RuntimeError) as exc:
        st.error(str(exc))
        return

    col1, col2 = st.columns([3, 1])

    with col1:
        st.subheader("Heatmap")
        st.markdown(render_heatmap_html(board, report), unsafe_allow_html=True)

        if not report.has_solutions:
            st.warning("No mine placement is consistent with this board.")

        st.markdown("""
        <div style="font-size: 12px; margin-top: 10px;">
        <b>Legend:</b>
        <span style="color: #ff0000; font-weight: bold; margin: 0 4px;">M</span> Certain mine
        <span style="color: #008000; font-weight: bold; margin: 0 4px;">S</span> Certain safe
        <span style="background: #ffa500; color: white; padding: 2px 6px; margin: 0 4px; font-weight: bold;">F</span> Flagged
        <span style="background: #c0c0c0; padding: 2px 6px; margin: 0 4px;">?</span> Unknown
        </div>
        """, unsafe_allow_html=True)

        if st.checkbox("Show matplotlib plot"):
            ax = plot_heatmap(board, report)
            st.pyplot(ax.figure)

    with col2:
        st.subheader("Summary")
        summary = summarize_report(report)
        metrics: List[Tuple[str, object]] = [
            ("Solutions", summary["solution_count"]),
            ("Certain mines", summary["certain_mines"]),
            ("Certain safes", summary["certain_safes"]),
            ("Uncertain cells", summary["uncertain_cells"]),
        ]
        for label, value in metrics:
            st.metric(label, value)

        if report.elsewhere is not None:
            st.text(f"Away from clues: {report.elsewhere:.1%}")

        if report.stats is not None:
            st.markdown("---")
            st.markdown("**Search Statistics**")
            st.text(f"Frontier: {report.stats.frontier_len} cells")
            st.text(f"Nodes visited: {report.stats.nodes_visited}")
            st.text(f"Branches pruned: {report.stats.branches_pruned}")


if __name__ == "__main__":
    main()
