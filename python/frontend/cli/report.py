"""Plain-text solution report, the layout written to the output files."""

from __future__ import annotations

import sys
from typing import TextIO

from backend.models.board import PuzzleState
from backend.models.result import SearchResult


def format_board(state: PuzzleState) -> str:
    """Three lines of space-separated tiles, blank shown as 0."""
    return str(state)


def write_report(result: SearchResult, stream: TextIO | None = None) -> None:
    """Write the solution path and search statistics to *stream*.

    An exhausted search writes a single ``No solution found`` line.
    """
    out = stream if stream is not None else sys.stdout

    if not result.solved:
        out.write("No solution found\n")
        return

    stats = result.stats
    lines: list[str] = [
        "Solution found!",
        "",
        "Initial state:",
        format_board(result.initial),
        "",
        "Solution path:",
    ]
    for state in result.path:
        lines.append(format_board(state))
        lines.append("")
    lines += [
        f"{result.move_count} Moves",
        f"Execution time: {stats.elapsed_ms} ms",
        f"Nodes expanded: {stats.expanded}",
        f"Nodes unexpanded: {stats.unexpanded}",
    ]
    out.write("\n".join(lines) + "\n")
