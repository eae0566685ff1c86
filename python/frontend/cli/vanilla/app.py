"""Vanilla terminal frontend — no third-party dependencies.

Uses only print and ANSI codes to show the solution path and statistics.
"""

from __future__ import annotations

from backend.models.board import PuzzleState
from backend.models.result import SearchResult

# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _format_time(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    return f"{seconds:.2f}s"


# -- board rendering ----------------------------------------------------------


def _render_board(state: PuzzleState, goal: PuzzleState) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + ("---+" * 3)

    lines: list[str] = [sep]
    for r, row in enumerate(state.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} · {_R}")
            elif state.is_tile_correct(r, c, goal):
                cells.append(f"{_G} {val} {_R}")
            else:
                cells.append(f" {val} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _show_solution(result: SearchResult) -> None:
    moves = result.moves
    for i, state in enumerate(result.path):
        if i == 0:
            print(f"  {_DIM}Start{_R}")
        else:
            print(f"  Move {i}/{len(moves)}  ({moves[i - 1].value})")
        print(_render_board(state, result.goal))
        print()


def _show_stats(result: SearchResult) -> None:
    stats = result.stats
    print(
        f"  Moves: {_Y}{result.move_count}{_R}  |  "
        f"Time: {_Y}{_format_time(stats.elapsed)}{_R}"
    )
    print(
        f"  Expanded: {_Y}{stats.expanded}{_R}  |  "
        f"Unexpanded: {_Y}{stats.unexpanded}{_R}  |  "
        f"Generated: {_DIM}{stats.generated}{_R}"
    )


# -- public entry point -------------------------------------------------------


def run(result: SearchResult) -> None:
    """Print *result* to the terminal."""
    print()
    print(f"  {_C}=== {result.algorithm_label} ==={_R}")
    print()

    if not result.solved:
        print(_render_board(result.initial, result.goal))
        print()
        print(f"  {_RED}No solution found{_R}")
        print(
            f"  {_DIM}Expanded {result.stats.expanded} nodes in "
            f"{_format_time(result.stats.elapsed)}.{_R}"
        )
        return

    _show_solution(result)
    print(f"  {_G}★ Solution found! ★{_R}")
    print()
    _show_stats(result)
