"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output of the same data the plain
report writes: the solution path and the search statistics.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.models.board import PuzzleState
from backend.models.result import SearchResult

console = Console()

# Boards per row in the solution strip.
PATH_COLUMNS = 6


# -- board rendering ----------------------------------------------------------


def _render_board(state: PuzzleState, goal: PuzzleState, title: str = "") -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        title=title or None,
        title_style="dim",
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(state.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif state.is_tile_correct(r, c, goal):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_path(result: SearchResult) -> Columns:
    moves = result.moves
    boards = []
    for i, state in enumerate(result.path):
        title = "start" if i == 0 else f"{i}. {moves[i - 1].value}"
        boards.append(_render_board(state, result.goal, title))
    return Columns(boards, padding=(0, 2), width=16)


def _render_stats(result: SearchResult) -> Table:
    stats = result.stats
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        show_header=False,
    )
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")

    if result.solved:
        table.add_row("Moves", str(result.move_count))
    table.add_row("Execution time", f"{stats.elapsed_ms} ms")
    table.add_row("Nodes expanded", str(stats.expanded))
    table.add_row("Nodes unexpanded", str(stats.unexpanded))
    table.add_row("Nodes generated", str(stats.generated))
    table.add_row("Peak frontier", str(stats.max_frontier))
    return table


# -- public entry point -------------------------------------------------------


def run(result: SearchResult, out: Console | None = None) -> None:
    """Print *result* to the terminal."""
    out = out or console

    header = Group(
        Align.center(_render_board(result.initial, result.goal, "initial")),
        Align.center(_render_board(result.goal, result.goal, "goal")),
    )
    out.print()
    out.print(
        Panel(
            header,
            title=f"[bold cyan]{result.algorithm_label}[/bold cyan]",
            subtitle=(
                f"[dim]manhattan {result.initial.manhattan_distance(result.goal)}"
                f" · misplaced {result.initial.misplaced_tiles(result.goal)}[/dim]"
            ),
            border_style="bright_blue",
            padding=(1, 2),
        )
    )

    if result.solved:
        out.print(
            Panel(
                _render_path(result),
                title="[bold green]Solution path[/bold green]",
                border_style="green",
                padding=(1, 2),
            )
        )
        verdict = Text("★ Solution found! ★", style="bold green")
    else:
        verdict = Text("No solution found", style="bold red")

    out.print(Align.center(verdict))
    out.print(Align.center(_render_stats(result)))
