"""Reporter tests: plain report layout and terminal frontends."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from backend.engine.search import solve
from backend.models.board import GOAL, InvalidBoardError, PuzzleState
from backend.models.result import Algorithm, SearchResult, SearchStats, SearchStatus
from frontend.cli.input_handler import format_tiles, parse_board
from frontend.cli.report import format_board, write_report
from frontend.cli.rich import app as rich_app
from frontend.cli.vanilla import app as vanilla_app

_NEAR = PuzzleState((1, 2, 3, 4, 5, 6, 7, 0, 8))
_UNSOLVABLE = PuzzleState((1, 2, 3, 4, 5, 6, 8, 7, 0))


def _exhausted(algorithm: Algorithm) -> SearchResult:
    """An exhausted result without paying for a full search."""
    return SearchResult(
        status=SearchStatus.EXHAUSTED,
        algorithm=algorithm,
        initial=_UNSOLVABLE,
        goal=GOAL,
        stats=SearchStats(expanded=181_440, generated=300_000, max_frontier=24_000),
    )


# -- plain report -------------------------------------------------------------


def test_format_board() -> None:
    assert format_board(_NEAR) == "1 2 3\n4 5 6\n7 0 8"


def test_report_rows_have_no_trailing_space() -> None:
    buf = io.StringIO()
    write_report(solve(_NEAR, Algorithm.UCS), buf)
    assert all(line == line.rstrip() for line in buf.getvalue().splitlines())


def test_report_layout_for_solution() -> None:
    result = solve(_NEAR, Algorithm.ASTAR)
    buf = io.StringIO()
    write_report(result, buf)
    lines = buf.getvalue().splitlines()

    assert lines[:8] == [
        "Solution found!",
        "",
        "Initial state:",
        "1 2 3",
        "4 5 6",
        "7 0 8",
        "",
        "Solution path:",
    ]
    # Two boards in the path, each followed by a blank line.
    assert lines[8:16] == [
        "1 2 3", "4 5 6", "7 0 8", "",
        "1 2 3", "4 5 6", "7 8 0", "",
    ]
    assert lines[16] == "1 Moves"
    assert lines[17].startswith("Execution time: ")
    assert lines[17].endswith(" ms")
    assert lines[18] == f"Nodes expanded: {result.stats.expanded}"
    assert lines[19] == f"Nodes unexpanded: {result.stats.unexpanded}"
    assert len(lines) == 20


def test_report_for_no_solution() -> None:
    result = _exhausted(Algorithm.ASTAR)
    buf = io.StringIO()
    write_report(result, buf)
    assert buf.getvalue() == "No solution found\n"


def test_report_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    write_report(solve(GOAL, Algorithm.UCS))
    out = capsys.readouterr().out
    assert out.startswith("Solution found!")
    assert "0 Moves" in out


# -- terminal frontends -------------------------------------------------------


def test_vanilla_frontend_prints_solution(capsys: pytest.CaptureFixture[str]) -> None:
    vanilla_app.run(solve(_NEAR, Algorithm.UCS))
    out = capsys.readouterr().out
    assert "Uniform Cost Search" in out
    assert "Move 1/1  (left)" in out
    assert "Solution found!" in out


def test_vanilla_frontend_prints_no_solution(capsys: pytest.CaptureFixture[str]) -> None:
    vanilla_app.run(_exhausted(Algorithm.ASTAR))
    out = capsys.readouterr().out
    assert "No solution found" in out


def test_rich_frontend_renders_stats() -> None:
    console = Console(file=io.StringIO(), width=120, color_system=None)
    result = solve(_NEAR, Algorithm.ASTAR)
    rich_app.run(result, console)
    out = console.file.getvalue()

    assert "A* Search with Manhattan Distance" in out
    assert "Solution found!" in out
    assert "Nodes expanded" in out
    assert "1. left" in out


def test_rich_frontend_no_solution() -> None:
    console = Console(file=io.StringIO(), width=120, color_system=None)
    rich_app.run(_exhausted(Algorithm.UCS), console)
    out = console.file.getvalue()

    assert "No solution found" in out
    assert "Solution path" not in out


# -- board parsing ------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    ["8 7 6 5 4 3 2 1 0", "8,7,6,5,4,3,2,1,0", "876543210", "  8, 7 6;5 4 3 2 1 0 "],
    ids=["spaces", "commas", "compact", "mixed"],
)
def test_parse_board_forms(text: str) -> None:
    assert parse_board(text).cells == (8, 7, 6, 5, 4, 3, 2, 1, 0)


@pytest.mark.parametrize(
    "text",
    ["", "1 2 3", "a b c d e f g h i", "1 2 3 4 5 6 7 8 8", "12345678"],
    ids=["empty", "short", "letters", "duplicate", "compact-short"],
)
def test_parse_board_rejects_bad_input(text: str) -> None:
    with pytest.raises(InvalidBoardError):
        parse_board(text)


def test_format_tiles_round_trips() -> None:
    assert parse_board(format_tiles(_NEAR)) == _NEAR
