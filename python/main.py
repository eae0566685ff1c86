#!/usr/bin/env python3
"""8-Puzzle Solver.

Usage::

    python main.py                        # interactive menu
    python main.py -a ucs                 # uniform cost, default board
    python main.py -a astar -b "1 2 3 4 5 6 0 7 8"
    python main.py -r --seed 7 -f vanilla # random solvable board
    python main.py -a astar -o out.txt    # also write the plain report
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import (  # noqa: E402
    DEFAULT_GOAL,
    DEFAULT_INITIAL,
    configure_logging,
    default_output_name,
)
from backend.engine.generator import BoardGenerator  # noqa: E402
from backend.engine.search import PuzzleSolver  # noqa: E402
from backend.models.board import InvalidBoardError, PuzzleState  # noqa: E402
from backend.models.result import Algorithm, SearchResult  # noqa: E402
from frontend.cli.input_handler import format_tiles, parse_board  # noqa: E402
from frontend.cli.report import write_report  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}

_MENU_CHOICES = {
    "1": Algorithm.UCS,
    "2": Algorithm.ASTAR,
}


# -- helpers ------------------------------------------------------------------


def _parse_option(text: Optional[str], default: PuzzleState, hint: str) -> PuzzleState:
    if text is None:
        return default
    try:
        return parse_board(text)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint=hint) from exc


def _save_report(result: SearchResult, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        write_report(result, f)


def _menu_loop(
    goal: PuzzleState = DEFAULT_GOAL,
    output: Optional[Path] = None,
    frontend: Optional[Frontend] = None,
    default_output: bool = False,
) -> None:
    """Prompt-driven run: default initial board, algorithm choice, report file.

    *goal* replaces the default goal and *output* the default report file,
    which is still written when *default_output* is set. A *frontend* also
    shows the result in the terminal.
    """
    print(f"Using default initial state: {format_tiles(DEFAULT_INITIAL)}")
    if goal == DEFAULT_GOAL:
        print(f"Using default goal state: {format_tiles(goal)}")
    else:
        print(f"Using goal state: {format_tiles(goal)}")
    print()
    print("Choose search algorithm:")
    for key, algorithm in _MENU_CHOICES.items():
        print(f"{key}. {algorithm.label}")

    choice = input("Enter choice (1 or 2): ").strip()
    if choice not in _MENU_CHOICES:
        print("Invalid choice. Exiting program.")
        return

    algorithm = _MENU_CHOICES[choice]
    print(f"Running {algorithm.label}...")
    result = PuzzleSolver.for_algorithm(algorithm, goal).search(DEFAULT_INITIAL)

    if frontend is not None:
        importlib.import_module(_RUNNERS[frontend]).run(result)

    targets: list[Path] = [output] if output is not None else []
    if default_output or output is None:
        targets.append(Path(default_output_name(algorithm)))
    for path in targets:
        _save_report(result, path)
        print(f"Solution saved to {path}")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    algorithm: Optional[Algorithm] = typer.Option(
        None, "-a", "--algorithm",
        help="Search algorithm. Omit (with no board) for the interactive menu.",
    ),
    board: Optional[str] = typer.Option(
        None, "-b", "--board",
        help='Initial board, row-major, 0 = blank (e.g. "8 7 6 5 4 3 2 1 0").',
    ),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Goal board, same format. Defaults to 1 2 3 4 5 6 7 8 0.",
    ),
    random_board: bool = typer.Option(
        False, "-r", "--random",
        help="Solve a random solvable board instead of --board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        help="Also write the plain-text report to this file.",
    ),
    default_output: bool = typer.Option(
        False, "--default-output",
        help="Also write the report to outputUniCost.txt / outputAstar.txt.",
    ),
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Terminal frontend used to show the result (default rich).",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """8-Puzzle Solver (uniform cost or A* with Manhattan distance)."""
    configure_logging(verbose)

    if algorithm is None and board is None and not random_board:
        if seed is not None:
            raise typer.BadParameter("--seed requires --random.", param_hint="--seed")
        _menu_loop(
            _parse_option(goal, DEFAULT_GOAL, "--goal"), output, frontend, default_output
        )
        return

    if board is not None and random_board:
        raise typer.BadParameter(
            "--board and --random are mutually exclusive.", param_hint="--random"
        )

    goal_state = _parse_option(goal, DEFAULT_GOAL, "--goal")
    if random_board:
        initial = BoardGenerator.generate(goal_state, seed=seed)
    else:
        initial = _parse_option(board, DEFAULT_INITIAL, "--board")

    algorithm = algorithm or Algorithm.ASTAR
    result = PuzzleSolver.for_algorithm(algorithm, goal_state).search(initial)

    mod = importlib.import_module(_RUNNERS[frontend or Frontend.rich])
    mod.run(result)

    targets: list[Path] = []
    if output is not None:
        targets.append(output)
    if default_output:
        targets.append(Path(default_output_name(algorithm)))
    for path in targets:
        _save_report(result, path)
        print(f"Solution saved to {path}")


if __name__ == "__main__":
    app()
