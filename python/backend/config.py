"""Defaults and logging setup shared by the CLI frontends."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from backend.models.board import GOAL, PuzzleState
from backend.models.result import Algorithm

DEFAULT_INITIAL = PuzzleState((8, 7, 6, 5, 4, 3, 2, 1, 0))
DEFAULT_GOAL = GOAL

OUTPUT_NAMES: dict[Algorithm, str] = {
    Algorithm.UCS: "outputUniCost.txt",
    Algorithm.ASTAR: "outputAstar.txt",
}

LOG_FORMAT = "%(message)s"
LOG_DATE_FORMAT = "[%X]"


def default_output_name(algorithm: Algorithm) -> str:
    return OUTPUT_NAMES[Algorithm(algorithm)]


def configure_logging(verbose: bool = False) -> None:
    """Route log records through Rich. WARNING by default, DEBUG if verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
        force=True,
    )
