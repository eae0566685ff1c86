from backend.engine.search.frontier import Frontier, VisitedSet
from backend.engine.search.solver import (
    Heuristic,
    PuzzleSolver,
    manhattan_heuristic,
    solve,
    zero_heuristic,
)

__all__ = [
    "Frontier",
    "Heuristic",
    "PuzzleSolver",
    "VisitedSet",
    "manhattan_heuristic",
    "solve",
    "zero_heuristic",
]
