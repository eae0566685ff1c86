from backend.models.board import GOAL, Direction, InvalidBoardError, PuzzleState
from backend.models.node import SearchNode
from backend.models.result import Algorithm, SearchResult, SearchStats, SearchStatus

__all__ = [
    "GOAL",
    "Algorithm",
    "Direction",
    "InvalidBoardError",
    "PuzzleState",
    "SearchNode",
    "SearchResult",
    "SearchStats",
    "SearchStatus",
]
