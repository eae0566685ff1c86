"""Board parsing for the CLI frontends.

Accepts the forms a user is likely to type::

    8 7 6 5 4 3 2 1 0
    8,7,6,5,4,3,2,1,0
    876543210
"""

from __future__ import annotations

import re

from backend.models.board import InvalidBoardError, PuzzleState

_SEPARATORS = re.compile(r"[\s,;]+")


def parse_board(text: str) -> PuzzleState:
    """Parse *text* into a validated ``PuzzleState``.

    Raises ``InvalidBoardError`` if the text is not nine tiles forming a
    permutation of 0-8.
    """
    raw = text.strip()
    if not raw:
        raise InvalidBoardError("Board is empty.")

    tokens = [t for t in _SEPARATORS.split(raw) if t]
    if len(tokens) == 1 and tokens[0].isdigit():
        tokens = list(tokens[0])

    try:
        tiles = [int(t) for t in tokens]
    except ValueError:
        raise InvalidBoardError(f"Board {text!r} contains non-numeric tiles.") from None

    return PuzzleState.from_flat(tiles)


def format_tiles(state: PuzzleState) -> str:
    """Inverse of ``parse_board``: one line of space-separated tiles."""
    return " ".join(str(v) for v in state.cells)
