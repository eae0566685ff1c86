"""Search-tree node."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Direction, PuzzleState


@dataclass(frozen=True)
class SearchNode:
    """A board state reached by a specific path from the root.

    ``parent`` is a plain back-reference used only to rebuild the path; a
    node never knows its children, so the tree has no cycles.
    """

    state: PuzzleState
    cost: int = 0
    heuristic: int = 0
    move: Direction | None = None
    parent: SearchNode | None = None

    @property
    def priority(self) -> int:
        return self.cost + self.heuristic

    def child(self, move: Direction, state: PuzzleState, heuristic: int) -> SearchNode:
        """Return the node one unit-cost move below this one."""
        return SearchNode(
            state=state,
            cost=self.cost + 1,
            heuristic=heuristic,
            move=move,
            parent=self,
        )

    def path(self) -> list[SearchNode]:
        """Return the nodes from the root down to this node (root first)."""
        nodes: list[SearchNode] = []
        node: SearchNode | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes
