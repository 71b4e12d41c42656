"""
Grid Node class for jump point search
Represents a single cell of the 2D grid together with its search state
"""

from enum import Enum
from typing import Optional

from .coordinates import Coordinate


class NodeState(Enum):
    """Node states for the search loop"""
    UNVISITED = 0
    OPENSET = 1
    CLOSEDSET = 2


class GridNode:
    """
    Represents a single node in the 2D grid for jump point search

    Attributes:
        index: Cartesian grid coordinates (x, y)
        is_obstacle: Whether the cell is blocked, fixed at grid construction
        g_cost: Cost of the best known path from the start to this node
        h_cost: Heuristic estimate from this node to the goal
        state: Current node state in the search loop
        parent: Coordinate of the previous jump point on the best known path
        rounds: Search round identifier, used to reset stale state lazily
    """

    def __init__(self, x: int, y: int, is_obstacle: bool = False):
        self.index = Coordinate(x, y)
        self.is_obstacle = is_obstacle

        # Search variables
        self.g_cost = 0.0
        self.h_cost = 0.0
        self.state = NodeState.UNVISITED
        self.parent: Optional[Coordinate] = None

        self.rounds = 0

    @property
    def x(self) -> int:
        return self.index.x

    @property
    def y(self) -> int:
        return self.index.y

    def reset(self, rounds: Optional[int] = None):
        """Clear state left behind by a previous search"""
        self.g_cost = 0.0
        self.h_cost = 0.0
        self.state = NodeState.UNVISITED
        self.parent = None
        if rounds is not None:
            self.rounds = rounds

    def __eq__(self, other):
        """Equality comparison based on grid index"""
        if not isinstance(other, GridNode):
            return False
        return self.index == other.index

    def __hash__(self):
        return hash(self.index)

    def __repr__(self):
        return (f"GridNode(index=({self.x}, {self.y}), g={self.g_cost:.2f}, "
                f"h={self.h_cost:.2f}, state={self.state.name})")
