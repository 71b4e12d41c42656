"""
Grid map for jump point search
Answers walkability and reachability queries and owns the per-cell nodes
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from .coordinates import Coordinate
from .exceptions import InvalidConfiguration
from .grid_node import GridNode


class WalkabilityMap(ABC):
    """Abstract interface for the walkability queries the planner needs"""

    @abstractmethod
    def is_outside(self, x: int, y: int) -> bool:
        """Check if a position lies beyond the map boundaries"""
        pass

    @abstractmethod
    def is_obstacle(self, x: int, y: int) -> bool:
        """Check if a position is blocked; positions outside the map count as blocked"""
        pass

    @abstractmethod
    def get_or_create_node(self, x: int, y: int) -> Optional[GridNode]:
        """Get the node at a position, or None outside the map"""
        pass

    def is_walkable(self, x: int, y: int) -> bool:
        return not self.is_outside(x, y) and not self.is_obstacle(x, y)

    def reachable(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        """
        Check if (to_x, to_y) can be entered from the neighboring (from_x, from_y)

        Straight moves only need a walkable destination. Diagonal moves also need
        one of the two shoulder cells to be walkable, so the path never squeezes
        between two obstacles touching at a corner:

            | OBSTACLE |    TO    |
            |   FROM   | OBSTACLE |
        """
        if not self.is_walkable(to_x, to_y):
            return False
        if from_x == to_x or from_y == to_y:
            return True
        return self.is_walkable(from_x, to_y) or self.is_walkable(to_x, from_y)

    def begin_search(self) -> int:
        """Start a new search round and return its identifier"""
        self.search_rounds = getattr(self, "search_rounds", 0) + 1
        return self.search_rounds


class GridMap(WalkabilityMap):
    """
    Dense rectangular grid in the Cartesian frame

    Obstacles are kept in a boolean numpy array indexed [x - min_x, y - min_y].
    Nodes are created on first access and cached for the lifetime of the map.
    Width and height are fixed after construction.
    """

    def __init__(self, width: int, height: int, bottom_left: Tuple[int, int] = (0, 0)):
        """
        Args:
            width: Number of columns
            height: Number of rows
            bottom_left: Cartesian coordinate of the lower-left cell
        """
        if width <= 0 or height <= 0:
            raise InvalidConfiguration(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height

        min_x, min_y = bottom_left
        self.bottom_left = Coordinate(min_x, min_y)
        self.bottom_right = Coordinate(min_x + width - 1, min_y)
        self.top_left = Coordinate(min_x, min_y + height - 1)
        self.top_right = Coordinate(min_x + width - 1, min_y + height - 1)

        self.grid = np.zeros((width, height), dtype=bool)
        self.nodes: Dict[Coordinate, GridNode] = {}

        # Incremented by every search so stale node state can be detected
        self.search_rounds = 0

    @classmethod
    def from_corners(cls, top_left: Tuple[int, int], top_right: Tuple[int, int],
                     bottom_left: Tuple[int, int], bottom_right: Tuple[int, int]) -> 'GridMap':
        """Build an empty grid from the coordinates of its four corners"""
        width = top_right[0] - top_left[0] + 1
        height = top_left[1] - bottom_left[1] + 1
        if bottom_right != (bottom_left[0] + width - 1, bottom_left[1]) or \
                top_right[1] != top_left[1]:
            raise InvalidConfiguration(
                f"Corners {top_left}, {top_right}, {bottom_left}, {bottom_right} do not form a rectangle")
        return cls(width, height, bottom_left)

    @classmethod
    def from_array(cls, occupancy: np.ndarray, bottom_left: Tuple[int, int] = (0, 0)) -> 'GridMap':
        """
        Build a grid from a 2D array indexed [x, y]

        Any truthy cell becomes an obstacle.
        """
        occupancy = np.asarray(occupancy)
        if occupancy.ndim != 2:
            raise InvalidConfiguration(f"Occupancy array must be 2D, got shape {occupancy.shape}")
        grid_map = cls(occupancy.shape[0], occupancy.shape[1], bottom_left)
        grid_map.grid[:, :] = occupancy.astype(bool)
        return grid_map

    @property
    def obstacles(self) -> List[Coordinate]:
        """All obstacle coordinates, ordered by x then y"""
        min_x, min_y = self.bottom_left
        return [Coordinate(int(i) + min_x, int(j) + min_y) for i, j in np.argwhere(self.grid)]

    def add_obstacle(self, x: int, y: int):
        """Mark a cell as blocked; only valid while the grid is being built"""
        if self.is_outside(x, y):
            raise InvalidConfiguration(f"Obstacle ({x}, {y}) is outside the grid")
        self.grid[x - self.bottom_left.x, y - self.bottom_left.y] = True
        node = self.nodes.get(Coordinate(x, y))
        if node is not None:
            node.is_obstacle = True

    def is_outside(self, x: int, y: int) -> bool:
        return (x < self.bottom_left.x or x > self.top_right.x or
                y < self.bottom_left.y or y > self.top_right.y)

    def is_obstacle(self, x: int, y: int) -> bool:
        if self.is_outside(x, y):
            return True
        return bool(self.grid[x - self.bottom_left.x, y - self.bottom_left.y])

    def get_or_create_node(self, x: int, y: int) -> Optional[GridNode]:
        if self.is_outside(x, y):
            return None

        index = Coordinate(x, y)
        node = self.nodes.get(index)
        if node is None:
            node = GridNode(x, y, self.is_obstacle(x, y))
            self.nodes[index] = node
        return node

    def __repr__(self):
        return (f"GridMap(width={self.width}, height={self.height}, "
                f"bottom_left={tuple(self.bottom_left)}, obstacles={int(self.grid.sum())})")
