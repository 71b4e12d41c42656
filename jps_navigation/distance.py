"""
Distance metrics for 8-connected grids
Used both as the true edge-cost metric between jump points and as the
heuristic estimate towards the goal.
"""

import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

SQRT2 = float(np.sqrt(2.0))


class DistanceMetric(ABC):
    """Symmetric, non-negative distance that is zero only between equal positions"""

    def distance(self, a: Tuple[int, int], b: Tuple[int, int]) -> float:
        """Distance between two grid positions (anything unpacking to (x, y))"""
        dx = abs(a[0] - b[0])
        dy = abs(a[1] - b[1])
        return self.from_deltas(dx, dy)

    @abstractmethod
    def from_deltas(self, dx: int, dy: int) -> float:
        """Distance for absolute axis deltas"""
        pass

    def __call__(self, a: Tuple[int, int], b: Tuple[int, int]) -> float:
        return self.distance(a, b)

    def __repr__(self):
        return f"{type(self).__name__}()"


class ManhattanDistance(DistanceMetric):
    """
    L1 distance

    Only admissible for 4-directional movement. On an 8-connected grid it
    overestimates diagonal moves (2 vs sqrt(2)), so A* using it as a
    heuristic may return longer paths.
    """

    def from_deltas(self, dx: int, dy: int) -> float:
        return float(dx + dy)


class ChebyshevDistance(DistanceMetric):
    """Every move, straight or diagonal, costs 1"""

    def from_deltas(self, dx: int, dy: int) -> float:
        return float((dx + dy) - min(dx, dy))


class EuclideanDistance(DistanceMetric):
    """Straight-line distance"""

    def from_deltas(self, dx: int, dy: int) -> float:
        return float(np.hypot(dx, dy))


class OctileDistance(DistanceMetric):
    """Exact cost of an unobstructed 8-directional move with straight = 1, diagonal = sqrt(2)"""

    def from_deltas(self, dx: int, dy: int) -> float:
        return float((dx + dy) + (SQRT2 - 2.0) * min(dx, dy))
