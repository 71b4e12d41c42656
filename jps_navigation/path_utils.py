"""
Helpers for working with jump point paths
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .coordinates import Coordinate
from .distance import DistanceMetric, OctileDistance

logger = logging.getLogger(__name__)


def expand_path(start: Tuple[int, int], jump_points: Sequence[Tuple[int, int]]) -> List[Coordinate]:
    """
    Fill in every grid cell between consecutive jump points

    Segments between jump points are always straight or 45 degree runs.

    Returns:
        Cells from start to the last jump point, start included
    """
    current = Coordinate(*start)
    cells = [current]
    for point in jump_points:
        target = Coordinate(*point)
        step_x = int(np.sign(target.x - current.x))
        step_y = int(np.sign(target.y - current.y))
        dx, dy = abs(target.x - current.x), abs(target.y - current.y)
        if dx != dy and dx != 0 and dy != 0:
            raise ValueError(f"Segment {tuple(current)} -> {tuple(target)} is not straight or diagonal")
        while current != target:
            current = current.offset(step_x, step_y)
            cells.append(current)
    return cells


def path_cost(start: Tuple[int, int], jump_points: Sequence[Tuple[int, int]],
              metric: DistanceMetric = None) -> float:
    """Summed metric distance along start followed by the jump points"""
    metric = metric if metric is not None else OctileDistance()
    waypoints = [tuple(start)] + [tuple(p) for p in jump_points]
    return float(sum(metric.distance(a, b) for a, b in zip(waypoints, waypoints[1:])))


@dataclass
class PathComparison:
    """Outcome of comparing a computed path with a reference path"""
    path_length: int
    reference_length: int
    mismatch_index: Optional[int] = None
    expected: Optional[Tuple[int, int]] = None
    actual: Optional[Tuple[int, int]] = None

    @property
    def length_matches(self) -> bool:
        return self.path_length == self.reference_length

    @property
    def matches(self) -> bool:
        return self.length_matches and self.mismatch_index is None


def compare_with_reference(path: Sequence[Tuple[int, int]],
                           reference: Sequence[Tuple[int, int]]) -> PathComparison:
    """
    Compare a computed path with known-good results

    Both sequences must use the same coordinate frame; convert with
    ScreenCoordinateConverter first if the reference was recorded in screen
    coordinates.
    """
    comparison = PathComparison(len(path), len(reference))
    if not comparison.length_matches:
        logger.warning("Path length mismatch: reference %d, path %d", len(reference), len(path))

    for i, (actual, expected) in enumerate(zip(path, reference)):
        if tuple(actual) != tuple(expected):
            comparison.mismatch_index = i
            comparison.expected = tuple(expected)
            comparison.actual = tuple(actual)
            logger.warning("Jump point %d mismatch: reference %s, path %s", i, tuple(expected), tuple(actual))
            break

    return comparison
