"""
JPS Navigation Package

A Python implementation of Jump Point Search for shortest paths on
uniform-cost 8-connected grids.

Key Features:
- Jump point search with neighbor pruning and forced neighbor detection
- No corner cutting between diagonally touching obstacles
- Pluggable cost strategies (A*, Dijkstra, greedy)
- Manhattan, Chebyshev, Euclidean and octile distance metrics
- MovingAI map loading and screen/Cartesian coordinate conversion
"""

from .coordinates import Coordinate, ScreenCoordinateConverter
from .direction import Direction
from .grid_node import GridNode, NodeState
from .grid_map import WalkabilityMap, GridMap
from .cost_strategy import CostStrategy, AStarStrategy, DijkstraStrategy, GreedyStrategy
from .distance import (
    DistanceMetric,
    ManhattanDistance,
    ChebyshevDistance,
    EuclideanDistance,
    OctileDistance
)
from .exceptions import JPSError, InvalidConfiguration, MapFormatError
from .jump_point_search import JumpPointSearch, SearchConfig, SearchStatus
from .map_loader import parse_map, load_map
from .path_utils import expand_path, path_cost, compare_with_reference, PathComparison

__version__ = "1.0.0"

__all__ = [
    'Coordinate',
    'ScreenCoordinateConverter',
    'Direction',
    'GridNode',
    'NodeState',
    'WalkabilityMap',
    'GridMap',
    'CostStrategy',
    'AStarStrategy',
    'DijkstraStrategy',
    'GreedyStrategy',
    'DistanceMetric',
    'ManhattanDistance',
    'ChebyshevDistance',
    'EuclideanDistance',
    'OctileDistance',
    'JPSError',
    'InvalidConfiguration',
    'MapFormatError',
    'JumpPointSearch',
    'SearchConfig',
    'SearchStatus',
    'parse_map',
    'load_map',
    'expand_path',
    'path_cost',
    'compare_with_reference',
    'PathComparison'
]
