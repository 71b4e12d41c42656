"""
Jump Point Search implementation for uniform-cost 8-connected grids
A* variant that only generates search nodes where the optimal path may turn.

References:
    Harabor & Grastien, "Online Graph Pruning for Pathfinding on Grid Maps", AAAI 2011
"""

import heapq
import itertools
import logging
import numbers
import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .coordinates import Coordinate
from .cost_strategy import CostStrategy
from .direction import Direction
from .distance import DistanceMetric
from .exceptions import InvalidConfiguration
from .grid_map import WalkabilityMap
from .grid_node import GridNode, NodeState

logger = logging.getLogger(__name__)


def _as_coordinate(label: str, point) -> Coordinate:
    """Coerce an endpoint to an integer Coordinate"""
    if point is None:
        raise InvalidConfiguration(f"{label} position is required")
    try:
        x, y = point
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{label} {point!r} is not an (x, y) pair") from None
    if not isinstance(x, numbers.Integral) or not isinstance(y, numbers.Integral):
        raise InvalidConfiguration(f"{label} {point!r} must have integer coordinates")
    return Coordinate(int(x), int(y))


class SearchStatus(Enum):
    """Lifecycle of a single search"""
    IDLE = 0
    RUNNING = 1
    FOUND = 2
    EXHAUSTED = 3
    ABORTED = 4


@dataclass
class SearchConfig:
    """Optional limits for a search; None means unbounded"""
    max_iterations: Optional[int] = None
    time_limit: Optional[float] = None  # seconds
    max_jump_steps: Optional[int] = None  # cells scanned along one ray before stopping early


class JumpPointSearch:
    """
    Jump point search over a WalkabilityMap

    Features:
    - Neighbor pruning based on the direction of travel
    - Forced neighbor detection around obstacle corners
    - Pluggable cost strategy, edge-cost metric and heuristic
    - No corner cutting between two diagonally touching obstacles

    The returned path lists the jump points after the start, ending at the goal.
    Consecutive jump points are always joined by a straight or diagonal run of
    walkable cells (see path_utils.expand_path).
    """

    def __init__(self,
                 grid_map: WalkabilityMap,
                 start: Tuple[int, int],
                 goal: Tuple[int, int],
                 cost_strategy: CostStrategy,
                 distance_metric: DistanceMetric,
                 heuristic: DistanceMetric,
                 config: SearchConfig = None):
        self.config = config if config is not None else SearchConfig()

        self.grid_map = grid_map
        self.start = start
        self.goal = goal
        self.cost_strategy = cost_strategy
        self.distance_metric = distance_metric
        self.heuristic = heuristic

        self._validate()

        # Search state, rebuilt by every call to search()
        self.status = SearchStatus.IDLE
        self.rounds = 0
        self.open_set = []
        self.last_stats = {}

    @classmethod
    def configure(cls, grid_map: WalkabilityMap, start: Tuple[int, int], goal: Tuple[int, int],
                  cost_strategy: CostStrategy, distance_metric: DistanceMetric,
                  heuristic: DistanceMetric, config: SearchConfig = None) -> 'JumpPointSearch':
        """Build an engine for one start/goal pair; raises InvalidConfiguration on bad input"""
        return cls(grid_map, start, goal, cost_strategy, distance_metric, heuristic, config)

    def _validate(self):
        if self.grid_map is None:
            raise InvalidConfiguration("A grid map is required")

        for name in ("cost_strategy", "distance_metric", "heuristic"):
            if getattr(self, name) is None:
                raise InvalidConfiguration(f"Missing {name}")

        self.start = _as_coordinate("Start", self.start)
        self.goal = _as_coordinate("Goal", self.goal)

        for label, point in (("Start", self.start), ("Goal", self.goal)):
            if self.grid_map.is_outside(point.x, point.y):
                raise InvalidConfiguration(f"{label} {tuple(point)} is outside the grid")
            if self.grid_map.is_obstacle(point.x, point.y):
                raise InvalidConfiguration(f"{label} {tuple(point)} is on an obstacle")

    def get_node(self, x: int, y: int) -> Optional[GridNode]:
        """Get a node, clearing any state left over from an earlier search"""
        node = self.grid_map.get_or_create_node(x, y)
        if node is not None and node.rounds != self.rounds:
            node.reset(self.rounds)
        return node

    def forced_neighbors(self, x: int, y: int, direction: Direction) -> List[Coordinate]:
        """
        Neighbors of (x, y) that can only be reached optimally through (x, y)

        An obstacle beside the line of travel opens a shortcut around its
        corner that no other path of equal length covers, so the search has
        to branch here.
        """
        grid_map = self.grid_map
        dx, dy = direction.value
        candidates = []

        if dy == 0:
            # Horizontal: obstacle above or below
            candidates.append(((x + dx, y - 1), (x, y - 1)))
            candidates.append(((x + dx, y + 1), (x, y + 1)))
        elif dx == 0:
            # Vertical: obstacle left or right
            candidates.append(((x - 1, y + dy), (x - 1, y)))
            candidates.append(((x + 1, y + dy), (x + 1, y)))
        else:
            # Diagonal: obstacle behind one of the shoulders
            candidates.append(((x - dx, y + dy), (x - dx, y)))
            candidates.append(((x + dx, y - dy), (x, y - dy)))

        return [Coordinate(*target) for target, blocker in candidates
                if grid_map.is_obstacle(*blocker) and grid_map.reachable(x, y, *target)]

    def pruned_directions(self, node: GridNode) -> List[Direction]:
        """Directions worth scanning from a node, given how it was reached"""
        if node.parent is None:
            return list(Direction)

        grid_map = self.grid_map
        x, y = node.x, node.y
        travel = Direction.between(node.parent.x, node.parent.y, x, y)

        if travel.is_diagonal:
            natural = [travel.x_sub_direction, travel.y_sub_direction, travel]
        else:
            natural = [travel]

        directions = [d for d in natural if grid_map.reachable(x, y, x + d.x_offset, y + d.y_offset)]
        for forced in self.forced_neighbors(x, y, travel):
            directions.append(Direction.between(x, y, forced.x, forced.y))
        return directions

    def jump(self, x: int, y: int, direction: Direction) -> Optional[Coordinate]:
        """
        Scan from (x, y) along direction and return the next jump point

        Returns None when the scan runs into an obstacle or the map edge
        without finding the goal or a turning point. When max_jump_steps is
        set and reached, the cell where the scan stopped is returned so the
        search can resume from there.
        """
        grid_map = self.grid_map
        dx, dy = direction.value
        max_steps = self.config.max_jump_steps
        steps = 0

        while True:
            next_x, next_y = x + dx, y + dy

            if not grid_map.reachable(x, y, next_x, next_y):
                return None

            if next_x == self.goal.x and next_y == self.goal.y:
                return self.goal

            if self.forced_neighbors(next_x, next_y, direction):
                return Coordinate(next_x, next_y)

            # A diagonal run also passes every straight run leaving it
            if direction.is_diagonal:
                if (self.jump(next_x, next_y, direction.x_sub_direction) is not None or
                        self.jump(next_x, next_y, direction.y_sub_direction) is not None):
                    return Coordinate(next_x, next_y)

            steps += 1
            if max_steps is not None and steps >= max_steps:
                return Coordinate(next_x, next_y)

            x, y = next_x, next_y

    def successors(self, node: GridNode) -> List[Coordinate]:
        """Jump points reachable from a node in its pruned directions"""
        jump_points = []
        for direction in self.pruned_directions(node):
            jump_point = self.jump(node.x, node.y, direction)
            if jump_point is not None:
                jump_points.append(jump_point)
        return jump_points

    def reconstruct_path(self, current: GridNode) -> List[Coordinate]:
        """Walk parent links back to the start; the start itself is not included"""
        path = []
        while current.parent is not None:
            path.append(current.index)
            current = self.get_node(*current.parent)
        path.reverse()
        return path

    def _push(self, node: GridNode, counter):
        heapq.heappush(self.open_set, (self.cost_strategy.score(node), next(counter), node))

    def _finish(self, status: SearchStatus, path: List[Coordinate], stats: dict,
                start_time: float) -> Tuple[bool, List[Coordinate], dict]:
        self.status = status
        stats["time"] = time.time() - start_time
        stats["path_length"] = len(path)
        self.last_stats = stats
        return status == SearchStatus.FOUND, path, stats

    def search(self) -> Tuple[bool, List[Coordinate], dict]:
        """
        Perform jump point search from start to goal

        Returns:
            success: Whether the goal was reached
            path: Jump points from the start (excluded) to the goal; empty when
                  no path exists or start == goal
            stats: Search statistics, with an "error" entry on failure
        """
        start_time = time.time()
        self.rounds = self.grid_map.begin_search()
        self.status = SearchStatus.RUNNING
        self.open_set = []
        counter = itertools.count()

        stats = {"iterations": 0, "nodes_explored": 0, "jump_points": 0, "cost": 0.0}
        logger.debug("Searching %s -> %s with %r, metric %r, heuristic %r",
                     tuple(self.start), tuple(self.goal), self.cost_strategy,
                     self.distance_metric, self.heuristic)

        if self.start == self.goal:
            return self._finish(SearchStatus.FOUND, [], stats, start_time)

        start_node = self.get_node(*self.start)
        start_node.g_cost = 0.0
        start_node.h_cost = self.heuristic.distance(self.start, self.goal)
        start_node.state = NodeState.OPENSET
        self._push(start_node, counter)

        max_iterations = self.config.max_iterations
        time_limit = self.config.time_limit

        while self.open_set:
            if max_iterations is not None and stats["iterations"] >= max_iterations:
                logger.warning("Search %s -> %s stopped after %d iterations",
                               tuple(self.start), tuple(self.goal), stats["iterations"])
                stats["error"] = "Iteration limit exceeded"
                return self._finish(SearchStatus.ABORTED, [], stats, start_time)

            if time_limit is not None and time.time() - start_time > time_limit:
                logger.warning("Search %s -> %s exceeded time limit of %.3fs",
                               tuple(self.start), tuple(self.goal), time_limit)
                stats["error"] = "Time limit exceeded"
                return self._finish(SearchStatus.ABORTED, [], stats, start_time)

            stats["iterations"] += 1
            _, _, current = heapq.heappop(self.open_set)

            # Stale entry left behind by a decrease-key
            if current.state == NodeState.CLOSEDSET:
                continue

            current.state = NodeState.CLOSEDSET
            stats["nodes_explored"] += 1

            if current.index == self.goal:
                path = self.reconstruct_path(current)
                stats["cost"] = current.g_cost
                logger.info("Path %s -> %s found: %d jump points, cost %.3f",
                            tuple(self.start), tuple(self.goal), len(path), current.g_cost)
                return self._finish(SearchStatus.FOUND, path, stats, start_time)

            for index in self.successors(current):
                stats["jump_points"] += 1
                successor = self.get_node(*index)

                if successor.state == NodeState.CLOSEDSET:
                    continue

                tentative_g = current.g_cost + self.distance_metric.distance(current.index, index)

                if successor.state == NodeState.OPENSET:
                    if tentative_g < successor.g_cost:
                        # Better path found
                        successor.g_cost = tentative_g
                        successor.parent = current.index
                        self._push(successor, counter)
                else:
                    # New node discovered
                    successor.reset(self.rounds)
                    successor.g_cost = tentative_g
                    successor.h_cost = self.heuristic.distance(index, self.goal)
                    successor.parent = current.index
                    successor.state = NodeState.OPENSET
                    self._push(successor, counter)

        logger.info("No path %s -> %s after exploring %d nodes",
                    tuple(self.start), tuple(self.goal), stats["nodes_explored"])
        stats["error"] = "No path found"
        return self._finish(SearchStatus.EXHAUSTED, [], stats, start_time)

    def run(self) -> List[Coordinate]:
        """Search and return only the path (empty if the goal is unreachable)"""
        _, path, _ = self.search()
        return path
