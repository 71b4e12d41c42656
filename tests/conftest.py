import heapq

import numpy as np
import pytest

from jps_navigation import (
    GridMap,
    JumpPointSearch,
    AStarStrategy,
    OctileDistance,
)
from jps_navigation.distance import SQRT2


def brute_force_cost(grid_map, start, goal):
    """Plain Dijkstra over every 8-connected move; inf when unreachable"""
    best = {tuple(start): 0.0}
    queue = [(0.0, tuple(start))]
    while queue:
        cost, (x, y) = heapq.heappop(queue)
        if (x, y) == tuple(goal):
            return cost
        if cost > best[(x, y)]:
            continue
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if not grid_map.reachable(x, y, nx, ny):
                    continue
                new_cost = cost + (SQRT2 if dx and dy else 1.0)
                if new_cost < best.get((nx, ny), float('inf')):
                    best[(nx, ny)] = new_cost
                    heapq.heappush(queue, (new_cost, (nx, ny)))
    return float('inf')


def make_planner(grid_map, start, goal, cost_strategy=None, metric=None, heuristic=None, config=None):
    return JumpPointSearch(grid_map, start, goal,
                           cost_strategy if cost_strategy is not None else AStarStrategy(),
                           metric if metric is not None else OctileDistance(),
                           heuristic if heuristic is not None else OctileDistance(),
                           config)


@pytest.fixture
def open_grid():
    return GridMap(5, 5)


@pytest.fixture
def wall_grid():
    """5x5 grid with a wall at x=2 leaving a single gap at the top"""
    grid_map = GridMap(5, 5)
    for y in range(4):
        grid_map.add_obstacle(2, y)
    return grid_map


@pytest.fixture
def random_grids():
    grids = []
    for seed in range(12):
        rng = np.random.RandomState(seed)
        occupancy = rng.random_sample((16, 12)) < 0.3
        grids.append((seed, GridMap.from_array(occupancy)))
    return grids
