import numpy as np
import pytest

from jps_navigation import Coordinate, GridMap, InvalidConfiguration


def test_corners_and_dimensions():
    grid_map = GridMap(4, 3, bottom_left=(2, 5))
    assert grid_map.bottom_left == (2, 5)
    assert grid_map.bottom_right == (5, 5)
    assert grid_map.top_left == (2, 7)
    assert grid_map.top_right == (5, 7)


def test_from_corners():
    grid_map = GridMap.from_corners((0, 4), (6, 4), (0, 0), (6, 0))
    assert (grid_map.width, grid_map.height) == (7, 5)


def test_from_corners_rejects_non_rectangle():
    with pytest.raises(InvalidConfiguration):
        GridMap.from_corners((0, 4), (6, 4), (0, 0), (5, 0))


def test_invalid_dimensions():
    with pytest.raises(InvalidConfiguration):
        GridMap(0, 5)


def test_is_outside_respects_origin():
    grid_map = GridMap(4, 3, bottom_left=(2, 5))
    assert not grid_map.is_outside(2, 5)
    assert not grid_map.is_outside(5, 7)
    assert grid_map.is_outside(1, 5)
    assert grid_map.is_outside(6, 5)
    assert grid_map.is_outside(2, 8)


def test_outside_counts_as_obstacle(open_grid):
    assert open_grid.is_obstacle(-1, 0)
    assert open_grid.is_obstacle(0, 5)
    assert not open_grid.is_walkable(5, 5)
    assert not open_grid.is_obstacle(0, 0)


def test_add_obstacle(open_grid):
    open_grid.add_obstacle(1, 2)
    assert open_grid.is_obstacle(1, 2)
    assert not open_grid.is_walkable(1, 2)
    assert open_grid.obstacles == [Coordinate(1, 2)]


def test_add_obstacle_outside_raises(open_grid):
    with pytest.raises(InvalidConfiguration):
        open_grid.add_obstacle(5, 0)


def test_add_obstacle_updates_cached_node(open_grid):
    node = open_grid.get_or_create_node(3, 3)
    assert not node.is_obstacle
    open_grid.add_obstacle(3, 3)
    assert node.is_obstacle


def test_from_array_is_indexed_x_then_y():
    occupancy = np.zeros((3, 2), dtype=bool)
    occupancy[2, 1] = True
    grid_map = GridMap.from_array(occupancy)
    assert (grid_map.width, grid_map.height) == (3, 2)
    assert grid_map.is_obstacle(2, 1)
    assert not grid_map.is_obstacle(1, 2)


def test_reachable_straight_only_needs_destination(open_grid):
    open_grid.add_obstacle(1, 1)
    assert open_grid.reachable(0, 0, 1, 0)
    assert not open_grid.reachable(1, 0, 1, 1)


def test_reachable_diagonal_with_one_shoulder_blocked(open_grid):
    open_grid.add_obstacle(0, 1)
    assert open_grid.reachable(0, 0, 1, 1)


def test_reachable_rejects_corner_cut(open_grid):
    open_grid.add_obstacle(0, 1)
    open_grid.add_obstacle(1, 0)
    assert open_grid.is_walkable(1, 1)
    assert not open_grid.reachable(0, 0, 1, 1)
    assert not open_grid.reachable(1, 1, 0, 0)


def test_reachable_treats_boundary_as_wall(open_grid):
    assert not open_grid.reachable(4, 4, 5, 5)
    assert not open_grid.reachable(0, 0, -1, 0)


def test_get_or_create_node_caches(open_grid):
    node = open_grid.get_or_create_node(2, 3)
    assert node is open_grid.get_or_create_node(2, 3)
    assert node.index == (2, 3)
    assert open_grid.get_or_create_node(5, 0) is None
    assert open_grid.get_or_create_node(-1, 2) is None


def test_begin_search_increments(open_grid):
    first = open_grid.begin_search()
    assert open_grid.begin_search() == first + 1
