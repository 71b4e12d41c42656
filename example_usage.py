#!/usr/bin/env python3
"""
Example usage of the jump point search package
Demonstrates obstacle maps, cost strategies, map files and screen coordinates
"""

import logging
import sys
import time

import numpy as np

from jps_navigation import (
    GridMap,
    JumpPointSearch,
    ScreenCoordinateConverter,
    AStarStrategy,
    DijkstraStrategy,
    GreedyStrategy,
    EuclideanDistance,
    OctileDistance,
    expand_path,
    load_map,
    parse_map,
)


def visualize_path_2d(grid_map, start, path):
    """Plot obstacles, jump points and the expanded path"""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(grid_map.grid.T, origin='lower', cmap='Greys', interpolation='nearest')

    cells = np.array(expand_path(start, path))
    ax.plot(cells[:, 0], cells[:, 1], 'b-', linewidth=2, label='Path')
    if len(path) > 0:
        jump_points = np.array(path)
        ax.scatter(jump_points[:, 0], jump_points[:, 1], c='orange', s=40, zorder=3, label='Jump points')

    ax.scatter(*start, c='green', s=100, marker='o', zorder=4, label='Start')
    ax.scatter(*cells[-1], c='red', s=100, marker='*', zorder=4, label='Goal')
    ax.set_title('Jump Point Search')
    ax.legend()

    plt.tight_layout()
    plt.show()


def build_demo_grid():
    """40x40 grid with a few walls"""
    grid_map = GridMap(40, 40)
    occupancy = np.zeros((40, 40), dtype=bool)
    occupancy[10, 0:30] = True      # Wall from the bottom
    occupancy[20, 10:40] = True     # Wall from the top
    occupancy[30, 0:25] = True      # Another wall from the bottom
    occupancy[25:35, 30] = True     # Shelf
    grid_map.grid[:, :] = occupancy
    return grid_map


def example_simple_navigation(show_plot=False):
    """Basic example on an in-memory grid"""
    print("=== Simple Grid Navigation Example ===")

    grid_map = build_demo_grid()
    start, goal = (2, 2), (37, 37)

    planner = JumpPointSearch.configure(grid_map, start, goal,
                                        AStarStrategy(), EuclideanDistance(), OctileDistance())

    print(f"Planning path from {start} to {goal}")
    success, path, stats = planner.search()

    if success:
        print(f"Path found: {len(path)} jump points, cost {stats['cost']:.2f}")
        print(f"Expanded length: {len(expand_path(start, path))} cells")
        print(f"Search stats: {stats}")

        if show_plot:
            visualize_path_2d(grid_map, start, path)
    else:
        print("No path found!")
        print(f"Error: {stats.get('error', 'Unknown error')}")


def example_strategy_comparison():
    """Same map, different orderings of the open set"""
    print("\n=== Strategy Comparison ===")

    grid_map = build_demo_grid()
    start, goal = (2, 2), (37, 37)

    strategies = [
        ("A*", AStarStrategy()),
        ("Dijkstra", DijkstraStrategy()),
        ("Greedy", GreedyStrategy()),
    ]

    print("Strategy | Success | Time(ms) | Jump Points | Cost    | Nodes Explored")
    print("-" * 72)

    for name, strategy in strategies:
        planner = JumpPointSearch(grid_map, start, goal, strategy, OctileDistance(), OctileDistance())

        start_time = time.time()
        success, path, stats = planner.search()
        elapsed_time = (time.time() - start_time) * 1000

        status = "yes" if success else "no"
        print(f"{name:8} | {status:7} | {elapsed_time:8.1f} | {len(path):11} | "
              f"{stats['cost']:7.2f} | {stats['nodes_explored']:14}")


def example_map_file(path=None):
    """Load a MovingAI map and plan in screen coordinates"""
    print("\n=== Map File Example ===")

    if path is not None:
        grid_map = load_map(path)
    else:
        grid_map = parse_map([
            "type octile",
            "height 6",
            "width 8",
            "map",
            "........",
            ".@@@@@@.",
            "......@.",
            ".@@@@.@.",
            ".@....@.",
            ".@.@@@@.",
        ])

    converter = ScreenCoordinateConverter(grid_map.height)

    # Screen (row, col) of the endpoints
    start_screen = (grid_map.height - 1, 0)
    goal_screen = (4, 2)

    start = converter.screen_to_cartesian(*start_screen)
    goal = converter.screen_to_cartesian(*goal_screen)

    planner = JumpPointSearch(grid_map, start, goal, AStarStrategy(), OctileDistance(), OctileDistance())
    path = planner.run()

    print(f"Map: {grid_map}")
    print(f"Start screen {start_screen} -> Cartesian {tuple(start)}")
    print(f"Goal screen {goal_screen} -> Cartesian {tuple(goal)}")
    print("Jump points (row, col):", [converter.cartesian_to_screen(p) for p in path])


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    example_simple_navigation(show_plot="--plot" in sys.argv)
    example_strategy_comparison()
    example_map_file(next((arg for arg in sys.argv[1:] if not arg.startswith("--")), None))

    print("\n=== Examples Complete ===")
