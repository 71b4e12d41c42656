"""
Cost strategies used to order the open set
"""

from abc import ABC, abstractmethod

from .grid_node import GridNode


class CostStrategy(ABC):
    """Combines a node's cost so far and heuristic estimate into a priority"""

    @abstractmethod
    def score(self, node: GridNode) -> float:
        """Priority of a node in the open set; lower is expanded first"""
        pass

    def __repr__(self):
        return f"{type(self).__name__}()"


class AStarStrategy(CostStrategy):
    """f = g + h; optimal with an admissible, consistent heuristic"""

    def score(self, node: GridNode) -> float:
        return node.g_cost + node.h_cost


class DijkstraStrategy(CostStrategy):
    """f = g; ignores the heuristic and degrades to uniform-cost search"""

    def score(self, node: GridNode) -> float:
        return node.g_cost


class GreedyStrategy(CostStrategy):
    """f = h; fast best-first search, paths may be suboptimal"""

    def score(self, node: GridNode) -> float:
        return node.h_cost
