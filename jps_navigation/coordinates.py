"""
Coordinate type and conversion helpers
All search code works in a Cartesian frame: origin at the lower-left corner,
x growing east and y growing north.
"""

from typing import NamedTuple, Tuple


class Coordinate(NamedTuple):
    """Integer grid position in the Cartesian frame"""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> 'Coordinate':
        return Coordinate(self.x + dx, self.y + dy)


class ScreenCoordinateConverter:
    """
    Converts between screen coordinates and the Cartesian search frame

    Screen coordinates are (row, col) pairs with the origin at the upper-left
    corner, rows growing southwards. Map files and most image tooling use this
    frame, so callers convert before handing positions to the planner and
    convert the returned path back afterwards.
    """

    def __init__(self, height: int):
        """
        Args:
            height: Number of rows of the map
        """
        if height <= 0:
            raise ValueError(f"Map height must be positive, got {height}")
        self.height = height

    def screen_to_cartesian(self, row: int, col: int) -> Coordinate:
        """Convert a (row, col) screen position to a Cartesian coordinate"""
        return Coordinate(col, self.height - row - 1)

    def cartesian_to_screen(self, coord: Tuple[int, int]) -> Tuple[int, int]:
        """Convert a Cartesian coordinate to a (row, col) screen position"""
        x, y = coord
        return self.height - y - 1, x
