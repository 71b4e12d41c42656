"""
Movement directions on an 8-connected grid
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """Compass direction with its (x, y) unit offsets"""
    LEFT = (-1, 0)
    TOP_LEFT = (-1, 1)
    TOP = (0, 1)
    TOP_RIGHT = (1, 1)
    RIGHT = (1, 0)
    BOTTOM_RIGHT = (1, -1)
    BOTTOM = (0, -1)
    BOTTOM_LEFT = (-1, -1)

    @property
    def x_offset(self) -> int:
        return self.value[0]

    @property
    def y_offset(self) -> int:
        return self.value[1]

    @property
    def is_diagonal(self) -> bool:
        return self.value[0] != 0 and self.value[1] != 0

    @property
    def x_sub_direction(self) -> 'Direction':
        """Horizontal component of a diagonal direction"""
        return Direction.from_offsets(self.value[0], 0)

    @property
    def y_sub_direction(self) -> 'Direction':
        """Vertical component of a diagonal direction"""
        return Direction.from_offsets(0, self.value[1])

    @staticmethod
    def from_offsets(dx: int, dy: int) -> 'Direction':
        """
        Look up the direction for a unit offset

        Raises:
            ValueError: if (dx, dy) is (0, 0) or not in {-1, 0, 1}^2
        """
        try:
            return _OFFSET_TO_DIRECTION[(dx, dy)]
        except KeyError:
            raise ValueError(f"No direction for offset ({dx}, {dy})") from None

    @staticmethod
    def between(from_x: int, from_y: int, to_x: int, to_y: int) -> 'Direction':
        """Direction of travel from one cell towards another, clamped to unit steps"""
        return Direction.from_offsets(_clamp(to_x - from_x), _clamp(to_y - from_y))


def _clamp(delta: int) -> int:
    return max(-1, min(1, delta))


# Built once at import and never mutated
_OFFSET_TO_DIRECTION: Dict[Tuple[int, int], Direction] = {
    direction.value: direction for direction in Direction
}
