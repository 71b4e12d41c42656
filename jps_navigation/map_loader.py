"""
Loader for MovingAI-style octile map files

    type octile
    height 4
    width 5
    map
    .....
    .@@..
    ..@..
    .....

The first map row is the top of the map, so it lands on y = height - 1.
"""

import logging
import numpy as np
from pathlib import Path
from typing import Iterable, Union

from .exceptions import MapFormatError
from .grid_map import GridMap

logger = logging.getLogger(__name__)

DEFAULT_OBSTACLE_CHARS = "@"


def parse_map(lines: Iterable[str], obstacle_chars: str = DEFAULT_OBSTACLE_CHARS) -> GridMap:
    """
    Parse map text into a GridMap

    Args:
        lines: Lines of the map file, header first
        obstacle_chars: Characters that mark blocked cells

    Returns:
        Grid in the Cartesian frame with all obstacles set
    """
    height = width = None
    rows = []
    in_map = False

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")

        if in_map:
            if not line and len(rows) == height:
                continue
            rows.append(line)
            continue

        if not line.strip():
            continue

        key, _, value = line.strip().partition(" ")
        if key == "height" or key == "width":
            try:
                size = int(value)
            except ValueError:
                raise MapFormatError(f"Line {line_no}: invalid {key} {value!r}") from None
            if key == "height":
                height = size
            else:
                width = size
        elif key == "map":
            in_map = True
        elif key != "type":
            raise MapFormatError(f"Line {line_no}: unexpected header {line.strip()!r}")

    if height is None or width is None:
        raise MapFormatError("Map header must declare both height and width")
    if not in_map:
        raise MapFormatError("Map header is missing the 'map' line")
    if len(rows) != height:
        raise MapFormatError(f"Expected {height} map rows, found {len(rows)}")

    occupancy = np.zeros((width, height), dtype=bool)
    for row_idx, row in enumerate(rows):
        if len(row) != width:
            raise MapFormatError(f"Map row {row_idx} has {len(row)} cells, expected {width}")
        y = height - row_idx - 1
        occupancy[:, y] = [cell in obstacle_chars for cell in row]

    grid_map = GridMap.from_array(occupancy)
    logger.debug("Parsed %dx%d map with %d obstacles", width, height, int(occupancy.sum()))
    return grid_map


def load_map(path: Union[str, Path], obstacle_chars: str = DEFAULT_OBSTACLE_CHARS) -> GridMap:
    """Read a map file from disk"""
    with open(path, "r") as f:
        return parse_map(f, obstacle_chars)
