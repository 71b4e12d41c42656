"""
Exception types raised by the jump point search package
"""


class JPSError(Exception):
    """Base class for all jps_navigation errors"""


class InvalidConfiguration(JPSError, ValueError):
    """Raised before a search starts when the grid, endpoints or strategies are unusable"""


class MapFormatError(JPSError, ValueError):
    """Raised when map text cannot be parsed into a grid"""
