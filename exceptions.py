"""Errors raised by the grid model and the search entry point."""


class PathfindingError(Exception):
    """Base class for grid pathfinding errors."""


class OutOfBoundsError(PathfindingError, IndexError):
    """A position lies outside the grid."""

    def __init__(self, pos, rows, cols):
        self.pos = pos
        self.rows = rows
        self.cols = cols
        super().__init__(f"Position {tuple(pos)} is outside a {rows}x{cols} grid")


class InvalidEndpointError(PathfindingError, ValueError):
    """A start/target position does not hold the expected classification."""

    def __init__(self, role, pos, actual):
        self.role = role
        self.pos = pos
        self.actual = actual
        super().__init__(f"Expected {role} at {tuple(pos)}, found {actual}")
