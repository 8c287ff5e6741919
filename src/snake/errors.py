class SnakeError(Exception):
    """Base class for errors raised by the game core."""


class BoardFullError(SnakeError):
    """Raised when food has to be placed but every cell is occupied."""
