class MazeError(Exception):
    """Base class for maze-level failures."""


class MazeStateError(MazeError):
    """Operation not allowed in the maze's current lifecycle state."""


class GenerationError(MazeError):
    """A generator could not reach its postcondition."""
