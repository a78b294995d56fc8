import logging
import random
from typing import List, Optional, Sequence

import numpy as np

from .connectivity import is_fully_connected, is_reachable
from .errors import MazeStateError
from .generators import (
    STRATEGIES,
    STRATEGY_ORDERED,
    STRATEGY_RANDOM_WALK,
    open_until_connected,
    open_until_reachable,
    ordered_candidates,
)
from .grid import Cell, Grid, Wall, is_adjacent
from .pathfinder import shortest_path
from .walls import WallSet

logger = logging.getLogger(__name__)


class Maze:
    """A width x height grid of cells separated by walls that can be opened.

    A maze starts with every wall closed and is populated by exactly one
    generator call (generate_ordered or generate_random_walk). After that it
    is only queried. The solution runs from (0, 0) to (width-1, height-1).
    """

    def __init__(self, width: int, height: int) -> None:
        self.grid = Grid(width, height)
        self.width = width
        self.height = height
        self.walls = WallSet()
        self.start: Cell = self.grid.origin
        self.goal: Cell = self.grid.destination
        self.strategy: Optional[str] = None

    @classmethod
    def build(cls, width: int, height: int, strategy: str = STRATEGY_ORDERED, seed: Optional[int] = None,
              rng: Optional[random.Random] = None, max_samples: Optional[int] = None) -> "Maze":
        """Create a maze and run the named generator on it.

        rng takes precedence over seed; with neither, a fresh unseeded
        random.Random is used.
        """
        if strategy not in STRATEGIES:
            raise ValueError(f"Unknown strategy {strategy!r}, expected one of {STRATEGIES}")
        if rng is None:
            rng = random.Random(seed)
        maze = cls(width, height)
        if strategy == STRATEGY_ORDERED:
            maze.generate_ordered(rng=rng)
        else:
            maze.generate_random_walk(rng=rng, max_samples=max_samples)
        return maze

    @property
    def generated(self) -> bool:
        return self.strategy is not None

    @property
    def open_wall_count(self) -> int:
        return len(self.walls)

    def _check_unused(self) -> None:
        if self.generated:
            raise MazeStateError(f"Maze already generated with strategy {self.strategy!r}")

    def _check_wall(self, c1: Cell, c2: Cell) -> None:
        self.grid.check_cell(c1)
        self.grid.check_cell(c2)
        if not is_adjacent(c1, c2):
            raise ValueError(f"Cells {c1} and {c2} are not adjacent")

    def _finish_generation(self, strategy: str, walls: WallSet, opened: int) -> None:
        self.walls = walls
        self.strategy = strategy
        logger.debug("Generated %dx%d maze (%s): %d walls open", self.width, self.height, strategy, opened)

    def generate_ordered(self, rng: Optional[random.Random] = None,
                         candidates: Optional[Sequence[Wall]] = None) -> int:
        """Open shuffled candidate walls until the goal is reachable.

        candidates overrides the shuffled list; every entry must join two
        adjacent in-bounds cells and the list must still be able to connect
        start and goal. Returns the number of walls opened.
        """
        self._check_unused()
        if candidates is None:
            candidates = ordered_candidates(self.grid, rng or random.Random())
        else:
            for c1, c2 in candidates:
                self._check_wall(c1, c2)
        # the maze is only touched once the generator has succeeded
        walls = self.walls.copy()
        opened = open_until_reachable(self.grid, walls, candidates)
        self._finish_generation(STRATEGY_ORDERED, walls, opened)
        return opened

    def generate_random_walk(self, rng: Optional[random.Random] = None, max_samples: Optional[int] = None) -> int:
        """Open randomly sampled walls until every cell is reachable."""
        self._check_unused()
        walls = self.walls.copy()
        opened = open_until_connected(self.grid, walls, rng or random.Random(), max_samples=max_samples)
        self._finish_generation(STRATEGY_RANDOM_WALK, walls, opened)
        return opened

    def open_wall(self, c1: Cell, c2: Cell) -> bool:
        """Open a single wall by hand. Returns False if it was already open."""
        self._check_wall(c1, c2)
        return self.walls.open(c1, c2)

    def is_wall_open(self, c1: Cell, c2: Cell) -> bool:
        return self.walls.is_open(c1, c2)

    def is_destination_reachable(self) -> bool:
        return is_reachable(self.grid, self.walls, self.start, self.goal)

    def is_fully_connected(self) -> bool:
        return is_fully_connected(self.grid, self.walls, self.start)

    def shortest_path(self, origin: Optional[Cell] = None, destination: Optional[Cell] = None) -> List[Cell]:
        """Shortest path from origin (default start) to destination (default goal).

        Returns an empty list when no path exists.
        """
        if origin is None:
            origin = self.start
        if destination is None:
            destination = self.goal
        self.grid.check_cell(origin)
        self.grid.check_cell(destination)
        return shortest_path(self.grid, self.walls, origin, destination)

    def to_block_grid(self) -> np.ndarray:
        """Block representation: 1 for wall, 0 for free, shape (2*height+1, 2*width+1).

        Cell (x, y) sits at row 2*y+1, column 2*x+1; an open wall frees the
        block between its two cells.
        """
        grid = np.ones((2 * self.height + 1, 2 * self.width + 1), dtype=np.int8)
        grid[1::2, 1::2] = 0
        for (x1, y1), (x2, y2) in self.walls:
            grid[y1 + y2 + 1, x1 + x2 + 1] = 0
        return grid

    def __repr__(self) -> str:
        return f"Maze(width={self.width}, height={self.height}, strategy={self.strategy!r}, open_walls={self.open_wall_count})"
