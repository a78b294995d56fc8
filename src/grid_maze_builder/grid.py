from typing import Dict, List, Optional, Tuple

Cell = Tuple[int, int]
Wall = Tuple[Cell, Cell]

# Directions and their vectors (dx, dy); north points towards y == 0
WEST = 0
EAST = 1
NORTH = 2
SOUTH = 3
DIRECTIONS: Tuple[int, ...] = (WEST, EAST, NORTH, SOUTH)
DIRECTION_VECTORS: Dict[int, Tuple[int, int]] = {
    WEST: (-1, 0),
    EAST: (1, 0),
    NORTH: (0, -1),
    SOUTH: (0, 1),
}


def sort_wall(c1: Cell, c2: Cell) -> Wall:
    """Canonical form of the wall between two cells (lexicographic on (x, y))."""
    if c1 > c2:
        return (c2, c1)
    return (c1, c2)


def is_adjacent(c1: Cell, c2: Cell) -> bool:
    dx = abs(c1[0] - c2[0])
    dy = abs(c1[1] - c2[1])
    return dx + dy == 1


class Grid:
    """Fixed width x height addressing of cells.

    The grid holds no mutable state: neighbours and candidate walls are
    computed on demand from the dimensions.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.origin: Cell = (0, 0)
        self.destination: Cell = (width - 1, height - 1)

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> List[Cell]:
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def neighbor(self, cell: Cell, direction: int) -> Optional[Cell]:
        dx, dy = DIRECTION_VECTORS[direction]
        nxt = (cell[0] + dx, cell[1] + dy)
        if not self.in_bounds(nxt):
            return None
        return nxt

    def neighbors(self, cell: Cell) -> List[Cell]:
        out: List[Cell] = []
        for d in DIRECTIONS:
            nxt = self.neighbor(cell, d)
            if nxt is not None:
                out.append(nxt)
        return out

    def candidate_walls(self) -> List[Wall]:
        """Every wall between grid-adjacent cells, once each, in canonical form.

        Only the east and south neighbour of each cell is considered, which
        already yields each wall exactly once; the order is row-major and
        deterministic so that a seeded shuffle is reproducible.
        """
        walls: List[Wall] = []
        for cell in self.cells():
            for d in (EAST, SOUTH):
                nxt = self.neighbor(cell, d)
                if nxt is not None:
                    walls.append(sort_wall(cell, nxt))
        return walls

    def check_cell(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise ValueError(f"Cell {cell} out of bounds for {self.width}x{self.height} grid")

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height})"
