from typing import List, Optional, Set

from .grid import Cell, Grid
from .walls import WallSet


def flood_fill(grid: Grid, walls: WallSet, origin: Cell, target: Optional[Cell] = None) -> Set[Cell]:
    """Depth-first flood fill from origin following open walls only.

    If target is given the fill stops as soon as the target is popped, and the
    returned set then contains the target. Otherwise the whole component of
    origin is returned.
    """
    visited: Set[Cell] = set()
    stack: List[Cell] = [origin]
    while stack:
        cell = stack.pop()
        if cell in visited:
            continue
        visited.add(cell)
        if cell == target:
            break
        for nxt in grid.neighbors(cell):
            if nxt not in visited and walls.is_open(cell, nxt):
                stack.append(nxt)
    return visited


def is_reachable(grid: Grid, walls: WallSet, origin: Cell, target: Cell) -> bool:
    return target in flood_fill(grid, walls, origin, target=target)


def is_fully_connected(grid: Grid, walls: WallSet, origin: Cell) -> bool:
    # one component containing every cell means every pair is mutually reachable
    return len(flood_fill(grid, walls, origin)) == grid.cell_count
