from collections import deque
from typing import Dict, List, Set

from .grid import Cell, Grid
from .walls import WallSet


def shortest_path(grid: Grid, walls: WallSet, origin: Cell, destination: Cell) -> List[Cell]:
    """Breadth-first search over open walls from origin to destination.

    Returns the cells of a shortest path (by edge count), origin first and
    destination last, or an empty list if the destination is unreachable.
    """
    visited: Set[Cell] = set()
    queue = deque([origin])
    # child -> parent, fixed at first discovery
    prevs: Dict[Cell, Cell] = {}
    while queue:
        cell = queue.popleft()
        if cell == destination:
            prevs.pop(origin, None)
            path = [cell]
            while path[-1] in prevs:
                path.append(prevs[path[-1]])
            path.reverse()
            return path
        if cell in visited:
            continue
        visited.add(cell)
        for nxt in grid.neighbors(cell):
            if walls.is_open(cell, nxt) and nxt not in visited:
                queue.append(nxt)
                prevs.setdefault(nxt, cell)
    return []
