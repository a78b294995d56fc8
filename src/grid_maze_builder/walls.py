from typing import Iterator, Set, Tuple

from .grid import Cell, Wall


class WallSet:
    """The set of open (passable) walls.

    Each opened wall is stored in both orientations so that a lookup from
    either endpoint is a single membership test. Walls are never closed again.
    """

    def __init__(self) -> None:
        self._open: Set[Tuple[Cell, Cell]] = set()

    def open(self, c1: Cell, c2: Cell) -> bool:
        """Open the wall between c1 and c2. Returns False if it was already open."""
        if (c1, c2) in self._open:
            return False
        self._open.add((c1, c2))
        self._open.add((c2, c1))
        return True

    def is_open(self, c1: Cell, c2: Cell) -> bool:
        return (c1, c2) in self._open

    def copy(self) -> "WallSet":
        other = WallSet()
        other._open = set(self._open)
        return other

    def __contains__(self, wall: object) -> bool:
        return wall in self._open

    def __len__(self) -> int:
        return len(self._open) // 2

    def __iter__(self) -> Iterator[Wall]:
        for c1, c2 in self._open:
            if c1 < c2:
                yield (c1, c2)

    def __repr__(self) -> str:
        return f"WallSet(open={len(self)})"
