"""Randomized wall-opening generators.

Both generators mutate a WallSet in place and re-run a full flood fill after
every opened wall. That is O(candidates * (cells + walls)) in the worst case,
fine for grids of a few thousand cells.

ordered (open_until_reachable)
    Open walls from a shuffled candidate list until the destination is
    reachable from the origin. The result is not necessarily fully connected.

random-walk (open_until_connected)
    Sample random (cell, direction) pairs and open unopened walls until every
    cell is reachable from the origin.
"""
import logging
import random
from typing import List, Optional, Sequence

from .connectivity import is_fully_connected, is_reachable
from .errors import GenerationError
from .grid import DIRECTIONS, Grid, Wall
from .walls import WallSet

logger = logging.getLogger(__name__)

STRATEGY_ORDERED = "ordered"
STRATEGY_RANDOM_WALK = "random-walk"
STRATEGIES = (STRATEGY_ORDERED, STRATEGY_RANDOM_WALK)


def ordered_candidates(grid: Grid, rng: random.Random) -> List[Wall]:
    """All candidate walls of the grid in a uniformly shuffled order."""
    walls = grid.candidate_walls()
    rng.shuffle(walls)
    return walls


def open_until_reachable(grid: Grid, walls: WallSet, candidates: Sequence[Wall]) -> int:
    """Open candidates in order, stopping once the destination is reachable.

    Reachability is tested before each wall is opened, so no wall is opened
    after the destination first becomes reachable. Returns the number of walls
    whose state changed.
    """
    opened = 0
    tested = 0
    for c1, c2 in candidates:
        tested += 1
        if is_reachable(grid, walls, grid.origin, grid.destination):
            break
        if walls.open(c1, c2):
            opened += 1
    else:
        # list exhausted: the last opened wall has not been checked yet
        if not is_reachable(grid, walls, grid.origin, grid.destination):
            raise GenerationError(
                f"Destination {grid.destination} unreachable after {len(candidates)} candidate walls"
            )
    logger.debug("ordered: opened %d walls after testing %d of %d candidates",
                 opened, tested, len(candidates))
    return opened


def open_until_connected(grid: Grid, walls: WallSet, rng: random.Random, max_samples: Optional[int] = None) -> int:
    """Open randomly sampled walls until the grid is fully connected.

    Each draw picks a uniformly random cell and direction; out-of-bounds
    neighbours and already open walls are resampled. max_samples caps the
    total number of draws (None means no cap).
    """
    opened = 0
    samples = 0
    while not is_fully_connected(grid, walls, grid.origin):
        while True:
            if max_samples is not None and samples >= max_samples:
                raise GenerationError(
                    f"random-walk gave up after {samples} samples with {opened} walls opened"
                )
            samples += 1
            cell = (rng.randrange(grid.width), rng.randrange(grid.height))
            nxt = grid.neighbor(cell, rng.choice(DIRECTIONS))
            if nxt is not None and walls.open(cell, nxt):
                opened += 1
                break
    logger.debug("random-walk: opened %d walls in %d samples", opened, samples)
    return opened
