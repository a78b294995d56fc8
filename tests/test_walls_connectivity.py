import unittest

from grid_maze_builder.connectivity import flood_fill, is_fully_connected, is_reachable
from grid_maze_builder.grid import Grid
from grid_maze_builder.walls import WallSet


class WallSetTests(unittest.TestCase):
    def test_open_is_symmetric(self) -> None:
        walls = WallSet()
        self.assertTrue(walls.open((0, 0), (1, 0)))
        self.assertTrue(walls.is_open((0, 0), (1, 0)))
        self.assertTrue(walls.is_open((1, 0), (0, 0)))
        self.assertIn(((1, 0), (0, 0)), walls)

    def test_reopen_is_idempotent(self) -> None:
        walls = WallSet()
        walls.open((0, 0), (0, 1))
        self.assertFalse(walls.open((0, 0), (0, 1)))
        self.assertFalse(walls.open((0, 1), (0, 0)), "mirror of an open wall is already open")
        self.assertEqual(1, len(walls))

    def test_iterates_canonical_walls(self) -> None:
        walls = WallSet()
        walls.open((1, 0), (0, 0))
        walls.open((1, 1), (1, 0))
        self.assertEqual({((0, 0), (1, 0)), ((1, 0), (1, 1))}, set(walls))

    def test_unopened_wall_is_closed(self) -> None:
        self.assertFalse(WallSet().is_open((0, 0), (1, 0)))


class ConnectivityTests(unittest.TestCase):
    def test_single_cell_is_trivially_connected(self) -> None:
        grid = Grid(1, 1)
        walls = WallSet()
        self.assertTrue(is_reachable(grid, walls, (0, 0), (0, 0)))
        self.assertTrue(is_fully_connected(grid, walls, (0, 0)))

    def test_no_open_walls(self) -> None:
        grid = Grid(2, 2)
        walls = WallSet()
        self.assertFalse(is_reachable(grid, walls, (0, 0), (1, 1)))
        self.assertFalse(is_fully_connected(grid, walls, (0, 0)))
        self.assertEqual({(0, 0)}, flood_fill(grid, walls, (0, 0)))

    def test_target_reachable_without_full_connectivity(self) -> None:
        grid = Grid(2, 2)
        walls = WallSet()
        walls.open((0, 0), (1, 0))
        walls.open((1, 0), (1, 1))
        self.assertTrue(is_reachable(grid, walls, (0, 0), (1, 1)))
        self.assertFalse(is_fully_connected(grid, walls, (0, 0)))
        walls.open((0, 1), (1, 1))
        self.assertTrue(is_fully_connected(grid, walls, (0, 0)))

    def test_flood_fill_stops_at_target(self) -> None:
        grid = Grid(4, 1)
        walls = WallSet()
        for x in range(3):
            walls.open((x, 0), (x + 1, 0))
        reached = flood_fill(grid, walls, (0, 0), target=(1, 0))
        self.assertIn((1, 0), reached)
        self.assertNotIn((3, 0), reached)
        self.assertEqual(4, len(flood_fill(grid, walls, (0, 0))))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
