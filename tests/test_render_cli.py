import importlib
from pathlib import Path
from unittest import mock

import matplotlib.image as mpimg
import pytest

from grid_maze_builder import cli
from grid_maze_builder import render
from grid_maze_builder.maze import Maze
from grid_maze_builder.render import path_points, render_maze, wall_segments


def test_wall_segments_cover_closed_walls_once():
    maze = Maze(2, 2)
    maze.open_wall((0, 0), (1, 0))
    maze.open_wall((1, 0), (1, 1))
    interior = wall_segments(maze, cell_size=10, border=False)
    # closed: (0,0)-(0,1) and (0,1)-(1,1)
    assert sorted(interior) == sorted([
        ((0, 10), (10, 10)),
        ((10, 10), (10, 20)),
    ])
    assert len(wall_segments(maze, cell_size=10)) == len(interior) + 4


def test_path_points_are_cell_centres():
    assert path_points([(0, 0), (1, 0)], cell_size=20) == [(10.0, 10.0), (30.0, 10.0)]


def test_render_writes_png_of_expected_size(tmp_path: Path):
    maze = Maze.build(4, 3, strategy="random-walk", seed=3)
    out = render_maze(maze, tmp_path / "maze.png", cell_size=20)
    assert out.exists()
    image = mpimg.imread(out)
    assert image.shape[:2] == (3 * 20, 4 * 20)


def test_render_rejects_bad_cell_size(tmp_path: Path):
    with pytest.raises(ValueError):
        render_maze(Maze(2, 2), tmp_path / "bad.png", cell_size=0)


def test_cli_generates_image(tmp_path: Path, capsys):
    out = tmp_path / "cli.png"
    code = cli.main(["--width", "6", "--height", "5", "--seed", "1", "--cell-size", "10",
                     "--strategy", "random-walk", "--out", str(out)])
    assert code == 0
    assert out.exists()
    printed = capsys.readouterr().out
    assert "Maze size: 6x5" in printed
    assert "Shortest path:" in printed


def test_cli_reports_invalid_dimensions(tmp_path: Path, capsys):
    code = cli.main(["--width", "0", "--out", str(tmp_path / "x.png")])
    assert code == 2
    assert "error:" in capsys.readouterr().err


def test_render_leaves_matplotlib_backend_alone(tmp_path: Path):
    with mock.patch("matplotlib.use") as use:
        reloaded = importlib.reload(render)
        reloaded.render_maze(Maze.build(3, 3, seed=5), tmp_path / "backend.png", cell_size=10)
    use.assert_not_called()
