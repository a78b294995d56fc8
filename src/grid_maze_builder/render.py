from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from .grid import Cell
from .maze import Maze

Segment = Tuple[Tuple[float, float], Tuple[float, float]]

# Colours as RGB 0..255, line widths in pixels for a 50 px cell
BACKGROUND_COLOR = (211, 211, 211)
WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 87, 51)
WALL_WIDTH_PX = 5.0
PATH_WIDTH_PX = 15.0
REFERENCE_CELL_SIZE = 50
DPI = 100


def _rgb(color: Tuple[int, int, int]) -> Tuple[float, float, float]:
    return (color[0] / 255.0, color[1] / 255.0, color[2] / 255.0)


def _px_to_points(px: float) -> float:
    return px * 72.0 / DPI


def wall_segments(maze: Maze, cell_size: float = REFERENCE_CELL_SIZE, border: bool = True) -> List[Segment]:
    """Line segments (pixel coordinates, y down) for every closed wall.

    Interior walls are taken from the candidate list, so each closed wall is
    listed once. The outer boundary adds four full-length segments.
    """
    segments: List[Segment] = []
    for (x1, y1), (x2, y2) in maze.grid.candidate_walls():
        if maze.is_wall_open((x1, y1), (x2, y2)):
            continue
        if y1 == y2:
            # east wall of (x1, y1)
            x = x2 * cell_size
            segments.append(((x, y1 * cell_size), (x, (y1 + 1) * cell_size)))
        else:
            # south wall of (x1, y1)
            y = y2 * cell_size
            segments.append(((x1 * cell_size, y), ((x1 + 1) * cell_size, y)))
    if border:
        w = maze.width * cell_size
        h = maze.height * cell_size
        segments.extend([
            ((0, 0), (w, 0)),
            ((w, 0), (w, h)),
            ((w, h), (0, h)),
            ((0, h), (0, 0)),
        ])
    return segments


def path_points(path: Sequence[Cell], cell_size: float = REFERENCE_CELL_SIZE) -> List[Tuple[float, float]]:
    half = cell_size / 2.0
    return [(x * cell_size + half, y * cell_size + half) for x, y in path]


def render_maze(maze: Maze, savepath: Union[str, Path] = "out.png", path: Optional[Sequence[Cell]] = None,
                cell_size: int = REFERENCE_CELL_SIZE, show_path: bool = True) -> Path:
    """Draw the maze walls and, optionally, the solution path to a PNG.

    The image is width*cell_size x height*cell_size pixels. If show_path is
    set and no path is given, the maze's shortest path is drawn.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    savepath = Path(savepath)
    scale = cell_size / REFERENCE_CELL_SIZE
    w_px = maze.width * cell_size
    h_px = maze.height * cell_size

    fig = Figure(figsize=(w_px / DPI, h_px / DPI), dpi=DPI)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, w_px)
    ax.set_ylim(h_px, 0)
    ax.set_axis_off()
    fig.patch.set_facecolor(_rgb(BACKGROUND_COLOR))

    walls = LineCollection(
        wall_segments(maze, cell_size),
        colors=[_rgb(WALL_COLOR)],
        linewidths=_px_to_points(WALL_WIDTH_PX * scale),
        capstyle="round",
        joinstyle="round",
    )
    ax.add_collection(walls)

    if show_path:
        if path is None:
            path = maze.shortest_path()
        if path:
            xs, ys = zip(*path_points(path, cell_size))
            ax.plot(xs, ys, color=_rgb(PATH_COLOR), linewidth=_px_to_points(PATH_WIDTH_PX * scale),
                    solid_capstyle="round", solid_joinstyle="round")

    fig.savefig(savepath, dpi=DPI, facecolor=fig.get_facecolor())
    return savepath
