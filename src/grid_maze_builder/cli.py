import argparse
import logging
import sys
from typing import List, Optional

from .errors import MazeError
from .generators import STRATEGIES, STRATEGY_ORDERED
from .maze import Maze
from .render import REFERENCE_CELL_SIZE, render_maze


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a grid maze, solve it and render it to a PNG")
    p.add_argument("--width", type=int, default=50, help="Maze width in cells")
    p.add_argument("--height", type=int, default=40, help="Maze height in cells")
    p.add_argument("--strategy", choices=STRATEGIES, default=STRATEGY_ORDERED,
                   help="ordered: stop once the goal is reachable; random-walk: open walls until every cell is connected")
    p.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    p.add_argument("--max-samples", type=int, default=None, help="Give up random-walk generation after this many draws")
    p.add_argument("--cell-size", type=int, default=REFERENCE_CELL_SIZE, help="Pixels per cell in the output image")
    p.add_argument("--no-path", action="store_true", help="Do not draw the solution path")
    p.add_argument("--out", type=str, default="out.png", help="Output filename for the maze image")
    p.add_argument("--verbose", action="store_true", help="Log generator statistics")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        maze = Maze.build(args.width, args.height, strategy=args.strategy, seed=args.seed,
                          max_samples=args.max_samples)
        print(f"Maze size: {args.width}x{args.height}. Start={maze.start} Goal={maze.goal}")
        print(f"Strategy: {maze.strategy}. Open walls: {maze.open_wall_count}")

        path = maze.shortest_path()
        if path:
            print(f"Shortest path: {len(path)} cells ({len(path) - 1} steps)")
        else:
            print("No path from start to goal.")

        out = render_maze(maze, args.out, path=path, cell_size=args.cell_size, show_path=not args.no_path)
    except (MazeError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(f"Saved visual to {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
