"""Command-line front end: load maze files, solve them, print the result."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tick_maze.loader import MazeFormat, load_maze, load_maze_dir
from tick_maze.maze import Maze
from tick_maze.render import render_text
from tick_maze.types import MazeFormatError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tick-maze",
        description="Find the shortest path through grid mazes",
    )
    p.add_argument("paths", nargs="+", metavar="PATH",
                   help="Maze file, or directory of maze files")
    p.add_argument("--distances", action="store_true",
                   help="Also print the relaxed distance field")
    p.add_argument("--strict", action="store_true",
                   help="Reject cell characters other than '0' and '1'")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Enable debug logging")
    return p.parse_args(argv)


def _collect(path: Path, fmt: MazeFormat) -> list[tuple[str, Maze]]:
    if path.is_dir():
        return [(str(path / name), maze) for name, maze in load_maze_dir(path, fmt).items()]
    return [(str(path), load_maze(path, fmt))]


def report(name: str, maze: Maze, distances: bool = False) -> str:
    found = maze.search_path()
    path = maze.get_path()
    lines = [f"== {name} ({maze.num_rows}x{maze.num_cols})"]
    lines.append(render_text(maze, path))
    if found:
        lines.append(f"path: {len(path)} cells")
        lines.append(" -> ".join(str(c) for c in path))
    else:
        lines.append("no path")
    if distances:
        lines.append(maze.format_distances())
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    fmt = MazeFormat(strict=args.strict)

    status = 0
    for raw in args.paths:
        try:
            mazes = _collect(Path(raw), fmt)
        except MazeFormatError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 1
            continue
        logger.debug("%s: %d maze(s)", raw, len(mazes))
        for name, maze in mazes:
            print(report(name, maze, distances=args.distances))
    return status
