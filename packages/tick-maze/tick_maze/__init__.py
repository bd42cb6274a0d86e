"""tick-maze - Shortest paths through grid mazes by in-place relaxation."""
from __future__ import annotations

from tick_maze.types import DIRECTIONS, OPEN, WALL, Coord, Direction, MazeFormatError
from tick_maze.maze import Maze
from tick_maze.search import relax, search_path, trace_path
from tick_maze.loader import MazeFormat, load_maze, load_maze_dir, parse_maze
from tick_maze.render import RenderStyle, render_text

__all__ = [
    "Coord",
    "Direction",
    "DIRECTIONS",
    "WALL",
    "OPEN",
    "MazeFormatError",
    "Maze",
    "relax",
    "search_path",
    "trace_path",
    "MazeFormat",
    "parse_maze",
    "load_maze",
    "load_maze_dir",
    "RenderStyle",
    "render_text",
]
