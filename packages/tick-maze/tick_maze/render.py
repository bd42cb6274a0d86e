"""Plain-text maze rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_maze.types import Coord

if TYPE_CHECKING:
    from tick_maze.maze import Maze


@dataclass(frozen=True)
class RenderStyle:
    """Glyphs used by ``render_text``. Each must be a single character."""

    wall: str = "#"
    open: str = "."
    entry: str = "S"
    exit: str = "E"
    path: str = "*"

    def __post_init__(self) -> None:
        for name in ("wall", "open", "entry", "exit", "path"):
            glyph = getattr(self, name)
            if len(glyph) != 1:
                raise ValueError(f"{name} glyph must be one character, got {glyph!r}")


DEFAULT_STYLE = RenderStyle()


def render_text(
    maze: Maze,
    path: list[Coord] | None = None,
    style: RenderStyle | None = None,
) -> str:
    """Draw the maze one line per row. Entry and exit markers win over the path."""
    style = style or DEFAULT_STYLE
    on_path = set(path) if path is not None else set()
    lines: list[str] = []
    for r in range(maze.num_rows):
        chars: list[str] = []
        for c in range(maze.num_cols):
            coord = Coord(r, c)
            if coord == maze.entry:
                chars.append(style.entry)
            elif coord == maze.exit:
                chars.append(style.exit)
            elif maze.has_wall(coord):
                chars.append(style.wall)
            elif coord in on_path:
                chars.append(style.path)
            else:
                chars.append(style.open)
        lines.append("".join(chars))
    return "\n".join(lines)
