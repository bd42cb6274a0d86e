"""Load mazes from the plain-text maze description format.

Format::

    rows cols
    <rows lines of cols characters: '1' wall, '0' open>
    entryRow entryCol
    exitRow exitCol

Characters other than the wall and open characters load as open cells
unless ``MazeFormat.strict`` is set.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tick_maze.maze import Maze
from tick_maze.types import OPEN, WALL, Coord, MazeFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MazeFormat:
    """Immutable options for reading maze descriptions.

    Attributes:
        wall_char: Character that marks a wall cell.
        open_char: Character that marks an open cell.
        strict: Reject unrecognized cell characters and short rows instead
            of treating the missing or unknown cells as open.
    """

    wall_char: str = "1"
    open_char: str = "0"
    strict: bool = False

    def __post_init__(self) -> None:
        if len(self.wall_char) != 1 or len(self.open_char) != 1:
            raise ValueError("wall_char and open_char must be single characters")
        if self.wall_char == self.open_char:
            raise ValueError(
                f"wall_char and open_char must differ, both are {self.wall_char!r}"
            )


DEFAULT_FORMAT = MazeFormat()


def _ints(line: str, lineno: int, what: str, source: str | None) -> tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise MazeFormatError(
            f"expected 2 integers for {what}, got {len(parts)} fields",
            line=lineno, source=source,
        )
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise MazeFormatError(
            f"non-numeric {what}: {line.strip()!r}", line=lineno, source=source
        ) from None


def _parse_row(
    line: str, lineno: int, cols: int, fmt: MazeFormat, source: str | None
) -> list[int]:
    if len(line) > cols:
        raise MazeFormatError(
            f"row has {len(line)} cells, expected {cols}", line=lineno, source=source
        )
    if fmt.strict and len(line) < cols:
        raise MazeFormatError(
            f"row has {len(line)} cells, expected {cols}", line=lineno, source=source
        )
    row = [OPEN] * cols
    for j, ch in enumerate(line):
        if ch == fmt.wall_char:
            row[j] = WALL
        elif ch != fmt.open_char and fmt.strict:
            raise MazeFormatError(
                f"unrecognized cell character {ch!r} in column {j}",
                line=lineno, source=source,
            )
    return row


def parse_maze(
    text: str,
    fmt: MazeFormat | None = None,
    source: str | None = None,
) -> Maze:
    """Parse a maze description into a Maze.

    Raises MazeFormatError on malformed input; no partial maze is returned.
    """
    fmt = fmt or DEFAULT_FORMAT
    lines = text.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise MazeFormatError("empty maze description", source=source)

    rows, cols = _ints(lines[0], 1, "dimensions", source)
    if rows <= 0 or cols <= 0:
        raise MazeFormatError(
            f"dimensions must be positive, got {rows}x{cols}", line=1, source=source
        )

    expected = rows + 3
    if len(lines) < expected:
        raise MazeFormatError(
            f"expected {expected} lines, got {len(lines)}", source=source
        )
    if len(lines) > expected:
        raise MazeFormatError(
            "unexpected content after exit line", line=expected + 1, source=source
        )

    cells = [
        _parse_row(lines[i + 1], i + 2, cols, fmt, source)
        for i in range(rows)
    ]
    entry = Coord(*_ints(lines[rows + 1], rows + 2, "entry", source))
    exit = Coord(*_ints(lines[rows + 2], rows + 3, "exit", source))

    for name, coord, lineno in (("entry", entry, rows + 2), ("exit", exit, rows + 3)):
        if not (0 <= coord.row < rows and 0 <= coord.col < cols):
            raise MazeFormatError(
                f"{name} {coord} out of bounds for {rows}x{cols} maze",
                line=lineno, source=source,
            )

    maze = Maze(cells, entry, exit)
    logger.debug("loaded %r from %s", maze, source or "<text>")
    return maze


def load_maze(path: str | Path, fmt: MazeFormat | None = None) -> Maze:
    """Read and parse a maze file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MazeFormatError(
            f"cannot read maze file: {exc.strerror or exc}", source=str(path)
        ) from exc
    except UnicodeDecodeError as exc:
        raise MazeFormatError(
            f"maze file is not valid UTF-8 text: {exc.reason} at byte {exc.start}",
            source=str(path),
        ) from exc
    return parse_maze(text, fmt, source=str(path))


def load_maze_dir(
    directory: str | Path, fmt: MazeFormat | None = None
) -> dict[str, Maze]:
    """Load every visible regular file in a directory, keyed by file name.

    Files are loaded in name order. The first malformed file raises.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise MazeFormatError("not a directory", source=str(directory))
    mazes: dict[str, Maze] = {}
    for path in sorted(directory.iterdir()):
        if path.name.startswith(".") or not path.is_file():
            continue
        mazes[path.name] = load_maze(path, fmt)
    return mazes
