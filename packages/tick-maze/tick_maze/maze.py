"""Maze - grid model holding terrain, the distance field and closed flags."""
from __future__ import annotations

import logging

from tick_maze import search
from tick_maze.types import OPEN, WALL, Coord

logger = logging.getLogger(__name__)


class Maze:
    """Rectangular grid maze with one entry and one exit.

    Cell codes: ``-1`` is a wall, ``0`` an unvisited open cell, and any
    positive value the best known hop count from the entry (entry is 1).
    The maze owns a copy of the cell data; a search mutates only that copy.
    """

    def __init__(self, cells: list[list[int]], entry: Coord, exit: Coord) -> None:
        if not cells or not cells[0]:
            raise ValueError("Maze must have at least one row and one column")
        cols = len(cells[0])
        for r, row in enumerate(cells):
            if len(row) != cols:
                raise ValueError(
                    f"Row {r} has {len(row)} cells, expected {cols}"
                )
        self._rows = len(cells)
        self._cols = cols
        self._terrain = [[WALL if v == WALL else OPEN for v in row] for row in cells]
        self._distance = [list(row) for row in self._terrain]
        self._closed = [[False] * cols for _ in range(self._rows)]
        for name, coord in (("entry", entry), ("exit", exit)):
            if not self.in_bounds(coord):
                raise ValueError(
                    f"{name} {coord} out of bounds for {self._rows}x{self._cols} maze"
                )
        self._entry = entry
        self._exit = exit
        self._path: list[Coord] = []

    @property
    def num_rows(self) -> int:
        return self._rows

    @property
    def num_cols(self) -> int:
        return self._cols

    @property
    def entry(self) -> Coord:
        return self._entry

    @property
    def exit(self) -> Coord:
        return self._exit

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.row < self._rows and 0 <= coord.col < self._cols

    def has_wall(self, coord: Coord) -> bool:
        """True if the cell is a wall. Raises IndexError outside the grid."""
        if not self.in_bounds(coord):
            raise IndexError(
                f"{coord} out of bounds for {self._rows}x{self._cols} maze"
            )
        return self._terrain[coord.row][coord.col] == WALL

    # --- Search state ---

    def distance_at(self, coord: Coord) -> int:
        return self._distance[coord.row][coord.col]

    def set_distance(self, coord: Coord, value: int) -> None:
        self._distance[coord.row][coord.col] = value

    def is_closed(self, coord: Coord) -> bool:
        return self._closed[coord.row][coord.col]

    def set_closed(self, coord: Coord, closed: bool) -> None:
        self._closed[coord.row][coord.col] = closed

    def reset(self) -> None:
        """Restore the distance field and closed flags to the bare terrain."""
        self._distance = [list(row) for row in self._terrain]
        self._closed = [[False] * self._cols for _ in range(self._rows)]
        self._path = []

    # --- Search ---

    def search_path(self) -> bool:
        """Search for a shortest path from entry to exit.

        Returns True and records the path (see ``get_path``) if the exit is
        reachable. An unreachable exit returns False and leaves the path
        empty; it is not an error.
        """
        self.reset()
        path = search.search_path(self)
        if path is None:
            logger.debug("no path from %s to %s", self._entry, self._exit)
            return False
        self._path = path
        logger.debug(
            "path from %s to %s: %d cells", self._entry, self._exit, len(path)
        )
        return True

    def get_path(self) -> list[Coord]:
        """Entry-first path from the last successful search (a copy)."""
        return list(self._path)

    def distances(self) -> list[list[int]]:
        return [list(row) for row in self._distance]

    def format_distances(self) -> str:
        width = max(len(str(v)) for row in self._distance for v in row)
        return "\n".join(
            " ".join(str(v).rjust(width) for v in row) for row in self._distance
        )

    def __repr__(self) -> str:
        return (
            f"Maze({self._rows}x{self._cols}, entry={self._entry}, exit={self._exit})"
        )
