"""Relaxation search over a maze's own distance field, and path backtrace.

The distance field lives in the maze cells: ``0`` is unvisited, positive
values are hop counts from the entry (entry is 1). ``relax`` lowers those
values until no neighbor can be improved. Each cell carries a closed flag;
visiting a cell closes it and lowering its distance reopens it and queues
it again, so a cell is walked again whenever a later route reaches it more
cheaply.

The worklist is a FIFO queue of cells. With unit edges the first distance a
cell receives is already its shortest, so each reachable cell is visited
once.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from tick_maze.types import DIRECTIONS, OPEN, Coord

if TYPE_CHECKING:
    from tick_maze.maze import Maze

logger = logging.getLogger(__name__)


def search_path(maze: Maze) -> list[Coord] | None:
    """Fill the distance field from the entry and trace a shortest path.

    Returns the entry-first path, or None if either endpoint is a wall or
    the exit is unreachable.
    """
    entry, exit = maze.entry, maze.exit
    if maze.has_wall(entry) or maze.has_wall(exit):
        return None
    if entry == exit:
        return [entry]

    maze.set_distance(entry, 1)
    visits = relax(maze, entry)
    logger.debug("relaxation finished after %d visits", visits)
    if maze.distance_at(exit) == OPEN:
        return None
    return trace_path(maze)


def _passable(maze: Maze, coord: Coord) -> bool:
    return maze.in_bounds(coord) and not maze.has_wall(coord)


def relax(maze: Maze, start: Coord) -> int:
    """Propagate distances outward from ``start``. Returns the visit count.

    ``start`` must already hold a positive distance. Cells are visited in
    queue order; a queued copy of a cell that was closed since it was
    queued is dropped.
    """
    maze.set_closed(start, False)
    queue: deque[Coord] = deque([start])
    visits = 0
    while queue:
        cell = queue.popleft()
        if maze.is_closed(cell):
            continue
        maze.set_closed(cell, True)
        visits += 1

        candidate = maze.distance_at(cell) + 1
        for direction in DIRECTIONS:
            nxt = cell.move(direction)
            if not _passable(maze, nxt):
                continue
            current = maze.distance_at(nxt)
            if current == OPEN or current > candidate:
                maze.set_distance(nxt, candidate)
                maze.set_closed(nxt, False)
                queue.append(nxt)
    return visits


def trace_path(maze: Maze) -> list[Coord]:
    """Walk the relaxed field from exit down to entry.

    At each cell the neighbors are scanned in direction order and the first
    one strictly below the running minimum wins, so ties go to the earlier
    direction. Requires a reachable exit.
    """
    entry = maze.entry
    coord = maze.exit
    stack: list[Coord] = [coord]
    while coord != entry:
        best = coord
        lowest = maze.distance_at(coord)
        for direction in DIRECTIONS:
            nxt = coord.move(direction)
            if not _passable(maze, nxt):
                continue
            d = maze.distance_at(nxt)
            if OPEN < d < lowest:
                lowest = d
                best = nxt
        if best == coord:
            raise ValueError(f"Distance field has no descent from {coord}")
        coord = best
        stack.append(coord)

    path: list[Coord] = []
    while stack:
        path.append(stack.pop())
    return path
