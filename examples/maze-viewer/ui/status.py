"""Solve-state readout under the maze."""
from __future__ import annotations

import pygame

from tick_maze import Coord, Maze

from ui.constants import COLOR_FAIL, COLOR_OK, COLOR_STATUS_BG, COLOR_TEXT, STATUS_H

HINT = "[Space] solve  [N/P] switch"


def describe(
    name: str, maze: Maze, solved: bool | None, path: list[Coord]
) -> tuple[str, tuple[int, int, int]]:
    """Message and color for a maze. ``solved`` is None before a search."""
    size = f"{name} {maze.num_rows}x{maze.num_cols} {maze.entry}->{maze.exit}"
    if solved is None:
        return f"{size}  {HINT}", COLOR_TEXT
    if solved:
        return f"{size}  path: {len(path)} cells, {len(path) - 1} moves", COLOR_OK
    return f"{size}  no path", COLOR_FAIL


class SolveStatus:
    """Shows the current maze, its endpoints and the last search result."""

    def __init__(self) -> None:
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def draw(
        self,
        surface: pygame.Surface,
        name: str,
        maze: Maze,
        solved: bool | None,
        path: list[Coord],
    ) -> None:
        w, h = surface.get_size()
        pygame.draw.rect(surface, COLOR_STATUS_BG, pygame.Rect(0, h - STATUS_H, w, STATUS_H))
        message, color = describe(name, maze, solved, path)
        text = self._get_font().render(message, True, color)
        surface.blit(text, (8, h - STATUS_H + 8))
