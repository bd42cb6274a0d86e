"""Maze, endpoint and path rendering."""
from __future__ import annotations

import pygame

from tick_maze import Coord, Maze

from ui.constants import (
    COLOR_BORDER, COLOR_ENTRY, COLOR_EXIT, COLOR_GRID, COLOR_PATH, COLOR_WALL,
    ViewerConfig,
)


def cell_rect(cfg: ViewerConfig, coord: Coord, inset: int = 0) -> pygame.Rect:
    x = cfg.margin + coord.col * cfg.cell_size + inset
    y = cfg.margin + coord.row * cfg.cell_size + inset
    size = cfg.cell_size - 2 * inset
    return pygame.Rect(x, y, size, size)


def draw_walls(surface: pygame.Surface, maze: Maze, cfg: ViewerConfig) -> None:
    for r in range(maze.num_rows):
        for c in range(maze.num_cols):
            coord = Coord(r, c)
            if maze.has_wall(coord):
                pygame.draw.rect(surface, COLOR_WALL, cell_rect(cfg, coord))


def draw_endpoints(surface: pygame.Surface, maze: Maze, cfg: ViewerConfig) -> None:
    pygame.draw.rect(surface, COLOR_ENTRY, cell_rect(cfg, maze.entry, cfg.inset))
    pygame.draw.rect(surface, COLOR_EXIT, cell_rect(cfg, maze.exit, cfg.inset))


def draw_path(
    surface: pygame.Surface, path: list[Coord], cfg: ViewerConfig
) -> None:
    """Fill path cells, leaving the entry and exit boxes visible."""
    for coord in path[1:-1]:
        pygame.draw.rect(surface, COLOR_PATH, cell_rect(cfg, coord))


def draw_grid(surface: pygame.Surface, maze: Maze, cfg: ViewerConfig) -> None:
    left = cfg.margin
    top = cfg.margin
    right = left + maze.num_cols * cfg.cell_size
    bottom = top + maze.num_rows * cfg.cell_size
    for r in range(maze.num_rows + 1):
        y = top + r * cfg.cell_size
        pygame.draw.line(surface, COLOR_GRID, (left, y), (right, y))
    for c in range(maze.num_cols + 1):
        x = left + c * cfg.cell_size
        pygame.draw.line(surface, COLOR_GRID, (x, top), (x, bottom))
    pygame.draw.rect(surface, COLOR_BORDER, pygame.Rect(left, top, right - left, bottom - top), 1)


def draw_maze(
    surface: pygame.Surface,
    maze: Maze,
    path: list[Coord],
    cfg: ViewerConfig,
) -> None:
    draw_walls(surface, maze, cfg)
    if path:
        draw_path(surface, path, cfg)
    draw_endpoints(surface, maze, cfg)
    draw_grid(surface, maze, cfg)
