"""Maze Viewer — solve and draw grid mazes with pygame.

Controls:
  Space   Solve / clear the path
  N / P   Next / previous maze (when given a directory)
  Escape  Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from tick_maze import Coord, Maze, MazeFormat, MazeFormatError, load_maze, load_maze_dir

from ui.constants import COLOR_BG, FPS, ViewerConfig
from ui.renderer import draw_maze
from ui.status import SolveStatus

DEFAULT_MAZES = Path(__file__).parent / "mazes"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Maze Viewer — tick-maze visual demo")
    p.add_argument("path", nargs="?", default=str(DEFAULT_MAZES),
                   help="Maze file or directory (default: bundled mazes)")
    p.add_argument("--cell-size", type=int, default=20, help="Cell size in pixels (default: 20)")
    p.add_argument("--strict", action="store_true", help="Reject unknown cell characters")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args()


def load_all(path: Path, fmt: MazeFormat) -> list[tuple[str, Maze]]:
    if path.is_dir():
        return list(load_maze_dir(path, fmt).items())
    return [(path.name, load_maze(path, fmt))]


class ViewerState:
    """The loaded mazes, which one is shown, and its current path."""

    def __init__(self, mazes: list[tuple[str, Maze]]) -> None:
        self.mazes = mazes
        self.index = 0
        self.path: list[Coord] = []
        self.solved: bool | None = None
        self.status = SolveStatus()

    @property
    def name(self) -> str:
        return self.mazes[self.index][0]

    @property
    def maze(self) -> Maze:
        return self.mazes[self.index][1]

    def toggle_solve(self) -> None:
        if self.solved is not None:
            self.solved = None
            self.path = []
            return
        self.solved = self.maze.search_path()
        self.path = self.maze.get_path()

    def step(self, delta: int) -> None:
        self.index = (self.index + delta) % len(self.mazes)
        self.path = []
        self.solved = None


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    cfg = ViewerConfig(cell_size=args.cell_size)

    try:
        mazes = load_all(Path(args.path), MazeFormat(strict=args.strict))
    except MazeFormatError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    if not mazes:
        print(f"error: no mazes found in {args.path}", file=sys.stderr)
        sys.exit(1)

    state = ViewerState(mazes)
    rows = max(m.num_rows for _, m in mazes)
    cols = max(m.num_cols for _, m in mazes)

    pygame.init()
    screen = pygame.display.set_mode(cfg.screen_size(rows, cols))
    pygame.display.set_caption("Maze Viewer")
    clock = pygame.time.Clock()

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.toggle_solve()
                elif event.key == pygame.K_n:
                    state.step(1)
                elif event.key == pygame.K_p:
                    state.step(-1)

        screen.fill(COLOR_BG)
        draw_maze(screen, state.maze, state.path, cfg)
        state.status.draw(screen, state.name, state.maze, state.solved, state.path)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
