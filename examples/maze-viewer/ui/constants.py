"""Layout, color, and rendering constants."""
from __future__ import annotations

from dataclasses import dataclass

FPS = 30
STATUS_H = 32

# Colors
COLOR_BG = (240, 240, 240)
COLOR_BORDER = (0, 0, 0)
COLOR_WALL = (64, 64, 64)
COLOR_ENTRY = (255, 255, 0)
COLOR_EXIT = (0, 255, 0)
COLOR_PATH = (83, 142, 217)
COLOR_GRID = (128, 128, 128)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_OK = (100, 255, 100)
COLOR_FAIL = (255, 80, 80)


@dataclass(frozen=True)
class ViewerConfig:
    """Immutable cell geometry for the maze viewer.

    Attributes:
        margin: Pixels between the window edge and the maze border.
        cell_size: Width and height of one maze cell.
        inset: How much smaller on each side the entry/exit boxes are.
    """

    margin: int = 10
    cell_size: int = 20
    inset: int = 2

    def __post_init__(self) -> None:
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if not 0 <= self.inset * 2 < self.cell_size:
            raise ValueError(
                f"inset {self.inset} too large for cell_size {self.cell_size}"
            )

    def screen_size(self, rows: int, cols: int) -> tuple[int, int]:
        w = self.margin * 2 + cols * self.cell_size
        h = self.margin * 2 + rows * self.cell_size + STATUS_H
        return w, h
