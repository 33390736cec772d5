# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional, Tuple
import numpy as np

class HeadlessSurface:
    """In-memory surface: a glyph grid and a color grid, plus a log of
    text written outside the grid. Used by tests and for dry runs."""
    def __init__(self, grid_w: int, grid_h: int):
        self.w = grid_w
        self.h = grid_h
        self.glyphs = np.full((grid_h, grid_w), " ", dtype="<U1")
        self.colors = np.full((grid_h, grid_w), None, dtype=object)
        self.cursor: Tuple[int, int] = (0, 0)
        self.color: Optional[str] = None
        self.cursor_visible = True
        self.text: List[str] = []
        self.flushes = 0
        self.clears = 0

    def clear_screen(self) -> None:
        self.glyphs[:, :] = " "
        self.colors[:, :] = None
        self.clears += 1

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def move_cursor(self, x: int, y: int) -> None:
        if x < 0 or y < 0:
            raise ValueError(f"cursor position must be non-negative, got {(x, y)}")
        self.cursor = (x, y)

    def write_glyph(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"glyph must be a single character, got {ch!r}")
        x, y = self.cursor
        if x < self.w and y < self.h:
            self.glyphs[y, x] = ch
            self.colors[y, x] = self.color
        self.cursor = (x + 1, y)

    def write_text(self, text: str) -> None:
        self.text.append(text)

    def set_foreground_color(self, color: Optional[str]) -> None:
        self.color = color

    def reset_color(self) -> None:
        self.color = None

    def flush(self) -> None:
        self.flushes += 1

    # helpers
    def at(self, x: int, y: int) -> Tuple[str, Optional[str]]:
        return str(self.glyphs[y, x]), self.colors[y, x]

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.glyphs]
