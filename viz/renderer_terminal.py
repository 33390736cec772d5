# viz/renderer_terminal.py
from __future__ import annotations
from typing import Optional
from rich.console import Console
from rich.control import Control

class TerminalSurface:
    """Surface over a rich Console. Output errors are not caught."""
    def __init__(self, console: Optional[Console] = None):
        self.console = console if console is not None else Console(highlight=False)
        self._color: Optional[str] = None

    def clear_screen(self) -> None:
        self.console.clear(home=True)

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def move_cursor(self, x: int, y: int) -> None:
        if x < 0 or y < 0:
            raise ValueError(f"cursor position must be non-negative, got {(x, y)}")
        self.console.control(Control.move_to(x, y))

    def write_glyph(self, ch: str) -> None:
        if len(ch) != 1:
            raise ValueError(f"glyph must be a single character, got {ch!r}")
        self._write(ch)

    def write_text(self, text: str) -> None:
        self._write(text)

    def set_foreground_color(self, color: Optional[str]) -> None:
        self._color = color

    def reset_color(self) -> None:
        self._color = None

    def flush(self) -> None:
        self.console.file.flush()

    def _write(self, text: str) -> None:
        self.console.print(text, style=self._color, end="", markup=False,
                           highlight=False, emoji=False, soft_wrap=True)
