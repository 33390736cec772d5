# viz/render_iface.py
from __future__ import annotations
from typing import Protocol, Optional

class Surface(Protocol):
    """Character-cell output: everything the game draws goes through these."""
    def clear_screen(self) -> None: ...
    def hide_cursor(self) -> None: ...
    def show_cursor(self) -> None: ...
    def move_cursor(self, x: int, y: int) -> None: ...
    def write_glyph(self, ch: str) -> None: ...
    def write_text(self, text: str) -> None: ...
    def set_foreground_color(self, color: Optional[str]) -> None: ...
    def reset_color(self) -> None: ...
    def flush(self) -> None: ...
