# core/geometry.py
from __future__ import annotations
from typing import Dict, Tuple
from readchar import key
from .interfaces import Cell, Direction

UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
NONE: Direction = (0, 0)

KEY_DIRECTIONS: Dict[str, Direction] = {
    key.UP: UP,
    key.DOWN: DOWN,
    key.LEFT: LEFT,
    key.RIGHT: RIGHT,
}

def direction_for_key(key_code) -> Direction:
    return KEY_DIRECTIONS.get(key_code, NONE)

def in_bounds(x: int, y: int, cols: int, rows: int) -> bool:
    return 0 <= x < cols and 0 <= y < rows

def build_cage(cols: int, rows: int, h_glyph: str = "-", v_glyph: str = "|") -> Tuple[Cell, ...]:
    """Perimeter tiles of a cols x rows board.

    Rows come first, columns second, so drawing in order leaves the
    vertical glyph on the corners.
    """
    cage = []
    for c in range(cols):
        cage.append(Cell(c, 0, h_glyph))
        cage.append(Cell(c, rows - 1, h_glyph))
    for r in range(rows):
        cage.append(Cell(0, r, v_glyph))
        cage.append(Cell(cols - 1, r, v_glyph))
    return tuple(cage)
