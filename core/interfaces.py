# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple, Optional, Protocol

Direction = Tuple[int, int]

@dataclass(frozen=True, slots=True)
class Cell:
    x: int
    y: int
    glyph: str = " "

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Tuple[int,int], ...]   # head first
    fruit: Tuple[int,int]
    dir: Direction
    score: int
    tick: int
    terminated: bool
    reason: str | None
    grid_w: int
    grid_h: int

class KeySource(Protocol):
    """Blocking terminal event source: poll with timeout, then read one event.

    read() returns the key code of a key press, or None for any other event.
    """
    def poll(self, timeout: float) -> bool: ...
    def read(self) -> Optional[str]: ...
