# config.py
from dataclasses import dataclass, replace
from typing import Optional, Tuple

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 30
    grid_h: int = 20
    seed: Optional[int] = None

    # timing
    tick_ms: int = 100
    poll_ms: int = 500

    # gameplay
    fruit_margin: int = 5
    start_body: Tuple[Tuple[int, int], ...] = ((1, 10), (1, 11), (1, 12))

    # glyphs
    body_glyph: str = "O"
    fruit_glyph: str = "X"
    blank_glyph: str = " "
    cage_h_glyph: str = "-"
    cage_v_glyph: str = "|"

    @property
    def tick_sec(self) -> float:
        return self.tick_ms / 1000.0

    @property
    def poll_sec(self) -> float:
        return self.poll_ms / 1000.0

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
