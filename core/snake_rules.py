# core/snake_rules.py  (pure rules, no terminal)
from __future__ import annotations
from collections import deque
from typing import Deque, Iterator, Optional, Tuple
import random
from .interfaces import Cell, Direction, Snapshot
from .geometry import UP, NONE, direction_for_key, in_bounds
from config import AppConfig

RUNNING = "running"
GAME_OVER = "game_over"

class Snake:
    """Visible segments head first, followed by one blank placeholder cell.

    The placeholder sits where the tail last was; it erases the old tail on
    screen and counts as body for collisions.
    """
    def __init__(self, body, direction: Direction = UP, body_glyph: str = "O",
                 blank_glyph: str = " ", placeholder: Optional[Tuple[int, int]] = None):
        if not body:
            raise ValueError("snake needs at least one segment")
        self.body_glyph = body_glyph
        self.blank_glyph = blank_glyph
        self.body: Deque[Cell] = deque(Cell(x, y, body_glyph) for x, y in body)
        self.direction = direction
        if placeholder is None:
            placeholder = self._behind_tail()
        self.body.append(Cell(placeholder[0], placeholder[1], blank_glyph))

    def _behind_tail(self) -> Tuple[int, int]:
        tx, ty = self.body[-1].pos
        if len(self.body) > 1:
            px, py = self.body[-2].pos
            return (2 * tx - px, 2 * ty - py)
        dx, dy = self.direction
        return (tx - dx, ty - dy)

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def placeholder(self) -> Cell:
        return self.body[-1]

    def __len__(self) -> int:
        # visible segments only
        return len(self.body) - 1

    def positions(self) -> Tuple[Tuple[int,int], ...]:
        return tuple(self.body[i].pos for i in range(len(self)))

    def cells(self) -> Iterator[Cell]:
        """Cells to draw this frame, placeholder last."""
        yield from self.body

    def set_direction(self, key_code) -> None:
        new = direction_for_key(key_code)
        if new == NONE:
            return

        cdx, cdy = self.direction
        ndx, ndy = new
        # only turn onto the axis we are not moving along
        if cdx == 0 and cdx != ndx:
            self.direction = new
        elif cdy == 0 and cdy != ndy:
            self.direction = new

    def advance(self, fruit: Cell) -> bool:
        """Move one cell along the heading; grow instead of shrinking the
        tail when the new head lands on the fruit. Returns True on a bite."""
        hx, hy = self.head.pos
        dx, dy = self.direction
        new_head = Cell(hx + dx, hy + dy, self.body_glyph)

        eat = new_head.pos == fruit.pos
        if not eat:
            # old placeholder goes, the old tail becomes the new one
            self.body.pop()
            tail = self.body[-1]
            self.body[-1] = Cell(tail.x, tail.y, self.blank_glyph)
        self.body.appendleft(new_head)
        return eat

    def death_reason(self, cols: int, rows: int) -> Optional[str]:
        hx, hy = self.head.pos
        if not in_bounds(hx, hy, cols, rows):
            return "wall"
        for i in range(1, len(self.body)):
            if self.body[i].pos == (hx, hy):
                return "self"
        return None

    def is_dead(self, cols: int, rows: int) -> bool:
        return self.death_reason(cols, rows) is not None


def build_snake(cfg: AppConfig) -> Snake:
    return Snake(cfg.start_body, UP, body_glyph=cfg.body_glyph, blank_glyph=cfg.blank_glyph)

def build_fruit(cols: int, rows: int, rng: random.Random, margin: int = 5, glyph: str = "X") -> Cell:
    # may land under the snake; no rejection sampling
    return Cell(rng.randrange(margin, cols - margin), rng.randrange(margin, rows - margin), glyph)


class Game:
    """Owns all simulation state; one step() per tick."""
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.snake = build_snake(cfg)
        self.fruit = self._place_fruit()
        self.score = 0   # fruits eaten
        self.tick = 0
        self.state = RUNNING
        self.reason: Optional[str] = None

    def _place_fruit(self) -> Cell:
        return build_fruit(self.cfg.grid_w, self.cfg.grid_h, self.rng,
                           margin=self.cfg.fruit_margin, glyph=self.cfg.fruit_glyph)

    @property
    def terminated(self) -> bool:
        return self.state == GAME_OVER

    def step(self, key_code=None) -> Snapshot:
        if self.terminated:
            return self.snapshot()
        if key_code is not None:
            self.snake.set_direction(key_code)

        self.tick += 1
        if self.snake.advance(self.fruit):
            self.score += 1
            self.fruit = self._place_fruit()

        self.reason = self.snake.death_reason(self.cfg.grid_w, self.cfg.grid_h)
        if self.reason is not None:
            self.state = GAME_OVER
        return self.snapshot()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self.snake.positions(),
            fruit=self.fruit.pos,
            dir=self.snake.direction,
            score=self.score,
            tick=self.tick,
            terminated=self.terminated,
            reason=self.reason,
            grid_w=self.cfg.grid_w,
            grid_h=self.cfg.grid_h,
        )
