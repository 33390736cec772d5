# runners/run_snake.py
from __future__ import annotations
import queue, time
from typing import Callable, Optional
from config import AppConfig
from core.geometry import build_cage
from core.interfaces import Snapshot
from core.snake_rules import Game
from viz.keyboard import InputReader, TerminalKeySource, cbreak
from viz.renderer import Renderer
from viz.renderer_terminal import TerminalSurface

def drain_one(channel: queue.Queue) -> Optional[str]:
    """At most one pending key; never blocks."""
    try:
        return channel.get_nowait()
    except queue.Empty:
        return None

def run(
    game: Game,
    rend: Renderer,
    channel: queue.Queue,
    *,
    reader: Optional[InputReader] = None,
    sleep: Callable[[float], None] = time.sleep,
    on_tick: Optional[Callable[[Snapshot, bool], None]] = None,
) -> int:
    """Fixed-tick loop until the snake dies. Returns the final score."""
    cfg = game.cfg
    rend.draw_cage(build_cage(cfg.grid_w, cfg.grid_h, cfg.cage_h_glyph, cfg.cage_v_glyph))

    while True:
        sleep(cfg.tick_sec)
        if reader is not None:
            reader.raise_if_failed()

        prev_score = game.score
        snap = game.step(drain_one(channel))
        if on_tick is not None:
            on_tick(snap, snap.score > prev_score)

        if snap.terminated:
            rend.draw_game_over(snap.score, cfg.grid_w, cfg.grid_h)
            return snap.score

        rend.draw(game)

def main(cfg: Optional[AppConfig] = None) -> int:
    cfg = cfg or AppConfig()
    game = Game(cfg)
    rend = Renderer(TerminalSurface())
    reader = InputReader(TerminalKeySource(), poll_sec=cfg.poll_sec)

    with cbreak():
        reader.start()
        rend.open()
        try:
            return run(game, rend, reader.channel, reader=reader)
        finally:
            reader.close()
            rend.close()
