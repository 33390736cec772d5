# viz/renderer.py
from typing import Iterable
import viz.renderer_colors as theme
from core.interfaces import Cell
from core.snake_rules import Game
from viz.render_iface import Surface

class Renderer:
    def __init__(self, surface: Surface):
        self.surf = surface

    def open(self):
        self.surf.clear_screen()
        self.surf.hide_cursor()

    def draw_cells(self, cells: Iterable[Cell], color: str):
        self.surf.set_foreground_color(color)
        for p in cells:
            self.surf.move_cursor(p.x, p.y)
            self.surf.write_glyph(p.glyph)

    def draw_cage(self, cage: Iterable[Cell]):
        self.draw_cells(cage, theme.CAGE)
        self.surf.flush()

    def draw(self, game: Game):
        self.surf.hide_cursor()
        self.draw_cells(game.snake.cells(), theme.SNAKE)
        self.draw_cells([game.fruit], theme.FRUIT)
        self.surf.flush()

    def draw_game_over(self, score: int, cols: int, rows: int):
        self.surf.set_foreground_color(theme.TEXT)
        self.surf.move_cursor(cols, rows)
        self.surf.write_text(f"\nGAME OVER. SCORE: {score}\n")
        self.surf.flush()

    def close(self):
        try:
            self.surf.reset_color()
            self.surf.show_cursor()
        finally:
            self.surf.flush()
