# render.py
from typing import Dict, Protocol, Sequence, Tuple

import pygame

from geometry import Box
from simulation import Simulation

# =====================
# EKRAN / POLE GRY (w znakach)
# =====================
SCREEN_ROWS = 30
FOREGROUND_TOP = 5      # pierwszy wiersz pola gry na ekranie
FOREGROUND_ROWS = 20
GROUND_GLYPH = "~"

FONT_NAME = "monospace"
FONT_SIZE = 18

BG_COLOR = (12, 12, 16)
TEXT_COLOR = (220, 220, 220)
GROUND_COLOR = (140, 120, 80)
ACTOR_COLOR = (120, 220, 140)
OBSTACLE_COLOR = (90, 180, 90)
HUD_COLOR = (204, 166, 61)
GAME_OVER_COLOR = (255, 225, 120)

Color = Tuple[int, int, int]


class RenderTarget(Protocol):
    def draw(self, row: int, col: int, text: str, color: Color = TEXT_COLOR) -> None:
        ...

    def present(self) -> None:
        ...


class GlyphScreen:
    """Character-cell surface on top of a pygame window.

    Rows and columns are cells of one monospace glyph; text drawn past the
    window edges is clipped by pygame.
    """

    def __init__(self, columns: int, rows: int = SCREEN_ROWS, font_size: int = FONT_SIZE, caption: str = "Dino Runner"):
        self.columns = int(columns)
        self.rows = int(rows)
        self.font = pygame.font.SysFont(FONT_NAME, int(font_size))
        self.cell_w, self.cell_h = self.font.size("M")
        self.cell_h = max(self.cell_h, self.font.get_linesize())

        self.screen = pygame.display.set_mode((self.columns * self.cell_w, self.rows * self.cell_h))
        pygame.display.set_caption(caption)

        # cache wyrenderowanych napisów (glify się powtarzają co klatkę)
        self._text_cache: Dict[Tuple[str, Color], pygame.Surface] = {}

    def _text(self, text: str, color: Color) -> pygame.Surface:
        key = (text, tuple(color))
        surf = self._text_cache.get(key)
        if surf is None:
            surf = self.font.render(text, True, color)
            self._text_cache[key] = surf
        return surf

    def clear(self):
        self.screen.fill(BG_COLOR)

    def draw(self, row: int, col: int, text: str, color: Color = TEXT_COLOR) -> None:
        if not text:
            return
        self.screen.blit(self._text(text, color), (int(col) * self.cell_w, int(row) * self.cell_h))

    def present(self) -> None:
        pygame.display.flip()


# ---------- drawing helpers ----------
def draw_glyph_rows(target: RenderTarget, box: Box, rows: Sequence[str], color: Color, row_offset: int = 0):
    for i, line in enumerate(rows):
        target.draw(row_offset + box.top + i, box.left, line, color)


def draw_world(target: RenderTarget, sim: Simulation, columns: int):
    """Ground line, obstacles, the actor and the distance counter."""
    # ziemia na ostatnim wierszu pola gry
    target.draw(FOREGROUND_TOP + FOREGROUND_ROWS - 1, 0, GROUND_GLYPH * int(columns), GROUND_COLOR)

    for hitbox, rows in sim.obstacle_views():
        draw_glyph_rows(target, hitbox, rows, OBSTACLE_COLOR, row_offset=FOREGROUND_TOP)

    draw_glyph_rows(target, sim.actor_hitbox, sim.actor_frame, ACTOR_COLOR, row_offset=FOREGROUND_TOP)

    hud = f"level {sim.level.number}   distance {sim.ticks:06d}"
    target.draw(1, max(0, int(columns) - len(hud) - 2), hud, HUD_COLOR)


def draw_game_over(target: RenderTarget, sim: Simulation, columns: int):
    lines = (
        "G A M E   O V E R",
        f"distance {sim.ticks}",
        "any key - play again    esc / ctrl+z - quit",
    )
    top = FOREGROUND_TOP + 3
    for i, line in enumerate(lines):
        col = max(0, (int(columns) - len(line)) // 2)
        target.draw(top + i * 2, col, line, GAME_OVER_COLOR)
