from __future__ import annotations

import arcade
from loguru import logger

from .constants import CELL_SIZE, CELL_GAP, WINDOW_HEIGHT, MIN_WINDOW_WIDTH
from .console import play_message, insert_message
from .models.piece_queue import PieceQueue
from .pieces import kind_color


# ---------- helpers da estilização 8-bit ----------

def _clamp(x: int) -> int:
    return max(0, min(255, x))


def _shade(rgb: tuple, factor: float) -> tuple:
    r, g, b, *a = rgb
    alpha = a[0] if a else 255
    return (
        _clamp(int(r * factor)),
        _clamp(int(g * factor)),
        _clamp(int(b * factor)),
        alpha,
    )


def _mix(rgb: tuple, other: tuple, t: float) -> tuple:
    r1, g1, b1, *a1 = rgb
    r2, g2, b2, *a2 = other
    alpha1 = a1[0] if a1 else 255
    alpha2 = a2[0] if a2 else 255
    return (
        _clamp(int(r1 + (r2 - r1) * t)),
        _clamp(int(g1 + (g2 - g1) * t)),
        _clamp(int(b1 + (b2 - b1) * t)),
        _clamp(int(alpha1 + (alpha2 - alpha1) * t)),
    )


def draw_block_8bit(left: float, bottom: float, size: float, base: tuple):
    u = max(1.0, size / 8.0)
    arcade.draw_lbwh_rectangle_filled(left, bottom, size, size, _shade(base, 0.55))
    arcade.draw_lbwh_rectangle_filled(left + u, bottom + u, size - 2 * u, size - 2 * u, base)
    light = _mix(base, (255, 255, 255, 255), 0.35)
    dark = _shade(base, 0.75)
    # luz em cima/esquerda, sombra embaixo/direita
    arcade.draw_lbwh_rectangle_filled(left + u, bottom + size - 2 * u, size - 3 * u, u, light)
    arcade.draw_lbwh_rectangle_filled(left + u, bottom + u, u, size - 3 * u, light)
    arcade.draw_lbwh_rectangle_filled(left + 2 * u, bottom + u, size - 3 * u, u, dark)
    arcade.draw_lbwh_rectangle_filled(left + size - 2 * u, bottom + 2 * u, u, size - 3 * u, dark)


# ---------- paleta retrô ----------

RETRO_BG = (12, 32, 28, 255)
RETRO_PANEL = (20, 50, 46, 255)
RETRO_PANEL_DARK = (8, 24, 20, 255)
RETRO_ACCENT = (110, 255, 140, 255)
RETRO_TEXT = (200, 255, 220, 255)

RETRO_FONT = ("Press Start 2P", "Kenney Future", "Arial")


def window_width(capacity: int) -> int:
    row = capacity * (CELL_SIZE + CELL_GAP) + CELL_GAP + 40
    return max(MIN_WINDOW_WIDTH, row)


class QueueView(arcade.View):
    """
    Prévia gráfica da fila: um bloco por peça, frente à esquerda.
    """

    def __init__(self, queue: PieceQueue):
        super().__init__()
        self.queue = queue
        width = window_width(queue.capacity)

        self.txt_title = arcade.Text(
            "Fila de pecas", 20, WINDOW_HEIGHT - 20, RETRO_TEXT, 16,
            anchor_x="left", anchor_y="top", font_name=RETRO_FONT,
        )
        self.txt_count = arcade.Text(
            "", width - 20, WINDOW_HEIGHT - 20, RETRO_TEXT, 14,
            anchor_x="right", anchor_y="top",
        )
        self.txt_status = arcade.Text("", 20, 48, RETRO_TEXT, 11, anchor_x="left", anchor_y="baseline")
        self.txt_controls = arcade.Text(
            "P/Espaço: jogar  |  I/Enter: inserir  |  Q/ESC: sair",
            20, 20, RETRO_TEXT, 11, anchor_x="left", anchor_y="baseline",
        )
        self._labels: list[arcade.Text] = []

    def on_show_view(self):
        self.window.set_size(window_width(self.queue.capacity), WINDOW_HEIGHT)
        arcade.set_background_color(RETRO_BG)

    def on_draw(self):
        self.clear()
        self._draw_slots()

        self.txt_count.text = f"{self.queue.size}/{self.queue.capacity}"
        self.txt_title.draw()
        self.txt_count.draw()
        self.txt_status.draw()
        self.txt_controls.draw()

    def _draw_slots(self):
        bottom = WINDOW_HEIGHT / 2 - CELL_SIZE / 2
        row_w = self.queue.capacity * (CELL_SIZE + CELL_GAP) + CELL_GAP
        arcade.draw_lbwh_rectangle_filled(20, bottom - 30, row_w, CELL_SIZE + 50, RETRO_PANEL)
        arcade.draw_lbwh_rectangle_outline(20, bottom - 30, row_w, CELL_SIZE + 50, RETRO_ACCENT, 2)

        pieces = self.queue.snapshot()
        # recria os rótulos só quando o conteúdo muda
        if [t.text for t in self._labels] != [p.label() for p in pieces]:
            self._labels = [
                arcade.Text(p.label(), 0, bottom - 20, RETRO_TEXT, 10, anchor_x="center", anchor_y="baseline")
                for p in pieces
            ]

        for i in range(self.queue.capacity):
            left = 20 + CELL_GAP + i * (CELL_SIZE + CELL_GAP)
            if i < len(pieces):
                draw_block_8bit(left, bottom, CELL_SIZE, kind_color(pieces[i].kind))
                label = self._labels[i]
                label.x = left + CELL_SIZE / 2
                label.draw()
            else:
                arcade.draw_lbwh_rectangle_filled(left, bottom, CELL_SIZE, CELL_SIZE, RETRO_PANEL_DARK)

    def on_key_press(self, key, modifiers):
        if key in (arcade.key.Q, arcade.key.ESCAPE):
            logger.info("prévia fechada pelo usuário")
            arcade.exit()
            return

        if key in (arcade.key.P, arcade.key.SPACE):
            self.txt_status.text = play_message(self.queue)
        elif key in (arcade.key.I, arcade.key.RETURN, arcade.key.ENTER):
            self.txt_status.text = insert_message(self.queue)


def run_preview(queue: PieceQueue) -> int:
    window = arcade.Window(window_width(queue.capacity), WINDOW_HEIGHT, "Tetris Stack")
    window.show_view(QueueView(queue))
    arcade.run()
    return 0
