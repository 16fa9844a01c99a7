from __future__ import annotations

import math
from typing import TYPE_CHECKING

from slidemerge.constants import (
    BOARD_BACKGROUND, DARK_TEXT, EMPTY_CELL_COLOR, LIGHT_TEXT, TILE_COLORS, TILE_GAP_PCT,
)
from slidemerge.rendering.shapes import draw_centered_text, draw_rect_filled

if TYPE_CHECKING:
    from slidemerge.rendering.context import RenderContext
    from slidemerge.systems.render import RenderSystem


def tile_color(power: int):
    return TILE_COLORS[min(max(power, 0), len(TILE_COLORS) - 1)]


def ease_in_out(p: float) -> float:
    if p < 0.5:
        return 2 * p * p
    return -2 * p * p + 4 * p - 1


class BoardRenderer:
    def __init__(self, render_system: RenderSystem):
        self._rs = render_system

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        rs = self._rs
        gap = ctx.tile_size * TILE_GAP_PCT
        cell_size = ctx.tile_size - gap
        rs._last_tile_layout = {}

        if not headless:
            draw_rect_filled(
                arcade, ctx.board_left, ctx.board_bottom, ctx.board_width, ctx.board_height, BOARD_BACKGROUND
            )
            for cx, cy in ctx.cell_centers.values():
                draw_rect_filled(
                    arcade, cx - cell_size / 2, cy - cell_size / 2, cell_size, cell_size, EMPTY_CELL_COLOR
                )

        for (x, y), tile in ctx.snapshot.tiles():
            draw_x, draw_y = ctx.cell_centers[(x, y)]
            scale = 1.0

            slide = ctx.slide_by_dst.get((x, y))
            if slide is not None:
                from_x, from_y = ctx.cell_centers[slide.src]
                p = ease_in_out(slide.linear) if rs.use_easing else slide.linear
                draw_x = from_x + (draw_x - from_x) * p
                draw_y = from_y + (draw_y - from_y) * p

            spawn = ctx.spawn_by_pos.get((x, y))
            if spawn is not None:
                scale = max(spawn.linear, 0.05)
            merge = ctx.merge_by_pos.get((x, y))
            if merge is not None:
                scale = 1.0 + 0.2 * math.sin(math.pi * merge.linear)

            size = cell_size * scale
            rs._last_tile_layout[(x, y)] = {
                "value": tile.value,
                "center": (draw_x, draw_y),
                "size": size,
            }
            if headless:
                continue

            draw_rect_filled(arcade, draw_x - size / 2, draw_y - size / 2, size, size, tile_color(tile.power))
            label = str(tile.value)
            font_size = max(8.0, size * (0.4 if len(label) <= 2 else 0.32 if len(label) == 3 else 0.25))
            text_color = DARK_TEXT if tile.power <= 1 else LIGHT_TEXT
            draw_centered_text(arcade, label, draw_x, draw_y, text_color, font_size, bold=True)
