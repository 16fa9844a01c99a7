from __future__ import annotations

from typing import TYPE_CHECKING

from slidemerge.components.scoreboard import Scoreboard
from slidemerge.constants import DARK_TEXT, GAME_OVER_OVERLAY, SCORE_BAR_HEIGHT
from slidemerge.rendering.shapes import draw_centered_text, draw_rect_filled

if TYPE_CHECKING:
    from slidemerge.rendering.context import RenderContext


class HudRenderer:
    """Score text above the board and the game-over panel over it."""

    def render(self, arcade, ctx: RenderContext, scoreboard: Scoreboard | None) -> None:
        if scoreboard is None:
            return
        center_x = ctx.board_left + ctx.board_width / 2
        draw_centered_text(
            arcade,
            f"Score: {scoreboard.score_text}",
            center_x,
            ctx.board_top + SCORE_BAR_HEIGHT / 2,
            DARK_TEXT,
            24,
            bold=True,
        )
        if not scoreboard.game_over_visible:
            return
        draw_rect_filled(
            arcade, ctx.board_left, ctx.board_bottom, ctx.board_width, ctx.board_height, GAME_OVER_OVERLAY
        )
        center_y = ctx.board_bottom + ctx.board_height / 2
        draw_centered_text(arcade, "Game over!", center_x, center_y + 18, DARK_TEXT, 36, bold=True)
        draw_centered_text(arcade, "Press R to play again", center_x, center_y - 24, DARK_TEXT, 16)
