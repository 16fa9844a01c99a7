"""Small wrappers over arcade draw calls that were renamed between releases."""


def draw_rect_filled(arcade, left: float, bottom: float, width: float, height: float, color) -> None:
    if hasattr(arcade, "draw_lbwh_rectangle_filled"):
        arcade.draw_lbwh_rectangle_filled(left, bottom, width, height, color)
    else:
        arcade.draw_xywh_rectangle_filled(left, bottom, width, height, color)


def draw_centered_text(arcade, text: str, x: float, y: float, color, font_size: float, *, bold: bool = False) -> None:
    arcade.draw_text(
        text,
        x,
        y,
        color,
        font_size,
        anchor_x="center",
        anchor_y="center",
        bold=bold,
    )
