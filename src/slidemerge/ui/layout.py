from slidemerge.constants import (
    GRID_COLS, GRID_ROWS, TILE_SIZE, BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT,
)

MIN_TILE_SIZE = 20


def compute_board_geometry(window_width: int, window_height: int, rows: int = GRID_ROWS, cols: int = GRID_COLS):
    """Return (tile_size, start_x, start_y) for a board centred horizontally.

    The board may not exceed the configured fraction of the window in either axis
    and never grows past TILE_SIZE per cell.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h, TILE_SIZE))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_center(x: int, y: int, rows: int, tile_size: float, start_x: float, start_y: float):
    """Screen centre of grid cell (x, y); grid row 0 is drawn at the top."""
    cx = start_x + x * tile_size + tile_size / 2
    cy = start_y + (rows - 1 - y) * tile_size + tile_size / 2
    return cx, cy
