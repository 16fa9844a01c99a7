from slidemerge.constants import BOTTOM_MARGIN, TILE_SIZE
from slidemerge.ui.layout import MIN_TILE_SIZE, cell_center, compute_board_geometry


def test_board_is_centred_horizontally():
    tile_size, start_x, start_y = compute_board_geometry(1000, 800, 4, 4)
    assert start_x * 2 + tile_size * 4 == 1000
    assert start_y == BOTTOM_MARGIN


def test_tile_size_capped_and_floored():
    tile_size, _, _ = compute_board_geometry(4000, 4000, 4, 4)
    assert tile_size == TILE_SIZE
    tiny, _, _ = compute_board_geometry(50, 50, 4, 4)
    assert tiny == MIN_TILE_SIZE


def test_cell_center_flips_rows():
    top = cell_center(0, 0, 4, 10, 0, 0)
    bottom = cell_center(0, 3, 4, 10, 0, 0)
    assert top == (5, 35)
    assert bottom == (5, 5)
