GRID_ROWS = 4
GRID_COLS = 4
LOWEST_TILE_VALUE = 2
MAX_TILE_VALUE = 2048
# Number of tiles placed when a game leaves the loaded state.
STARTING_TILES = 2

TILE_SIZE = 96
BOTTOM_MARGIN = 20
# Gap between neighbouring tiles, as a fraction of the tile size.
TILE_GAP_PCT = 0.1

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.75
BOARD_MAX_HEIGHT_PCT = 0.80  # leaves room above the board for the score bar
# Height reserved above the board for score text.
SCORE_BAR_HEIGHT = 56

BOARD_BACKGROUND = (187, 173, 160)
EMPTY_CELL_COLOR = (205, 193, 180)
DARK_TEXT = (119, 110, 101)
LIGHT_TEXT = (249, 246, 242)

# Tile background per power (value = lowest * 2**power). Powers past the end reuse the last color.
TILE_COLORS = [
    (238, 228, 218),  # 2
    (237, 224, 200),  # 4
    (242, 177, 121),  # 8
    (245, 149, 99),   # 16
    (246, 124, 95),   # 32
    (246, 94, 59),    # 64
    (237, 207, 114),  # 128
    (237, 204, 97),   # 256
    (237, 200, 80),   # 512
    (237, 197, 63),   # 1024
    (237, 194, 46),   # 2048
    (60, 58, 50),     # beyond
]

GAME_OVER_OVERLAY = (238, 228, 218, 186)
