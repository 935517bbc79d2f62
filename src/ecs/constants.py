GRID_COLS = 5
GRID_ROWS = 4
TILE_SIZE = 96
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.85
BOARD_MAX_HEIGHT_PCT = 0.90  # excluding bottom margin
MIN_TILE_SIZE = 20

GRID_LINE_COLOR = (90, 90, 110)
GRID_LINE_WIDTH = 2

# Piece fill per kind name; level is drawn as a label on top.
PIECE_COLORS = {
    "flower": (200, 90, 160),
    "box": (170, 120, 60),
}
PIECE_LABEL_COLOR = (245, 245, 245)
# Fraction of a tile covered by a drawn piece.
PIECE_SCALE = 0.9

# Starting pieces as (x, y, kind, level).
INITIAL_LAYOUT = (
    (0, 0, "flower", 1),
    (1, 0, "flower", 1),
    (3, 0, "box", 1),
    (0, 1, "box", 1),
    (2, 1, "flower", 1),
    (4, 2, "flower", 2),
    (1, 3, "box", 1),
)
