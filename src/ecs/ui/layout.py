import math
from typing import Optional, Tuple

from ecs.constants import BOTTOM_MARGIN, BOARD_MAX_WIDTH_PCT, BOARD_MAX_HEIGHT_PCT, MIN_TILE_SIZE

Geometry = Tuple[int, float, float]


def compute_board_geometry(window_width: int, window_height: int, cols: int, rows: int) -> Geometry:
    """Return (tile_size, start_x, start_y) for a cols x rows board.

    Shared by RenderSystem and InputSystem so drawn cells and hit testing agree.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    tile_by_w = max_board_w / cols
    tile_by_h = max_board_h / rows
    tile_size = int(min(tile_by_w, tile_by_h))
    if tile_size < MIN_TILE_SIZE:
        tile_size = MIN_TILE_SIZE
    total_width = cols * tile_size
    start_x = (window_width - total_width) / 2
    start_y = BOTTOM_MARGIN
    return tile_size, start_x, start_y


def cell_from_point(px: float, py: float, geometry: Geometry, cols: int, rows: int) -> Optional[Tuple[int, int]]:
    tile_size, start_x, start_y = geometry
    x = math.floor((px - start_x) / tile_size)
    y = math.floor((py - start_y) / tile_size)
    if 0 <= x < cols and 0 <= y < rows:
        return x, y
    return None


def point_from_cell(x: int, y: int, geometry: Geometry) -> Tuple[float, float]:
    tile_size, start_x, start_y = geometry
    return start_x + x * tile_size + tile_size / 2, start_y + y * tile_size + tile_size / 2
