from typing import Any, Dict, Optional, Tuple

from esper import World

from ecs.components.piece import Piece, PieceKind
from ecs.events.bus import (
    EventBus,
    EVENT_MOUSE_DRAG,
    EVENT_PIECE_GRABBED,
    EVENT_PIECE_DROP_CANCELLED,
    EVENT_PIECE_MOVED,
)
from ecs.constants import (
    GRID_LINE_COLOR, GRID_LINE_WIDTH,
    PIECE_COLORS, PIECE_LABEL_COLOR, PIECE_SCALE,
)
from ecs.systems.board_ops import get_board
from ecs.ui.layout import compute_board_geometry, point_from_cell


class RenderSystem:
    def __init__(self, world: World, event_bus: EventBus, window):
        self.world = world
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_PIECE_GRABBED, self.on_piece_grabbed)
        self.event_bus.subscribe(EVENT_MOUSE_DRAG, self.on_mouse_drag)
        self.event_bus.subscribe(EVENT_PIECE_DROP_CANCELLED, self.on_drag_end)
        self.event_bus.subscribe(EVENT_PIECE_MOVED, self.on_drag_end)
        self.dragged: Optional[Tuple[int, int]] = None
        self.drag_point: Optional[Tuple[float, float]] = None
        self._last_piece_layout: Dict[Tuple[int, int], Dict[str, Any]] = {}

    def on_piece_grabbed(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        self.dragged = (x, y)
        self.drag_point = None

    def on_mouse_drag(self, sender, **kwargs):
        if self.dragged is None:
            return
        self.drag_point = (kwargs.get('x', 0.0), kwargs.get('y', 0.0))

    def on_drag_end(self, sender, **kwargs):
        self.dragged = None
        self.drag_point = None

    def build_piece_layout(self) -> Dict[Tuple[int, int], Dict[str, Any]]:
        """Screen placement for every occupied cell, keyed by cell."""
        board = get_board(self.world)
        geometry = compute_board_geometry(self.window.width, self.window.height, board.width, board.height)
        tile_size = geometry[0]
        layout: Dict[Tuple[int, int], Dict[str, Any]] = {}
        for x, y, piece in board.iter_cells():
            if piece is None:
                continue
            cx, cy = point_from_cell(x, y, geometry)
            if (x, y) == self.dragged and self.drag_point is not None:
                cx, cy = self.drag_point
            layout[(x, y)] = {
                'piece': piece,
                'center_x': cx,
                'center_y': cy,
                'size': tile_size * PIECE_SCALE,
            }
        self._last_piece_layout = layout
        return layout

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        layout = self.build_piece_layout()
        if headless:
            return
        board = get_board(self.world)
        tile_size, start_x, start_y = compute_board_geometry(
            self.window.width, self.window.height, board.width, board.height
        )
        right = start_x + tile_size * board.width
        top = start_y + tile_size * board.height
        for i in range(board.width + 1):
            lx = start_x + tile_size * i
            arcade.draw_line(lx, start_y, lx, top, GRID_LINE_COLOR, GRID_LINE_WIDTH)
        for i in range(board.height + 1):
            ly = start_y + tile_size * i
            arcade.draw_line(start_x, ly, right, ly, GRID_LINE_COLOR, GRID_LINE_WIDTH)
        # Dragged piece last so it stays on top.
        ordered = sorted(layout.items(), key=lambda item: item[0] == self.dragged)
        for _, entry in ordered:
            self._draw_piece(arcade, entry)

    def _draw_piece(self, arcade, entry: Dict[str, Any]):
        piece: Piece = entry['piece']
        cx = entry['center_x']
        cy = entry['center_y']
        half = entry['size'] / 2
        fill = PIECE_COLORS.get(piece.kind.value, (200, 200, 200))
        if piece.kind == PieceKind.FLOWER:
            arcade.draw_circle_filled(cx, cy, half, fill)
        else:
            arcade.draw_lrbt_rectangle_filled(cx - half, cx + half, cy - half, cy + half, fill)
        arcade.draw_text(
            str(piece.level), cx, cy, PIECE_LABEL_COLOR, int(half * 0.6),
            anchor_x='center', anchor_y='center',
        )
