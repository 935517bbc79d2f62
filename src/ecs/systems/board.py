from typing import Optional, Tuple

from esper import World
from loguru import logger

from ecs.events.bus import (
    EventBus,
    EVENT_PIECE_GRAB,
    EVENT_PIECE_GRABBED,
    EVENT_PIECE_DROP,
    EVENT_PIECE_DROP_CANCELLED,
    EVENT_PIECE_MOVED,
    EVENT_PIECE_MERGED,
    EVENT_PIECE_DISPLACED,
    EVENT_PIECE_SPAWN,
    EVENT_PIECE_SPAWNED,
    EVENT_BOARD_CHANGED,
)
from ecs.components.board import Board, Movement, create_movement
from ecs.components.piece import Piece
from ecs.factories.pieces import create_piece
from ecs.systems.board_ops import describe_board, get_board


class BoardSystem:
    """Bridges grab/drop gestures to board moves.

    The grabbed cell is transient state between one grab and the next drop;
    every drop issues at most one move_auto call.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.grabbed: Optional[Tuple[int, int]] = None
        self.event_bus.subscribe(EVENT_PIECE_GRAB, self.on_piece_grab)
        self.event_bus.subscribe(EVENT_PIECE_DROP, self.on_piece_drop)
        self.event_bus.subscribe(EVENT_PIECE_DROP_CANCELLED, self.on_drop_cancelled)
        self.event_bus.subscribe(EVENT_PIECE_SPAWN, self.on_piece_spawn)

    @property
    def board(self) -> Board:
        return get_board(self.world)

    def on_piece_grab(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        board = self.board
        # A new gesture always replaces the previous grab, even when it grabs nothing.
        self.grabbed = None
        if not board.in_bounds(x, y) or board.is_cell_empty(x, y):
            return
        self.grabbed = (x, y)
        self.event_bus.emit(EVENT_PIECE_GRABBED, x=x, y=y, piece=board.get_cell(x, y))

    def on_piece_drop(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or self.grabbed is None:
            return
        board = self.board
        if not board.in_bounds(x, y):
            self.event_bus.emit(EVENT_PIECE_DROP_CANCELLED, x=x, y=y, reason='outside_board')
            return
        src_x, src_y = self.grabbed
        self.grabbed = None
        piece = board.get_cell(src_x, src_y)
        if piece is None:
            return
        self.move_piece(create_movement(src_x, src_y, x, y, piece))

    def on_drop_cancelled(self, sender, **kwargs):
        if self.grabbed is not None:
            logger.debug("Drop cancelled ({}) for piece at {}", kwargs.get('reason'), self.grabbed)
        self.grabbed = None

    def move_piece(self, movement: Movement) -> Optional[Movement]:
        board = self.board
        target = board.get_cell(movement.to_x, movement.to_y)
        same_cell = (movement.from_x, movement.from_y) == (movement.to_x, movement.to_y)
        response = board.move_auto(movement)
        positions = [(movement.from_x, movement.from_y), (movement.to_x, movement.to_y)]
        self.event_bus.emit(EVENT_PIECE_MOVED, movement=movement)
        if response is not None:
            positions.append((response.to_x, response.to_y))
            logger.debug(
                "{} pushed {} from ({}, {}) to ({}, {})",
                movement.piece, response.piece, response.from_x, response.from_y, response.to_x, response.to_y,
            )
            self.event_bus.emit(EVENT_PIECE_DISPLACED, movement=response)
        elif target is not None and not same_cell:
            merged = board.get_cell(movement.to_x, movement.to_y)
            logger.debug("Merged into {} at ({}, {})", merged, movement.to_x, movement.to_y)
            self.event_bus.emit(EVENT_PIECE_MERGED, x=movement.to_x, y=movement.to_y, piece=merged)
        logger.opt(lazy=True).debug("Board after move:\n{}", lambda: describe_board(board))
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='move', positions=positions)
        return response

    def on_piece_spawn(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        kind = kwargs.get('kind')
        if x is None or y is None or kind is None:
            return
        self.spawn_piece(x, y, create_piece(kind, kwargs.get('level', 1)))

    def spawn_piece(self, x: int, y: int, piece: Piece) -> bool:
        board = self.board
        if not board.is_cell_empty(x, y):
            logger.warning("Cannot spawn {} at ({}, {}): cell occupied", piece, x, y)
            return False
        board.set_cell(x, y, piece)
        logger.debug("Spawned {} at ({}, {})", piece, x, y)
        self.event_bus.emit(EVENT_PIECE_SPAWNED, x=x, y=y, piece=piece)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='spawn', positions=[(x, y)])
        return True
