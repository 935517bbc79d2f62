from typing import Iterable

from esper import World
from ecs.components.board import Board
from ecs.constants import GRID_COLS, GRID_ROWS, INITIAL_LAYOUT
from ecs.systems.board_ops import LayoutEntry, populate_board


def create_world(
    *,
    width: int = GRID_COLS,
    height: int = GRID_ROWS,
    layout: Iterable[LayoutEntry] | None = None,
) -> World:
    world = World()
    # Single board entity; systems look it up through board_ops.get_board.
    board = Board(width=width, height=height)
    populate_board(board, INITIAL_LAYOUT if layout is None else layout)
    world.create_entity(board)
    return world
