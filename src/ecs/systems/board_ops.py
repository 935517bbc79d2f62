from __future__ import annotations

from typing import Iterable, Optional, Tuple

from esper import World

from ecs.components.board import Board
from ecs.factories.pieces import create_piece

LayoutEntry = Tuple[int, int, str, int]
SnapshotCell = Optional[Tuple[str, int]]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board not found")


def populate_board(board: Board, layout: Iterable[LayoutEntry]) -> None:
    """Place (x, y, kind, level) entries, overwriting whatever is there."""
    for x, y, kind_name, level in layout:
        board.set_cell(x, y, create_piece(kind_name, level))


def board_snapshot(board: Board) -> Tuple[Tuple[SnapshotCell, ...], ...]:
    """Rows of (kind, level) or None, indexed [y][x]."""
    rows = []
    for y in range(board.height):
        row = []
        for x in range(board.width):
            piece = board.get_cell(x, y)
            row.append(None if piece is None else (piece.kind.value, piece.level))
        rows.append(tuple(row))
    return tuple(rows)


def describe_board(board: Board) -> str:
    # Highest row first so the text matches the on-screen orientation.
    lines = []
    for row in reversed(board_snapshot(board)):
        tokens = ["." if cell is None else f"{cell[0][0].upper()}{cell[1]}" for cell in row]
        lines.append(" ".join(f"{t:>2}" for t in tokens))
    return "\n".join(lines)
