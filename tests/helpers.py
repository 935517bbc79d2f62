from __future__ import annotations

from typing import Sequence

from ecs.components.board import Board, Cell


def board_from_rows(rows: Sequence[Sequence[Cell]]) -> Board:
    """Build a board from rows listed in row-major order (rows[0] is y == 0)."""
    height = len(rows)
    width = len(rows[0])
    board = Board(width=width, height=height)
    flat: list[Cell] = []
    for row in rows:
        assert len(row) == width
        flat.extend(row)
    board.set_cells(flat)
    return board
