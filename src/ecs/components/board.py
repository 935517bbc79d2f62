from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from ecs.components.piece import Piece

Cell = Optional[Piece]
Position = Tuple[int, int]


class OutOfBounds(IndexError):
    """Raised when a cell coordinate falls outside the board."""


class BoardFullError(RuntimeError):
    """Raised when a displaced piece has nowhere to go."""


@dataclass(frozen=True, slots=True)
class Movement:
    from_x: int
    from_y: int
    to_x: int
    to_y: int
    piece: Piece


def create_movement(from_x: int, from_y: int, to_x: int, to_y: int, piece: Piece) -> Movement:
    return Movement(from_x, from_y, to_x, to_y, piece)


@dataclass(slots=True)
class Board:
    """Fixed size grid of optional pieces stored row-major (index = y * width + x).

    The board owns its cells; callers read pieces by value and write through
    set_cell / clear_cell / move.
    """
    width: int
    height: int
    _cells: List[Cell] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")
        self._cells = [None] * (self.width * self.height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfBounds(f"Cell ({x}, {y}) outside {self.width}x{self.height} board")
        return y * self.width + x

    def get_cell(self, x: int, y: int) -> Cell:
        return self._cells[self._idx(x, y)]

    def set_cell(self, x: int, y: int, piece: Piece) -> None:
        self._cells[self._idx(x, y)] = piece

    def clear_cell(self, x: int, y: int) -> None:
        self._cells[self._idx(x, y)] = None

    def is_cell_empty(self, x: int, y: int) -> bool:
        return self.get_cell(x, y) is None

    def set_cells(self, pieces: Sequence[Cell]) -> None:
        """Load the leading cells in row-major order; extra pieces are ignored."""
        for i in range(min(self.width * self.height, len(pieces))):
            self._cells[i] = pieces[i]

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self._cells[y * self.width + x]

    def move(self, movement: Movement) -> Optional[Movement]:
        """Relocate movement.piece and resolve whatever sits on the destination.

        Returns None when the move is fully absorbed (empty destination or merge).
        Otherwise the destination occupant is displaced and the returned Movement
        says where it should go; the displaced piece is not placed here.
        """
        from_idx = self._idx(movement.from_x, movement.from_y)
        to_idx = self._idx(movement.to_x, movement.to_y)
        self._cells[from_idx] = None
        target = self._cells[to_idx]
        if target is None:
            self._cells[to_idx] = movement.piece
            return None
        if movement.piece.merges_with(target):
            self._cells[to_idx] = movement.piece.merge(target)
            return None
        self._cells[to_idx] = movement.piece
        found_x, found_y = self.find_empty_cell_near(movement.to_x, movement.to_y)
        return create_movement(movement.to_x, movement.to_y, found_x, found_y, target)

    def move_auto(self, movement: Movement) -> Optional[Movement]:
        response = self.move(movement)
        if response is not None:
            self.set_cell(response.to_x, response.to_y, response.piece)
        return response

    def find_empty_cell_near(self, x: int, y: int) -> Position:
        """Expanding clamped-ring search for the nearest empty cell around (x, y).

        Each ring scans its top and bottom rows left to right first, then its
        left and right columns bottom to top; the first empty cell wins.
        """
        self._idx(x, y)
        for shift in range(1, max(self.width, self.height)):
            left = max(x - shift, 0)
            right = min(x + shift, self.width - 1)
            bottom = max(y - shift, 0)
            top = min(y + shift, self.height - 1)
            for i in range(left, right + 1):
                if self.is_cell_empty(i, top):
                    return i, top
                if self.is_cell_empty(i, bottom):
                    return i, bottom
            for i in range(bottom, top + 1):
                if self.is_cell_empty(left, i):
                    return left, i
                if self.is_cell_empty(right, i):
                    return right, i
        raise BoardFullError(f"No empty cell around ({x}, {y}) on {self.width}x{self.height} board")
