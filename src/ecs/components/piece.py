from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class InvalidMerge(ValueError):
    """Raised when two pieces that cannot stack are merged."""


class PieceKind(Enum):
    """Closed set of item families that can appear on the board."""
    FLOWER = "flower"
    BOX = "box"

    @property
    def max_level(self) -> int:
        return max_level_for(self)


_MAX_LEVELS: Dict[PieceKind, int] = {
    PieceKind.FLOWER: 2,
    PieceKind.BOX: 1,
}


def max_level_for(kind: PieceKind) -> int:
    return _MAX_LEVELS[kind]


@dataclass(frozen=True, slots=True)
class Piece:
    """A single stackable item.

    Pieces are values: merging produces a new Piece and never touches the inputs.
    """
    kind: PieceKind
    level: int = 1

    def __post_init__(self) -> None:
        if self.level < 1 or self.level > self.kind.max_level:
            raise ValueError(
                f"Level {self.level} outside 1..{self.kind.max_level} for {self.kind.value}"
            )

    @property
    def max_level(self) -> int:
        return self.kind.max_level

    def merges_with(self, other: Piece) -> bool:
        # Ceiling is checked on self only; same kind implies same ceiling.
        return self.level < self.kind.max_level and other.kind == self.kind and other.level == self.level

    def merge(self, other: Piece) -> Piece:
        if not self.merges_with(other):
            raise InvalidMerge(f"Cannot merge {self} with {other}")
        return Piece(self.kind, self.level + 1)

    @classmethod
    def flower(cls, level: int = 1) -> Piece:
        return cls(PieceKind.FLOWER, level)

    @classmethod
    def box(cls, level: int = 1) -> Piece:
        return cls(PieceKind.BOX, level)
