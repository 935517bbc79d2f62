from __future__ import annotations

from typing import Callable, Dict, List

from ecs.components.piece import Piece, PieceKind

_PIECE_BUILDERS: Dict[str, Callable[[int], Piece]] = {
    PieceKind.FLOWER.value: Piece.flower,
    PieceKind.BOX.value: Piece.box,
}


def available_piece_kinds() -> List[str]:
    return list(_PIECE_BUILDERS.keys())


def create_piece(kind_name: str, level: int = 1) -> Piece:
    try:
        builder = _PIECE_BUILDERS[kind_name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown piece kind '{kind_name}'") from exc
    return builder(level)
