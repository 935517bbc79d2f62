import pytest

from ecs.components.board import Board, BoardFullError, create_movement
from ecs.components.piece import Piece, PieceKind
from tests.helpers import board_from_rows


def test_move_to_empty_cell():
    board = Board(3, 1)
    box = Piece.box()
    board.set_cell(0, 0, box)
    response = board.move_auto(create_movement(0, 0, 2, 0, box))
    assert response is None
    assert board.is_cell_empty(0, 0)
    assert board.get_cell(2, 0) is box


def test_move_onto_own_cell_is_noop():
    board = Board(2, 1)
    box = Piece.box()
    board.set_cell(0, 0, box)
    assert board.move(create_movement(0, 0, 0, 0, box)) is None
    assert board.get_cell(0, 0) is box


def test_minimum_size_swap():
    board = Board(2, 1)
    box = Piece.box()
    flower = Piece.flower()
    board.set_cell(0, 0, box)
    board.set_cell(1, 0, flower)
    response = board.move_auto(create_movement(0, 0, 1, 0, box))
    assert response is not None
    assert (response.from_x, response.from_y) == (1, 0)
    assert (response.to_x, response.to_y) == (0, 0)
    assert response.piece is flower
    assert board.get_cell(0, 0) is flower
    assert board.get_cell(1, 0) is box


def test_plain_move_leaves_displaced_piece_in_transit():
    board = Board(2, 1)
    box = Piece.box()
    flower = Piece.flower()
    board.set_cell(0, 0, box)
    board.set_cell(1, 0, flower)
    response = board.move(create_movement(0, 0, 1, 0, box))
    assert response is not None and response.piece is flower
    # Not committed until the caller places it
    assert board.is_cell_empty(0, 0)
    assert board.get_cell(1, 0) is box


def test_merge_success():
    board = Board(2, 1)
    flower1 = Piece.flower()
    flower2 = Piece.flower()
    board.set_cell(0, 0, flower1)
    board.set_cell(1, 0, flower2)
    response = board.move_auto(create_movement(0, 0, 1, 0, flower1))
    assert response is None
    assert board.is_cell_empty(0, 0)
    merged = board.get_cell(1, 0)
    assert merged.level == 2
    assert merged.kind is PieceKind.FLOWER
    assert merged is not flower1 and merged is not flower2


def test_max_level_pieces_displace_instead_of_merging():
    board = Board(2, 1)
    mover = Piece.flower(2)
    resident = Piece.flower(2)
    board.set_cell(0, 0, mover)
    board.set_cell(1, 0, resident)
    response = board.move_auto(create_movement(0, 0, 1, 0, mover))
    assert response is not None and response.piece is resident
    assert board.get_cell(0, 0) is resident
    assert board.get_cell(1, 0) is mover


def test_push_to_empty_space_nearby():
    flower = Piece.flower()
    box = Piece.box()
    board = board_from_rows([
        [Piece.flower(), None],
        [box, flower],
        [None, None],
    ])
    assert board.get_cell(0, 1) is box
    assert board.get_cell(1, 1) is flower

    response = board.move_auto(create_movement(1, 1, 0, 1, flower))

    assert response == create_movement(0, 1, 0, 2, box)
    assert response.piece is box
    assert board.get_cell(1, 1) is None
    assert board.get_cell(0, 1) is flower
    assert board.get_cell(0, 2) is box


def test_push_to_empty_space_faraway():
    flower = Piece.flower()
    box = Piece.box()
    board = board_from_rows([
        [None, Piece.flower(), Piece.flower(), flower],
        [None, Piece.flower(), Piece.flower(), Piece.flower()],
        [None, Piece.flower(), Piece.flower(), Piece.flower()],
        [box, None, None, None],
    ])
    assert board.get_cell(0, 3) is box
    assert board.get_cell(3, 0) is flower

    response = board.move_auto(create_movement(0, 3, 3, 0, box))

    assert response == create_movement(3, 0, 0, 3, flower)
    assert board.get_cell(0, 3) is flower
    assert board.get_cell(3, 0) is box


def test_ring_prefers_top_row_over_bottom_row():
    # Both (1, 2) and (1, 0) are one ring away from (1, 1)
    board = board_from_rows([
        [Piece.box(), None, Piece.box()],
        [Piece.box(), Piece.box(), Piece.box()],
        [Piece.box(), None, Piece.box()],
    ])
    assert board.find_empty_cell_near(1, 1) == (1, 2)


def test_ring_scans_rows_left_to_right():
    board = board_from_rows([
        [None, Piece.box(), None],
        [Piece.box(), Piece.box(), Piece.box()],
        [Piece.box(), Piece.box(), Piece.box()],
    ])
    assert board.find_empty_cell_near(1, 1) == (0, 0)


def test_ring_rows_before_columns():
    # (0, 1) is on the left column, (2, 0) on the bottom row of the same ring
    board = board_from_rows([
        [Piece.box(), Piece.box(), None],
        [None, Piece.box(), Piece.box()],
        [Piece.box(), Piece.box(), Piece.box()],
    ])
    assert board.find_empty_cell_near(1, 1) == (2, 0)


def test_ring_columns_left_before_right():
    board = board_from_rows([
        [Piece.box(), Piece.box(), Piece.box()],
        [None, Piece.box(), None],
        [Piece.box(), Piece.box(), Piece.box()],
    ])
    assert board.find_empty_cell_near(1, 1) == (0, 1)


def test_inner_ring_wins_over_outer_ring():
    box = Piece.box
    board = board_from_rows([
        [None, box(), box(), box(), box()],
        [box(), box(), box(), box(), box()],
        [box(), box(), box(), None, box()],
        [box(), box(), box(), box(), box()],
        [box(), box(), box(), box(), box()],
    ])
    assert board.find_empty_cell_near(2, 2) == (3, 2)


def test_ring_is_clamped_at_edges():
    box = Piece.box
    board = board_from_rows([
        [box(), box(), box(), box()],
        [box(), box(), box(), None],
    ])
    assert board.find_empty_cell_near(0, 0) == (3, 1)


def test_full_board_raises():
    board = board_from_rows([
        [Piece.box(), Piece.box()],
        [Piece.box(), Piece.box()],
    ])
    with pytest.raises(BoardFullError):
        board.find_empty_cell_near(0, 0)


def test_single_cell_board_has_no_ring():
    board = Board(1, 1)
    board.set_cell(0, 0, Piece.box())
    with pytest.raises(BoardFullError):
        board.find_empty_cell_near(0, 0)
