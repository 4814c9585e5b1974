from blockfall.components.board import Board
from blockfall.components.piece import Piece
from blockfall.shapes import shape_by_name
from blockfall.systems.board_ops import clear_lines, collides, drop_distance, merge, rotate, rotate_shape

from tests.helpers import fill_row


def _piece(name: str, x: int = 0, y: int = 0) -> Piece:
    return Piece(shape=[list(row) for row in shape_by_name(name)], x=x, y=y)


def test_piece_inside_empty_board_does_not_collide():
    board = Board(rows=20, cols=10)
    assert not collides(_piece("T", x=3, y=5), board)


def test_collides_with_side_walls():
    board = Board(rows=20, cols=10)
    piece = _piece("I", x=0, y=0)
    assert collides(piece, board, -1, 0)
    piece.x = 6
    assert not collides(piece, board)
    assert collides(piece, board, 1, 0)


def test_collides_with_floor():
    board = Board(rows=20, cols=10)
    piece = _piece("O", x=4, y=18)
    assert not collides(piece, board)
    assert collides(piece, board, 0, 1)


def test_collides_with_occupied_cell():
    board = Board(rows=20, cols=10)
    board.cells[10][5] = 3
    piece = _piece("O", x=4, y=8)
    assert not collides(piece, board)
    assert collides(piece, board, 0, 1)


def test_cells_above_board_only_check_side_walls():
    board = Board(rows=20, cols=10)
    fill_row(board, 0)
    piece = _piece("O", x=4, y=-2)
    assert not collides(piece, board)
    piece.x = -1
    assert collides(piece, board)


def test_empty_sub_cells_are_ignored():
    board = Board(rows=20, cols=10)
    # T's top row is 0,6,0; blocks under its empty corners do not matter.
    board.cells[0][0] = 1
    board.cells[0][2] = 1
    piece = _piece("T", x=0, y=0)
    assert not collides(piece, board)
    board.cells[0][1] = 1
    assert collides(piece, board)


def test_merge_writes_tags_and_drops_hidden_rows():
    board = Board(rows=20, cols=10)
    piece = _piece("S", x=2, y=-1)
    result = merge(piece, board)
    assert result is board
    # Only the bottom row (0,5,5)/(5,5,0) -> row 0 holds 5,5,0 at cols 2..4.
    assert board.cells[0][2:5] == [5, 5, 0]
    assert board.occupied_count() == 2


def test_rotate_shape_is_clockwise():
    assert rotate_shape([[2, 0, 0], [2, 2, 2]]) == [[2, 2], [2, 0], [2, 0]]
    assert rotate_shape([[1, 1, 1, 1]]) == [[1], [1], [1], [1]]


def test_four_rotations_restore_shape():
    shape = [list(row) for row in shape_by_name("L")]
    rotated = shape
    for _ in range(4):
        rotated = rotate_shape(rotated)
    assert rotated == shape


def test_rotate_keeps_anchor_when_free():
    board = Board(rows=20, cols=10)
    piece = _piece("I", x=3, y=5)
    rotated = rotate(piece, board)
    assert rotated is not piece
    assert rotated.shape == [[1], [1], [1], [1]]
    assert (rotated.x, rotated.y) == (3, 5)


def test_rotate_rejected_when_blocked():
    board = Board(rows=20, cols=10)
    piece = _piece("I", x=3, y=17)
    # Vertical I would reach row 20.
    assert rotate(piece, board) is piece
    assert piece.shape == [[1, 1, 1, 1]]


def test_rotate_rejected_against_wall_without_kick():
    board = Board(rows=20, cols=10)
    vertical = Piece(shape=[[1], [1], [1], [1]], x=8, y=5)
    assert rotate(vertical, board) is vertical


def test_drop_distance_on_empty_board():
    board = Board(rows=20, cols=10)
    assert drop_distance(_piece("O", x=4, y=0), board) == 18
    assert drop_distance(_piece("I", x=3, y=0), board) == 19


def test_clear_lines_removes_full_rows_and_keeps_order():
    board = Board(rows=20, cols=10)
    fill_row(board, 19)
    board.cells[18][0] = 2
    fill_row(board, 17)
    board.cells[16][9] = 3

    _, count = clear_lines(board)

    assert count == 2
    assert len(board.cells) == 20
    assert all(len(row) == 10 for row in board.cells)
    assert board.cells[19][0] == 2
    assert board.cells[18][9] == 3
    assert board.occupied_count() == 2
    assert board.cells[0] == [0] * 10


def test_clear_lines_catches_adjacent_full_rows():
    board = Board(rows=20, cols=10)
    for row in (16, 17, 18, 19):
        fill_row(board, row, tag=row % 7 + 1)
    board.cells[15][4] = 6

    _, count = clear_lines(board)

    assert count == 4
    assert board.cells[19][4] == 6
    assert board.occupied_count() == 1


def test_clear_lines_without_full_rows():
    board = Board(rows=20, cols=10)
    fill_row(board, 19, skip=[3])
    _, count = clear_lines(board)
    assert count == 0
    assert board.occupied_count() == 9
