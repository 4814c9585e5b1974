from __future__ import annotations

from typing import List, Sequence, Tuple

from blockfall.components.board import Board
from blockfall.components.piece import Piece

Position = Tuple[int, int]


def collides(piece: Piece, board: Board, dx: int = 0, dy: int = 0) -> bool:
    """Return True if the piece, shifted by (dx, dy), leaves the board or overlaps a block.

    Sub-cells above the top edge only test the side walls so pieces can rotate
    and spawn partially above the board.
    """
    for row, col, _ in piece.cells(dx, dy):
        if col < 0 or col >= board.cols or row >= board.rows:
            return True
        if row >= 0 and board.cells[row][col]:
            return True
    return False


def merge(piece: Piece, board: Board) -> Board:
    """Write the piece's tags into the board; sub-cells above row 0 are dropped."""
    for row, col, tag in piece.cells():
        if row >= 0:
            board.cells[row][col] = tag
    return board


def locked_positions(piece: Piece) -> List[Position]:
    return [(row, col) for row, col, _ in piece.cells() if row >= 0]


def rotate_shape(shape: Sequence[Sequence[int]]) -> List[List[int]]:
    """Rotate 90 degrees clockwise: transpose, then reverse each row."""
    return [list(reversed(column)) for column in zip(*shape)]


def rotate(piece: Piece, board: Board) -> Piece:
    """Return a clockwise-rotated copy of the piece, or the original if that collides.

    No wall kicks are attempted.
    """
    rotated = Piece(shape=rotate_shape(piece.shape), x=piece.x, y=piece.y)
    if collides(rotated, board):
        return piece
    return rotated


def drop_distance(piece: Piece, board: Board) -> int:
    distance = 0
    while not collides(piece, board, 0, distance + 1):
        distance += 1
    return distance


def clear_lines(board: Board) -> Tuple[Board, int]:
    """Remove every full row, pulling the rows above down; returns (board, count).

    The scan goes bottom to top and re-checks the same index after a removal,
    since the row above has shifted into it.
    """
    cleared = 0
    row = board.rows - 1
    while row >= 0:
        if board.is_row_full(row):
            del board.cells[row]
            board.cells.insert(0, [0] * board.cols)
            cleared += 1
        else:
            row -= 1
    return board, cleared
