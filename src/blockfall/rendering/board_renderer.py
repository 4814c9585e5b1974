from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

from blockfall.shapes import color_for
from blockfall.ui.layout import cell_origin

if TYPE_CHECKING:
    from blockfall.rendering.context import RenderContext

CellLayout = Dict[Tuple[int, int], Tuple[float, float, int, Tuple[int, int, int]]]

BACKGROUND_COLOR = (0, 0, 0)
FRAME_COLOR = (60, 60, 90)
OUTLINE_COLOR = (0, 0, 0)


class BoardRenderer:
    """Draws locked cells and the falling piece; rows above the board are skipped."""

    def __init__(self, border_width: int = 2):
        self._border_width = border_width
        self._layout: CellLayout = {}

    def cell_layout(self) -> CellLayout:
        """(row, col) -> (left, bottom, size, color) from the most recent frame."""
        return dict(self._layout)

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        board = ctx.board
        size = ctx.cell_size
        layout: CellLayout = {}

        for row in range(board.rows):
            for col in range(board.cols):
                color = color_for(board.cells[row][col])
                if color is None:
                    continue
                x, y = cell_origin(row, col, board.rows, size, ctx.board_left, ctx.board_bottom)
                layout[(row, col)] = (x, y, size, color)

        piece = ctx.current
        if piece is not None:
            for row, col, tag in piece.cells():
                if row < 0 or row >= board.rows or col < 0 or col >= board.cols:
                    continue
                color = color_for(tag)
                if color is None:
                    continue
                x, y = cell_origin(row, col, board.rows, size, ctx.board_left, ctx.board_bottom)
                layout[(row, col)] = (x, y, size, color)

        self._layout = layout
        if headless:
            return

        arcade.draw_lbwh_rectangle_filled(
            ctx.board_left, ctx.board_bottom, ctx.board_width, ctx.board_height, BACKGROUND_COLOR
        )
        for x, y, cell, color in layout.values():
            arcade.draw_lbwh_rectangle_filled(x, y, cell, cell, color)
            arcade.draw_lbwh_rectangle_outline(x, y, cell, cell, OUTLINE_COLOR, border_width=self._border_width)
        arcade.draw_lbwh_rectangle_outline(
            ctx.board_left, ctx.board_bottom, ctx.board_width, ctx.board_height, FRAME_COLOR, border_width=2
        )
