from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from blockfall.constants import PANEL_LINE_HEIGHT, PREVIEW_BOXES, SIDE_GAP
from blockfall.shapes import color_for

if TYPE_CHECKING:
    from blockfall.rendering.context import RenderContext

TextLine = Tuple[str, float, float]
PreviewCell = Tuple[float, float, float, Tuple[int, int, int]]

LABEL_COLOR = (0, 255, 255)
VALUE_COLOR = (255, 255, 255)
PREVIEW_FRAME_COLOR = (60, 60, 90)


class PanelRenderer:
    """Side panel: score readouts, next-piece preview and the best scores list."""

    def __init__(self, font_size: int = 14):
        self._font_size = font_size
        self._lines: List[TextLine] = []
        self._preview: List[PreviewCell] = []

    def text_lines(self) -> List[TextLine]:
        return list(self._lines)

    def preview_cells(self) -> List[PreviewCell]:
        return list(self._preview)

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        session = ctx.session
        left = ctx.board_right + SIDE_GAP
        y = ctx.board_top - PANEL_LINE_HEIGHT
        high_score = max(ctx.top_score, session.score)

        lines: List[TextLine] = []
        for label, value in (
            ("SCORE", session.score),
            ("LINES", session.lines),
            ("LEVEL", session.level),
            ("HIGH SCORE", high_score),
        ):
            lines.append((f"{label}: {value:,}", left, y))
            y -= PANEL_LINE_HEIGHT

        lines.append(("NEXT", left, y))
        y -= PANEL_LINE_HEIGHT
        preview_cell = max(ctx.cell_size * 0.75, 6)
        preview_size = preview_cell * PREVIEW_BOXES
        preview_bottom = y - preview_size + PANEL_LINE_HEIGHT / 2
        self._preview = self._layout_preview(ctx, left, preview_bottom, preview_cell)
        y = preview_bottom - PANEL_LINE_HEIGHT

        lines.append(("TOP SCORES", left, y))
        y -= PANEL_LINE_HEIGHT
        for rank, score in enumerate(ctx.high_scores, start=1):
            lines.append((f"{rank}. {score:,}", left, y))
            y -= PANEL_LINE_HEIGHT
        self._lines = lines

        if headless:
            return

        arcade.draw_lbwh_rectangle_outline(
            left, preview_bottom, preview_size, preview_size, PREVIEW_FRAME_COLOR, border_width=2
        )
        for px, py, cell, color in self._preview:
            arcade.draw_lbwh_rectangle_filled(px, py, cell, cell, color)
        for text, tx, ty in lines:
            color = LABEL_COLOR if text.isupper() and ":" not in text else VALUE_COLOR
            arcade.draw_text(text, tx, ty, color, self._font_size, anchor_x="left", anchor_y="bottom")

    @staticmethod
    def _layout_preview(ctx: RenderContext, left: float, bottom: float, cell: float) -> List[PreviewCell]:
        """Center the next piece inside a 4x4 box."""
        piece = ctx.next_piece
        if piece is None:
            return []
        offset_x = (PREVIEW_BOXES - piece.width) / 2
        offset_y = (PREVIEW_BOXES - piece.height) / 2
        cells: List[PreviewCell] = []
        for r, row in enumerate(piece.shape):
            for c, value in enumerate(row):
                color = color_for(value)
                if not value or color is None:
                    continue
                x = left + (offset_x + c) * cell
                # Shape row 0 is the top of the box.
                y = bottom + (PREVIEW_BOXES - 1 - offset_y - r) * cell
                cells.append((x, y, cell, color))
        return cells
