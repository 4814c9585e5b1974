from __future__ import annotations

from typing import TYPE_CHECKING, List, Tuple

from blockfall.components.game_state import GameMode

if TYPE_CHECKING:
    from blockfall.rendering.context import RenderContext

OverlayLine = Tuple[str, Tuple[int, int, int], int]

SHADE_COLOR = (0, 0, 0, 190)
TITLE_COLOR = (0, 255, 255)
HIGHLIGHT_COLOR = (255, 0, 255)
SCORE_COLOR = (255, 255, 0)


class OverlayRenderer:
    """Dims the board and prints the pause or game-over banner."""

    def __init__(self):
        self._lines: List[OverlayLine] = []

    def lines(self) -> List[OverlayLine]:
        return list(self._lines)

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        lines: List[OverlayLine] = []
        if ctx.mode == GameMode.PAUSED:
            lines.append(("PAUSED", TITLE_COLOR, 20))
        elif ctx.mode == GameMode.GAME_OVER:
            lines.append(("GAME OVER", TITLE_COLOR, 20))
            if ctx.session.new_high_score:
                lines.append(("NEW HIGH SCORE!", HIGHLIGHT_COLOR, 12))
            lines.append((f"SCORE: {ctx.session.final_score}", SCORE_COLOR, 14))
        self._lines = lines

        if headless or not lines:
            return

        arcade.draw_lbwh_rectangle_filled(
            ctx.board_left, ctx.board_bottom, ctx.board_width, ctx.board_height, SHADE_COLOR
        )
        center_x = ctx.board_left + ctx.board_width / 2
        y = ctx.board_bottom + ctx.board_height / 2 + 40
        for text, color, size in lines:
            arcade.draw_text(text, center_x, y, color, size, anchor_x="center", anchor_y="center", bold=True)
            y -= size * 2.5
