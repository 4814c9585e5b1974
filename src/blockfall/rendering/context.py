from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from esper import World

from blockfall.components.board import Board
from blockfall.components.game_state import GameMode
from blockfall.components.piece import Piece
from blockfall.components.session import Session
from blockfall.ui.layout import compute_board_geometry
from blockfall.utils.game_state import current_mode
from blockfall.world import get_board, get_high_score_table, get_piece_queue, get_session


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped snapshot shared across renderer subcomponents."""

    window_width: int
    window_height: int
    cell_size: int
    board_left: float
    board_bottom: float
    board: Board
    session: Session
    mode: GameMode
    current: Piece | None = None
    next_piece: Piece | None = None
    high_scores: List[int] = field(default_factory=list)

    @property
    def board_width(self) -> float:
        return self.cell_size * self.board.cols

    @property
    def board_height(self) -> float:
        return self.cell_size * self.board.rows

    @property
    def board_top(self) -> float:
        return self.board_bottom + self.board_height

    @property
    def board_right(self) -> float:
        return self.board_left + self.board_width

    @property
    def top_score(self) -> int:
        return self.high_scores[0] if self.high_scores else 0


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    board = get_board(world)
    queue = get_piece_queue(world)
    cell_size, board_left, board_bottom = compute_board_geometry(
        window_width, window_height, rows=board.rows, cols=board.cols
    )
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        cell_size=cell_size,
        board_left=board_left,
        board_bottom=board_bottom,
        board=board,
        session=get_session(world),
        mode=current_mode(world),
        current=queue.current,
        next_piece=queue.next,
        high_scores=list(get_high_score_table(world).scores),
    )
