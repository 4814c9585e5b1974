from __future__ import annotations

import random
from typing import Sequence

from blockfall.components.piece import Piece, copy_shape
from blockfall.components.piece_queue import PieceQueue
from blockfall.constants import GRID_COLS
from blockfall.shapes import SHAPES, Shape


class Spawner:
    """Generates pieces uniformly from the catalog and keeps one in reserve."""

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        cols: int = GRID_COLS,
        shapes: Sequence[Shape] = SHAPES,
    ) -> None:
        self._rng = rng or random.Random()
        self._cols = cols
        self._shapes = tuple(shapes)

    def generate(self) -> Piece:
        shape = copy_shape(self._rng.choice(self._shapes))
        width = len(shape[0])
        return Piece(shape=shape, x=self._cols // 2 - width // 2, y=0)

    def spawn(self, queue: PieceQueue) -> Piece:
        """Promote the preview piece (or a fresh one at game start) and refill the preview."""
        queue.current = queue.next if queue.next is not None else self.generate()
        queue.next = self.generate()
        return queue.current
