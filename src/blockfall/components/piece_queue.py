from dataclasses import dataclass
from typing import Optional

from blockfall.components.piece import Piece


@dataclass
class PieceQueue:
    """The falling piece plus one piece of lookahead."""
    current: Optional[Piece] = None
    next: Optional[Piece] = None

    def clear(self) -> None:
        self.current = None
        self.next = None
