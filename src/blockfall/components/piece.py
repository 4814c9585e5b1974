from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple


def copy_shape(shape: Sequence[Sequence[int]]) -> List[List[int]]:
    return [list(row) for row in shape]


@dataclass
class Piece:
    """A shape matrix anchored on the board by its top-left corner."""
    shape: List[List[int]]
    x: int = 0
    y: int = 0

    @property
    def width(self) -> int:
        return len(self.shape[0]) if self.shape else 0

    @property
    def height(self) -> int:
        return len(self.shape)

    @property
    def tag(self) -> int:
        for row in self.shape:
            for value in row:
                if value:
                    return value
        return 0

    def cells(self, dx: int = 0, dy: int = 0) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(row, col, tag)`` for every occupied sub-cell in board coordinates."""
        for r, row in enumerate(self.shape):
            for c, value in enumerate(row):
                if value:
                    yield self.y + r + dy, self.x + c + dx, value

    def copy(self) -> "Piece":
        return Piece(shape=copy_shape(self.shape), x=self.x, y=self.y)
