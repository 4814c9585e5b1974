from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class Board:
    """Fixed-size grid of color tags; 0 marks an empty cell.

    ``cells[row][col]`` with row 0 at the top. Dimensions are fixed at
    creation, only the cell values change.
    """
    rows: int
    cols: int
    cells: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[0] * self.cols for _ in range(self.rows)]

    def reset(self) -> None:
        for row in self.cells:
            for col in range(self.cols):
                row[col] = 0

    def is_row_full(self, row: int) -> bool:
        return all(cell != 0 for cell in self.cells[row])

    def occupied_count(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell)
