"""Tetromino catalog: seven tag matrices and the color bound to each tag."""
from typing import Optional, Tuple

Shape = Tuple[Tuple[int, ...], ...]
Color = Tuple[int, int, int]

# Minimal bounding boxes; the non-zero value of each matrix is its color tag.
SHAPES: Tuple[Shape, ...] = (
    ((1, 1, 1, 1),),                # I
    ((2, 0, 0), (2, 2, 2)),         # J
    ((0, 0, 3), (3, 3, 3)),         # L
    ((4, 4), (4, 4)),               # O
    ((0, 5, 5), (5, 5, 0)),         # S
    ((0, 6, 0), (6, 6, 6)),         # T
    ((7, 7, 0), (0, 7, 7)),         # Z
)

SHAPE_NAMES: Tuple[str, ...] = ("I", "J", "L", "O", "S", "T", "Z")

# Index 0 is the empty cell.
COLORS: Tuple[Optional[Color], ...] = (
    None,
    (0, 255, 255),     # I  cyan
    (255, 0, 255),     # J  magenta
    (255, 255, 0),     # L  yellow
    (0, 255, 0),       # O  green
    (255, 0, 102),     # S  hot pink
    (255, 102, 0),     # T  orange
    (0, 102, 255),     # Z  blue
)


def color_for(tag: int) -> Optional[Color]:
    if 0 <= tag < len(COLORS):
        return COLORS[tag]
    return None


def shape_by_name(name: str) -> Shape:
    return SHAPES[SHAPE_NAMES.index(name)]
