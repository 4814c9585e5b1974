from blockfall.constants import (
    BOARD_MAX_HEIGHT_PCT,
    BOARD_MAX_WIDTH_PCT,
    BOTTOM_MARGIN,
    GRID_COLS,
    GRID_ROWS,
    SIDE_GAP,
)


def compute_board_geometry(window_width: int, window_height: int, rows: int = GRID_ROWS, cols: int = GRID_COLS):
    """Return (cell_size, board_left, board_bottom) for a window size.

    The board may not exceed the configured fraction of the window and sits
    against the left edge, leaving the rest for the side panel.
    """
    max_board_w = window_width * BOARD_MAX_WIDTH_PCT
    max_board_h = (window_height - BOTTOM_MARGIN) * BOARD_MAX_HEIGHT_PCT
    cell_by_w = max_board_w / cols
    cell_by_h = max_board_h / rows
    cell_size = int(min(cell_by_w, cell_by_h))
    if cell_size < 8:
        cell_size = 8
    board_left = SIDE_GAP
    board_bottom = BOTTOM_MARGIN
    return cell_size, board_left, board_bottom


def cell_origin(row: int, col: int, rows: int, cell_size: int, board_left: float, board_bottom: float):
    """Bottom-left pixel of a board cell; row 0 is the top row, arcade's y axis points up."""
    x = board_left + col * cell_size
    y = board_bottom + (rows - 1 - row) * cell_size
    return x, y
