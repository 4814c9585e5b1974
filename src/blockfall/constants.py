GRID_ROWS = 20
GRID_COLS = 10
BOTTOM_MARGIN = 20

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 680
WINDOW_TITLE = "Blockfall"

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.55
BOARD_MAX_HEIGHT_PCT = 0.92

# Side panel geometry (panel sits right of the board).
SIDE_GAP = 24
PANEL_LINE_HEIGHT = 26
PREVIEW_BOXES = 4

# Scoring, fixed literal constants (no combo or back-to-back bonuses).
LINE_CLEAR_POINTS = 100
SOFT_DROP_POINTS = 1
HARD_DROP_POINTS = 2
LINES_PER_LEVEL = 10

# Automatic descent timing in milliseconds.
BASE_DROP_INTERVAL_MS = 1000
DROP_INTERVAL_STEP_MS = 100
MIN_DROP_INTERVAL_MS = 100

HIGH_SCORE_CAPACITY = 5
HIGH_SCORES_KEY = "blockfall_high_scores"
