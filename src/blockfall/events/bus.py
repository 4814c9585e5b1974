from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems that are not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_KEY_PRESS = "key_press"                      # payload: key=str (left, right, down, up, space, p, enter, ...)
EVENT_MOUSE_PRESS = "mouse_press"                  # payload: x, y, button
EVENT_GAME_COMMAND = "game_command"                # payload: command=str
EVENT_START_REQUEST = "start_request"              # payload: None


# ============================================================================
# PIECES & BOARD
# ============================================================================
EVENT_PIECE_SPAWNED = "piece_spawned"              # payload: shape=list[list[int]], x=int, y=int
EVENT_PIECE_LOCKED = "piece_locked"                # payload: cells=list[(row, col)], tag=int
EVENT_LINES_CLEARED = "lines_cleared"              # payload: count=int, points=int, level=int


# ============================================================================
# SCORING
# ============================================================================
EVENT_SCORE_CHANGED = "score_changed"              # payload: score=int, lines=int, level=int
EVENT_HIGH_SCORES_CHANGED = "high_scores_changed"  # payload: scores=list[int], top_score=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"      # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_STARTED = "game_started"                # payload: None
EVENT_GAME_OVER = "game_over"                      # payload: score=int, lines=int, level=int
