"""Frame-driven game loop: gravity, player commands, locking and game over."""
from __future__ import annotations

import logging
from time import monotonic
from typing import Callable

from esper import World

from blockfall.components.board import Board
from blockfall.components.game_state import GameMode
from blockfall.components.piece import Piece
from blockfall.components.piece_queue import PieceQueue
from blockfall.components.session import Session
from blockfall.constants import HARD_DROP_POINTS, SOFT_DROP_POINTS
from blockfall.events.bus import (
    EVENT_GAME_COMMAND,
    EVENT_GAME_OVER,
    EVENT_GAME_STARTED,
    EVENT_LINES_CLEARED,
    EVENT_PIECE_LOCKED,
    EVENT_PIECE_SPAWNED,
    EVENT_SCORE_CHANGED,
    EVENT_START_REQUEST,
    EVENT_TICK,
    EventBus,
)
from blockfall.systems import board_ops
from blockfall.systems.scoring import apply_line_clear
from blockfall.systems.spawner import Spawner
from blockfall.utils.game_state import current_mode, set_game_mode
from blockfall.world import get_board, get_piece_queue, get_session

logger = logging.getLogger(__name__)

COMMAND_MOVE_LEFT = "move_left"
COMMAND_MOVE_RIGHT = "move_right"
COMMAND_MOVE_DOWN = "move_down"
COMMAND_ROTATE = "rotate"
COMMAND_HARD_DROP = "hard_drop"
COMMAND_TOGGLE_PAUSE = "toggle_pause"

_HORIZONTAL = {"left": -1, "right": 1}


class GameLoopSystem:
    """Owns the play session and sequences the engine functions.

    ``clock`` returns seconds and defaults to ``time.monotonic``; tests pass a
    fake so automatic drops happen exactly when they advance it.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        clock: Callable[[], float] | None = None,
        spawner: Spawner | None = None,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._clock = clock or monotonic
        board = get_board(world)
        self._spawner = spawner or Spawner(getattr(world, "random", None), cols=board.cols)
        self._commands: dict[str, Callable[[], object]] = {
            COMMAND_MOVE_LEFT: lambda: self.move("left"),
            COMMAND_MOVE_RIGHT: lambda: self.move("right"),
            COMMAND_MOVE_DOWN: lambda: self.move("down"),
            COMMAND_ROTATE: self.rotate,
            COMMAND_HARD_DROP: self.hard_drop,
            COMMAND_TOGGLE_PAUSE: self.toggle_pause,
        }
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)
        self.event_bus.subscribe(EVENT_GAME_COMMAND, self.on_command)
        self.event_bus.subscribe(EVENT_START_REQUEST, self.on_start_request)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def board(self) -> Board:
        return get_board(self.world)

    @property
    def session(self) -> Session:
        return get_session(self.world)

    @property
    def queue(self) -> PieceQueue:
        return get_piece_queue(self.world)

    @property
    def mode(self) -> GameMode:
        return current_mode(self.world)

    def _active(self) -> bool:
        return self.mode == GameMode.RUNNING and self.queue.current is not None

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_tick(self, sender, **payload) -> None:
        self.tick()

    def on_command(self, sender, **payload) -> None:
        handler = self._commands.get(payload.get("command"))
        if handler is None:
            return
        handler()

    def on_start_request(self, sender, **payload) -> None:
        if self.mode in (GameMode.RUNNING, GameMode.PAUSED):
            return
        self.start()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        board = self.board
        session = self.session
        board.reset()
        session.reset()
        self.queue.clear()
        set_game_mode(self.world, self.event_bus, GameMode.RUNNING)
        logger.info("Game started")
        self.event_bus.emit(EVENT_GAME_STARTED)
        self._emit_score()
        self._spawn()
        session.last_drop_time = self._clock()

    def tick(self) -> None:
        """Advance gravity; a descent fires once the drop interval has strictly elapsed."""
        if self.mode != GameMode.RUNNING:
            return
        session = self.session
        now = self._clock()
        if (now - session.last_drop_time) * 1000.0 > session.drop_interval_ms:
            self.move("down")
            session.last_drop_time = now

    def pause(self) -> None:
        if self.mode == GameMode.RUNNING:
            set_game_mode(self.world, self.event_bus, GameMode.PAUSED)

    def resume(self) -> None:
        if self.mode != GameMode.PAUSED:
            return
        # Restart the drop timer so the pause never turns into an instant drop.
        self.session.last_drop_time = self._clock()
        set_game_mode(self.world, self.event_bus, GameMode.RUNNING)

    def toggle_pause(self) -> None:
        if self.mode == GameMode.RUNNING:
            self.pause()
        elif self.mode == GameMode.PAUSED:
            self.resume()

    def game_over(self) -> None:
        session = self.session
        session.final_score = session.score
        session.new_high_score = False
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        logger.info("Game over: score=%d lines=%d level=%d", session.score, session.lines, session.level)
        self.event_bus.emit(
            EVENT_GAME_OVER,
            score=session.score,
            lines=session.lines,
            level=session.level,
        )

    # ------------------------------------------------------------------
    # Player commands
    # ------------------------------------------------------------------

    def move(self, direction: str) -> bool:
        """Shift the falling piece; returns True when it moved.

        A blocked downward move locks the piece instead.
        """
        if not self._active():
            return False
        piece = self.queue.current
        board = self.board
        if direction in _HORIZONTAL:
            dx = _HORIZONTAL[direction]
            if board_ops.collides(piece, board, dx, 0):
                return False
            piece.x += dx
            return True
        if direction != "down":
            return False
        if board_ops.collides(piece, board, 0, 1):
            self._lock()
            return False
        piece.y += 1
        self.session.score += SOFT_DROP_POINTS
        self._emit_score()
        return True

    def rotate(self) -> bool:
        if not self._active():
            return False
        queue = self.queue
        rotated = board_ops.rotate(queue.current, self.board)
        if rotated is queue.current:
            return False
        queue.current = rotated
        return True

    def hard_drop(self) -> int:
        """Drop the piece to its resting row and lock it; returns rows descended."""
        if not self._active():
            return 0
        piece = self.queue.current
        descended = board_ops.drop_distance(piece, self.board)
        piece.y += descended
        self.session.score += HARD_DROP_POINTS * descended
        if descended:
            self._emit_score()
        self._lock()
        return descended

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lock(self) -> None:
        piece = self.queue.current
        board = self.board
        session = self.session
        positions = board_ops.locked_positions(piece)
        board_ops.merge(piece, board)
        level_before = session.level
        _, count = board_ops.clear_lines(board)
        points = apply_line_clear(session, count)
        logger.debug("Piece locked at %s, cleared %d rows", positions, count)
        self.event_bus.emit(EVENT_PIECE_LOCKED, cells=positions, tag=piece.tag)
        if count:
            self.event_bus.emit(EVENT_LINES_CLEARED, count=count, points=points, level=level_before)
            self._emit_score()
        self._spawn()

    def _spawn(self) -> Piece:
        piece = self._spawner.spawn(self.queue)
        self.event_bus.emit(
            EVENT_PIECE_SPAWNED,
            shape=[list(row) for row in piece.shape],
            x=piece.x,
            y=piece.y,
        )
        if board_ops.collides(piece, self.board):
            self.game_over()
        return piece

    def _emit_score(self) -> None:
        session = self.session
        self.event_bus.emit(
            EVENT_SCORE_CHANGED,
            score=session.score,
            lines=session.lines,
            level=session.level,
        )
