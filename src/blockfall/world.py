import random

from esper import World
from .events.bus import EventBus
from blockfall.components.board import Board
from blockfall.components.game_state import GameMode, GameState
from blockfall.components.high_score_table import HighScoreTable
from blockfall.components.piece_queue import PieceQueue
from blockfall.components.session import Session
from blockfall.constants import GRID_COLS, GRID_ROWS, HIGH_SCORE_CAPACITY


def create_world(
    event_bus: EventBus,
    initial_mode: GameMode = GameMode.NOT_STARTED,
    *,
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    high_score_capacity: int = HIGH_SCORE_CAPACITY,
    rng: random.Random | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())

    # Global game state resource.
    world.create_entity(GameState(mode=initial_mode))

    # The play session: board, falling pieces and score live on one entity.
    world.create_entity(
        Board(rows=rows, cols=cols),
        PieceQueue(),
        Session(),
    )

    world.create_entity(HighScoreTable(capacity=high_score_capacity))
    return world


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def get_session(world: World) -> Session:
    for _, session in world.get_component(Session):
        return session
    raise RuntimeError("Session component not found")


def get_piece_queue(world: World) -> PieceQueue:
    for _, queue in world.get_component(PieceQueue):
        return queue
    raise RuntimeError("PieceQueue component not found")


def get_high_score_table(world: World) -> HighScoreTable:
    for _, table in world.get_component(HighScoreTable):
        return table
    raise RuntimeError("HighScoreTable component not found")
