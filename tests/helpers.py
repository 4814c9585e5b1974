from __future__ import annotations

import random
from typing import Iterable, Sequence

from blockfall.components.board import Board
from blockfall.events.bus import EventBus
from blockfall.shapes import shape_by_name
from blockfall.storage.kv_store import MemoryStore
from blockfall.systems.game_loop_system import GameLoopSystem
from blockfall.systems.high_score_system import HighScoreSystem
from blockfall.systems.spawner import Spawner
from blockfall.world import create_world


class FakeClock:
    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def fill_row(board: Board, row: int, *, skip: Iterable[int] = (), tag: int = 1) -> None:
    """Occupy every cell of ``row`` except the columns in ``skip``."""
    skipped = set(skip)
    for col in range(board.cols):
        board.cells[row][col] = 0 if col in skipped else tag


def fixed_spawner(names: Sequence[str] = ("O",), seed: int = 0) -> Spawner:
    """Spawner restricted to the named shapes, so piece sequences are predictable."""
    return Spawner(random.Random(seed), shapes=[shape_by_name(name) for name in names])


def new_game(names: Sequence[str] = ("O",), *, start: bool = True, store: MemoryStore | None = None):
    """Build a world with the loop and high-score systems wired to a fake clock."""
    bus = EventBus()
    world = create_world(bus, rng=random.Random(0))
    clock = FakeClock()
    HighScoreSystem(world, bus, store=store if store is not None else MemoryStore())
    loop = GameLoopSystem(world, bus, clock=clock, spawner=fixed_spawner(names))
    if start:
        loop.start()
    return bus, world, loop, clock
