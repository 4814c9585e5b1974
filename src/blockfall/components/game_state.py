"""Game state resource describing the active high-level mode."""
from dataclasses import dataclass
from enum import Enum, auto


class GameMode(Enum):
    """Session lifecycle; restart goes from GAME_OVER back to RUNNING."""
    NOT_STARTED = auto()
    RUNNING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


@dataclass
class GameState:
    """Singleton component storing the current mode."""
    mode: GameMode = GameMode.NOT_STARTED

    @property
    def running(self) -> bool:
        return self.mode in (GameMode.RUNNING, GameMode.PAUSED)

    @property
    def paused(self) -> bool:
        return self.mode == GameMode.PAUSED
