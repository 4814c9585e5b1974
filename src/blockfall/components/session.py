"""Per-game score and timing state owned by the game loop."""
from dataclasses import dataclass

from blockfall.constants import BASE_DROP_INTERVAL_MS


@dataclass
class Session:
    score: int = 0
    lines: int = 0
    level: int = 1
    drop_interval_ms: int = BASE_DROP_INTERVAL_MS
    last_drop_time: float = 0.0
    final_score: int = 0
    new_high_score: bool = False

    def reset(self) -> None:
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = BASE_DROP_INTERVAL_MS
        self.last_drop_time = 0.0
        self.final_score = 0
        self.new_high_score = False
