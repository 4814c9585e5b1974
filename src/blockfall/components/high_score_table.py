from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from blockfall.constants import HIGH_SCORE_CAPACITY


@dataclass(slots=True)
class HighScoreTable:
    """Best scores, highest first, persisted across sessions."""

    scores: List[int] = field(default_factory=list)
    capacity: int = HIGH_SCORE_CAPACITY
