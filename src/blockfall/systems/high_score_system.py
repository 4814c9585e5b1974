from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from esper import World

from blockfall.components.high_score_table import HighScoreTable
from blockfall.components.session import Session
from blockfall.constants import HIGH_SCORE_CAPACITY, HIGH_SCORES_KEY
from blockfall.events.bus import EVENT_GAME_OVER, EVENT_HIGH_SCORES_CHANGED, EventBus
from blockfall.storage.kv_store import JsonFileStore, KeyValueStore

logger = logging.getLogger(__name__)


class HighScoreSystem:
    """Tracks the best scores and persists them across sessions."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        store: KeyValueStore | None = None,
        capacity: int | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._store = store if store is not None else JsonFileStore(self._default_save_path())
        self._table_entity = self._ensure_table_entity()
        if capacity is not None:
            self._table().capacity = capacity

        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

        if load_existing:
            self.load()

    @staticmethod
    def _default_save_path() -> Path:
        return Path(__file__).resolve().parents[3] / "data" / "high_scores.json"

    def _ensure_table_entity(self) -> int:
        existing = list(self.world.get_component(HighScoreTable))
        if existing:
            return existing[0][0]
        return self.world.create_entity(HighScoreTable(capacity=HIGH_SCORE_CAPACITY))

    def _table(self) -> HighScoreTable:
        return self.world.component_for_entity(self._table_entity, HighScoreTable)

    @property
    def scores(self) -> List[int]:
        return list(self._table().scores)

    @property
    def top_score(self) -> int:
        scores = self._table().scores
        return scores[0] if scores else 0

    def best_display_score(self, current: int) -> int:
        """High score readout while playing; follows the live score once it passes the record."""
        return max(self.top_score, current)

    def qualifies(self, score: int) -> bool:
        table = self._table()
        if score <= 0:
            return False
        return len(table.scores) < table.capacity or score > table.scores[-1]

    def add(self, score: int) -> None:
        table = self._table()
        scores = table.scores + [int(score)]
        scores.sort(reverse=True)
        table.scores = scores[: table.capacity]
        self.save()
        self.event_bus.emit(
            EVENT_HIGH_SCORES_CHANGED,
            scores=list(table.scores),
            top_score=self.top_score,
        )

    def load(self) -> None:
        table = self._table()
        raw = self._store.get(HIGH_SCORES_KEY)
        if raw is None:
            table.scores = []
            return
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable high-score data")
            table.scores = []
            return
        if not isinstance(payload, list):
            logger.warning("Discarding high-score data: expected a list, got %s", type(payload).__name__)
            table.scores = []
            return
        scores: List[int] = []
        for entry in payload:
            if isinstance(entry, bool):
                continue
            try:
                value = int(entry)
            except (TypeError, ValueError):
                continue
            if value >= 0:
                scores.append(value)
        scores.sort(reverse=True)
        table.scores = scores[: table.capacity]

    def save(self) -> None:
        self._store.set(HIGH_SCORES_KEY, json.dumps(self._table().scores))

    # Event handlers -----------------------------------------------------

    def _on_game_over(self, sender, **payload) -> None:
        score = payload.get("score")
        if score is None:
            return
        is_new_top = False
        if self.qualifies(score):
            self.add(score)
            is_new_top = self.scores.index(score) == 0
            logger.info("High score recorded: %d (top=%s)", score, is_new_top)
        for _, session in self.world.get_component(Session):
            session.new_high_score = is_new_top
