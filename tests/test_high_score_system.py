import json

import pytest

from blockfall.constants import HIGH_SCORES_KEY
from blockfall.events.bus import EVENT_GAME_OVER, EVENT_HIGH_SCORES_CHANGED, EventBus
from blockfall.storage.kv_store import JsonFileStore, MemoryStore
from blockfall.systems.high_score_system import HighScoreSystem
from blockfall.world import create_world, get_high_score_table, get_session


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def world(bus):
    return create_world(bus)


def _system(world, bus, **kwargs):
    kwargs.setdefault("store", MemoryStore())
    return HighScoreSystem(world, bus, **kwargs)


def test_keeps_five_best_scores_descending(world, bus):
    system = _system(world, bus)
    for score in (50, 80, 30, 90, 10, 20):
        if system.qualifies(score):
            system.add(score)
    assert system.scores == [90, 80, 50, 30, 20]
    assert system.top_score == 90


def test_qualifies_rules(world, bus):
    system = _system(world, bus)
    assert system.qualifies(0) is False
    assert system.qualifies(1) is True
    for score in (100, 90, 80, 70, 60):
        system.add(score)
    assert system.qualifies(60) is False
    assert system.qualifies(61) is True


def test_top_score_empty_is_zero(world, bus):
    system = _system(world, bus)
    assert system.scores == []
    assert system.top_score == 0
    assert system.best_display_score(120) == 120


def test_best_display_score_prefers_record(world, bus):
    system = _system(world, bus)
    system.add(500)
    assert system.best_display_score(120) == 500
    assert system.best_display_score(640) == 640


def test_reuses_table_from_world(world, bus):
    system = _system(world, bus)
    system.add(42)
    assert get_high_score_table(world).scores == [42]


def test_add_emits_change_event(world, bus):
    system = _system(world, bus)
    seen = []
    bus.subscribe(EVENT_HIGH_SCORES_CHANGED, lambda sender, **payload: seen.append(payload))
    system.add(70)
    system.add(90)
    assert seen[-1] == {"scores": [90, 70], "top_score": 90}


def test_add_persists_json_list(world, bus):
    store = MemoryStore()
    system = _system(world, bus, store=store)
    system.add(30)
    system.add(40)
    assert json.loads(store.get(HIGH_SCORES_KEY)) == [40, 30]


def test_load_restores_saved_scores(world, bus):
    store = MemoryStore({HIGH_SCORES_KEY: "[10, 300, 20]"})
    system = _system(world, bus, store=store)
    assert system.scores == [300, 20, 10]


@pytest.mark.parametrize("raw", ["not json", "{\"a\": 1}", "42", "null"])
def test_load_recovers_from_bad_data(world, bus, raw):
    system = _system(world, bus, store=MemoryStore({HIGH_SCORES_KEY: raw}))
    assert system.scores == []
    system.add(15)
    assert system.scores == [15]


def test_load_skips_invalid_entries(world, bus):
    raw = json.dumps([5, "12", True, -3, None, "abc", 7.0, 1, 2, 3, 4])
    system = _system(world, bus, store=MemoryStore({HIGH_SCORES_KEY: raw}))
    assert system.scores == [12, 7, 5, 4, 3]


def test_capacity_override(world, bus):
    system = _system(world, bus, capacity=2)
    for score in (5, 9, 7):
        if system.qualifies(score):
            system.add(score)
    assert system.scores == [9, 7]


def test_game_over_records_new_top_score(world, bus):
    system = _system(world, bus)
    system.add(100)
    bus.emit(EVENT_GAME_OVER, score=150, lines=3, level=1)
    assert system.scores == [150, 100]
    assert get_session(world).new_high_score is True


def test_game_over_lower_score_is_not_new_top(world, bus):
    system = _system(world, bus)
    system.add(100)
    bus.emit(EVENT_GAME_OVER, score=60, lines=1, level=1)
    assert system.scores == [100, 60]
    assert get_session(world).new_high_score is False


def test_game_over_tie_with_top_counts_as_new_high(world, bus):
    system = _system(world, bus)
    system.add(100)
    bus.emit(EVENT_GAME_OVER, score=100, lines=1, level=1)
    assert system.scores == [100, 100]
    assert get_session(world).new_high_score is True


def test_game_over_zero_score_not_recorded(world, bus):
    system = _system(world, bus)
    bus.emit(EVENT_GAME_OVER, score=0, lines=0, level=1)
    assert system.scores == []
    assert get_session(world).new_high_score is False


def test_scores_survive_restart_with_file_store(tmp_path):
    path = tmp_path / "nested" / "scores.json"

    bus = EventBus()
    world = create_world(bus)
    first = HighScoreSystem(world, bus, store=JsonFileStore(path))
    first.add(250)
    first.add(125)
    assert path.exists()

    bus = EventBus()
    world = create_world(bus)
    second = HighScoreSystem(world, bus, store=JsonFileStore(path))
    assert second.scores == [250, 125]


def test_load_existing_false_starts_empty(world, bus):
    store = MemoryStore({HIGH_SCORES_KEY: "[10]"})
    system = _system(world, bus, store=store, load_existing=False)
    assert system.scores == []
    system.load()
    assert system.scores == [10]
