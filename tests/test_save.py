"""Tests for the local flask snapshot."""

import json
import random

from slimelab.engine import save
from slimelab.engine.save import clear_local_slimes, load_local_slimes, save_local_slimes
from slimelab.engine.spawner import drop_slime


def _slot():
    return save.SAVE_DIR / "slimes_in_flask.json"


def test_save_writes_flask_contents(state):
    rng = random.Random(7)
    drop_slime(state, rng)
    drop_slime(state, rng)
    save_local_slimes(state)

    data = json.loads(_slot().read_text())
    assert len(data) == 2
    assert set(data[0]) == {"id", "level", "color", "position"}
    assert data[0]["id"] == "flask-slime-1"


def test_save_overwrites(state):
    drop_slime(state, random.Random(1))
    save_local_slimes(state)
    state.current_slimes = []
    save_local_slimes(state)
    assert json.loads(_slot().read_text()) == []


def test_load_restores_flask(state, user):
    rng = random.Random(3)
    for _ in range(3):
        drop_slime(state, rng)
    saved = [s.to_dict() for s in state.current_slimes]
    save_local_slimes(state)

    from slimelab.engine.game_state import GameState, initialize_game_state
    fresh = initialize_game_state(GameState(), user)
    restored = load_local_slimes(fresh)

    assert [s.to_dict() for s in restored] == saved
    assert [s.to_dict() for s in fresh.current_slimes] == saved
    # New drops don't reuse restored ids
    assert drop_slime(fresh, rng).id == "flask-slime-4"


def test_load_without_snapshot(state):
    assert load_local_slimes(state) == []
    assert state.current_slimes == []


def test_load_corrupt_snapshot(state):
    drop_slime(state, random.Random(2))
    save.SAVE_DIR.mkdir(parents=True, exist_ok=True)
    _slot().write_text("{not json")
    assert load_local_slimes(state) == []
    assert len(state.current_slimes) == 1


def test_clear(state):
    save_local_slimes(state)
    assert _slot().exists()
    clear_local_slimes()
    assert not _slot().exists()
    clear_local_slimes()  # missing file is fine
