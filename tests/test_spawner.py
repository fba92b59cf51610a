"""Tests for the slime spawner."""

import random

from slimelab.data.balance import BALANCE
from slimelab.engine.spawner import drop_slime


def test_drop_uses_charge(state):
    charge = state.spawner_charge
    slime = drop_slime(state, random.Random(0))

    assert slime is not None
    assert state.spawner_charge == charge - 1
    assert state.current_slimes == [slime]
    assert slime.level == BALANCE.flask.spawn_level
    assert slime.color in BALANCE.flask.base_colors


def test_drop_position_inside_flask(state):
    bal = BALANCE.flask
    rng = random.Random(42)
    for _ in range(10):
        slime = drop_slime(state, rng)
        assert bal.drop_margin <= slime.position["x"] <= bal.flask_width - bal.drop_margin
        assert slime.position["y"] == 0.0


def test_ids_are_unique(state):
    rng = random.Random(5)
    ids = {drop_slime(state, rng).id for _ in range(5)}
    assert len(ids) == 5


def test_empty_spawner(state):
    state.spawner_charge = 1
    assert drop_slime(state) is not None
    assert drop_slime(state) is None
    assert state.spawner_charge == 0
    assert len(state.current_slimes) == 1
