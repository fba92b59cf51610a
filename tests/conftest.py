"""Shared fixtures — keep snapshots out of the real home directory."""

import pytest

from slimelab.engine import save
from slimelab.engine.game_state import GameState, User, initialize_game_state


@pytest.fixture(autouse=True)
def isolated_save_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(save, "SAVE_DIR", tmp_path / "slimelab")
    return tmp_path / "slimelab"


@pytest.fixture
def user():
    return User(id="mock-user-id-12345", email="offline@slimes.lab", username="DrCROK_Offline")


@pytest.fixture
def state(user):
    return initialize_game_state(GameState(), user)
