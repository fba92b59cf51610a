"""Tests for session initialisation."""

from slimelab.data.balance import BALANCE, DIAMONDS_INITIAL, GOMA_COINS_INITIAL, MAX_ENERGY
from slimelab.engine.game_state import GameState, User, initialize_game_state
from slimelab.engine.tasks import attempt_complete_task


def test_starting_profile(state):
    p = state.profile
    assert p.username == "DrCROK_Offline"
    assert p.goma_coins == GOMA_COINS_INITIAL * 10
    assert p.diamond_count == DIAMONDS_INITIAL * 10
    assert p.current_energy == MAX_ENERGY
    assert p.star_count == BALANCE.profile.starting_stars


def test_username_falls_back_to_email():
    state = initialize_game_state(GameState(), User(id="u1", email="ana@slimes.lab"))
    assert state.profile.username == "ana"


def test_starter_slimes(state):
    assert [s.color for s in state.slimes] == ["Roxo", "Azul", "Verde", "Amarelo"]
    assert all(s.level == 1 and s.quantity == 1 for s in state.slimes)


def test_starter_customization(state):
    assert len(state.customization) == 1
    record = state.customization[0]
    assert record.item_id == "mesa_principal"
    assert record.item_wing == "fusion_bay"
    assert record.is_unlocked
    assert record.skin_equipped == "tech_neon"
    assert record.user_id == "mock-user-id-12345"


def test_starter_tasks(state):
    assert [t.id for t in state.tasks] == ["mock-task-1", "mock-task-2", "mock-task-3"]
    assert not any(t.is_completed for t in state.tasks)
    assert state.spawner_charge == 15
    assert state.current_task_to_complete is None


def test_first_wings_unlocked_at_start(state):
    assert state.unlocked_wings == {"fusion_bay", "astro_garden"}


def test_reinitialise_resets_progress(state, user):
    attempt_complete_task(state, "mock-task-1")
    state.unlocked_wings.add("nebula_observatory")
    initialize_game_state(state, user)
    assert not state.find_task("mock-task-1").is_completed
    assert state.profile.goma_coins == GOMA_COINS_INITIAL * 10
    assert "nebula_observatory" not in state.unlocked_wings
