"""Tests for wing unlocks."""

from slimelab.data.lab_items import LAB_ITEMS_DATA
from slimelab.engine.economy import update_star_count
from slimelab.engine.game_state import GameState
from slimelab.engine.unlocks import (
    FOG_CLASS,
    UNLOCKED_CLASS,
    check_wing_unlock,
    next_locked_wing,
    wing_view,
)


def test_element_id_replaces_first_underscore():
    assert LAB_ITEMS_DATA["astro_garden"].element_id == "astro-garden"
    assert LAB_ITEMS_DATA["nebula_observatory"].element_id == "nebula-observatory"


def test_thresholds_increase():
    thresholds = [w.unlock_stars for w in LAB_ITEMS_DATA.values()]
    assert thresholds == sorted(thresholds)
    assert thresholds[0] == 0


def test_every_wing_meeting_threshold_unlocks(state):
    state.profile.star_count = 1000
    check_wing_unlock(state)
    assert state.unlocked_wings == set(LAB_ITEMS_DATA)


def test_unlock_is_monotonic(state):
    update_star_count(state, 20)
    assert "nebula_observatory" in state.unlocked_wings

    update_star_count(state, -1000)
    check_wing_unlock(state)
    assert "nebula_observatory" in state.unlocked_wings
    assert state.unlocked_wings == set(LAB_ITEMS_DATA)


def test_check_is_idempotent(state):
    state.profile.star_count = 20
    first = check_wing_unlock(state)
    second = check_wing_unlock(state)
    assert first == ["cryo_vault"]
    assert second == []


def test_below_threshold_stays_fogged(state):
    state.profile.star_count = 19
    check_wing_unlock(state)
    assert "cryo_vault" not in state.unlocked_wings


def test_no_profile():
    assert check_wing_unlock(GameState()) == []


def test_wing_view_projection(state):
    view = {w["id"]: w for w in wing_view(state)}
    assert view["fusion_bay"]["css_class"] == UNLOCKED_CLASS
    assert view["cryo_vault"]["css_class"] == FOG_CLASS
    assert view["cryo_vault"]["element_id"] == "cryo-vault"
    assert view["fusion_bay"]["installed"] == [
        {"item_id": "mesa_principal", "skin_equipped": "tech_neon"}
    ]


def test_next_locked_wing(state):
    assert next_locked_wing(state).id == "cryo_vault"
    state.profile.star_count = 1000
    check_wing_unlock(state)
    assert next_locked_wing(state) is None
