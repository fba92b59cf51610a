"""Wing unlocks — lift the fog from wings once the star threshold is met."""

from __future__ import annotations

import logging

from slimelab.data.lab_items import LAB_ITEMS_DATA
from slimelab.engine.game_state import GameState

logger = logging.getLogger(__name__)

FOG_CLASS = "fog-overlay"
UNLOCKED_CLASS = "unlocked"


def check_wing_unlock(state: GameState) -> list[str]:
    """Unlock every wing whose threshold the current star count meets.

    Safe to call after every star change: unlocked wings are never re-locked.
    Returns the ids of wings unlocked by this call.
    """
    if state.profile is None:
        return []

    stars = state.profile.star_count
    newly_unlocked: list[str] = []
    for wing_id, wing in LAB_ITEMS_DATA.items():
        if wing_id in state.unlocked_wings:
            continue
        if stars >= wing.unlock_stars:
            state.unlocked_wings.add(wing_id)
            newly_unlocked.append(wing_id)
            logger.info("Wing %s unlocked with %d stars", wing.wing_name, stars)
    return newly_unlocked


def next_locked_wing(state: GameState):
    """The cheapest wing still under fog, or None."""
    locked = [w for w in LAB_ITEMS_DATA.values() if w.id not in state.unlocked_wings]
    if not locked:
        return None
    return min(locked, key=lambda w: w.unlock_stars)


def wing_view(state: GameState) -> list[dict]:
    """Project wing unlock state for a rendering surface."""
    view = []
    for wing_id, wing in LAB_ITEMS_DATA.items():
        unlocked = wing_id in state.unlocked_wings
        installed = [
            {"item_id": r.item_id, "skin_equipped": r.skin_equipped}
            for r in state.customization
            if r.item_wing == wing_id and r.is_unlocked
        ]
        view.append({
            "id": wing_id,
            "element_id": wing.element_id,
            "wing_name": wing.wing_name,
            "unlock_stars": wing.unlock_stars,
            "unlocked": unlocked,
            "css_class": UNLOCKED_CLASS if unlocked else FOG_CLASS,
            "installed": installed,
        })
    return view
