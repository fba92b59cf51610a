"""Economy engine — energy, stars, currency spending, and number formatting."""

from __future__ import annotations

import logging

from slimelab.data.balance import BALANCE
from slimelab.data.starter import CostType
from slimelab.engine.game_state import GameState, Profile

logger = logging.getLogger(__name__)

# Profile attribute each cost type is paid from
_BALANCE_FIELDS: dict[CostType, str] = {
    CostType.GOMA_COINS: "goma_coins",
    CostType.DIAMONDS: "diamond_count",
    CostType.ENERGY: "current_energy",
}


def update_energy(state: GameState, amount: int) -> int | None:
    """Add (or subtract) energy, clamped to [0, max_energy].

    Returns the new energy, or None when no profile is loaded.
    """
    if state.profile is None:
        logger.warning("update_energy(%s) ignored: no profile loaded", amount)
        return None

    new_energy = state.profile.current_energy + amount
    new_energy = max(0, min(new_energy, BALANCE.profile.max_energy))
    state.profile.current_energy = new_energy
    logger.debug("Energy updated to %d", new_energy)
    return new_energy


def update_star_count(state: GameState, amount: int) -> list[str]:
    """Add (or remove) stars, never below zero, then check wing unlocks.

    Returns the ids of wings unlocked by this change.
    """
    from slimelab.engine.unlocks import check_wing_unlock

    if state.profile is None:
        logger.warning("update_star_count(%s) ignored: no profile loaded", amount)
        return []

    state.profile.star_count = max(0, state.profile.star_count + amount)
    logger.debug("Stars updated to %d", state.profile.star_count)
    return check_wing_unlock(state)


def get_balance(profile: Profile, cost_type: CostType) -> int:
    """Current balance for a cost type."""
    return getattr(profile, _BALANCE_FIELDS[CostType(cost_type)])


def can_afford(state: GameState, cost_type: CostType, amount: int) -> bool:
    """Check the balance a cost is paid from. Same rule for every cost type.

    Negative amounts are never affordable, so a cost cannot add currency.
    """
    if state.profile is None:
        return False
    if amount < 0:
        logger.warning("Rejected negative cost %d %s", amount, CostType(cost_type).value)
        return False
    return get_balance(state.profile, cost_type) >= amount


def spend(state: GameState, cost_type: CostType, amount: int) -> bool:
    """Deduct ``amount`` from the matching balance. Returns True if paid."""
    if not can_afford(state, cost_type, amount):
        return False
    assert state.profile is not None
    attr = _BALANCE_FIELDS[CostType(cost_type)]
    setattr(state.profile, attr, getattr(state.profile, attr) - amount)
    logger.debug("Spent %d %s", amount, CostType(cost_type).value)
    return True


def format_number(n: float) -> str:
    """Format a number with suffixes for readability."""
    if n < 0:
        return f"-{format_number(-n)}"

    for threshold, suffix in reversed(BALANCE.display.suffixes):
        if n >= threshold:
            value = n / threshold
            if value >= 100:
                return f"{value:.0f}{suffix}"
            elif value >= 10:
                return f"{value:.1f}{suffix}"
            else:
                return f"{value:.2f}{suffix}"

    if n == int(n):
        return str(int(n))
    return f"{n:.1f}"
