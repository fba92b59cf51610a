"""Slime spawner — drops new slimes into the flask while charge lasts."""

from __future__ import annotations

import logging
import random

from slimelab.data.balance import BALANCE
from slimelab.engine.game_state import FlaskSlime, GameState

logger = logging.getLogger(__name__)


def drop_slime(state: GameState, rng: random.Random | None = None) -> FlaskSlime | None:
    """Spend one spawner charge and drop a slime at the top of the flask.

    Returns the new slime, or None when the spawner is empty.
    """
    if state.spawner_charge <= 0:
        logger.info("Spawner empty, no slime dropped")
        return None

    rng = rng or random
    bal = BALANCE.flask
    x = rng.uniform(bal.drop_margin, bal.flask_width - bal.drop_margin)
    slime = FlaskSlime(
        id=f"flask-slime-{state.next_flask_id}",
        level=bal.spawn_level,
        color=rng.choice(bal.base_colors),
        position={"x": round(x, 1), "y": 0.0},
    )
    state.next_flask_id += 1
    state.spawner_charge -= 1
    state.current_slimes.append(slime)
    logger.debug("Dropped %s (%s) at x=%.1f", slime.id, slime.color, x)
    return slime
