"""Local snapshot of the slimes in the flask — best-effort, between sessions."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from slimelab.engine.game_state import FlaskSlime, GameState

logger = logging.getLogger(__name__)

SAVE_DIR = Path(os.environ.get("SLIMELAB_HOME", Path.home() / ".slimelab"))
SLIMES_SLOT = "slimes_in_flask"


def _slot_path() -> Path:
    return SAVE_DIR / f"{SLIMES_SLOT}.json"


# ── Serialisation helpers ────────────────────────────────────────


def _dict_to_slime(d: dict) -> FlaskSlime:
    pos = d.get("position") or {}
    return FlaskSlime(
        id=str(d["id"]),
        level=int(d.get("level", 1)),
        color=str(d["color"]),
        position={"x": float(pos.get("x", 0.0)), "y": float(pos.get("y", 0.0))},
    )


def _next_id_after(slimes: list[FlaskSlime]) -> int:
    highest = 0
    for s in slimes:
        suffix = s.id.rsplit("-", 1)[-1]
        if suffix.isdigit():
            highest = max(highest, int(suffix))
    return highest + 1


# ── Public API ───────────────────────────────────────────────────


def save_local_slimes(state: GameState) -> None:
    """Overwrite the snapshot with the slimes currently in the flask."""
    data = [s.to_dict() for s in state.current_slimes]
    try:
        SAVE_DIR.mkdir(parents=True, exist_ok=True)
        _slot_path().write_text(json.dumps(data, indent=2))
    except OSError:
        logger.warning("Could not write %s", _slot_path(), exc_info=True)


def load_local_slimes(state: GameState) -> list[FlaskSlime]:
    """Restore the flask from the snapshot.

    Returns the restored slimes; an empty list (state untouched) when no
    usable snapshot exists.
    """
    path = _slot_path()
    if not path.exists():
        return []
    try:
        slimes = [_dict_to_slime(d) for d in json.loads(path.read_text())]
    except (OSError, ValueError, KeyError, TypeError, AttributeError):
        logger.warning("Ignoring corrupt snapshot %s", path)
        return []

    logger.info("Loaded %d slimes from the local snapshot", len(slimes))
    state.current_slimes = slimes
    state.next_flask_id = max(state.next_flask_id, _next_id_after(slimes))
    return slimes


def clear_local_slimes() -> None:
    """Remove the snapshot (sign-out)."""
    try:
        _slot_path().unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not remove %s", _slot_path(), exc_info=True)
