"""Slimes Lab Web — Flask server that wraps the Python game engine.

Serves a single-page lab UI and exposes a JSON API for game actions.
Every action response carries the full state projection so the page can
re-render from it.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from flask import Flask, jsonify, render_template, request

from slimelab.data.balance import BALANCE
from slimelab.data.lab_items import ALL_ITEMS, skins_for_item
from slimelab.engine.auth import OfflineAuth
from slimelab.engine.economy import format_number
from slimelab.engine.game_state import GameState, User, initialize_game_state
from slimelab.engine.save import load_local_slimes, save_local_slimes
from slimelab.engine.spawner import drop_slime
from slimelab.engine.tasks import (
    TaskOutcome,
    attempt_complete_task,
    finalize_customization,
    task_message,
)
from slimelab.engine.unlocks import next_locked_wing, wing_view

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Flask app
# ---------------------------------------------------------------------------

_DIR = Path(__file__).parent
app = Flask(
    __name__,
    template_folder=str(_DIR / "templates"),
)
app.secret_key = "slimelab-web-secret"
app.config["TEMPLATES_AUTO_RELOAD"] = True

OFFLINE_USER = User(
    id="mock-user-id-12345",
    email="offline@slimes.lab",
    username="DrCROK_Offline",
)

# ---------------------------------------------------------------------------
# In-memory game session (single-player)
# ---------------------------------------------------------------------------

_lock = threading.Lock()
_state: GameState | None = None
_auth = OfflineAuth()
_pending_notifications: list[str] = []


def _ensure_game() -> None:
    """Start an offline session if none is running."""
    global _state
    if _state is not None:
        return
    _state = initialize_game_state(GameState(), OFFLINE_USER)
    restored = load_local_slimes(_state)
    if restored:
        _pending_notifications.append(f"restored:{len(restored)}")


def reset_session() -> None:
    """Drop the running session and all offline accounts."""
    global _state, _auth
    with _lock:
        _state = None
        _auth = OfflineAuth()
        _pending_notifications.clear()


def _notify_unlocks(wing_ids: list[str]) -> None:
    _pending_notifications.extend(f"wing_unlocked:{wid}" for wid in wing_ids)


def _state_json() -> dict:
    """Build the JSON blob sent to the frontend."""
    assert _state is not None and _state.profile is not None
    s = _state
    p = s.profile

    tasks = []
    for t in s.tasks:
        tasks.append({
            "id": t.id,
            "task_name": t.task.task_name,
            "task_description": t.task.task_description,
            "wing_id": t.task.wing_id,
            "cost_type": t.task.cost_type.value,
            "cost_amount": t.task.cost_amount,
            "unlocks_item_id": t.task.unlocks_item_id,
            "is_completed": t.is_completed,
            "completed_at": t.completed_at,
        })

    pending = None
    item_id = s.pending_item_id
    if item_id is not None:
        item = ALL_ITEMS.get(item_id)
        pending = {
            "item_id": item_id,
            "item_name": item.name if item else item_id,
            "skins": [{"id": sk.id, "name": sk.name, "description": sk.description}
                      for sk in skins_for_item(item_id)],
        }

    next_wing = next_locked_wing(s)

    notifs = list(_pending_notifications)
    _pending_notifications.clear()

    return {
        "user": {"id": s.user.id, "email": s.user.email} if s.user else None,
        "profile": {
            "username": p.username,
            "star_count": p.star_count,
            "diamond_count": p.diamond_count,
            "goma_coins": p.goma_coins,
            "goma_coins_display": format_number(p.goma_coins),
            "current_energy": p.current_energy,
            "max_energy": BALANCE.profile.max_energy,
        },
        "slimes": [
            {"id": sl.id, "color": sl.color, "level": sl.level, "quantity": sl.quantity}
            for sl in s.slimes
        ],
        "customization": [
            {
                "item_id": r.item_id,
                "item_wing": r.item_wing,
                "is_unlocked": r.is_unlocked,
                "skin_equipped": r.skin_equipped,
            }
            for r in s.customization
        ],
        "tasks": tasks,
        "wings": wing_view(s),
        "next_wing": (
            {"id": next_wing.id, "wing_name": next_wing.wing_name,
             "unlock_stars": next_wing.unlock_stars}
            if next_wing else None
        ),
        "spawner_charge": s.spawner_charge,
        "current_slimes": [sl.to_dict() for sl in s.current_slimes],
        "pending_selection": pending,
        "notifications": notifs,
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@app.route("/")
def index():
    return render_template("lab.html")


@app.route("/api/state")
def api_state():
    with _lock:
        _ensure_game()
        return jsonify(_state_json())


@app.route("/api/action/spawn", methods=["POST"])
def action_spawn():
    with _lock:
        _ensure_game()
        assert _state is not None
        slime = drop_slime(_state)
        data = _state_json()
        data["spawned"] = slime.to_dict() if slime else None
        return jsonify(data)


@app.route("/api/action/complete_task/<task_id>", methods=["POST"])
def action_complete_task(task_id: str):
    with _lock:
        _ensure_game()
        assert _state is not None
        outcome = attempt_complete_task(_state, task_id)
        task = _state.find_task(task_id)
        data = _state_json()
        data["task_outcome"] = outcome.name.lower()
        data["message"] = task_message(outcome, task)
        status = 404 if outcome == TaskOutcome.NOT_FOUND else 200
        return jsonify(data), status


@app.route("/api/action/finalize", methods=["POST"])
def action_finalize():
    with _lock:
        _ensure_game()
        assert _state is not None
        body = request.get_json(silent=True) or {}
        item_id = str(body.get("item_id", ""))
        skin_id = str(body.get("skin_id", ""))
        wings_before = set(_state.unlocked_wings)
        if not finalize_customization(_state, item_id, skin_id):
            return jsonify({"error": f"Cannot install {item_id!r} with skin {skin_id!r}"}), 400
        _notify_unlocks(sorted(_state.unlocked_wings - wings_before))
        data = _state_json()
        data["message"] = f'Item "{item_id}" installed with skin "{skin_id}"!'
        return jsonify(data)


@app.route("/api/action/save_slimes", methods=["POST"])
def action_save_slimes():
    with _lock:
        _ensure_game()
        assert _state is not None
        save_local_slimes(_state)
        return jsonify({"saved": True, "count": len(_state.current_slimes)})


@app.route("/api/action/load_slimes", methods=["POST"])
def action_load_slimes():
    with _lock:
        _ensure_game()
        assert _state is not None
        restored = load_local_slimes(_state)
        data = _state_json()
        data["restored"] = len(restored)
        return jsonify(data)


@app.route("/api/auth/signup", methods=["POST"])
def auth_signup():
    body = request.get_json(silent=True) or {}
    with _lock:
        result = _auth.sign_up(
            str(body.get("username", "")),
            str(body.get("email", "")),
            str(body.get("password", "")),
            str(body.get("confirm_password", "")),
        )
    if not result.ok:
        return jsonify({"error": result.error, "tooltip": result.tooltip}), 400
    return jsonify({"message": result.message, "username": result.user.username}), 201


@app.route("/api/auth/signin", methods=["POST"])
def auth_signin():
    global _state
    body = request.get_json(silent=True) or {}
    with _lock:
        result = _auth.sign_in(str(body.get("login", "")), str(body.get("password", "")))
        if not result.ok:
            return jsonify({"error": result.error}), 401
        _state = initialize_game_state(GameState(), result.user)
        return jsonify(_state_json())


@app.route("/api/auth/signout", methods=["POST"])
def auth_signout():
    global _state
    with _lock:
        _auth.sign_out()
        _state = None
        return jsonify({"signed_out": True})


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def run_server(host: str = "127.0.0.1", port: int = 5000, debug: bool = False) -> None:
    """Start the Flask development server."""
    logger.info("Serving Slimes Lab on http://%s:%d/", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
