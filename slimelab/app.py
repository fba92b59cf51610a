"""Slimes Lab — Main Textual Application.

Wires together the game engine and UI into a playable TUI game.
"""

from __future__ import annotations

import getpass

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Header, Footer

from slimelab.data.lab_items import LAB_ITEMS_DATA
from slimelab.engine.game_state import GameState, User, initialize_game_state
from slimelab.engine.save import load_local_slimes, save_local_slimes
from slimelab.engine.spawner import drop_slime
from slimelab.engine.tasks import (
    TaskOutcome,
    attempt_complete_task,
    finalize_customization,
    task_message,
)

from slimelab.ui.flask_display import FlaskDisplay
from slimelab.ui.hud import HUD
from slimelab.ui.skin_screen import SkinSelectionScreen
from slimelab.ui.task_panel import TaskPanel
from slimelab.ui.wing_panel import WingPanel


def local_user() -> User:
    """The player for an offline TUI session, named after the login user."""
    try:
        name = getpass.getuser()
    except (OSError, KeyError):
        name = "scientist"
    return User(id=f"local-{name}", email=f"{name}@slimes.lab", username=name)


class SlimeLabApp(App):
    """The Slimes Lab TUI game application."""

    TITLE = "Slimes Lab"
    SUB_TITLE = "Drop. Collect. Rebuild the lab."

    CSS = """
    #game-container { height: 1fr; }
    #hud-panel { width: 32; }
    #flask-panel { width: 1fr; }
    #task-panel { width: 44; }
    """

    BINDINGS = [
        Binding("space", "drop_slime", "Drop slime", show=True, priority=True),
        *[Binding(str(n), f"complete_task({n - 1})", f"Task {n}", show=False) for n in range(1, 10)],
        Binding("i", "install_item", "Install item", show=True),
        Binding("s", "save_flask", "Save flask", show=True),
        Binding("l", "load_flask", "Load flask", show=False),
        Binding("q", "quit_game", "Quit", show=True),
    ]

    def __init__(self, user: User | None = None) -> None:
        super().__init__()
        if user is None:
            user = local_user()
        self._state: GameState = initialize_game_state(GameState(), user)
        load_local_slimes(self._state)

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="game-container"):
            yield HUD(id="hud-panel")

            with Vertical(id="flask-panel"):
                yield FlaskDisplay(id="flask-display")
                yield WingPanel(id="wing-panel")

            yield TaskPanel(id="task-panel")

        yield Footer()

    def on_mount(self) -> None:
        self._sync_ui()

    def _sync_ui(self) -> None:
        """Push game state to all UI widgets."""
        self.query_one("#hud-panel", HUD).update_from_state(self._state)
        self.query_one("#flask-display", FlaskDisplay).update_from_state(self._state)
        self.query_one("#wing-panel", WingPanel).update_from_state(self._state)
        self.query_one("#task-panel", TaskPanel).update_from_state(self._state)

    def _announce_wings(self, wing_ids: list[str]) -> None:
        for wid in wing_ids:
            wing = LAB_ITEMS_DATA[wid]
            self.notify(f"✦ {wing.wing_name} is open! The fog lifts.", severity="warning", timeout=4)

    # ── Actions ──────────────────────────────────────

    def action_drop_slime(self) -> None:
        slime = drop_slime(self._state)
        if slime is None:
            self.notify("The spawner is out of charge.", severity="error", timeout=1)
            return
        self._sync_ui()

    def action_complete_task(self, index: int) -> None:
        if index >= len(self._state.tasks):
            return
        task = self._state.tasks[index]
        outcome = attempt_complete_task(self._state, task.id)
        message = task_message(outcome, task)
        self._sync_ui()

        if outcome == TaskOutcome.NEEDS_SKIN_SELECTION:
            self.notify(message, severity="information", timeout=2)
            self.action_install_item()
        elif outcome == TaskOutcome.AWAITING_CUSTOMIZATION:
            self.notify(message, severity="warning", timeout=2)
            self.action_install_item()
        elif outcome.ok:
            self.notify(message, severity="information", timeout=2)
        else:
            self.notify(message, severity="error", timeout=2)

    def action_install_item(self) -> None:
        """Open the skin picker for the item waiting to be installed."""
        item_id = self._state.pending_item_id
        if item_id is None:
            self.notify("Nothing waiting to be installed.", severity="information", timeout=1)
            return
        self.push_screen(SkinSelectionScreen(item_id), self._on_skin_chosen)

    def _on_skin_chosen(self, skin_id: str | None) -> None:
        item_id = self._state.pending_item_id
        if skin_id is None or item_id is None:
            return
        wings_before = set(self._state.unlocked_wings)
        if finalize_customization(self._state, item_id, skin_id):
            self.notify(f'Item "{item_id}" installed with skin "{skin_id}"!',
                        severity="information", timeout=3)
            self._announce_wings(sorted(self._state.unlocked_wings - wings_before))
        self._sync_ui()

    def action_save_flask(self) -> None:
        save_local_slimes(self._state)
        self.notify(f"Saved {len(self._state.current_slimes)} slimes.", timeout=1)

    def action_load_flask(self) -> None:
        restored = load_local_slimes(self._state)
        self.notify(f"Restored {len(restored)} slimes.", timeout=1)
        self._sync_ui()

    def action_quit_game(self) -> None:
        """Snapshot the flask and quit."""
        save_local_slimes(self._state)
        self.exit()
