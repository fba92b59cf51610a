"""Game state — single source of truth for the current session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from slimelab.data.balance import BALANCE
from slimelab.data.starter import (
    STARTER_CUSTOMIZATION,
    STARTER_SLIMES,
    STARTER_TASKS,
    TaskDef,
)

logger = logging.getLogger(__name__)


@dataclass
class User:
    """An authenticated identity (mocked in offline sessions)."""

    id: str
    email: str
    username: str = ""   # display-name hint


@dataclass
class Profile:
    """The player's counters."""

    id: str
    username: str
    star_count: int = 0
    diamond_count: int = 0
    goma_coins: int = 0
    current_energy: int = 0


@dataclass
class Slime:
    """A collected creature stack — quantity is a count, not distinct objects."""

    id: str
    color: str
    level: int = 1
    quantity: int = 1


@dataclass
class FlaskSlime:
    """A creature currently sitting in the flask."""

    id: str
    level: int
    color: str
    position: dict[str, float] = field(default_factory=lambda: {"x": 0.0, "y": 0.0})

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "level": self.level,
            "color": self.color,
            "position": dict(self.position),
        }


@dataclass
class CustomizationRecord:
    """Unlock + skin state for one item. Absence of a record means locked."""

    user_id: str
    item_id: str
    item_wing: str
    is_unlocked: bool = True
    skin_equipped: str | None = None


@dataclass
class Task:
    """A task instance in the player's list. Completed tasks are flagged, not removed."""

    id: str
    task: TaskDef
    is_completed: bool = False
    completed_at: str | None = None   # ISO-8601, UTC


@dataclass
class GameState:
    """Complete mutable state for one session."""

    user: User | None = None
    profile: Profile | None = None

    # ── Collection ───────────────────────────────────────
    slimes: list[Slime] = field(default_factory=list)
    customization: list[CustomizationRecord] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)

    # ── Wings lifted from the fog (monotonic) ────────────
    unlocked_wings: set[str] = field(default_factory=set)

    # ── Flask / spawner ──────────────────────────────────
    spawner_charge: int = 0
    current_slimes: list[FlaskSlime] = field(default_factory=list)
    next_flask_id: int = 1

    # Task waiting for the player to pick a skin for its item
    current_task_to_complete: Task | None = None

    def find_task(self, task_id: str) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def find_customization(self, item_id: str) -> CustomizationRecord | None:
        for record in self.customization:
            if record.item_id == item_id:
                return record
        return None

    @property
    def pending_item_id(self) -> str | None:
        """Item waiting on a skin choice, if any."""
        if self.current_task_to_complete is None:
            return None
        return self.current_task_to_complete.task.unlocks_item_id


def initialize_game_state(state: GameState, user: User) -> GameState:
    """(Re)populate ``state`` with the starter session for ``user``.

    Wipes everything else in the state, including wings already lifted
    from the fog, then re-runs the unlock check against the starting stars.
    """
    from slimelab.engine.unlocks import check_wing_unlock

    bal = BALANCE.profile
    state.user = user
    state.profile = Profile(
        id=user.id,
        username=user.username or user.email.split("@")[0],
        star_count=bal.starting_stars,
        diamond_count=bal.diamonds_initial * bal.starting_multiplier,
        goma_coins=bal.goma_coins_initial * bal.starting_multiplier,
        current_energy=bal.max_energy,
    )

    state.slimes = [Slime(id=sid, color=color) for sid, color in STARTER_SLIMES]
    state.customization = [
        CustomizationRecord(
            user_id=user.id,
            item_id=item_id,
            item_wing=wing_id,
            skin_equipped=skin,
        )
        for item_id, wing_id, skin in STARTER_CUSTOMIZATION
    ]
    state.tasks = [Task(id=tid, task=tdef) for tid, tdef in STARTER_TASKS]

    state.spawner_charge = BALANCE.flask.spawner_charge_initial
    state.current_slimes = []
    state.next_flask_id = 1
    state.current_task_to_complete = None
    state.unlocked_wings = set()

    logger.info("Session initialised for %s", state.profile.username)
    check_wing_unlock(state)
    return state
