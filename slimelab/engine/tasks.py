"""Task engine — paying for tasks and installing the items they unlock.

A task moves ``pending -> completed`` once its cost is paid. Tasks that
unlock an item then park in ``state.current_task_to_complete`` until the
player picks a skin with :func:`finalize_customization`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import Enum, auto

from slimelab.data.balance import STARS_FOR_ITEM_UNLOCK
from slimelab.data.lab_items import ALL_ITEMS, skins_for_item
from slimelab.engine.economy import can_afford, spend, update_star_count
from slimelab.engine.game_state import CustomizationRecord, GameState, Task

logger = logging.getLogger(__name__)


class TaskOutcome(Enum):
    """Result of a task completion attempt."""

    COMPLETED = auto()
    NEEDS_SKIN_SELECTION = auto()
    NOT_FOUND = auto()
    ALREADY_COMPLETED = auto()
    AWAITING_CUSTOMIZATION = auto()
    INSUFFICIENT_FUNDS = auto()
    ITEM_UNAVAILABLE = auto()

    @property
    def ok(self) -> bool:
        return self in (TaskOutcome.COMPLETED, TaskOutcome.NEEDS_SKIN_SELECTION)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def attempt_complete_task(state: GameState, task_id: str) -> TaskOutcome:
    """Try to pay for and complete a task."""
    task = state.find_task(task_id)
    if task is None:
        logger.error("Task not found: %s", task_id)
        return TaskOutcome.NOT_FOUND

    if task.is_completed:
        logger.info("Task %s already completed at %s", task_id, task.completed_at)
        return TaskOutcome.ALREADY_COMPLETED

    pending = state.current_task_to_complete
    if pending is not None:
        logger.info("Task %s blocked: item %s still waiting for a skin",
                    task_id, pending.task.unlocks_item_id)
        return TaskOutcome.AWAITING_CUSTOMIZATION

    tdef = task.task
    item_id = tdef.unlocks_item_id
    if item_id and (item_id not in ALL_ITEMS or not skins_for_item(item_id)):
        logger.error("Task %s unlocks %s, which has no skins to install", task_id, item_id)
        return TaskOutcome.ITEM_UNAVAILABLE

    if not can_afford(state, tdef.cost_type, tdef.cost_amount):
        return TaskOutcome.INSUFFICIENT_FUNDS

    spend(state, tdef.cost_type, tdef.cost_amount)
    task.is_completed = True
    task.completed_at = _now_iso()
    logger.info("Task %s (%s) completed for %d %s",
                task.id, tdef.task_name, tdef.cost_amount, tdef.cost_type.value)

    if tdef.unlocks_item_id:
        state.current_task_to_complete = task
        return TaskOutcome.NEEDS_SKIN_SELECTION
    return TaskOutcome.COMPLETED


def finalize_customization(state: GameState, item_id: str, skin_id: str) -> bool:
    """Install the pending task's item with the chosen skin.

    Re-installing an item that already has a record swaps its skin instead
    of adding a second record. Installing grants stars, which may lift the
    fog from a wing.
    """
    pending = state.current_task_to_complete
    if pending is None or state.user is None:
        logger.error("finalize_customization(%s): no task awaiting a skin", item_id)
        return False
    if pending.task.unlocks_item_id != item_id:
        logger.error("finalize_customization: pending item is %s, got %s",
                     pending.task.unlocks_item_id, item_id)
        return False
    if skin_id not in {s.id for s in skins_for_item(item_id)}:
        logger.warning("Skin %s is not offered for %s", skin_id, item_id)
        return False

    record = state.find_customization(item_id)
    if record is None:
        state.customization.append(CustomizationRecord(
            user_id=state.user.id,
            item_id=item_id,
            item_wing=pending.task.wing_id,
            is_unlocked=True,
            skin_equipped=skin_id,
        ))
    else:
        record.is_unlocked = True
        record.skin_equipped = skin_id

    state.current_task_to_complete = None
    logger.info("Item %s installed with skin %s", item_id, skin_id)
    update_star_count(state, STARS_FOR_ITEM_UNLOCK)
    return True


def task_message(outcome: TaskOutcome, task: Task | None = None) -> str:
    """User-facing message for an attempt outcome."""
    if outcome == TaskOutcome.NOT_FOUND or task is None:
        return "That task no longer exists."
    tdef = task.task
    if outcome == TaskOutcome.INSUFFICIENT_FUNDS:
        return (f"You need {tdef.cost_amount} {tdef.cost_type.label} "
                f"to complete this task.")
    if outcome == TaskOutcome.ALREADY_COMPLETED:
        return f'Task "{tdef.task_name}" is already done.'
    if outcome == TaskOutcome.ITEM_UNAVAILABLE:
        return f'The item unlocked by "{tdef.task_name}" is not available yet.'
    if outcome == TaskOutcome.AWAITING_CUSTOMIZATION:
        return "Choose a skin for your new item first."
    if outcome == TaskOutcome.NEEDS_SKIN_SELECTION:
        item = ALL_ITEMS.get(tdef.unlocks_item_id or "")
        name = item.name if item else tdef.unlocks_item_id
        return f'Task "{tdef.task_name}" completed! Choose a skin for {name}.'
    return f'Task "{tdef.task_name}" completed!'
