"""Task panel — lists lab tasks with their cost and affordability."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from slimelab.data.lab_items import ALL_ITEMS, LAB_ITEMS_DATA
from slimelab.engine.economy import can_afford, format_number
from slimelab.engine.game_state import GameState


class TaskPanel(Widget):
    """Displays the task list; number keys complete the matching task."""

    DEFAULT_CSS = """
    TaskPanel {
        width: 100%;
        height: 100%;
        padding: 1;
        overflow-y: auto;
    }
    """

    # Serialized task data for reactivity
    tasks_text: reactive[str] = reactive("")

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state: GameState | None = None

    def render(self) -> Text:
        text = Text()
        text.append("  ═══ Tasks ═══\n\n", style="bold magenta")

        if self._state is None or not self._state.tasks:
            text.append("  No tasks right now.\n", style="dim italic")
            return text

        for i, task in enumerate(self._state.tasks):
            tdef = task.task
            text.append(f"  [{i + 1}] ", style="bold")

            if task.is_completed:
                text.append(f"{tdef.task_name} ", style="dim strike")
                text.append("DONE\n", style="bold green")
                text.append("\n")
                continue

            affordable = can_afford(self._state, tdef.cost_type, tdef.cost_amount)
            text.append(f"{tdef.task_name}\n", style="bold green" if affordable else "bold red")
            text.append(f"      {tdef.task_description}\n", style="dim italic")

            wing = LAB_ITEMS_DATA.get(tdef.wing_id)
            if wing is not None:
                text.append(f"      Wing: {wing.wing_name}\n", style="dim")
            if tdef.unlocks_item_id:
                item = ALL_ITEMS.get(tdef.unlocks_item_id)
                name = item.name if item else tdef.unlocks_item_id
                text.append(f"      Unlocks: {name}\n", style="cyan")

            cost_style = "green" if affordable else "red"
            text.append(
                f"      Cost: {format_number(tdef.cost_amount)} {tdef.cost_type.label}\n",
                style=cost_style,
            )
            text.append("\n")

        return text

    def update_from_state(self, state: GameState) -> None:
        """Sync panel with game state."""
        self._state = state
        p = state.profile
        coins = p.goma_coins if p else 0
        self.tasks_text = "|".join(
            f"{t.id}:{int(t.is_completed)}" for t in state.tasks
        ) + f"|c:{coins}"
