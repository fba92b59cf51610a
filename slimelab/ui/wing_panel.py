"""Wing panel — which wings are still fogged and what is installed in each."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from slimelab.data.lab_items import ALL_ITEMS, ALL_SKINS
from slimelab.engine.game_state import GameState
from slimelab.engine.unlocks import wing_view


class WingPanel(Widget):
    """Projection of the wing unlock state."""

    DEFAULT_CSS = """
    WingPanel {
        width: 100%;
        height: auto;
        min-height: 6;
        padding: 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state: GameState | None = None

    def render(self) -> Text:
        text = Text()
        if self._state is None:
            return text

        text.append("  ─── Lab Wings ───\n", style="bold yellow")
        for wing in wing_view(self._state):
            if not wing["unlocked"]:
                text.append(f"  ▒ {wing['wing_name']}", style="dim")
                text.append(f"  ({wing['unlock_stars']} stars)\n", style="dim italic")
                continue

            text.append(f"  ✦ {wing['wing_name']}\n", style="bold cyan")
            for inst in wing["installed"]:
                item = ALL_ITEMS.get(inst["item_id"])
                skin = ALL_SKINS.get(inst["skin_equipped"] or "")
                name = item.name if item else inst["item_id"]
                if skin is not None:
                    text.append(f"      {name} ", style="white")
                    text.append(f"[{skin.name}]\n", style=skin.color)
                else:
                    text.append(f"      {name}\n", style="white")
        return text

    def update_from_state(self, state: GameState) -> None:
        self._state = state
        self.refresh()
