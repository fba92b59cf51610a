"""Skin selection screen — pick the skin a newly unlocked item is installed with.

Dismisses with the chosen skin id, or None when the player backs out (the
item stays pending and the screen can be reopened).
"""

from __future__ import annotations

from rich.text import Text
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from slimelab.data.lab_items import ALL_ITEMS, skins_for_item


class SkinSelectionScreen(Screen[str | None]):
    """Full-screen modal listing the skins offered for one item."""

    BINDINGS = [
        Binding("escape", "cancel", "Later"),
        *[Binding(str(n), f"pick({n - 1})", f"Skin {n}", show=False) for n in range(1, 10)],
    ]

    DEFAULT_CSS = """
    SkinSelectionScreen {
        background: $surface;
        align: center top;
        padding: 2 4;
    }

    #skin-header {
        width: 100%;
        text-align: center;
        padding-bottom: 1;
    }

    #skin-list {
        width: 100%;
        height: auto;
        padding: 0 2;
    }
    """

    def __init__(self, item_id: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._item_id = item_id
        self._skins = skins_for_item(item_id)

    def compose(self):
        yield Static(self._render_header(), id="skin-header")
        with Vertical(id="skin-list"):
            yield Static(self._render_skins())
        yield Footer()

    # ── Actions ──────────────────────────────────────────────────

    def action_cancel(self) -> None:
        self.dismiss(None)

    def action_pick(self, index: int) -> None:
        if 0 <= index < len(self._skins):
            self.dismiss(self._skins[index].id)

    # ── Rendering ────────────────────────────────────────────────

    def _render_header(self) -> Text:
        item = ALL_ITEMS.get(self._item_id)
        name = item.name if item else self._item_id
        h = Text()
        h.append("✦ NEW ITEM ✦\n", style="bold bright_yellow")
        h.append(f"{name}\n", style="bold white")
        h.append("Choose how it should look in the lab.\n", style="dim italic")
        return h

    def _render_skins(self) -> Text:
        body = Text()
        for i, skin in enumerate(self._skins):
            body.append(f"  [{i + 1}] ", style="bold cyan")
            body.append(f"{skin.name} ", style=f"bold {skin.color}")
            body.append(f"({skin.description})\n", style="dim italic")
        body.append("\n  [Esc] Decide later\n", style="dim")
        return body
