"""HUD widget — energy, currencies, stars, spawner charge."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from slimelab.data.balance import BALANCE
from slimelab.engine.economy import format_number
from slimelab.engine.game_state import GameState
from slimelab.engine.unlocks import next_locked_wing


class HUD(Widget):
    """Heads-up display showing the player's counters."""

    DEFAULT_CSS = """
    HUD {
        width: 100%;
        height: 100%;
        padding: 1;
    }
    """

    username: reactive[str] = reactive("")
    energy: reactive[int] = reactive(0)
    goma_coins: reactive[str] = reactive("0")
    diamonds: reactive[str] = reactive("0")
    stars: reactive[int] = reactive(0)
    spawner_charge: reactive[int] = reactive(0)
    flask_count: reactive[int] = reactive(0)
    goal_text: reactive[str] = reactive("")
    goal_pct: reactive[float] = reactive(0.0)

    def render(self) -> Text:
        text = Text()
        text.append(f"  === {self.username or 'Lab'} ===\n\n", style="bold cyan")

        max_energy = BALANCE.profile.max_energy
        text.append("  Energy: ", style="dim")
        energy_style = "bold green" if self.energy >= max_energy else "bold yellow"
        text.append(f"{self.energy}/{max_energy}\n", style=energy_style)

        text.append("  Goma Coins: ", style="dim")
        text.append(f"{self.goma_coins}\n", style="bold green")
        text.append("  Diamonds: ", style="dim")
        text.append(f"{self.diamonds}\n", style="bold cyan")
        text.append("  Stars: ", style="dim")
        text.append(f"{self.stars}\n", style="bold yellow")

        text.append("\n")
        text.append("  Spawner: ", style="dim")
        text.append(f"{self.spawner_charge}\n", style="bold magenta" if self.spawner_charge else "dim red")
        text.append("  In flask: ", style="dim")
        text.append(f"{self.flask_count}\n", style="magenta")

        text.append("\n")
        if self.goal_text:
            text.append("  Next: ", style="dim")
            text.append(f"{self.goal_text}\n", style="bold white")
            bar_width = 16
            filled = int(self.goal_pct * bar_width)
            bar = "#" * filled + "." * (bar_width - filled)
            text.append(f"  [{bar}] {self.goal_pct * 100:.0f}%\n", style="yellow")
            text.append("\n")

        text.append("  [Space] Drop slime  [1-9] Task\n", style="dim italic")
        text.append("  [S] Save flask  [L] Load flask\n", style="dim italic")
        text.append("  [Q] Quit\n", style="dim italic")
        return text

    def update_from_state(self, state: GameState) -> None:
        """Sync HUD with game state."""
        p = state.profile
        if p is None:
            return
        self.username = p.username
        self.energy = p.current_energy
        self.goma_coins = format_number(p.goma_coins)
        self.diamonds = format_number(p.diamond_count)
        self.stars = p.star_count
        self.spawner_charge = state.spawner_charge
        self.flask_count = len(state.current_slimes)

        wing = next_locked_wing(state)
        if wing is None:
            self.goal_text = "Every wing is open"
            self.goal_pct = 1.0
        else:
            self.goal_text = f"{wing.wing_name} at {wing.unlock_stars} stars"
            self.goal_pct = min(p.star_count / wing.unlock_stars, 1.0)
