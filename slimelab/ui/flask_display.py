"""Flask display widget — ASCII flask with the dropped slimes inside."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from slimelab.data.balance import BALANCE
from slimelab.engine.game_state import GameState

SLIME_STYLES = {
    "Roxo": "bold magenta",
    "Azul": "bold blue",
    "Verde": "bold green",
    "Amarelo": "bold yellow",
}

# Interior width of the ASCII flask, in characters
_INNER = 24
_ROWS = 6


class FlaskDisplay(Widget):
    """Slimes settle in rows at the bottom of the flask, by drop position."""

    DEFAULT_CSS = """
    FlaskDisplay {
        width: 100%;
        height: 1fr;
        content-align: center middle;
    }
    """

    # Serialized (column, color) pairs for reactivity
    contents: reactive[str] = reactive("")

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._cells: list[tuple[int, str]] = []

    def render(self) -> Text:
        grid: list[list[str | None]] = [[None] * _INNER for _ in range(_ROWS)]
        # Stack from the bottom row up; overflow hides at the top
        heights = [0] * _INNER
        for col, color in self._cells:
            row = _ROWS - 1 - heights[col]
            if row < 0:
                continue
            grid[row][col] = color
            heights[col] += 1

        text = Text()
        neck = (_INNER - 6) // 2
        text.append("   " + " " * neck + "┌──────┐\n", style="cyan")
        text.append("   ╭" + "─" * neck + "┘      └" + "─" * (_INNER - neck - 8) + "╮\n", style="cyan")
        for row in grid:
            text.append("   │", style="cyan")
            for cell in row:
                if cell is None:
                    text.append(" ")
                else:
                    text.append("●", style=SLIME_STYLES.get(cell, "white"))
            text.append("│\n", style="cyan")
        text.append("   ╰" + "─" * _INNER + "╯\n", style="cyan")
        return text

    def update_from_state(self, state: GameState) -> None:
        """Map flask x-positions onto display columns."""
        width = BALANCE.flask.flask_width
        cells = []
        for slime in state.current_slimes:
            x = slime.position.get("x", 0.0)
            col = int(max(0.0, min(x, width - 1)) / width * _INNER)
            cells.append((col, slime.color))
        self._cells = cells
        self.contents = "|".join(f"{c}:{color}" for c, color in cells)
