"""Starter content — the mock session every new player begins with."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CostType(str, Enum):
    """Which profile balance a task is paid from."""

    GOMA_COINS = "goma_coins"
    DIAMONDS = "diamonds"
    ENERGY = "energy"

    @property
    def label(self) -> str:
        return {
            CostType.GOMA_COINS: "Goma Coins",
            CostType.DIAMONDS: "Diamonds",
            CostType.ENERGY: "Energy",
        }[self]


@dataclass(frozen=True)
class TaskDef:
    """Definition of a lab task (what it costs, what it unlocks)."""

    task_name: str
    task_description: str
    wing_id: str
    cost_type: CostType
    cost_amount: int
    unlocks_item_id: str | None = None


# (task id, definition)
STARTER_TASKS: tuple[tuple[str, TaskDef], ...] = (
    (
        "mock-task-1",
        TaskDef(
            task_name="Limpar Frasco",
            task_description="Gaste 10 de energia para limpar o frasco.",
            wing_id="fusion_bay",
            cost_type=CostType.GOMA_COINS,
            cost_amount=100,
        ),
    ),
    (
        "mock-task-2",
        TaskDef(
            task_name="Fundir Slimes",
            task_description="Fundir 2 Slimes Roxo Nível 1.",
            wing_id="fusion_bay",
            cost_type=CostType.GOMA_COINS,
            cost_amount=200,
            unlocks_item_id="acelerador_quantico",
        ),
    ),
    (
        "mock-task-3",
        TaskDef(
            task_name="Coletar Goma",
            task_description="Coletar 500 Goma Coins.",
            wing_id="astro_garden",
            cost_type=CostType.GOMA_COINS,
            cost_amount=500,
            unlocks_item_id="estufa_astro",
        ),
    ),
)

# (slime id, color): one level-1 slime of each base color
STARTER_SLIMES: tuple[tuple[str, str], ...] = (
    ("mock-slime-1", "Roxo"),
    ("mock-slime-2", "Azul"),
    ("mock-slime-3", "Verde"),
    ("mock-slime-4", "Amarelo"),
)

# (item id, wing id, skin): installed before the first task
STARTER_CUSTOMIZATION: tuple[tuple[str, str, str], ...] = (
    ("mesa_principal", "fusion_bay", "tech_neon"),
)
